import logging

from .algebra import intersection, truncate
from .codec import dumps, from_dict, loads, to_dict
from .complement import flip
from .days import split_per_day
from .errors import InvalidWindowError, InvertedBoundsError, RangeError
from .merge import merge_overlapping, sort_ranges
from .partition import split, stratify
from .range import EMPTY, ZERO_INSTANT, Range, ranges_in, ranges_to_utc
from .util import DAY, HOUR, MINUTE, SECOND, WEEK

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Range",
    "EMPTY",
    "ZERO_INSTANT",
    "ranges_in",
    "ranges_to_utc",
    "merge_overlapping",
    "sort_ranges",
    "truncate",
    "intersection",
    "stratify",
    "split",
    "flip",
    "split_per_day",
    "to_dict",
    "from_dict",
    "dumps",
    "loads",
    "RangeError",
    "InvertedBoundsError",
    "InvalidWindowError",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
