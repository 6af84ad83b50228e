from collections.abc import Iterable
from functools import reduce

from trange.range import EMPTY, Range, to_utc


def truncate(rng: Range, bounds: Range) -> Range:
    """Clip `rng` to the part of it that lies within `bounds`.

    Returns `EMPTY` when the two share no instant (touching counts as
    disjoint) or when either side is `EMPTY`.
    """
    if rng.is_empty() or bounds.is_empty():
        return EMPTY
    if rng.contains(bounds):
        # -XXXXXXX-
        # ---YYY---
        return bounds
    if bounds.contains(rng):
        # ---XXX---
        # -YYYYYYY-
        return rng
    start, end = to_utc(rng.start), to_utc(rng.end)
    lower, upper = to_utc(bounds.start), to_utc(bounds.end)
    if end <= lower or start >= upper:
        # -XXX-----   or   -----XXX-
        # -----YYY-        -YYY-----
        return EMPTY
    if start < lower and end < upper:
        # ---XXX---
        # ----YYY--
        return Range.between(bounds.start, rng.end)
    if start > lower and end > upper:
        # ---XXX---
        # --YYY----
        return Range.between(rng.start, bounds.end)
    raise AssertionError(f"truncate: unmatched case for {rng} within {bounds}")


def intersection(ranges: Iterable[Range] | None) -> Range:
    """Return the span common to all ranges, or `EMPTY` if there is none.

    Equivalent to folding `truncate` over the ranges from left to right.
    """
    iterator = iter(ranges or ())
    first = next(iterator, None)
    if first is None:
        return EMPTY
    return reduce(truncate, iterator, first)
