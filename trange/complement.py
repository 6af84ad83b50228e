import logging
from collections.abc import Iterable

from trange.algebra import truncate
from trange.merge import merge_overlapping
from trange.range import Range, to_utc

LOGGER = logging.getLogger("trange.complement")


def flip(period: Range, sub_ranges: Iterable[Range]) -> list[Range]:
    """Return the gaps in `period` that no sub-range covers.

    Sub-ranges may arrive unsorted, overlapping or partly outside the period:
    they are merged and clipped to the period first. A sub-range boundary that
    coincides with the period boundary leaves no zero-width gap behind.

    Example:
        >>> free = flip(working_day, meetings)
    """
    covered = [
        clipped
        for clipped in (truncate(rng, period) for rng in merge_overlapping(sub_ranges))
        if not clipped.is_empty()
    ]
    if not covered:
        return [period]

    gaps: list[Range] = []
    if to_utc(period.start) != to_utc(covered[0].start):
        gaps.append(Range.between(period.start, covered[0].start))

    for previous, current in zip(covered, covered[1:]):
        gaps.append(Range.between(previous.end, current.start))

    if to_utc(period.end) != to_utc(covered[-1].end):
        gaps.append(Range.between(covered[-1].end, period.end))

    LOGGER.debug(
        "Flipped %d covered ranges into %d gaps",
        len(covered),
        len(gaps),
        extra={"event": "flip"},
    )
    return gaps
