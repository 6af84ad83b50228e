"""Normalization of range lists by a boundary sweep.

Each range is expanded into a start and an end boundary. The boundaries are
sorted and swept left to right while counting how many ranges are open; a
merged run begins when the count leaves zero and ends when it returns there.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import IntEnum

from trange.range import Range, to_utc

LOGGER = logging.getLogger("trange.merge")


class BoundaryKind(IntEnum):
    # Ends sort ahead of starts at the same instant; see `_continues`.
    END = 0
    START = 1


@dataclass(frozen=True, slots=True)
class Boundary:
    instant: datetime
    kind: BoundaryKind


def _boundaries(ranges: Iterable[Range]) -> list[Boundary]:
    boundaries: list[Boundary] = []
    for rng in ranges:
        # Zero or negative length covers no instants.
        if rng.duration <= timedelta(0):
            continue
        boundaries.append(Boundary(rng.start, BoundaryKind.START))
        boundaries.append(Boundary(rng.end, BoundaryKind.END))
    boundaries.sort(key=lambda b: (to_utc(b.instant), b.kind))
    return boundaries


def _continues(boundary: Boundary, following: Boundary) -> bool:
    """True if a range ends exactly where another one starts.

    The sweep consumes such a pair together so that touching ranges are fused
    into one run instead of being closed and reopened at the same instant.
    """
    return (
        boundary.kind is BoundaryKind.END
        and following.kind is BoundaryKind.START
        and to_utc(boundary.instant) == to_utc(following.instant)
    )


def merge_overlapping(ranges: Iterable[Range]) -> list[Range]:
    """Collapse ranges into the minimal sorted list of disjoint ranges.

    Overlapping, nested, duplicate and touching ranges are fused; the union of
    covered instants is unchanged. The input is not modified.

    Example:
        >>> busy = meetings + focus_blocks  # may overlap or touch
        >>> free_check = merge_overlapping(busy)  # sorted, pairwise disjoint
    """
    boundaries = _boundaries(ranges)
    merged: list[Range] = []
    run_start: datetime | None = None
    open_count = 0

    i = 0
    while i < len(boundaries):
        boundary = boundaries[i]
        if boundary.kind is BoundaryKind.START:
            if open_count == 0:
                run_start = boundary.instant
            open_count += 1
        elif i + 1 < len(boundaries) and _continues(boundary, boundaries[i + 1]):
            # Skip the paired start as well; the run stays open.
            i += 1
        else:
            open_count -= 1
            if open_count == 0:
                assert run_start is not None
                merged.append(Range.between(run_start, boundary.instant))
        i += 1

    LOGGER.debug(
        "Merged %d boundaries into %d ranges",
        len(boundaries),
        len(merged),
        extra={"event": "merge_overlapping"},
    )
    return merged


def sort_ranges(ranges: Iterable[Range]) -> list[Range]:
    """Return a new list of ranges ordered by start, then end."""
    return sorted(ranges, key=lambda rng: (to_utc(rng.start), to_utc(rng.end)))
