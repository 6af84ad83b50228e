"""Per-day partitioning of ranges.

Ranges that cross one or more local midnights are cut at each midnight and
the pieces are grouped by calendar date. Midnights come from a daily
RFC 5545 rule (python-dateutil), so the cuts follow the wall clock of the
chosen zone across DST changes.
"""

import logging
from collections.abc import Iterable
from datetime import date, datetime, time, timedelta, tzinfo

from dateutil.rrule import DAILY, rrule

from trange.range import Range, as_zone, to_utc

LOGGER = logging.getLogger("trange.days")


def _midnights(start: datetime, end: datetime) -> Iterable[datetime]:
    """Yield every local midnight in ``(start, end]`` in the zone of `start`."""
    first = datetime.combine(
        start.date() + timedelta(days=1), time.min, tzinfo=start.tzinfo
    )
    return rrule(DAILY, dtstart=first, until=end)


def split_per_day(
    ranges: Iterable[Range], tz: str | tzinfo | None = None
) -> dict[date, list[Range]]:
    """Group ranges by calendar date, cutting them at midnight.

    Args:
        ranges: Ranges to partition (typically already merged and sorted)
        tz: IANA timezone name or tzinfo defining "midnight". Defaults to the
            zone of each range's own start.

    Returns:
        Mapping of date to the pieces falling on that date, in input order.
        A piece that ends at midnight ends exactly at the next day's 00:00.

    Example:
        >>> per_day = split_per_day(merge_overlapping(busy), tz="Europe/Berlin")
        >>> per_day[date(2021, 6, 12)]
    """
    zone = as_zone(tz) if tz is not None else None
    days: dict[date, list[Range]] = {}

    for rng in ranges:
        # Zero-length ranges yield no pieces; this also skips EMPTY.
        if rng.duration <= timedelta(0):
            continue
        cursor = rng.start if zone is None else rng.start.astimezone(zone)
        end = rng.end.astimezone(cursor.tzinfo)

        for midnight in _midnights(cursor, end):
            days.setdefault(cursor.date(), []).append(Range.between(cursor, midnight))
            cursor = midnight

        if to_utc(end) > to_utc(cursor):
            days.setdefault(cursor.date(), []).append(Range.between(cursor, end))

    LOGGER.debug(
        "Split ranges across %d days",
        len(days),
        extra={"event": "split_per_day"},
    )
    return days
