from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from typing import override

from trange.errors import InvertedBoundsError

_STR_LAYOUT = "%Y-%m-%d %H:%M:%S.%f %z %Z"


def to_utc(instant: datetime) -> datetime:
    """Express an aware datetime in UTC so that arithmetic is absolute."""
    return instant.astimezone(timezone.utc)


def as_zone(tz: str | tzinfo) -> tzinfo:
    """Resolve an IANA name to a zone; pass tzinfo objects through."""
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


@dataclass(frozen=True, kw_only=True, eq=False)
class Range:
    """A half-open span of time: ``[start, start + duration)``.

    The end is always derived, so a Range built by `between` can never have
    its end before its start. `of` takes the duration as given; operations
    that need a positive duration check it themselves.

    Comparisons between ranges are made on UTC instants, so a start inside
    the repeated hour of a DST change is told apart by its `fold`.
    """

    start: datetime
    duration: timedelta

    def __post_init__(self) -> None:
        if self.start.tzinfo is None:
            raise TypeError(
                f"Range start must be a timezone-aware datetime.\n"
                f"Got naive datetime: {self.start!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'US/Pacific', etc."
            )

    @classmethod
    def between(cls, start: datetime, end: datetime) -> "Range":
        if to_utc(start) > to_utc(end):
            raise InvertedBoundsError(start, end)
        return cls(start=start, duration=to_utc(end) - to_utc(start))

    @classmethod
    def of(cls, start: datetime, duration: timedelta) -> "Range":
        return cls(start=start, duration=duration)

    @property
    def end(self) -> datetime:
        # Same-zone datetime arithmetic is wall-clock; go through UTC to stay exact.
        return (to_utc(self.start) + self.duration).astimezone(self.start.tzinfo)

    def contains(self, other: "Range") -> bool:
        """True if `other` lies within this range; shared endpoints count."""
        return to_utc(self.start) <= to_utc(other.start) and to_utc(
            self.end
        ) >= to_utc(other.end)

    def is_empty(self) -> bool:
        return self.start == ZERO_INSTANT and self.duration == timedelta(0)

    def in_tz(self, tz: str | tzinfo) -> "Range":
        """Return the same span with its start expressed in another zone."""
        if self.is_empty():
            return self
        return Range(start=self.start.astimezone(as_zone(tz)), duration=self.duration)

    def utc(self) -> "Range":
        return self.in_tz(timezone.utc)

    def format(self, layout: str) -> str:
        return f"[{self.start.strftime(layout)}, {self.end.strftime(layout)}]"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return (
            to_utc(self.start) == to_utc(other.start)
            and self.duration == other.duration
        )

    @override
    def __hash__(self) -> int:
        return hash((to_utc(self.start), self.duration))

    def __str__(self) -> str:
        """Human-friendly string in UTC, with the duration."""
        rng = self.utc()
        return (
            f"Range({rng.start.strftime(_STR_LAYOUT)}"
            f"→{rng.end.strftime(_STR_LAYOUT)}, {self.duration})"
        )


ZERO_INSTANT = datetime.min.replace(tzinfo=timezone.utc)
EMPTY = Range(start=ZERO_INSTANT, duration=timedelta(0))


def ranges_in(ranges: Iterable[Range], tz: str | tzinfo) -> list[Range]:
    zone = as_zone(tz)
    return [rng.in_tz(zone) for rng in ranges]


def ranges_to_utc(ranges: Iterable[Range]) -> list[Range]:
    return ranges_in(ranges, timezone.utc)
