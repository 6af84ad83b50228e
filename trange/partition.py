"""Fixed-size window generators over a single range."""

from datetime import timedelta

from trange.errors import InvalidWindowError
from trange.range import Range, to_utc

_NO_OFFSET = timedelta(0)


def stratify(
    rng: Range,
    duration: timedelta,
    interval: timedelta,
    *,
    offset: timedelta = _NO_OFFSET,
) -> list[Range]:
    """Cut `rng` into windows of `duration` whose starts are `interval` apart.

    Windows overlap when `interval < duration`. The first window starts at
    ``rng.start + offset``; a window that would run past `rng.end` is dropped,
    never shortened.

    Args:
        rng: Range to cut
        duration: Length of every window (must be positive)
        interval: Distance between consecutive window starts (must be positive)
        offset: Shift of the first window from `rng.start`

    Raises:
        InvalidWindowError: If `duration` or `interval` is not positive

    Example:
        >>> # 30-minute slots offered every 5 minutes
        >>> slots = stratify(opening_hours, 30 * MINUTE, 5 * MINUTE)
    """
    if duration <= timedelta(0) or interval <= timedelta(0):
        raise InvalidWindowError(
            duration, interval, "stratify requires positive duration and interval"
        )

    zone = rng.start.tzinfo
    windows: list[Range] = []
    cursor = to_utc(rng.start) + offset
    end = to_utc(rng.end)
    while cursor + duration <= end:
        windows.append(Range.of(cursor.astimezone(zone), duration))
        cursor += interval
    return windows


def split(
    rng: Range,
    duration: timedelta,
    interval: timedelta,
    *,
    offset: timedelta = _NO_OFFSET,
) -> list[Range]:
    """Cut `rng` into back-to-back windows with a gap of `interval` between them.

    Same as ``stratify(rng, duration, duration + interval)``. A zero gap tiles
    the range exactly.

    Raises:
        InvalidWindowError: If `duration` is not positive or `interval` is negative
    """
    if duration <= timedelta(0):
        raise InvalidWindowError(duration, interval, "split requires positive duration")
    if interval < timedelta(0):
        raise InvalidWindowError(
            duration, interval, "split requires a non-negative gap between windows"
        )
    return stratify(rng, duration, duration + interval, offset=offset)
