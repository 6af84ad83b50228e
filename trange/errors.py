"""Exception types raised by trange."""

from datetime import datetime, timedelta


class RangeError(ValueError):
    """Base class for invalid range arguments."""


class InvertedBoundsError(RangeError):
    """Raised when a range is built from an end that precedes its start."""

    def __init__(self, start: datetime, end: datetime):
        self.start: datetime = start
        self.end: datetime = end
        super().__init__(
            f"Range start ({start.isoformat()}) must be <= end ({end.isoformat()}).\n"
            f"Fix: swap the bounds or use Range.of(start, duration)"
        )


class InvalidWindowError(RangeError):
    """Raised by stratify/split when a window size or step is not positive."""

    def __init__(self, duration: timedelta, interval: timedelta, reason: str):
        self.duration: timedelta = duration
        self.interval: timedelta = interval
        super().__init__(
            f"{reason}, got duration={duration}, interval={interval}.\n"
            f"Example: stratify(rng, duration=30 * MINUTE, interval=5 * MINUTE)"
        )
