"""Utility constants for trange.

Time unit constants are `timedelta` values, so they combine directly with
`Range.duration` and the window arguments of stratify/split.
"""

from datetime import timedelta

SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)
