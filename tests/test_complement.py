"""Tests for flip, the complement of sub-ranges within a period."""

import random
from datetime import datetime, timedelta, timezone

from trange import Range, flip, merge_overlapping, truncate
from trange.util import MINUTE

DAY_ZERO = datetime(2021, 6, 12, tzinfo=timezone.utc)


def tm(h: int, m: int) -> datetime:
    return DAY_ZERO.replace(hour=h, minute=m)


def tmd(d: int, h: int, m: int) -> datetime:
    return DAY_ZERO.replace(day=d, hour=h, minute=m)


def rng(start: tuple[int, int], end: tuple[int, int]) -> Range:
    return Range.between(tm(*start), tm(*end))


def total(ranges: list[Range]) -> timedelta:
    return sum((r.duration for r in ranges), timedelta(0))


def test_flip_within_a_day():
    period = rng((0, 0), (23, 59))
    subs = [
        rng((13, 0), (14, 0)),
        rng((14, 1), (15, 0)),
        rng((16, 0), (20, 0)),
    ]

    assert flip(period, subs) == [
        rng((0, 0), (13, 0)),
        rng((14, 0), (14, 1)),
        rng((15, 0), (16, 0)),
        rng((20, 0), (23, 59)),
    ]


def test_flip_no_gap_at_period_edges():
    period = rng((0, 0), (23, 59))
    subs = [
        rng((0, 0), (14, 0)),
        rng((14, 1), (15, 0)),
        rng((16, 0), (20, 0)),
        rng((20, 1), (23, 59)),
    ]

    assert flip(period, subs) == [
        rng((14, 0), (14, 1)),
        rng((15, 0), (16, 0)),
        rng((20, 0), (20, 1)),
    ]


def test_flip_within_several_days():
    period = Range.between(tmd(12, 13, 0), tmd(14, 16, 59))
    subs = [
        Range.between(tmd(12, 13, 0), tmd(12, 14, 0)),
        Range.between(tmd(12, 14, 1), tmd(12, 15, 0)),
        Range.between(tmd(12, 16, 0), tmd(12, 20, 0)),
        Range.between(tmd(12, 23, 0), tmd(13, 6, 59)),
        Range.between(tmd(13, 8, 0), tmd(13, 23, 0)),
        Range.between(tmd(14, 1, 59), tmd(14, 14, 59)),
    ]

    assert flip(period, subs) == [
        Range.between(tmd(12, 14, 0), tmd(12, 14, 1)),
        Range.between(tmd(12, 15, 0), tmd(12, 16, 0)),
        Range.between(tmd(12, 20, 0), tmd(12, 23, 0)),
        Range.between(tmd(13, 6, 59), tmd(13, 8, 0)),
        Range.between(tmd(13, 23, 0), tmd(14, 1, 59)),
        Range.between(tmd(14, 14, 59), tmd(14, 16, 59)),
    ]


def test_flip_empty_sub_ranges_returns_period():
    period = Range.between(tmd(12, 13, 0), tmd(14, 16, 59))
    assert flip(period, []) == [period]


def test_flip_relative_offsets():
    now = tm(10, 17)
    period = Range.of(now, 60 * MINUTE)
    subs = [
        Range.of(now + 25 * MINUTE, 15 * MINUTE),
        Range.of(now + 50 * MINUTE, 5 * MINUTE),
    ]

    assert flip(period, subs) == [
        Range.of(now, 25 * MINUTE),
        Range.of(now + 40 * MINUTE, 10 * MINUTE),
        Range.of(now + 55 * MINUTE, 5 * MINUTE),
    ]


def test_flip_normalizes_unsorted_overlapping_input():
    period = rng((9, 0), (17, 0))
    subs = [
        rng((15, 0), (16, 0)),
        rng((10, 0), (11, 0)),
        rng((10, 30), (12, 0)),
        rng((12, 0), (12, 30)),
        rng((15, 0), (16, 0)),
    ]

    assert flip(period, subs) == [
        rng((9, 0), (10, 0)),
        rng((12, 30), (15, 0)),
        rng((16, 0), (17, 0)),
    ]


def test_flip_clips_sub_ranges_outside_period():
    period = rng((9, 0), (17, 0))
    subs = [
        rng((8, 0), (10, 0)),
        rng((16, 0), (18, 0)),
        rng((6, 0), (7, 0)),
        rng((17, 0), (19, 0)),
    ]

    assert flip(period, subs) == [rng((10, 0), (16, 0))]


def test_flip_fully_covered_period_has_no_gaps():
    period = rng((9, 0), (17, 0))
    assert flip(period, [rng((8, 0), (18, 0))]) == []
    assert flip(period, [period]) == []


def test_flip_only_outside_sub_ranges_returns_period():
    period = rng((9, 0), (17, 0))
    assert flip(period, [rng((6, 0), (7, 0)), rng((17, 0), (18, 0))]) == [period]


def test_flip_composes_with_merge():
    period = rng((8, 0), (14, 0))
    for seed in range(25):
        rand = random.Random(seed)
        subs = [
            Range.of(
                tm(7, 0) + rand.randrange(0, 420) * MINUTE,
                rand.randrange(0, 60) * MINUTE,
            )
            for _ in range(10)
        ]
        assert flip(period, subs) == flip(period, merge_overlapping(subs))


def test_flip_conserves_coverage():
    period = rng((8, 0), (14, 0))
    for seed in range(25):
        rand = random.Random(seed)
        subs = [
            Range.of(
                tm(7, 0) + rand.randrange(0, 420) * MINUTE,
                rand.randrange(0, 60) * MINUTE,
            )
            for _ in range(10)
        ]
        covered = [truncate(r, period) for r in merge_overlapping(subs)]
        covered = [r for r in covered if not r.is_empty()]

        assert total(flip(period, subs)) + total(covered) == period.duration
