from __future__ import annotations

import random
from datetime import date, datetime, timedelta, timezone

import pytest

from commitfill.dates import format_timestamp, generate_daily_timestamps
from commitfill.errors import InvalidArgumentType, InvalidCommitCount, InvalidDateFormat


@pytest.mark.parametrize("n", [1, 2, 5, 24, 300])
def test_count_distinct_sorted_same_day(n: int):
    stamps = generate_daily_timestamps("2025-07-10", n)
    assert len(stamps) == n
    assert all(ts.date() == date(2025, 7, 10) for ts in stamps)
    assert len({(ts.hour, ts.minute, ts.second) for ts in stamps}) == n
    assert stamps == sorted(stamps)
    assert all(ts.microsecond == 0 for ts in stamps)


def test_accepts_date_and_datetime():
    assert generate_daily_timestamps(date(2024, 2, 29), 3)[0].date() == date(2024, 2, 29)
    stamps = generate_daily_timestamps(datetime(2025, 7, 10, 18, 45, 12, 999), 3)
    assert all(ts.date() == date(2025, 7, 10) for ts in stamps)


def test_offset_preserved():
    tz = timezone(timedelta(hours=5, minutes=30))
    stamps = generate_daily_timestamps(datetime(2025, 7, 10, tzinfo=tz), 4)
    assert all(ts.tzinfo is tz for ts in stamps)
    assert all(format_timestamp(ts).endswith("+05:30") for ts in stamps)


def test_seeded_rng_is_reproducible():
    a = generate_daily_timestamps("2025-07-10", 10, rng=random.Random(42))
    b = generate_daily_timestamps("2025-07-10", 10, rng=random.Random(42))
    assert a == b


class CollidingRandom(random.Random):
    """Repeats the first draw triple several times before moving on."""

    def __init__(self) -> None:
        super().__init__(0)
        self._script = [3, 4, 5] * 4 + [6, 7, 8]

    def randrange(self, *args, **kwargs):  # type: ignore[override]
        if self._script:
            return self._script.pop(0)
        return super().randrange(*args, **kwargs)


def test_collisions_are_skipped_not_emitted():
    stamps = generate_daily_timestamps("2025-07-10", 2, rng=CollidingRandom())
    assert [(ts.hour, ts.minute, ts.second) for ts in stamps] == [(3, 4, 5), (6, 7, 8)]


@pytest.mark.parametrize("bad", [0, -1, 3.5, "6", None, True, 86_401])
def test_invalid_count(bad):
    with pytest.raises(InvalidCommitCount):
        generate_daily_timestamps("2025-07-10", bad)


@pytest.mark.parametrize("bad", [20250710, None, ["2025-07-10"], 1.5])
def test_invalid_base_type(bad):
    with pytest.raises(InvalidArgumentType):
        generate_daily_timestamps(bad, 1)


@pytest.mark.parametrize("bad", ["2025/07/10", "07-10-2025", "2025-13-01", ""])
def test_invalid_base_string(bad: str):
    with pytest.raises(InvalidDateFormat):
        generate_daily_timestamps(bad, 1)


def test_format_timestamp_aware():
    ts = datetime(2025, 7, 10, 9, 5, 3, tzinfo=timezone.utc)
    assert format_timestamp(ts) == "2025-07-10T09:05:03+00:00"


def test_format_timestamp_naive_gets_local_offset():
    out = format_timestamp(datetime(2025, 7, 10, 12, 0, 0))
    assert out.startswith("2025-07-10T12:00:00")
    assert out[19] in "+-"


def test_gap_draws_resolve_forward_and_stay_unique(new_york_tz, scripted_rng):
    # 02:10 does not exist on this day; it reads as 03:10, which collides with the next draw.
    stamps = generate_daily_timestamps("2025-03-09", 2, rng=scripted_rng([2, 10, 0, 3, 10, 0, 4, 0, 0]))
    assert stamps == [datetime(2025, 3, 9, 3, 10), datetime(2025, 3, 9, 4, 0)]
    assert [format_timestamp(ts) for ts in stamps] == ["2025-03-09T03:10:00-04:00", "2025-03-09T04:00:00-04:00"]


def test_format_timestamp_gap_time_moves_forward(new_york_tz):
    assert format_timestamp(datetime(2025, 3, 9, 2, 10)) == "2025-03-09T03:10:00-04:00"
    assert format_timestamp(datetime(2025, 3, 9, 1, 59, 59)) == "2025-03-09T01:59:59-05:00"
