"""
Tests for the bucketizer module.
"""

import random
from datetime import date, datetime, timedelta, timezone

import pytest

from git_calendar.bucketizer import bucketize, day_index
from git_calendar.window_calculator import compute_window


@pytest.fixture
def window():
    """A 371-day window from 2025-10-12 to 2026-10-17."""
    return compute_window(datetime(2026, 10, 17, 15, 0))


def _noon(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, 12, 0)


class TestDayIndex:
    """Tests for day_index."""

    def test_first_day_is_index_zero(self, window):
        assert day_index(window, date(2025, 10, 12)) == 0

    def test_last_day_is_last_index(self, window):
        assert day_index(window, date(2026, 10, 17)) == 370

    def test_day_before_start_is_outside(self, window):
        assert day_index(window, date(2025, 10, 11)) is None

    def test_day_after_end_is_outside(self, window):
        assert day_index(window, date(2026, 10, 18)) is None


class TestBucketize:
    """Tests for bucketize."""

    def test_empty_input_returns_all_zero(self, window):
        buckets = bucketize(window, [])

        assert len(buckets) == window.length_days
        assert all(count == 0 for count in buckets)

    def test_single_commit_on_last_day(self, window):
        buckets = bucketize(window, [_noon(date(2026, 10, 17))])

        assert len(buckets) == 371
        assert buckets[-1] == 1
        assert sum(buckets) == 1

    def test_commit_on_first_day_is_counted(self, window):
        buckets = bucketize(window, [_noon(date(2025, 10, 12))])

        assert buckets[0] == 1

    def test_same_day_commits_accumulate(self, window):
        day = date(2026, 3, 1)
        timestamps = [
            datetime(2026, 3, 1, 0, 0, 0),
            datetime(2026, 3, 1, 9, 15),
            datetime(2026, 3, 1, 23, 59, 59),
        ]
        buckets = bucketize(window, timestamps)

        assert buckets[day_index(window, day)] == 3
        assert sum(buckets) == 3

    def test_epoch_seconds_use_local_time(self, window):
        moment = datetime(2026, 5, 4, 12, 0)
        buckets = bucketize(window, [int(moment.timestamp())])

        assert buckets[day_index(window, date(2026, 5, 4))] == 1

    def test_float_epoch_seconds(self, window):
        moment = datetime(2026, 5, 4, 12, 0)
        buckets = bucketize(window, [moment.timestamp() + 0.5])

        assert buckets[day_index(window, date(2026, 5, 4))] == 1

    def test_aware_datetime_is_converted(self, window):
        moment = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)
        buckets = bucketize(window, [moment])

        assert sum(buckets) == 1
        assert buckets[day_index(window, moment.astimezone().date())] == 1

    def test_out_of_window_timestamps_are_dropped(self, window):
        timestamps = [
            _noon(date(2025, 10, 11)),
            _noon(date(2024, 1, 1)),
            _noon(date(2026, 10, 18)),
            _noon(date(2030, 1, 1)),
        ]
        buckets = bucketize(window, timestamps)

        assert sum(buckets) == 0

    def test_unreadable_timestamps_are_dropped(self, window):
        timestamps = [
            "1700000000",
            None,
            float("nan"),
            float("inf"),
            True,
            10**20,
            _noon(date(2026, 1, 1)),
        ]
        buckets = bucketize(window, timestamps)

        assert sum(buckets) == 1

    def test_aware_datetime_that_overflows_is_dropped(self, window):
        """Converting these to local time leaves the supported date range."""
        timestamps = [
            datetime.max.replace(tzinfo=timezone(timedelta(hours=-14))),
            datetime.min.replace(tzinfo=timezone(timedelta(hours=14))),
            datetime.max.replace(tzinfo=timezone.utc),
            _noon(date(2026, 1, 1)),
        ]
        buckets = bucketize(window, timestamps)

        assert sum(buckets) == 1

    def test_accepts_generator(self, window):
        days = (_noon(date(2026, 1, 1) + timedelta(days=i)) for i in range(10))
        buckets = bucketize(window, days)

        assert sum(buckets) == 10

    def test_total_matches_in_window_count(self, window):
        """Sum of buckets equals the number of timestamps inside the window."""
        rng = random.Random(1234)
        base = datetime(2025, 6, 1)
        timestamps = [
            base + timedelta(minutes=rng.randrange(0, 60 * 24 * 600))
            for _ in range(2000)
        ]

        expected = sum(
            1
            for ts in timestamps
            if window.start_date <= ts.date() <= window.end_date
        )
        buckets = bucketize(window, timestamps)

        assert sum(buckets) == expected
        assert all(count >= 0 for count in buckets)

    def test_index_matches_day_offset(self, window):
        """Every day lands at its offset from the window start."""
        for offset in range(window.length_days):
            day = window.start_date + timedelta(days=offset)
            buckets = bucketize(window, [_noon(day)])
            assert buckets[offset] == 1
