"""
Unit tests for logging streaks.
"""
import pytest

from healthtwin.entries import HealthEntry
from healthtwin.streaks import compute_streak, get_logging_streak

from conftest import InMemoryEntries


def june(*days):
    return [f"2024-06-{d:02d}" for d in days]


class TestComputeStreak:
    """Current and longest runs of consecutive days."""

    def test_no_logs(self):
        streak = compute_streak([], "2024-06-10")
        assert streak.to_dict() == {"current_streak": 0, "longest_streak": 0, "last_log_date": None}

    def test_run_ending_today(self):
        streak = compute_streak(june(1, 2, 3), "2024-06-03")
        assert streak.current_streak == 3
        assert streak.longest_streak == 3
        assert streak.last_log_date == "2024-06-03"

    def test_run_ending_yesterday_is_still_active(self):
        assert compute_streak(june(1, 2, 3), "2024-06-04").current_streak == 3

    def test_missed_day_resets_current(self):
        streak = compute_streak(june(1, 2, 3), "2024-06-05")
        assert streak.current_streak == 0
        assert streak.longest_streak == 3

    def test_current_is_the_most_recent_run(self):
        """An older, longer run does not count as the current one."""
        streak = compute_streak(june(1, 2, 3, 4, 8, 9), "2024-06-09")
        assert streak.current_streak == 2
        assert streak.longest_streak == 4

    def test_unsorted_duplicates(self):
        streak = compute_streak(["2024-06-02", "2024-06-01", "2024-06-02"], "2024-06-02")
        assert streak.current_streak == 2
        assert streak.longest_streak == 2

    def test_days_after_today_are_ignored(self):
        streak = compute_streak(june(1, 2, 20), "2024-06-02")
        assert streak.current_streak == 2
        assert streak.last_log_date == "2024-06-02"

    def test_single_day(self):
        streak = compute_streak(june(5), "2024-06-05")
        assert (streak.current_streak, streak.longest_streak) == (1, 1)

    def test_bad_day_key_raises(self):
        with pytest.raises(ValueError):
            compute_streak(["06/01/2024"], "2024-06-02")


class TestGetLoggingStreak:
    """Streaks through a health entry provider."""

    def test_lookback_limits_history(self):
        provider = InMemoryEntries(
            health={"u1": [HealthEntry(d, steps=5000) for d in june(*range(1, 11))]}
        )
        streak = get_logging_streak("u1", "2024-06-10", provider, lookback_days=3)

        assert streak.current_streak == 3
        assert streak.longest_streak == 3

    def test_unknown_user(self):
        streak = get_logging_streak("nobody", "2024-06-10", InMemoryEntries())
        assert streak.current_streak == 0
        assert streak.last_log_date is None

    def test_invalid_lookback_raises(self):
        with pytest.raises(ValueError):
            get_logging_streak("u1", "2024-06-10", InMemoryEntries(), lookback_days=0)
