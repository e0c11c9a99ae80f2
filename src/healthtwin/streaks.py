"""
Logging streaks.

A streak is a run of consecutive calendar days with a health entry. The
current streak only counts while its most recent day is today or
yesterday; a missed day resets it to 0.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Iterable, Optional

from .dates import parse_day_key, shift_days
from .entries import HealthEntryProvider

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_DAYS = 365


@dataclass(frozen=True)
class LoggingStreak:
    current_streak: int
    longest_streak: int
    last_log_date: Optional[str]

    def to_dict(self) -> dict:
        return asdict(self)


def compute_streak(dates: Iterable[str], today: str) -> LoggingStreak:
    """
    Current and longest runs of consecutive logged days.

    Args:
        dates: Day keys with an entry, in any order. Duplicates and days
            after ``today`` are ignored
        today: Day key the current streak is measured against

    Raises:
        ValueError: on a malformed day key
    """
    today_day = parse_day_key(today)
    days = sorted(day for day in {parse_day_key(d) for d in dates} if day <= today_day)
    if not days:
        return LoggingStreak(0, 0, None)

    longest = run = 1
    for previous, day in zip(days, days[1:]):
        if (day - previous).days == 1:
            run += 1
            longest = max(longest, run)
        else:
            run = 1

    # run now ends on the latest logged day
    gap = (today_day - days[-1]).days
    current = run if gap <= 1 else 0

    return LoggingStreak(
        current_streak=current,
        longest_streak=longest,
        last_log_date=days[-1].isoformat(),
    )


def get_logging_streak(
    user_id: str,
    today: str,
    provider: HealthEntryProvider,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> LoggingStreak:
    """Streak over the user's health entries from the last ``lookback_days`` days."""
    if lookback_days < 1:
        raise ValueError("lookback_days must be at least 1")
    start = shift_days(today, -(lookback_days - 1))
    entries = provider.get_health_entries_range(user_id, start, today)
    streak = compute_streak((entry.date for entry in entries), today)

    logger.info(
        f"[STREAK] {user_id}: current={streak.current_streak}, "
        f"longest={streak.longest_streak}, last={streak.last_log_date}"
    )
    return streak
