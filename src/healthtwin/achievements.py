"""
Achievement badges.

Badges are derived from a user's logged history on every request; nothing
about them is stored.
"""

import logging
from dataclasses import dataclass, asdict, field
from typing import Callable, List, Sequence

from .dates import shift_days
from .entries import HealthEntry, HealthEntryProvider, MoodEntry, MoodEntryProvider, MoodValue
from .numeric import mean, non_negative
from .scoring import energy_score
from .streaks import DEFAULT_LOOKBACK_DAYS, compute_streak

logger = logging.getLogger(__name__)

HIGH_ENERGY_SCORE = 90
POSITIVE_MOODS = {MoodValue.GREAT.value, MoodValue.GOOD.value}


@dataclass(frozen=True)
class HistoryStats:
    """Totals a badge rule can look at."""

    logged_days: int
    max_steps: float
    avg_sleep: float
    total_water: float
    positive_mood_days: int
    best_energy: float
    current_streak: int


@dataclass(frozen=True)
class BadgeRule:
    id: str
    name: str
    description: str
    icon: str
    unlocked_when: Callable[[HistoryStats], bool]


@dataclass(frozen=True)
class Badge:
    id: str
    name: str
    description: str
    icon: str
    unlocked: bool

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AchievementSummary:
    badges: List[Badge] = field(default_factory=list)

    @property
    def unlocked_count(self) -> int:
        return sum(1 for badge in self.badges if badge.unlocked)

    @property
    def total_badges(self) -> int:
        return len(self.badges)

    def to_dict(self) -> dict:
        return {
            "badges": [badge.to_dict() for badge in self.badges],
            "unlocked_count": self.unlocked_count,
            "total_badges": self.total_badges,
        }


BADGE_RULES: List[BadgeRule] = [
    BadgeRule("first_log", "First Step", "Log your first health entry", "🌱",
              lambda s: s.logged_days >= 1),
    BadgeRule("streak_3", "Consistency Is Key", "Maintain a 3-day streak", "🔥",
              lambda s: s.current_streak >= 3),
    BadgeRule("week_warrior", "Week Warrior", "Log 7 days of health data", "📅",
              lambda s: s.logged_days >= 7),
    BadgeRule("step_master", "Step Master", "Hit 10,000 steps in a day", "👟",
              lambda s: s.max_steps >= 10000),
    BadgeRule("sleep_champion", "Sleep Champion", "Average 8+ hours of sleep", "😴",
              lambda s: s.avg_sleep >= 8),
    BadgeRule("hydration_hero", "Hydration Hero", "Log 2L+ of water total", "💧",
              lambda s: s.total_water >= 2),
    BadgeRule("mood_booster", "Mood Booster", "Log 3+ great or good days", "😊",
              lambda s: s.positive_mood_days >= 3),
    BadgeRule("energy_master", "High Energy", "Reach an energy score of 90+", "⚡",
              lambda s: s.best_energy >= HIGH_ENERGY_SCORE),
    BadgeRule("consistency_king", "Consistency King", "Log data for 14 days", "👑",
              lambda s: s.logged_days >= 14),
    BadgeRule("health_guru", "Health Guru", "Log data for 30 days", "🧘",
              lambda s: s.logged_days >= 30),
]


def history_stats(
    health_entries: Sequence[HealthEntry],
    mood_entries: Sequence[MoodEntry],
    current_streak: int = 0,
) -> HistoryStats:
    """
    Summarize a logged history for badge rules.

    Health entries count once per date (the last one wins). A day counts as
    positive when any of its mood logs is great or good; unrecognized mood
    labels are skipped.
    """
    by_date = {entry.date: entry for entry in health_entries}
    health = list(by_date.values())

    positive_days = {
        entry.date
        for entry in mood_entries
        if str(entry.mood_value).strip().lower() in POSITIVE_MOODS
    }

    return HistoryStats(
        logged_days=len(health),
        max_steps=max((non_negative(e.steps) for e in health), default=0),
        avg_sleep=mean(non_negative(e.sleep_hours) for e in health),
        total_water=sum(non_negative(e.water_litres) for e in health),
        positive_mood_days=len(positive_days),
        best_energy=max((energy_score(e.sleep_hours, e.steps).score for e in health), default=0),
        current_streak=max(0, current_streak),
    )


def evaluate_achievements(
    health_entries: Sequence[HealthEntry],
    mood_entries: Sequence[MoodEntry],
    current_streak: int = 0,
) -> AchievementSummary:
    """Check every badge against the user's history."""
    stats = history_stats(health_entries, mood_entries, current_streak)
    badges = [
        Badge(rule.id, rule.name, rule.description, rule.icon, bool(rule.unlocked_when(stats)))
        for rule in BADGE_RULES
    ]
    summary = AchievementSummary(badges)

    logger.info(
        f"[ACHIEVEMENTS] {summary.unlocked_count}/{summary.total_badges} unlocked "
        f"over {stats.logged_days} logged days"
    )
    return summary


def get_achievements(
    user_id: str,
    today: str,
    health_provider: HealthEntryProvider,
    mood_provider: MoodEntryProvider,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> AchievementSummary:
    """Fetch the user's recent history and evaluate badges, including streak ones."""
    if lookback_days < 1:
        raise ValueError("lookback_days must be at least 1")
    start = shift_days(today, -(lookback_days - 1))
    health = health_provider.get_health_entries_range(user_id, start, today)
    moods = mood_provider.get_moods_range(user_id, start, today)
    streak = compute_streak((entry.date for entry in health), today)
    return evaluate_achievements(health, moods, streak.current_streak)
