"""
Weekly Analytics Aggregator.

Composes the scoring and trend functions over a date range into one
immutable WeeklyAnalytics value, used by the dashboard and the narrative
engine.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .dates import parse_day_key
from .entries import (
    HealthEntry,
    HealthEntryProvider,
    MoodEntry,
    MoodEntryProvider,
    latest_mood_per_day,
)
from .numeric import mean, non_negative, round1, round_int
from .scoring import average_emotion, average_energy, emotion_score, energy_score
from .trends import (
    Correlation,
    DayScore,
    Trend,
    analyze_mood_pattern,
    correlate_mood_with_sleep,
    detect_trend,
    get_energy_extremes,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeeklyAnalytics:
    """Aggregated health and mood metrics for one date range."""

    week_start: str
    week_end: str

    # Energy
    avg_energy_score: float
    energy_trend: Trend
    best_energy_day: Optional[DayScore]
    worst_energy_day: Optional[DayScore]

    # Emotion
    avg_emotion_score: float
    emotion_trend: Trend
    most_common_mood: str

    # Activity
    avg_steps: int
    avg_sleep: float
    total_entries: int

    # Sleep-mood correlation (description plus its bucket)
    sleep_mood_correlation: str
    sleep_mood_correlation_level: Correlation = Correlation.WEAK

    def to_dict(self) -> dict:
        return {
            "week_start": self.week_start,
            "week_end": self.week_end,
            "avg_energy_score": self.avg_energy_score,
            "energy_trend": self.energy_trend.value,
            "best_energy_day": self.best_energy_day.to_dict() if self.best_energy_day else None,
            "worst_energy_day": self.worst_energy_day.to_dict() if self.worst_energy_day else None,
            "avg_emotion_score": self.avg_emotion_score,
            "emotion_trend": self.emotion_trend.value,
            "most_common_mood": self.most_common_mood,
            "avg_steps": self.avg_steps,
            "avg_sleep": self.avg_sleep,
            "total_entries": self.total_entries,
            "sleep_mood_correlation": self.sleep_mood_correlation,
            "sleep_mood_correlation_level": self.sleep_mood_correlation_level.value,
        }


@dataclass(frozen=True)
class DailyScoreSummary:
    score: float
    level: str
    feedback: str

    def to_dict(self) -> dict:
        return {"score": self.score, "level": self.level, "feedback": self.feedback}


@dataclass(frozen=True)
class DailySummary:
    date: str
    energy: Optional[DailyScoreSummary]
    emotion: Optional[DailyScoreSummary]

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "energy": self.energy.to_dict() if self.energy else None,
            "emotion": self.emotion.to_dict() if self.emotion else None,
        }


def _validate_range(week_start: str, week_end: str) -> None:
    if parse_day_key(week_end) < parse_day_key(week_start):
        raise ValueError(f"Range end {week_end} is before start {week_start}")


def _latest_health_per_day(entries: Sequence[HealthEntry]) -> List[HealthEntry]:
    by_date = {}
    for entry in entries:
        by_date[entry.date] = entry  # upsert: last write wins
    return [by_date[d] for d in sorted(by_date)]


def build_weekly_analytics(
    health_entries: Sequence[HealthEntry],
    mood_entries: Sequence[MoodEntry],
    week_start: str,
    week_end: str,
) -> WeeklyAnalytics:
    """
    Build weekly analytics from already-fetched entries.

    Health entries are reduced to one per date (last one wins) and mood
    entries to the most recently created per date. The sleep-mood
    correlation only uses dates present in both series.

    Args:
        health_entries: Health entries inside the range
        mood_entries: Mood entries inside the range
        week_start: First day key of the range
        week_end: Last day key of the range (inclusive)

    Raises:
        ValueError: on malformed day keys, a reversed range or unknown moods
    """
    _validate_range(week_start, week_end)
    health = _latest_health_per_day(health_entries)
    moods = latest_mood_per_day(list(mood_entries))

    # Energy
    energy_scores = [energy_score(entry.sleep_hours, entry.steps).score for entry in health]
    avg_energy = average_energy((entry.sleep_hours, entry.steps) for entry in health)
    energy_trend = detect_trend(energy_scores, subject="energy")
    best_day, worst_day = get_energy_extremes(health)

    # Emotion
    emotion_by_date = {
        entry.date: emotion_score(entry.mood_value, entry.diary_text).score
        for entry in moods
    }
    emotion_scores = [emotion_by_date[entry.date] for entry in moods]
    avg_emotion = average_emotion((entry.mood_value, entry.diary_text) for entry in moods)
    emotion_trend = detect_trend(emotion_scores, subject="emotion")
    pattern = analyze_mood_pattern([entry.mood_value for entry in moods])

    # Activity; negative readings count as 0, as in energy scoring
    avg_steps = round_int(mean(non_negative(entry.steps) for entry in health)) if health else 0
    avg_sleep = round1(mean(non_negative(entry.sleep_hours) for entry in health)) if health else 0.0

    # Pair days that carry both signals, in date order
    paired = [
        (emotion_by_date[entry.date], non_negative(entry.sleep_hours))
        for entry in health
        if entry.date in emotion_by_date and entry.sleep_hours is not None
    ]
    correlation = correlate_mood_with_sleep(
        [emotion for emotion, _ in paired],
        [sleep for _, sleep in paired],
    )

    analytics = WeeklyAnalytics(
        week_start=week_start,
        week_end=week_end,
        avg_energy_score=avg_energy,
        energy_trend=energy_trend.trend,
        best_energy_day=best_day,
        worst_energy_day=worst_day,
        avg_emotion_score=avg_emotion,
        emotion_trend=emotion_trend.trend,
        most_common_mood=pattern.most_common.value,
        avg_steps=avg_steps,
        avg_sleep=avg_sleep,
        total_entries=len(health),
        sleep_mood_correlation=correlation.description,
        sleep_mood_correlation_level=correlation.correlation,
    )

    logger.info(
        f"[ANALYTICS] {week_start}..{week_end}: {len(health)} health / {len(moods)} mood days, "
        f"energy={avg_energy} ({energy_trend.trend.value}), "
        f"emotion={avg_emotion} ({emotion_trend.trend.value}), "
        f"paired={len(paired)} -> {correlation.correlation.value}"
    )
    return analytics


def generate_weekly_analytics(
    user_id: str,
    week_start: str,
    week_end: str,
    health_provider: HealthEntryProvider,
    mood_provider: MoodEntryProvider,
) -> WeeklyAnalytics:
    """Fetch a user's entries for the range and build weekly analytics."""
    _validate_range(week_start, week_end)
    health = health_provider.get_health_entries_range(user_id, week_start, week_end)
    moods = mood_provider.get_moods_range(user_id, week_start, week_end)
    return build_weekly_analytics(health, moods, week_start, week_end)


def get_daily_summary(
    user_id: str,
    date: str,
    health_provider: HealthEntryProvider,
    mood_provider: MoodEntryProvider,
) -> DailySummary:
    """Energy and emotion scores for a single day; either may be None."""
    parse_day_key(date)
    health = health_provider.get_health_entry(user_id, date)
    mood = mood_provider.get_mood_for_date(user_id, date)

    energy = None
    if health is not None:
        result = energy_score(health.sleep_hours, health.steps)
        energy = DailyScoreSummary(result.score, result.level.value, result.feedback)

    emotion = None
    if mood is not None:
        result = emotion_score(mood.mood_value, mood.diary_text)
        emotion = DailyScoreSummary(result.score, result.level.value, result.feedback)

    return DailySummary(date=date, energy=energy, emotion=emotion)
