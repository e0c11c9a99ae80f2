"""
HealthTwin analytics engine.

Scores daily health and mood entries, tracks weekly trends, writes a
narrative about the week and forecasts the effect of habit changes.
"""

from .achievements import AchievementSummary, evaluate_achievements, get_achievements
from .analytics import (
    WeeklyAnalytics,
    build_weekly_analytics,
    generate_weekly_analytics,
    get_daily_summary,
)
from .entries import HealthEntry, MoodEntry, MoodValue
from .feasibility import (
    assess_data_confidence,
    assess_feasibility,
    infer_avatar_decision,
    lower_confidence,
    qualify_insight,
)
from .narrative import NarrativeEngine, generate_weekly_story
from .prediction import (
    predict_mood,
    predict_scenario,
    predicted_energy,
    prediction_insight,
    simulate_habits,
)
from .scoring import emotion_score, energy_score
from .streaks import LoggingStreak, compute_streak, get_logging_streak
from .trends import (
    analyze_mood_pattern,
    correlate_mood_with_sleep,
    detect_trend,
    get_extremes,
)

__all__ = [
    "AchievementSummary",
    "HealthEntry",
    "LoggingStreak",
    "MoodEntry",
    "MoodValue",
    "NarrativeEngine",
    "WeeklyAnalytics",
    "analyze_mood_pattern",
    "assess_data_confidence",
    "assess_feasibility",
    "build_weekly_analytics",
    "compute_streak",
    "correlate_mood_with_sleep",
    "detect_trend",
    "emotion_score",
    "energy_score",
    "evaluate_achievements",
    "generate_weekly_analytics",
    "generate_weekly_story",
    "get_achievements",
    "get_daily_summary",
    "get_extremes",
    "get_logging_streak",
    "infer_avatar_decision",
    "lower_confidence",
    "predict_mood",
    "predict_scenario",
    "predicted_energy",
    "prediction_insight",
    "qualify_insight",
    "simulate_habits",
]
