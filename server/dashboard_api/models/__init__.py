"""Pydantic models for HealthTwin API responses."""
from .entries import HealthEntryModel, MoodEntryModel
from .analytics import (
    DayScoreModel,
    WeeklyAnalyticsModel,
    ScoreSummaryModel,
    DailySummaryModel,
    WeeklyStoryModel,
)
from .forecast import (
    ForecastPointModel,
    FeasibilityModel,
    DataConfidenceModel,
    AvatarDecisionModel,
    ForecastResponse,
)
from .wellness import WellnessAdviceModel
from .progress import StreakModel, BadgeModel, AchievementsModel

__all__ = [
    "HealthEntryModel",
    "MoodEntryModel",
    "DayScoreModel",
    "WeeklyAnalyticsModel",
    "ScoreSummaryModel",
    "DailySummaryModel",
    "WeeklyStoryModel",
    "ForecastPointModel",
    "FeasibilityModel",
    "DataConfidenceModel",
    "AvatarDecisionModel",
    "ForecastResponse",
    "WellnessAdviceModel",
    "StreakModel",
    "BadgeModel",
    "AchievementsModel",
]
