"""Weekly analytics and story response models."""
from pydantic import BaseModel, ConfigDict
from typing import Optional, Literal

TrendLabel = Literal["improving", "declining", "stable"]


class DayScoreModel(BaseModel):
    date: str
    score: float


class WeeklyAnalyticsModel(BaseModel):
    """Aggregated weekly health and mood metrics."""

    model_config = ConfigDict(populate_by_name=True)

    week_start: str
    week_end: str
    avg_energy_score: float
    energy_trend: TrendLabel
    best_energy_day: Optional[DayScoreModel] = None
    worst_energy_day: Optional[DayScoreModel] = None
    avg_emotion_score: float
    emotion_trend: TrendLabel
    most_common_mood: str
    avg_steps: int
    avg_sleep: float
    total_entries: int
    sleep_mood_correlation: str
    sleep_mood_correlation_level: str


class ScoreSummaryModel(BaseModel):
    score: float
    level: str
    feedback: str


class DailySummaryModel(BaseModel):
    """Energy and emotion scores for one day."""

    date: str
    energy: Optional[ScoreSummaryModel] = None
    emotion: Optional[ScoreSummaryModel] = None


class WeeklyStoryModel(BaseModel):
    """Generated weekly story with the analytics behind it."""

    story: str
    analytics: WeeklyAnalyticsModel
