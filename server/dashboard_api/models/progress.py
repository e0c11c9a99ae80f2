"""Logging streak and achievement response models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class StreakModel(BaseModel):
    """Consecutive logged days for a user."""

    model_config = ConfigDict(populate_by_name=True)

    current_streak: int = Field(ge=0, serialization_alias="currentStreak")
    longest_streak: int = Field(ge=0, serialization_alias="longestStreak")
    last_log_date: Optional[str] = Field(default=None, serialization_alias="lastLogDate")


class BadgeModel(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    unlocked: bool


class AchievementsModel(BaseModel):
    """Every badge with its unlocked state."""

    model_config = ConfigDict(populate_by_name=True)

    badges: list[BadgeModel]
    unlocked_count: int = Field(serialization_alias="unlockedCount")
    total_badges: int = Field(serialization_alias="totalBadges")
