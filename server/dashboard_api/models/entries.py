"""Logged entry models."""
from pydantic import BaseModel, ConfigDict
from typing import Optional


class HealthEntryModel(BaseModel):
    """Daily health entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    date: str
    steps: Optional[int] = None
    sleep_hours: Optional[float] = None
    heart_rate: Optional[float] = None
    water_litres: Optional[float] = None


class MoodEntryModel(BaseModel):
    """Mood log entry. Older clients stored free-text labels, so any string is accepted."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    date: str
    mood_value: str
    diary_text: Optional[str] = None
    stress_level: Optional[int] = None
    energy_level: Optional[int] = None
    created_at: Optional[str] = None
