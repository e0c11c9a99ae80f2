"""
Health and mood entry models.

Entries are supplied by an external provider (database, API client or
in-memory fixture). The engine only reads them; it never stores them.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from typing import List, Optional, Protocol


class MoodValue(str, Enum):
    """Categorical mood picked by the user when logging a day."""

    GREAT = "great"
    GOOD = "good"
    OKAY = "okay"
    LOW = "low"
    BAD = "bad"


# Fixed enumeration order, also used to break ties.
MOOD_ORDER: List[MoodValue] = [
    MoodValue.GREAT,
    MoodValue.GOOD,
    MoodValue.OKAY,
    MoodValue.LOW,
    MoodValue.BAD,
]


def coerce_mood(value) -> MoodValue:
    """
    Convert a raw mood label to a MoodValue.

    Raises:
        ValueError: if the label is not one of the known moods
    """
    if isinstance(value, MoodValue):
        return value
    try:
        return MoodValue(str(value).strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown mood value '{value}'. Must be one of: {[m.value for m in MOOD_ORDER]}"
        ) from None


@dataclass
class HealthEntry:
    """One day of health data. Unique per user and date."""

    date: str  # YYYY-MM-DD
    steps: Optional[int] = None
    sleep_hours: Optional[float] = None
    heart_rate: Optional[float] = None
    water_litres: Optional[float] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class MoodEntry:
    """One mood log. Several may exist for the same date."""

    date: str  # YYYY-MM-DD
    mood_value: str
    diary_text: Optional[str] = None
    stress_level: Optional[int] = None  # 1..10
    energy_level: Optional[int] = None  # 1..10
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat() if self.created_at else None
        return data


class HealthEntryProvider(Protocol):
    """Source of health entries, ordered by date ascending."""

    def get_health_entries_range(self, user_id: str, start: str, end: str) -> List[HealthEntry]:
        ...

    def get_health_entry(self, user_id: str, date: str) -> Optional[HealthEntry]:
        ...


class MoodEntryProvider(Protocol):
    """Source of mood entries, ordered by date then creation time ascending."""

    def get_moods_range(self, user_id: str, start: str, end: str) -> List[MoodEntry]:
        ...

    def get_mood_for_date(self, user_id: str, date: str) -> Optional[MoodEntry]:
        ...


def latest_mood_per_day(entries: List[MoodEntry]) -> List[MoodEntry]:
    """
    Keep one mood entry per date, the most recently created one.

    Entries without a creation time lose to any entry that has one; among
    equals the later position in the input wins. Output is ordered by date.
    """
    latest = {}
    for entry in entries:
        current = latest.get(entry.date)
        if current is None:
            latest[entry.date] = entry
            continue
        if current.created_at is not None and entry.created_at is None:
            continue
        if (
            current.created_at is None
            or entry.created_at is None
            or entry.created_at >= current.created_at
        ):
            latest[entry.date] = entry
    return [latest[d] for d in sorted(latest)]
