"""
Pytest fixtures for HealthTwin tests.
"""
import sys
import sqlite3
import pytest
from pathlib import Path
from datetime import datetime, timezone
from typing import List, Optional
from dotenv import load_dotenv

# Ensure src/ and the project root are importable without an install.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from healthtwin.analytics import WeeklyAnalytics  # noqa: E402
from healthtwin.entries import HealthEntry, MoodEntry, latest_mood_per_day  # noqa: E402
from healthtwin.trends import Correlation, Trend  # noqa: E402

# Load environment variables
load_dotenv()


# ============================================================================
# Entry providers
# ============================================================================

class InMemoryEntries:
    """Health and mood provider backed by plain lists, keyed by user."""

    def __init__(self, health=None, moods=None, names=None):
        self.health = health or {}
        self.moods = moods or {}
        self.names = names or {}

    def get_health_entries_range(self, user_id: str, start: str, end: str) -> List[HealthEntry]:
        entries = [e for e in self.health.get(user_id, []) if start <= e.date <= end]
        return sorted(entries, key=lambda e: e.date)

    def get_health_entry(self, user_id: str, date: str) -> Optional[HealthEntry]:
        matches = [e for e in self.health.get(user_id, []) if e.date == date]
        return matches[-1] if matches else None

    def get_moods_range(self, user_id: str, start: str, end: str) -> List[MoodEntry]:
        return [e for e in self.moods.get(user_id, []) if start <= e.date <= end]

    def get_mood_for_date(self, user_id: str, date: str) -> Optional[MoodEntry]:
        matches = latest_mood_per_day([e for e in self.moods.get(user_id, []) if e.date == date])
        return matches[0] if matches else None

    def get_user_name(self, user_id: str) -> Optional[str]:
        return self.names.get(user_id)


def ts(day: str, hour: int) -> datetime:
    return datetime.fromisoformat(f"{day}T{hour:02d}:00:00").replace(tzinfo=timezone.utc)


# Four days whose numbers are easy to check by hand:
#   energy 65.0, 84.5, 100.0, 49.5 -> avg 74.8, stable
#   emotion 50, 75, 90, 30         -> avg 61.3, stable
WEEK_HEALTH = [
    HealthEntry(date="2024-06-03", steps=5000, sleep_hours=6),
    HealthEntry(date="2024-06-04", steps=8000, sleep_hours=7),
    HealthEntry(date="2024-06-05", steps=10000, sleep_hours=8),
    HealthEntry(date="2024-06-06", steps=3000, sleep_hours=5),
]

WEEK_MOODS = [
    MoodEntry(date="2024-06-03", mood_value="okay", created_at=ts("2024-06-03", 20)),
    MoodEntry(date="2024-06-04", mood_value="bad", created_at=ts("2024-06-04", 8)),
    MoodEntry(date="2024-06-04", mood_value="good", created_at=ts("2024-06-04", 21)),
    MoodEntry(date="2024-06-05", mood_value="great", created_at=ts("2024-06-05", 20)),
    MoodEntry(date="2024-06-06", mood_value="low", created_at=ts("2024-06-06", 20)),
]


@pytest.fixture
def week_health():
    return list(WEEK_HEALTH)


@pytest.fixture
def week_moods():
    return list(WEEK_MOODS)


@pytest.fixture
def provider():
    """In-memory provider holding the reference week for user 'u1'."""
    return InMemoryEntries(
        health={"u1": list(WEEK_HEALTH)},
        moods={"u1": list(WEEK_MOODS)},
        names={"u1": "Sam"},
    )


@pytest.fixture
def make_analytics():
    """Factory for WeeklyAnalytics with neutral defaults and keyword overrides."""

    def _make(**overrides) -> WeeklyAnalytics:
        values = dict(
            week_start="2024-06-03",
            week_end="2024-06-09",
            avg_energy_score=60.0,
            energy_trend=Trend.STABLE,
            best_energy_day=None,
            worst_energy_day=None,
            avg_emotion_score=30.0,
            emotion_trend=Trend.STABLE,
            most_common_mood="okay",
            avg_steps=6000,
            avg_sleep=5.0,
            total_entries=2,
            sleep_mood_correlation="Not enough data to determine correlation",
            sleep_mood_correlation_level=Correlation.WEAK,
        )
        values.update(overrides)
        return WeeklyAnalytics(**values)

    return _make


class FixedRandom:
    """Stand-in random source that always returns the same draw."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom


# ============================================================================
# SQLite fixtures
# ============================================================================

@pytest.fixture
def create_test_database(tmp_path):
    """
    Factory fixture creating a SQLite entries database in a temp directory.

    Accepts lists of health and mood row dicts plus user rows; returns the
    Settings pointing at the new file.
    """
    from server.dashboard_api.config import Settings
    from server.dashboard_api.database import SCHEMA

    def _create(health_rows=(), mood_rows=(), users=()) -> Settings:
        settings = Settings(data_path=str(tmp_path), database_file="test_healthtwin.db")
        conn = sqlite3.connect(settings.database_path)
        conn.executescript(SCHEMA)
        for user_id, name in users:
            conn.execute("INSERT INTO users VALUES (?, ?)", (user_id, name))
        for row in health_rows:
            conn.execute(
                "INSERT INTO health_entries (user_id, date, steps, sleep_hours, heart_rate, water_litres) "
                "VALUES (:user_id, :date, :steps, :sleep_hours, :heart_rate, :water_litres)",
                {"heart_rate": None, "water_litres": None, **row},
            )
        for i, row in enumerate(mood_rows):
            conn.execute(
                "INSERT INTO mood_entries "
                "(entry_id, user_id, date, mood_value, diary_text, stress_level, energy_level, created_at) "
                "VALUES (:entry_id, :user_id, :date, :mood_value, :diary_text, :stress_level, "
                ":energy_level, :created_at)",
                {
                    "entry_id": f"M{i}", "diary_text": None, "stress_level": None,
                    "energy_level": None, "created_at": None, **row,
                },
            )
        conn.commit()
        conn.close()
        return settings

    return _create
