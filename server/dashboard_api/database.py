"""Read-only SQLite access to logged health and mood entries."""
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from typing import Generator, List, Optional
import logging

from healthtwin.entries import HealthEntry, MoodEntry

from .config import get_settings

log = logging.getLogger(__name__)

# Tables written by the logging app. This API only reads them.
SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    user_id TEXT PRIMARY KEY,
    name TEXT
);
CREATE TABLE IF NOT EXISTS health_entries (
    user_id TEXT NOT NULL,
    date TEXT NOT NULL,
    steps INTEGER,
    sleep_hours REAL,
    heart_rate REAL,
    water_litres REAL,
    PRIMARY KEY (user_id, date)
);
CREATE TABLE IF NOT EXISTS mood_entries (
    entry_id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    date TEXT NOT NULL,
    mood_value TEXT NOT NULL,
    diary_text TEXT,
    stress_level INTEGER,
    energy_level INTEGER,
    created_at TEXT
);
"""


def _to_int(val) -> Optional[int]:
    # Handles float strings like '8500.0' written by some importers
    if val is None or val == "":
        return None
    return int(float(val))


def _to_float(val) -> Optional[float]:
    if val is None or val == "":
        return None
    return float(val)


def _parse_timestamp(val) -> Optional[datetime]:
    if not val:
        return None
    try:
        return datetime.fromisoformat(str(val).replace("Z", "+00:00"))
    except ValueError:
        log.warning(f"[DB] Unparseable created_at '{val}'")
        return None


def row_to_health(row) -> HealthEntry:
    """Convert SQLite row to HealthEntry."""
    return HealthEntry(
        date=row["date"],
        steps=_to_int(row["steps"]),
        sleep_hours=_to_float(row["sleep_hours"]),
        heart_rate=_to_float(row["heart_rate"]),
        water_litres=_to_float(row["water_litres"]),
    )


def row_to_mood(row) -> MoodEntry:
    """Convert SQLite row to MoodEntry."""
    return MoodEntry(
        date=row["date"],
        mood_value=row["mood_value"],
        diary_text=row["diary_text"],
        stress_level=_to_int(row["stress_level"]),
        energy_level=_to_int(row["energy_level"]),
        created_at=_parse_timestamp(row["created_at"]),
    )


class DatabaseManager:
    """
    Read-only SQLite entry provider.

    Implements the health and mood provider interfaces the analytics engine
    expects. Connections are opened per call in ``mode=ro`` so the app that
    writes entries is never blocked.
    """

    def __init__(self, settings=None):
        self.settings = settings or get_settings()

    @contextmanager
    def get_conn(self) -> Generator[sqlite3.Connection, None, None]:
        """Get read-only connection to the entries database."""
        uri = f"file:{self.settings.database_path}?mode=ro"
        conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
        conn.row_factory = sqlite3.Row  # Enable dict-like row access
        try:
            yield conn
        finally:
            conn.close()

    def get_health_entries_range(self, user_id: str, start: str, end: str) -> List[HealthEntry]:
        with self.get_conn() as conn:
            rows = conn.execute(
                """
                SELECT * FROM health_entries
                WHERE user_id = ? AND date >= ? AND date <= ?
                ORDER BY date ASC
                """,
                (user_id, start, end),
            ).fetchall()
        log.debug(f"[DB] {len(rows)} health entries for {user_id} {start}..{end}")
        return [row_to_health(row) for row in rows]

    def get_health_entry(self, user_id: str, date: str) -> Optional[HealthEntry]:
        with self.get_conn() as conn:
            row = conn.execute(
                "SELECT * FROM health_entries WHERE user_id = ? AND date = ?",
                (user_id, date),
            ).fetchone()
        return row_to_health(row) if row else None

    def get_moods_range(self, user_id: str, start: str, end: str) -> List[MoodEntry]:
        with self.get_conn() as conn:
            rows = conn.execute(
                """
                SELECT * FROM mood_entries
                WHERE user_id = ? AND date >= ? AND date <= ?
                ORDER BY date ASC, created_at ASC, rowid ASC
                """,
                (user_id, start, end),
            ).fetchall()
        log.debug(f"[DB] {len(rows)} mood entries for {user_id} {start}..{end}")
        return [row_to_mood(row) for row in rows]

    def get_mood_for_date(self, user_id: str, date: str) -> Optional[MoodEntry]:
        """Most recently created mood entry of the day; the later-inserted row wins ties."""
        with self.get_conn() as conn:
            row = conn.execute(
                """
                SELECT * FROM mood_entries
                WHERE user_id = ? AND date = ?
                ORDER BY created_at DESC, rowid DESC
                LIMIT 1
                """,
                (user_id, date),
            ).fetchone()
        return row_to_mood(row) if row else None

    def get_user_name(self, user_id: str) -> Optional[str]:
        with self.get_conn() as conn:
            row = conn.execute("SELECT name FROM users WHERE user_id = ?", (user_id,)).fetchone()
        return row["name"] if row else None


# Singleton instance
db_manager = DatabaseManager()


def get_db() -> DatabaseManager:
    """FastAPI dependency returning the shared database manager."""
    return db_manager
