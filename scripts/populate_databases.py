#!/usr/bin/env python3
"""
Populate a local HealthTwin SQLite database with demo entries.

Creates the users, health_entries and mood_entries tables and fills the
last N days for a demo user, so the API has something to analyze.

Usage:
    python scripts/populate_databases.py [--days 7] [--user demo-user]
"""
import argparse
import os
import random
import sqlite3
import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

from dotenv import load_dotenv

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR))

from server.dashboard_api.database import SCHEMA  # noqa: E402

load_dotenv()

DEFAULT_DB = Path(os.getenv("HEALTHTWIN_DATA_PATH", str(BASE_DIR))) / os.getenv(
    "HEALTHTWIN_DATABASE_FILE", "healthtwin.db"
)

MOODS = ["great", "good", "okay", "low", "bad"]
DIARY_SNIPPETS = {
    "great": "Felt energized and proud after a long walk.",
    "good": "Calm, productive day. Grateful for good weather.",
    "okay": "Nothing special, a bit busy.",
    "low": "Tired and a little stressed about work.",
    "bad": "Exhausted, frustrated and slept badly.",
}


def demo_day(rng: random.Random, day_index: int) -> dict:
    """Generate one day of plausible values; later days trend slightly better."""
    sleep = round(min(9.5, max(4.0, rng.gauss(6.4 + day_index * 0.15, 0.8))), 1)
    steps = int(min(16000, max(1500, rng.gauss(6500 + day_index * 300, 1800))))
    # Better sleep nudges the mood upward
    mood_index = max(0, min(4, int(round(4 - (sleep - 4.0) / 1.3 + rng.uniform(-0.7, 0.7)))))
    mood = MOODS[mood_index]
    return {
        "steps": steps,
        "sleep_hours": sleep,
        "heart_rate": round(rng.uniform(58, 78), 0),
        "water_litres": round(rng.uniform(0.8, 2.6), 1),
        "mood_value": mood,
        "diary_text": DIARY_SNIPPETS[mood],
        "stress_level": rng.randint(2, 8),
        "energy_level": rng.randint(3, 9),
    }


def populate_database(db_path: Path, user_id: str, user_name: str, days: int, seed: int) -> int:
    """
    Recreate the database file and insert demo entries.

    Returns:
        Number of health rows inserted
    """
    if db_path.exists():
        os.remove(db_path)
        print(f"  Removed existing: {db_path.name}")

    rng = random.Random(seed)
    today = date.today()

    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()
    cursor.executescript(SCHEMA)
    cursor.execute("INSERT INTO users (user_id, name) VALUES (?, ?)", (user_id, user_name))

    for i in range(days):
        day = today - timedelta(days=days - 1 - i)
        values = demo_day(rng, i)
        cursor.execute(
            """
            INSERT INTO health_entries (user_id, date, steps, sleep_hours, heart_rate, water_litres)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (user_id, day.isoformat(), values["steps"], values["sleep_hours"],
             values["heart_rate"], values["water_litres"]),
        )
        created = datetime.combine(day, datetime.min.time(), tzinfo=timezone.utc) + timedelta(hours=21)
        cursor.execute(
            """
            INSERT INTO mood_entries
                (entry_id, user_id, date, mood_value, diary_text, stress_level, energy_level, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (f"MOOD-{day.isoformat()}", user_id, day.isoformat(), values["mood_value"],
             values["diary_text"], values["stress_level"], values["energy_level"],
             created.isoformat()),
        )

    conn.commit()
    count = cursor.execute("SELECT COUNT(*) FROM health_entries").fetchone()[0]
    conn.close()
    return count


def main():
    """Populate the demo database."""
    parser = argparse.ArgumentParser(description="Seed HealthTwin demo data")
    parser.add_argument("--days", type=int, default=7)
    parser.add_argument("--user", default="demo-user")
    parser.add_argument("--name", default="Alex")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--db", type=Path, default=DEFAULT_DB)
    args = parser.parse_args()

    print("=" * 60)
    print("HealthTwin Demo Data Population Script")
    print("=" * 60)
    print(f"\nDatabase: {args.db}\n")

    count = populate_database(args.db, args.user, args.name, args.days, args.seed)

    print(f"  User: {args.user} ({args.name})")
    print(f"  Days inserted: {count}")
    print("=" * 60)
    size_kb = args.db.stat().st_size / 1024
    print(f"Complete! {args.db} ({size_kb:.1f} KB)")


if __name__ == "__main__":
    main()
