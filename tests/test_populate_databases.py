"""
Integration test: seed a demo database and analyze it.
"""
from healthtwin.analytics import generate_weekly_analytics
from healthtwin.dates import week_bounds
from server.dashboard_api.config import Settings
from server.dashboard_api.database import DatabaseManager
from scripts.populate_databases import populate_database


class TestPopulateDatabase:
    """Demo data seeding feeds the analytics engine end to end."""

    def test_seeded_week_is_analyzable(self, tmp_path):
        count = populate_database(tmp_path / "demo.db", "demo-user", "Alex", days=7, seed=42)
        assert count == 7

        db = DatabaseManager(Settings(data_path=str(tmp_path), database_file="demo.db"))
        start, end = week_bounds()
        analytics = generate_weekly_analytics("demo-user", start, end, db, db)

        assert analytics.total_entries == 7
        assert 0 <= analytics.avg_energy_score <= 100
        assert 0 <= analytics.avg_emotion_score <= 100
        assert db.get_user_name("demo-user") == "Alex"

    def test_same_seed_same_data(self, tmp_path):
        populate_database(tmp_path / "a.db", "demo-user", "Alex", days=5, seed=7)
        populate_database(tmp_path / "b.db", "demo-user", "Alex", days=5, seed=7)

        start, end = week_bounds(days=5)
        a = DatabaseManager(Settings(data_path=str(tmp_path), database_file="a.db"))
        b = DatabaseManager(Settings(data_path=str(tmp_path), database_file="b.db"))
        assert a.get_health_entries_range("demo-user", start, end) == b.get_health_entries_range(
            "demo-user", start, end
        )

    def test_rerun_replaces_file(self, tmp_path):
        path = tmp_path / "demo.db"
        populate_database(path, "demo-user", "Alex", days=3, seed=1)
        assert populate_database(path, "demo-user", "Alex", days=2, seed=1) == 2
