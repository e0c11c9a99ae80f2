"""
Unit tests for achievement badges.
"""
import pytest

from healthtwin.achievements import BADGE_RULES, evaluate_achievements, get_achievements
from healthtwin.entries import HealthEntry, MoodEntry

from conftest import InMemoryEntries


def unlocked(summary):
    return {badge.id for badge in summary.badges if badge.unlocked}


def logged_days(n, **values):
    return [HealthEntry(date=f"2024-06-{i + 1:02d}", **values) for i in range(n)]


class TestEvaluateAchievements:
    """Badge rules over a logged history."""

    def test_no_history(self):
        summary = evaluate_achievements([], [])

        assert summary.unlocked_count == 0
        assert summary.total_badges == len(BADGE_RULES) == 10
        assert [badge.id for badge in summary.badges] == [rule.id for rule in BADGE_RULES]

    def test_first_modest_day(self):
        health = [HealthEntry("2024-06-03", steps=5000, sleep_hours=6, water_litres=1.0)]
        assert unlocked(evaluate_achievements(health, [])) == {"first_log"}

    def test_strong_day(self):
        health = [HealthEntry("2024-06-03", steps=10000, sleep_hours=8, water_litres=2.0)]

        assert unlocked(evaluate_achievements(health, [])) == {
            "first_log",
            "step_master",
            "sleep_champion",
            "hydration_hero",
            "energy_master",
        }

    def test_logged_day_milestones(self):
        summary = evaluate_achievements(logged_days(14, steps=3000, sleep_hours=6), [])

        assert {"first_log", "week_warrior", "consistency_king"} <= unlocked(summary)
        assert "health_guru" not in unlocked(summary)

    def test_duplicate_dates_count_once(self):
        health = logged_days(6) + [HealthEntry("2024-06-01", steps=4000)]
        assert "week_warrior" not in unlocked(evaluate_achievements(health, []))

    def test_mood_booster_counts_positive_days(self):
        moods = [
            MoodEntry("2024-06-03", "great"),
            MoodEntry("2024-06-03", "good"),
            MoodEntry("2024-06-04", "Good "),
            MoodEntry("2024-06-05", "bad"),
            MoodEntry("2024-06-05", "meh"),
        ]
        assert "mood_booster" not in unlocked(evaluate_achievements([], moods))

        moods.append(MoodEntry("2024-06-06", "great"))
        assert "mood_booster" in unlocked(evaluate_achievements([], moods))

    @pytest.mark.parametrize("streak,expected", [(2, False), (3, True)])
    def test_streak_badge(self, streak, expected):
        summary = evaluate_achievements([], [], current_streak=streak)
        assert ("streak_3" in unlocked(summary)) is expected

    def test_negative_readings_count_as_zero(self):
        health = [
            HealthEntry("2024-06-03", steps=-20000, sleep_hours=-3, water_litres=-5),
            HealthEntry("2024-06-04", steps=4000, sleep_hours=7, water_litres=2.5),
        ]
        assert unlocked(evaluate_achievements(health, [])) == {"first_log", "hydration_hero"}

    def test_to_dict(self):
        data = evaluate_achievements([HealthEntry("2024-06-03", steps=100)], []).to_dict()

        assert data["unlocked_count"] == 1
        assert data["total_badges"] == 10
        assert data["badges"][0] == {
            "id": "first_log",
            "name": "First Step",
            "description": "Log your first health entry",
            "icon": "🌱",
            "unlocked": True,
        }


class TestGetAchievements:
    """Badges through entry providers."""

    def test_streak_comes_from_history(self):
        provider = InMemoryEntries(
            health={"u1": logged_days(3, steps=5000, sleep_hours=6)},
            moods={"u1": [MoodEntry("2024-06-02", "good")]},
        )
        summary = get_achievements("u1", "2024-06-04", provider, provider)

        assert "streak_3" in unlocked(summary)
        assert "mood_booster" not in unlocked(summary)

    def test_broken_streak(self):
        provider = InMemoryEntries(health={"u1": logged_days(3, steps=5000)})
        summary = get_achievements("u1", "2024-06-10", provider, provider)
        assert unlocked(summary) == {"first_log"}
