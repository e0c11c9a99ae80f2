"""
Unit tests for what-if prediction and habit simulation.
"""
from datetime import date, timedelta

import pytest

from healthtwin.prediction import (
    MOOD_EMOJI,
    NOISE_AMPLITUDE,
    adaptation_factor,
    predict_mood,
    predict_scenario,
    predicted_energy,
    prediction_insight,
    scenario_noise,
    scenario_seed,
    simulate_habits,
)

START = date(2024, 6, 1)


class TestPredictedEnergy:
    """Forecast energy with hard 60/40 caps."""

    @pytest.mark.parametrize("sleep,steps,expected", [
        (8, 10000, 100),
        (6, 5000, 65),
        (10, 20000, 100),
        (4, 2500, 40),
        (0, 0, 0),
        (7, 0, 53),  # 52.5 rounds half up
    ])
    def test_values(self, sleep, steps, expected):
        assert predicted_energy(sleep, steps) == expected

    def test_negative_inputs_count_as_zero(self):
        assert predicted_energy(-2, -500) == 0


class TestPredictMood:
    """First matching rule wins."""

    @pytest.mark.parametrize("sleep,energy,expected", [
        (8, 85, "Radiant"),
        (7.5, 79, "Energetic"),
        (7, 70, "Energetic"),
        (6, 50, "Balanced"),
        (4, 30, "Exhausted"),
        (4, 45, "Tired"),
        (5.5, 60, "Tired"),
        (6.5, 45, "Low Energy"),
    ])
    def test_rules(self, sleep, energy, expected):
        assert predict_mood(sleep, energy) == expected

    def test_every_label_has_an_emoji(self):
        labels = {"Radiant", "Energetic", "Balanced", "Exhausted", "Tired", "Low Energy"}
        assert set(MOOD_EMOJI) == labels


class TestSimulateHabits:
    """30-day forecast from baseline to target habits."""

    def test_unchanged_habits_stay_near_baseline(self):
        forecast = simulate_habits(6, 5000, 6, 5000, start_date=START)

        assert len(forecast) == 30
        assert all(abs(point.predicted_energy - 65) <= 2 for point in forecast)
        assert {point.predicted_mood for point in forecast} == {"Balanced"}

    def test_days_and_dates(self):
        forecast = simulate_habits(6, 5000, 8, 10000, days=5, start_date=START)

        assert [p.day for p in forecast] == [1, 2, 3, 4, 5]
        assert forecast[0].date == START + timedelta(days=1)
        assert forecast[-1].date == START + timedelta(days=5)

    def test_converges_towards_target(self):
        forecast = simulate_habits(5, 3000, 8, 10000, start_date=START)

        assert 57 <= forecast[0].predicted_energy <= 61
        assert forecast[-1].predicted_energy >= 98
        assert forecast[-1].predicted_mood == "Radiant"

    def test_declining_habits(self):
        forecast = simulate_habits(8, 10000, 4, 2000, start_date=START)

        assert forecast[0].predicted_energy > forecast[-1].predicted_energy
        assert forecast[-1].predicted_mood in ("Exhausted", "Tired")

    def test_energy_always_in_range(self):
        for args in [(0, 0, 0, 0), (12, 30000, 12, 30000), (0, 0, 12, 30000)]:
            assert all(0 <= p.predicted_energy <= 100 for p in simulate_habits(*args, start_date=START))

    def test_same_inputs_same_forecast(self):
        first = simulate_habits(6.5, 7000, 8, 9000, start_date=START)
        second = simulate_habits(6.5, 7000, 8, 9000, start_date=START)
        assert first == second

    def test_zero_days(self):
        assert simulate_habits(6, 5000, 8, 10000, days=0) == []

    def test_negative_days_raise(self):
        with pytest.raises(ValueError):
            simulate_habits(6, 5000, 8, 10000, days=-1)

    def test_point_to_dict(self):
        point = simulate_habits(6, 5000, 6, 5000, days=1, start_date=START)[0]
        assert point.to_dict()["date"] == "2024-06-02"


class TestNoiseAndAdaptation:
    """Deterministic wobble and exponential adaptation."""

    def test_noise_is_bounded(self):
        for seed in (0, 17, 359, 123456, 999999):
            for day in range(1, 91):
                assert abs(scenario_noise(seed, day)) <= NOISE_AMPLITUDE

    def test_seed_depends_on_direction(self):
        assert scenario_seed(6, 5000, 8, 10000) != scenario_seed(8, 10000, 6, 5000)

    def test_adaptation(self):
        assert adaptation_factor(0) == 0
        assert adaptation_factor(10) == pytest.approx(0.8647, abs=1e-4)
        assert adaptation_factor(30) > 0.99


class TestPredictionInsight:
    """One-line explanation of a scenario."""

    def test_more_sleep_and_steps(self):
        assert prediction_insight(50, 60, 1, 1000) == (
            "Great choice! More rest and movement could boost your energy by 10 points."
        )

    def test_more_sleep_only(self):
        assert prediction_insight(50, 60, 1, 0) == (
            "That extra sleep is powerful! It's contributing significantly to a +10 energy boost."
        )

    def test_more_steps_only(self):
        assert prediction_insight(50, 60, 0, 1000) == (
            "Moving more is paying off! Your activity increase adds 10 points to your score."
        )

    def test_drop(self):
        assert prediction_insight(50, 40, -1, -1000) == (
            "Careful! Reducing your healthy habits could drop your energy by 10 points."
        )

    def test_small_change_is_stable(self):
        assert prediction_insight(50, 55, 1, 1000) == (
            "Maintaining your current habits keeps your energy stable."
        )


class TestPredictScenario:
    """Single-point scenario prediction."""

    def test_better_habits(self):
        result = predict_scenario(6, 5000, 8, 10000)

        assert result.predicted_energy == 100
        assert result.energy_impact == 35
        assert result.predicted_mood == "Radiant"
        assert result.narrative.startswith("Great choice!")

    def test_same_habits(self):
        result = predict_scenario(7, 8000, 7, 8000)
        assert result.energy_impact == 0
        assert result.narrative == "Maintaining your current habits keeps your energy stable."
