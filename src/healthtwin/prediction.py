"""
What-If Prediction and Habit Simulation.

Predicts energy and mood from sleep and steps, and projects a 30-day
forecast for a user moving from baseline habits to new ones.

The forecast energy formula here uses hard caps (60 points for sleep, 40
for steps, no credit past the baseline). It is intentionally separate from
``scoring.energy_score``, which gives credit for oversleep and extra
activity; the two screens show different numbers for the same inputs.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

from .numeric import clamp, round_int

logger = logging.getLogger(__name__)

ADAPTATION_RATE = 0.2
DEFAULT_FORECAST_DAYS = 30
NOISE_AMPLITUDE = 1.5

# Baseline assumed when a user has no logged history
DEFAULT_BASELINE_SLEEP = 7.0
DEFAULT_BASELINE_STEPS = 6500

# Mood label -> emoji shown next to it
MOOD_EMOJI = {
    "Radiant": "🌟",
    "Energetic": "🚀",
    "Balanced": "😊",
    "Exhausted": "😫",
    "Tired": "😴",
    "Low Energy": "🔋",
}


@dataclass(frozen=True)
class ForecastPoint:
    day: int
    date: date
    predicted_energy: int  # 0-100
    predicted_mood: str

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "date": self.date.isoformat(),
            "predicted_energy": self.predicted_energy,
            "predicted_mood": self.predicted_mood,
        }


@dataclass(frozen=True)
class PredictionResult:
    predicted_energy: int
    predicted_mood: str
    energy_impact: int  # difference from the current energy
    narrative: str

    def to_dict(self) -> dict:
        return {
            "predicted_energy": self.predicted_energy,
            "predicted_mood": self.predicted_mood,
            "energy_impact": self.energy_impact,
            "narrative": self.narrative,
        }


def predicted_energy(sleep_hours: float, steps: float) -> int:
    """
    Forecast energy: min(sleep/8 x 60, 60) + min(steps/10000 x 40, 40), rounded.

    Negative inputs count as 0.
    """
    sleep_hours = max(sleep_hours, 0)
    steps = max(steps, 0)
    sleep_component = min(sleep_hours / 8 * 60, 60)
    steps_component = min(steps / 10000 * 40, 40)
    return round_int(sleep_component + steps_component)


def predict_mood(sleep_hours: float, energy: float) -> str:
    """Mood label for a sleep/energy pair. The first matching rule wins."""
    if sleep_hours >= 7.5 and energy >= 80:
        return "Radiant"
    if sleep_hours >= 7 and energy >= 70:
        return "Energetic"
    if sleep_hours >= 6 and energy >= 50:
        return "Balanced"
    if sleep_hours < 5 and energy < 40:
        return "Exhausted"
    if sleep_hours < 6:
        return "Tired"
    return "Low Energy"


def adaptation_factor(day: int) -> float:
    """Share of a habit change felt by ``day``: ~86% at day 10, ~100% at day 30."""
    return 1 - math.exp(-day * ADAPTATION_RATE)


def scenario_seed(
    baseline_sleep: float,
    baseline_steps: float,
    target_sleep: float,
    target_steps: float,
) -> int:
    """Integer seed derived from the four scenario inputs."""
    parts = (
        round_int(baseline_sleep * 10),
        round_int(baseline_steps / 10),
        round_int(target_sleep * 10),
        round_int(target_steps / 10),
    )
    seed = 17
    for part in parts:
        seed = (seed * 31 + part) % 1000003
    return seed


def scenario_noise(seed: int, day: int) -> float:
    """
    Small wobble added to the forecast so the curve is not perfectly smooth.

    Two periodic terms whose amplitudes sum to NOISE_AMPLITUDE. Same seed and
    day always give the same value, so a scenario redraws identically.
    """
    phase = (seed % 360) * math.pi / 180
    return (
        0.9 * math.sin(day * 0.9 + phase)
        + 0.6 * math.cos(day * 2.3 + phase * 0.5)
    )


def simulate_habits(
    baseline_sleep: float,
    baseline_steps: float,
    target_sleep: float,
    target_steps: float,
    days: int = DEFAULT_FORECAST_DAYS,
    start_date: Optional[date] = None,
) -> List[ForecastPoint]:
    """
    Project daily energy and mood while moving from baseline to target habits.

    Args:
        baseline_sleep: Current average sleep hours
        baseline_steps: Current average daily steps
        target_sleep: Sleep hours in the scenario
        target_steps: Daily steps in the scenario
        days: Number of forecast days
        start_date: Day 0 (defaults to today); point N is start_date + N days

    Returns:
        One ForecastPoint per day, day 1 first
    """
    if days < 0:
        raise ValueError(f"days must not be negative, got {days}")

    start_date = start_date or date.today()
    baseline_energy = predicted_energy(baseline_sleep, baseline_steps)
    target_energy = predicted_energy(target_sleep, target_steps)
    total_diff = target_energy - baseline_energy
    seed = scenario_seed(baseline_sleep, baseline_steps, target_sleep, target_steps)

    forecast = []
    for day in range(1, days + 1):
        factor = adaptation_factor(day)
        projected = baseline_energy + total_diff * factor + scenario_noise(seed, day)
        energy = round_int(clamp(projected, 0, 100))
        simulated_sleep = baseline_sleep + (target_sleep - baseline_sleep) * factor

        forecast.append(ForecastPoint(
            day=day,
            date=start_date + timedelta(days=day),
            predicted_energy=energy,
            predicted_mood=predict_mood(simulated_sleep, energy),
        ))

    logger.debug(
        f"[FORECAST] {baseline_sleep}h/{baseline_steps} -> {target_sleep}h/{target_steps} "
        f"over {days} days: {baseline_energy} -> {target_energy} (seed={seed})"
    )
    return forecast


def prediction_insight(
    current_energy: float,
    predicted: float,
    sleep_diff: float,
    steps_diff: float,
) -> str:
    """One-line explanation of how a scenario changes energy."""
    diff = predicted - current_energy
    shown = f"{diff:g}"

    if diff > 5:
        if sleep_diff > 0 and steps_diff > 0:
            return f"Great choice! More rest and movement could boost your energy by {shown} points."
        if sleep_diff > 0:
            return f"That extra sleep is powerful! It's contributing significantly to a +{shown} energy boost."
        return f"Moving more is paying off! Your activity increase adds {shown} points to your score."

    if diff < -5:
        return (
            f"Careful! Reducing your healthy habits could drop your energy by "
            f"{abs(diff):g} points."
        )

    return "Maintaining your current habits keeps your energy stable."


def predict_scenario(
    baseline_sleep: float,
    baseline_steps: float,
    sim_sleep: float,
    sim_steps: float,
) -> PredictionResult:
    """Single-point what-if prediction for a scenario against the baseline."""
    current = predicted_energy(baseline_sleep, baseline_steps)
    energy = predicted_energy(sim_sleep, sim_steps)
    return PredictionResult(
        predicted_energy=energy,
        predicted_mood=predict_mood(sim_sleep, energy),
        energy_impact=energy - current,
        narrative=prediction_insight(
            current, energy, sim_sleep - baseline_sleep, sim_steps - baseline_steps
        ),
    )
