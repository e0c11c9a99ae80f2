"""What-if forecast routes."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from healthtwin.feasibility import (
    assess_data_confidence,
    assess_feasibility,
    infer_avatar_decision,
    lower_confidence,
    qualify_insight,
)
from healthtwin.numeric import mean, non_negative, round1, round_int
from healthtwin.prediction import (
    DEFAULT_BASELINE_SLEEP,
    DEFAULT_BASELINE_STEPS,
    MOOD_EMOJI,
    predict_scenario,
    predicted_energy,
    simulate_habits,
)

from ..config import get_settings
from ..database import DatabaseManager, get_db
from ..models.forecast import ForecastResponse
from .analytics import resolve_range

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health", tags=["Forecast"])


@router.get("/forecast", response_model=ForecastResponse, response_model_by_alias=True)
async def get_forecast(
    sim_sleep: float = Query(..., ge=0, le=24, description="Sleep hours in the scenario"),
    sim_steps: int = Query(..., ge=0, le=100000, description="Daily steps in the scenario"),
    baseline_sleep: Optional[float] = Query(default=None, ge=0, le=24),
    baseline_steps: Optional[int] = Query(default=None, ge=0, le=100000),
    user_id: Optional[str] = Query(default=None, description="Derive the baseline from this user's recent logs"),
    logged_days: Optional[int] = Query(default=None, ge=0, description="Days of history behind a manual baseline"),
    days: Optional[int] = Query(default=None, ge=1, le=90, description="Forecast length"),
    db: DatabaseManager = Depends(get_db),
):
    """
    Simulate moving from baseline habits to the scenario's sleep and steps.

    When ``user_id`` is given, missing baseline values are the averages of the
    user's recent health entries and the number of logged days drives the
    data confidence. A user with no recent logs gets the default baseline
    of 7h sleep and 6500 steps. Insights built on partial data say so.
    """
    settings = get_settings()
    window = settings.baseline_window_days

    if user_id:
        start, end = resolve_range(None, None, window)
        history = db.get_health_entries_range(user_id, start, end)
        logged_days = len(history)
        if not history:
            log.info(f"[API] No recent logs for {user_id}, using the default baseline")
        if baseline_sleep is None:
            baseline_sleep = (
                round1(mean(non_negative(e.sleep_hours) for e in history))
                if history else DEFAULT_BASELINE_SLEEP
            )
        if baseline_steps is None:
            baseline_steps = (
                round_int(mean(non_negative(e.steps) for e in history))
                if history else DEFAULT_BASELINE_STEPS
            )

    if baseline_sleep is None or baseline_steps is None:
        raise HTTPException(
            status_code=400,
            detail="Provide baseline_sleep and baseline_steps, or a user_id to derive them",
        )
    if logged_days is None:
        logged_days = window

    forecast = simulate_habits(
        baseline_sleep, baseline_steps, sim_sleep, sim_steps,
        days=days or settings.forecast_days,
    )
    prediction = predict_scenario(baseline_sleep, baseline_steps, sim_sleep, sim_steps)
    feasibility = assess_feasibility(sim_sleep, sim_steps, baseline_sleep, baseline_steps)
    data_confidence = assess_data_confidence(logged_days, window)
    avatar = infer_avatar_decision(sim_sleep, prediction.predicted_energy)

    log.info(
        f"[API] Forecast {baseline_sleep}h/{baseline_steps} -> {sim_sleep}h/{sim_steps}: "
        f"impact={prediction.energy_impact}, feasibility={feasibility.confidence.value}, "
        f"data={data_confidence.confidence.value}"
    )

    return ForecastResponse(
        baseline_energy=predicted_energy(baseline_sleep, baseline_steps),
        predicted_energy=prediction.predicted_energy,
        predicted_mood=prediction.predicted_mood,
        predicted_mood_emoji=MOOD_EMOJI.get(prediction.predicted_mood, ""),
        energy_impact=prediction.energy_impact,
        insight=qualify_insight(prediction.narrative, data_confidence),
        forecast=[point.to_dict() for point in forecast],
        feasibility=feasibility.to_dict(),
        data_confidence=data_confidence.to_dict(),
        confidence=lower_confidence(feasibility.confidence, data_confidence.confidence).value,
        avatar=avatar.to_dict(),
    )
