"""Wellness advice routes."""
from fastapi import APIRouter, Depends, Query

from healthtwin.wellness import generate_wellness_analysis

from ..database import DatabaseManager, get_db
from ..models.wellness import WellnessAdviceModel
from .analytics import resolve_range

router = APIRouter(prefix="/api/health", tags=["Wellness Advice"])


@router.get("/wellness/advice", response_model=WellnessAdviceModel, response_model_by_alias=True)
async def get_wellness_advice(
    user_id: str = Query(...),
    days: int = Query(default=7, ge=1, le=30, description="Number of days of history"),
    db: DatabaseManager = Depends(get_db),
):
    """Rule-based wellness narrative, tips and expected outcome for recent entries."""
    start, end = resolve_range(None, None, days)
    analysis = generate_wellness_analysis(
        db.get_health_entries_range(user_id, start, end),
        db.get_moods_range(user_id, start, end),
    )
    return analysis.to_dict()
