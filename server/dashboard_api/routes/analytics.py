"""Weekly analytics, daily summary and entry listing routes."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from healthtwin.analytics import generate_weekly_analytics, get_daily_summary
from healthtwin.dates import to_day_key, week_bounds

from ..database import DatabaseManager, get_db
from ..models.analytics import DailySummaryModel, WeeklyAnalyticsModel
from ..models.entries import HealthEntryModel, MoodEntryModel

router = APIRouter(prefix="/api/health", tags=["Analytics"])


def resolve_range(start: Optional[str], end: Optional[str], days: int = 7) -> tuple[str, str]:
    """Fill in a missing start/end as a window ending today; bad keys become HTTP 400."""
    try:
        if start and end:
            return to_day_key(start), to_day_key(end)
        if end:
            return week_bounds(end, days)
        if start:
            return to_day_key(start), week_bounds(None, 1)[1]
        return week_bounds(None, days)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/analytics/weekly", response_model=WeeklyAnalyticsModel)
async def get_weekly_analytics(
    user_id: str = Query(..., description="User whose entries are analyzed"),
    start: Optional[str] = Query(default=None, description="First day (YYYY-MM-DD)"),
    end: Optional[str] = Query(default=None, description="Last day (YYYY-MM-DD), defaults to today"),
    db: DatabaseManager = Depends(get_db),
):
    """Weekly energy, emotion, activity and sleep-mood correlation metrics."""
    week_start, week_end = resolve_range(start, end)
    try:
        analytics = generate_weekly_analytics(user_id, week_start, week_end, db, db)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return analytics.to_dict()


@router.get("/analytics/daily", response_model=DailySummaryModel)
async def get_daily_analytics(
    user_id: str = Query(...),
    date: Optional[str] = Query(default=None, description="Day (YYYY-MM-DD), defaults to today"),
    db: DatabaseManager = Depends(get_db),
):
    """Energy and emotion score for a single day."""
    try:
        day = to_day_key(date)
        summary = get_daily_summary(user_id, day, db, db)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return summary.to_dict()


@router.get("/entries/health", response_model=list[HealthEntryModel])
async def get_health_entries(
    user_id: str = Query(...),
    days: int = Query(default=7, ge=1, le=90, description="Number of days of history"),
    db: DatabaseManager = Depends(get_db),
):
    """Health entries for the last N days, newest first."""
    start, end = resolve_range(None, None, days)
    entries = db.get_health_entries_range(user_id, start, end)
    return [entry.to_dict() for entry in reversed(entries)]


@router.get("/entries/mood", response_model=list[MoodEntryModel])
async def get_mood_entries(
    user_id: str = Query(...),
    days: int = Query(default=7, ge=1, le=90, description="Number of days of history"),
    db: DatabaseManager = Depends(get_db),
):
    """Mood entries for the last N days, newest first."""
    start, end = resolve_range(None, None, days)
    entries = db.get_moods_range(user_id, start, end)
    return [entry.to_dict() for entry in reversed(entries)]
