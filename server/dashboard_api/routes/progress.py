"""Logging streak and achievement routes."""
import logging

from fastapi import APIRouter, Depends, Query

from healthtwin.achievements import get_achievements
from healthtwin.dates import to_day_key
from healthtwin.streaks import get_logging_streak

from ..config import get_settings
from ..database import DatabaseManager, get_db
from ..models.progress import AchievementsModel, StreakModel

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health", tags=["Progress"])


@router.get("/streak", response_model=StreakModel, response_model_by_alias=True)
async def get_streak(
    user_id: str = Query(...),
    db: DatabaseManager = Depends(get_db),
):
    """Current and longest runs of consecutive days with a health entry."""
    settings = get_settings()
    streak = get_logging_streak(user_id, to_day_key(), db, settings.streak_lookback_days)
    return streak.to_dict()


@router.get("/achievements", response_model=AchievementsModel, response_model_by_alias=True)
async def get_user_achievements(
    user_id: str = Query(...),
    db: DatabaseManager = Depends(get_db),
):
    """Badges unlocked by the user's logged history."""
    settings = get_settings()
    summary = get_achievements(user_id, to_day_key(), db, db, settings.streak_lookback_days)
    log.info(f"[API] Achievements for {user_id}: {summary.unlocked_count}/{summary.total_badges}")
    return summary.to_dict()
