"""Weekly story routes."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from healthtwin.narrative import NarrativeEngine, generate_weekly_story, narrative_engine

from ..config import get_settings
from ..database import DatabaseManager, get_db
from ..models.analytics import WeeklyStoryModel
from .analytics import resolve_range

router = APIRouter(prefix="/api/health", tags=["Weekly Story"])


def get_narrative_engine() -> NarrativeEngine:
    """FastAPI dependency returning the shared narrative engine."""
    return narrative_engine


@router.get("/story/weekly", response_model=WeeklyStoryModel)
async def get_weekly_story(
    user_id: str = Query(...),
    start: Optional[str] = Query(default=None),
    end: Optional[str] = Query(default=None),
    db: DatabaseManager = Depends(get_db),
    engine: NarrativeEngine = Depends(get_narrative_engine),
):
    """
    Generate the narrative story for a user's week.

    Sections are picked at random among the templates that fit the week,
    so repeated calls can word the story differently.
    """
    week_start, week_end = resolve_range(start, end)
    settings = get_settings()

    def lookup_name(uid: str) -> Optional[str]:
        return db.get_user_name(uid) or settings.default_user_name

    try:
        result = generate_weekly_story(
            user_id, week_start, week_end, db, db,
            user_name_lookup=lookup_name, engine=engine,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return result.to_dict()
