"""
Narrative generation.

Public entry point for weekly health stories.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..analytics import WeeklyAnalytics, generate_weekly_analytics
from ..entries import HealthEntryProvider, MoodEntryProvider
from .catalog import DEFAULT_TEMPLATES
from .engine import NarrativeEngine
from .templates import NarrativeCategory, NarrativeSubCategory, NarrativeTemplate

logger = logging.getLogger(__name__)

DEFAULT_USER_NAME = "Friend"

# Shared engine; the catalog is read-only so concurrent use is safe.
narrative_engine = NarrativeEngine()


@dataclass(frozen=True)
class WeeklyStory:
    story: str
    analytics: WeeklyAnalytics

    def to_dict(self) -> dict:
        return {"story": self.story, "analytics": self.analytics.to_dict()}


def generate_weekly_story(
    user_id: str,
    week_start: str,
    week_end: str,
    health_provider: HealthEntryProvider,
    mood_provider: MoodEntryProvider,
    user_name_lookup: Optional[Callable[[str], Optional[str]]] = None,
    engine: Optional[NarrativeEngine] = None,
) -> WeeklyStory:
    """
    Generate a weekly story for a user.

    Args:
        user_id: User whose entries are analyzed
        week_start: First day key of the week
        week_end: Last day key of the week (inclusive)
        health_provider: Source of health entries
        mood_provider: Source of mood entries
        user_name_lookup: Returns the user's display name, or None
        engine: Narrative engine to use (defaults to the shared one)

    Returns:
        WeeklyStory with the story text and the analytics it was built from
    """
    user_name = None
    if user_name_lookup is not None:
        user_name = user_name_lookup(user_id)
    user_name = user_name or DEFAULT_USER_NAME

    analytics = generate_weekly_analytics(
        user_id, week_start, week_end, health_provider, mood_provider
    )
    story = (engine or narrative_engine).generate_story(analytics, user_name)
    return WeeklyStory(story=story, analytics=analytics)


__all__ = [
    "DEFAULT_TEMPLATES",
    "DEFAULT_USER_NAME",
    "NarrativeCategory",
    "NarrativeEngine",
    "NarrativeSubCategory",
    "NarrativeTemplate",
    "WeeklyStory",
    "generate_weekly_story",
    "narrative_engine",
]
