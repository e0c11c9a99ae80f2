"""API route modules."""
from .analytics import router as analytics_router
from .story import router as story_router
from .forecast import router as forecast_router
from .wellness import router as wellness_router
from .progress import router as progress_router

__all__ = [
    "analytics_router",
    "story_router",
    "forecast_router",
    "wellness_router",
    "progress_router",
]
