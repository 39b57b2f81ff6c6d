"""API route modules."""
from .academics import router as academics_router
from .wellness import router as wellness_router
from .deadlines import router as deadlines_router
from .reminders import router as reminders_router

__all__ = [
    "academics_router",
    "wellness_router",
    "deadlines_router",
    "reminders_router",
]
