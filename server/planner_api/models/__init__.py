"""Pydantic models for planner API requests and responses."""
from .academics import ActivityIn, ActivitySummaryResponse, CourseIn, GPAResponse
from .wellness import GoalProgressOut, StreakRequest, StreakResponse, WellnessLogIn
from .deadlines import (
    CompletionRequest,
    DeadlineIn,
    DeadlineSyncResponse,
    PlanRequest,
    ReminderOut,
    TimelineSlotOut,
)

__all__ = [
    "ActivityIn",
    "ActivitySummaryResponse",
    "CourseIn",
    "GPAResponse",
    "GoalProgressOut",
    "StreakRequest",
    "StreakResponse",
    "WellnessLogIn",
    "CompletionRequest",
    "DeadlineIn",
    "DeadlineSyncResponse",
    "PlanRequest",
    "ReminderOut",
    "TimelineSlotOut",
]
