"""
Wellness Module.

Daily wellness logs, logging streaks and progress toward daily goals.
"""

from .models import Mood, WellnessLog, day_key, local_day
from .streak import StreakCache, compute_streak
from .goals import (
    GoalProgress,
    adjust_metric,
    apply_metric,
    effective_goals,
    goal_progress,
    start_day,
)

__all__ = [
    "Mood",
    "WellnessLog",
    "day_key",
    "local_day",
    "StreakCache",
    "compute_streak",
    "GoalProgress",
    "adjust_metric",
    "apply_metric",
    "effective_goals",
    "goal_progress",
    "start_day",
]
