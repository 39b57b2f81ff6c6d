"""Daily wellness log records."""

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from enum import Enum
from typing import Optional, Union


class Mood(str, Enum):
    """Self-reported mood for the day."""

    ENERGIZED = "Energized"
    CONTENT = "Content"
    TIRED = "Tired"
    STRESSED = "Stressed"
    ANXIOUS = "Anxious"


DEFAULT_SLEEP_GOAL = 8.0  # hours
DEFAULT_WATER_GOAL = 64  # ounces
DEFAULT_EXERCISE_GOAL = 60  # minutes


def local_day(value: Union[datetime, date], tz: Optional[tzinfo] = None) -> date:
    """
    Truncate a timestamp to its calendar day.

    Aware datetimes are converted to ``tz`` first when one is given.
    Naive datetimes are taken as already local.
    """
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def day_key(value: Union[datetime, date], tz: Optional[tzinfo] = None) -> str:
    """Canonical "YYYY-MM-DD" document key for a day."""
    return local_day(value, tz).isoformat()


@dataclass
class WellnessLog:
    """One wellness record per calendar day, keyed by its date."""

    date: Union[datetime, date]
    sleep_hours: float = 0.0
    water_intake: int = 0  # ounces
    exercise_minutes: int = 0
    mood: Union[Mood, str] = Mood.CONTENT
    id: Optional[str] = None

    # Per-user custom goals, defaults apply when unset
    sleep_goal: Optional[float] = None
    water_goal: Optional[int] = None
    exercise_goal: Optional[int] = None

    def __post_init__(self):
        if self.id is None:
            self.id = day_key(self.date)

    def effective_sleep_goal(self) -> float:
        return self.sleep_goal if self.sleep_goal is not None else DEFAULT_SLEEP_GOAL

    def effective_water_goal(self) -> int:
        return self.water_goal if self.water_goal is not None else DEFAULT_WATER_GOAL

    def effective_exercise_goal(self) -> int:
        return self.exercise_goal if self.exercise_goal is not None else DEFAULT_EXERCISE_GOAL
