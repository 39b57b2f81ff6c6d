"""
Daily Wellness Goals.

Tracks progress of a day's wellness log toward its sleep, water and
exercise goals, and applies the stepwise metric adjustments made from
the daily log screen.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Dict, Optional, Union

from .models import Mood, WellnessLog, day_key

logger = logging.getLogger(__name__)

# One tap on a metric moves it by this much
METRIC_STEPS: Dict[str, float] = {
    "water_intake": 8,  # one cup, in ounces
    "exercise_minutes": 10,
    "sleep_hours": 0.5,
}

METRIC_UNITS: Dict[str, str] = {
    "sleep_hours": "hours",
    "water_intake": "oz",
    "exercise_minutes": "minutes",
}


@dataclass
class GoalProgress:
    """Current progress toward one daily goal."""

    metric: str
    current_value: float
    target: float
    unit: str

    @property
    def progress_percent(self) -> float:
        """Calculate progress as a percentage."""
        if self.target <= 0:
            return 100.0
        return min((self.current_value / self.target) * 100, 100.0)

    @property
    def remaining(self) -> float:
        return max(self.target - self.current_value, 0)

    @property
    def achieved(self) -> bool:
        return self.current_value >= self.target

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "metric": self.metric,
            "current_value": self.current_value,
            "target": self.target,
            "unit": self.unit,
            "progress_percent": self.progress_percent,
            "remaining": self.remaining,
            "achieved": self.achieved,
        }


def effective_goals(log: WellnessLog) -> Dict[str, float]:
    """Goals for the log's day, falling back to defaults."""
    return {
        "sleep_hours": log.effective_sleep_goal(),
        "water_intake": log.effective_water_goal(),
        "exercise_minutes": log.effective_exercise_goal(),
    }


def goal_progress(log: WellnessLog) -> Dict[str, GoalProgress]:
    """Progress for every tracked metric of a log."""
    return {
        metric: GoalProgress(
            metric=metric,
            current_value=getattr(log, metric),
            target=target,
            unit=METRIC_UNITS[metric],
        )
        for metric, target in effective_goals(log).items()
    }


def adjust_metric(log: WellnessLog, metric: str, steps: int = 1) -> float:
    """
    Compute a metric's value after moving it by whole steps.

    Args:
        log: The day's log
        metric: One of sleep_hours, water_intake, exercise_minutes
        steps: Number of steps; negative to decrease

    Returns:
        The new value, never below zero

    Raises:
        ValueError: If the metric is not adjustable
    """
    if metric not in METRIC_STEPS:
        raise ValueError(f"Unknown wellness metric: {metric}")

    value = max(0, getattr(log, metric) + steps * METRIC_STEPS[metric])
    if metric != "sleep_hours":
        value = int(value)
    return value


def apply_metric(log: WellnessLog, metric: str, steps: int = 1) -> WellnessLog:
    """Return a copy of the log with one metric adjusted."""
    value = adjust_metric(log, metric, steps)
    logger.debug(f"[WELLNESS] {log.id} {metric}: {getattr(log, metric)} -> {value}")
    return replace(log, **{metric: value})


def start_day(
    sleep_hours: float,
    mood: Union[Mood, str],
    now: Optional[datetime] = None,
) -> WellnessLog:
    """Create the first log of a day; water and exercise start at zero."""
    if now is None:
        now = datetime.now().astimezone()

    log = WellnessLog(
        id=day_key(now),
        date=now,
        sleep_hours=sleep_hours,
        water_intake=0,
        exercise_minutes=0,
        mood=mood,
    )
    logger.info(f"[WELLNESS] Started day {log.id} (sleep={sleep_hours}h, mood={mood})")
    return log
