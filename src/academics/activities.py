"""Extracurricular activity summaries."""

from dataclasses import dataclass
from typing import Iterable, List

from .models import Activity


@dataclass
class ActivitySummary:
    """Aggregate figures for an activity list."""

    total_hours: float = 0.0
    active_count: int = 0
    total_count: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "total_hours": self.total_hours,
            "active_count": self.active_count,
            "total_count": self.total_count,
        }


def summarize_activities(activities: Iterable[Activity]) -> ActivitySummary:
    """Total logged hours and number of ongoing activities."""
    summary = ActivitySummary()
    for activity in activities:
        summary.total_count += 1
        summary.total_hours += activity.hours or 0.0
        if activity.is_ongoing:
            summary.active_count += 1
    return summary


def filter_activities(activities: Iterable[Activity], search_text: str) -> List[Activity]:
    """Case-insensitive search over title, type and position."""
    activities = list(activities)
    if not search_text:
        return activities
    needle = search_text.casefold()
    return [
        a for a in activities
        if needle in a.title.casefold()
        or needle in a.type.casefold()
        or needle in a.position.casefold()
    ]
