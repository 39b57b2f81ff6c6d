"""Deadline records and reminder instructions."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional, Union


class DeadlineType(str, Enum):
    """Kind of schedulable item."""

    HOMEWORK = "Homework"
    TEST = "Test"
    PROJECT = "Project"
    ESSAY = "Essay"
    APPLICATION = "Application"
    EVENT = "Event"
    CLUB = "Club"
    SPORT = "Sport"
    OTHER = "Other"


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Types shown as time-spanning occurrences rather than due instants
EVENT_CLASS_TYPES = frozenset(
    t.value for t in (DeadlineType.EVENT, DeadlineType.CLUB, DeadlineType.SPORT, DeadlineType.OTHER)
)


def type_name(deadline_type: Union[DeadlineType, str]) -> str:
    if isinstance(deadline_type, Enum):
        return deadline_type.value
    return str(deadline_type)


def is_event_class(deadline_type: Union[DeadlineType, str]) -> bool:
    """True for Event, Club, Sport and Other; every other type is a task."""
    return type_name(deadline_type) in EVENT_CLASS_TYPES


@dataclass
class Deadline:
    """
    A task or event with an optional time window.

    For tasks ``due_date`` is the due instant; for events it is the
    start, with ``end_date`` closing the window.
    """

    title: str
    type: Union[DeadlineType, str]
    due_date: Optional[datetime]
    id: Optional[str] = None
    end_date: Optional[datetime] = None
    is_all_day: bool = False
    is_completed: bool = False
    priority: Optional[Union[Priority, str]] = None
    course_id: Optional[str] = None
    details: Optional[str] = None

    @property
    def type_name(self) -> str:
        return type_name(self.type)

    @property
    def is_event(self) -> bool:
        return is_event_class(self.type)


@dataclass(frozen=True)
class ReminderInstruction:
    """A single time-triggered notification to hand to delivery."""

    id: str
    fire_at: datetime
    title: str
    body: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "fire_at": self.fire_at.isoformat(),
            "title": self.title,
            "body": self.body,
        }


def filter_deadlines(deadlines: Iterable[Deadline], search_text: str) -> List[Deadline]:
    """Case-insensitive search over title and type."""
    deadlines = list(deadlines)
    if not search_text:
        return deadlines
    needle = search_text.casefold()
    return [
        d for d in deadlines
        if needle in d.title.casefold() or needle in d.type_name.casefold()
    ]
