"""Course and extracurricular activity records."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union


class CourseLevel(str, Enum):
    """Rigor level of a course, used for weighting."""

    REGULAR = "Regular"
    HONORS = "Honors"
    AP = "AP"
    IB = "IB"


@dataclass
class Course:
    """A single academic course."""

    name: str
    course_level: Union[CourseLevel, str] = CourseLevel.REGULAR
    credits: float = 1.0
    grade_percent: Optional[float] = None  # None means no grade entered
    grade_level: int = 9
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def level_name(self) -> str:
        """Course level as its display string."""
        if isinstance(self.course_level, Enum):
            return self.course_level.value
        return str(self.course_level)

    @property
    def is_graded(self) -> bool:
        return self.grade_percent is not None


@dataclass
class Activity:
    """An extracurricular activity (club, sport, service, award)."""

    title: str
    position: str
    type: str
    start_date: datetime
    hours: Optional[float] = None
    end_date: Optional[datetime] = None  # None means ongoing
    description: Optional[str] = None
    id: Optional[str] = None

    @property
    def is_ongoing(self) -> bool:
        return self.end_date is None
