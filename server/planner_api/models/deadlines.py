"""Deadline and reminder request/response models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from deadlines import Deadline, DeadlineType, Priority


class DeadlineIn(BaseModel):
    """Deadline or event as sent by the client."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    title: str
    type: DeadlineType
    due_date: Optional[datetime] = Field(default=None, alias="dueDate")
    end_date: Optional[datetime] = Field(default=None, alias="endDate")
    is_all_day: bool = Field(default=False, alias="isAllDay")
    is_completed: bool = Field(default=False, alias="isCompleted")
    priority: Optional[Priority] = None
    course_id: Optional[str] = Field(default=None, alias="courseId")
    details: Optional[str] = None

    def to_domain(self, deadline_id: Optional[str] = None) -> Deadline:
        return Deadline(
            id=deadline_id or self.id,
            title=self.title,
            type=self.type,
            due_date=self.due_date,
            end_date=self.end_date,
            is_all_day=self.is_all_day,
            is_completed=self.is_completed,
            priority=self.priority,
            course_id=self.course_id,
            details=self.details,
        )


class PlanRequest(BaseModel):
    """A deadline to plan reminders for, optionally as of a given instant."""

    deadline: DeadlineIn
    now: Optional[datetime] = None


class ReminderOut(BaseModel):
    """A reminder instruction."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    fire_at: datetime = Field(serialization_alias="fireAt")
    title: str
    body: str


class CompletionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_completed: bool = Field(alias="isCompleted")


class DeadlineSyncResponse(BaseModel):
    """Reminders pending for a deadline after a write."""

    model_config = ConfigDict(populate_by_name=True)

    deadline_id: str = Field(serialization_alias="deadlineId")
    is_completed: bool = Field(serialization_alias="isCompleted")
    reminders: list[ReminderOut]


class TimelineSlotOut(BaseModel):
    """A deadline placed on the day timeline."""

    model_config = ConfigDict(populate_by_name=True)

    deadline_id: Optional[str] = Field(serialization_alias="deadlineId")
    title: str
    start: datetime
    end: datetime
    lane: int
    lane_count: int = Field(serialization_alias="laneCount")
