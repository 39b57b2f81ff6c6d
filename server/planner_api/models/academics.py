"""Course and activity request/response models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from academics import Activity, Course, CourseLevel


class CourseIn(BaseModel):
    """Course record as sent by the client."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: str
    grade_level: int = Field(default=9, ge=9, le=12, alias="gradeLevel")
    course_level: CourseLevel = Field(default=CourseLevel.REGULAR, alias="courseLevel")
    credits: float = Field(default=1.0, ge=0)
    grade_percent: Optional[float] = Field(default=None, alias="gradePercent")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    def to_domain(self) -> Course:
        course = Course(
            id=self.id,
            name=self.name,
            grade_level=self.grade_level,
            course_level=self.course_level,
            credits=self.credits,
            grade_percent=self.grade_percent,
        )
        if self.created_at is not None:
            course.created_at = self.created_at
        return course


class GPAResponse(BaseModel):
    """Unweighted and weighted GPA, formatted to two decimals."""

    model_config = ConfigDict(populate_by_name=True)

    unweighted: str
    weighted: str
    graded_courses: int = Field(serialization_alias="gradedCourses")
    total_courses: int = Field(serialization_alias="totalCourses")


class ActivityIn(BaseModel):
    """Extracurricular activity as sent by the client."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    title: str
    position: str = ""
    type: str
    hours: Optional[float] = Field(default=None, ge=0)
    start_date: datetime = Field(alias="startDate")
    end_date: Optional[datetime] = Field(default=None, alias="endDate")
    description: Optional[str] = None

    def to_domain(self) -> Activity:
        return Activity(
            id=self.id,
            title=self.title,
            position=self.position,
            type=self.type,
            hours=self.hours,
            start_date=self.start_date,
            end_date=self.end_date,
            description=self.description,
        )


class ActivitySummaryResponse(BaseModel):
    """Aggregated activity figures."""

    model_config = ConfigDict(populate_by_name=True)

    total_hours: float = Field(serialization_alias="totalHours")
    active_count: int = Field(serialization_alias="activeCount")
    total_count: int = Field(serialization_alias="totalCount")
