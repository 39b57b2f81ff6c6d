"""Academics API routes."""
from fastapi import APIRouter

from academics import compute_gpa, summarize_activities

from ..models.academics import ActivityIn, ActivitySummaryResponse, CourseIn, GPAResponse

router = APIRouter(prefix="/api/academics", tags=["Academics"])


@router.post("/gpa", response_model=GPAResponse)
async def calculate_gpa(courses: list[CourseIn]):
    """
    Calculate unweighted and weighted GPA for the given courses.

    Ungraded courses are ignored; with nothing graded both values are "0.00".
    """
    records = [c.to_domain() for c in courses]
    gpa = compute_gpa(records)
    return GPAResponse(
        unweighted=gpa.unweighted,
        weighted=gpa.weighted,
        graded_courses=sum(1 for c in records if c.is_graded),
        total_courses=len(records),
    )


@router.post("/activities/summary", response_model=ActivitySummaryResponse)
async def summarize_activity_list(activities: list[ActivityIn]):
    """Total hours and ongoing count for extracurricular activities."""
    summary = summarize_activities(a.to_domain() for a in activities)
    return ActivitySummaryResponse(
        total_hours=summary.total_hours,
        active_count=summary.active_count,
        total_count=summary.total_count,
    )
