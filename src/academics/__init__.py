"""
Academics Module.

Course records, GPA calculation and extracurricular activity summaries.
"""

from .models import Activity, Course, CourseLevel
from .gpa import (
    GPA,
    compute_gpa,
    compute_unweighted_gpa,
    compute_weighted_gpa,
    filter_courses,
    grade_points,
)
from .activities import ActivitySummary, filter_activities, summarize_activities

__all__ = [
    "Activity",
    "Course",
    "CourseLevel",
    "GPA",
    "compute_gpa",
    "compute_unweighted_gpa",
    "compute_weighted_gpa",
    "filter_courses",
    "grade_points",
    "ActivitySummary",
    "filter_activities",
    "summarize_activities",
]
