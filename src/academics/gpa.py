"""
GPA Calculation Engine.

Converts a collection of course records into unweighted and weighted
GPA figures, credit-weighted and formatted to two decimal places.

Grades may be entered either on a GPA scale (0.0-5.0) or as a
percentage. The scale is detected per course from the value alone, so
a percentage of 4.5 is read as a 4.5 GPA.
"""

import logging
from typing import Iterable, List, NamedTuple, Tuple, Union

from .models import Course, CourseLevel

logger = logging.getLogger(__name__)


class GPA(NamedTuple):
    """Formatted GPA pair."""

    unweighted: str
    weighted: str


ZERO_GPA = GPA("0.00", "0.00")

# Percentage breakpoints, checked top-down, first match wins
PERCENT_BREAKPOINTS: List[Tuple[float, float]] = [
    (93.0, 4.0),
    (90.0, 3.7),
    (87.0, 3.3),
    (83.0, 3.0),
    (80.0, 2.7),
    (77.0, 2.3),
    (73.0, 2.0),
    (70.0, 1.7),
    (67.0, 1.3),
    (65.0, 1.0),
]

# Bonus added to the unweighted point by course level
LEVEL_BONUS = {
    CourseLevel.HONORS.value: 0.5,
    CourseLevel.AP.value: 1.0,
    CourseLevel.IB.value: 1.0,
}

GPA_SCALE_MAX = 5.0


def percent_to_point(percent: float) -> float:
    """Map a percentage grade to a 4.0-scale point."""
    for threshold, point in PERCENT_BREAKPOINTS:
        if percent >= threshold:
            return point
    return 0.0


def grade_points(
    grade: float, level: Union[CourseLevel, str]
) -> Tuple[float, float]:
    """
    Compute the per-course grade points.

    Args:
        grade: Grade on either the GPA scale (0.0-5.0) or a percentage
        level: Course level (Regular, Honors, AP, IB)

    Returns:
        Tuple of (unweighted_point, weighted_point)
    """
    if 0.0 <= grade <= GPA_SCALE_MAX:
        unweighted = grade
    else:
        unweighted = percent_to_point(grade)

    level_name = level.value if isinstance(level, CourseLevel) else str(level)
    weighted = unweighted + LEVEL_BONUS.get(level_name, 0.0)
    return unweighted, weighted


def compute_gpa(courses: Iterable[Course]) -> GPA:
    """
    Compute unweighted and weighted GPA for a set of courses.

    Courses without a grade are ignored. Returns ("0.00", "0.00") when
    nothing is graded or the graded courses carry no credits.
    """
    graded = [c for c in courses if c.grade_percent is not None]
    if not graded:
        return ZERO_GPA

    total_unweighted = 0.0
    total_weighted = 0.0
    total_credits = 0.0

    for course in graded:
        unweighted, weighted = grade_points(course.grade_percent, course.course_level)
        total_unweighted += unweighted * course.credits
        total_weighted += weighted * course.credits
        total_credits += course.credits

    if total_credits <= 0:
        logger.debug(f"[GPA] {len(graded)} graded course(s) carry no credits")
        return ZERO_GPA

    result = GPA(
        f"{total_unweighted / total_credits:.2f}",
        f"{total_weighted / total_credits:.2f}",
    )
    logger.debug(
        f"[GPA] {len(graded)} graded course(s), {total_credits} credits -> "
        f"unweighted={result.unweighted} weighted={result.weighted}"
    )
    return result


def compute_weighted_gpa(courses: Iterable[Course]) -> str:
    return compute_gpa(courses).weighted


def compute_unweighted_gpa(courses: Iterable[Course]) -> str:
    return compute_gpa(courses).unweighted


def filter_courses(courses: Iterable[Course], search_text: str) -> List[Course]:
    """Case-insensitive search over course name and level."""
    courses = list(courses)
    if not search_text:
        return courses
    needle = search_text.casefold()
    return [
        c for c in courses
        if needle in c.name.casefold() or needle in c.level_name.casefold()
    ]
