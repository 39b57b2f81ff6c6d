"""Wellness API routes."""
from fastapi import APIRouter, Depends

from wellness import compute_streak, goal_progress

from ..models.wellness import GoalProgressOut, StreakRequest, StreakResponse, WellnessLogIn
from ..services import PlannerServices, get_services

router = APIRouter(prefix="/api/wellness", tags=["Wellness"])


@router.post("/streak", response_model=StreakResponse)
async def calculate_streak(
    request: StreakRequest,
    services: PlannerServices = Depends(get_services),
):
    """
    Count consecutive logged days ending today (or at ``asOf``).

    Days are evaluated in the configured timezone.
    """
    as_of = services.localize(request.as_of) or services.clock.now()
    logs = [entry.to_domain() for entry in request.logs]
    return StreakResponse(streak=compute_streak(logs, as_of, services.tz), as_of=as_of)


@router.post("/progress", response_model=list[GoalProgressOut])
async def get_goal_progress(log: WellnessLogIn):
    """Progress of a day's log toward its sleep, water and exercise goals."""
    progress = goal_progress(log.to_domain())
    return [GoalProgressOut.model_validate(p) for p in progress.values()]
