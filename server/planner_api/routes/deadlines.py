"""Deadline and reminder planning API routes."""
from dataclasses import replace

from fastapi import APIRouter, Depends, HTTPException

from deadlines import layout_timeline

from ..models.deadlines import (
    CompletionRequest,
    DeadlineIn,
    DeadlineSyncResponse,
    PlanRequest,
    ReminderOut,
    TimelineSlotOut,
)
from ..services import PlannerServices, get_services

router = APIRouter(prefix="/api/deadlines", tags=["Deadlines"])


def _sync_response(deadline, reminders) -> DeadlineSyncResponse:
    return DeadlineSyncResponse(
        deadline_id=deadline.id,
        is_completed=deadline.is_completed,
        reminders=[ReminderOut.model_validate(r) for r in reminders],
    )


@router.post("/reminders/plan", response_model=list[ReminderOut])
async def plan_reminders(
    request: PlanRequest,
    services: PlannerServices = Depends(get_services),
):
    """
    Preview the reminders a deadline would get, without scheduling them.

    Events get one reminder before they start; tasks get a day-before
    and a due-morning reminder. Reminders already in the past are dropped.
    """
    deadline = services.prepare(request.deadline.to_domain())
    now = services.localize(request.now) or services.clock.now()
    return [ReminderOut.model_validate(r) for r in services.scheduler.plan(deadline, now)]


@router.post("/reminders/cancel-ids", response_model=list[str])
async def get_cancel_ids(
    deadline: DeadlineIn,
    services: PlannerServices = Depends(get_services),
):
    """Every reminder id that could exist for a deadline."""
    return services.scheduler.cancel_ids_for(deadline.to_domain())


@router.post("/timeline", response_model=list[TimelineSlotOut])
async def get_timeline(
    deadlines: list[DeadlineIn],
    services: PlannerServices = Depends(get_services),
):
    """Place timed deadlines into non-overlapping lanes."""
    records = [services.prepare(d.to_domain()) for d in deadlines]
    return [
        TimelineSlotOut(
            deadline_id=slot.deadline.id,
            title=slot.deadline.title,
            start=slot.start,
            end=slot.end,
            lane=slot.lane,
            lane_count=slot.lane_count,
        )
        for slot in layout_timeline(records)
    ]


@router.put("/{deadline_id}", response_model=DeadlineSyncResponse)
async def save_deadline(
    deadline_id: str,
    deadline: DeadlineIn,
    services: PlannerServices = Depends(get_services),
):
    """Create or update a deadline and reschedule its reminders."""
    record = deadline.to_domain(deadline_id)
    reminders = services.upsert_deadline(record)
    return _sync_response(record, reminders)


@router.delete("/{deadline_id}")
async def delete_deadline(
    deadline_id: str,
    services: PlannerServices = Depends(get_services),
):
    """Delete a deadline and cancel its reminders."""
    if services.delete_deadline(deadline_id) is None:
        raise HTTPException(status_code=404, detail=f"Deadline {deadline_id} not found")
    return {"status": "deleted", "deadline_id": deadline_id}


@router.post("/{deadline_id}/completion", response_model=DeadlineSyncResponse)
async def set_completion(
    deadline_id: str,
    request: CompletionRequest,
    services: PlannerServices = Depends(get_services),
):
    """
    Mark a deadline complete or incomplete.

    Completing clears its reminders; reopening replans them against the
    current time.
    """
    existing = services.get_deadline(deadline_id)
    if existing is None:
        raise HTTPException(status_code=404, detail=f"Deadline {deadline_id} not found")

    updated = replace(existing, is_completed=request.is_completed)
    reminders = services.upsert_deadline(updated)
    return _sync_response(updated, reminders)
