"""Pending reminder API routes, including a real-time SSE change stream."""
import json

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from ..models.deadlines import ReminderOut
from ..services import PlannerServices, get_services

router = APIRouter(prefix="/api/reminders", tags=["Reminders"])


@router.get("", response_model=list[ReminderOut])
async def list_pending_reminders(services: PlannerServices = Depends(get_services)):
    """All pending reminders, earliest first."""
    return [ReminderOut.model_validate(r) for r in services.notifications.get_pending()]


@router.post("/deliver", response_model=list[ReminderOut])
async def deliver_due_reminders(services: PlannerServices = Depends(get_services)):
    """Fire every pending reminder whose time has arrived."""
    delivered = services.notifications.due(services.clock.now())
    return [ReminderOut.model_validate(r) for r in delivered]


@router.get("/stream")
async def stream_reminder_events(
    include_history: bool = Query(True, description="Include recent events on connect"),
    history_count: int = Query(10, ge=0, le=50, description="Number of historical events"),
    services: PlannerServices = Depends(get_services),
):
    """
    Stream reminder changes via Server-Sent Events (SSE).

    Each event reports a reminder being scheduled, cancelled or delivered.
    The stream never closes - clients should handle reconnection.

    Usage with curl:
        curl -N http://localhost:8083/api/reminders/stream
    """
    async def event_generator():
        async for event in services.notifications.subscribe(
            include_history=include_history,
            history_count=history_count
        ):
            data = json.dumps(event.to_dict())
            yield f"event: reminder\ndata: {data}\n\n"

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        }
    )


@router.get("/history")
async def get_reminder_history(
    count: int = Query(50, ge=1, le=100, description="Number of events to return"),
    services: PlannerServices = Depends(get_services),
):
    """Recent reminder changes, newest first."""
    return [event.to_dict() for event in services.notifications.get_history(count)]


@router.get("/stats")
async def get_reminder_stats(services: PlannerServices = Depends(get_services)):
    """Counts of scheduled, cancelled and delivered reminders."""
    return services.notifications.get_stats()
