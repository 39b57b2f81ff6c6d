"""Planner collaborators shared by the API routes."""
import logging
import threading
from datetime import datetime
from typing import Optional

from deadlines import Clock, Deadline, ReminderCoordinator, ReminderInstruction, ReminderScheduler, SystemClock
from notifications import NotificationCenter
from sync import PlannerState, SnapshotFeed

from .config import Settings, get_settings

log = logging.getLogger(__name__)


class PlannerServices:
    """
    Wires the reminder policy, notification center and deadline feed.

    Deadline writes are published to the feed as full snapshots; the
    planner state reconciles reminders on every snapshot.
    """

    def __init__(self, settings: Optional[Settings] = None, clock: Optional[Clock] = None):
        self.settings = settings or get_settings()
        self.tz = self.settings.tzinfo
        self.clock = clock or SystemClock(self.tz)

        self.scheduler = ReminderScheduler(
            event_lead=self.settings.event_lead,
            task_lead=self.settings.task_lead,
            morning_hour=self.settings.morning_hour,
            tz=self.tz,
        )
        self.notifications = NotificationCenter(max_history=self.settings.notification_history)
        self.coordinator = ReminderCoordinator(self.notifications, self.clock, self.scheduler)

        self.deadline_feed: SnapshotFeed[Deadline] = SnapshotFeed("deadlines")
        self.planner = PlannerState(self.coordinator, tz=self.tz)
        self.planner.attach(deadlines=self.deadline_feed)

        self._deadlines: dict[str, Deadline] = {}
        self._lock = threading.Lock()

    def localize(self, value: Optional[datetime]) -> Optional[datetime]:
        """Express a timestamp in the student's timezone; naive values are taken as local."""
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=self.tz)
        return value.astimezone(self.tz)

    def prepare(self, deadline: Deadline) -> Deadline:
        deadline.due_date = self.localize(deadline.due_date)
        deadline.end_date = self.localize(deadline.end_date)
        return deadline

    def get_deadline(self, deadline_id: str) -> Optional[Deadline]:
        with self._lock:
            return self._deadlines.get(deadline_id)

    def upsert_deadline(self, deadline: Deadline) -> list[ReminderInstruction]:
        """Store a deadline and return the reminders now pending for it."""
        with self._lock:
            self._deadlines[deadline.id] = self.prepare(deadline)
            # Publish under the lock so snapshots arrive in write order
            self.deadline_feed.publish(list(self._deadlines.values()))
        return self.pending_for(deadline)

    def delete_deadline(self, deadline_id: str) -> Optional[Deadline]:
        with self._lock:
            removed = self._deadlines.pop(deadline_id, None)
            if removed is not None:
                self.deadline_feed.publish(list(self._deadlines.values()))
        if removed is not None:
            log.info(f"Deleted deadline {deadline_id}")
        return removed

    def pending_for(self, deadline: Deadline) -> list[ReminderInstruction]:
        ids = set(self.scheduler.cancel_ids_for(deadline))
        return [i for i in self.notifications.get_pending() if i.id in ids]


_services: Optional[PlannerServices] = None


def get_services() -> PlannerServices:
    """FastAPI dependency returning the process-wide services."""
    global _services
    if _services is None:
        _services = PlannerServices()
    return _services
