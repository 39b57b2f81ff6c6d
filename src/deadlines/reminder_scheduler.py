"""
Deadline Reminder Scheduling Policy.

Turns a deadline into the reminder instructions that should be pending
for it, and lists every instruction id that could ever have been issued
for it so stale reminders can be cancelled unconditionally.

Policy:
- Events (Event, Club, Sport, Other): one reminder shortly before start
- Tasks (everything else): one reminder a day before the due time and
  one on the morning of the due day

No instruction is ever produced with a fire time at or before ``now``.
"""

import logging
from datetime import datetime, timedelta, tzinfo
from typing import List, Optional

from .models import Deadline, ReminderInstruction

logger = logging.getLogger(__name__)

START_SUFFIX = "start"
DAY_BEFORE_SUFFIX = "24h"
MORNING_SUFFIX = "morning"

REMINDER_SUFFIXES = (START_SUFFIX, DAY_BEFORE_SUFFIX, MORNING_SUFFIX)


class ReminderScheduler:
    """
    Pure reminder policy for deadlines.

    Holds no state beyond its configuration and never talks to the
    delivery layer; callers hand the planned instructions over.
    """

    def __init__(
        self,
        event_lead: timedelta = timedelta(minutes=30),
        task_lead: timedelta = timedelta(days=1),
        morning_hour: int = 8,
        tz: Optional[tzinfo] = None,
    ):
        """
        Initialize the scheduler.

        Args:
            event_lead: How long before an event starts to remind
            task_lead: How long before a task is due to remind
            morning_hour: Local hour of the due-day morning reminder
            tz: Student timezone the morning hour is read in; when unset,
                the due date's own timezone is used
        """
        self.event_lead = event_lead
        self.task_lead = task_lead
        self.morning_hour = morning_hour
        self.tz = tz

    def plan(self, deadline: Deadline, now: datetime) -> List[ReminderInstruction]:
        """
        Plan the reminders for a deadline.

        Args:
            deadline: The deadline to remind about
            now: Current time; only strictly later reminders are kept

        Returns:
            Instructions to schedule, empty when the deadline cannot be
            keyed or has no usable due date
        """
        if not deadline.id:
            logger.warning(f"[REMINDERS] Deadline '{deadline.title}' has no id, skipping")
            return []

        if not isinstance(deadline.due_date, datetime):
            logger.warning(
                f"[REMINDERS] Deadline {deadline.id} has no usable due date "
                f"({deadline.due_date!r}), skipping"
            )
            return []

        try:
            if deadline.is_event:
                candidates = [self._start_reminder(deadline)]
            else:
                candidates = [
                    self._day_before_reminder(deadline),
                    self._morning_reminder(deadline),
                ]
            planned = [c for c in candidates if c.fire_at > now]
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning(f"[REMINDERS] Could not plan {deadline.id}: {e}")
            return []

        logger.debug(
            f"[REMINDERS] {deadline.id} ({deadline.type_name}): "
            f"{len(planned)}/{len(candidates)} reminder(s) in the future"
        )
        return planned

    def cancel_ids_for(self, deadline: Deadline) -> List[str]:
        """Every reminder id that could exist for a deadline, of either class."""
        if not deadline.id:
            return []
        return [reminder_id(deadline.id, suffix) for suffix in REMINDER_SUFFIXES]

    def _local_due(self, deadline: Deadline) -> datetime:
        due = deadline.due_date
        if self.tz is not None and due.tzinfo is not None:
            return due.astimezone(self.tz)
        return due

    def _start_reminder(self, deadline: Deadline) -> ReminderInstruction:
        minutes = int(self.event_lead.total_seconds() // 60)
        return ReminderInstruction(
            id=reminder_id(deadline.id, START_SUFFIX),
            fire_at=deadline.due_date - self.event_lead,
            title=f"Upcoming: {deadline.title}",
            body=f"{deadline.type_name} starts in {minutes} minutes.",
        )

    def _day_before_reminder(self, deadline: Deadline) -> ReminderInstruction:
        # Aware datetime arithmetic keeps the wall-clock time across DST
        return ReminderInstruction(
            id=reminder_id(deadline.id, DAY_BEFORE_SUFFIX),
            fire_at=self._local_due(deadline) - self.task_lead,
            title=f"Due Tomorrow: {deadline.title}",
            body=f"Don't forget to finish this {deadline.type_name.lower()}.",
        )

    def _morning_reminder(self, deadline: Deadline) -> ReminderInstruction:
        morning = self._local_due(deadline).replace(
            hour=self.morning_hour, minute=0, second=0, microsecond=0
        )
        return ReminderInstruction(
            id=reminder_id(deadline.id, MORNING_SUFFIX),
            fire_at=morning,
            title=f"Due Today: {deadline.title}",
            body=f"Make sure to turn in your {deadline.type_name.lower()}!",
        )


def reminder_id(deadline_id: str, suffix: str) -> str:
    return f"{deadline_id}_{suffix}"
