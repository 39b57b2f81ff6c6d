"""
Reminder Coordination.

Keeps the delivery layer's pending reminders in step with deadline
changes. Every change runs as cancel-then-replan: all ids the deadline
could ever have issued are cancelled before the current state is
planned, so type changes and edits never leave stale reminders behind.

The pair runs under a per-deadline lock, and an update that has been
overtaken by a newer one for the same deadline is discarded.
"""

import itertools
import logging
import threading
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple

from .clock import Clock, SystemClock
from .models import Deadline, ReminderInstruction
from .reminder_scheduler import ReminderScheduler

logger = logging.getLogger(__name__)


class ReminderCoordinator:
    """
    Applies the reminder policy to a notification-delivery collaborator.

    The delivery port and clock are injected; nothing here is global.
    """

    def __init__(
        self,
        delivery,
        clock: Optional[Clock] = None,
        scheduler: Optional[ReminderScheduler] = None,
    ):
        """
        Initialize the coordinator.

        Args:
            delivery: Object with ``schedule(instruction)`` and ``cancel(ids)``
            clock: Source of the current time (defaults to the system clock)
            scheduler: Reminder policy (defaults to standard lead times)
        """
        self.delivery = delivery
        self.clock = clock or SystemClock()
        self.scheduler = scheduler or ReminderScheduler()

        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}
        self._latest: Dict[str, int] = {}
        self._tokens = itertools.count(1)

        self.superseded = 0

    def _claim(self, deadline_id: str) -> Tuple[threading.Lock, int]:
        """Register a new update for a deadline and return its lock and token."""
        with self._guard:
            token = next(self._tokens)
            self._latest[deadline_id] = token
            lock = self._locks.setdefault(deadline_id, threading.Lock())
        return lock, token

    def _is_latest(self, deadline_id: str, token: int) -> bool:
        with self._guard:
            return self._latest.get(deadline_id) == token

    def sync(self, deadline: Deadline) -> List[ReminderInstruction]:
        """
        Cancel every reminder for a deadline, then schedule its current plan.

        Completed deadlines are only cancelled.

        Returns:
            Instructions handed to delivery (empty when superseded)
        """
        if not deadline.id:
            logger.warning(f"[REMINDERS] Cannot sync '{deadline.title}' without an id")
            return []

        lock, token = self._claim(deadline.id)
        with lock:
            if not self._is_latest(deadline.id, token):
                with self._guard:
                    self.superseded += 1
                logger.info(f"[REMINDERS] Discarding superseded update for {deadline.id}")
                return []

            self.delivery.cancel(self.scheduler.cancel_ids_for(deadline))

            if deadline.is_completed:
                logger.info(f"[REMINDERS] {deadline.id} completed, reminders cleared")
                return []

            instructions = self.scheduler.plan(deadline, self.clock.now())
            for instruction in instructions:
                self.delivery.schedule(instruction)

        logger.info(
            f"[REMINDERS] Synced {deadline.id} ({deadline.type_name}): "
            f"{len(instructions)} reminder(s) scheduled"
        )
        return instructions

    def remove(self, deadline: Deadline) -> None:
        """
        Cancel every reminder of a deleted deadline.

        Skipped when a newer update for the same id has been claimed.
        Otherwise the id's lock and token are released afterwards.
        """
        if not deadline.id:
            return

        lock, token = self._claim(deadline.id)
        with lock:
            if not self._is_latest(deadline.id, token):
                with self._guard:
                    self.superseded += 1
                logger.info(f"[REMINDERS] Discarding superseded removal of {deadline.id}")
                return

            self.delivery.cancel(self.scheduler.cancel_ids_for(deadline))

            with self._guard:
                if self._latest.get(deadline.id) == token:
                    del self._latest[deadline.id]
                    del self._locks[deadline.id]
        logger.info(f"[REMINDERS] Removed reminders for {deadline.id}")

    def set_completed(
        self, deadline: Deadline, completed: bool
    ) -> Tuple[Deadline, List[ReminderInstruction]]:
        """
        Toggle completion and resync.

        Completing clears all reminders; reopening replans against the
        current time.

        Returns:
            The updated deadline and the instructions now scheduled
        """
        updated = replace(deadline, is_completed=completed)
        return updated, self.sync(updated)

    def sync_all(
        self,
        previous: Iterable[Deadline],
        current: Iterable[Deadline],
    ) -> Dict[str, List[ReminderInstruction]]:
        """
        Reconcile reminders between two full deadline snapshots.

        Deadlines missing from ``current`` are cancelled; new or changed
        ones are resynced; unchanged ones are left alone.

        Returns:
            Instructions scheduled, by deadline id
        """
        before = {d.id: d for d in previous if d.id}
        after = {d.id: d for d in current if d.id}

        for deadline_id in before.keys() - after.keys():
            self.remove(before[deadline_id])

        scheduled = {}
        for deadline_id, deadline in after.items():
            if before.get(deadline_id) == deadline:
                continue
            scheduled[deadline_id] = self.sync(deadline)

        logger.debug(
            f"[REMINDERS] Snapshot reconciled: {len(scheduled)} changed, "
            f"{len(before.keys() - after.keys())} removed"
        )
        return scheduled
