"""Thread-safe in-memory notification center.

Implements the notification-delivery port used by reminder scheduling:
pending reminders are held by id, and every change is published to
subscribers so it can be streamed to connected clients via SSE.
"""
import asyncio
import logging
import threading
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import AsyncIterator, Iterable, Optional, Protocol

from deadlines.models import ReminderInstruction

logger = logging.getLogger(__name__)


class NotificationDelivery(Protocol):
    """Port to whatever actually fires notifications."""

    def schedule(self, instruction: ReminderInstruction) -> None:
        """Schedule an instruction; idempotent by instruction id."""
        ...

    def cancel(self, ids: Iterable[str]) -> None:
        """Cancel pending instructions; unknown ids are ignored."""
        ...


class NotificationEventType(str, Enum):
    """Kinds of notification center changes."""
    SCHEDULED = "scheduled"
    CANCELLED = "cancelled"
    DELIVERED = "delivered"


@dataclass
class NotificationEvent:
    """A change to the set of pending reminders."""

    event_type: NotificationEventType
    reminder_id: str
    instruction: Optional[ReminderInstruction] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "id": self.id,
            "event_type": self.event_type.value,
            "reminder_id": self.reminder_id,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.instruction is not None:
            result["instruction"] = self.instruction.to_dict()
        return result


class NotificationCenter:
    """In-memory notification delivery with a pub/sub change feed.

    Supports multiple SSE subscribers and maintains a history buffer
    for new connections to catch up on recent changes.
    """

    def __init__(self, max_history: int = 100):
        """Initialize the notification center.

        Args:
            max_history: Maximum number of events to keep in history buffer.
        """
        self._pending: dict[str, ReminderInstruction] = {}
        self._history: deque[NotificationEvent] = deque(maxlen=max_history)
        self._subscribers: list[asyncio.Queue] = []
        self._lock = threading.Lock()
        self._stats = {
            "total_scheduled": 0,
            "total_cancelled": 0,
            "total_delivered": 0,
            "total_subscribers": 0,
        }

    def schedule(self, instruction: ReminderInstruction) -> None:
        """Schedule a reminder, replacing any pending one with the same id.

        Thread-safe method that can be called from any thread.
        """
        with self._lock:
            if self._pending.get(instruction.id) == instruction:
                return
            self._pending[instruction.id] = instruction
            self._stats["total_scheduled"] += 1
            self._publish(NotificationEvent(
                event_type=NotificationEventType.SCHEDULED,
                reminder_id=instruction.id,
                instruction=instruction,
            ))
        logger.info(f"[NOTIFY] Scheduled {instruction.id} at {instruction.fire_at.isoformat()}")

    def cancel(self, ids: Iterable[str]) -> None:
        """Cancel pending reminders; ids that are not pending are ignored."""
        cancelled = []
        with self._lock:
            for reminder_id in ids:
                if self._pending.pop(reminder_id, None) is None:
                    continue
                cancelled.append(reminder_id)
                self._stats["total_cancelled"] += 1
                self._publish(NotificationEvent(
                    event_type=NotificationEventType.CANCELLED,
                    reminder_id=reminder_id,
                ))
        if cancelled:
            logger.info(f"[NOTIFY] Cancelled {', '.join(cancelled)}")

    def due(self, now: datetime) -> list[ReminderInstruction]:
        """Pop every pending reminder whose fire time has arrived.

        Args:
            now: Current time.

        Returns:
            Delivered instructions, earliest first.
        """
        with self._lock:
            ready = sorted(
                (i for i in self._pending.values() if i.fire_at <= now),
                key=lambda i: i.fire_at,
            )
            for instruction in ready:
                del self._pending[instruction.id]
                self._stats["total_delivered"] += 1
                self._publish(NotificationEvent(
                    event_type=NotificationEventType.DELIVERED,
                    reminder_id=instruction.id,
                    instruction=instruction,
                ))
        for instruction in ready:
            logger.info(f"[NOTIFY] Delivered {instruction.id}: {instruction.title}")
        return ready

    def _publish(self, event: NotificationEvent) -> None:
        # Caller holds the lock
        self._history.append(event)

        dead_subscribers = []
        for queue in self._subscribers:
            try:
                queue.put_nowait(event)
            except asyncio.QueueFull:
                dead_subscribers.append(queue)

        for queue in dead_subscribers:
            self._subscribers.remove(queue)

    async def subscribe(
        self,
        include_history: bool = True,
        history_count: int = 10
    ) -> AsyncIterator[NotificationEvent]:
        """Subscribe to notification changes via async generator.

        Args:
            include_history: Whether to yield recent events first.
            history_count: Number of recent events to include from history.

        Yields:
            NotificationEvent objects as they arrive.
        """
        queue: asyncio.Queue[NotificationEvent] = asyncio.Queue(maxsize=100)

        with self._lock:
            self._subscribers.append(queue)
            self._stats["total_subscribers"] += 1

            if include_history and history_count > 0:
                for event in list(self._history)[-history_count:]:
                    queue.put_nowait(event)

        try:
            while True:
                event = await queue.get()
                yield event
        finally:
            with self._lock:
                if queue in self._subscribers:
                    self._subscribers.remove(queue)

    def get_pending(self) -> list[ReminderInstruction]:
        """Pending reminders, earliest first."""
        with self._lock:
            return sorted(self._pending.values(), key=lambda i: i.fire_at)

    def is_pending(self, reminder_id: str) -> bool:
        with self._lock:
            return reminder_id in self._pending

    def get_history(self, count: int = 50) -> list[NotificationEvent]:
        """Get recent events from history, newest first."""
        with self._lock:
            return list(self._history)[-count:][::-1]

    def get_stats(self) -> dict:
        """Get notification center statistics."""
        with self._lock:
            return {
                **self._stats,
                "pending": len(self._pending),
                "current_subscribers": len(self._subscribers),
                "history_size": len(self._history),
            }

    def clear(self) -> None:
        """Drop all pending reminders and history."""
        with self._lock:
            self._pending.clear()
            self._history.clear()
