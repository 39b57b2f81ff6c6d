"""
Day timeline windows for deadlines.

Events occupy their real window; tasks occupy a nominal slot at their
due time. Every window is at least ``MIN_DURATION`` long, so an event
whose end precedes its start never yields a negative span.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Tuple

from .models import Deadline

DEFAULT_EVENT_DURATION = timedelta(hours=1)
TASK_SLOT = timedelta(minutes=30)
MIN_DURATION = timedelta(minutes=15)


@dataclass
class TimelineSlot:
    """A deadline placed in a timeline lane."""

    deadline: Deadline
    start: datetime
    end: datetime
    lane: int
    lane_count: int = 1

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "deadline_id": self.deadline.id,
            "title": self.deadline.title,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "lane": self.lane,
            "lane_count": self.lane_count,
        }


def event_window(deadline: Deadline) -> Tuple[datetime, datetime]:
    """Start and end of the time a deadline occupies."""
    start = deadline.due_date
    if deadline.is_event:
        end = deadline.end_date or start + DEFAULT_EVENT_DURATION
    else:
        end = start + TASK_SLOT

    if end - start < MIN_DURATION:
        end = start + MIN_DURATION
    return start, end


def layout_timeline(deadlines: Iterable[Deadline]) -> List[TimelineSlot]:
    """
    Place timed deadlines into non-overlapping lanes.

    Items are taken in start order and go into the first lane whose
    last item has ended. All-day items and items without a due date
    are left out.
    """
    timed = sorted(
        (d for d in deadlines if not d.is_all_day and isinstance(d.due_date, datetime)),
        key=lambda d: d.due_date,
    )

    slots: List[TimelineSlot] = []
    lane_ends: List[datetime] = []

    for deadline in timed:
        start, end = event_window(deadline)
        for lane, lane_end in enumerate(lane_ends):
            if start >= lane_end:
                lane_ends[lane] = end
                break
        else:
            lane = len(lane_ends)
            lane_ends.append(end)
        slots.append(TimelineSlot(deadline=deadline, start=start, end=end, lane=lane))

    for slot in slots:
        slot.lane_count = len(lane_ends)
    return slots


def all_day_items(deadlines: Iterable[Deadline]) -> List[Deadline]:
    return [d for d in deadlines if d.is_all_day]
