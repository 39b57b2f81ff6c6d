"""
Deadlines Module.

Deadline records, reminder scheduling policy, cancel-then-replan
coordination against a notification-delivery port, and timeline windows.
"""

from .models import (
    Deadline,
    DeadlineType,
    Priority,
    ReminderInstruction,
    filter_deadlines,
    is_event_class,
)
from .clock import Clock, FixedClock, SystemClock
from .reminder_scheduler import REMINDER_SUFFIXES, ReminderScheduler
from .coordinator import ReminderCoordinator
from .timeline import TimelineSlot, all_day_items, event_window, layout_timeline

__all__ = [
    "Deadline",
    "DeadlineType",
    "Priority",
    "ReminderInstruction",
    "filter_deadlines",
    "is_event_class",
    "Clock",
    "FixedClock",
    "SystemClock",
    "REMINDER_SUFFIXES",
    "ReminderScheduler",
    "ReminderCoordinator",
    "TimelineSlot",
    "all_day_items",
    "event_window",
    "layout_timeline",
]
