"""
Pytest fixtures for Scholarix planner tests.
"""
import sys
import pytest
from pathlib import Path
from datetime import datetime, timedelta, timezone
from dotenv import load_dotenv

# Ensure src/ is on sys.path so tests can import the planner packages.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Load environment variables
load_dotenv()

from deadlines import Deadline, FixedClock, ReminderCoordinator, ReminderScheduler  # noqa: E402
from notifications import NotificationCenter  # noqa: E402


# Monday 2025-03-10, 09:00 UTC
NOW = datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)


class RecordingDelivery:
    """Notification delivery double that records every call in order."""

    def __init__(self):
        self.calls = []
        self.pending = {}

    def schedule(self, instruction):
        self.calls.append(("schedule", instruction.id))
        self.pending[instruction.id] = instruction

    def cancel(self, ids):
        ids = list(ids)
        self.calls.append(("cancel", ids))
        for reminder_id in ids:
            self.pending.pop(reminder_id, None)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def scheduler():
    return ReminderScheduler()


@pytest.fixture
def center():
    return NotificationCenter()


@pytest.fixture
def recording_delivery():
    return RecordingDelivery()


@pytest.fixture
def coordinator(center, clock, scheduler):
    return ReminderCoordinator(center, clock, scheduler)


@pytest.fixture
def make_deadline():
    """
    Factory fixture for deadlines.

    ``due_in`` is an offset from NOW; pass ``due_date`` to set it directly.
    """
    def _make(
        deadline_id="d1",
        type="Homework",
        due_in=timedelta(days=3),
        **kwargs,
    ) -> Deadline:
        kwargs.setdefault("title", f"{type} {deadline_id}")
        kwargs.setdefault("due_date", NOW + due_in)
        return Deadline(id=deadline_id, type=type, **kwargs)

    return _make
