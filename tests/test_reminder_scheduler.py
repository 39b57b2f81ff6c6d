"""
Unit tests for the deadline reminder policy.

Usage:
    pytest tests/test_reminder_scheduler.py -v
"""
import pytest
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from deadlines import Deadline, DeadlineType, ReminderScheduler, is_event_class


def ids(instructions):
    return [i.id for i in instructions]


class TestEventClassification:
    """Test which types count as events."""

    @pytest.mark.parametrize("type_", ["Event", "Club", "Sport", "Other", DeadlineType.SPORT])
    def test_event_types(self, type_):
        assert is_event_class(type_)

    @pytest.mark.parametrize("type_", ["Homework", "Test", "Essay", DeadlineType.PROJECT, "Lab"])
    def test_task_types(self, type_):
        assert not is_event_class(type_)


class TestEventReminders:
    """Test the single pre-start reminder for events."""

    def test_event_in_45_minutes(self, scheduler, make_deadline, now):
        """An event 45 minutes out gets one reminder 15 minutes from now."""
        deadline = make_deadline(type="Event", due_in=timedelta(minutes=45), title="Robotics Meetup")
        planned = scheduler.plan(deadline, now)

        assert len(planned) == 1
        reminder = planned[0]
        assert reminder.id == "d1_start"
        assert reminder.fire_at == now + timedelta(minutes=15)
        assert reminder.title == "Upcoming: Robotics Meetup"
        assert reminder.body == "Event starts in 30 minutes."

    def test_event_starting_too_soon(self, scheduler, make_deadline, now):
        """Inside the lead window there is nothing left to schedule."""
        deadline = make_deadline(type="Club", due_in=timedelta(minutes=20))
        assert scheduler.plan(deadline, now) == []

    def test_fire_time_equal_to_now_is_dropped(self, scheduler, make_deadline, now):
        deadline = make_deadline(type="Sport", due_in=timedelta(minutes=30))
        assert scheduler.plan(deadline, now) == []

    def test_body_uses_type_name(self, scheduler, make_deadline, now):
        deadline = make_deadline(type=DeadlineType.SPORT, due_in=timedelta(hours=2))
        assert scheduler.plan(deadline, now)[0].body == "Sport starts in 30 minutes."

    def test_custom_lead(self, make_deadline, now):
        scheduler = ReminderScheduler(event_lead=timedelta(minutes=10))
        deadline = make_deadline(type="Event", due_in=timedelta(hours=1))
        reminder = scheduler.plan(deadline, now)[0]

        assert reminder.fire_at == now + timedelta(minutes=50)
        assert reminder.body == "Event starts in 10 minutes."


class TestTaskReminders:
    """Test the day-before and due-morning reminders for tasks."""

    def test_task_due_in_three_days(self, scheduler, make_deadline, now):
        """Both reminders are in the future."""
        deadline = make_deadline(type="Essay", due_in=timedelta(days=3), title="College Essay")
        day_before, morning = scheduler.plan(deadline, now)

        assert day_before.id == "d1_24h"
        assert day_before.fire_at == datetime(2025, 3, 12, 9, 0, tzinfo=timezone.utc)
        assert day_before.title == "Due Tomorrow: College Essay"
        assert day_before.body == "Don't forget to finish this essay."

        assert morning.id == "d1_morning"
        assert morning.fire_at == datetime(2025, 3, 13, 8, 0, tzinfo=timezone.utc)
        assert morning.title == "Due Today: College Essay"
        assert morning.body == "Make sure to turn in your essay!"

    def test_task_due_tonight_after_morning(self, scheduler, make_deadline, now):
        """Due 12 hours from 09:00: both candidates are already past."""
        deadline = make_deadline(type="Homework", due_in=timedelta(hours=12))
        assert scheduler.plan(deadline, now) == []

    def test_task_due_this_evening_before_morning(self, scheduler, make_deadline):
        """At 06:00 only the 08:00 morning reminder is still ahead."""
        early = datetime(2025, 3, 10, 6, 0, tzinfo=timezone.utc)
        deadline = make_deadline(due_date=datetime(2025, 3, 10, 18, 0, tzinfo=timezone.utc))

        planned = scheduler.plan(deadline, early)

        assert ids(planned) == ["d1_morning"]
        assert planned[0].fire_at == datetime(2025, 3, 10, 8, 0, tzinfo=timezone.utc)

    def test_task_due_tomorrow_evening(self, scheduler, make_deadline, now):
        deadline = make_deadline(due_date=datetime(2025, 3, 11, 20, 0, tzinfo=timezone.utc))
        planned = scheduler.plan(deadline, now)

        assert ids(planned) == ["d1_24h", "d1_morning"]
        assert planned[0].fire_at == datetime(2025, 3, 10, 20, 0, tzinfo=timezone.utc)

    def test_unknown_type_is_a_task(self, scheduler, make_deadline, now):
        deadline = make_deadline(type="Lab")
        planned = scheduler.plan(deadline, now)

        assert ids(planned) == ["d1_24h", "d1_morning"]
        assert planned[0].body == "Don't forget to finish this lab."

    def test_morning_hour_is_local_to_due_date(self, scheduler, make_deadline, now):
        """The morning reminder is 08:00 in the due date's own timezone."""
        tokyo = ZoneInfo("Asia/Tokyo")
        deadline = make_deadline(due_date=datetime(2025, 3, 14, 15, 0, tzinfo=tokyo))
        morning = scheduler.plan(deadline, now)[1]

        assert morning.fire_at == datetime(2025, 3, 14, 8, 0, tzinfo=tokyo)

    def test_morning_hour_in_student_timezone(self, make_deadline, now):
        """A UTC due time is read on the student's calendar day, at 08:00 their time."""
        new_york = ZoneInfo("America/New_York")
        scheduler = ReminderScheduler(tz=new_york)
        # 22:00 on the 14th in New York, already the 15th in UTC
        deadline = make_deadline(due_date=datetime(2025, 3, 15, 2, 0, tzinfo=timezone.utc))

        day_before, morning = scheduler.plan(deadline, now)

        assert morning.fire_at == datetime(2025, 3, 14, 8, 0, tzinfo=new_york)
        assert morning.fire_at.utcoffset() == timedelta(hours=-4)
        assert day_before.fire_at == datetime(2025, 3, 13, 22, 0, tzinfo=new_york)

    def test_day_before_keeps_wall_clock_across_dst(self, scheduler, make_deadline):
        """The day-before reminder lands at the same local time after a DST change."""
        new_york = ZoneInfo("America/New_York")
        deadline = make_deadline(due_date=datetime(2025, 3, 10, 17, 0, tzinfo=new_york))
        now = datetime(2025, 3, 8, 12, 0, tzinfo=new_york)

        day_before, morning = scheduler.plan(deadline, now)

        assert day_before.fire_at.hour == 17
        assert day_before.fire_at.date() == datetime(2025, 3, 9).date()
        assert day_before.fire_at.utcoffset() == timedelta(hours=-4)
        assert morning.fire_at.hour == 8

    def test_completion_is_not_considered(self, scheduler, make_deadline, now):
        """Planning is pure policy; completed items are handled by the coordinator."""
        deadline = make_deadline(is_completed=True)
        assert len(scheduler.plan(deadline, now)) == 2


class TestUnplannableDeadlines:
    """Test inputs that produce no reminders."""

    def test_missing_due_date(self, scheduler, make_deadline, now):
        deadline = make_deadline(due_date=None)
        assert scheduler.plan(deadline, now) == []

    def test_missing_id(self, scheduler, make_deadline, now):
        deadline = make_deadline(deadline_id=None)
        assert scheduler.plan(deadline, now) == []
        assert scheduler.cancel_ids_for(deadline) == []

    def test_naive_due_date_against_aware_now(self, scheduler, make_deadline, now):
        deadline = make_deadline(due_date=datetime(2025, 3, 20, 12, 0))
        assert scheduler.plan(deadline, now) == []

    def test_past_deadline(self, scheduler, make_deadline, now):
        deadline = make_deadline(type="Event", due_in=timedelta(days=-2))
        assert scheduler.plan(deadline, now) == []


class TestCancelIds:
    """Test the ids cancelled before every replan."""

    @pytest.mark.parametrize("type_", ["Event", "Homework", "Club", "Test"])
    def test_all_suffixes_for_any_type(self, scheduler, make_deadline, type_):
        deadline = make_deadline(deadline_id="abc", type=type_)
        assert scheduler.cancel_ids_for(deadline) == ["abc_start", "abc_24h", "abc_morning"]

    @pytest.mark.parametrize("type_", ["Event", "Homework"])
    def test_cancel_covers_every_planned_id(self, scheduler, make_deadline, now, type_):
        deadline = make_deadline(type=type_, due_in=timedelta(days=5))
        planned = scheduler.plan(deadline, now)

        assert planned
        assert set(ids(planned)) <= set(scheduler.cancel_ids_for(deadline))

    def test_cancel_then_plan_matches_plan(self, scheduler, make_deadline, now):
        """Applying cancel then plan to any prior pending set leaves exactly the plan."""
        old = make_deadline(type="Event", due_in=timedelta(days=2))
        new = make_deadline(type="Homework", due_in=timedelta(days=4))

        pending = {i.id: i for i in scheduler.plan(old, now)}
        pending["unrelated_start"] = None
        for reminder_id in scheduler.cancel_ids_for(new):
            pending.pop(reminder_id, None)
        for instruction in scheduler.plan(new, now):
            pending[instruction.id] = instruction

        del pending["unrelated_start"]
        assert list(pending.values()) == scheduler.plan(new, now)


class TestInstructionSerialization:
    def test_to_dict(self, scheduler, now):
        deadline = Deadline(
            id="x", title="Quiz", type="Test",
            due_date=datetime(2025, 3, 12, 10, 0, tzinfo=timezone.utc),
        )
        data = scheduler.plan(deadline, now)[0].to_dict()

        assert data == {
            "id": "x_24h",
            "fire_at": "2025-03-11T10:00:00+00:00",
            "title": "Due Tomorrow: Quiz",
            "body": "Don't forget to finish this test.",
        }
