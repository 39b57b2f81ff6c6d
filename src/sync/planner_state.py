"""
Planner State.

Derived values for one signed-in student, kept current from snapshot
feeds: every course snapshot recomputes the GPA, every log snapshot
invalidates and recomputes the streak, and every deadline snapshot is
reconciled against the previous one through the reminder coordinator.
"""

import logging
import threading
from datetime import tzinfo
from typing import Callable, List, Optional

from academics import Activity, ActivitySummary, Course, GPA, compute_gpa, summarize_activities
from academics.gpa import ZERO_GPA
from deadlines import Clock, Deadline, ReminderCoordinator
from wellness import StreakCache, WellnessLog, day_key

from .snapshot_feed import SnapshotFeed

logger = logging.getLogger(__name__)


class PlannerState:
    """Recomputes GPA, streak and reminders as snapshots arrive."""

    def __init__(
        self,
        coordinator: ReminderCoordinator,
        clock: Optional[Clock] = None,
        tz: Optional[tzinfo] = None,
        streak_cache: Optional[StreakCache] = None,
    ):
        self.coordinator = coordinator
        self.clock = clock or coordinator.clock
        self.tz = tz
        self.streak_cache = streak_cache or StreakCache(tz=tz)

        self.courses: List[Course] = []
        self.logs: List[WellnessLog] = []
        self.deadlines: List[Deadline] = []
        self.activities: List[Activity] = []

        self.gpa: GPA = ZERO_GPA
        self.streak = 0
        self.activity_summary = ActivitySummary()

        self._deadline_lock = threading.Lock()
        self._unsubscribers: List[Callable[[], None]] = []

    def attach(
        self,
        courses: Optional[SnapshotFeed] = None,
        logs: Optional[SnapshotFeed] = None,
        deadlines: Optional[SnapshotFeed] = None,
        activities: Optional[SnapshotFeed] = None,
    ) -> None:
        """Subscribe to whichever feeds are given."""
        pairs = [
            (courses, self.on_courses),
            (logs, self.on_logs),
            (deadlines, self.on_deadlines),
            (activities, self.on_activities),
        ]
        for feed, handler in pairs:
            if feed is not None:
                self._unsubscribers.append(feed.subscribe(handler))
        logger.info(f"[SYNC] Planner attached to {len(self._unsubscribers)} feed(s)")

    def detach(self) -> None:
        """Remove every feed subscription."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def on_courses(self, courses: List[Course]) -> None:
        self.courses = courses
        self.gpa = compute_gpa(courses)
        logger.info(
            f"[SYNC] {len(courses)} course(s): GPA {self.gpa.unweighted} / {self.gpa.weighted}"
        )

    def on_logs(self, logs: List[WellnessLog]) -> None:
        self.logs = logs
        self.streak_cache.invalidate()
        self.streak = self.streak_cache.get(logs, self.clock.now())
        logger.info(f"[SYNC] {len(logs)} wellness log(s): streak {self.streak}")

    def on_deadlines(self, deadlines: List[Deadline]) -> None:
        with self._deadline_lock:
            previous, self.deadlines = self.deadlines, deadlines
            self.coordinator.sync_all(previous, deadlines)

    def on_activities(self, activities: List[Activity]) -> None:
        self.activities = activities
        self.activity_summary = summarize_activities(activities)

    def current_streak(self) -> int:
        """Streak as of now; recomputed once a new day begins."""
        self.streak = self.streak_cache.get(self.logs, self.clock.now())
        return self.streak

    def today_log(self) -> Optional[WellnessLog]:
        """Today's log, or None before the day has been started."""
        key = day_key(self.clock.now(), self.tz)
        return next((log for log in self.logs if log.id == key), None)

    def get_summary(self) -> dict:
        return {
            "unweighted_gpa": self.gpa.unweighted,
            "weighted_gpa": self.gpa.weighted,
            "streak": self.current_streak(),
            "open_deadlines": sum(1 for d in self.deadlines if not d.is_completed),
            "activities": self.activity_summary.to_dict(),
        }
