"""
Wellness Streak Calculation.

Counts consecutive calendar days, ending on the evaluation day, that
have a wellness log. The calculation is a pure function; ``StreakCache``
memoizes it for the current day and must be invalidated on every write
to the log collection.
"""

import logging
import threading
from datetime import date, datetime, timedelta, tzinfo
from typing import Callable, Iterable, Optional

from .models import WellnessLog, local_day

logger = logging.getLogger(__name__)


def compute_streak(
    logs: Iterable[WellnessLog],
    as_of: datetime,
    tz: Optional[tzinfo] = None,
) -> int:
    """
    Compute the number of consecutive logged days ending at ``as_of``.

    Args:
        logs: Wellness logs in any order
        as_of: Evaluation instant; its calendar day must be logged
            for the streak to be non-zero
        tz: Timezone used to truncate aware timestamps to days

    Returns:
        Streak length in days (0 when ``as_of``'s day has no log)
    """
    days = sorted((local_day(log.date, tz) for log in logs), reverse=True)

    streak = 0
    expected: date = local_day(as_of, tz)

    for day in days:
        if day == expected:
            streak += 1
            expected -= timedelta(days=1)
        elif day > expected:
            # Already consumed, or logged after the evaluation day
            continue
        else:
            break

    return streak


class StreakCache:
    """
    Same-day memo around a streak calculation.

    The cached value is served only for the calendar day it was
    computed on. Callers invalidate it whenever the log collection
    changes.
    """

    def __init__(
        self,
        calculate: Callable[..., int] = compute_streak,
        tz: Optional[tzinfo] = None,
    ):
        self._calculate = calculate
        self.tz = tz

        self._day: Optional[date] = None
        self._value: Optional[int] = None
        self._generation = 0
        self._lock = threading.Lock()

        self.hits = 0
        self.misses = 0

    def get(self, logs: Iterable[WellnessLog], as_of: datetime) -> int:
        """Return the streak for ``as_of``, recomputing when stale."""
        day = local_day(as_of, self.tz)

        with self._lock:
            if self._value is not None and self._day == day:
                self.hits += 1
                return self._value
            generation = self._generation

        value = self._calculate(logs, as_of, self.tz)

        with self._lock:
            self.misses += 1
            if generation != self._generation:
                # Invalidated mid-computation
                logger.debug(f"[STREAK] Discarding streak={value} computed before invalidation")
                return value
            if self._day is not None and self._day != day:
                logger.info(f"[STREAK] New day {day}, recomputed streak={value}")
            self._day = day
            self._value = value

        logger.debug(f"[STREAK] Computed streak={value} for {day}")
        return value

    def invalidate(self) -> None:
        """Drop the cached value."""
        with self._lock:
            self._day = None
            self._value = None
            self._generation += 1
        logger.debug("[STREAK] Cache invalidated")

    @property
    def cached_value(self) -> Optional[int]:
        with self._lock:
            return self._value

    def get_stats(self) -> dict:
        """Get cache statistics."""
        with self._lock:
            return {
                "day": self._day.isoformat() if self._day else None,
                "value": self._value,
                "hits": self.hits,
                "misses": self.misses,
            }
