"""
Snapshot Feeds.

A feed stands in for one document-store collection: each change to the
collection is published as the full current list of records, and every
subscriber callback receives that list synchronously.
"""

import itertools
import logging
import threading
from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

SnapshotCallback = Callable[[List[T]], None]


class SnapshotFeed(Generic[T]):
    """
    Full-collection push channel.

    New subscribers immediately receive the latest snapshot, if any.
    A failing subscriber is logged and does not stop delivery to the
    others.
    """

    def __init__(self, name: str):
        self.name = name
        self._subscribers: Dict[int, SnapshotCallback] = {}
        self._latest: Optional[List[T]] = None
        self._version = 0
        self._keys = itertools.count(1)
        self._lock = threading.Lock()

    def publish(self, records: Iterable[T]) -> None:
        """Push the full current collection to every subscriber."""
        snapshot = list(records)

        with self._lock:
            self._latest = snapshot
            self._version += 1
            version = self._version
            callbacks = list(self._subscribers.values())

        logger.debug(
            f"[SYNC] {self.name} v{version}: {len(snapshot)} record(s) "
            f"to {len(callbacks)} subscriber(s)"
        )
        for callback in callbacks:
            self._deliver(callback, snapshot)

    def subscribe(self, callback: SnapshotCallback, replay: bool = True) -> Callable[[], None]:
        """
        Register a callback for future snapshots.

        Args:
            callback: Called with the full record list on every change
            replay: Deliver the latest snapshot right away

        Returns:
            Function that removes the subscription
        """
        with self._lock:
            key = next(self._keys)
            self._subscribers[key] = callback
            latest = self._latest

        if replay and latest is not None:
            self._deliver(callback, latest)

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers.pop(key, None)

        return unsubscribe

    def _deliver(self, callback: SnapshotCallback, snapshot: List[T]) -> None:
        try:
            callback(list(snapshot))
        except Exception as e:
            logger.error(f"[SYNC] {self.name} subscriber failed: {e}")

    @property
    def latest(self) -> List[T]:
        with self._lock:
            return list(self._latest or [])

    @property
    def version(self) -> int:
        with self._lock:
            return self._version

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)
