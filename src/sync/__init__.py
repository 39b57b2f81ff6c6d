"""
Sync Module.

Snapshot feeds for store collections and the planner state that keeps
derived values current as snapshots arrive.
"""

from .snapshot_feed import SnapshotFeed
from .planner_state import PlannerState

__all__ = ["SnapshotFeed", "PlannerState"]
