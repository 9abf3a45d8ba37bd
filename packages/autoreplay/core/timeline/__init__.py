"""Event timeline construction and ordering."""

from autoreplay.core.timeline.builder import TimelineBuilder, build_timeline, validate_elements
from autoreplay.core.timeline.ordering import (
    CANONICAL_ORDERING,
    LEGACY_ORDERING,
    EventOrdering,
    OrderingPolicy,
)
from autoreplay.core.timeline.timeline import Timeline
from autoreplay.core.timeline.tracker import HoldPathTracker, PathSample

__all__ = [
    "CANONICAL_ORDERING",
    "EventOrdering",
    "HoldPathTracker",
    "LEGACY_ORDERING",
    "OrderingPolicy",
    "PathSample",
    "Timeline",
    "TimelineBuilder",
    "build_timeline",
    "validate_elements",
]
