"""Tests for the event ordering comparator."""

from __future__ import annotations

import pytest

from autoreplay.core.config.models import OrderingPolicy
from autoreplay.core.models.events import AbstractEvent
from autoreplay.core.models.geometry import Vector2
from autoreplay.core.timeline.ordering import (
    CANONICAL_ORDERING,
    LEGACY_ORDERING,
    EventOrdering,
)

POS = Vector2(x=1.0, y=1.0)


def _sorted(events: list[AbstractEvent], ordering: EventOrdering) -> list[AbstractEvent]:
    return sorted(events, key=ordering.key)


class TestCanonicalOrdering:
    @pytest.fixture
    def ordering(self) -> EventOrdering:
        return EventOrdering()

    def test_default_policy_is_canonical(self, ordering: EventOrdering) -> None:
        assert ordering.policy == CANONICAL_ORDERING
        assert CANONICAL_ORDERING == OrderingPolicy(spin_start_first=True, spin_end_last=True)

    def test_time_dominates(self, ordering: EventOrdering) -> None:
        early = AbstractEvent(time=1.0, spin_end=True)
        late = AbstractEvent(time=2.0, spin_start=True)
        assert ordering.compare(early, late) == -1
        assert ordering.compare(late, early) == 1

    def test_spin_start_before_circle_hit(self, ordering: EventOrdering) -> None:
        hit = AbstractEvent(time=5.0, position=POS, circle_hit=True, key=1)
        start = AbstractEvent(time=5.0, spin_start=True)
        assert _sorted([hit, start], ordering) == [start, hit]

    def test_circle_hit_before_tick(self, ordering: EventOrdering) -> None:
        tick = AbstractEvent(time=5.0, position=POS, hold_tick=True, hold_slide=True)
        hit = AbstractEvent(time=5.0, position=POS, circle_hit=True, key=4)
        assert _sorted([tick, hit], ordering) == [hit, tick]

    def test_keys_ascending_and_zero_last(self, ordering: EventOrdering) -> None:
        a = AbstractEvent(time=5.0, position=POS, circle_hit=True, key=2)
        b = AbstractEvent(time=5.0, position=POS, circle_hit=True, key=1)
        c = AbstractEvent(time=5.0, position=POS, circle_hit=True, key=0)
        assert _sorted([c, a, b], ordering) == [b, a, c]

    def test_tick_before_end_before_slide(self, ordering: EventOrdering) -> None:
        slide = AbstractEvent(time=5.0, position=POS, hold_slide=True)
        end = AbstractEvent(time=5.0, position=POS, hold_end=True)
        tick = AbstractEvent(time=5.0, position=POS, hold_tick=True)
        assert _sorted([slide, end, tick], ordering) == [tick, end, slide]

    def test_spin_end_last(self, ordering: EventOrdering) -> None:
        end = AbstractEvent(time=5.0, spin_end=True)
        slide = AbstractEvent(time=5.0, position=POS, hold_slide=True)
        plain = AbstractEvent(time=5.0, position=POS)
        assert _sorted([end, slide, plain], ordering) == [slide, plain, end]

    def test_equal_events_compare_zero(self, ordering: EventOrdering) -> None:
        a = AbstractEvent(time=5.0, position=POS, hold_slide=True)
        b = AbstractEvent(time=5.0, position=Vector2(x=9.0, y=9.0), hold_slide=True)
        assert ordering.compare(a, b) == 0

    def test_is_ordered(self, ordering: EventOrdering) -> None:
        events = [
            AbstractEvent(time=0.0, spin_start=True),
            AbstractEvent(time=0.0, position=POS, circle_hit=True, key=1),
            AbstractEvent(time=0.0, spin_end=True),
        ]
        assert ordering.is_ordered(events)
        assert not ordering.is_ordered(list(reversed(events)))
        assert ordering.is_ordered([])


class TestLegacyOrdering:
    def test_spin_rules_inverted(self) -> None:
        ordering = EventOrdering(LEGACY_ORDERING)
        start = AbstractEvent(time=5.0, spin_start=True)
        end = AbstractEvent(time=5.0, spin_end=True)
        hit = AbstractEvent(time=5.0, position=POS, circle_hit=True, key=1)
        assert _sorted([start, hit, end], ordering) == [hit, end, start]

    def test_non_spin_rules_unchanged(self) -> None:
        ordering = EventOrdering(LEGACY_ORDERING)
        tick = AbstractEvent(time=5.0, position=POS, hold_tick=True)
        hit = AbstractEvent(time=5.0, position=POS, circle_hit=True, key=3)
        assert _sorted([tick, hit], ordering) == [hit, tick]
