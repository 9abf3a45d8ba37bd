"""Total order over abstract events.

Same-time events are ordered by a fixed priority list so that the
synthesizer sees hits, hold checkpoints and spin markers in a reproducible
sequence. Rules, evaluated top to bottom (first difference decides):

1. Time, ascending.
2. Spin start first (legacy ordering: last).
3. Circle hits before anything else.
4. Non-zero tie-break keys ascending; key 0 after every non-zero key.
5. Hold ticks before non-ticks.
6. Hold ends before non-ends.
7. Hold slides before non-slides.
8. Spin end last (legacy ordering: first).

Anything still equal keeps insertion order.
"""

from __future__ import annotations

from autoreplay.core.config.models import OrderingPolicy
from autoreplay.core.models.events import AbstractEvent

SortKey = tuple[float, int, int, int, int, int, int, int, int]

CANONICAL_ORDERING = OrderingPolicy()
# Deprecated: earlier ordering with both spin tie-breaks inverted
LEGACY_ORDERING = OrderingPolicy(spin_start_first=False, spin_end_last=False)


def _rank(flag: bool, first: bool) -> int:
    """0 sorts first. Events with the flag go first when ``first`` is set."""
    if first:
        return 0 if flag else 1
    return 1 if flag else 0


class EventOrdering:
    """Comparator for abstract events parameterized by an ``OrderingPolicy``.

    ``key`` produces a tuple whose natural order is exactly the comparator's
    order, so bisect and sort can use it directly; ``compare`` is the
    classic three-way form.
    """

    def __init__(self, policy: OrderingPolicy | None = None) -> None:
        self.policy = policy or CANONICAL_ORDERING

    def key(self, event: AbstractEvent) -> SortKey:
        tie_present, tie_value = (0, event.key) if event.key != 0 else (1, 0)
        return (
            event.time,
            _rank(event.spin_start, self.policy.spin_start_first),
            _rank(event.circle_hit, True),
            tie_present,
            tie_value,
            _rank(event.hold_tick, True),
            _rank(event.hold_end, True),
            _rank(event.hold_slide, True),
            _rank(event.spin_end, not self.policy.spin_end_last),
        )

    def compare(self, a: AbstractEvent, b: AbstractEvent) -> int:
        ka, kb = self.key(a), self.key(b)
        if ka < kb:
            return -1
        if ka > kb:
            return 1
        return 0

    def is_ordered(self, events: list[AbstractEvent]) -> bool:
        """Whether every adjacent pair respects the order."""
        return all(self.compare(a, b) <= 0 for a, b in zip(events, events[1:], strict=False))
