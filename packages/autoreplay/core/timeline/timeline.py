"""Sorted event container."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator

from autoreplay.core.models.events import AbstractEvent
from autoreplay.core.timeline.ordering import EventOrdering, SortKey


class Timeline:
    """Ordered sequence of abstract events.

    Sorted under the ordering at all times. Insertion locates the slot by
    binary search over cached sort keys and never re-sorts; events equal
    under the ordering keep their insertion order.
    """

    def __init__(self, ordering: EventOrdering | None = None) -> None:
        self.ordering = ordering or EventOrdering()
        self._events: list[AbstractEvent] = []
        self._keys: list[SortKey] = []

    def insert(self, event: AbstractEvent) -> int:
        """Insert an event at its sorted position and return the index."""
        key = self.ordering.key(event)
        index = bisect_right(self._keys, key)
        self._keys.insert(index, key)
        self._events.insert(index, event)
        return index

    def replace(self, index: int, event: AbstractEvent) -> None:
        """Substitute the event at ``index`` with an equivalent-order copy.

        Raises:
            ValueError: If the replacement would break the ordering.
        """
        key = self.ordering.key(event)
        if index > 0 and key < self._keys[index - 1]:
            raise ValueError(f"Replacement at {index} sorts before its predecessor")
        if index + 1 < len(self._keys) and key > self._keys[index + 1]:
            raise ValueError(f"Replacement at {index} sorts after its successor")
        self._keys[index] = key
        self._events[index] = event

    @property
    def events(self) -> tuple[AbstractEvent, ...]:
        return tuple(self._events)

    def __iter__(self) -> Iterator[AbstractEvent]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __getitem__(self, index: int) -> AbstractEvent:
        return self._events[index]
