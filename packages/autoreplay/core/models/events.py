"""Abstract timeline events.

An ``AbstractEvent`` is a synthesized timeline entry that has not yet been
turned into an input sample. Events are immutable once inserted into a
timeline; passes that need to change a facet substitute a modified copy.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from autoreplay.core.models.geometry import Vector2


@dataclass(frozen=True, slots=True)
class AbstractEvent:
    """Timeline entry with facet flags.

    Attributes:
        time: Event time (ms).
        position: Cursor position, or None for spin markers.
        circle_hit: A hit must be registered here.
        hold_slide: A hold path is being followed.
        hold_tick: A hold path checkpoint is scored here.
        hold_end: A hold path finishes here.
        spin_start: A spin session begins (marker, no position).
        spin_end: A spin session ends (marker, no position).
        key: Originating element's 1-based timeline index, 0 for none.
    """

    time: float
    position: Vector2 | None = None
    circle_hit: bool = False
    hold_slide: bool = False
    hold_tick: bool = False
    hold_end: bool = False
    spin_start: bool = False
    spin_end: bool = False
    key: int = 0

    @property
    def is_marker(self) -> bool:
        return self.spin_start or self.spin_end

    @property
    def engage(self) -> bool:
        return self.circle_hit

    @property
    def hold(self) -> bool:
        return self.hold_slide or self.spin_start

    @property
    def release(self) -> bool:
        return (self.circle_hit or self.hold_end or self.spin_end) and not self.hold

    @property
    def is_hold_entry(self) -> bool:
        return self.circle_hit and self.hold_slide and self.hold_tick

    def sliding(self) -> AbstractEvent:
        """Copy of this event marked as occurring during a hold slide."""
        if self.hold_slide:
            return self
        return replace(self, hold_slide=True)

    def facets(self) -> list[str]:
        names = (
            "circle_hit",
            "hold_slide",
            "hold_tick",
            "hold_end",
            "spin_start",
            "spin_end",
        )
        return [name for name in names if getattr(self, name)]

    def describe(self) -> dict[str, Any]:
        return {
            "time": self.time,
            "position": self.position.as_tuple() if self.position is not None else None,
            "facets": self.facets(),
            "key": self.key,
        }
