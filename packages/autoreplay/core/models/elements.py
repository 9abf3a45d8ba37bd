"""Gameplay element models consumed by the timeline builder.

Elements are produced by an external beatmap source and are immutable for
the duration of one generation run. Three kinds exist:

- ``TapElement``: a single instant hit.
- ``HoldPathElement``: a press held along a path, with internal checkpoints
  (entry, ticks, repeat turns, tail).
- ``SpinZoneElement``: a span during which the cursor spins around the
  playfield centre.

All times are in milliseconds; positions are in playfield space.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from autoreplay.core.models.geometry import Vector2
from autoreplay.core.utils.math import clamp


class CheckpointKind(str, Enum):
    """Kind of a hold path's internal checkpoint."""

    ENTRY = "entry"
    TICK = "tick"
    REPEAT = "repeat"
    TAIL = "tail"


class Checkpoint(BaseModel):
    """A timed sub-point of a hold path.

    Attributes:
        kind: Checkpoint kind.
        time: Absolute time (ms).
        position: Unstacked playfield position. Add the owning path's
            ``stack_offset`` to get the absolute position.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: CheckpointKind
    time: float
    position: Vector2


class _ElementBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    start_time: float = Field(description="Start time in milliseconds")
    preempt: float | None = Field(
        default=None,
        gt=0.0,
        description="Approach lead-in (ms) derived from difficulty; used for reaction time",
    )


class TapElement(_ElementBase):
    """Instant hit at a single position."""

    kind: Literal["tap"] = "tap"
    position: Vector2
    stack_offset: Vector2 = Field(default_factory=Vector2)

    @property
    def end_time(self) -> float:
        return self.start_time

    @property
    def stacked_position(self) -> Vector2:
        return self.position + self.stack_offset


class SpinZoneElement(_ElementBase):
    """Span during which the cursor must spin."""

    kind: Literal["spin_zone"] = "spin_zone"
    end_time: float

    @model_validator(mode="after")
    def _validate_span(self) -> SpinZoneElement:
        if self.end_time < self.start_time:
            raise ValueError("SpinZoneElement: end_time must be >= start_time")
        return self


class HoldPathElement(_ElementBase):
    """Press held while following a path.

    The path is a polyline in unstacked playfield space whose first point is
    the head. A hold path is traversed ``repeat_count + 1`` times, reversing
    direction on every repeat.
    """

    kind: Literal["hold_path"] = "hold_path"
    end_time: float
    position: Vector2
    path: list[Vector2] = Field(default_factory=list)
    repeat_count: int = Field(default=0, ge=0)
    checkpoints: list[Checkpoint] = Field(default_factory=list)
    stack_offset: Vector2 = Field(default_factory=Vector2)
    legacy_last_tick_offset: float | None = Field(
        default=None,
        description="Offset (ms) of the legacy last-tick scoring sample before the end",
    )

    @model_validator(mode="after")
    def _validate_span(self) -> HoldPathElement:
        if self.end_time < self.start_time:
            raise ValueError("HoldPathElement: end_time must be >= start_time")
        return self

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def span_count(self) -> int:
        return self.repeat_count + 1

    @property
    def stacked_position(self) -> Vector2:
        return self.position + self.stack_offset

    @property
    def end_position(self) -> Vector2:
        """Stacked position where the hold finishes."""
        return self.position_at(1.0 if self.repeat_count % 2 == 0 else 0.0)

    def position_at(self, progress: float) -> Vector2:
        """Stacked position at a fraction of one traversal of the path.

        Interpolates by arc length along the polyline. Progress is clamped
        to [0, 1].
        """
        points = self.path or [self.position]
        xs = np.array([p.x for p in points], dtype=float)
        ys = np.array([p.y for p in points], dtype=float)

        seg_lengths = np.hypot(np.diff(xs), np.diff(ys))
        cumulative = np.concatenate(([0.0], np.cumsum(seg_lengths)))
        total = float(cumulative[-1])

        if total <= 0.0:
            local = Vector2(x=float(xs[0]), y=float(ys[0]))
        else:
            target = clamp(progress, 0.0, 1.0) * total
            local = Vector2(
                x=float(np.interp(target, cumulative, xs)),
                y=float(np.interp(target, cumulative, ys)),
            )
        return local + self.stack_offset

    def position_at_time(self, time: float) -> Vector2:
        """Stacked position at an absolute time, accounting for repeats."""
        if self.duration <= 0.0:
            return self.position_at(0.0)

        progress = clamp((time - self.start_time) / self.duration, 0.0, 1.0)
        span_progress = progress * self.span_count
        span = min(int(span_progress), self.span_count - 1)
        local = span_progress - span
        if span % 2 == 1:
            local = 1.0 - local
        return self.position_at(local)

    def checkpoint_position(self, checkpoint: Checkpoint) -> Vector2:
        return checkpoint.position + self.stack_offset


Element = Annotated[
    TapElement | HoldPathElement | SpinZoneElement,
    Field(discriminator="kind"),
]
