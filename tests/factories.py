"""Element factories shared by the test suite."""

from __future__ import annotations

from autoreplay.core.models.elements import (
    Checkpoint,
    CheckpointKind,
    HoldPathElement,
    SpinZoneElement,
    TapElement,
)
from autoreplay.core.models.geometry import Vector2


def make_tap(time: float, x: float = 100.0, y: float = 100.0, **kwargs) -> TapElement:
    return TapElement(start_time=time, position=Vector2(x=x, y=y), **kwargs)


def make_hold(
    start: float,
    end: float,
    head: tuple[float, float] = (200.0, 200.0),
    tail: tuple[float, float] = (300.0, 300.0),
    ticks: tuple[float, ...] = (),
    legacy_offset: float | None = None,
    with_tail: bool = True,
    **kwargs,
) -> HoldPathElement:
    """Straight hold path from head to tail with ticks at the given times."""
    head_v = Vector2(x=head[0], y=head[1])
    tail_v = Vector2(x=tail[0], y=tail[1])
    duration = end - start

    def at(time: float) -> Vector2:
        progress = (time - start) / duration if duration > 0 else 0.0
        return head_v + (tail_v - head_v) * progress

    checkpoints = [Checkpoint(kind=CheckpointKind.ENTRY, time=start, position=head_v)]
    checkpoints.extend(
        Checkpoint(kind=CheckpointKind.TICK, time=tick, position=at(tick)) for tick in ticks
    )
    if with_tail:
        checkpoints.append(Checkpoint(kind=CheckpointKind.TAIL, time=end, position=tail_v))

    return HoldPathElement(
        start_time=start,
        end_time=end,
        position=head_v,
        path=[head_v, tail_v],
        checkpoints=checkpoints,
        legacy_last_tick_offset=legacy_offset,
        **kwargs,
    )


def make_spin(start: float, end: float) -> SpinZoneElement:
    return SpinZoneElement(start_time=start, end_time=end)
