"""Per-hold-path sub-event state machine.

A ``HoldPathTracker`` enumerates a hold path's scored checkpoints as a
time-monotonic (non-decreasing) stream of ``PathSample`` values that ends with the
path's tail. The stream is a pull-based generator with a single buffered
"pending" slot so callers can peek at the next sample time before deciding
whether to consume it.

Hold paths may carry a legacy last-tick offset. When positive, an extra
scoring sample is injected at ``start + duration * progress`` where
``progress = max(0.5, (duration - offset) / duration)``. The legacy sample
is emitted exactly once, interleaved at its correct time among the regular
checkpoints. On a tie with a checkpoint both are emitted, the legacy sample
first.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from autoreplay.core.errors import MalformedHoldPathError
from autoreplay.core.models.elements import CheckpointKind, HoldPathElement
from autoreplay.core.models.geometry import Vector2

_SCORED_KINDS = frozenset({CheckpointKind.TICK, CheckpointKind.REPEAT})
_USABLE_KINDS = _SCORED_KINDS | {CheckpointKind.TAIL}

# Legacy scoring never lands before the middle of the path
LEGACY_PROGRESS_FLOOR = 0.5


@dataclass(frozen=True, slots=True)
class PathSample:
    """One (time, position) point drained from a hold path.

    ``terminal`` marks the path's tail; nothing follows it.
    """

    time: float
    position: Vector2
    terminal: bool = False
    legacy: bool = False


def legacy_sample(path: HoldPathElement, offset: float | None) -> PathSample | None:
    """Compute the legacy scoring sample for a path, if any."""
    if offset is None or offset <= 0 or path.duration <= 0:
        return None

    progress = max(LEGACY_PROGRESS_FLOOR, (path.duration - offset) / path.duration)
    if path.repeat_count % 2 == 0:
        position = path.position_at(progress)
    else:
        position = path.position_at(1.0 - progress)

    return PathSample(
        time=path.start_time + path.duration * progress,
        position=position,
        legacy=True,
    )


class HoldPathTracker:
    """Drains a hold path's checkpoints in time order.

    Args:
        path: Hold path to track.
        index: Timeline index of the path (for error reporting).
        legacy_offset: Overrides the path's own ``legacy_last_tick_offset``
            when given.

    Raises:
        MalformedHoldPathError: If the path has no usable checkpoint after
            its entry and no legacy sample.
    """

    def __init__(
        self,
        path: HoldPathElement,
        index: int = -1,
        legacy_offset: float | None = None,
    ) -> None:
        self.path = path
        self.index = index

        offset = legacy_offset if legacy_offset is not None else path.legacy_last_tick_offset
        self._legacy = legacy_sample(path, offset)

        usable = [cp for cp in path.checkpoints if cp.kind in _USABLE_KINDS]
        if not usable and self._legacy is None:
            raise MalformedHoldPathError(
                reason="no tick, repeat or tail checkpoint and no legacy sample",
                element_index=index,
            )

        self.last_time = path.start_time
        self._stream = self._samples()
        self._pending: PathSample | None = next(self._stream)

    def _samples(self) -> Iterator[PathSample]:
        legacy = self._legacy

        for checkpoint in self.path.checkpoints:
            if checkpoint.kind not in _SCORED_KINDS:
                continue

            # A legacy sample sharing a checkpoint's time goes out just before it
            if legacy is not None and legacy.time <= checkpoint.time:
                yield legacy
                legacy = None

            yield PathSample(
                time=checkpoint.time,
                position=self.path.checkpoint_position(checkpoint),
            )

        if legacy is not None:
            yield legacy

        yield PathSample(
            time=self.path.end_time,
            position=self.path.end_position,
            terminal=True,
        )

    @property
    def exhausted(self) -> bool:
        return self._pending is None

    @property
    def next_time(self) -> float:
        """Time of the next sample, or +inf once exhausted."""
        if self._pending is None:
            return float("inf")
        return self._pending.time

    def peek(self) -> PathSample | None:
        return self._pending

    def pop(self) -> PathSample:
        """Consume and return the pending sample.

        Raises:
            RuntimeError: If the tracker is already exhausted.
        """
        sample = self._pending
        if sample is None:
            raise RuntimeError("hold path tracker is exhausted")
        self._pending = None if sample.terminal else next(self._stream)
        self.last_time = sample.time
        return sample

    def drain_before(self, time: float) -> Iterator[PathSample]:
        """Yield every pending sample strictly earlier than ``time``."""
        while self._pending is not None and self._pending.time < time:
            yield self.pop()
