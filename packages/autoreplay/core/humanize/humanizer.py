"""Trajectory humanizer.

Re-synthesizes the synthesizer's raw samples into a smooth trajectory:

1. Samples sharing a time collapse into one knot (last one wins). Extra
   knots 1000ms before the first sample and 1000/2000ms after the last one
   pin the curve's ends.
2. Each axis gets its own natural cubic spline over the knots.
3. Between consecutive source samples the splines are resampled at a fixed
   step; interpolated samples carry the previous source sample's buttons.
4. Around source samples that are closer together than the jump threshold,
   interpolation is suspended and the raw samples pass straight through,
   which keeps the cursor from racing between tightly packed events. A gap
   shorter than the threshold is never resampled, even as the first gap.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from autoreplay.core.config.models import HumanizeConfig
from autoreplay.core.diagnostics import DiagnosticLevel, EventSink, NullSink
from autoreplay.core.humanize.constraints import (
    bounce_into_playfield,
    coerce_near,
    coerce_to_segment,
)
from autoreplay.core.humanize.interpolation import AxisInterpolator
from autoreplay.core.models.actions import ActionSample, SampleOrigin
from autoreplay.core.models.geometry import Vector2

logger = logging.getLogger(__name__)

# Pinning knots around the trajectory (ms)
LEAD_KNOT_MS = 1000.0
TRAIL_KNOTS_MS = (1000.0, 2000.0)

# Gaps kept raw once the jump guard trips: the gap before the dense pair,
# the dense gap itself and the exit gap
JUMP_GUARD_SPAN = 3

_HOLD_SOURCES = frozenset({SampleOrigin.HIT, SampleOrigin.HOLD})


def collapse_knots(samples: Sequence[ActionSample]) -> tuple[list[float], list[float], list[float]]:
    """Build (times, xs, ys) spline knots from time-ordered samples."""
    collapsed: dict[float, Vector2] = {}
    for sample in samples:
        collapsed[sample.time] = sample.position

    first, last = samples[0], samples[-1]
    knots: list[tuple[float, Vector2]] = [(first.time - LEAD_KNOT_MS, first.position)]
    knots.extend(collapsed.items())
    knots.extend((last.time + offset, last.position) for offset in TRAIL_KNOTS_MS)

    times = [time for time, _ in knots]
    xs = [position.x for _, position in knots]
    ys = [position.y for _, position in knots]
    return times, xs, ys


class TrajectoryHumanizer:
    """Smooths an action sample sequence through per-axis splines.

    Args:
        config: Humanization settings.
        sink: Diagnostic event sink. Defaults to a no-op sink.
    """

    def __init__(
        self,
        config: HumanizeConfig | None = None,
        sink: EventSink | None = None,
    ) -> None:
        self.config = config or HumanizeConfig()
        self.sink = sink or NullSink()

    def humanize(self, samples: Sequence[ActionSample]) -> list[ActionSample]:
        if not samples:
            return []

        times, xs, ys = collapse_knots(samples)
        interp_x = AxisInterpolator(times, xs)
        interp_y = AxisInterpolator(times, ys)

        step = self.config.step_ms
        threshold = max(self.config.jump_threshold, step)

        output: list[ActionSample] = [samples[0]]
        previous = samples[0]
        passthrough = 0
        guarded = 0

        for i in range(1, len(samples)):
            current = samples[i]

            if i + 1 < len(samples) and samples[i + 1].time - current.time < threshold:
                passthrough = JUMP_GUARD_SPAN

            dense = current.time - previous.time < threshold
            if passthrough == 0 and not dense:
                step_times = np.arange(previous.time + step, current.time, step)
                if step_times.size:
                    step_xs = interp_x(step_times)
                    step_ys = interp_y(step_times)
                    for time, x, y in zip(step_times, step_xs, step_ys, strict=True):
                        position = self._constrain(
                            Vector2(x=float(x), y=float(y)), float(time), previous, current
                        )
                        output.append(
                            ActionSample(
                                time=float(time),
                                position=position,
                                buttons=previous.buttons,
                                origin=SampleOrigin.INTERPOLATED,
                            )
                        )
            else:
                passthrough = max(0, passthrough - 1)
                guarded += 1

            output.append(current)
            previous = current

        self.sink.emit(
            "humanize.done",
            DiagnosticLevel.INFO,
            source_samples=len(samples),
            samples=len(output),
            guarded_gaps=guarded,
        )
        logger.debug(f"Humanized {len(samples)} samples into {len(output)}")
        return output

    def _constrain(
        self,
        position: Vector2,
        time: float,
        previous: ActionSample,
        current: ActionSample,
    ) -> Vector2:
        config = self.config

        if config.coerce_taps:
            for source in (previous, current):
                if (
                    source.origin is SampleOrigin.HIT
                    and abs(time - source.time) <= config.coerce_window_ms
                ):
                    position = coerce_near(position, source.position, config.coerce_radius)

        if (
            config.coerce_holds
            and previous.pressed
            and previous.origin in _HOLD_SOURCES
            and current.origin is SampleOrigin.HOLD
        ):
            position = coerce_to_segment(
                position, previous.position, current.position, config.coerce_radius
            )

        if config.bounce:
            position = bounce_into_playfield(position)

        return position


def humanize_actions(
    samples: Sequence[ActionSample],
    config: HumanizeConfig | None = None,
    sink: EventSink | None = None,
) -> list[ActionSample]:
    """Humanize samples with a one-off ``TrajectoryHumanizer``."""
    return TrajectoryHumanizer(config, sink).humanize(samples)
