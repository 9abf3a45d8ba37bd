"""Circular spin path sampling."""

from __future__ import annotations

import math
from collections.abc import Iterator

from autoreplay.core.config.models import SpinConfig
from autoreplay.core.models.actions import ActionSample, Button, SampleOrigin
from autoreplay.core.models.geometry import SPIN_CENTRE, Vector2


def spin_position(time: float, radius: float, rotation_rate: float) -> Vector2:
    """Cursor position on the spin circle at ``time``."""
    angle = time * rotation_rate
    return SPIN_CENTRE + Vector2(x=math.cos(angle) * radius, y=math.sin(angle) * radius)


def spin_samples(
    start: float,
    end: float,
    spin: SpinConfig,
    buttons: frozenset[Button],
) -> Iterator[ActionSample]:
    """Samples along the spin circle for every sub-step in [start, end)."""
    time = start
    while time < end:
        yield ActionSample(
            time=time,
            position=spin_position(time, spin.radius, spin.rotation_rate),
            buttons=buttons,
            origin=SampleOrigin.SPIN,
        )
        time += spin.step_ms
