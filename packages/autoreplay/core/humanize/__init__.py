"""Trajectory humanization post-pass."""

from autoreplay.core.humanize.humanizer import TrajectoryHumanizer, humanize_actions
from autoreplay.core.humanize.interpolation import AxisInterpolator

__all__ = [
    "AxisInterpolator",
    "TrajectoryHumanizer",
    "humanize_actions",
]
