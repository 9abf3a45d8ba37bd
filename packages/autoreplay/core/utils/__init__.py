"""Shared utilities for AutoReplay."""

from autoreplay.core.utils.math import clamp, reflect_into_range

__all__ = [
    "clamp",
    "reflect_into_range",
]
