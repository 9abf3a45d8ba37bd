"""Math utilities for common operations."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def reflect_into_range(value: float, min_val: float, max_val: float) -> float:
    """Reflect a value off the range borders until it lies inside.

    Behaves like a ball bouncing between two walls: overshooting the
    upper border by 10 lands 10 below it.

    Args:
        value: Value to reflect
        min_val: Lower border
        max_val: Upper border (must be > min_val)

    Returns:
        Reflected value in [min_val, max_val]

    Example:
        >>> reflect_into_range(520.0, 0.0, 512.0)
        504.0
        >>> reflect_into_range(-4.0, 0.0, 384.0)
        4.0
    """
    span = max_val - min_val
    if span <= 0:
        return float(min_val)

    # Fold onto a period of two spans, then mirror the second half
    offset = float(np.mod(value - min_val, 2.0 * span))
    if offset > span:
        offset = 2.0 * span - offset
    return min_val + offset
