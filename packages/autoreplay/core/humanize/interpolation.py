"""Per-axis time to coordinate interpolation."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy.interpolate import CubicSpline


class AxisInterpolator:
    """Natural cubic spline through (time, value) knots.

    One interpolator is built per coordinate axis. Knot times must be
    strictly increasing.

    Example:
        >>> interp = AxisInterpolator([0.0, 1.0, 2.0], [0.0, 10.0, 0.0])
        >>> float(interp(1.0))
        10.0
    """

    def __init__(self, times: Sequence[float], values: Sequence[float]) -> None:
        knots_t = np.asarray(times, dtype=float)
        knots_v = np.asarray(values, dtype=float)

        if knots_t.size < 2:
            raise ValueError("AxisInterpolator needs at least two knots")
        if knots_t.shape != knots_v.shape:
            raise ValueError("times and values must have the same length")
        if np.any(np.diff(knots_t) <= 0.0):
            raise ValueError("knot times must be strictly increasing")

        self._spline = CubicSpline(knots_t, knots_v, bc_type="natural")

    def __call__(self, time: float | np.ndarray) -> float | np.ndarray:
        result = self._spline(time)
        if np.ndim(result) == 0:
            return float(result)
        return result
