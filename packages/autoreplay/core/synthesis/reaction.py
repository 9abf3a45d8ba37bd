"""Reaction time resolution.

A negative configured reaction time means "this fraction of the approach
preempt", so presets can scale with difficulty instead of hardcoding
milliseconds.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from autoreplay.core.models.elements import Element, SpinZoneElement

logger = logging.getLogger(__name__)

# Preempt at approach rate 5
DEFAULT_PREEMPT_MS = 1200.0


def preempt_from_approach_rate(approach_rate: float) -> float:
    """Approach lead-in (ms) for an approach rate.

    Piecewise linear: 1800ms at AR0, 1200ms at AR5, 450ms at AR10.

    Example:
        >>> preempt_from_approach_rate(5.0)
        1200.0
        >>> preempt_from_approach_rate(10.0)
        450.0
    """
    if approach_rate < 5.0:
        return DEFAULT_PREEMPT_MS + 600.0 * (5.0 - approach_rate) / 5.0
    return DEFAULT_PREEMPT_MS - 750.0 * (approach_rate - 5.0) / 5.0


def resolve_reaction_time(
    reaction_time: float,
    elements: Sequence[Element],
    fallback_preempt: float = DEFAULT_PREEMPT_MS,
) -> float:
    """Turn a configured reaction time into absolute milliseconds.

    Args:
        reaction_time: Configured value. Non-negative values are absolute;
            negative values are a fraction of the preempt.
        elements: Elements of the run. The first tap or hold path carrying
            a preempt supplies the scale.
        fallback_preempt: Preempt used when no element carries one.

    Returns:
        Reaction time in milliseconds (>= 0).
    """
    if reaction_time >= 0.0:
        return reaction_time

    preempt = next(
        (
            element.preempt
            for element in elements
            if not isinstance(element, SpinZoneElement) and element.preempt is not None
        ),
        None,
    )
    if preempt is None:
        logger.debug(f"No element preempt available, falling back to {fallback_preempt}ms")
        preempt = fallback_preempt

    return -reaction_time * preempt
