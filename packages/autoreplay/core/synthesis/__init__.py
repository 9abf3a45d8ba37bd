"""Timeline to input action synthesis."""

from autoreplay.core.synthesis.actions import ActionSynthesizer, synthesize_actions
from autoreplay.core.synthesis.reaction import (
    DEFAULT_PREEMPT_MS,
    preempt_from_approach_rate,
    resolve_reaction_time,
)
from autoreplay.core.synthesis.spin import spin_position, spin_samples

__all__ = [
    "ActionSynthesizer",
    "DEFAULT_PREEMPT_MS",
    "preempt_from_approach_rate",
    "resolve_reaction_time",
    "spin_position",
    "spin_samples",
    "synthesize_actions",
]
