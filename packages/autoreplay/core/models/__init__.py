"""Data models shared across the generation pipeline."""

from autoreplay.core.models.actions import ActionSample, Button, Hand, SampleOrigin
from autoreplay.core.models.elements import (
    Checkpoint,
    CheckpointKind,
    Element,
    HoldPathElement,
    SpinZoneElement,
    TapElement,
)
from autoreplay.core.models.events import AbstractEvent
from autoreplay.core.models.geometry import (
    CURSOR_ANCHOR,
    PLAYFIELD_HEIGHT,
    PLAYFIELD_WIDTH,
    SPIN_CENTRE,
    Vector2,
)

__all__ = [
    "AbstractEvent",
    "ActionSample",
    "Button",
    "CURSOR_ANCHOR",
    "Checkpoint",
    "CheckpointKind",
    "Element",
    "Hand",
    "HoldPathElement",
    "PLAYFIELD_HEIGHT",
    "PLAYFIELD_WIDTH",
    "SPIN_CENTRE",
    "SampleOrigin",
    "SpinZoneElement",
    "TapElement",
    "Vector2",
]
