"""Action sample models produced by the synthesizer and humanizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from autoreplay.core.models.geometry import Vector2


class Button(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


class Hand(Enum):
    """Which button is currently held down.

    Tri-state: nothing held, primary held, or secondary held.
    """

    UNSET = "unset"
    PRIMARY = "primary"
    SECONDARY = "secondary"

    def engaged(self) -> Hand:
        """Hand after engaging without alternating (keep current, else primary)."""
        match self:
            case Hand.UNSET:
                return Hand.PRIMARY
            case Hand.PRIMARY | Hand.SECONDARY:
                return self

    def alternated(self) -> Hand:
        """Hand after a fresh press (alternate between buttons)."""
        match self:
            case Hand.UNSET:
                return Hand.PRIMARY
            case Hand.PRIMARY:
                return Hand.SECONDARY
            case Hand.SECONDARY:
                return Hand.PRIMARY

    @property
    def buttons(self) -> frozenset[Button]:
        match self:
            case Hand.UNSET:
                return frozenset()
            case Hand.PRIMARY:
                return frozenset({Button.PRIMARY})
            case Hand.SECONDARY:
                return frozenset({Button.SECONDARY})


class SampleOrigin(str, Enum):
    """What produced an action sample."""

    ANCHOR = "anchor"
    HIT = "hit"
    HOLD = "hold"
    SPIN = "spin"
    RELEASE = "release"
    ANTI_REBIND = "anti_rebind"
    INTERPOLATED = "interpolated"


@dataclass(frozen=True, slots=True)
class ActionSample:
    """One output frame: time, cursor position and pressed buttons."""

    time: float
    position: Vector2
    buttons: frozenset[Button] = frozenset()
    origin: SampleOrigin = SampleOrigin.HIT

    @property
    def pressed(self) -> bool:
        return bool(self.buttons)
