"""Exceptions raised by the generation pipeline."""

from __future__ import annotations


class AutoReplayError(Exception):
    """Base class for all AutoReplay errors."""


class MalformedHoldPathError(AutoReplayError):
    """Raised when a hold path cannot produce any sub-events.

    A hold path needs at least one tick, repeat or tail checkpoint after
    its entry, or a legacy scoring sample. Anything less would silently
    produce an empty trajectory for the path, so it is rejected loudly.

    Attributes:
        element_index: Timeline index of the offending element (-1 if unknown).
        reason: What specifically is wrong with the path.
    """

    def __init__(self, *, reason: str, element_index: int = -1) -> None:
        self.element_index = element_index
        self.reason = reason
        parts = [f"Malformed hold path: {reason}"]
        if element_index >= 0:
            parts.append(f"element={element_index}")
        super().__init__(" | ".join(parts))


class UnknownPresetError(AutoReplayError):
    """Raised when a preset name cannot be resolved."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown autoplay preset: {name!r}")


__all__ = [
    "AutoReplayError",
    "MalformedHoldPathError",
    "UnknownPresetError",
]
