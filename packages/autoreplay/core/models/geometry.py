"""Playfield geometry primitives."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

PLAYFIELD_WIDTH = 512.0
PLAYFIELD_HEIGHT = 384.0


class Vector2(BaseModel):
    """Immutable 2D point in playfield space."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(x=self.x * scalar, y=self.y * scalar)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


# Cursor rest position before the first element
CURSOR_ANCHOR = Vector2(x=256.0, y=384.0)
SPIN_CENTRE = Vector2(x=256.0, y=192.0)
