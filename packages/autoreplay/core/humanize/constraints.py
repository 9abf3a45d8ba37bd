"""Position constraints applied to interpolated samples."""

from __future__ import annotations

from autoreplay.core.models.geometry import PLAYFIELD_HEIGHT, PLAYFIELD_WIDTH, Vector2
from autoreplay.core.utils.math import clamp, reflect_into_range


def bounce_into_playfield(position: Vector2) -> Vector2:
    """Reflect a position off the playfield borders."""
    return Vector2(
        x=reflect_into_range(position.x, 0.0, PLAYFIELD_WIDTH),
        y=reflect_into_range(position.y, 0.0, PLAYFIELD_HEIGHT),
    )


def coerce_near(position: Vector2, centre: Vector2, radius: float) -> Vector2:
    """Pull a position onto the circle around ``centre`` if it lies outside."""
    distance = position.distance_to(centre)
    if distance <= radius:
        return position
    return centre + (position - centre) * (radius / distance)


def closest_point_on_segment(point: Vector2, start: Vector2, end: Vector2) -> Vector2:
    seg = end - start
    seg_len_sq = seg.x * seg.x + seg.y * seg.y

    # Degenerate case: start == end
    if seg_len_sq < 1e-10:
        return start

    t = ((point.x - start.x) * seg.x + (point.y - start.y) * seg.y) / seg_len_sq
    return start + seg * clamp(t, 0.0, 1.0)


def coerce_to_segment(position: Vector2, start: Vector2, end: Vector2, radius: float) -> Vector2:
    """Keep a position within ``radius`` of the segment start-end."""
    return coerce_near(position, closest_point_on_segment(position, start, end), radius)
