"""Geometry functionality: points, vectors and playfield rectangles."""

from spawnfield.core.geometry.models import PlayfieldBounds, Vec2, clamp

__all__ = [
    "Vec2",
    "PlayfieldBounds",
    "clamp",
]
