"""Plane geometry primitives.

Usage:
    point = Vec2(3.0, 4.0)
    bounds = PlayfieldBounds(Vec2(0, 0), Vec2(100, 100))
    inner = bounds.shrink(1.0)
    inner.contains(bounds.clamp(point))
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi].

    When lo > hi the lower limit wins for values below it and the upper
    limit for values above it.
    """
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable 2D point or vector in world units."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction, or the zero vector."""
        length = self.magnitude
        if length == 0.0:
            return Vec2()
        return Vec2(self.x / length, self.y / length)

    def distance_to(self, other: Vec2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, target: Vec2, t: float) -> Vec2:
        """Linear interpolation toward target, t clamped to [0, 1]."""
        t = clamp(t, 0.0, 1.0)
        return Vec2(self.x + (target.x - self.x) * t, self.y + (target.y - self.y) * t)


@dataclass(frozen=True, slots=True)
class PlayfieldBounds:
    """Axis-aligned rectangle of valid world positions.

    Instances are never mutated: union, shrink and friends return new bounds.
    Resolved playfields always have positive width and height (see
    BoundsResolver), but the type itself can describe degenerate rectangles
    so callers can detect and replace them.
    """

    min: Vec2
    max: Vec2

    @classmethod
    def centered(cls, half_extent: float, center: Vec2 | None = None) -> PlayfieldBounds:
        """Square bounds of side 2 * half_extent around center (default origin)."""
        c = center or Vec2()
        return cls(
            Vec2(c.x - half_extent, c.y - half_extent),
            Vec2(c.x + half_extent, c.y + half_extent),
        )

    @classmethod
    def from_corners(cls, a: Vec2, b: Vec2) -> PlayfieldBounds:
        """Bounds spanning two arbitrary corners (order-independent)."""
        return cls(
            Vec2(min(a.x, b.x), min(a.y, b.y)),
            Vec2(max(a.x, b.x), max(a.y, b.y)),
        )

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def center(self) -> Vec2:
        return Vec2((self.min.x + self.max.x) * 0.5, (self.min.y + self.max.y) * 0.5)

    @property
    def is_degenerate(self) -> bool:
        """True when width or height is not positive."""
        return self.width <= 0 or self.height <= 0

    def union(self, other: PlayfieldBounds) -> PlayfieldBounds:
        """Smallest bounds containing both rectangles."""
        return PlayfieldBounds(
            Vec2(min(self.min.x, other.min.x), min(self.min.y, other.min.y)),
            Vec2(max(self.max.x, other.max.x), max(self.max.y, other.max.y)),
        )

    def shrink(self, margin: float) -> PlayfieldBounds:
        """Bounds moved inward by margin on every side.

        The result may be degenerate when margin exceeds half the size.
        """
        return PlayfieldBounds(
            Vec2(self.min.x + margin, self.min.y + margin),
            Vec2(self.max.x - margin, self.max.y - margin),
        )

    def clamp(self, point: Vec2) -> Vec2:
        """Clamp each axis of point into [min, max]."""
        return Vec2(
            clamp(point.x, self.min.x, self.max.x),
            clamp(point.y, self.min.y, self.max.y),
        )

    def contains(self, point: Vec2) -> bool:
        """Inclusive containment test."""
        return self.min.x <= point.x <= self.max.x and self.min.y <= point.y <= self.max.y

    def contains_bounds(self, other: PlayfieldBounds) -> bool:
        return self.contains(other.min) and self.contains(other.max)
