"""Bounds-aware clamping for actors and their trailing viewport.

Usage:
    pos = clamp_position(proposed, bounds, margin=0.5)
    cam = clamp_viewport(desired, bounds, half_extents=Vec2(4.5, 8.0))
"""

from __future__ import annotations

from spawnfield.core.geometry import PlayfieldBounds, Vec2, clamp

DEFAULT_VIEWPORT_RANGE = Vec2(10.0, 10.0)


def clamp_position(proposed: Vec2, bounds: PlayfieldBounds, margin: float) -> Vec2:
    """Keep an actor of radius margin inside bounds.

    Degenerate bounds leave proposed unchanged.
    """
    if bounds.is_degenerate:
        return proposed
    return bounds.shrink(margin).clamp(proposed)


def _clamp_axis(value: float, lo: float, hi: float, half_extent: float) -> float:
    inner_lo = lo + half_extent
    inner_hi = hi - half_extent
    if inner_lo > inner_hi:
        # Playfield narrower than the view on this axis: pin to its midpoint.
        return (lo + hi) * 0.5
    return clamp(value, inner_lo, inner_hi)


def clamp_viewport(
    desired: Vec2,
    bounds: PlayfieldBounds,
    half_extents: Vec2,
    default_range: Vec2 = DEFAULT_VIEWPORT_RANGE,
) -> Vec2:
    """Keep a viewport of the given half extents inside bounds.

    Each axis is handled independently. When the bounds are degenerate the
    viewport center is clamped to [-default_range, default_range] instead.
    """
    if bounds.is_degenerate:
        return Vec2(
            clamp(desired.x, -default_range.x, default_range.x),
            clamp(desired.y, -default_range.y, default_range.y),
        )
    return Vec2(
        _clamp_axis(desired.x, bounds.min.x, bounds.max.x, half_extents.x),
        _clamp_axis(desired.y, bounds.min.y, bounds.max.y, half_extents.y),
    )
