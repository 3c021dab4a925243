"""Movement functionality: position and viewport clamping."""

from spawnfield.core.movement.clamp import DEFAULT_VIEWPORT_RANGE, clamp_position, clamp_viewport

__all__ = [
    "clamp_position",
    "clamp_viewport",
    "DEFAULT_VIEWPORT_RANGE",
]
