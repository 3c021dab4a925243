"""Orthographic follow camera and fixed-aspect screen viewport."""

from __future__ import annotations

from dataclasses import dataclass

from spawnfield.core.geometry import Vec2

PORTRAIT_ASPECT = 9.0 / 16.0


@dataclass(slots=True)
class Camera:
    """2D orthographic camera.

    Attributes:
        position: World position of the view center.
        ortho_size: Half the visible height in world units.
        aspect: Visible width divided by visible height.
    """

    position: Vec2 = Vec2()
    ortho_size: float = 5.0
    aspect: float = PORTRAIT_ASPECT

    @property
    def half_extents(self) -> Vec2:
        return Vec2(self.ortho_size * self.aspect, self.ortho_size)


@dataclass(frozen=True, slots=True)
class ViewportRect:
    """Normalized screen rectangle (all fields in [0, 1])."""

    x: float
    y: float
    width: float
    height: float


def letterbox_rect(
    screen_width: float, screen_height: float, target_aspect: float = PORTRAIT_ASPECT
) -> ViewportRect:
    """Centered viewport that keeps target_aspect on any screen.

    Screens narrower than the target get bars above and below; wider screens
    get bars on the sides.
    """
    if screen_width <= 0 or screen_height <= 0:
        raise ValueError(f"Screen size must be positive, got {screen_width}x{screen_height}")
    if target_aspect <= 0:
        raise ValueError(f"target_aspect must be positive, got {target_aspect}")

    scale_height = (screen_width / screen_height) / target_aspect
    if scale_height < 1.0:
        return ViewportRect(x=0.0, y=(1.0 - scale_height) / 2.0, width=1.0, height=scale_height)

    scale_width = 1.0 / scale_height
    return ViewportRect(x=(1.0 - scale_width) / 2.0, y=0.0, width=scale_width, height=1.0)
