"""Locally controlled actor with bounded movement and a trailing camera.

Three entry points replace a per-frame callback, each meant to be driven
by its own cadence:

    controller.set_input(x, y)   # whenever input is sampled
    controller.fixed_step(dt)    # physics cadence
    controller.late_step()       # render cadence, after movement

Usage:
    controller = ActorController.for_terrain(scene, camera=Camera(ortho_size=5))
    controller.set_input(1.0, 0.0)
    controller.fixed_step(0.02)
    controller.late_step()
"""

from __future__ import annotations

from spawnfield.actor.camera import Camera
from spawnfield.config.settings import ActorSettings
from spawnfield.core.bounds import DEFAULT_ROOT_NAME, BoundsResolver, TerrainSource
from spawnfield.core.geometry import PlayfieldBounds, Vec2
from spawnfield.core.movement import clamp_position, clamp_viewport


class ActorController:
    """Moves one actor inside the playfield and keeps its camera in view.

    Touches no state shared with the population reconciler.

    Args:
        position: Starting world position.
        bounds: Playfield for this actor.
        camera: Camera following the actor. Defaults to Camera().
        settings: Movement and camera settings.
    """

    def __init__(
        self,
        position: Vec2,
        bounds: PlayfieldBounds,
        camera: Camera | None = None,
        settings: ActorSettings | None = None,
    ) -> None:
        self._settings = settings or ActorSettings()
        self._bounds = bounds
        self._position = position
        self._camera = camera or Camera()
        self._input = Vec2()
        self._velocity = Vec2()
        self._facing_right = True
        self.late_step(smoothing=1.0)

    @classmethod
    def for_terrain(
        cls,
        terrain: TerrainSource | None,
        position: Vec2 | None = None,
        camera: Camera | None = None,
        settings: ActorSettings | None = None,
        root_name: str = DEFAULT_ROOT_NAME,
    ) -> ActorController:
        """Build a controller whose bounds come from terrain (actor default)."""
        settings = settings or ActorSettings()
        resolver = BoundsResolver(
            root_name=root_name, default_half_extent=settings.default_half_extent
        )
        return cls(position or Vec2(), resolver.resolve(terrain), camera, settings)

    @property
    def position(self) -> Vec2:
        return self._position

    @property
    def velocity(self) -> Vec2:
        """Displacement per second applied by the last fixed step."""
        return self._velocity

    @property
    def bounds(self) -> PlayfieldBounds:
        return self._bounds

    @property
    def camera(self) -> Camera:
        return self._camera

    @property
    def facing_right(self) -> bool:
        return self._facing_right

    def set_input(self, x: float, y: float) -> None:
        """Record the movement input and update facing."""
        self._input = Vec2(x, y)
        deadzone = self._settings.input_deadzone
        if x > deadzone:
            self._facing_right = True
        elif x < -deadzone:
            self._facing_right = False

    def fixed_step(self, dt: float) -> Vec2:
        """Advance movement by dt seconds and return the new position."""
        if self._input.magnitude <= self._settings.input_deadzone:
            self._velocity = Vec2()
            return self._position

        step = self._input.normalized().scaled(self._settings.move_speed * dt)
        proposed = self._position + step
        moved = clamp_position(proposed, self._bounds, self._settings.actor_radius)
        self._velocity = (moved - self._position).scaled(1.0 / dt) if dt > 0 else Vec2()
        self._position = moved
        return moved

    def late_step(self, smoothing: float | None = None) -> Vec2:
        """Ease the camera toward the actor and keep the view inside bounds.

        Args:
            smoothing: Override for the lerp factor (1.0 snaps).
        """
        factor = self._settings.camera_smoothing if smoothing is None else smoothing
        target = self._position + self._settings.camera_offset
        eased = self._camera.position.lerp(target, factor)
        self._camera.position = clamp_viewport(
            eased,
            self._bounds,
            self._camera.half_extents,
            self._settings.camera_default_range,
        )
        return self._camera.position
