"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support. All values
are static for the lifetime of an authority or actor; nothing re-reads them
at runtime.

Usage:
    from spawnfield.config import PopulationSettings, PlacementSettings

    # Load from environment variables (POPULATION_*, PLACEMENT_*, ACTOR_*)
    population = PopulationSettings()
    placement = PlacementSettings()

    # Or override with explicit values
    population = PopulationSettings(target_count=20, reconcile_interval=0.5)
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spawnfield.core.bounds import ACTOR_DEFAULT_HALF_EXTENT, DEFAULT_ROOT_NAME
from spawnfield.core.geometry import Vec2
from spawnfield.core.placement import PlacementConstraints


class PopulationSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the population reconciler.

    Attributes:
        target_count: Population the reconciler keeps topping up to.
        reconcile_interval: Seconds between reconciliation ticks.
        spawn_pause: Seconds between successive spawns within one tick.
        spawn_radius: Radius of the sampling disk; also the half side of the
            default playfield when no terrain is found.
        spawnable_types: Template names chosen from uniformly.
        terrain_root: Name of the terrain root holding playfield layers.

    Environment Variables:
        POPULATION_TARGET_COUNT
        POPULATION_RECONCILE_INTERVAL
        POPULATION_SPAWN_PAUSE
        POPULATION_SPAWN_RADIUS
        POPULATION_SPAWNABLE_TYPES (JSON list)
        POPULATION_TERRAIN_ROOT
    """

    model_config = SettingsConfigDict(
        env_prefix="POPULATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    target_count: int = Field(default=100, ge=0)
    reconcile_interval: float = Field(default=2.0, gt=0)
    spawn_pause: float = Field(default=0.1, ge=0)
    spawn_radius: float = Field(default=50.0, gt=0)
    spawnable_types: list[str] = Field(
        default_factory=lambda: ["Enemy 0", "Enemy 1", "Enemy 2"], min_length=1
    )
    terrain_root: str = DEFAULT_ROOT_NAME


class PlacementSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for spawn placement constraints.

    Environment Variables:
        PLACEMENT_MIN_DISTANCE_FROM_PLAYERS
        PLACEMENT_MIN_DISTANCE_FROM_PEERS
        PLACEMENT_BORDER_MARGIN
        PLACEMENT_MAX_ATTEMPTS
    """

    model_config = SettingsConfigDict(
        env_prefix="PLACEMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    min_distance_from_players: float = Field(default=25.0, ge=0)
    min_distance_from_peers: float = Field(default=2.0, ge=0)
    border_margin: float = Field(default=1.0, ge=0)
    max_attempts: int = Field(default=30, ge=0)

    def to_constraints(self) -> PlacementConstraints:
        return PlacementConstraints(
            min_distance_from_players=self.min_distance_from_players,
            min_distance_from_peers=self.min_distance_from_peers,
            border_margin=self.border_margin,
            max_attempts=self.max_attempts,
        )


class ActorSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a locally controlled actor and its camera.

    Attributes:
        move_speed: World units per second at full input.
        actor_radius: Collider radius kept clear of the playfield edge.
        input_deadzone: Input magnitude (and x component for facing) below
            which input is ignored.
        camera_offset_x: Camera offset from the actor along x.
        camera_offset_y: Camera offset from the actor along y.
        camera_smoothing: Lerp factor applied per render step (0-1).
        camera_default_range_x: Camera clamp range used without valid bounds.
        camera_default_range_y: Camera clamp range used without valid bounds.
        default_half_extent: Half side of the default playfield for actors.

    Environment Variables:
        ACTOR_MOVE_SPEED, ACTOR_ACTOR_RADIUS, ACTOR_INPUT_DEADZONE,
        ACTOR_CAMERA_OFFSET_X, ACTOR_CAMERA_OFFSET_Y, ACTOR_CAMERA_SMOOTHING,
        ACTOR_CAMERA_DEFAULT_RANGE_X, ACTOR_CAMERA_DEFAULT_RANGE_Y,
        ACTOR_DEFAULT_HALF_EXTENT
    """

    model_config = SettingsConfigDict(
        env_prefix="ACTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    move_speed: float = Field(default=5.0, ge=0)
    actor_radius: float = Field(default=0.5, ge=0)
    input_deadzone: float = Field(default=0.1, ge=0)
    camera_offset_x: float = 0.0
    camera_offset_y: float = 0.0
    camera_smoothing: float = Field(default=0.125, ge=0, le=1)
    camera_default_range_x: float = Field(default=10.0, ge=0)
    camera_default_range_y: float = Field(default=10.0, ge=0)
    default_half_extent: float = Field(default=ACTOR_DEFAULT_HALF_EXTENT, gt=0)

    @model_validator(mode="after")
    def _check_radius(self) -> ActorSettings:
        if self.actor_radius >= self.default_half_extent:
            raise ValueError("actor_radius must be smaller than default_half_extent")
        return self

    @property
    def camera_offset(self) -> Vec2:
        return Vec2(self.camera_offset_x, self.camera_offset_y)

    @property
    def camera_default_range(self) -> Vec2:
        return Vec2(self.camera_default_range_x, self.camera_default_range_y)
