"""Core functionalities: stateless primitives for playfield population.

Architecture Note:
    core/ contains pure, stateless functionalities: geometry, identity,
    bounds derivation, placement sampling and movement clamping. They hold
    no runtime state beyond an injected random source.
    For stateful services, see world/, population/ and actor/.
"""

from spawnfield.core.bounds import (
    ACTOR_DEFAULT_HALF_EXTENT,
    DEFAULT_ROOT_NAME,
    BoundsResolver,
    CellRegion,
    TerrainLayer,
    TerrainRoot,
    TerrainSource,
)
from spawnfield.core.geometry import PlayfieldBounds, Vec2, clamp
from spawnfield.core.identity import EntityId
from spawnfield.core.movement import clamp_position, clamp_viewport
from spawnfield.core.placement import (
    Placement,
    PlacementConstraints,
    PositionsLike,
    RandomSource,
    SpatialPlacementSampler,
)

__all__ = [
    # Geometry
    "Vec2",
    "PlayfieldBounds",
    "clamp",
    # Identity
    "EntityId",
    # Bounds
    "BoundsResolver",
    "CellRegion",
    "TerrainLayer",
    "TerrainRoot",
    "TerrainSource",
    "DEFAULT_ROOT_NAME",
    "ACTOR_DEFAULT_HALF_EXTENT",
    # Placement
    "Placement",
    "PlacementConstraints",
    "PositionsLike",
    "RandomSource",
    "SpatialPlacementSampler",
    # Movement
    "clamp_position",
    "clamp_viewport",
]
