"""Bounds functionality: terrain protocols and playfield derivation."""

from spawnfield.core.bounds.protocol import CellRegion, TerrainLayer, TerrainRoot, TerrainSource
from spawnfield.core.bounds.resolver import (
    ACTOR_DEFAULT_HALF_EXTENT,
    DEFAULT_ROOT_NAME,
    BoundsResolver,
    layer_world_bounds,
)

__all__ = [
    # Protocols
    "CellRegion",
    "TerrainLayer",
    "TerrainRoot",
    "TerrainSource",
    # Resolver
    "BoundsResolver",
    "layer_world_bounds",
    "DEFAULT_ROOT_NAME",
    "ACTOR_DEFAULT_HALF_EXTENT",
]
