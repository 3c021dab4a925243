"""Placement functionality: constraints and the rejection sampler."""

from spawnfield.core.placement.models import (
    REJECT_PEER,
    REJECT_PLAYER,
    Placement,
    PlacementConstraints,
    PositionsLike,
)
from spawnfield.core.placement.sampler import RandomSource, SpatialPlacementSampler

__all__ = [
    # Models
    "Placement",
    "PlacementConstraints",
    "PositionsLike",
    "REJECT_PLAYER",
    "REJECT_PEER",
    # Sampler
    "RandomSource",
    "SpatialPlacementSampler",
]
