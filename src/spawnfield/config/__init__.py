"""Configuration module using Pydantic Settings.

Provides typed configuration for the population reconciler, placement
constraints and local actors, with environment variable support.

Usage:
    from spawnfield.config import PopulationSettings, PlacementSettings

    population = PopulationSettings(target_count=20)
    constraints = PlacementSettings(max_attempts=10).to_constraints()
"""

from spawnfield.config.settings import ActorSettings, PlacementSettings, PopulationSettings

__all__ = [
    "PopulationSettings",
    "PlacementSettings",
    "ActorSettings",
]
