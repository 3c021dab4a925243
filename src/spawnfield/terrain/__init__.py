"""Terrain sources.

Architecture Note:
    terrain/ provides an in-memory implementation of the terrain protocols
    defined in core.bounds. Rendering engines supply their own.
"""

from spawnfield.terrain.tilemap import TerrainRoot, TerrainScene, Tilemap

__all__ = [
    "Tilemap",
    "TerrainRoot",
    "TerrainScene",
]
