"""Terrain protocols consumed by the bounds resolver.

Any renderer or tilemap backend can supply playfield geometry by
implementing these three small interfaces.

Usage:
    scene = TerrainScene()            # spawnfield.terrain implementation
    bounds = BoundsResolver().resolve(scene)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from spawnfield.core.geometry import Vec2


@dataclass(frozen=True, slots=True)
class CellRegion:
    """Rectangular block of grid cells in layer-local cell coordinates.

    min is inclusive and max exclusive, so a single cell at (0, 0) spans
    min=(0, 0), max=(1, 1).
    """

    x_min: int = 0
    y_min: int = 0
    x_max: int = 0
    y_max: int = 0

    @property
    def is_empty(self) -> bool:
        return self.x_max <= self.x_min or self.y_max <= self.y_min

    @property
    def min_corner(self) -> Vec2:
        return Vec2(float(self.x_min), float(self.y_min))

    @property
    def max_corner(self) -> Vec2:
        return Vec2(float(self.x_max), float(self.y_max))


@runtime_checkable
class TerrainLayer(Protocol):
    """One renderable layer of terrain geometry."""

    @property
    def has_renderer(self) -> bool:
        """Whether this layer is drawn. Non-rendered layers are ignored."""
        ...

    @property
    def cell_bounds(self) -> CellRegion:
        """Current cell region of the layer."""
        ...

    def compress_bounds(self) -> None:
        """Trim cell_bounds to the minimal region of occupied cells."""
        ...

    def local_to_world(self, point: Vec2) -> Vec2:
        """Transform a point in cell space to world space."""
        ...


@runtime_checkable
class TerrainRoot(Protocol):
    """Named group of terrain layers."""

    def layers(self) -> Iterable[TerrainLayer]:
        """Enumerate every layer under this root, nested ones included."""
        ...


@runtime_checkable
class TerrainSource(Protocol):
    """Lookup of terrain roots by name."""

    def find_root(self, name: str) -> TerrainRoot | None:
        """Return the root called name, or None when absent."""
        ...
