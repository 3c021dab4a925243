"""In-memory tilemap terrain.

A sparse grid of painted cells with an affine cell-to-world transform.
Implements the TerrainLayer / TerrainRoot / TerrainSource protocols so the
bounds resolver can run without a rendering engine.

Usage:
    ground = TerrainRoot("Ground")
    floor = ground.add_layer(Tilemap.from_rows("floor", ["####", "#..#", "####"]))
    scene = TerrainScene(ground)
    scene.find_root("Ground")  # -> ground
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from spawnfield.core.bounds import CellRegion
from spawnfield.core.geometry import Vec2

EMPTY_CELL = " "


class Tilemap:
    """Sparse cell grid.

    Painting a cell grows cell_bounds; erasing never shrinks it until
    compress_bounds() is called, matching how tile editors track their
    allocated region.

    Args:
        name: Layer name.
        origin: World position of cell (0, 0)'s lower-left corner.
        cell_size: World size of one cell along x and y.
        has_renderer: Whether the layer is drawn. Collision or logic layers
            set this False and are ignored by the bounds resolver.
    """

    def __init__(
        self,
        name: str,
        origin: Vec2 | None = None,
        cell_size: Vec2 | None = None,
        has_renderer: bool = True,
    ) -> None:
        self.name = name
        self._origin = origin or Vec2()
        self._cell_size = cell_size or Vec2(1.0, 1.0)
        self._has_renderer = has_renderer
        self._cells: dict[tuple[int, int], str] = {}
        self._region = CellRegion()

    @classmethod
    def from_rows(
        cls,
        name: str,
        rows: Sequence[str],
        origin: Vec2 | None = None,
        cell_size: Vec2 | None = None,
        has_renderer: bool = True,
    ) -> Tilemap:
        """Build a tilemap from text rows, top row first.

        Every character other than a space paints a cell; the last row sits
        at y = 0.
        """
        tilemap = cls(name, origin=origin, cell_size=cell_size, has_renderer=has_renderer)
        height = len(rows)
        for row_index, row in enumerate(rows):
            y = height - 1 - row_index
            for x, char in enumerate(row):
                if char != EMPTY_CELL:
                    tilemap.set_tile(x, y, char)
        return tilemap

    @property
    def has_renderer(self) -> bool:
        return self._has_renderer

    @property
    def cell_bounds(self) -> CellRegion:
        return self._region

    def set_tile(self, x: int, y: int, tile: str) -> None:
        """Paint a cell and grow the region to cover it."""
        self._cells[(x, y)] = tile
        if self._region.is_empty:
            self._region = CellRegion(x, y, x + 1, y + 1)
            return
        r = self._region
        self._region = CellRegion(
            min(r.x_min, x), min(r.y_min, y), max(r.x_max, x + 1), max(r.y_max, y + 1)
        )

    def erase_tile(self, x: int, y: int) -> bool:
        """Clear a cell. Returns True if it was painted."""
        return self._cells.pop((x, y), None) is not None

    def compress_bounds(self) -> None:
        """Trim the region to the minimal box around painted cells."""
        if not self._cells:
            self._region = CellRegion()
            return
        xs = [x for x, _ in self._cells]
        ys = [y for _, y in self._cells]
        self._region = CellRegion(min(xs), min(ys), max(xs) + 1, max(ys) + 1)

    def local_to_world(self, point: Vec2) -> Vec2:
        return Vec2(
            self._origin.x + point.x * self._cell_size.x,
            self._origin.y + point.y * self._cell_size.y,
        )


class TerrainRoot:
    """Named group of tilemaps, optionally nesting other roots."""

    def __init__(self, name: str, layers: Iterable[Tilemap] = ()) -> None:
        self.name = name
        self._layers: list[Tilemap] = list(layers)
        self._children: list[TerrainRoot] = []

    def add_layer(self, layer: Tilemap) -> Tilemap:
        self._layers.append(layer)
        return layer

    def add_child(self, child: TerrainRoot) -> TerrainRoot:
        self._children.append(child)
        return child

    def layers(self) -> Iterator[Tilemap]:
        """Yield own layers, then those of nested roots depth-first."""
        yield from self._layers
        for child in self._children:
            yield from child.layers()


class TerrainScene:
    """Collection of terrain roots addressable by name."""

    def __init__(self, *roots: TerrainRoot) -> None:
        self._roots: dict[str, TerrainRoot] = {}
        for root in roots:
            self.add_root(root)

    def add_root(self, root: TerrainRoot) -> TerrainRoot:
        self._roots[root.name] = root
        return root

    def find_root(self, name: str) -> TerrainRoot | None:
        return self._roots.get(name)
