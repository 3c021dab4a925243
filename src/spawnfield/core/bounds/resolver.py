"""Playfield bounds derivation from terrain geometry.

Usage:
    # Authority context: default square of side 2 * spawn_radius
    resolver = BoundsResolver(default_half_extent=settings.spawn_radius)
    bounds = resolver.resolve(scene)

    # Actor context: fixed 40x40 default
    bounds = BoundsResolver(default_half_extent=ACTOR_DEFAULT_HALF_EXTENT).resolve(scene)
"""

from __future__ import annotations

import logging

from spawnfield.core.bounds.protocol import TerrainLayer, TerrainSource
from spawnfield.core.geometry import PlayfieldBounds

logger = logging.getLogger(__name__)

DEFAULT_ROOT_NAME = "Ground"
ACTOR_DEFAULT_HALF_EXTENT = 20.0


def layer_world_bounds(layer: TerrainLayer) -> PlayfieldBounds | None:
    """Trim layer to its occupied cells and return them in world space.

    Returns:
        World-space bounds of the occupied region, or None when the layer
        has no occupied cells.
    """
    layer.compress_bounds()
    region = layer.cell_bounds
    if region.is_empty:
        return None
    return PlayfieldBounds.from_corners(
        layer.local_to_world(region.min_corner),
        layer.local_to_world(region.max_corner),
    )


class BoundsResolver:
    """Derives a single playfield rectangle from the union of terrain layers.

    Both the authority and each locally controlled actor build their own
    resolver; only the default differs, so any non-degenerate terrain yields
    the same bounds in both contexts.

    Args:
        root_name: Name of the terrain root to enumerate.
        default_half_extent: Half side of the origin-centered square returned
            when terrain is absent or degenerate.
    """

    def __init__(
        self,
        root_name: str = DEFAULT_ROOT_NAME,
        default_half_extent: float = ACTOR_DEFAULT_HALF_EXTENT,
    ) -> None:
        if default_half_extent <= 0:
            raise ValueError(f"default_half_extent must be positive, got {default_half_extent}")
        self._root_name = root_name
        self._default = PlayfieldBounds.centered(default_half_extent)

    def resolve(self, source: TerrainSource | None) -> PlayfieldBounds:
        """Union every rendered layer under the root, or fall back to the default."""
        combined = self._combine(source)
        if combined is None or combined.is_degenerate:
            logger.debug(
                "No usable terrain under %r, using default bounds %s", self._root_name, self._default
            )
            return self._default
        return combined

    def _combine(self, source: TerrainSource | None) -> PlayfieldBounds | None:
        if source is None:
            return None
        root = source.find_root(self._root_name)
        if root is None:
            return None

        combined: PlayfieldBounds | None = None
        for layer in root.layers():
            if not layer.has_renderer:
                continue
            region = layer_world_bounds(layer)
            if region is None:
                continue
            combined = region if combined is None else combined.union(region)
        return combined
