"""Tests for playfield bounds derivation.

Critical Invariants:
- Non-degenerate terrain yields positive-size bounds covering every layer
- Absent or degenerate terrain yields the configured default
- Authority and actor resolvers agree on real terrain
- Resolution is idempotent
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from spawnfield.core.bounds import BoundsResolver, layer_world_bounds
from spawnfield.core.geometry import PlayfieldBounds, Vec2
from spawnfield.terrain import TerrainRoot, TerrainScene, Tilemap


def test_union_of_layers(scene):
    """Bounds span the floor and the offset island."""
    bounds = BoundsResolver().resolve(scene)

    assert bounds == PlayfieldBounds(Vec2(0, 0), Vec2(80, 40))
    assert bounds.width > 0 and bounds.height > 0


def test_missing_root_uses_default():
    """CRITICAL: No root under the configured name falls back to the default.

    Why: Spawning must work on maps without terrain.
    """
    resolver = BoundsResolver(default_half_extent=50.0)

    assert resolver.resolve(TerrainScene()) == PlayfieldBounds.centered(50.0)
    assert resolver.resolve(None) == PlayfieldBounds.centered(50.0)


def test_root_without_layers_uses_default():
    resolver = BoundsResolver(default_half_extent=20.0)
    scene = TerrainScene(TerrainRoot("Ground"))

    assert resolver.resolve(scene) == PlayfieldBounds(Vec2(-20, -20), Vec2(20, 20))


def test_empty_and_unrendered_layers_ignored():
    """Layers without a renderer or without painted cells contribute nothing."""
    ground = TerrainRoot("Ground")
    ground.add_layer(Tilemap("blank"))
    ground.add_layer(Tilemap.from_rows("collision", ["#" * 200] * 200, has_renderer=False))
    ground.add_layer(Tilemap.from_rows("floor", ["##"] * 3))

    bounds = BoundsResolver().resolve(TerrainScene(ground))

    assert bounds == PlayfieldBounds(Vec2(0, 0), Vec2(2, 3))


def test_only_empty_layers_uses_default():
    ground = TerrainRoot("Ground", [Tilemap("a"), Tilemap("b")])

    assert BoundsResolver(default_half_extent=5.0).resolve(
        TerrainScene(ground)
    ) == PlayfieldBounds.centered(5.0)


def test_compress_trims_erased_cells():
    """Erased cells do not widen the playfield once the layer is trimmed."""
    floor = Tilemap.from_rows("floor", ["#" * 10])
    floor.set_tile(50, 0, "#")
    floor.erase_tile(50, 0)
    assert floor.cell_bounds.x_max == 51  # untrimmed

    bounds = layer_world_bounds(floor)

    assert bounds == PlayfieldBounds(Vec2(0, 0), Vec2(10, 1))


def test_cell_size_and_origin_applied():
    floor = Tilemap.from_rows("floor", ["###"] * 2, origin=Vec2(-3, -1), cell_size=Vec2(2, 0.5))

    assert layer_world_bounds(floor) == PlayfieldBounds(Vec2(-3, -1), Vec2(3, 0))


def test_nested_roots_are_enumerated():
    ground = TerrainRoot("Ground")
    ground.add_child(TerrainRoot("east", [Tilemap.from_rows("e", ["#"], origin=Vec2(30, 30))]))
    ground.add_layer(Tilemap.from_rows("w", ["#"]))

    assert BoundsResolver().resolve(TerrainScene(ground)) == PlayfieldBounds(
        Vec2(0, 0), Vec2(31, 31)
    )


def test_authority_and_actor_agree(scene):
    """CRITICAL: Resolvers differing only in default agree on real terrain.

    Why: Monsters and players must share one playfield.
    """
    authority = BoundsResolver(default_half_extent=50.0)
    actor = BoundsResolver(default_half_extent=20.0)

    assert authority.resolve(scene) == actor.resolve(scene)


def test_resolve_is_idempotent(scene):
    resolver = BoundsResolver()

    assert resolver.resolve(scene) == resolver.resolve(scene)


def test_invalid_default_rejected():
    with pytest.raises(ValueError, match="default_half_extent"):
        BoundsResolver(default_half_extent=0)


cell_blocks = st.tuples(
    st.integers(min_value=-50, max_value=50),
    st.integers(min_value=-50, max_value=50),
    st.integers(min_value=1, max_value=20),
    st.integers(min_value=1, max_value=20),
)


@given(blocks=st.lists(cell_blocks, min_size=1, max_size=5))
def test_bounds_contain_every_layer(blocks):
    """Property: resolved bounds are positive and contain each layer's region."""
    ground = TerrainRoot("Ground")
    expected: list[PlayfieldBounds] = []
    for i, (x, y, w, h) in enumerate(blocks):
        layer = Tilemap(f"layer{i}")
        for cx in range(x, x + w):
            for cy in range(y, y + h):
                layer.set_tile(cx, cy, "#")
        ground.add_layer(layer)
        expected.append(PlayfieldBounds(Vec2(x, y), Vec2(x + w, y + h)))

    bounds = BoundsResolver().resolve(TerrainScene(ground))

    assert not bounds.is_degenerate
    for region in expected:
        assert bounds.contains_bounds(region)
