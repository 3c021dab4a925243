"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from spawnfield import (
    LocalWorld,
    MonsterTemplate,
    PlayerRegistry,
    PlayfieldBounds,
    PopulationSettings,
    TerrainRoot,
    TerrainScene,
    Tilemap,
    Vec2,
)
from spawnfield.core.placement import PlacementConstraints


class ScriptedRandom:
    """Random source replaying a fixed sequence of floats, then cycling it.

    choice() always returns the first element so type selection does not
    consume scripted values.
    """

    def __init__(self, values: list[float]) -> None:
        self._values = list(values)
        self._cursor = 0
        self.calls = 0

    def random(self) -> float:
        value = self._values[self._cursor % len(self._values)]
        self._cursor += 1
        self.calls += 1
        return value

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


@pytest.fixture
def square_bounds() -> PlayfieldBounds:
    """The [(0, 0), (100, 100)] playfield."""
    return PlayfieldBounds(Vec2(0, 0), Vec2(100, 100))


@pytest.fixture
def templates() -> list[MonsterTemplate]:
    return [MonsterTemplate("Enemy 0"), MonsterTemplate("Enemy 1"), MonsterTemplate("Enemy 2")]


@pytest.fixture
def world(templates) -> LocalWorld:
    """Authority world knowing the three default templates."""
    return LocalWorld(templates=templates)


@pytest.fixture
def players() -> PlayerRegistry:
    return PlayerRegistry()


@pytest.fixture
def scene() -> TerrainScene:
    """Ground root with a 60x40 floor at the origin and a 10x10 island to the right."""
    ground = TerrainRoot("Ground")
    ground.add_layer(Tilemap.from_rows("floor", ["#" * 60] * 40))
    ground.add_layer(Tilemap.from_rows("island", ["~" * 10] * 10, origin=Vec2(70, 5)))
    return TerrainScene(ground)


@pytest.fixture
def fast_settings() -> PopulationSettings:
    """Small population with a short cadence for lifecycle tests."""
    return PopulationSettings(
        target_count=10, reconcile_interval=0.01, spawn_pause=0.0, spawn_radius=50.0
    )


@pytest.fixture
def loose_constraints() -> PlacementConstraints:
    """Constraints that never reject, so every spawn lands on its first attempt."""
    return PlacementConstraints(
        min_distance_from_players=0.0, min_distance_from_peers=0.0, border_margin=1.0
    )
