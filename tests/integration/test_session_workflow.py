"""End-to-end authority session: terrain, attrition, players and a local actor."""

import asyncio
import random

import pytest

from spawnfield import (
    ActorController,
    Camera,
    InMemoryHistoryStore,
    LocalWorld,
    MonsterTemplate,
    PlacementSettings,
    PlayerRegistry,
    PopulationHost,
    PopulationSettings,
    Vec2,
)


@pytest.mark.asyncio
async def test_authority_session_keeps_population_alive(scene):
    world = LocalWorld(
        [MonsterTemplate("Enemy 0", patrol_speed=2.0), MonsterTemplate("Enemy 1")],
        rng=random.Random(3),
    )
    players = PlayerRegistry()
    hero = players.join(Vec2(30, 20))
    history = InMemoryHistoryStore()
    population = PopulationSettings(
        target_count=20,
        reconcile_interval=0.01,
        spawn_pause=0.0,
        spawnable_types=["Enemy 0", "Enemy 1", "Enemy 2"],
    )
    placement = PlacementSettings(min_distance_from_players=8.0, min_distance_from_peers=1.0)
    rng = random.Random(11)

    async with PopulationHost(
        world, players, terrain=scene, population=population, placement=placement,
        rng=rng, history=history,
    ) as host:
        actor = ActorController.for_terrain(
            scene, position=Vec2(30, 20), camera=Camera(ortho_size=5.0)
        )
        assert actor.bounds == host.bounds

        for _ in range(5):
            world.advance(0.1)
            for monster in list(world.monsters())[:3]:
                world.kill(monster.entity)
            actor.set_input(1.0, 0.5)
            players.move(hero, actor.fixed_step(0.1))
            actor.late_step()
            await asyncio.sleep(0.03)

        deadline = asyncio.get_running_loop().time() + 2.0
        while host.reconciler.population < 20 or any(
            not world.is_alive(t.entity) for t in host.reconciler.tracked
        ):
            assert asyncio.get_running_loop().time() < deadline
            await asyncio.sleep(0.01)

        inner = host.bounds.shrink(1.0)
        assert all(inner.contains(m.position) for m in world.monsters())
        assert host.bounds.shrink(0.5).contains(actor.position)

    assert len(world) == 0
    totals = history.totals()
    assert totals["pruned"] == 15
    assert totals["spawned"] - totals["pruned"] == 20
    assert totals["skipped"] > 0
