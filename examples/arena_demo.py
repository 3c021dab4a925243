"""CLI demo: an authority session keeping an arena populated under attrition.

Usage:
    python examples/arena_demo.py                  # defaults
    python examples/arena_demo.py --target 40 --seconds 3 --kill-rate 5
    python examples/arena_demo.py --no-terrain -v  # default playfield, debug logs
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys

from spawnfield import (
    InMemoryHistoryStore,
    LocalWorld,
    MonsterTemplate,
    PlacementSettings,
    PlayerRegistry,
    PopulationHost,
    PopulationSettings,
    TerrainRoot,
    TerrainScene,
    Tilemap,
    Vec2,
)

ARENA_ROWS = [
    "        ##########        ",
    "    ##################    ",
    "  ######################  ",
    "##########################",
    "##########################",
    "  ######################  ",
    "    ##################    ",
    "        ##########        ",
]


def build_scene() -> TerrainScene:
    ground = TerrainRoot("Ground")
    ground.add_layer(Tilemap.from_rows("arena", ARENA_ROWS, cell_size=Vec2(4, 4)))
    ground.add_layer(Tilemap.from_rows("decor", ["*" * 4], origin=Vec2(40, 12), has_renderer=False))
    return TerrainScene(ground)


async def run_session(args: argparse.Namespace) -> InMemoryHistoryStore:
    rng = random.Random(args.seed)
    world = LocalWorld(
        [MonsterTemplate(f"Enemy {i}", patrol_speed=1.5 * i) for i in range(3)],
        rng=rng,
    )
    players = PlayerRegistry()
    players.join(Vec2(52, 16))
    history = InMemoryHistoryStore()

    population = PopulationSettings(
        target_count=args.target, reconcile_interval=args.interval, spawn_pause=0.01
    )
    placement = PlacementSettings(min_distance_from_players=10.0)
    terrain = None if args.no_terrain else build_scene()

    async with PopulationHost(
        world, players, terrain=terrain, population=population, placement=placement,
        rng=rng, history=history,
    ) as host:
        print(f"Playfield: {host.bounds}")
        frames = int(args.seconds / 0.1)
        for frame in range(frames):
            world.advance(0.1)
            alive = list(world.monsters())
            for monster in rng.sample(alive, min(args.kill_rate, len(alive))):
                world.kill(monster.entity)
            await asyncio.sleep(0.1)
            if frame % 10 == 0:
                print(f"t={frame / 10:.1f}s alive={len(world)} tracked={host.reconciler.population}")

    return history


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="arena-demo",
        description="Keep a monster population topped up while monsters die",
    )
    parser.add_argument("--target", type=int, default=30, help="Target population")
    parser.add_argument("--interval", type=float, default=0.5, help="Reconcile interval (s)")
    parser.add_argument("--seconds", type=float, default=2.0, help="Session length (s)")
    parser.add_argument("--kill-rate", type=int, default=2, help="Monsters killed per frame")
    parser.add_argument("--seed", type=int, default=7, help="Random seed")
    parser.add_argument("--no-terrain", action="store_true", help="Use the default playfield")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    history = asyncio.run(run_session(args))
    print(f"\nTicks recorded: {history.tick_count}")
    for name, value in history.totals().items():
        print(f"  {name}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
