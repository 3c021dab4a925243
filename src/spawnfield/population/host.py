"""Authority host: ties bounds resolution and the reconciler to authority lifecycle.

Usage:
    host = PopulationHost(world, players, terrain=scene)
    await host.on_start_authority()
    ...
    await host.on_stop_authority()

    # Or scoped:
    async with PopulationHost(world, players, terrain=scene) as host:
        ...
"""

from __future__ import annotations

import logging
from types import TracebackType

from spawnfield.config.settings import PlacementSettings, PopulationSettings
from spawnfield.core.bounds import BoundsResolver, TerrainSource
from spawnfield.core.geometry import PlayfieldBounds
from spawnfield.core.placement import RandomSource, SpatialPlacementSampler
from spawnfield.population.protocol import PositionSource, SpawnWorld
from spawnfield.population.reconciler import PopulationReconciler
from spawnfield.tracing import HistoryStore

logger = logging.getLogger(__name__)


class PopulationHost:
    """Owns one reconciler for the lifetime of an authority session.

    Bounds are derived once per start with the authority default (a square
    of side 2 * spawn_radius around the origin) and never mutated.

    Args:
        world: World implementing the creation, liveness and authority protocols.
        players: Player position source.
        terrain: Terrain source; None means default bounds.
        population: Population settings. Defaults load from the environment.
        placement: Placement settings. Defaults load from the environment.
        rng: Random source shared by type selection and placement.
        history: Optional reconciliation history store.
    """

    def __init__(
        self,
        world: SpawnWorld,
        players: PositionSource,
        terrain: TerrainSource | None = None,
        population: PopulationSettings | None = None,
        placement: PlacementSettings | None = None,
        rng: RandomSource | None = None,
        history: HistoryStore | None = None,
    ) -> None:
        self._population = population or PopulationSettings()
        self._placement = placement or PlacementSettings()
        self._terrain = terrain
        self._resolver = BoundsResolver(
            root_name=self._population.terrain_root,
            default_half_extent=self._population.spawn_radius,
        )
        sampler = None
        if rng is not None:
            sampler = SpatialPlacementSampler(self._population.spawn_radius, rng)
        self._reconciler = PopulationReconciler(
            world,
            players,
            settings=self._population,
            constraints=self._placement.to_constraints(),
            sampler=sampler,
            rng=rng,
            history=history,
        )
        self._bounds: PlayfieldBounds | None = None

    @property
    def reconciler(self) -> PopulationReconciler:
        return self._reconciler

    @property
    def bounds(self) -> PlayfieldBounds | None:
        """Bounds computed at the last authority start."""
        return self._bounds

    def resolve_bounds(self) -> PlayfieldBounds:
        """Derive bounds from the terrain now, without storing them."""
        return self._resolver.resolve(self._terrain)

    async def on_start_authority(self) -> bool:
        """Resolve the playfield and start the reconciler.

        Returns:
            True if the reconciler is now running.
        """
        self._bounds = self.resolve_bounds()
        started = await self._reconciler.start(self._bounds)
        if started:
            logger.info("Authority started with playfield %s", self._bounds)
        return started

    async def on_stop_authority(self) -> None:
        """Stop the reconciler; all tracked monsters are destroyed on return."""
        await self._reconciler.stop()

    async def __aenter__(self) -> PopulationHost:
        await self.on_start_authority()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.on_stop_authority()
