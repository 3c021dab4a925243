"""Population reconciler: keeps a monster population topped up.

The reconciler runs as a single asyncio task per authority. Each tick it
prunes dead handles, computes the deficit against the target count and
fills it one unit at a time with a short pause between units. The task
suspends only at those pauses and at the interval wait, both of which end
early when a stop is requested.

Usage:
    reconciler = PopulationReconciler(world, players, settings, constraints)
    await reconciler.start(bounds)   # initial fill happens before this returns
    ...
    await reconciler.stop()          # every tracked monster destroyed on return
"""

from __future__ import annotations

import asyncio
import logging
import random
import time
import warnings
from collections.abc import Callable

from spawnfield.config.settings import PopulationSettings
from spawnfield.core.geometry import PlayfieldBounds, Vec2
from spawnfield.core.identity import EntityId
from spawnfield.core.placement import PlacementConstraints, RandomSource, SpatialPlacementSampler
from spawnfield.population.models import ReconcilerState, TrackedEntity
from spawnfield.population.protocol import PositionSource, SpawnWorld
from spawnfield.tracing import HistoryStore, ReconcileRecord

logger = logging.getLogger(__name__)


class PopulationReconciler:
    """Long-lived control loop holding a population near its target.

    State machine STOPPED -> RUNNING -> STOPPING -> STOPPED, driven by the
    owning authority through start() and stop().

    Args:
        world: Creation hook, liveness source and authority layer.
        players: Source of current player positions, read per sampling attempt.
        settings: Target count, cadence, spawn radius and spawnable types.
        constraints: Placement constraints applied to every spawn.
        sampler: Placement sampler. Defaults to one using settings.spawn_radius
            and rng.
        rng: Random source for type selection (and the default sampler).
        history: Optional store receiving one ReconcileRecord per tick.
        clock: Timestamp source for records.
    """

    def __init__(
        self,
        world: SpawnWorld,
        players: PositionSource,
        settings: PopulationSettings | None = None,
        constraints: PlacementConstraints | None = None,
        sampler: SpatialPlacementSampler | None = None,
        rng: RandomSource | None = None,
        history: HistoryStore | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._world = world
        self._players = players
        self._settings = settings or PopulationSettings()
        self._constraints = constraints or PlacementConstraints()
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._sampler = sampler or SpatialPlacementSampler(self._settings.spawn_radius, self._rng)
        self._spawnable = tuple(self._settings.spawnable_types)
        self._history = history
        self._clock = clock

        self._state = ReconcilerState.STOPPED
        self._bounds: PlayfieldBounds | None = None
        self._tracked: dict[EntityId, TrackedEntity] = {}
        self._stop_requested = asyncio.Event()
        self._tick_lock = asyncio.Lock()
        self._task: asyncio.Task[None] | None = None
        self._tick = 0

    # Introspection

    @property
    def state(self) -> ReconcilerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ReconcilerState.RUNNING

    @property
    def bounds(self) -> PlayfieldBounds | None:
        return self._bounds

    @property
    def tracked(self) -> tuple[TrackedEntity, ...]:
        return tuple(self._tracked.values())

    @property
    def population(self) -> int:
        return len(self._tracked)

    @property
    def tick_count(self) -> int:
        """Ticks completed since construction, initial fills included."""
        return self._tick

    def tracked_positions(self) -> list[Vec2]:
        """Current positions of tracked entities the world still reports alive."""
        positions: list[Vec2] = []
        for entity in self._tracked:
            if not self._world.is_alive(entity):
                continue
            position = self._world.position_of(entity)
            if position is not None:
                positions.append(position)
        return positions

    # Lifecycle

    async def start(self, bounds: PlayfieldBounds) -> bool:
        """Enter RUNNING: fill to target immediately, then tick periodically.

        Returns:
            True if the reconciler started, False if it was not stopped or
            this process is not the authority.
        """
        if self._state is not ReconcilerState.STOPPED:
            logger.warning("start() ignored, reconciler is %s", self._state.name)
            return False
        if not self._world.is_authority:
            logger.info("Not the authority, population reconciler stays stopped")
            return False

        self._bounds = bounds
        self._stop_requested = asyncio.Event()
        self._state = ReconcilerState.RUNNING
        logger.info(
            "Population reconciler started: target=%d bounds=%s",
            self._settings.target_count,
            bounds,
        )

        record = self._begin_tick()
        record.deficit = self._settings.target_count - len(self._tracked)
        for _ in range(max(record.deficit, 0)):
            self._spawn_unit(record, bounds)
        self._finish_tick(record)

        self._task = asyncio.create_task(self._run(), name="population-reconciler")
        self._task.add_done_callback(self._on_task_done)
        return True

    async def stop(self) -> None:
        """Leave RUNNING and destroy every tracked entity.

        Cleanup has completed when this returns. Calling stop() while a stop
        is already in progress waits for the same shutdown; calling it on a
        stopped reconciler does nothing.
        """
        if self._state is ReconcilerState.STOPPED:
            return
        if self._state is ReconcilerState.RUNNING:
            self._state = ReconcilerState.STOPPING
            self._stop_requested.set()
            logger.info("Stopping population reconciler")

        task = self._task
        try:
            if task is not None:
                await asyncio.shield(task)
        finally:
            # A cancelled caller leaves the running task to clean up after itself.
            if task is None or task.done():
                self._destroy_all()
                self._state = ReconcilerState.STOPPED
                self._task = None

    async def _run(self) -> None:
        try:
            while not self._stop_requested.is_set():
                try:
                    await self.reconcile_once()
                except Exception:
                    logger.exception("Reconcile tick %d failed, retrying next interval", self._tick)
                if await self._wait(self._settings.reconcile_interval):
                    break
        finally:
            self._destroy_all()
            self._state = ReconcilerState.STOPPED

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Population reconciler stopped by an error", exc_info=exc)

    # Reconciliation

    async def reconcile_once(self) -> ReconcileRecord:
        """Run one prune / compute / fill tick.

        Ticks never overlap: a manual call made while the periodic task is
        mid-tick waits for it.

        Raises:
            RuntimeError: If the reconciler is stopped.
        """
        async with self._tick_lock:
            bounds = self._bounds
            if self._state is ReconcilerState.STOPPED or bounds is None:
                raise RuntimeError("Reconciler is stopped; call start() first")

            record = self._begin_tick()
            record.pruned = self.prune()
            record.deficit = self._settings.target_count - len(self._tracked)

            for unit in range(max(record.deficit, 0)):
                if self._stop_requested.is_set() or (
                    unit > 0 and await self._wait(self._settings.spawn_pause)
                ):
                    record.interrupted = True
                    break
                self._spawn_unit(record, bounds)

            return self._finish_tick(record)

    def prune(self) -> int:
        """Drop tracked entities the world no longer reports alive.

        Returns:
            Number of entities dropped.
        """
        dead = [entity for entity in self._tracked if not self._world.is_alive(entity)]
        for entity in dead:
            del self._tracked[entity]
        if dead:
            logger.debug("Pruned %d dead entities", len(dead))
        return len(dead)

    def _spawn_unit(self, record: ReconcileRecord, bounds: PlayfieldBounds) -> None:
        name = self._rng.choice(self._spawnable)
        template = self._world.find_template(name)
        if template is None:
            logger.warning("Template %r not found, skipping spawn until next tick", name)
            record.skipped += 1
            return

        placement = self._sampler.place(
            bounds,
            self._players.positions,
            self.tracked_positions,
            self._constraints,
        )
        entity = self._world.instantiate(template, placement.position)
        self._world.assign_bounds(entity, bounds)
        self._world.register_created(entity)

        if entity in self._tracked:
            warnings.warn(
                f"Creation hook returned already tracked entity {entity}. Keeping one entry.",
                stacklevel=2,
            )
        self._tracked[entity] = TrackedEntity(entity=entity, template=name)
        record.spawned += 1
        if placement.used_fallback:
            record.fallbacks += 1

    def _destroy_all(self) -> int:
        total = len(self._tracked)
        destroyed = 0
        while self._tracked:
            entity, _ = self._tracked.popitem()
            if not self._world.is_alive(entity):
                continue
            try:
                self._world.destroy(entity)
            except Exception:
                logger.exception("Destroying %s failed, continuing cleanup", entity)
                continue
            destroyed += 1
        if total:
            logger.info("Destroyed %d of %d tracked entities", destroyed, total)
        return destroyed

    async def _wait(self, seconds: float) -> bool:
        """Sleep up to seconds. Returns True if a stop was requested."""
        if self._stop_requested.is_set():
            return True
        try:
            await asyncio.wait_for(self._stop_requested.wait(), timeout=seconds)
        except TimeoutError:
            return False
        return True

    def _begin_tick(self) -> ReconcileRecord:
        return ReconcileRecord(tick=self._tick, timestamp=self._clock())

    def _finish_tick(self, record: ReconcileRecord) -> ReconcileRecord:
        record.population = len(self._tracked)
        self._tick += 1
        if self._history is not None:
            self._history.record_tick(record)
        if record.spawned or record.pruned or record.skipped:
            logger.debug(
                "Tick %d: pruned=%d spawned=%d skipped=%d fallbacks=%d population=%d",
                record.tick,
                record.pruned,
                record.spawned,
                record.skipped,
                record.fallbacks,
                record.population,
            )
        return record
