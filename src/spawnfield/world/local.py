"""LocalWorld: in-process entity world acting as authority.

Provides the creation hook, liveness queries and authority layer the
population reconciler talks to, backed by a plain dict of monster records.
Suitable for single-process games, simulations and tests.

Usage:
    world = LocalWorld(templates=[MonsterTemplate("Enemy 0", patrol_speed=1.5)])
    template = world.find_template("Enemy 0")
    entity = world.instantiate(template, Vec2(3, 4))
    world.assign_bounds(entity, bounds)
    world.register_created(entity)

    world.kill(entity)          # attrition: the handle goes stale
    world.is_alive(entity)      # -> False
"""

from __future__ import annotations

import copy
import logging
import random
import warnings
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto

from spawnfield.core.geometry import PlayfieldBounds, Vec2
from spawnfield.core.identity import EntityId
from spawnfield.core.movement import clamp_position
from spawnfield.core.placement import RandomSource
from spawnfield.world.allocator import EntityAllocator
from spawnfield.world.events import LifecycleEvent, LifecycleKind, LifecycleListener

logger = logging.getLogger(__name__)

PATROL_MARGIN = 1.0


class NetworkRole(Enum):
    """Role of this process in a client-server topology."""

    AUTHORITY = auto()
    """May create, destroy and simulate entities."""

    OBSERVER = auto()
    """Receives replicated state only."""


@dataclass(frozen=True, slots=True)
class MonsterTemplate:
    """Spawnable monster type."""

    name: str
    patrol_speed: float = 0.0
    """World units per second; 0 keeps the monster still."""


@dataclass(slots=True)
class Monster:
    """Live monster record."""

    entity: EntityId
    template: MonsterTemplate
    position: Vec2
    bounds: PlayfieldBounds | None = None
    waypoint: Vec2 | None = None


class LocalWorld:
    """In-memory monster world.

    Args:
        templates: Spawnable monster templates, looked up by name.
        role: Network role; only AUTHORITY worlds let the reconciler run.
        rng: Random source for patrol waypoints.
    """

    def __init__(
        self,
        templates: Iterable[MonsterTemplate] = (),
        role: NetworkRole = NetworkRole.AUTHORITY,
        rng: RandomSource | None = None,
    ) -> None:
        self._role = role
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._allocator = EntityAllocator()
        self._templates: dict[str, MonsterTemplate] = {}
        self._monsters: dict[EntityId, Monster] = {}
        self._replicated: set[EntityId] = set()
        self._listeners: list[LifecycleListener] = []
        for template in templates:
            self.register_template(template)

    # Templates

    def register_template(self, template: MonsterTemplate) -> None:
        self._templates[template.name] = template

    def find_template(self, name: str) -> MonsterTemplate | None:
        """Creation hook: look up a template, None when unknown."""
        return self._templates.get(name)

    # Creation hook

    def instantiate(self, template: MonsterTemplate, position: Vec2) -> EntityId:
        """Creation hook: create a monster at position. Not yet replicated."""
        entity = self._allocator.allocate()
        self._monsters[entity] = Monster(entity=entity, template=template, position=position)
        return entity

    def assign_bounds(self, entity: EntityId, bounds: PlayfieldBounds) -> None:
        """Creation hook: give a monster the playfield its patrol must respect."""
        monster = self._monsters.get(entity)
        if monster is not None:
            monster.bounds = bounds

    # Liveness

    def is_alive(self, entity: EntityId) -> bool:
        return entity in self._monsters and self._allocator.is_alive(entity)

    def position_of(self, entity: EntityId) -> Vec2 | None:
        monster = self._monsters.get(entity)
        return monster.position if monster is not None else None

    # Authority layer

    @property
    def role(self) -> NetworkRole:
        return self._role

    @property
    def is_authority(self) -> bool:
        return self._role is NetworkRole.AUTHORITY

    def register_created(self, entity: EntityId) -> None:
        """Authority layer: broadcast a new entity to observers."""
        monster = self._monsters.get(entity)
        if monster is None:
            raise ValueError(f"Entity {entity} does not exist")
        if entity in self._replicated:
            warnings.warn(
                f"register_created() received {entity} twice. Observers were notified once.",
                stacklevel=2,
            )
            return
        self._replicated.add(entity)
        self._emit(LifecycleKind.CREATED, monster)

    def destroy(self, entity: EntityId) -> bool:
        """Authority layer: destroy an entity and broadcast it.

        Returns:
            True if the entity existed.
        """
        return self._remove(entity, LifecycleKind.DESTROYED)

    def kill(self, entity: EntityId) -> bool:
        """Remove an entity through gameplay (death or despawn)."""
        return self._remove(entity, LifecycleKind.DIED)

    def subscribe(self, listener: LifecycleListener) -> None:
        """Register an observer for lifecycle events."""
        self._listeners.append(listener)

    # Queries

    def __len__(self) -> int:
        return len(self._monsters)

    def __contains__(self, entity: object) -> bool:
        return isinstance(entity, EntityId) and self.is_alive(entity)

    def monsters(self) -> Iterator[Monster]:
        """Iterate copies of all live monsters."""
        for monster in self._monsters.values():
            yield copy.copy(monster)

    def monster(self, entity: EntityId) -> Monster | None:
        monster = self._monsters.get(entity)
        return copy.copy(monster) if monster is not None else None

    def positions(self) -> list[Vec2]:
        return [m.position for m in self._monsters.values()]

    # Simulation

    def advance(self, dt: float) -> None:
        """Move patrolling monsters toward their waypoints inside their bounds."""
        for monster in self._monsters.values():
            speed = monster.template.patrol_speed
            if speed <= 0 or monster.bounds is None:
                continue
            if monster.waypoint is None or monster.position == monster.waypoint:
                monster.waypoint = self._pick_waypoint(monster.bounds)
            offset = monster.waypoint - monster.position
            step = min(speed * dt, offset.magnitude)
            moved = monster.position + offset.normalized().scaled(step)
            if step == offset.magnitude:
                moved = monster.waypoint
            monster.position = clamp_position(moved, monster.bounds, PATROL_MARGIN)

    def _pick_waypoint(self, bounds: PlayfieldBounds) -> Vec2:
        inner = bounds.shrink(PATROL_MARGIN)
        return clamp_position(
            Vec2(
                inner.min.x + self._rng.random() * inner.width,
                inner.min.y + self._rng.random() * inner.height,
            ),
            bounds,
            PATROL_MARGIN,
        )

    def _remove(self, entity: EntityId, kind: LifecycleKind) -> bool:
        if not self.is_alive(entity):
            return False
        monster = self._monsters.pop(entity)
        self._allocator.deallocate(entity)
        if entity in self._replicated:
            self._replicated.discard(entity)
            self._emit(kind, monster)
        return True

    def _emit(self, kind: LifecycleKind, monster: Monster) -> None:
        event = LifecycleEvent(
            kind=kind,
            entity=monster.entity,
            template=monster.template.name,
            position=monster.position,
        )
        logger.debug("%s %s (%s) at %s", kind.name, monster.entity, event.template, event.position)
        for listener in list(self._listeners):
            listener(event)
