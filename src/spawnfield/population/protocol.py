"""Collaborator protocols for the population reconciler.

The reconciler owns no entities itself. It asks a creation hook for
templates and instances, a status source whether its handles are still
alive, and an authority layer whether it may run and how to broadcast.
LocalWorld implements all three; networked engines can supply their own.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from spawnfield.core.geometry import PlayfieldBounds, Vec2
from spawnfield.core.identity import EntityId


@runtime_checkable
class CreationHook(Protocol):
    """Template lookup and instantiation."""

    def find_template(self, name: str) -> Any | None:
        """Return the template called name, or None when not found."""
        ...

    def instantiate(self, template: Any, position: Vec2) -> EntityId:
        """Create an entity from template at position."""
        ...

    def assign_bounds(self, entity: EntityId, bounds: PlayfieldBounds) -> None:
        """Hand the playfield to an entity that moves itself."""
        ...


@runtime_checkable
class EntityStatus(Protocol):
    """Liveness and position of created entities."""

    def is_alive(self, entity: EntityId) -> bool: ...

    def position_of(self, entity: EntityId) -> Vec2 | None: ...


@runtime_checkable
class AuthorityLayer(Protocol):
    """Gate and broadcast channel for entity lifecycle."""

    @property
    def is_authority(self) -> bool:
        """Whether this process may create and destroy entities."""
        ...

    def register_created(self, entity: EntityId) -> None:
        """Broadcast a newly created entity to observers."""
        ...

    def destroy(self, entity: EntityId) -> bool:
        """Destroy an entity and broadcast it. Returns True if it existed."""
        ...


@runtime_checkable
class PositionSource(Protocol):
    """Enumerable snapshot of actor positions (e.g. players)."""

    def positions(self) -> Iterable[Vec2]: ...


@runtime_checkable
class SpawnWorld(CreationHook, EntityStatus, AuthorityLayer, Protocol):
    """A world implementing every collaborator the reconciler needs."""
