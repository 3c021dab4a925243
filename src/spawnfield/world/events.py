"""Lifecycle events broadcast to observers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from spawnfield.core.geometry import Vec2
from spawnfield.core.identity import EntityId


class LifecycleKind(Enum):
    """What happened to an entity."""

    CREATED = auto()
    """Authority registered a new entity for replication."""

    DESTROYED = auto()
    """Authority destroyed an entity on purpose."""

    DIED = auto()
    """Entity was removed by gameplay (attrition), not by the authority."""


@dataclass(frozen=True, slots=True)
class LifecycleEvent:
    kind: LifecycleKind
    entity: EntityId
    template: str
    position: Vec2


LifecycleListener = Callable[[LifecycleEvent], None]
