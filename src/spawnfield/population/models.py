"""Population reconciler models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from spawnfield.core.identity import EntityId


class ReconcilerState(Enum):
    """Lifecycle of a reconciler; mirrors the owning authority."""

    STOPPED = auto()
    RUNNING = auto()
    STOPPING = auto()
    """Stop requested; cleanup in progress."""


@dataclass(frozen=True, slots=True)
class TrackedEntity:
    """Entity the reconciler counts and will destroy on stop."""

    entity: EntityId
    template: str
