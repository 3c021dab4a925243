"""Entity identity functionality: lightweight generation-tagged handles."""

from spawnfield.core.identity.models import EntityId

__all__ = [
    "EntityId",
]
