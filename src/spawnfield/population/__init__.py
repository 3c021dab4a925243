"""Population management: collaborator protocols, reconciler and authority host.

Architecture Note:
    population/ is stateful. The reconciler owns its tracked set and a
    single asyncio task; everything it creates or destroys goes through the
    injected collaborators.
"""

from spawnfield.population.host import PopulationHost
from spawnfield.population.models import ReconcilerState, TrackedEntity
from spawnfield.population.protocol import (
    AuthorityLayer,
    CreationHook,
    EntityStatus,
    PositionSource,
    SpawnWorld,
)
from spawnfield.population.reconciler import PopulationReconciler

__all__ = [
    # Protocols
    "AuthorityLayer",
    "CreationHook",
    "EntityStatus",
    "PositionSource",
    "SpawnWorld",
    # Models
    "ReconcilerState",
    "TrackedEntity",
    # Services
    "PopulationReconciler",
    "PopulationHost",
]
