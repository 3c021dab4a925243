"""World state: monsters, players and lifecycle broadcast.

Architecture Note:
    world/ is a stateful service layer. Unlike core/ (stateless
    functionalities), world/ owns runtime state and implements the
    collaborator protocols the population reconciler consumes.
"""

from spawnfield.world.allocator import EntityAllocator
from spawnfield.world.events import LifecycleEvent, LifecycleKind, LifecycleListener
from spawnfield.world.local import LocalWorld, Monster, MonsterTemplate, NetworkRole
from spawnfield.world.players import PlayerRef, PlayerRegistry

__all__ = [
    "EntityAllocator",
    "LifecycleEvent",
    "LifecycleKind",
    "LifecycleListener",
    "LocalWorld",
    "Monster",
    "MonsterTemplate",
    "NetworkRole",
    "PlayerRef",
    "PlayerRegistry",
]
