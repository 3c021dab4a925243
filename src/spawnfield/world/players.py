"""Registry of player actors currently present in the playfield."""

from __future__ import annotations

from dataclasses import dataclass

from spawnfield.core.geometry import Vec2
from spawnfield.core.identity import EntityId
from spawnfield.world.allocator import EntityAllocator


@dataclass(frozen=True, slots=True)
class PlayerRef:
    """Handle and position snapshot of a present player."""

    entity: EntityId
    position: Vec2


class PlayerRegistry:
    """Tracks player positions. Read-only from the reconciler's side.

    positions() returns a fresh list on every call, so placement sees
    players where they are now rather than where they were when a tick began.
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._positions: dict[EntityId, Vec2] = {}

    def join(self, position: Vec2) -> EntityId:
        player = self._allocator.allocate()
        self._positions[player] = position
        return player

    def leave(self, player: EntityId) -> bool:
        if self._positions.pop(player, None) is None:
            return False
        self._allocator.deallocate(player)
        return True

    def move(self, player: EntityId, position: Vec2) -> None:
        if player not in self._positions:
            raise KeyError(f"Player {player} is not present")
        self._positions[player] = position

    def position_of(self, player: EntityId) -> Vec2 | None:
        return self._positions.get(player)

    def positions(self) -> list[Vec2]:
        return list(self._positions.values())

    def players(self) -> list[PlayerRef]:
        return [PlayerRef(entity, pos) for entity, pos in self._positions.items()]

    def __len__(self) -> int:
        return len(self._positions)
