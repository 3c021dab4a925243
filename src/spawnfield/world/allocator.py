"""Entity allocation service.

EntityAllocator is a stateful service that manages entity handle lifecycle.
"""

from __future__ import annotations

from spawnfield.core.identity import EntityId


class EntityAllocator:
    """Allocates entity handles with generation tracking for recycling.

    Freed indices are reused with an incremented generation, so a handle to
    a dead monster never aliases the monster that later takes its slot.

    Args:
        first_index: First index handed out (lets worlds reserve low indices).
    """

    def __init__(self, first_index: int = 0):
        self._next_index = first_index
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}

    def allocate(self) -> EntityId:
        """Allocate new handle, reusing recycled slots when available.

        Returns:
            Newly allocated EntityId.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
            return EntityId(index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return EntityId(index=index, generation=0)

    def deallocate(self, entity: EntityId) -> None:
        """Invalidate handle and return its slot for reuse.

        Args:
            entity: Handle to release.

        Raises:
            ValueError: If the handle is already stale or was never allocated.
        """
        if not self.is_alive(entity):
            raise ValueError(f"Cannot deallocate stale or unknown entity {entity}")

        new_gen = entity.generation + 1
        self._generations[entity.index] = new_gen
        self._free_list.append((entity.index, new_gen))

    def is_alive(self, entity: EntityId) -> bool:
        """Check if handle is still valid (not recycled).

        Returns:
            True if entity's generation matches its slot, False otherwise.
        """
        current_gen = self._generations.get(entity.index, -1)
        return current_gen == entity.generation

    @property
    def live_count(self) -> int:
        return len(self._generations) - len(self._free_list)
