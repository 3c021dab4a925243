"""Entity identity models.

Usage:
    monster = EntityId(index=42, generation=1)
    str(monster)  # "e42v1"
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityId:
    """Opaque handle to a spawned entity with generation for safe slot reuse.

    A handle whose generation no longer matches its slot refers to an entity
    that has died; the world reports such handles as not alive.
    """

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))

    def __str__(self) -> str:
        return f"e{self.index}v{self.generation}"
