"""Data models for tracing infrastructure.

Records are plain data and serialize to JSON-compatible dicts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class ReconcileRecord:
    """Record of a single reconciliation tick.

    Attributes:
        tick: Tick number, starting at 0 for the initial fill.
        timestamp: Unix timestamp when the tick started.
        pruned: Tracked entities dropped because the world reported them dead.
        deficit: target_count minus tracked population after pruning.
        spawned: Entities created this tick.
        skipped: Units skipped because their template was not found.
        fallbacks: Spawns placed by the fallback after exhausting attempts.
        population: Tracked population when the tick finished.
        interrupted: True if a stop request cut the fill short.
        metadata: Optional arbitrary metadata for annotations.

    Example:
        record = ReconcileRecord(tick=3, timestamp=1704067200.0, pruned=2,
                                 deficit=2, spawned=2, population=100)
    """

    tick: int
    timestamp: float
    pruned: int = 0
    deficit: int = 0
    spawned: int = 0
    skipped: int = 0
    fallbacks: int = 0
    population: int = 0
    interrupted: bool = False
    metadata: dict[str, Any] | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "tick": self.tick,
            "timestamp": self.timestamp,
            "pruned": self.pruned,
            "deficit": self.deficit,
            "spawned": self.spawned,
            "skipped": self.skipped,
            "fallbacks": self.fallbacks,
            "population": self.population,
            "interrupted": self.interrupted,
        }
        if self.metadata is not None:
            result["metadata"] = self.metadata
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReconcileRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            tick=data["tick"],
            timestamp=data["timestamp"],
            pruned=data.get("pruned", 0),
            deficit=data.get("deficit", 0),
            spawned=data.get("spawned", 0),
            skipped=data.get("skipped", 0),
            fallbacks=data.get("fallbacks", 0),
            population=data.get("population", 0),
            interrupted=data.get("interrupted", False),
            metadata=data.get("metadata"),
        )
