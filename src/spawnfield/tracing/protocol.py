"""Protocols for tracing infrastructure.

These protocols define the interface for reconciliation history backends,
allowing different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from spawnfield.tracing.models import ReconcileRecord


@runtime_checkable
class HistoryStore(Protocol):
    """Protocol for storing and retrieving reconciliation history.

    Usage:
        store = InMemoryHistoryStore(max_ticks=1000)
        reconciler = PopulationReconciler(..., history=store)

        # Later, inspect what happened
        store.get_tick(3).spawned
        store.totals()["spawned"]
    """

    def record_tick(self, record: ReconcileRecord) -> None:
        """Record a tick.

        Note:
            Implementations may have bounded storage (e.g., last N ticks).
            Older records may be evicted when the limit is reached.
        """
        ...

    def get_tick(self, tick: int) -> ReconcileRecord | None:
        """Get a tick record, None if not in storage."""
        ...

    def get_range(self, start_tick: int, end_tick: int) -> list[ReconcileRecord]:
        """Get stored records in tick range (inclusive), in tick order."""
        ...

    def get_tick_range(self) -> tuple[int, int] | None:
        """Get (min_tick, max_tick) if history exists, None if empty."""
        ...

    def clear(self) -> None:
        """Clear all stored history."""
        ...

    @property
    def tick_count(self) -> int:
        """Number of ticks currently stored."""
        ...
