"""Bounded in-memory history store."""

from __future__ import annotations

from collections import OrderedDict

from spawnfield.tracing.models import ReconcileRecord

TOTAL_FIELDS = ("pruned", "spawned", "skipped", "fallbacks")


class InMemoryHistoryStore:
    """Keeps the most recent max_ticks reconciliation records.

    Args:
        max_ticks: Capacity; the oldest record is evicted beyond it.
    """

    def __init__(self, max_ticks: int = 1000) -> None:
        if max_ticks < 1:
            raise ValueError(f"max_ticks must be >= 1, got {max_ticks}")
        self._records: OrderedDict[int, ReconcileRecord] = OrderedDict()
        self._max_ticks = max_ticks

    def record_tick(self, record: ReconcileRecord) -> None:
        self._records[record.tick] = record
        self._records.move_to_end(record.tick)
        while len(self._records) > self._max_ticks:
            self._records.popitem(last=False)

    def get_tick(self, tick: int) -> ReconcileRecord | None:
        return self._records.get(tick)

    def get_range(self, start_tick: int, end_tick: int) -> list[ReconcileRecord]:
        return [
            self._records[tick]
            for tick in sorted(self._records)
            if start_tick <= tick <= end_tick
        ]

    def get_tick_range(self) -> tuple[int, int] | None:
        if not self._records:
            return None
        return min(self._records), max(self._records)

    def clear(self) -> None:
        self._records.clear()

    @property
    def tick_count(self) -> int:
        return len(self._records)

    def latest(self) -> ReconcileRecord | None:
        if not self._records:
            return None
        return self._records[max(self._records)]

    def totals(self) -> dict[str, int]:
        """Sum the counters of every stored record."""
        return {
            name: sum(getattr(record, name) for record in self._records.values())
            for name in TOTAL_FIELDS
        }
