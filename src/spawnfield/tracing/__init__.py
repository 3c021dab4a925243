"""Tracing infrastructure for recording reconciliation history.

Usage:
    from spawnfield.tracing import InMemoryHistoryStore

    history = InMemoryHistoryStore(max_ticks=500)
    reconciler = PopulationReconciler(..., history=history)
"""

from spawnfield.tracing.memory import InMemoryHistoryStore
from spawnfield.tracing.models import ReconcileRecord
from spawnfield.tracing.protocol import HistoryStore

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "ReconcileRecord",
]
