"""Tests for reconciliation history storage."""

import pytest

from spawnfield.tracing import HistoryStore, InMemoryHistoryStore, ReconcileRecord


def record(tick: int, **counts) -> ReconcileRecord:
    return ReconcileRecord(tick=tick, timestamp=1704067200.0 + tick, **counts)


def test_store_satisfies_protocol():
    assert isinstance(InMemoryHistoryStore(), HistoryStore)


def test_record_and_get():
    store = InMemoryHistoryStore()
    store.record_tick(record(0, spawned=100, deficit=100, population=100))

    assert store.get_tick(0).spawned == 100
    assert store.get_tick(1) is None
    assert store.tick_count == 1


def test_oldest_evicted_beyond_capacity():
    store = InMemoryHistoryStore(max_ticks=3)
    for tick in range(5):
        store.record_tick(record(tick))

    assert store.tick_count == 3
    assert store.get_tick_range() == (2, 4)
    assert store.get_tick(1) is None


def test_get_range_is_inclusive_and_ordered():
    store = InMemoryHistoryStore()
    for tick in (4, 1, 3, 2):
        store.record_tick(record(tick))

    assert [r.tick for r in store.get_range(2, 4)] == [2, 3, 4]


def test_latest_and_totals():
    store = InMemoryHistoryStore()
    assert store.latest() is None
    assert store.get_tick_range() is None

    store.record_tick(record(0, spawned=10, skipped=2))
    store.record_tick(record(1, pruned=3, spawned=3, fallbacks=1))

    assert store.latest().tick == 1
    assert store.totals() == {"pruned": 3, "spawned": 13, "skipped": 2, "fallbacks": 1}


def test_clear():
    store = InMemoryHistoryStore()
    store.record_tick(record(0))

    store.clear()

    assert store.tick_count == 0


def test_invalid_capacity():
    with pytest.raises(ValueError):
        InMemoryHistoryStore(max_ticks=0)


def test_record_dict_conversion():
    original = record(7, pruned=1, deficit=1, spawned=1, population=50, interrupted=True)
    original.metadata = {"zone": "north"}

    data = original.to_dict()

    assert data["interrupted"] is True
    assert data["metadata"] == {"zone": "north"}
    assert ReconcileRecord.from_dict(data) == original


def test_record_from_minimal_dict():
    restored = ReconcileRecord.from_dict({"tick": 2, "timestamp": 0.0})

    assert restored.spawned == 0
    assert restored.metadata is None
    assert "metadata" not in restored.to_dict()
