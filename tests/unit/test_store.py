from __future__ import annotations

from memdb.models import Record
from memdb.store import RowStore


def test_store_starts_empty() -> None:
    store = RowStore()
    assert store.is_empty()
    assert len(store) == 0
    assert store.rows() == []


def test_store_preserves_insertion_order_and_duplicates() -> None:
    store = RowStore()
    records = [Record(2, "b", "b@x"), Record(1, "a", "a@x"), Record(2, "b", "b@x")]
    for record in records:
        store.append(record)

    assert len(store) == 3
    assert store.rows() == records
    assert list(store) == records


def test_rows_returns_a_snapshot() -> None:
    store = RowStore()
    store.append(Record(1, "a", "a@x"))
    snapshot = store.rows()
    snapshot.clear()
    assert len(store) == 1


def test_record_is_empty_only_when_all_fields_blank() -> None:
    assert Record(0, "", "").is_empty()
    assert not Record(0, "bob", "").is_empty()
    assert not Record(0, "", "bob@x").is_empty()
    assert not Record(1, "", "").is_empty()
