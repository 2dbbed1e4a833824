import pytest

from hr_dashboard.core.errors import DuplicateRecord, NotFound
from hr_dashboard.core.store import RecordStore


def test_new_store_is_not_ready():
    store = RecordStore()
    assert not store.is_ready
    assert store.snapshot() == ()


def test_load_replaces_sequence_and_marks_ready():
    store = RecordStore()
    store.load([{"id": 1}, {"id": 2}])
    store.load([{"id": 3}])

    assert store.is_ready
    assert store.snapshot() == ({"id": 3},)


def test_load_accepts_empty_sequence():
    store = RecordStore()
    store.load([])
    assert store.is_ready
    assert len(store) == 0


def test_apply_update_merges_patch_and_keeps_order():
    store = RecordStore()
    store.load([
        {"id": 1, "status": "pending", "name": "a"},
        {"id": 2, "status": "pending", "name": "b"},
        {"id": 3, "status": "pending", "name": "c"},
    ])

    updated = store.apply_update(2, {"status": "approved"})

    assert updated == {"id": 2, "status": "approved", "name": "b"}
    assert [r["id"] for r in store.snapshot()] == [1, 2, 3]
    assert store.snapshot()[0]["status"] == "pending"
    assert store.snapshot()[2]["status"] == "pending"


def test_apply_update_cannot_change_id():
    store = RecordStore()
    store.load([{"id": 1, "status": "pending"}])

    store.apply_update(1, {"id": 99, "status": "approved"})

    assert store.snapshot() == ({"id": 1, "status": "approved"},)


def test_apply_update_missing_id_raises_not_found():
    store = RecordStore()
    store.load([{"id": 1}])

    with pytest.raises(NotFound) as exc_info:
        store.apply_update(99, {"status": "approved"})

    assert exc_info.value.record_id == 99
    assert store.snapshot() == ({"id": 1},)


def test_snapshot_cannot_be_used_to_mutate_store():
    store = RecordStore()
    store.load([{"id": 1, "status": "pending", "employee": {"first_name": "Jane"}}])

    snap = store.snapshot()
    snap[0]["status"] = "hacked"
    snap[0]["employee"]["first_name"] = "Mallory"

    record = store.snapshot()[0]
    assert record["status"] == "pending"
    assert record["employee"]["first_name"] == "Jane"


def test_load_copies_input_records():
    source = [{"id": 1, "status": "pending"}]
    store = RecordStore()
    store.load(source)

    source[0]["status"] = "approved"

    assert store.get(1)["status"] == "pending"


def test_append_adds_record_at_end():
    store = RecordStore()
    store.load([{"id": 1}])
    store.append({"id": 2})

    assert [r["id"] for r in store.snapshot()] == [1, 2]


def test_append_duplicate_id_rejected():
    store = RecordStore()
    store.load([{"id": 1}])

    with pytest.raises(DuplicateRecord):
        store.append({"id": 1})
    assert len(store) == 1
