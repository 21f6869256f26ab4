from types import SimpleNamespace

from cablequote.utils.collection_diff import diff_collection


def test_new_changed_and_removed():
    previous = [{"id": "a", "qty": 1}, {"id": "b", "qty": 2}, {"id": "c", "qty": 3}]
    next_records = [{"id": "a", "qty": 1}, {"id": "b", "qty": 5}, {"id": "d", "qty": 4}]
    upserts, deletes = diff_collection(previous, next_records)
    assert [r["id"] for r in upserts] == ["b", "d"]
    assert deletes == ["c"]

def test_records_without_key_always_written():
    upserts, deletes = diff_collection([], [{"id": None, "qty": 1}])
    assert len(upserts) == 1 and deletes == []

def test_custom_key_and_objects():
    previous = [SimpleNamespace(name="admin", role="Admin", token_version=3)]
    next_records = [{"name": "admin", "role": "Admin"}]
    assert diff_collection(previous, next_records, key="name") == ([], [])

def test_everything_removed():
    assert diff_collection([{"id": 1}, {"id": 2}], []) == ([], [1, 2])
