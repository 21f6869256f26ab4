# cablequote/utils/collection_diff.py
from typing import Any, Callable, Dict, Hashable, Iterable, List, Tuple, Union

KeyFunc = Union[str, Callable[[Any], Hashable]]


def _key_getter(key: KeyFunc) -> Callable[[Any], Hashable]:
    if callable(key):
        return key

    def getter(record):
        if isinstance(record, dict):
            return record.get(key)
        return getattr(record, key, None)
    return getter


def _as_dict(record) -> Dict[str, Any]:
    if isinstance(record, dict):
        return record
    if hasattr(record, "model_dump"):
        return record.model_dump()
    return dict(vars(record))


def diff_collection(previous: Iterable, next_records: Iterable, key: KeyFunc = "id") -> Tuple[List, List[Hashable]]:
    """
    Work out what has to be written to turn `previous` into `next_records`.

    Returns (upserts, deletes): records that are new or whose content
    changed, and the keys that no longer appear. Records without a key
    are always upserted. Only fields present on the new record are
    compared, so extra columns on the stored side do not force a write.
    """
    get_key = _key_getter(key)

    before = {}
    for record in previous:
        record_key = get_key(record)
        if record_key is not None:
            before[record_key] = _as_dict(record)

    upserts, seen = [], set()
    for record in next_records:
        record_key = get_key(record)
        if record_key is None:
            upserts.append(record)
            continue
        seen.add(record_key)
        old = before.get(record_key)
        new = _as_dict(record)
        if old is None or any(old.get(field) != value for field, value in new.items()):
            upserts.append(record)

    deletes = [record_key for record_key in before if record_key not in seen]
    return upserts, deletes
