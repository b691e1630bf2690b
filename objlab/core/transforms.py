"""Record transformation utilities: clone, merge, pick, path extraction and sequence splitting.

Every function here is pure. Inputs are never mutated; copies are shallow,
so nested records in a result are the same objects as in the source.
"""

import json
from typing import Any, Iterable, Mapping, Sequence

from objlab.models.errors import RecordSchemaError
from objlab.models.types import PickField, Record, make_record


def clone_with_overrides(source: Mapping[str, Any], overrides: Mapping[str, Any]) -> Record:
    """Shallow-copy `source`, then insert-or-replace every key from `overrides`.

    Key order of the result: source keys first (in source order, even when
    overridden), then keys new to the copy in overrides order.

    Args:
        source: Record to copy, e.g. {"name": "Alice", "age": 21}
        overrides: Keys to write into the copy, e.g. {"gpa": 3.8}

    Returns:
        New record, e.g. {"name": "Alice", "age": 21, "gpa": 3.8}
    """
    result = dict(source)
    result.update(overrides)
    return result


def merge_records(*sources: Mapping[str, Any]) -> Record:
    """Merge any number of records left to right; the rightmost value wins on collision.

    merge_records(a, b) is the same as clone_with_overrides(a, b).
    """
    result: Record = {}
    for source in sources:
        result = clone_with_overrides(result, source)
    return result


def pick(source: Mapping[str, Any], fields: Iterable[PickField | str]) -> Record:
    """Destructure selected keys out of `source` into a new record.

    Each field reads source[key] and writes it under rename (or key). A key
    that is missing, or stored as None (the record model's "absent"), takes
    the field's default, or None when the field has none. Never raises on
    missing keys.

    Args:
        source: Record to read from.
        fields: PickField entries, or bare key strings for a plain read.

    Returns:
        New record holding only the picked targets, in fields order.
    """
    result: Record = {}
    for field in fields:
        if isinstance(field, str):
            field = PickField(field)
        value = source.get(field.key)
        if value is None and field.has_default:
            value = field.default
        result[field.target] = value
    return result


def extract_path(source: Mapping[str, Any], path: Sequence[str]) -> Any:
    """Walk nested records by successive keys.

    Returns None when a segment is missing or an intermediate value is not
    a record. An empty path returns the source itself.
    """
    current: Any = source
    for key in path:
        if not isinstance(current, Mapping) or key not in current:
            return None
        current = current[key]
    return current


def destructure_nested(source: Mapping[str, Any], bindings: Mapping[str, Sequence[str]]) -> Record:
    """Resolve several nested paths at once: {output_name: path} -> {output_name: value}."""
    return {name: extract_path(source, path) for name, path in bindings.items()}


def concat_lists(a: Sequence[Any], b: Sequence[Any]) -> list:
    """Return a new list with the elements of `a` followed by those of `b`."""
    return [*a, *b]


def split_head(seq: Sequence[Any], count: int = 1) -> tuple[list, list]:
    """Split a sequence into its first `count` items and the rest.

    A sequence shorter than `count` pads the head with None, so the head
    always has exactly `count` items.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    head = list(seq[:count])
    head.extend([None] * (count - len(head)))
    return head, list(seq[count:])


# ── Enumeration ─────────────────────────────────────────────

def record_keys(record: Mapping[str, Any]) -> list[str]:
    return list(record.keys())


def record_values(record: Mapping[str, Any]) -> list:
    return list(record.values())


def record_entries(record: Mapping[str, Any], limit: int | None = None) -> list[list]:
    """Key/value pairs as two-item lists, optionally only the first `limit`."""
    entries = [[key, value] for key, value in record.items()]
    return entries if limit is None else entries[:limit]


# ── JSON ────────────────────────────────────────────────────

def to_json(record: Mapping[str, Any], indent: int | None = None) -> str:
    return json.dumps(record, indent=indent, ensure_ascii=False)


def from_json(text: str) -> Record:
    """Parse a JSON object into a validated Record.

    Raises:
        json.JSONDecodeError: text is not valid JSON.
        RecordSchemaError: the document is valid JSON but not an object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise RecordSchemaError("", data)
    return make_record(data)
