"""Shared data contracts for the object lab.

Every transform, registry and builder consumes and produces these types.
A Record is a plain insertion-ordered dict; its schema is checked once,
when the record is built with make_record(), not on every access.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union

from objlab.models.errors import RecordSchemaError


# ── Record ──────────────────────────────────────────────────

RecordValue = Union[str, int, float, bool, None, "Record", "list[RecordValue]"]
Record = dict  # dict[str, RecordValue]; None stands for "absent"

_SCALARS = (str, int, float, bool, type(None))


def validate_record(record: Mapping[str, Any], path: str = "") -> None:
    """Raise RecordSchemaError if any value falls outside the record schema."""
    if not isinstance(record, Mapping):
        raise RecordSchemaError(path, record)
    for key, value in record.items():
        if not isinstance(key, str):
            raise RecordSchemaError(f"{path}[{key!r}]", key)
        _validate_value(value, f"{path}.{key}" if path else key)


def _validate_value(value: Any, path: str) -> None:
    if isinstance(value, _SCALARS):
        return
    if isinstance(value, Mapping):
        validate_record(value, path)
        return
    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _validate_value(item, f"{path}[{i}]")
        return
    raise RecordSchemaError(path, value)


def _normalize(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    return value


def make_record(mapping: Mapping[str, Any] | None = None, **fields: Any) -> Record:
    """Build a validated Record from a mapping and/or keyword fields.

    Keyword fields are applied after the mapping, so they win on collision.
    Tuples are normalized to lists and nested mappings to plain dicts.
    """
    data = dict(mapping or {})
    data.update(fields)
    validate_record(data)
    return _normalize(data)


# ── Pick ────────────────────────────────────────────────────

class _NoDefault:
    def __repr__(self):
        return "NO_DEFAULT"


NO_DEFAULT = _NoDefault()


@dataclass(frozen=True)
class PickField:
    """One destructuring binding: read `key`, write under `rename` or `key`."""
    key: str
    rename: str | None = None
    default: Any = NO_DEFAULT

    @property
    def target(self) -> str:
        return self.rename or self.key

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


# ── Registry results ────────────────────────────────────────

class AddResult(str, Enum):
    """Outcome of HasCourses.add_course."""
    ADDED = "added"
    ALREADY_EXISTS = "already_exists"

    def message(self, course: str) -> str:
        if self is AddResult.ADDED:
            return f'Course "{course}" added successfully!'
        return f'Course "{course}" already exists!'


class RemoveResult(str, Enum):
    """Outcome of HasCourses.remove_course."""
    REMOVED = "removed"
    NOT_FOUND = "not_found"

    def message(self, course: str) -> str:
        if self is RemoveResult.REMOVED:
            return f'Course "{course}" removed successfully!'
        return f'Course "{course}" not found!'


# ── Gradebook ───────────────────────────────────────────────

class GradeLookup(str, Enum):
    """Sentinel returned by GradeBook.get_grade for an unknown course."""
    NO_GRADE = "No grade recorded"
