"""Form state store and read-modify-write helpers for array fields.

The store never validates on write; incomplete or invalid answers are
representable and only rejected by the validation gate. Array fields are
always replaced wholesale: callers read the current list, derive a new one with
the helpers below and write it back through ``set_field``.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from wizard.types import FieldKey


class FormStateStore:
    """Single mutable record holding the answers of every wizard step."""

    def __init__(self, fields: MutableMapping[FieldKey, Any] | None = None) -> None:
        self._fields: MutableMapping[FieldKey, Any] = fields if fields is not None else {}

    def get(self, key: FieldKey, default: Any = None) -> Any:
        return self._fields.get(key, default)

    def __getitem__(self, key: FieldKey) -> Any:
        return self._fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def set_field(self, key: FieldKey, value: Any) -> None:
        """Replace the value stored under ``key``."""

        self._fields[key] = value

    def update(self, values: Mapping[FieldKey, Any]) -> None:
        for key, value in values.items():
            self._fields[key] = value

    def snapshot(self) -> dict[FieldKey, Any]:
        """Return a deep copy safe to hand to serializers."""

        return copy.deepcopy(dict(self._fields))

    def reset(self, initial: Mapping[FieldKey, Any]) -> None:
        self._fields.clear()
        self._fields.update(copy.deepcopy(dict(initial)))


def _normalise_item(value: object) -> str:
    return " ".join(str(value).split()) if value is not None else ""


def add_unique(items: Sequence[str] | None, value: object) -> list[str]:
    """Return ``items`` with ``value`` appended unless blank or already present."""

    current = list(items or [])
    candidate = _normalise_item(value)
    if not candidate or candidate in current:
        return current
    current.append(candidate)
    return current


def remove_value(items: Sequence[str] | None, value: object) -> list[str]:
    """Return ``items`` without ``value``; an absent value leaves the list as is."""

    candidate = _normalise_item(value)
    return [item for item in (items or []) if item != candidate]


def toggle_value(items: Sequence[str] | None, value: object) -> list[str]:
    candidate = _normalise_item(value)
    if candidate in (items or []):
        return remove_value(items, candidate)
    return add_unique(items, candidate)


def append_record(records: Sequence[Mapping[str, Any]] | None, template: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Return ``records`` with a fresh copy of ``template`` appended."""

    current = [dict(record) for record in (records or [])]
    current.append(copy.deepcopy(dict(template)))
    return current


def update_record(
    records: Sequence[Mapping[str, Any]] | None,
    index: int,
    key: str,
    value: Any,
) -> list[dict[str, Any]]:
    """Return ``records`` with ``records[index][key]`` replaced.

    Out-of-range indexes return an unchanged copy.
    """

    current = [dict(record) for record in (records or [])]
    if 0 <= index < len(current):
        current[index][key] = value
    return current


def remove_record(records: Sequence[Mapping[str, Any]] | None, index: int) -> list[dict[str, Any]]:
    return [dict(record) for position, record in enumerate(records or []) if position != index]


__all__ = [
    "FormStateStore",
    "add_unique",
    "append_record",
    "remove_record",
    "remove_value",
    "toggle_value",
    "update_record",
]
