"""Shared type aliases for the wizard package."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence, Union


FieldKey = str
# Leaf values plus repeatable records (one dict per experience/portfolio entry)
FieldValue = Union[str, bool, int, float, None, list[str], list[dict[str, Any]]]
Fields = Mapping[FieldKey, Any]

RequiredFieldResolver = Callable[[Fields], Sequence[FieldKey]]
# Returns ``(field, message)`` when the check fails, ``None`` otherwise
SubmitCheck = Callable[[Fields], Union[tuple[FieldKey, str], None]]


__all__ = [
    "FieldKey",
    "FieldValue",
    "Fields",
    "RequiredFieldResolver",
    "SubmitCheck",
]
