"""Validation gate for wizard steps and final submission.

Checks are presence-only: a field passes when it holds a non-blank string, a
non-empty list or a truthy scalar. Formats (email shape, URLs) are not
verified here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from wizard.step_registry import StepDefinition
from wizard.types import FieldKey, Fields

REQUIRED_MESSAGE = "This field is required"


@dataclass(frozen=True)
class GateResult:
    """Outcome of a gate check."""

    passed: bool
    missing: tuple[FieldKey, ...] = ()
    errors: Mapping[FieldKey, str] = field(default_factory=dict)


def is_value_present(value: object | None) -> bool:
    """Return ``True`` when ``value`` should count as populated."""

    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, set)):
        return any(is_value_present(item) for item in value)
    if isinstance(value, Mapping):
        return any(is_value_present(item) for item in value.values())
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    return True


def missing_required_fields(step: StepDefinition, fields: Fields) -> list[FieldKey]:
    """Return the required fields of ``step`` that are empty in ``fields``."""

    return [key for key in step.resolve_required(fields) if not is_value_present(fields.get(key))]


def evaluate_step(step: StepDefinition, fields: Fields) -> GateResult:
    """Gate forward navigation from ``step``."""

    missing = missing_required_fields(step, fields)
    errors = {key: REQUIRED_MESSAGE for key in missing}
    return GateResult(passed=not missing, missing=tuple(missing), errors=errors)


def run_submit_checks(steps: Sequence[StepDefinition], fields: Fields) -> dict[FieldKey, str]:
    """Run every cross-field check and return ``{field: message}`` for failures."""

    errors: dict[FieldKey, str] = {}
    for step in steps:
        for check in step.submit_checks:
            outcome = check(fields)
            if outcome is None:
                continue
            key, message = outcome
            errors.setdefault(key, message)
    return errors


def evaluate_submission(steps: Sequence[StepDefinition], fields: Fields) -> GateResult:
    """Gate the final submission.

    Required fields of every step are checked because ``jump_to`` can reach the
    terminal step without passing the intermediate gates.
    """

    missing: list[FieldKey] = []
    errors: dict[FieldKey, str] = {}
    for step in steps:
        for key in missing_required_fields(step, fields):
            if key not in missing:
                missing.append(key)
                errors[key] = REQUIRED_MESSAGE
    if not missing:
        errors.update(run_submit_checks(steps, fields))
    return GateResult(passed=not errors, missing=tuple(missing), errors=errors)


__all__ = [
    "GateResult",
    "REQUIRED_MESSAGE",
    "evaluate_step",
    "evaluate_submission",
    "is_value_present",
    "missing_required_fields",
    "run_submit_checks",
]
