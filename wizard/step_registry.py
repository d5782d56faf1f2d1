"""Step definitions and lookup helpers shared by every wizard flow."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from wizard.types import FieldKey, Fields, RequiredFieldResolver, SubmitCheck


@dataclass(frozen=True)
class StepDefinition:
    """Static metadata for an individual wizard step.

    ``required_fields`` gate forward navigation from the step. ``extra_required``
    adds fields whose required-ness depends on other answers (for example the
    company name when signing up as an employer). ``submit_checks`` are
    cross-field rules that only run at the final submission gate.
    """

    id: int
    key: str
    title: str
    required_fields: tuple[FieldKey, ...] = ()
    description: str = ""
    extra_required: RequiredFieldResolver | None = None
    submit_checks: tuple[SubmitCheck, ...] = field(default=())
    field_labels: Mapping[FieldKey, str] = field(default_factory=dict)

    def resolve_required(self, fields: Fields) -> tuple[FieldKey, ...]:
        """Return the required fields for the current ``fields`` snapshot."""

        resolved = list(self.required_fields)
        if self.extra_required is not None:
            for extra in self.extra_required(fields):
                if extra not in resolved:
                    resolved.append(extra)
        return tuple(resolved)

    def label_for(self, field_key: FieldKey) -> str:
        return self.field_labels.get(field_key) or field_key.replace("_", " ").capitalize()


def validate_step_sequence(steps: Sequence[StepDefinition]) -> tuple[StepDefinition, ...]:
    """Return ``steps`` as a tuple after checking ids run ``1..N`` with unique keys."""

    ordered = tuple(steps)
    if not ordered:
        raise ValueError("A wizard needs at least one step")
    expected_ids = list(range(1, len(ordered) + 1))
    actual_ids = [step.id for step in ordered]
    if actual_ids != expected_ids:
        raise ValueError(f"Step ids must be consecutive from 1, got {actual_ids}")
    keys = [step.key for step in ordered]
    if len(set(keys)) != len(keys):
        raise ValueError(f"Step keys must be unique, got {keys}")
    return ordered


def get_step(steps: Sequence[StepDefinition], step_id: int) -> StepDefinition:
    """Return the step with ``step_id``.

    Raises:
        KeyError: If no step carries ``step_id``.
    """

    for step in steps:
        if step.id == step_id:
            return step
    raise KeyError(step_id)


def field_labels(steps: Sequence[StepDefinition]) -> dict[FieldKey, str]:
    """Merge the field labels of all ``steps``."""

    labels: dict[FieldKey, str] = {}
    for step in steps:
        labels.update(step.field_labels)
    return labels


__all__ = [
    "StepDefinition",
    "field_labels",
    "get_step",
    "validate_step_sequence",
]
