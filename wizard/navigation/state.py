"""Typed navigation state derived from a wizard controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wizard.controller import WizardController


class NavigationDirection(str, Enum):
    """Direction metadata for wizard navigation controls."""

    PREVIOUS = "previous"
    NEXT = "next"
    SUBMIT = "submit"


@dataclass(frozen=True)
class NavigationButtonState:
    """Typed configuration for a single navigation button."""

    direction: NavigationDirection
    label: str
    enabled: bool = True
    primary: bool = False
    hint: str | None = None


@dataclass(frozen=True)
class NavigationState:
    """Aggregated state used to render navigation controls."""

    current_step: int
    missing_fields: tuple[str, ...] = ()
    previous: NavigationButtonState | None = None
    next: NavigationButtonState | None = None
    submit: NavigationButtonState | None = None


def _missing_hint(controller: WizardController, missing: tuple[str, ...]) -> str:
    labels = controller.field_labels
    names = ", ".join(labels.get(key, key.replace("_", " ").capitalize()) for key in missing)
    return f"Please complete the required fields before continuing: {names}."


def build_navigation_state(controller: WizardController, *, submit_label: str = "Submit") -> NavigationState:
    """Return which of Back, Next and Submit are shown and enabled for the current step.

    Back is hidden on the first step. Next is shown on every step but the
    last and disabled while the step's required fields are empty. Submit is
    shown on the last step only.
    """

    state = controller.state
    gate = controller.step_gate()

    previous = None
    if state.current_step > 1 and not state.submitted:
        previous = NavigationButtonState(direction=NavigationDirection.PREVIOUS, label="◀ Back")

    next_button = None
    submit_button = None
    if controller.is_terminal():
        submission_gate = controller.submission_gate()
        hint = None
        if submission_gate.missing:
            hint = _missing_hint(controller, submission_gate.missing)
        submit_button = NavigationButtonState(
            direction=NavigationDirection.SUBMIT,
            label=submit_label,
            enabled=not state.submitted and not submission_gate.missing,
            primary=True,
            hint=hint,
        )
    else:
        next_button = NavigationButtonState(
            direction=NavigationDirection.NEXT,
            label="Next ▶",
            enabled=gate.passed,
            primary=True,
            hint=None if gate.passed else _missing_hint(controller, gate.missing),
        )

    return NavigationState(
        current_step=state.current_step,
        missing_fields=gate.missing,
        previous=previous,
        next=next_button,
        submit=submit_button,
    )


__all__ = [
    "NavigationButtonState",
    "NavigationDirection",
    "NavigationState",
    "build_navigation_state",
]
