"""Command messages accepted by :meth:`WizardController.dispatch`.

Every state transition of a wizard is one of these values, which keeps the
set of transitions enumerable and testable without a UI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from wizard.types import FieldKey


@dataclass(frozen=True)
class Advance:
    """Move to the next step if the current step's gate passes."""


@dataclass(frozen=True)
class Retreat:
    """Move to the previous step."""


@dataclass(frozen=True)
class JumpTo:
    """Move directly to ``step`` (clamped, no intermediate validation)."""

    step: int


@dataclass(frozen=True)
class SetField:
    """Replace the value of ``key``."""

    key: FieldKey
    value: Any


@dataclass(frozen=True)
class Submit:
    """Submit the collected answers from the terminal step."""


@dataclass(frozen=True)
class Reset:
    """Discard all answers and return to step 1."""


Command = Union[Advance, Retreat, JumpTo, SetField, Submit, Reset]


__all__ = ["Advance", "Command", "JumpTo", "Reset", "Retreat", "SetField", "Submit"]
