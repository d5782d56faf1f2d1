"""Linear multi-step form wizard: sequencer, state store, gate and submission."""

from __future__ import annotations

from wizard.commands import Advance, Command, JumpTo, Reset, Retreat, SetField, Submit
from wizard.controller import DispatchResult, WizardController, WizardState
from wizard.sequencer import StepSequencer
from wizard.session import SessionContext, SessionEvent
from wizard.step_registry import StepDefinition
from wizard.store import FormStateStore
from wizard.submission import SubmissionHandler, SubmissionResult
from wizard.validation import GateResult, is_value_present

__all__ = [
    "Advance",
    "Command",
    "DispatchResult",
    "FormStateStore",
    "GateResult",
    "JumpTo",
    "Reset",
    "Retreat",
    "SessionContext",
    "SessionEvent",
    "SetField",
    "StepDefinition",
    "StepSequencer",
    "Submit",
    "SubmissionHandler",
    "SubmissionResult",
    "WizardController",
    "WizardState",
    "is_value_present",
]
