"""Wizard controller: the single entry point for wizard state transitions."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping, Sequence

from infra.logging import log_event
from wizard.commands import Advance, Command, JumpTo, Reset, Retreat, SetField, Submit
from wizard.navigation.keys import WizardSessionKeys
from wizard.sequencer import StepSequencer
from wizard.step_registry import StepDefinition, field_labels, get_step, validate_step_sequence
from wizard.store import FormStateStore
from wizard.submission import SubmissionHandler, SubmissionResult
from wizard.types import FieldKey
from wizard.validation import GateResult, evaluate_step, evaluate_submission

logger = logging.getLogger("hiring_wizards.wizard")

NOT_TERMINAL_MESSAGE = "Finish the remaining steps before submitting."


@dataclass
class WizardState:
    """Mutable state of one wizard instance."""

    current_step: int = 1
    fields: dict[FieldKey, Any] = field(default_factory=dict)
    submitted: bool = False
    errors: dict[FieldKey, str] = field(default_factory=dict)
    notice: str | None = None
    requires_login: bool = False


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of :meth:`WizardController.dispatch`."""

    accepted: bool
    state: WizardState
    gate: GateResult | None = None
    submission: SubmissionResult | None = None


class WizardController:
    """Own the sequencer, store, gate and submission handler of a wizard.

    State is kept in ``session_state`` under a namespaced key so a Streamlit
    rerun finds it again; tests pass a plain dictionary. Nothing is persisted
    beyond that mapping.
    """

    def __init__(
        self,
        *,
        steps: Sequence[StepDefinition],
        initial_fields: Mapping[FieldKey, Any],
        submission_handler: SubmissionHandler | None = None,
        wizard_id: str = "default",
        session_state: MutableMapping[str, Any] | None = None,
    ) -> None:
        self._steps = validate_step_sequence(steps)
        self._initial_fields = copy.deepcopy(dict(initial_fields))
        self._submission_handler = submission_handler
        self._wizard_id = wizard_id
        self._session_keys = WizardSessionKeys(wizard_id=wizard_id)
        self._session_state: MutableMapping[str, Any] = session_state if session_state is not None else {}
        self._field_labels = field_labels(self._steps)
        self.ensure_state_defaults()

    @property
    def wizard_id(self) -> str:
        return self._wizard_id

    @property
    def steps(self) -> tuple[StepDefinition, ...]:
        return self._steps

    @property
    def total_steps(self) -> int:
        return len(self._steps)

    @property
    def session_keys(self) -> WizardSessionKeys:
        return self._session_keys

    @property
    def field_labels(self) -> dict[FieldKey, str]:
        return dict(self._field_labels)

    @property
    def state(self) -> WizardState:
        raw_state = self._session_state.get(self._session_keys.state)
        if isinstance(raw_state, WizardState):
            return raw_state
        state = self._fresh_state()
        self._session_state[self._session_keys.state] = state
        return state

    @property
    def store(self) -> FormStateStore:
        return FormStateStore(self.state.fields)

    @property
    def current_step(self) -> int:
        return self.state.current_step

    def ensure_state_defaults(self) -> None:
        state = self.state
        # a state written by an older step layout may be out of range
        state.current_step = self._sequencer(state).current
        for key, value in self._initial_fields.items():
            state.fields.setdefault(key, copy.deepcopy(value))

    def _fresh_state(self) -> WizardState:
        return WizardState(current_step=1, fields=copy.deepcopy(self._initial_fields))

    def _sequencer(self, state: WizardState) -> StepSequencer:
        current = state.current_step if isinstance(state.current_step, int) else 1
        return StepSequencer(self.total_steps, current)

    def current_step_definition(self) -> StepDefinition:
        return get_step(self._steps, self.state.current_step)

    def is_terminal(self) -> bool:
        return self.state.current_step == self.total_steps

    def progress_ratio(self) -> float:
        return self._sequencer(self.state).progress_ratio

    def step_gate(self, step_id: int | None = None) -> GateResult:
        step = get_step(self._steps, step_id if step_id is not None else self.state.current_step)
        return evaluate_step(step, self.state.fields)

    def submission_gate(self) -> GateResult:
        return evaluate_submission(self._steps, self.state.fields)

    def can_advance(self) -> bool:
        return not self.is_terminal() and self.step_gate().passed

    def can_submit(self) -> bool:
        if not self.is_terminal() or self.state.submitted:
            return False
        return evaluate_submission(self._steps, self.state.fields).passed

    def dispatch(self, command: Command) -> DispatchResult:
        """Apply ``command`` and report whether it changed the wizard."""

        if isinstance(command, Advance):
            return self._advance()
        if isinstance(command, Retreat):
            return self._move(lambda sequencer: sequencer.retreat(), event="wizard.retreat")
        if isinstance(command, JumpTo):
            return self._move(lambda sequencer: sequencer.jump_to(command.step), event="wizard.jump")
        if isinstance(command, SetField):
            return self._set_field(command.key, command.value)
        if isinstance(command, Submit):
            return self._submit()
        if isinstance(command, Reset):
            return self._reset()
        raise TypeError(f"Unsupported wizard command: {command!r}")

    def advance(self) -> DispatchResult:
        return self.dispatch(Advance())

    def retreat(self) -> DispatchResult:
        return self.dispatch(Retreat())

    def jump_to(self, step: int) -> DispatchResult:
        return self.dispatch(JumpTo(step))

    def set_field(self, key: FieldKey, value: Any) -> DispatchResult:
        return self.dispatch(SetField(key, value))

    def submit(self) -> DispatchResult:
        return self.dispatch(Submit())

    def reset(self) -> DispatchResult:
        return self.dispatch(Reset())

    def discard(self) -> None:
        """Drop the wizard state and any widget values bound to it."""

        for key in [key for key in self._session_state.keys() if self._session_keys.owns(key)]:
            self._session_state.pop(key, None)
        log_event("info", event="wizard.discarded", flow=self._wizard_id)

    def _advance(self) -> DispatchResult:
        state = self.state
        gate = self.step_gate()
        if not gate.passed:
            state.errors = dict(gate.errors)
            log_event(
                "info",
                event="wizard.advance_blocked",
                flow=self._wizard_id,
                step=state.current_step,
                detail=", ".join(gate.missing),
            )
            return DispatchResult(accepted=False, state=state, gate=gate)
        return self._move(lambda sequencer: sequencer.advance(), event="wizard.advance", gate=gate)

    def _move(self, operation: Any, *, event: str, gate: GateResult | None = None) -> DispatchResult:
        state = self.state
        sequencer = self._sequencer(state)
        previous = sequencer.current
        operation(sequencer)
        state.current_step = sequencer.current
        state.errors = {}
        state.notice = None
        changed = state.current_step != previous
        if changed:
            log_event("info", event=event, flow=self._wizard_id, step=state.current_step)
        return DispatchResult(accepted=changed, state=state, gate=gate)

    def _set_field(self, key: FieldKey, value: Any) -> DispatchResult:
        state = self.state
        FormStateStore(state.fields).set_field(key, value)
        state.errors.pop(key, None)
        return DispatchResult(accepted=True, state=state)

    def _submit(self) -> DispatchResult:
        state = self.state
        if not self.is_terminal():
            logger.warning("Submit requested on step %s of %s; ignoring", state.current_step, self.total_steps)
            state.notice = NOT_TERMINAL_MESSAGE
            return DispatchResult(accepted=False, state=state)
        if state.submitted:
            return DispatchResult(accepted=False, state=state)

        gate = evaluate_submission(self._steps, state.fields)
        if not gate.passed:
            state.errors = dict(gate.errors)
            log_event(
                "info",
                event="wizard.submit_blocked",
                flow=self._wizard_id,
                step=state.current_step,
                detail=", ".join(gate.errors),
            )
            return DispatchResult(accepted=False, state=state, gate=gate)

        if self._submission_handler is None:
            raise RuntimeError(f"Wizard '{self._wizard_id}' has no submission handler")

        result = self._submission_handler.submit(FormStateStore(state.fields).snapshot())
        state.requires_login = result.requires_login
        if not result.ok:
            state.errors = dict(result.field_errors)
            state.notice = result.error
            return DispatchResult(accepted=False, state=state, gate=gate, submission=result)

        state.submitted = True
        state.errors = {}
        state.notice = result.message
        return DispatchResult(accepted=True, state=state, gate=gate, submission=result)

    def _reset(self) -> DispatchResult:
        state = self._fresh_state()
        self._session_state[self._session_keys.state] = state
        log_event("info", event="wizard.reset", flow=self._wizard_id)
        return DispatchResult(accepted=True, state=state)


__all__ = [
    "DispatchResult",
    "NOT_TERMINAL_MESSAGE",
    "WizardController",
    "WizardState",
]
