from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping

import streamlit as st

from components.stepper import render_stepper
from utils.errors import display_error
from wizard.controller import WizardController
from wizard.navigation.ui import maybe_scroll_to_top, render_navigation, render_validation_warnings

StepRenderer = Callable[[WizardController], None]


@dataclass(frozen=True)
class WizardPage:
    """Presentation of one wizard flow.

    Step metadata (ids, required fields, labels) stays in the flow's
    ``STEPS``; a page only maps each step key to the function that draws its
    widgets, plus the copy shown around them.
    """

    flow_id: str
    title: str
    subtitle: str
    submit_label: str
    renderers: Mapping[str, StepRenderer] = field(default_factory=dict)
    success_hint: str = ""

    def renderer_for(self, step_key: str) -> StepRenderer:
        """Return the renderer for ``step_key``.

        Raises:
            KeyError: If the page has no renderer for the step.
        """

        return self.renderers[step_key]


def ai_error_key(controller: WizardController) -> str:
    return controller.session_keys.namespace("ai_error")


def render_ai_error(controller: WizardController) -> None:
    """Show the last AI helper failure, if any, once."""

    message = st.session_state.pop(ai_error_key(controller), None)
    if message:
        st.warning(message)


def _render_outcome(page: WizardPage, controller: WizardController) -> None:
    state = controller.state
    if state.submitted:
        st.success(state.notice or "Saved successfully.")
        if page.success_hint:
            st.caption(page.success_hint)
        st.button(
            "Start over",
            key=controller.session_keys.namespace("reset"),
            on_click=controller.reset,
        )
        return
    if state.requires_login:
        st.info(state.notice or "Please log in to continue.")
        return
    if state.notice:
        display_error(state.notice)


def render_wizard(page: WizardPage, controller: WizardController) -> None:
    """Render the full wizard: stepper, current step, feedback and navigation."""

    controller.ensure_state_defaults()
    maybe_scroll_to_top()

    st.title(page.title)
    st.caption(page.subtitle)
    render_stepper(controller)

    step = controller.current_step_definition()
    st.subheader(f"Step {step.id} of {controller.total_steps}: {step.title}")
    if step.description:
        st.caption(step.description)

    _render_outcome(page, controller)
    if controller.state.submitted:
        return

    page.renderer_for(step.key)(controller)
    render_validation_warnings(controller.state.errors, controller.field_labels)
    render_navigation(controller, submit_label=page.submit_label)


__all__ = ["StepRenderer", "WizardPage", "ai_error_key", "render_ai_error", "render_wizard"]
