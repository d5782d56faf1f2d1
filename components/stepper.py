"""Progress stepper for wizard navigation."""

from __future__ import annotations

import html
from typing import Sequence

import streamlit as st

from wizard.controller import WizardController

_STYLE_STATE_KEY = "_workflow_stepper_styles_v1"


def _inject_workflow_styles() -> None:
    """Inject the stepper styling once per session."""

    if st.session_state.get(_STYLE_STATE_KEY):
        return

    st.session_state[_STYLE_STATE_KEY] = True
    st.markdown(
        """
        <style>
        .workflow-stepper-marker + div[data-testid="stHorizontalBlock"] {
            display: flex;
            gap: 0.5rem;
            align-items: stretch;
            margin-bottom: 0.5rem;
        }

        .workflow-stepper-marker
            + div[data-testid="stHorizontalBlock"]
            button {
            border-radius: 999px;
            font-weight: 600;
            justify-content: flex-start;
        }

        .workflow-stepper__summary {
            display: flex;
            flex-wrap: wrap;
            gap: 0.35rem;
            font-size: 0.85rem;
            color: var(--text-muted, rgba(15, 23, 42, 0.6));
            margin: 0.25rem 0 0.75rem;
        }

        .workflow-stepper__summary span[data-state="current"] {
            font-weight: 600;
        }

        @media (max-width: 900px) {
            .workflow-stepper-marker + div[data-testid="stHorizontalBlock"] {
                flex-direction: column;
            }
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def step_status(index: int, current: int) -> str:
    """Return ``done``, ``current`` or ``upcoming`` for a zero-based ``index``."""

    if index < current:
        return "done"
    if index == current:
        return "current"
    return "upcoming"


def _build_summary_segments(current: int, labels: Sequence[str]) -> list[str]:
    """Return HTML segments for the step summary; ``current`` is zero-based."""

    status_icons = {
        "done": "✔︎",
        "current": "➤",
        "upcoming": "•",
    }
    segments: list[str] = []
    for idx, label in enumerate(labels):
        status = step_status(idx, current)
        annotated_label = f"{status_icons[status]} {idx + 1}. {label}"
        segments.append(f"<span data-state='{status}'>{html.escape(annotated_label)}</span>")
    return segments


def render_step_summary(current: int, labels: Sequence[str]) -> None:
    """Render the condensed step summary above the step heading."""

    if not labels:
        return

    _inject_workflow_styles()
    arrow = "<span aria-hidden='true'>→</span>"
    st.markdown(
        "<div class='workflow-stepper__summary'>" + arrow.join(_build_summary_segments(current, labels)) + "</div>",
        unsafe_allow_html=True,
    )


def render_stepper(controller: WizardController) -> None:
    """Render one button per step; clicking a step jumps to it without gating."""

    labels = [step.title for step in controller.steps]
    current_index = controller.current_step - 1
    _inject_workflow_styles()
    st.progress(controller.progress_ratio())
    st.markdown("<div class='workflow-stepper-marker'></div>", unsafe_allow_html=True)
    columns = st.columns(len(labels))
    for idx, (column, label) in enumerate(zip(columns, labels)):
        status = step_status(idx, current_index)
        with column:
            st.button(
                f"{'✔︎ ' if status == 'done' else ''}{idx + 1}. {label}",
                key=controller.session_keys.namespace(f"stepper:{idx + 1}"),
                type="primary" if status == "current" else "secondary",
                disabled=controller.state.submitted,
                use_container_width=True,
                on_click=controller.jump_to,
                args=(idx + 1,),
            )
    render_step_summary(current_index, labels)


__all__ = ["render_step_summary", "render_stepper", "step_status"]
