from __future__ import annotations

import streamlit as st

from components import widget_factory as wf
from flows import signup as flow
from wizard.controller import WizardController

from .base import WizardPage


def _render_role(controller: WizardController) -> None:
    current = controller.store.get("role")
    columns = st.columns(len(flow.ROLES))
    for column, (role, label) in zip(columns, flow.ROLES.items()):
        with column:
            st.button(
                label,
                key=controller.session_keys.namespace(f"role:{role}"),
                type="primary" if role == current else "secondary",
                use_container_width=True,
                on_click=flow.choose_role,
                args=(controller, role),
            )


def _render_password_strength(password: str) -> None:
    score = flow.password_strength(password)
    st.progress(score / len(flow.STRENGTH_LABELS))
    st.caption(f"Password strength: {flow.strength_label(score)}")


def _render_account(controller: WizardController) -> None:
    wf.text_input(controller, "full_name", placeholder="Ada Okafor")
    if controller.store.get("role") == "employer":
        wf.text_input(controller, "company_name", placeholder="Acme Ltd")
    wf.text_input(controller, "email", placeholder="you@example.com")
    password = wf.text_input(controller, "password", type="password")
    if password:
        _render_password_strength(password)
    wf.text_input(controller, "confirm_password", type="password")
    wf.checkbox(controller, "agreed_to_terms", "I agree to the Terms of Service and Privacy Policy")


PAGE = WizardPage(
    flow_id=flow.FLOW_ID,
    title="Create your account",
    subtitle="Join the job board as a candidate or an employer.",
    submit_label="Create account",
    success_hint="You are signed in and can continue to your dashboard.",
    renderers={
        "role": _render_role,
        "account": _render_account,
    },
)
