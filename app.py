# app.py - Hiring Wizards (Streamlit entrypoint)
from __future__ import annotations

from pathlib import Path
import sys
from typing import Final

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

import config as app_config  # noqa: E402
from constants.keys import StateKeys, UIKeys  # noqa: E402
from core.errors import ApiError  # noqa: E402
from flows import DEFAULT_FLOW, FLOWS, build_flow  # noqa: E402
from infra.logging import configure_logging, log_event  # noqa: E402
from integrations.jobboard_api import JobBoardClient  # noqa: E402
from utils.telemetry import setup_tracing  # noqa: E402
from wizard.controller import WizardController  # noqa: E402
from wizard.session import SessionContext, SessionEvent  # noqa: E402
from wizard_pages import WIZARD_PAGES, render_wizard  # noqa: E402

APP_VERSION: Final[str] = "0.1.0"

configure_logging(app_config.LOG_LEVEL)
setup_tracing()

st.set_page_config(
    page_title="Hiring Wizards",
    page_icon="🧭",
    layout="centered",
    initial_sidebar_state="expanded",
)

st.session_state.setdefault("app_version", APP_VERSION)

session = SessionContext(st.session_state)
client = JobBoardClient(token_provider=lambda: session.access_token)


def _flash(level: str, message: str) -> None:
    st.session_state[StateKeys.FLASH] = (level, message)


def _render_flash() -> None:
    flash = st.session_state.pop(StateKeys.FLASH, None)
    if not flash:
        return
    level, message = flash
    renderer = {"success": st.success, "error": st.error, "warning": st.warning}.get(level, st.info)
    renderer(message)


def _controller_for(flow_id: str) -> WizardController:
    return build_flow(flow_id, client=client, session=session, session_state=st.session_state)


def _active_flow() -> str:
    flow_id = st.session_state.get(StateKeys.ACTIVE_FLOW)
    if flow_id not in FLOWS:
        flow_id = DEFAULT_FLOW
        st.session_state[StateKeys.ACTIVE_FLOW] = flow_id
    return flow_id


def _switch_flow() -> None:
    """Leaving a wizard discards its answers; nothing outlives the page."""

    previous = _active_flow()
    selected = st.session_state.get(UIKeys.FLOW_SELECT, previous)
    if selected == previous:
        return
    _controller_for(previous).discard()
    st.session_state[StateKeys.ACTIVE_FLOW] = selected


def _on_session_event(event: SessionEvent, context: SessionContext) -> None:
    if event is SessionEvent.SIGNED_IN:
        # a wizard blocked on login can be submitted again
        state = _controller_for(_active_flow()).state
        if state.requires_login:
            state.requires_login = False
            state.notice = None
    log_event("info", event=f"session.{event.value.lower()}", flow=_active_flow())


def _sign_in() -> None:
    token = str(st.session_state.get(UIKeys.TOKEN_INPUT) or "").strip()
    if not token:
        _flash("warning", "Paste an access token to sign in.")
        return
    try:
        profile = JobBoardClient(token_provider=lambda: token).get_profile()
    except ApiError as exc:
        _flash("error", f"Sign-in failed: {exc.message}")
        return
    session.sign_in(token, profile if isinstance(profile, dict) else None)
    st.session_state[UIKeys.TOKEN_INPUT] = ""
    _flash("success", "Signed in.")


def _sign_out() -> None:
    session.sign_out()
    _flash("info", "Signed out.")


def render_sidebar() -> None:
    with st.sidebar:
        st.markdown("## 🧭 Hiring Wizards")
        flow_ids = list(FLOWS)
        active = _active_flow()
        st.session_state.setdefault(UIKeys.FLOW_SELECT, active)
        st.radio(
            "Wizard",
            flow_ids,
            key=UIKeys.FLOW_SELECT,
            format_func=lambda flow_id: FLOWS[flow_id].label,
            on_change=_switch_flow,
        )
        st.divider()
        if session.is_authenticated:
            user = session.user or {}
            name = user.get("full_name") or user.get("email") or "your account"
            st.caption(f"Signed in as {name}")
            st.button("Sign out", key="ui.auth.sign_out", on_click=_sign_out)
        else:
            st.text_input("Access token", key=UIKeys.TOKEN_INPUT, type="password")
            st.button("Sign in", key="ui.auth.sign_in", on_click=_sign_in)
        if not app_config.is_llm_enabled():
            st.caption("AI assistance is off. Set OPENAI_API_KEY to enable it.")
        st.caption(f"v{APP_VERSION}")


session.subscribe(_on_session_event)
render_sidebar()
_render_flash()

active_flow = _active_flow()
render_wizard(WIZARD_PAGES[active_flow], _controller_for(active_flow))
