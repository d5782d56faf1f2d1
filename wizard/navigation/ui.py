from __future__ import annotations

import html
from typing import Callable, Mapping

import streamlit as st

from utils.errors import format_field_errors
from wizard.controller import WizardController
from wizard.navigation.state import NavigationButtonState, NavigationState, build_navigation_state

_SCROLL_FLAG = "_wizard_scroll_to_top"

_NAVIGATION_STYLE = """
<style>
.wizard-nav-marker + div[data-testid="stHorizontalBlock"] {
    display: flex;
    justify-content: center;
    gap: var(--space-sm, 0.6rem);
    align-items: stretch;
    margin: 1.2rem auto 0.65rem;
    max-width: 520px;
}

.wizard-nav-marker + div[data-testid="stHorizontalBlock"] > div[data-testid="column"] {
    flex: 1 1 0;
}

.wizard-nav-marker + div[data-testid="stHorizontalBlock"] button {
    width: 100%;
    min-height: 3rem;
    border-radius: 14px;
}

.wizard-nav-marker + div[data-testid="stHorizontalBlock"] button:disabled {
    box-shadow: none;
    opacity: 0.55;
}

.wizard-nav-hint {
    margin-top: 0.35rem;
    color: var(--text-soft, rgba(15, 23, 42, 0.7));
    font-size: 0.9rem;
}

.wizard-nav-warning-area {
    margin: 0.45rem auto 0;
    max-width: 520px;
}

.wizard-nav-warning {
    padding: 0.6rem 0.85rem;
    border-radius: 12px;
    border: 1px solid rgba(245, 158, 11, 0.35);
    background: rgba(251, 191, 36, 0.18);
    font-size: 0.92rem;
    line-height: 1.35;
}

@media (max-width: 768px) {
    .wizard-nav-marker + div[data-testid="stHorizontalBlock"] {
        flex-direction: column;
    }
}
</style>
"""


def inject_navigation_style() -> None:
    st.markdown(_NAVIGATION_STYLE, unsafe_allow_html=True)


def _scroll_after(action: Callable[[], object]) -> Callable[[], None]:
    def _run() -> None:
        action()
        st.session_state[_SCROLL_FLAG] = True

    return _run


def _render_button(
    controller: WizardController,
    button: NavigationButtonState,
    on_click: Callable[[], None],
) -> None:
    st.button(
        button.label,
        key=controller.session_keys.namespace(f"nav:{button.direction.value}"),
        type="primary" if button.primary else "secondary",
        disabled=not button.enabled,
        on_click=on_click,
        use_container_width=True,
    )
    if button.hint:
        st.markdown(f"<div class='wizard-nav-hint'>{html.escape(button.hint)}</div>", unsafe_allow_html=True)


def render_navigation(controller: WizardController, *, submit_label: str = "Submit") -> NavigationState:
    """Render Back, Next and Submit for the current step and return the state used."""

    state = build_navigation_state(controller, submit_label=submit_label)
    inject_navigation_style()
    st.markdown("<div class='wizard-nav-marker'></div>", unsafe_allow_html=True)
    back_col, forward_col = st.columns(2)
    with back_col:
        if state.previous is not None:
            _render_button(controller, state.previous, _scroll_after(controller.retreat))
    with forward_col:
        if state.next is not None:
            _render_button(controller, state.next, _scroll_after(controller.advance))
        elif state.submit is not None:
            _render_button(controller, state.submit, controller.submit)
    return state


def render_validation_warnings(errors: Mapping[str, str], labels: Mapping[str, str] | None = None) -> None:
    """Render the errors left by a blocked advance or submit."""

    lines = format_field_errors(errors, labels)
    if not lines:
        return
    sanitized = "<br />".join(html.escape(line) for line in lines)
    st.markdown(
        f"""
        <div class="wizard-nav-warning-area">
            <div class="wizard-nav-warning">{sanitized}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def maybe_scroll_to_top() -> None:
    if not st.session_state.pop(_SCROLL_FLAG, False):
        return
    st.markdown(
        """
        <script>
        (function() {
            const target = window.document.querySelector('section.main');
            if (target) {
                target.scrollIntoView({ behavior: 'smooth', block: 'start' });
            } else {
                window.scrollTo({ top: 0, behavior: 'smooth' });
            }
        })();
        </script>
        """,
        unsafe_allow_html=True,
    )


__all__ = [
    "inject_navigation_style",
    "maybe_scroll_to_top",
    "render_navigation",
    "render_validation_warnings",
]
