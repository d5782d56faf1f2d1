"""Chip widgets for list fields such as skills."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Literal

import streamlit as st

from wizard.controller import WizardController
from wizard.types import FieldKey

__all__ = [
    "CHIP_INLINE_VALUE_LIMIT",
    "render_chip_button_grid",
    "render_chip_editor",
]

CHIP_INLINE_VALUE_LIMIT = 20


def _compact_inline_label(raw: str, *, limit: int = CHIP_INLINE_VALUE_LIMIT) -> tuple[str, bool]:
    """Return a single-line label truncated to ``limit`` characters when needed."""

    text = " ".join(str(raw).split())
    if len(text) <= limit:
        return text, False
    clipped = text[: max(0, limit - 1)].rstrip()
    return f"{clipped}…", True


def render_chip_button_grid(
    options: Sequence[str],
    *,
    key_prefix: str,
    on_click: Callable[[str], None],
    selected: Sequence[str] = (),
    columns: int = 4,
    widget_factory: Callable[..., Any] | None = None,
) -> None:
    """Render a grid of buttons; clicking one calls ``on_click`` with its option.

    Options contained in ``selected`` render as primary buttons.
    """

    if not options:
        return

    per_row = max(1, min(columns, len(options)))
    grid_columns = st.columns(per_row)
    button_renderer = widget_factory or st.button

    for idx, option in enumerate(options):
        option_text = str(option)
        display_text, was_truncated = _compact_inline_label(option_text)
        if idx and idx % per_row == 0:
            per_row = max(1, min(columns, len(options) - idx))
            grid_columns = st.columns(per_row)
        button_type: Literal["primary", "secondary"] = "primary" if option_text in selected else "secondary"
        with grid_columns[idx % per_row]:
            button_renderer(
                display_text,
                key=f"{key_prefix}.{idx}",
                type=button_type,
                use_container_width=True,
                help=option_text if was_truncated else None,
                on_click=on_click,
                args=(option_text,),
            )


def render_chip_editor(
    controller: WizardController,
    field: FieldKey,
    *,
    on_add: Callable[[WizardController, str], None],
    on_remove: Callable[[WizardController, str], None],
    placeholder: str = "Add a skill",
) -> None:
    """Render a free-text input with an Add button and removable chips for ``field``."""

    input_key = controller.session_keys.widget(f"{field}.__input")
    values = [str(value) for value in controller.store.get(field) or []]

    def _add() -> None:
        on_add(controller, st.session_state.get(input_key, ""))
        st.session_state[input_key] = ""

    add_col, button_col = st.columns([4, 1])
    with add_col:
        st.text_input(
            controller.field_labels.get(field, field.capitalize()),
            key=input_key,
            placeholder=placeholder,
            on_change=_add,
        )
    with button_col:
        st.write("")
        st.button("Add", key=f"{input_key}.add", on_click=_add, use_container_width=True)

    error = controller.state.errors.get(field)
    if error:
        st.caption(f":red[{error}]")

    render_chip_button_grid(
        [f"{value} ✕" for value in values],
        key_prefix=controller.session_keys.widget(f"{field}.__chips"),
        on_click=lambda label: on_remove(controller, label.removesuffix(" ✕")),
    )
