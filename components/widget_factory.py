"""Factories for wizard widgets bound to a controller field (Widget Factory Pattern).

Each widget keeps ``st.session_state[widget_key]`` in sync with the stored
answer before rendering, and writes changes back through ``SetField`` in its
``on_change`` callback. External updates (AI prefill, record removal) are
therefore picked up on the next rerun without extra bookkeeping.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar

import streamlit as st

from wizard.controller import WizardController
from wizard.types import FieldKey

T = TypeVar("T")


def _normalize_session_value(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    return value


def _ensure_widget_state(key: str, value: Any) -> None:
    """Keep ``st.session_state[key]`` synchronised with ``value``."""

    normalized_value = _normalize_session_value(value)
    if key not in st.session_state or st.session_state.get(key) != normalized_value:
        st.session_state[key] = normalized_value


def _build_on_change(
    controller: WizardController,
    field: FieldKey,
    key: str,
    *,
    transform: Callable[[Any], Any] | None = None,
) -> Callable[[], None]:
    """Return a callback that persists widget updates to the wizard."""

    def _callback() -> None:
        value = _normalize_session_value(st.session_state.get(key))
        controller.set_field(field, transform(value) if transform else value)

    return _callback


def _label(controller: WizardController, field: FieldKey, label: str | None, required: bool) -> str:
    text = label or controller.field_labels.get(field) or field.replace("_", " ").capitalize()
    return f"{text} *" if required else text


def _is_required(controller: WizardController, field: FieldKey) -> bool:
    step = controller.current_step_definition()
    return field in step.resolve_required(controller.state.fields)


def _error_help(controller: WizardController, field: FieldKey, help_text: str | None) -> str | None:
    error = controller.state.errors.get(field)
    if error:
        return f"{error}. {help_text}" if help_text else error
    return help_text


def text_input(
    controller: WizardController,
    field: FieldKey,
    label: str | None = None,
    *,
    placeholder: str | None = None,
    help: str | None = None,
    widget_factory: Callable[..., str] | None = None,
    **kwargs: Any,
) -> str:
    """Render a text input bound to ``field``."""

    if "on_change" in kwargs or "value" in kwargs:
        raise ValueError("text_input manages value and on_change internally")

    widget_key = controller.session_keys.widget(field)
    current = controller.store.get(field)
    _ensure_widget_state(widget_key, "" if current is None else str(current))

    factory = widget_factory or st.text_input
    return factory(
        _label(controller, field, label, _is_required(controller, field)),
        key=widget_key,
        placeholder=placeholder,
        help=_error_help(controller, field, help),
        on_change=_build_on_change(controller, field, widget_key),
        **kwargs,
    )


def text_area(
    controller: WizardController,
    field: FieldKey,
    label: str | None = None,
    *,
    placeholder: str | None = None,
    height: int | None = None,
    help: str | None = None,
) -> str:
    """Render a multi-line text input bound to ``field``."""

    return text_input(
        controller,
        field,
        label,
        placeholder=placeholder,
        help=help,
        widget_factory=st.text_area,
        height=height,
    )


def select(
    controller: WizardController,
    field: FieldKey,
    options: Sequence[T],
    label: str | None = None,
    *,
    format_func: Callable[[T], str] = str,
    widget_factory: Callable[..., T] | None = None,
    **kwargs: Any,
) -> T:
    """Render a select widget bound to ``field``.

    Raises:
        ValueError: If ``options`` is empty.
    """

    option_list = list(options)
    if not option_list:
        raise ValueError("select requires at least one option")

    widget_key = controller.session_keys.widget(field)
    current = controller.store.get(field)
    _ensure_widget_state(widget_key, current if current in option_list else option_list[0])

    factory = widget_factory or st.selectbox
    return factory(
        _label(controller, field, label, _is_required(controller, field)),
        option_list,
        key=widget_key,
        format_func=format_func,
        on_change=_build_on_change(controller, field, widget_key),
        **kwargs,
    )


def checkbox(
    controller: WizardController,
    field: FieldKey,
    label: str | None = None,
    *,
    help: str | None = None,
    widget_factory: Callable[..., bool] | None = None,
) -> bool:
    """Render a checkbox bound to a boolean ``field``."""

    widget_key = controller.session_keys.widget(field)
    _ensure_widget_state(widget_key, bool(controller.store.get(field)))

    factory = widget_factory or st.checkbox
    return factory(
        _label(controller, field, label, False),
        key=widget_key,
        help=_error_help(controller, field, help),
        on_change=_build_on_change(controller, field, widget_key, transform=bool),
    )


def record_text_input(
    controller: WizardController,
    field: FieldKey,
    index: int,
    attribute: str,
    label: str,
    *,
    on_update: Callable[[WizardController, int, str, Any], None],
    placeholder: str | None = None,
    multiline: bool = False,
) -> str:
    """Render a text input editing ``field[index][attribute]`` through ``on_update``."""

    records = controller.store.get(field) or []
    current = records[index].get(attribute, "") if 0 <= index < len(records) else ""
    widget_key = controller.session_keys.widget(f"{field}.{index}.{attribute}")
    _ensure_widget_state(widget_key, "" if current is None else str(current))

    def _callback() -> None:
        on_update(controller, index, attribute, st.session_state.get(widget_key, ""))

    factory = st.text_area if multiline else st.text_input
    return factory(label, key=widget_key, placeholder=placeholder, on_change=_callback)


def record_checkbox(
    controller: WizardController,
    field: FieldKey,
    index: int,
    attribute: str,
    label: str,
    *,
    on_update: Callable[[WizardController, int, str, Any], None],
) -> bool:
    records = controller.store.get(field) or []
    current = bool(records[index].get(attribute)) if 0 <= index < len(records) else False
    widget_key = controller.session_keys.widget(f"{field}.{index}.{attribute}")
    _ensure_widget_state(widget_key, current)

    def _callback() -> None:
        on_update(controller, index, attribute, bool(st.session_state.get(widget_key)))

    return st.checkbox(label, key=widget_key, on_change=_callback)


__all__ = [
    "checkbox",
    "record_checkbox",
    "record_text_input",
    "select",
    "text_area",
    "text_input",
]
