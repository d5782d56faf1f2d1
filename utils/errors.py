"""Utility helpers for rendering inline banners in Streamlit."""

from __future__ import annotations

from typing import Final, Mapping

import streamlit as st

import config as app_config

_DETAILS_LABEL: Final[str] = "Details"


def display_error(msg: str, detail: str | None = None) -> None:
    """Render a user-facing error banner with optional debug details.

    Args:
        msg: Short error message for the user.
        detail: Optional technical detail shown when ``WIZARD_DEBUG`` is on.
    """

    st.error(msg)
    if detail and app_config.WIZARD_DEBUG:
        with st.expander(_DETAILS_LABEL):
            st.code(detail)


def format_field_errors(errors: Mapping[str, str], labels: Mapping[str, str] | None = None) -> list[str]:
    """Return ``"Label: message"`` lines for ``errors`` in insertion order."""

    lookup = labels or {}
    lines: list[str] = []
    for field, message in errors.items():
        label = lookup.get(field) or field.replace("_", " ").capitalize()
        lines.append(f"{label}: {message}")
    return lines


def display_field_errors(errors: Mapping[str, str], labels: Mapping[str, str] | None = None) -> None:
    """Render a warning listing the fields that block progression."""

    lines = format_field_errors(errors, labels)
    if not lines:
        return
    st.warning("\n".join(f"- {line}" for line in lines))
