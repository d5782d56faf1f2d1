"""Central configuration for the hiring wizards.

Settings are read from the environment (a local ``.env`` file is honoured via
``python-dotenv``). The OpenAI key may also come from Streamlit secrets so the
hosted app does not need environment access.

``JOBBOARD_API_URL`` points at the job-board REST backend that receives wizard
submissions; ``OPENAI_API_KEY`` enables the AI helpers (resume parsing and job
description drafts). Without a key those helpers stay disabled and the wizards
remain fully usable by hand.
"""

from __future__ import annotations

import logging
import os
import warnings
from typing import Mapping

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "on")


def _is_truthy_flag(value: str | None) -> bool:
    """Return ``True`` when ``value`` matches a truthy environment token."""

    if value is None:
        return False
    return value.strip().lower() in _TRUTHY_ENV_VALUES


def _normalise_timeout(value: object | None, *, default: float, env_var: str) -> float:
    """Return a positive timeout value in seconds."""

    if value is None:
        return default
    candidate = value
    if isinstance(candidate, str):
        stripped = candidate.strip()
        if not stripped:
            return default
        try:
            candidate = float(stripped)
        except ValueError:
            warnings.warn(
                "Unsupported %s '%s'; falling back to %.1f seconds." % (env_var, candidate, default),
                RuntimeWarning,
            )
            return default
    if isinstance(candidate, (int, float)) and not isinstance(candidate, bool):
        timeout = float(candidate)
        if timeout > 0:
            return timeout
    warnings.warn(
        "%s must be a positive number; falling back to %.1f seconds." % (env_var, default),
        RuntimeWarning,
    )
    return default


def _parse_positive_int_env(value: object | None, *, env_var: str, default: int) -> int:
    """Return a positive integer parsed from ``value`` or ``default``."""

    if value is None:
        return default
    if isinstance(value, str):
        candidate = value.strip()
        if not candidate:
            return default
        try:
            parsed = int(float(candidate))
        except ValueError:
            warnings.warn(
                "%s is not a number; ignoring %s" % (candidate, env_var),
                RuntimeWarning,
            )
            return default
    elif isinstance(value, (int, float)):
        parsed = int(value)
    else:
        return default
    if parsed <= 0:
        return default
    return parsed


def _coerce_secret_value(value: object) -> str:
    """Return ``value`` as a trimmed string without raising on unexpected types."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="ignore").strip()
    return str(value).strip()


_missing_api_key_logged = False


def get_openai_api_key() -> str:
    """Return the configured OpenAI API key from secrets or environment variables."""

    global _missing_api_key_logged

    # 1. Streamlit secrets (top-level key or ``openai`` section)
    try:
        secrets: Mapping[str, object] = st.secrets
        direct_secret = secrets.get("OPENAI_API_KEY")
        openai_section = secrets.get("openai")
    except Exception:  # no secrets.toml outside of a Streamlit deployment
        direct_secret = None
        openai_section = None
    key = _coerce_secret_value(direct_secret)
    if not key and isinstance(openai_section, Mapping):
        key = _coerce_secret_value(openai_section.get("OPENAI_API_KEY"))
    if key:
        _missing_api_key_logged = False
        return key

    # 2. Environment variable fallback
    env_key = _coerce_secret_value(os.getenv("OPENAI_API_KEY"))
    if env_key:
        _missing_api_key_logged = False
        return env_key

    if not _missing_api_key_logged:
        logger.info("OPENAI_API_KEY not configured; AI helpers are disabled until a key is provided.")
        _missing_api_key_logged = True
    return ""


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
WIZARD_DEBUG = _is_truthy_flag(os.getenv("WIZARD_DEBUG"))

JOBBOARD_API_URL = (os.getenv("JOBBOARD_API_URL") or "http://localhost:8000/api").strip().rstrip("/")
JOBBOARD_API_TIMEOUT = _normalise_timeout(
    os.getenv("JOBBOARD_API_TIMEOUT"), default=30.0, env_var="JOBBOARD_API_TIMEOUT"
)
JOBBOARD_API_READ_RETRIES = _parse_positive_int_env(
    os.getenv("JOBBOARD_API_READ_RETRIES"), env_var="JOBBOARD_API_READ_RETRIES", default=3
)

OPENAI_API_KEY = get_openai_api_key()
OPENAI_BASE_URL = (os.getenv("OPENAI_BASE_URL") or "").strip()
OPENAI_MODEL = (os.getenv("OPENAI_MODEL") or "gpt-4o-mini").strip()
OPENAI_REQUEST_TIMEOUT = _normalise_timeout(
    os.getenv("OPENAI_REQUEST_TIMEOUT"), default=60.0, env_var="OPENAI_REQUEST_TIMEOUT"
)
LLM_ENABLED = bool(OPENAI_API_KEY)


def is_llm_enabled() -> bool:
    """Return whether AI helpers may issue requests."""

    return bool(LLM_ENABLED and OPENAI_API_KEY)


__all__ = [
    "JOBBOARD_API_READ_RETRIES",
    "JOBBOARD_API_TIMEOUT",
    "JOBBOARD_API_URL",
    "LLM_ENABLED",
    "LOG_LEVEL",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_MODEL",
    "OPENAI_REQUEST_TIMEOUT",
    "WIZARD_DEBUG",
    "get_openai_api_key",
    "is_llm_enabled",
]
