"""Structured logging utilities for the hiring wizards."""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
import time
from pathlib import Path
from typing import Any, Dict

import config as app_config

LOGGER = logging.getLogger("hiring_wizards")

_BEARER_RE = re.compile(r"(Bearer\s+)[A-Za-z0-9._~+/=-]+")
_REDACTED_PAYLOAD_KEYS = frozenset({"password", "confirm_password", "access_token", "token", "authorization"})


def configure_logging(level: str | int = "INFO") -> None:
    """Attach a stream handler to the project logger once."""

    resolved = level if isinstance(level, int) else getattr(logging, str(level).upper(), logging.INFO)
    LOGGER.setLevel(resolved)
    if not LOGGER.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        LOGGER.addHandler(handler)


def _redact(value: str) -> str:
    """Redact known secrets and bearer tokens from a string."""

    secrets = [os.getenv("OPENAI_API_KEY"), os.getenv("SECRET_KEY")]
    for secret in secrets:
        if secret:
            value = value.replace(secret, "[redacted]")
    return _BEARER_RE.sub(r"\1[redacted]", value)


def redact_payload(payload: Any) -> Any:
    """Return a copy of ``payload`` with credential-like keys masked."""

    if isinstance(payload, dict):
        return {
            key: "[redacted]" if str(key).lower() in _REDACTED_PAYLOAD_KEYS else redact_payload(value)
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    return payload


def log_event(
    level: str,
    *,
    event: str,
    flow: str | None = None,
    step: int | None = None,
    duration: float | None = None,
    detail: str | None = None,
    payload: Dict[str, Any] | None = None,
) -> str:
    """Emit a structured log line and optionally dump payload to a temp file.

    Args:
        level: Logging level name (e.g., ``"info"``).
        event: Short event name such as ``"wizard.advance"``.
        flow: Wizard identifier the event belongs to.
        step: Step number at the time of the event.
        duration: Duration of the operation in seconds.
        detail: Free-form detail (error message, missing fields).
        payload: Optional payload to dump for debugging when
            ``WIZARD_DEBUG`` env var is truthy. Credentials are masked.

    Returns:
        Path to the dumped payload file if written, else an empty string.
    """

    record = {
        "level": level.lower(),
        "event": event,
        "flow": flow,
        "step": step,
        "duration": duration,
        "detail": detail,
    }
    safe_record = {k: _redact(str(v)) for k, v in record.items() if v is not None}
    LOGGER.log(getattr(logging, level.upper(), logging.INFO), json.dumps(safe_record))

    if payload and app_config.WIZARD_DEBUG:
        path = Path(tempfile.gettempdir()) / f"hiring_wizards_{int(time.time())}.json"
        path.write_text(json.dumps(redact_payload(payload), ensure_ascii=False, indent=2, default=str))
        return str(path)
    return ""
