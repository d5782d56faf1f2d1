"""Submission handler: serialize wizard answers and send them once."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ValidationError

from core.errors import ApiError, AuthenticationError
from infra.logging import log_event
from wizard.session import SessionContext
from wizard.types import FieldKey, Fields

logger = logging.getLogger("hiring_wizards.submission")

LOGIN_REQUIRED_MESSAGE = "Please log in to continue. Your answers are kept until you leave this page."
INVALID_FIELDS_MESSAGE = "Some answers could not be sent. Please check the highlighted fields."

Serializer = Callable[[Fields], BaseModel | Mapping[str, Any]]
Sender = Callable[[dict[str, Any]], Any]


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a submission attempt."""

    ok: bool
    response: Any = None
    error: str | None = None
    field_errors: Mapping[FieldKey, str] = field(default_factory=dict)
    requires_login: bool = False
    redirect_to: str | None = None
    message: str | None = None


def _validation_errors(error: ValidationError) -> dict[FieldKey, str]:
    errors: dict[FieldKey, str] = {}
    for item in error.errors():
        location = item.get("loc") or ()
        key = str(location[0]) if location else "__root__"
        errors.setdefault(key, str(item.get("msg") or "Invalid value"))
    return errors


class SubmissionHandler:
    """Package the accumulated answers and issue exactly one request.

    Failures never raise: they come back as a :class:`SubmissionResult` the
    page renders as an inline banner. No retries are attempted.
    """

    def __init__(
        self,
        *,
        serializer: Serializer,
        send: Sender,
        session: SessionContext | None = None,
        requires_auth: bool = True,
        success_message: str = "Saved successfully.",
        redirect_to: str | None = None,
        on_success: Callable[[Any], None] | None = None,
        name: str = "wizard",
    ) -> None:
        self._serializer = serializer
        self._send = send
        self._session = session
        self._requires_auth = requires_auth
        self._success_message = success_message
        self._redirect_to = redirect_to
        self._on_success = on_success
        self._name = name

    @property
    def requires_auth(self) -> bool:
        return self._requires_auth

    def serialize(self, fields: Fields) -> dict[str, Any]:
        """Return the request body for ``fields``.

        Raises:
            ValidationError: If the answers cannot be coerced into the payload model.
        """

        payload = self._serializer(fields)
        if isinstance(payload, BaseModel):
            return payload.model_dump(mode="json", exclude_none=True)
        return dict(payload)

    def submit(self, fields: Fields) -> SubmissionResult:
        if self._requires_auth and (self._session is None or not self._session.is_authenticated):
            log_event("warning", event="submission.unauthenticated", flow=self._name)
            return SubmissionResult(ok=False, error=LOGIN_REQUIRED_MESSAGE, requires_login=True)

        try:
            body = self.serialize(fields)
        except ValidationError as exc:
            field_errors = _validation_errors(exc)
            log_event("warning", event="submission.invalid", flow=self._name, detail=", ".join(field_errors))
            return SubmissionResult(ok=False, error=INVALID_FIELDS_MESSAGE, field_errors=field_errors)

        started = time.perf_counter()
        try:
            response = self._send(body)
        except AuthenticationError as exc:
            log_event("warning", event="submission.rejected", flow=self._name, detail=exc.message)
            return SubmissionResult(ok=False, error=LOGIN_REQUIRED_MESSAGE, requires_login=True)
        except ApiError as exc:
            log_event(
                "error",
                event="submission.failed",
                flow=self._name,
                duration=round(time.perf_counter() - started, 3),
                detail=exc.message,
                payload=body,
            )
            return SubmissionResult(ok=False, error=exc.message)

        log_event(
            "info",
            event="submission.succeeded",
            flow=self._name,
            duration=round(time.perf_counter() - started, 3),
        )
        if self._on_success is not None:
            self._on_success(response)
        return SubmissionResult(
            ok=True,
            response=response,
            redirect_to=self._redirect_to,
            message=self._success_message,
        )


__all__ = [
    "INVALID_FIELDS_MESSAGE",
    "LOGIN_REQUIRED_MESSAGE",
    "SubmissionHandler",
    "SubmissionResult",
]
