from __future__ import annotations

from typing import Any

import pytest
from pydantic import BaseModel

from core.errors import AuthenticationError, NetworkError
from wizard.session import SessionContext
from wizard.submission import INVALID_FIELDS_MESSAGE, LOGIN_REQUIRED_MESSAGE, SubmissionHandler


class _Body(BaseModel):
    title: str
    count: int | None = None


def _handler(send: Any, session: SessionContext | None, **kwargs: Any) -> SubmissionHandler:
    return SubmissionHandler(
        serializer=lambda fields: _Body.model_validate(fields),
        send=send,
        session=session,
        name="test",
        **kwargs,
    )


def test_requires_login_before_sending() -> None:
    sent: list[dict[str, Any]] = []
    handler = _handler(sent.append, SessionContext({}))

    result = handler.submit({"title": "x"})

    assert not result.ok
    assert result.requires_login
    assert result.error == LOGIN_REQUIRED_MESSAGE
    assert sent == []


def test_serializer_errors_map_to_fields(signed_in_session: SessionContext) -> None:
    handler = _handler(lambda body: body, signed_in_session)

    result = handler.submit({"title": "x", "count": "many"})

    assert not result.ok
    assert result.error == INVALID_FIELDS_MESSAGE
    assert set(result.field_errors) == {"count"}


def test_success_drops_none_values_and_runs_callback(signed_in_session: SessionContext) -> None:
    sent: list[dict[str, Any]] = []
    seen: list[Any] = []

    def _send(body: dict[str, Any]) -> dict[str, Any]:
        sent.append(body)
        return {"id": 7}

    handler = _handler(_send, signed_in_session, on_success=seen.append, redirect_to="/done", success_message="Yay")

    result = handler.submit({"title": "x"})

    assert result.ok
    assert result.response == {"id": 7}
    assert result.redirect_to == "/done"
    assert result.message == "Yay"
    assert sent == [{"title": "x"}]
    assert seen == [{"id": 7}]


@pytest.mark.parametrize("requires_auth", [True, False])
def test_expired_token_asks_for_login(signed_in_session: SessionContext, requires_auth: bool) -> None:
    def _send(_: dict[str, Any]) -> None:
        raise AuthenticationError("expired", status=401)

    result = _handler(_send, signed_in_session, requires_auth=requires_auth).submit({"title": "x"})

    assert result.requires_login
    assert not result.ok


def test_network_errors_are_attempted_once(signed_in_session: SessionContext) -> None:
    attempts: list[int] = []

    def _send(_: dict[str, Any]) -> None:
        attempts.append(1)
        raise NetworkError("Network error - please check your connection.")

    result = _handler(_send, signed_in_session).submit({"title": "x"})

    assert not result.ok
    assert result.error == "Network error - please check your connection."
    assert attempts == [1]


def test_public_handler_sends_without_session() -> None:
    sent: list[dict[str, Any]] = []

    result = _handler(sent.append, None, requires_auth=False).submit({"title": "x"})

    assert result.ok
    assert sent == [{"title": "x"}]
