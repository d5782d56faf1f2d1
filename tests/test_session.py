from __future__ import annotations

from typing import Any

import pytest

from constants.keys import StateKeys
from wizard.session import SessionContext, SessionEvent


def test_sign_in_stores_token_and_notifies_subscribers() -> None:
    storage: dict[str, Any] = {}
    session = SessionContext(storage)
    events: list[SessionEvent] = []
    session.subscribe(lambda event, _context: events.append(event))

    session.sign_in("  abc  ", {"email": "a@example.com"})

    assert session.is_authenticated
    assert session.access_token == "abc"
    assert storage[StateKeys.ACCESS_TOKEN] == "abc"
    assert session.user == {"email": "a@example.com"}
    assert events == [SessionEvent.SIGNED_IN]


def test_unsubscribe_stops_notifications() -> None:
    session = SessionContext({})
    events: list[SessionEvent] = []
    unsubscribe = session.subscribe(lambda event, _context: events.append(event))

    unsubscribe()
    session.sign_in("abc")

    assert events == []


def test_sign_out_notifies_only_when_signed_in() -> None:
    session = SessionContext({})
    events: list[SessionEvent] = []
    session.subscribe(lambda event, _context: events.append(event))

    session.sign_out()
    session.sign_in("abc")
    session.sign_out()

    assert events == [SessionEvent.SIGNED_IN, SessionEvent.SIGNED_OUT]
    assert session.user is None
    assert not session.is_authenticated


def test_empty_token_is_rejected() -> None:
    with pytest.raises(ValueError):
        SessionContext({}).sign_in("   ")


def test_blank_stored_token_counts_as_signed_out() -> None:
    session = SessionContext({StateKeys.ACCESS_TOKEN: "  "})

    assert session.access_token is None
    assert not session.is_authenticated
