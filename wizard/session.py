"""Explicit auth session shared by the wizards and the API client.

The session lives in an injected mutable mapping (``st.session_state`` in the
app, a plain dict in tests). Components that care about sign-in changes
subscribe explicitly and keep the returned callable to unsubscribe.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, Callable, Mapping, MutableMapping

from constants.keys import StateKeys

logger = logging.getLogger("hiring_wizards.session")


class SessionEvent(StrEnum):
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"


SessionListener = Callable[[SessionEvent, "SessionContext"], None]


class SessionContext:
    """Access token and user profile for the current browser session."""

    def __init__(self, storage: MutableMapping[str, Any] | None = None) -> None:
        self._storage: MutableMapping[str, Any] = storage if storage is not None else {}
        self._listeners: list[SessionListener] = []

    @property
    def access_token(self) -> str | None:
        token = self._storage.get(StateKeys.ACCESS_TOKEN)
        if isinstance(token, str) and token.strip():
            return token.strip()
        return None

    @property
    def user(self) -> Mapping[str, Any] | None:
        user = self._storage.get(StateKeys.USER)
        return user if isinstance(user, Mapping) else None

    @property
    def is_authenticated(self) -> bool:
        return self.access_token is not None

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it again."""

        if listener not in self._listeners:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            self.unsubscribe(listener)

        return _unsubscribe

    def unsubscribe(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def sign_in(self, token: str, user: Mapping[str, Any] | None = None) -> None:
        cleaned = (token or "").strip()
        if not cleaned:
            raise ValueError("Cannot sign in with an empty access token")
        self._storage[StateKeys.ACCESS_TOKEN] = cleaned
        if user is not None:
            self._storage[StateKeys.USER] = dict(user)
        logger.info("Session signed in")
        self._notify(SessionEvent.SIGNED_IN)

    def sign_out(self) -> None:
        was_authenticated = self.is_authenticated
        self._storage.pop(StateKeys.ACCESS_TOKEN, None)
        self._storage.pop(StateKeys.USER, None)
        if was_authenticated:
            logger.info("Session signed out")
            self._notify(SessionEvent.SIGNED_OUT)

    def _notify(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            listener(event, self)


__all__ = ["SessionContext", "SessionEvent", "SessionListener"]
