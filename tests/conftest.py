from pathlib import Path
import sys
from dataclasses import dataclass
from typing import Any, Mapping

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import config
from wizard.session import SessionContext


@pytest.fixture(autouse=True)
def _ensure_test_openai_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide a deterministic OpenAI API key during tests unless overridden."""

    monkeypatch.setattr(config, "OPENAI_API_KEY", "test-key", raising=False)
    monkeypatch.setattr(config, "LLM_ENABLED", True, raising=False)
    monkeypatch.setattr(config, "WIZARD_DEBUG", False, raising=False)
    yield


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


class FakeJobBoardClient:
    """Records write calls and answers with canned responses or errors."""

    def __init__(self, response: Any = None, error: Exception | None = None) -> None:
        self.response = response if response is not None else {"id": 1}
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def _send(self, name: str, data: Mapping[str, Any]) -> Any:
        self.calls.append((name, dict(data)))
        if self.error is not None:
            raise self.error
        return self.response

    def create_job(self, data: Mapping[str, Any]) -> Any:
        return self._send("create_job", data)

    def update_profile(self, data: Mapping[str, Any]) -> Any:
        return self._send("update_profile", data)

    def register(self, data: Mapping[str, Any]) -> Any:
        return self._send("register", data)


@pytest.fixture
def fake_client() -> FakeJobBoardClient:
    return FakeJobBoardClient()


@pytest.fixture
def signed_in_session() -> SessionContext:
    session = SessionContext({})
    session.sign_in("token-123", {"email": "employer@example.com"})
    return session
