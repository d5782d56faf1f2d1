from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

import config
from infra.logging import log_event, redact_payload


def test_log_event_emits_json_and_redacts_bearer_tokens(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="hiring_wizards"):
        path = log_event("info", event="submission.failed", flow="job_posting", detail="Bearer abc.def")

    assert path == ""
    record = json.loads(caplog.records[-1].getMessage())
    assert record["event"] == "submission.failed"
    assert record["flow"] == "job_posting"
    assert record["detail"] == "Bearer [redacted]"
    assert "step" not in record


def test_payload_dump_only_with_debug_flag(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("tempfile.gettempdir", lambda: str(tmp_path))
    payload = {"email": "a@b.c", "password": "hunter2"}

    assert log_event("error", event="submission.failed", payload=payload) == ""

    monkeypatch.setattr(config, "WIZARD_DEBUG", True)
    path = log_event("error", event="submission.failed", payload=payload)

    dumped = json.loads(Path(path).read_text())
    assert dumped == {"email": "a@b.c", "password": "[redacted]"}


@pytest.mark.parametrize("raw", ["0", "false", "off"])
def test_falsy_debug_values_do_not_dump(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, raw: str) -> None:
    monkeypatch.setattr("tempfile.gettempdir", lambda: str(tmp_path))
    monkeypatch.setenv("WIZARD_DEBUG", raw)
    monkeypatch.setattr(config, "WIZARD_DEBUG", config._is_truthy_flag(raw))

    assert log_event("error", event="submission.failed", payload={"email": "a@b.c"}) == ""
    assert list(tmp_path.iterdir()) == []


def test_redact_payload_walks_nested_structures() -> None:
    payload = {"user": {"token": "t", "name": "Ada"}, "items": [{"Authorization": "x"}]}

    assert redact_payload(payload) == {
        "user": {"token": "[redacted]", "name": "Ada"},
        "items": [{"Authorization": "[redacted]"}],
    }
