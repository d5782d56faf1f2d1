from __future__ import annotations

import pytest

from utils import telemetry


def test_tracing_skipped_without_endpoint(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OTEL_EXPORTER_OTLP_ENDPOINT", raising=False)

    assert telemetry.setup_tracing(force=True) is False


def test_tracing_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OTEL_TRACES_ENABLED", "false")
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://collector:4318/v1/traces")

    assert telemetry.setup_tracing(force=True) is False


def test_header_and_ratio_parsing() -> None:
    assert telemetry._parse_headers("a=1, b = two,broken,=x") == {"a": "1", "b": "two"}
    assert telemetry._coerce_ratio("2", default=1.0) == 1.0
    assert telemetry._coerce_ratio("abc", default=0.5) == 0.5
    assert telemetry._coerce_ratio("", default=0.25) == 0.25
