"""Testes de correlation_id e métricas via log."""

from __future__ import annotations

import logging

from app.domain.forwarding import ForwardOutcome
from app.observability import (
    correlation_id_from_headers,
    get_correlation_id,
    record_forward_outcome,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset_correlation_id() -> None:
    token = set_correlation_id("REQ-1")
    assert get_correlation_id() == "REQ-1"
    reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_set_correlation_id_generates_uuid_when_empty() -> None:
    token = set_correlation_id(None)
    try:
        assert len(get_correlation_id()) == 36
    finally:
        reset_correlation_id(token)


def test_correlation_id_from_headers_prefers_request_id() -> None:
    headers = {"request-id": "REQ-1", "x-correlation-id": "CORR-1"}

    assert correlation_id_from_headers(headers) == "REQ-1"
    assert correlation_id_from_headers({"x-correlation-id": "CORR-1"}) == "CORR-1"
    assert correlation_id_from_headers({}) is None
    assert correlation_id_from_headers(object()) is None


def test_record_forward_outcome_logs_only_target_host(caplog) -> None:
    outcome = ForwardOutcome.rejected(
        "https://x.example/cb?token=secret", 503, "unavailable", elapsed_ms=12.5
    )

    with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
        record_forward_outcome(outcome, "REQ-1")

    record = caplog.records[-1]
    assert record.getMessage() == "metric_forward"
    assert record.levelno == logging.WARNING
    assert record.target_host == "x.example"
    assert record.failure_kind == "upstream_4xx_5xx"
    assert record.status_code == 503
    assert "secret" not in str(record.__dict__.get("target_host"))
