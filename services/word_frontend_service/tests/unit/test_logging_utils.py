"""Unit tests for structured logging configuration."""

from __future__ import annotations

import json
import logging
import os

import pytest
import structlog

from services.word_frontend_service.logging_utils import (
    add_service_context,
    bind_correlation_id,
    clear_correlation_context,
    configure_service_logging,
    create_service_logger,
)


@pytest.fixture(autouse=True)
def reset_structlog(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SERVICE_NAME", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    yield
    os.environ.pop("SERVICE_NAME", None)
    os.environ.pop("ENVIRONMENT", None)
    clear_correlation_context()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


def test_add_service_context(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "word-frontend-service")
    monkeypatch.setenv("ENVIRONMENT", "staging")

    event = add_service_context(None, "info", {"event": "hello"})

    assert event["service.name"] == "word-frontend-service"
    assert event["deployment.environment"] == "staging"


def test_json_logging_includes_correlation_id(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("LOG_FORMAT", "json")
    configure_service_logging("word-frontend-service", environment="testing")
    logger = create_service_logger("test")

    bind_correlation_id("0b7e3c0a-1111-4c4c-9f9f-123456789abc")
    logger.info("relayed")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "relayed"
    assert record["logger_name"] == "test"
    assert record["correlation_id"] == "0b7e3c0a-1111-4c4c-9f9f-123456789abc"
    assert record["service.name"] == "word-frontend-service"
    assert record["level"] == "info"


def test_clear_correlation_context_drops_binding(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("LOG_FORMAT", "json")
    configure_service_logging("word-frontend-service", environment="testing")
    logger = create_service_logger()

    bind_correlation_id("0b7e3c0a-1111-4c4c-9f9f-123456789abc")
    clear_correlation_context()
    logger.info("unbound")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert "correlation_id" not in record
