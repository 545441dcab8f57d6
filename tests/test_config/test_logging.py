"""Testes de config.logging.

Cobre: configure_logging, log_fallback, CorrelationIdFilter,
BotTokenRedactionFilter e o formatter JSON.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    BotTokenRedactionFilter,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    log_fallback,
    redact_bot_token,
)
from config.logging.config import DEFAULT_SERVICE_NAME, NOISY_LOGGERS


def _record(msg: str = "msg", args: tuple = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize("level", ["DEBUG", "info", "WARNING", "error"])
    def test_sets_root_level(self, level: str) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == getattr(logging, level.upper())

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_handlers_and_installs_filters(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging(correlation_id_getter=lambda: "corr-1")

        assert len(root.handlers) == 1
        filters = root.handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, BotTokenRedactionFilter) for f in filters)

    def test_silences_http_client_loggers(self) -> None:
        configure_logging(level="DEBUG")
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "relay_arquivos"


class TestLogFallback:
    """Testes para log_fallback."""

    def test_basic(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "upload_driver")

        args, kwargs = logger.info.call_args
        assert args == ("Fallback applied for %s", "upload_driver")
        assert kwargs["extra"] == {"fallback_used": True, "component": "upload_driver"}

    def test_with_reason_and_elapsed(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "upload_driver", reason="photo_rejected", elapsed_ms=12.5)

        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "photo_rejected"
        assert extra["elapsed_ms"] == 12.5


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_and_service(self) -> None:
        record = _record()

        assert CorrelationIdFilter("relay", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "relay"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"

        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)

        assert record.correlation_id == "explicit-id"

    def test_empty_without_getter(self) -> None:
        record = _record()

        CorrelationIdFilter("svc").filter(record)

        assert record.correlation_id == ""


class TestBotTokenRedaction:
    """O token do bot nunca chega ao output de log."""

    def test_redact_bot_token_in_url(self) -> None:
        text = "POST https://api.telegram.org/bot123456:AA-h_x9/sendPhoto failed"

        assert redact_bot_token(text) == "POST https://api.telegram.org/bot***/sendPhoto failed"

    def test_text_without_token_is_unchanged(self) -> None:
        assert redact_bot_token("sendPhoto rejected") == "sendPhoto rejected"

    def test_filter_rewrites_msg_and_args(self) -> None:
        record = _record("request to %s (%d)", ("https://x/bot42:secret/sendVideo", 3))

        assert BotTokenRedactionFilter().filter(record) is True

        assert record.getMessage() == "request to https://x/bot***/sendVideo (3)"

    def test_configured_handler_emits_redacted_json(self) -> None:
        configure_logging(level="INFO", service_name="relay_test")
        handler = logging.getLogger().handlers[0]
        record = _record("calling bot99:abcDEF/sendDocument")

        for filter_ in handler.filters:
            filter_.filter(record)
        output = json.loads(handler.format(record))

        assert output["message"] == "calling bot***/sendDocument"
        assert output["service"] == "relay_test"


class TestCreateJsonFormatter:
    """Testes para create_json_formatter."""

    def test_required_fields(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }

    def test_renames_level_and_logger(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}
        record = _record("relay_completed")
        record.name = "app.use_cases.relay_upload"
        record.correlation_id = "abc-123"
        record.service = "relay_arquivos"
        record.latency_ms = 42

        output = json.loads(create_json_formatter().format(record))

        assert output["level"] == "INFO"
        assert output["logger"] == "app.use_cases.relay_upload"
        assert output["message"] == "relay_completed"
        assert output["correlation_id"] == "abc-123"
        assert output["latency_ms"] == 42
