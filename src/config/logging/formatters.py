"""Formatter JSON dos logs do relay.

Campos obrigatórios em toda linha: asctime, level, logger, message,
correlation_id, service. Campos passados via `extra` são anexados.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "INFO",
            "logger": "app.services.upload_driver",
            "message": "telegram_upload_backoff",
            "correlation_id": "abc-123",
            "service": "relay_arquivos",
            "backoff_seconds": 1.0
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
