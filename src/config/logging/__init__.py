"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="relay_arquivos")
    logger = get_logger(__name__)
    logger.info("relay_completed", extra={"latency_ms": 42})

Logs nunca carregam conteúdo de arquivos nem o token do bot.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import (
    BotTokenRedactionFilter,
    CorrelationIdFilter,
    redact_bot_token,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "BotTokenRedactionFilter",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
    "redact_bot_token",
]
