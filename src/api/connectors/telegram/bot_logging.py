"""Helpers de logging para a Telegram Bot API (sem token, sem conteúdo)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .bot_errors import TelegramApiError

logger = logging.getLogger(__name__)


def log_bot_error(
    bot_error: TelegramApiError,
    operation: str,
    status_code: int,
) -> None:
    """Loga recusa do Telegram."""
    logger.warning(
        "Erro da Telegram Bot API",
        extra={
            "operation": operation,
            "status_code": status_code,
            "error_code": bot_error.error_code,
            "is_permanent": bot_error.is_permanent,
        },
    )


def log_success(
    operation: str,
    status_code: int,
    size_bytes: int,
) -> None:
    """Loga upload aceito."""
    logger.debug(
        "Upload Telegram bem-sucedido",
        extra={
            "operation": operation,
            "status_code": status_code,
            "size_bytes": size_bytes,
        },
    )
