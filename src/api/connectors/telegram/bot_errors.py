"""Erros e helpers de parsing para a Telegram Bot API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_ERROR_DESCRIPTION = "Upload to Telegram failed"


@dataclass(frozen=True)
class TelegramApiError:
    """Erro declarado pela Bot API ({"ok": false, "error_code", "description"})."""

    error_code: int
    description: str
    is_permanent: bool  # apenas para logs; recusas nunca são retentadas


def is_permanent_error(error_code: int) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros permanentes: 400, 401, 403, 404, 413
    Erros transitórios: 429 (flood control), 500+ (server errors)

    Usado só na telemetria (log_bot_error): toda recusa declarada
    encerra o upload, exceto o fallback foto → documento.
    """
    return error_code in {400, 401, 403, 404, 413}


def parse_bot_error(
    response_data: Any,
    status_code: int,
) -> TelegramApiError | None:
    """Extrai o erro declarado de uma resposta da Bot API.

    Args:
        response_data: JSON da resposta
        status_code: Status HTTP (usado quando error_code está ausente)

    Returns:
        TelegramApiError se a resposta é uma recusa, None se sucesso.
    """
    if not isinstance(response_data, dict):
        response_data = {}

    ok = response_data.get("ok") is True
    if ok and 200 <= status_code < 300:
        return None

    error_code = response_data.get("error_code")
    if not isinstance(error_code, int):
        error_code = status_code

    description = response_data.get("description")
    if not isinstance(description, str) or not description:
        description = DEFAULT_ERROR_DESCRIPTION

    return TelegramApiError(
        error_code=error_code,
        description=description,
        is_permanent=is_permanent_error(error_code),
    )
