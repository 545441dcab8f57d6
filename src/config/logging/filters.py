"""Filters de logging para injeção de contexto e mascaramento.

- CorrelationIdFilter: adiciona correlation_id e service em cada record
- BotTokenRedactionFilter: remove o token do bot de mensagens e argumentos

O token aparece na URL da Bot API (https://api.telegram.org/bot<token>/...),
então qualquer log de erro do httpx pode carregá-lo.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "bot***"

# Formato do token emitido pelo BotFather: <bot_id>:<segredo>
_BOT_TOKEN_RE = re.compile(r"bot\d+:[A-Za-z0-9_-]+")


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já veio via `extra`, o valor é preservado.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class BotTokenRedactionFilter(logging.Filter):
    """Mascara segmentos `bot<id>:<segredo>` antes da formatação.

    Nunca descarta records; apenas reescreve msg/args.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact_bot_token(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(
                redact_bot_token(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )
        return True


def redact_bot_token(text: str) -> str:
    """Substitui qualquer token de bot presente no texto."""
    return _BOT_TOKEN_RE.sub(REDACTED, text)
