"""correlation_id por requisição de upload.

Definido pelo middleware HTTP (header X-Correlation-ID ou UUID novo) e
injetado nos logs pelo CorrelationIdFilter. ContextVar mantém o valor
isolado por task, então relays concorrentes não se misturam.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "X-Correlation-ID"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id da task atual ("" fora de uma requisição)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id da task atual; gera UUID v4 se ausente."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
