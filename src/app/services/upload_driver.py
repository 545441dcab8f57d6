"""Driver de upload para o Telegram com retry e fallback de categoria.

Duas políticas independentes, visíveis como estado da tentativa:
- Fallback de categoria: foto recusada pela plataforma é reenviada uma
  única vez como documento (mesma carga, mesmo destinatário).
- Retry transitório: falhas de rede são repetidas até `max_transient_retries`
  vezes com backoff linear (base × 1, base × 2, ...).

Recusas e falhas de rede são modeladas como dados (UpstreamFailure),
nunca como exceção para o chamador.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from app.domain.upload import (
    InboundFile,
    UploadCategory,
    UpstreamFailure,
    UpstreamRequest,
    UpstreamSuccess,
)
from app.observability import record_latency
from app.services.media_classifier import classify
from config.logging import log_fallback
from utils.errors import UpstreamTransportError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.domain.upload import UpstreamReply, UpstreamResult
    from app.protocols.upstream_client import MediaUploadClientProtocol

logger = logging.getLogger(__name__)

DEFAULT_MAX_TRANSIENT_RETRIES = 2
DEFAULT_BACKOFF_BASE_SECONDS = 1.0

NETWORK_ERROR_REASON = "Network error occurred after multiple retries."
GENERIC_REJECTION_REASON = "Upload to Telegram failed"


@dataclass(frozen=True, slots=True)
class _Attempt:
    """Estado Attempting(category, transient_retries_left, fallback_used)."""

    request: UpstreamRequest
    transient_retries_left: int
    fallback_used: bool

    @property
    def fallback_available(self) -> bool:
        return not self.fallback_used and self.request.category is UploadCategory.PHOTO


class UploadDriver:
    """Executa o upload com tentativas estritamente sequenciais."""

    def __init__(
        self,
        client: MediaUploadClientProtocol,
        *,
        max_transient_retries: int = DEFAULT_MAX_TRANSIENT_RETRIES,
        backoff_base_seconds: float = DEFAULT_BACKOFF_BASE_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._client = client
        self._max_transient_retries = max(0, max_transient_retries)
        self._backoff_base_seconds = backoff_base_seconds
        self._sleep = sleep

    async def upload(self, file: InboundFile, recipient_id: str) -> UpstreamResult:
        """Envia o arquivo e retorna sucesso ou falha definitiva."""
        category = classify(file.declared_type)
        state = _Attempt(
            request=UpstreamRequest(category=category, payload=file, recipient_id=recipient_id),
            transient_retries_left=self._max_transient_retries,
            fallback_used=False,
        )

        while True:
            try:
                reply = await self._send(state.request)
            except UpstreamTransportError as exc:
                if state.transient_retries_left <= 0:
                    logger.warning(
                        "telegram_upload_retries_exhausted",
                        extra={
                            "operation": state.request.operation_name,
                            "error_type": type(exc).__name__,
                        },
                    )
                    return UpstreamFailure(reason=NETWORK_ERROR_REASON)
                await self._backoff(state, exc)
                state = replace(state, transient_retries_left=state.transient_retries_left - 1)
                continue

            if reply.accepted:
                return UpstreamSuccess(response=reply.response)

            if state.fallback_available:
                log_fallback(logger, "upload_driver", reason="photo_rejected")
                state = replace(state, request=state.request.as_document(), fallback_used=True)
                continue

            return UpstreamFailure(reason=reply.description or GENERIC_REJECTION_REASON)

    async def _send(self, request: UpstreamRequest) -> UpstreamReply:
        started_at = time.perf_counter()
        try:
            return await self._client.send_media(request)
        finally:
            record_latency(
                "upload_driver",
                request.operation_name,
                (time.perf_counter() - started_at) * 1000,
            )

    async def _backoff(self, state: _Attempt, exc: UpstreamTransportError) -> None:
        retry_number = self._max_transient_retries - state.transient_retries_left + 1
        delay = self._backoff_base_seconds * retry_number
        logger.info(
            "telegram_upload_backoff",
            extra={
                "operation": state.request.operation_name,
                "retry_number": retry_number,
                "backoff_seconds": delay,
                "error_type": type(exc).__name__,
            },
        )
        await self._sleep(delay)
