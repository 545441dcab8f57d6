"""Use case de relay de upload: arquivo do cliente → Telegram → URL pública.

Fluxo:
1. Valida presença do arquivo (400)
2. UploadDriver (classificação, retry de rede, fallback foto → documento)
3. Extração do file_id (maior resolução no caso de foto)
4. Gravação de metadados no KV (quando configurado)
5. URL <base_url>/file/<file_id>.<extensão>

Qualquer falha vira um único envelope de erro; não existe sucesso parcial.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.domain.upload import StoredMetadata, UpstreamFailure
from app.observability import record_latency, record_upload_outcome
from app.services.media_classifier import classify
from app.services.reference_extractor import extract_reference
from utils.errors import (
    KVStoreError,
    MissingFileError,
    ReferenceExtractionError,
    RelayError,
    UpstreamRejectionError,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.upload import InboundFile
    from app.protocols.kv_store import KVStoreProtocol
    from app.services.upload_driver import UploadDriver

logger = logging.getLogger(__name__)

NO_FILE_MESSAGE = 'No file provided in the "file" field.'
UPLOAD_FAILED_MESSAGE = "Failed to upload to Telegram."
NO_REFERENCE_MESSAGE = "Failed to get file ID from Telegram response."


@dataclass(frozen=True, slots=True)
class RelayOutcome:
    """Resposta do relay: URL (200) ou erro (400/500)."""

    status_code: int
    url: str | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.url is not None

    def as_body(self) -> dict[str, Any]:
        """Corpo JSON devolvido ao cliente."""
        if self.url is not None:
            return {"url": self.url}
        return {"error": self.error}


class RelayUploadUseCase:
    """Orquestra driver, extração, persistência e montagem da URL."""

    def __init__(
        self,
        driver: UploadDriver,
        kv_store: KVStoreProtocol | None = None,
        *,
        fail_on_kv_error: bool = True,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._driver = driver
        self._kv_store = kv_store
        self._fail_on_kv_error = fail_on_kv_error
        self._clock = clock

    async def execute(
        self,
        file: InboundFile | None,
        *,
        recipient_id: str,
        base_url: str,
    ) -> RelayOutcome:
        """Executa o relay com fronteira única de erros."""
        category = classify(file.declared_type).value if file is not None else None
        started_at = time.perf_counter()
        try:
            if file is None:
                raise MissingFileError(NO_FILE_MESSAGE)
            url = await self._relay(file, recipient_id, base_url)
        except RelayError as exc:
            outcome = RelayOutcome(status_code=exc.status_code, error=exc.message)
            logger.warning(
                "relay_failed",
                extra={"status_code": exc.status_code, "error_type": type(exc).__name__},
            )
            record_upload_outcome(category, exc.status_code, reason=type(exc).__name__)
            return outcome
        except Exception as exc:
            logger.exception("relay_unexpected_error", extra={"error_type": type(exc).__name__})
            record_upload_outcome(category, 500, reason=type(exc).__name__)
            return RelayOutcome(status_code=500, error=str(exc))

        record_latency("relay", "execute", (time.perf_counter() - started_at) * 1000)
        record_upload_outcome(category, 200)
        return RelayOutcome(status_code=200, url=url)

    async def _relay(self, file: InboundFile, recipient_id: str, base_url: str) -> str:
        extension = file.extension

        result = await self._driver.upload(file, recipient_id)
        if isinstance(result, UpstreamFailure):
            raise UpstreamRejectionError(result.reason or UPLOAD_FAILED_MESSAGE)

        reference = extract_reference(result)
        if reference is None:
            raise ReferenceExtractionError(NO_REFERENCE_MESSAGE)

        key = reference.storage_key(extension)
        if self._kv_store is not None:
            await self._persist(key, file)

        return f"{base_url.rstrip('/')}/file/{key}"

    async def _persist(self, key: str, file: InboundFile) -> None:
        metadata = StoredMetadata(
            timestamp=int(self._clock() * 1000),
            file_name=file.name,
            file_size=file.size,
        )
        try:
            await self._kv_store.put(key, "", metadata=metadata.to_dict())
        except KVStoreError as exc:
            if self._fail_on_kv_error:
                raise
            logger.error(
                "kv_write_failed_ignored",
                extra={"error_type": type(exc).__name__},
            )
