"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from utils.errors import UpstreamTransportError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 60.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(UpstreamTransportError):
    """Erro de transporte HTTP sem dados sensíveis (sem URL, sem token).

    Toda instância é retentável: o UploadDriver decide pelo tipo.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples: uma requisição por chamada, sem retry interno.

    Política de retry pertence ao chamador (ver app/services/upload_driver.py).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post_multipart(
        self,
        url: str,
        data: dict[str, Any],
        files: dict[str, tuple[str, bytes, str]],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa um POST multipart/form-data.

        Raises:
            HttpError: Falha de transporte (conexão, timeout, protocolo).
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                return await client.post(
                    url,
                    data=data,
                    files=files,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"error_type": type(exc).__name__})
            raise HttpError("http_timeout") from exc
        except httpx.TransportError as exc:
            logger.warning("http_connection_error", extra={"error_type": type(exc).__name__})
            raise HttpError("http_connection_error") from exc
