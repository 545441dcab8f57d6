"""Redis KV store — metadados de arquivos no Redis (Upstash compatível).

Cada chave vira um documento JSON {"value": ..., "metadata": {...}}
sob o namespace configurado (ex: img_url:<file_id>.png).
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from app.protocols.kv_store import KVStoreProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "img_url"


class RedisKVStore(KVStoreProtocol):
    """KV de arquivos usando Redis assíncrono.

    Args:
        async_redis_client: Cliente Redis assíncrono
        namespace: Prefixo das chaves
    """

    def __init__(
        self,
        async_redis_client: AsyncRedis[bytes],
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self._redis = async_redis_client
        self._namespace = namespace

    def _key(self, key: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{self._namespace}:{key}"

    async def put(self, key: str, value: str, *, metadata: dict[str, Any]) -> None:
        """Grava documento JSON (sem TTL: arquivos são permanentes).

        Raises:
            RedisConnectionError: Falha de conexão/escrita no Redis.
        """
        document = json.dumps({"value": value, "metadata": metadata})
        try:
            await self._redis.set(self._key(key), document)
        except Exception as exc:
            raise RedisConnectionError("Falha ao gravar metadados no Redis") from exc
        logger.debug("kv_metadata_written", extra={"backend": "redis", "key": key})

    async def get_with_metadata(self, key: str) -> tuple[str, dict[str, Any]] | None:
        """Lê (valor, metadados) ou None se a chave não existe."""
        try:
            raw = await self._redis.get(self._key(key))
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler metadados no Redis") from exc
        if raw is None:
            return None
        document = json.loads(raw)
        return document.get("value", ""), document.get("metadata", {})
