"""KV store em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import copy
from typing import Any

from app.protocols.kv_store import KVStoreProtocol


class MemoryKVStore(KVStoreProtocol):
    """KV de arquivos em memória — apenas para dev/test."""

    def __init__(self) -> None:
        self._store: dict[str, tuple[str, dict[str, Any]]] = {}  # key -> (value, metadata)

    async def put(self, key: str, value: str, *, metadata: dict[str, Any]) -> None:
        """Grava chave em memória (cópia dos metadados)."""
        self._store[key] = (value, copy.deepcopy(metadata))

    def get_with_metadata(self, key: str) -> tuple[str, dict[str, Any]] | None:
        """Retorna (valor, metadados) ou None."""
        entry = self._store.get(key)
        if entry is None:
            return None
        value, metadata = entry
        return value, copy.deepcopy(metadata)

    def keys(self) -> list[str]:
        return list(self._store)
