"""Protocolo do key-value store de metadados de arquivos.

Interface leve (ABC) dependida pelo caso de uso de relay.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class KVStoreProtocol(ABC):
    """Contrato mínimo assíncrono para o KV de arquivos.

    Método canônico:
    - put(key, value, metadata=...) -> None
      Grava o valor (sempre "" neste relay) com metadados associados.
      Falhas de backend levantam KVStoreError.
    """

    @abstractmethod
    async def put(self, key: str, value: str, *, metadata: dict[str, Any]) -> None:
        """Grava a chave com valor e metadados.

        Args:
            key: Chave no formato <file_id>.<extensão>
            value: Valor bruto (string vazia; os metadados carregam a informação)
            metadata: Metadados serializáveis em JSON
        """
