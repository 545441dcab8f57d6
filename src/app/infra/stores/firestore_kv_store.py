"""Firestore KV store — metadados de arquivos no Firestore.

Documento por chave (<file_id>.<extensão>) na collection configurada.
O SDK Python do Firestore é síncrono; as chamadas rodam em thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.protocols.kv_store import KVStoreProtocol
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

FILES_COLLECTION = "img_url"


class FirestoreKVStore(KVStoreProtocol):
    """KV de arquivos usando Firestore.

    Args:
        firestore_client: Cliente Firestore
        collection_name: Nome da collection (default: img_url)
    """

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection_name: str = FILES_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection_name

    def _put_sync(self, key: str, value: str, metadata: dict[str, Any]) -> None:
        self._db.collection(self._collection).document(key).set(
            {"value": value, "metadata": metadata}
        )

    async def put(self, key: str, value: str, *, metadata: dict[str, Any]) -> None:
        """Grava documento sem bloquear o event loop.

        Raises:
            FirestoreUnavailableError: Falha ao gravar no Firestore.
        """
        try:
            await asyncio.to_thread(self._put_sync, key, value, metadata)
        except Exception as exc:
            raise FirestoreUnavailableError("Falha ao gravar metadados no Firestore") from exc
        logger.debug("kv_metadata_written", extra={"backend": "firestore", "key": key})
