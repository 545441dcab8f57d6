"""Testes dos KV stores (memória, Redis e Firestore com mocks)."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.infra.stores import FirestoreKVStore, MemoryKVStore, RedisKVStore
from utils.errors import FirestoreUnavailableError, KVStoreError, RedisConnectionError

METADATA = {
    "TimeStamp": 1,
    "ListType": "None",
    "Label": "None",
    "liked": False,
    "fileName": "pic.PNG",
    "fileSize": 1024,
}


class TestMemoryKVStore:
    """Testes do MemoryKVStore."""

    @pytest.mark.asyncio
    async def test_put_and_read(self) -> None:
        store = MemoryKVStore()

        await store.put("XYZ.png", "", metadata=METADATA)

        assert store.get_with_metadata("XYZ.png") == ("", METADATA)
        assert store.keys() == ["XYZ.png"]

    @pytest.mark.asyncio
    async def test_metadata_is_copied(self) -> None:
        """Mutações posteriores do chamador não alteram o registro."""
        store = MemoryKVStore()
        metadata = dict(METADATA)

        await store.put("k", "", metadata=metadata)
        metadata["liked"] = True

        assert store.get_with_metadata("k")[1]["liked"] is False

    def test_missing_key_returns_none(self) -> None:
        assert MemoryKVStore().get_with_metadata("nope") is None


class TestRedisKVStore:
    """Testes do RedisKVStore."""

    @pytest.mark.asyncio
    async def test_put_writes_namespaced_json_document(self) -> None:
        redis = MagicMock()
        redis.set = AsyncMock(return_value=True)
        store = RedisKVStore(redis, namespace="img_url")

        await store.put("XYZ.png", "", metadata=METADATA)

        key, document = redis.set.await_args.args
        assert key == "img_url:XYZ.png"
        assert json.loads(document) == {"value": "", "metadata": METADATA}

    @pytest.mark.asyncio
    async def test_put_failure_raises_redis_connection_error(self) -> None:
        redis = MagicMock()
        redis.set = AsyncMock(side_effect=OSError("connection reset"))
        store = RedisKVStore(redis)

        with pytest.raises(RedisConnectionError) as exc_info:
            await store.put("k", "", metadata=METADATA)

        assert isinstance(exc_info.value, KVStoreError)

    @pytest.mark.asyncio
    async def test_get_with_metadata_roundtrip(self) -> None:
        redis = MagicMock()
        redis.get = AsyncMock(
            return_value=json.dumps({"value": "", "metadata": METADATA}).encode()
        )
        store = RedisKVStore(redis)

        assert await store.get_with_metadata("XYZ.png") == ("", METADATA)
        redis.get.assert_awaited_once_with("img_url:XYZ.png")

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self) -> None:
        redis = MagicMock()
        redis.get = AsyncMock(return_value=None)

        assert await RedisKVStore(redis).get_with_metadata("nope") is None


class TestFirestoreKVStore:
    """Testes do FirestoreKVStore."""

    @pytest.mark.asyncio
    async def test_put_sets_document(self) -> None:
        client = MagicMock()
        store = FirestoreKVStore(client, collection_name="files")

        await store.put("XYZ.png", "", metadata=METADATA)

        client.collection.assert_called_once_with("files")
        client.collection.return_value.document.assert_called_once_with("XYZ.png")
        client.collection.return_value.document.return_value.set.assert_called_once_with(
            {"value": "", "metadata": METADATA}
        )

    @pytest.mark.asyncio
    async def test_put_failure_raises_unavailable(self) -> None:
        client = MagicMock()
        client.collection.return_value.document.return_value.set.side_effect = RuntimeError(
            "deadline exceeded"
        )
        store = FirestoreKVStore(client)

        with pytest.raises(FirestoreUnavailableError):
            await store.put("k", "", metadata=METADATA)
