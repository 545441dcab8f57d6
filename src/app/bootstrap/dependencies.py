"""Wiring de dependências: KV store, cliente Telegram, driver e use case."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from api.connectors.telegram import create_telegram_http_client
from app.bootstrap.clients import create_async_redis_client, create_firestore_client
from app.infra.stores import FirestoreKVStore, MemoryKVStore, RedisKVStore
from app.services.upload_driver import UploadDriver
from app.use_cases.relay_upload import RelayUploadUseCase
from config.settings import get_relay_settings, get_telegram_settings

if TYPE_CHECKING:
    from app.protocols.kv_store import KVStoreProtocol
    from config.settings import RelaySettings, TelegramSettings

logger = logging.getLogger(__name__)


def create_kv_store(settings: RelaySettings | None = None) -> KVStoreProtocol | None:
    """Cria KV de metadados conforme RELAY_KV_BACKEND.

    Returns:
        Store configurado, ou None quando backend="none".
    """
    relay = settings or get_relay_settings()
    backend = relay.kv_backend

    if not relay.kv_enabled:
        logger.info("kv_store_disabled")
        return None

    if backend == "redis":
        store: KVStoreProtocol = RedisKVStore(create_async_redis_client(), relay.kv_namespace)
        logger.info("kv_store_created", extra={"backend": "redis"})
        return store

    if backend == "firestore":
        store = FirestoreKVStore(create_firestore_client(), relay.kv_namespace)
        logger.info("kv_store_created", extra={"backend": "firestore"})
        return store

    if backend == "memory":
        environment = os.getenv("ENVIRONMENT", "development").lower()
        if environment not in ("development", "test"):
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        store = MemoryKVStore()
        logger.info("kv_store_created", extra={"backend": "memory"})
        return store

    msg = f"RELAY_KV_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_upload_driver(settings: TelegramSettings | None = None) -> UploadDriver:
    """Cria UploadDriver com cliente Telegram e política de retry das settings."""
    telegram = settings or get_telegram_settings()
    return UploadDriver(
        create_telegram_http_client(telegram),
        max_transient_retries=telegram.max_transient_retries,
        backoff_base_seconds=telegram.backoff_base_seconds,
    )


def create_relay_use_case() -> RelayUploadUseCase:
    """Cria o use case de relay com todas as dependências."""
    relay = get_relay_settings()
    return RelayUploadUseCase(
        driver=create_upload_driver(),
        kv_store=create_kv_store(relay),
        fail_on_kv_error=relay.fail_on_kv_error,
    )
