"""Testes das factories de clientes e da inicialização do logging."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from app.bootstrap import initialize_app
from app.bootstrap.clients import create_async_redis_client
from config.logging import CorrelationIdFilter


@pytest.fixture(autouse=True)
def _clear_client_cache() -> Iterator[None]:
    create_async_redis_client.cache_clear()
    yield
    create_async_redis_client.cache_clear()


def test_redis_client_requires_redis_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REDIS_URL", raising=False)

    with pytest.raises(ValueError, match="REDIS_URL não configurado"):
        create_async_redis_client()


def test_redis_client_uses_base_settings_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REDIS_URL", "redis://cache.internal:6380/2")

    client = create_async_redis_client()

    kwargs = client.connection_pool.connection_kwargs
    assert kwargs["host"] == "cache.internal"
    assert kwargs["port"] == 6380
    assert kwargs["db"] == 2


def test_initialize_app_uses_configured_service_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "relay_edge")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    initialize_app()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    record = logging.LogRecord("x", logging.WARNING, "", 0, "msg", (), None)
    for filter_ in root.handlers[0].filters:
        if isinstance(filter_, CorrelationIdFilter):
            filter_.filter(record)
    assert record.service == "relay_edge"
