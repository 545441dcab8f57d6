"""Entrypoint do relay de arquivos.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_async_redis_client, create_firestore_client
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from config.settings import get_relay_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida configurações e abre o cliente do backend de KV.
    Shutdown: fecha conexões.
    """
    logger.info("app_starting", extra={"service": "relay-arquivos"})
    validate_runtime_settings()
    app.state.redis_client = None
    app.state.firestore_client = None

    backend = get_relay_settings().kv_backend
    if backend == "redis":
        try:
            app.state.redis_client = create_async_redis_client()
        except Exception as exc:
            logger.warning("redis_client_not_ready", extra={"error_type": type(exc).__name__})
    elif backend == "firestore":
        try:
            app.state.firestore_client = create_firestore_client()
        except Exception as exc:
            logger.warning("firestore_client_not_ready", extra={"error_type": type(exc).__name__})

    yield

    logger.info("app_shutting_down", extra={"service": "relay-arquivos"})
    redis_client = getattr(app.state, "redis_client", None)
    if redis_client is not None:
        await redis_client.aclose()
    firestore_client = getattr(app.state, "firestore_client", None)
    if firestore_client is not None:
        firestore_client.close()


async def correlation_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga X-Correlation-ID (ou gera um) para logs e resposta."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
    finally:
        reset_correlation_id(token)
    return response


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="relay-arquivos",
        description="Relay de upload de arquivos para o Telegram",
        version="1.0.0",
        lifespan=lifespan,
    )

    fastapi_app.middleware("http")(correlation_middleware)

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "relay-arquivos"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting relay-arquivos in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
