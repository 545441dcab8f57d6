"""Endpoints de health check para Cloud Run."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_relay_settings, get_telegram_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed", "skipped"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="relay-arquivos",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: credenciais do Telegram e backend de KV selecionado."""
    backend = get_relay_settings().kv_backend
    telegram_check = _check_telegram()

    if backend == "redis":
        kv_check = await _check_redis(getattr(request.app.state, "redis_client", None))
    elif backend == "firestore":
        kv_check = await _check_firestore(getattr(request.app.state, "firestore_client", None))
    else:
        kv_check = DependencyCheck(status="skipped")

    ready = telegram_check.status == "ok" and kv_check.status in {"ok", "skipped"}

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "telegram": telegram_check.as_dict(),
            "kv_store": {**kv_check.as_dict(), "backend": backend},
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_telegram() -> DependencyCheck:
    settings = get_telegram_settings()
    if not settings.bot_token or not settings.chat_id:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")


async def _check_redis(redis_client: Any | None) -> DependencyCheck:
    if redis_client is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(redis_client.ping(), timeout=2.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))


async def _check_firestore(firestore_client: Any | None) -> DependencyCheck:
    if firestore_client is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(
            asyncio.to_thread(_probe_firestore, firestore_client),
            timeout=3.0,
        )
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_firestore_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))


def _probe_firestore(firestore_client: Any) -> None:
    firestore_client.collection("_health").document("check").get()
