"""Registro de métricas via structured logging.

As métricas são linhas de log estruturadas, agregadas depois pelo
backend de logs (BigQuery, Cloud Logging, etc.).

Métricas suportadas:
- Latência: tempo de cada chamada ao Telegram e de cada relay completo
- Resultado de upload: counter por categoria, status e motivo

Uso:
    from app.observability import record_latency, record_upload_outcome

    start = time.perf_counter()
    # ... operação ...
    record_latency("upload_driver", "sendPhoto", (time.perf_counter() - start) * 1000)

    record_upload_outcome("photo", status_code=200)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "upload_driver", "relay")
        operation: Nome da operação (ex: "sendPhoto", "execute")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_upload_outcome(
    category: str | None,
    status_code: int,
    reason: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Registra o resultado final de um relay de upload.

    Args:
        category: Categoria inicial do upload (ex: "photo"); None se não houve arquivo
        status_code: Status HTTP devolvido ao cliente
        reason: Classe do erro (ex: "UpstreamRejectionError"), sem PII
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, str | int | None] = {
        "metric_type": "upload_outcome",
        "component": "relay",
        "category": category,
        "status_code": status_code,
        "correlation_id": correlation_id,
    }
    if reason:
        extra["reason"] = reason

    logger.info("metric_upload_outcome", extra=extra)
