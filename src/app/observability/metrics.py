"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas
posteriormente pelo coletor de logs.

Métricas suportadas:
- Latência: tempo de operação por componente
- Forward: resultado de cada encaminhamento (alvo, status, classificação)
- Verificação: falhas de verificação por motivo
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from app.domain.forwarding import ForwardOutcome

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "relay")
        operation: Nome da operação (ex: "execute")
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


def record_forward_outcome(outcome: ForwardOutcome, correlation_id: str | None = None) -> None:
    """Registra o resultado de um encaminhamento.

    Só o host do alvo é registrado (a URL de attach pode carregar tokens).
    """
    level = logging.INFO if outcome.ok else logging.WARNING
    logger.log(
        level,
        "metric_forward",
        extra={
            "metric_type": "forward",
            "target_host": urlsplit(outcome.target).netloc,
            "ok": outcome.ok,
            "failure_kind": outcome.failure_kind.value if outcome.failure_kind else None,
            "status_code": outcome.status_code,
            "latency_ms": outcome.elapsed_ms,
            "correlation_id": correlation_id,
        },
    )


def record_verification_failure(reason: str, correlation_id: str | None = None) -> None:
    """Registra falha de verificação por motivo."""
    logger.warning(
        "metric_verification_failure",
        extra={
            "metric_type": "verification_failure",
            "reason": reason,
            "correlation_id": correlation_id,
        },
    )
