"""Observabilidade: logs estruturados, correlation_id e métricas.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_forward_outcome, record_latency
"""

from app.observability.correlation import (
    correlation_id_from_headers,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_forward_outcome,
    record_latency,
    record_verification_failure,
)

__all__ = [
    "correlation_id_from_headers",
    "get_correlation_id",
    "record_forward_outcome",
    "record_latency",
    "record_verification_failure",
    "reset_correlation_id",
    "set_correlation_id",
]
