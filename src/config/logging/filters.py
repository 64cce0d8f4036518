"""Filters de logging do gateway.

- CorrelationIdFilter: carimba service e correlation_id (Request-ID)
- SensitiveFieldFilter: mascara campos `extra` com dados da notificação
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "[redacted]"

# Chaves de `extra` que nunca chegam ao output em claro
SENSITIVE_LOG_KEYS = frozenset(
    {
        "body",
        "payload",
        "plaintext",
        "ciphertext",
        "signature",
        "api_v3_key",
        "attach",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Carimba `service` e `correlation_id` em todo record.

    O correlation_id vem do getter (ContextVar do request) a menos que o
    chamador já tenha passado um valor não vazio via `extra`.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self.correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            getter = self.correlation_id_getter
            record.correlation_id = getter() if getter is not None else ""
        record.service = self.service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Substitui por REDACTED qualquer campo sensível presente no record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key in SENSITIVE_LOG_KEYS.intersection(vars(record)):
            setattr(record, key, REDACTED)
        return True
