"""Setup do logging do processo.

Um único StreamHandler no root, com:
- JSON (pythonjsonlogger) em produção, texto legível com `debug: true`
- service/correlation_id carimbados e campos sensíveis mascarados
- httpx/httpcore/uvicorn.access em WARNING fora de DEBUG
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "wechatpay_notify_gateway"

# Bibliotecas que logam cada request/conexão em INFO
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    json_output: bool = True,
) -> None:
    """Instala o handler do gateway no root logger.

    Chamada uma vez pelo bootstrap; chamadas seguintes substituem o handler.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (sem diferenciar caixa).
        service_name: Valor do campo `service`.
        correlation_id_getter: Fonte do correlation_id do request corrente.
        json_output: False troca o JSON por texto (modo debug).

    Raises:
        ValueError: Nível desconhecido.
    """
    level_name = _normalize_level(level)

    root = logging.getLogger()
    root.setLevel(level_name)
    root.handlers = [
        _build_handler(level_name, service_name, correlation_id_getter, json_output)
    ]

    if level_name != "DEBUG":
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Atalho para logging.getLogger (campos de contexto vêm dos filters)."""
    return logging.getLogger(name)


def _normalize_level(level: str) -> str:
    level_name = level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return level_name


def _build_handler(
    level_name: str,
    service_name: str,
    correlation_id_getter: Callable[[], str] | None,
    json_output: bool,
) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level_name)
    handler.setFormatter(create_json_formatter() if json_output else create_text_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveFieldFilter())
    return handler
