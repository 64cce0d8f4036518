"""Bootstrap: composition root do gateway.

    initialize_app()             # logging, antes de qualquer log
    validate_runtime_settings()  # no lifespan, antes de carregar chaves

A montagem do pipeline (chave, cliente HTTP, verificador, use case)
fica em app.bootstrap.dependencies.
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_forward_settings,
    get_gateway_settings,
    get_wechatpay_settings,
)

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging conforme `debug`/`logLevel` das settings.

    JSON com correlation_id em produção; texto em DEBUG quando `debug: true`.
    """
    settings = get_gateway_settings()
    configure_logging(
        level=settings.effective_log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
        json_output=not settings.debug,
    )


def collect_settings_errors() -> list[str]:
    """Erros de todas as settings, prefixados pela seção."""
    sections = (
        ("gateway", get_gateway_settings()),
        ("wechat", get_wechatpay_settings()),
        ("forward", get_forward_settings()),
    )
    return [f"{name}: {error}" for name, settings in sections for error in settings.validate()]


def validate_runtime_settings() -> None:
    """Falha o boot se qualquer setting obrigatória estiver ausente ou inválida.

    Vale para todos os ambientes: sem chave ou sem alvos estáticos
    nenhuma notificação pode ser entregue.

    Raises:
        RuntimeError: Com a lista completa de erros.
    """
    errors = collect_settings_errors()
    if not errors:
        logger.info("settings_validated", extra={"component": "bootstrap", "result": "ok"})
        return

    logger.error(
        "settings_validation_failed",
        extra={"component": "bootstrap", "error_count": len(errors), "errors": errors},
    )
    details = "\n".join(f"- {error}" for error in errors)
    raise RuntimeError(f"Configuração inválida:\n{details}")
