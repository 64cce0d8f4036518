"""Gerenciamento de correlation_id para rastreamento de notificações.

A WeChat Pay envia `Request-ID` em cada notificação; quando presente ele
vira o correlation_id, permitindo cruzar logs com o suporte do provedor.
Usa ContextVar para ser async-safe.

Uso:
    token = set_correlation_id(request.headers.get("request-id"))
    try:
        # processar notificação
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

# Headers aceitos como origem do correlation_id, em ordem de preferência
CORRELATION_HEADERS = ("request-id", "x-correlation-id")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None/vazio, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or str(uuid.uuid4())
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def correlation_id_from_headers(headers: object) -> str | None:
    """Extrai o primeiro header de correlação presente (Mapping-like)."""
    getter = getattr(headers, "get", None)
    if getter is None:
        return None
    for name in CORRELATION_HEADERS:
        value = getter(name)
        if value:
            return str(value)
    return None
