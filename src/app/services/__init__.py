"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.forward_dispatcher import ForwardDispatcher
from app.services.target_resolver import parse_attach_url, resolve_targets

__all__ = [
    "ForwardDispatcher",
    "parse_attach_url",
    "resolve_targets",
]
