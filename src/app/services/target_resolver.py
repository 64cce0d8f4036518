"""Resolução dos alvos de encaminhamento de uma notificação.

Regra:
- attach com URL absoluta (http/https + host) -> somente essa URL
- caso contrário -> lista estática inteira, na ordem configurada

Attach malformado equivale a ausente; nunca entra na lista estática.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from app.domain.forwarding import ForwardTargets, SingleTarget, StaticTargets
from utils.errors import ResolutionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.notification import VerifiedNotification

_ALLOWED_SCHEMES = frozenset({"http", "https"})


def parse_attach_url(attach: str | None) -> str | None:
    """Retorna o attach se for URL absoluta bem formada, senão None."""
    if not attach:
        return None
    if any(char.isspace() or ord(char) < 0x20 for char in attach):
        return None

    try:
        parts = urlsplit(attach)
        _ = parts.port  # porta não numérica levanta ValueError
    except ValueError:
        return None

    if parts.scheme.lower() not in _ALLOWED_SCHEMES or not parts.hostname:
        return None
    return attach


def resolve_targets(
    notification: VerifiedNotification,
    static_targets: Sequence[str],
) -> ForwardTargets:
    """Decide os alvos da notificação.

    Raises:
        ResolutionError: Se não há attach válido e a lista estática está vazia.
    """
    attach_url = parse_attach_url(notification.transaction.attach)
    if attach_url is not None:
        return SingleTarget(attach_url)

    if not static_targets:
        raise ResolutionError("no forward targets configured")
    return StaticTargets(tuple(static_targets))
