"""Protocolos HTTP usados pelo app.

Evita dependência direta do httpx nos serviços.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx


class ForwardHttpClientProtocol(Protocol):
    """Contrato mínimo para encaminhar bytes brutos a um alvo.

    Levanta `HttpError` quando o alvo não responde após os retries.
    """

    async def post_raw(
        self,
        url: str,
        content: bytes,
        headers: Sequence[tuple[bytes, bytes]],
    ) -> httpx.Response: ...
