"""Dispatcher de encaminhamentos sequenciais com fail-fast."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.domain.forwarding import ForwardOutcome
from app.infra.http import HttpError
from app.observability import get_correlation_id, record_forward_outcome

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.forwarding import ForwardTargets
    from app.protocols.http_client import ForwardHttpClientProtocol

logger = logging.getLogger(__name__)


class ForwardDispatcher:
    """Encaminha o request original para cada alvo, em ordem.

    Para no primeiro alvo com falha; os seguintes não são chamados.
    """

    def __init__(self, client: ForwardHttpClientProtocol) -> None:
        self._client = client

    async def forward(
        self,
        target: str,
        body: bytes,
        headers: Sequence[tuple[bytes, bytes]],
    ) -> ForwardOutcome:
        """Executa um encaminhamento e classifica o resultado.

        status < 400 -> sucesso; status >= 400 -> upstream_4xx_5xx;
        sem resposta após retries -> transport_error.
        """
        started_at = time.perf_counter()
        try:
            response = await self._client.post_raw(target, body, headers)
        except HttpError as exc:
            outcome = ForwardOutcome.transport_error(
                target, str(exc), elapsed_ms=_elapsed_ms(started_at)
            )
        else:
            elapsed_ms = _elapsed_ms(started_at)
            if response.status_code >= 400:
                outcome = ForwardOutcome.rejected(
                    target, response.status_code, response.text, elapsed_ms=elapsed_ms
                )
            else:
                outcome = ForwardOutcome.success(
                    target, response.status_code, elapsed_ms=elapsed_ms
                )

        record_forward_outcome(outcome, get_correlation_id())
        return outcome

    async def dispatch(
        self,
        targets: ForwardTargets,
        body: bytes,
        headers: Sequence[tuple[bytes, bytes]],
    ) -> tuple[ForwardOutcome, ...]:
        """Encaminha para todos os alvos até a primeira falha.

        Returns:
            Resultados na ordem de execução; se houver falha, é o último.
        """
        outcomes: list[ForwardOutcome] = []
        urls = targets.urls
        for index, target in enumerate(urls):
            outcome = await self.forward(target, body, headers)
            outcomes.append(outcome)
            if not outcome.ok:
                skipped = len(urls) - index - 1
                if skipped:
                    logger.warning(
                        "forward_remaining_skipped",
                        extra={"failed_index": index, "skipped_count": skipped},
                    )
                break
        return tuple(outcomes)


def _elapsed_ms(started_at: float) -> float:
    return round((time.perf_counter() - started_at) * 1000, 2)
