"""Use case de relay: verifica, resolve alvos e encaminha.

Pipeline:
1. Verificação (assinatura + decriptação): falha aborta sem encaminhar
2. Resolução de alvos (attach ou lista estática)
3. Encaminhamento sequencial com fail-fast

Sucesso só quando todos os encaminhamentos tiveram sucesso; caso
contrário a WeChat Pay precisa receber falha para reenviar depois.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.forwarding import ForwardFailureKind, SingleTarget
from app.observability import get_correlation_id, record_latency
from app.services.target_resolver import resolve_targets
from utils.errors import ForwardRejectedError, ForwardTransportError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.forwarding import ForwardOutcome
    from app.domain.notification import NotifyEnvelope
    from app.protocols.notify_verifier import NotifyVerifierProtocol
    from app.services.forward_dispatcher import ForwardDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RelayResult:
    """Resultado de um relay bem-sucedido."""

    notification_id: str
    routing: str  # "attach" | "static"
    outcomes: tuple[ForwardOutcome, ...]


class RelayNotificationUseCase:
    """Orquestra verificação, resolução de alvos e encaminhamento."""

    def __init__(
        self,
        verifier: NotifyVerifierProtocol,
        dispatcher: ForwardDispatcher,
        static_targets: Sequence[str],
    ) -> None:
        self._verifier = verifier
        self._dispatcher = dispatcher
        self._static_targets = tuple(static_targets)

    @property
    def static_targets(self) -> tuple[str, ...]:
        return self._static_targets

    async def execute(self, envelope: NotifyEnvelope) -> RelayResult:
        """Executa o relay de uma notificação.

        Raises:
            NotifyVerificationError: Notificação inválida (nada encaminhado)
            ResolutionError: Nenhum alvo disponível
            ForwardTransportError: Alvo inalcançável após retries
            ForwardRejectedError: Alvo respondeu status >= 400
        """
        started_at = time.perf_counter()
        notification = self._verifier.verify(envelope)
        targets = resolve_targets(notification, self._static_targets)
        routing = "attach" if isinstance(targets, SingleTarget) else "static"

        logger.info(
            "notify_verified",
            extra={
                "notification_id": notification.id,
                "event_type": notification.event_type,
                "routing": routing,
                "target_count": len(targets.urls),
            },
        )

        outcomes = await self._dispatcher.dispatch(
            targets,
            envelope.body,
            envelope.forwardable_headers(),
        )
        record_latency(
            "relay", "execute", (time.perf_counter() - started_at) * 1000, get_correlation_id()
        )

        last = outcomes[-1]
        if last.failure_kind is ForwardFailureKind.TRANSPORT_ERROR:
            raise ForwardTransportError(last)
        if last.failure_kind is ForwardFailureKind.UPSTREAM_4XX_5XX:
            raise ForwardRejectedError(last)

        return RelayResult(
            notification_id=notification.id,
            routing=routing,
            outcomes=outcomes,
        )
