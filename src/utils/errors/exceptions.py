"""Exceções de domínio do pipeline de relay de notificações."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.forwarding import ForwardOutcome


class VerificationFailureReason(StrEnum):
    """Motivos terminais de falha na verificação da notificação."""

    MISSING_HEADER = "missing_header"
    UNKNOWN_KEY_ID = "unknown_key_id"
    SIGNATURE_MISMATCH = "signature_mismatch"
    DECRYPT_FAILED = "decrypt_failed"
    MALFORMED_PAYLOAD = "malformed_payload"
    TIMESTAMP_EXPIRED = "timestamp_expired"


class RelayError(Exception):
    """Base para falhas do pipeline (sempre visíveis ao provedor)."""


class NotifyVerificationError(RelayError):
    """Notificação não autenticada ou ilegível; nada é encaminhado."""

    def __init__(self, reason: VerificationFailureReason, detail: str = "") -> None:
        message = f"{reason.value}: {detail}" if detail else reason.value
        super().__init__(message)
        self.reason = reason
        self.detail = detail


class ResolutionError(RelayError):
    """Nenhum alvo de encaminhamento resolvível (defeito de configuração)."""


class ForwardError(RelayError):
    """Falha em um alvo; interrompe os encaminhamentos restantes."""

    def __init__(self, outcome: ForwardOutcome) -> None:
        super().__init__(outcome.describe())
        self.outcome = outcome


class ForwardTransportError(ForwardError):
    """Alvo inalcançável após esgotar os retries de transporte."""


class ForwardRejectedError(ForwardError):
    """Alvo respondeu status >= 400 (definitivo, sem retry)."""
