"""Protocolo do verificador de notificações.

Evita dependência direta da camada api (connector WeChat Pay).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.notification import NotifyEnvelope, VerifiedNotification


class NotifyVerifierProtocol(Protocol):
    """Contrato do verificador: autentica e decripta, ou levanta erro.

    Implementações levantam `NotifyVerificationError` com o motivo.
    Não podem alterar o envelope.
    """

    def verify(self, envelope: NotifyEnvelope) -> VerifiedNotification: ...
