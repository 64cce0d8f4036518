"""Headers de assinatura das notificações WeChat Pay."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from utils.errors import NotifyVerificationError, VerificationFailureReason

if TYPE_CHECKING:
    from app.domain.notification import NotifyEnvelope

HEADER_TIMESTAMP = "Wechatpay-Timestamp"
HEADER_NONCE = "Wechatpay-Nonce"
HEADER_SERIAL = "Wechatpay-Serial"
HEADER_SIGNATURE = "Wechatpay-Signature"
HEADER_SIGNATURE_TYPE = "Wechatpay-Signature-Type"
HEADER_REQUEST_ID = "Request-ID"

REQUIRED_HEADERS = (HEADER_TIMESTAMP, HEADER_NONCE, HEADER_SERIAL, HEADER_SIGNATURE)


@dataclass(frozen=True, slots=True)
class NotifySignatureHeaders:
    """Metadados de assinatura extraídos do envelope."""

    timestamp: str
    nonce: str
    serial: str
    signature: str
    signature_type: str | None = None


def extract_signature_headers(envelope: NotifyEnvelope) -> NotifySignatureHeaders:
    """Extrai os headers obrigatórios.

    Raises:
        NotifyVerificationError: missing_header com o nome do header ausente.
    """
    values: dict[str, str] = {}
    for name in REQUIRED_HEADERS:
        value = envelope.header(name)
        if not value:
            raise NotifyVerificationError(
                VerificationFailureReason.MISSING_HEADER, f"{name} header is empty"
            )
        values[name] = value

    return NotifySignatureHeaders(
        timestamp=values[HEADER_TIMESTAMP],
        nonce=values[HEADER_NONCE],
        serial=values[HEADER_SERIAL],
        signature=values[HEADER_SIGNATURE],
        signature_type=envelope.header(HEADER_SIGNATURE_TYPE),
    )
