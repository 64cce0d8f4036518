"""Modelos de domínio das notificações de pagamento.

`NotifyEnvelope` guarda o request exatamente como recebido; é a única
fonte dos bytes encaminhados. `VerifiedNotification` só é produzida pelo
verificador após assinatura e decriptação bem-sucedidas.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

# Headers gerenciados pelo transporte (recalculados na nova conexão)
TRANSPORT_MANAGED_HEADERS = frozenset(
    {
        b"host",
        b"content-length",
        b"transfer-encoding",
        b"connection",
        b"keep-alive",
        b"proxy-connection",
        b"te",
        b"trailer",
        b"upgrade",
    }
)


@dataclass(frozen=True, slots=True)
class NotifyEnvelope:
    """Request de notificação capturado (body e headers brutos)."""

    body: bytes
    raw_headers: tuple[tuple[bytes, bytes], ...]

    def header(self, name: str) -> str | None:
        """Primeiro valor do header (case-insensitive) ou None."""
        key = name.lower().encode("latin-1")
        for header_name, value in self.raw_headers:
            if header_name.lower() == key:
                return value.decode("latin-1")
        return None

    def forwardable_headers(self) -> list[tuple[bytes, bytes]]:
        """Headers a copiar para os alvos, na ordem e com duplicatas."""
        return [
            (name, value)
            for name, value in self.raw_headers
            if name.lower() not in TRANSPORT_MANAGED_HEADERS
        ]


class TransactionPayer(BaseModel):
    """Pagador da transação."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    openid: str | None = None


class TransactionAmount(BaseModel):
    """Valores da transação (em centavos / fen)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    total: int | None = None
    payer_total: int | None = None
    currency: str | None = None
    payer_currency: str | None = None


class Transaction(BaseModel):
    """Transação decriptada do campo `resource` (TRANSACTION.*)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    appid: str | None = None
    mchid: str | None = None
    out_trade_no: str | None = None
    transaction_id: str | None = None
    trade_type: str | None = None
    trade_state: str | None = None
    trade_state_desc: str | None = None
    bank_type: str | None = None
    attach: str | None = Field(
        default=None,
        description="Campo livre do comerciante; URL absoluta redireciona o encaminhamento.",
    )
    success_time: str | None = None
    payer: TransactionPayer | None = None
    amount: TransactionAmount | None = None


class VerifiedNotification(BaseModel):
    """Notificação autenticada e decriptada."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = ""
    create_time: str = ""
    event_type: str = ""
    resource_type: str = ""
    summary: str = ""
    transaction: Transaction
