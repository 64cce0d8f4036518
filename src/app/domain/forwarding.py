"""Modelos de domínio do encaminhamento.

A decisão de roteamento é explícita: `SingleTarget` quando o attach
da transação traz uma URL absoluta, `StaticTargets` caso contrário.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

# Limite do body de resposta do alvo repassado no diagnóstico
MAX_DIAGNOSTIC_BODY_CHARS = 2048


@dataclass(frozen=True, slots=True)
class SingleTarget:
    """Destino declarado pela própria notificação (attach)."""

    url: str

    @property
    def urls(self) -> tuple[str, ...]:
        return (self.url,)


@dataclass(frozen=True, slots=True)
class StaticTargets:
    """Lista estática configurada, chamada inteira e em ordem."""

    targets: tuple[str, ...]

    @property
    def urls(self) -> tuple[str, ...]:
        return self.targets


ForwardTargets = SingleTarget | StaticTargets


class ForwardFailureKind(StrEnum):
    """Classificação de falha de um encaminhamento."""

    TRANSPORT_ERROR = "transport_error"
    UPSTREAM_4XX_5XX = "upstream_4xx_5xx"


@dataclass(frozen=True, slots=True)
class ForwardOutcome:
    """Resultado de um encaminhamento para um alvo."""

    target: str
    failure_kind: ForwardFailureKind | None = None
    status_code: int | None = None
    detail: str = ""
    elapsed_ms: float | None = None

    @property
    def ok(self) -> bool:
        return self.failure_kind is None

    @classmethod
    def success(
        cls, target: str, status_code: int, elapsed_ms: float | None = None
    ) -> ForwardOutcome:
        return cls(target=target, status_code=status_code, elapsed_ms=elapsed_ms)

    @classmethod
    def transport_error(
        cls, target: str, detail: str, elapsed_ms: float | None = None
    ) -> ForwardOutcome:
        return cls(
            target=target,
            failure_kind=ForwardFailureKind.TRANSPORT_ERROR,
            detail=detail,
            elapsed_ms=elapsed_ms,
        )

    @classmethod
    def rejected(
        cls,
        target: str,
        status_code: int,
        body: str,
        elapsed_ms: float | None = None,
    ) -> ForwardOutcome:
        return cls(
            target=target,
            failure_kind=ForwardFailureKind.UPSTREAM_4XX_5XX,
            status_code=status_code,
            detail=body[:MAX_DIAGNOSTIC_BODY_CHARS],
            elapsed_ms=elapsed_ms,
        )

    def describe(self) -> str:
        """Mensagem de diagnóstico repassada ao provedor."""
        if self.failure_kind is ForwardFailureKind.TRANSPORT_ERROR:
            return f"failed to forward request: {self.detail}"
        if self.failure_kind is ForwardFailureKind.UPSTREAM_4XX_5XX:
            return f"target server responded with status {self.status_code}: {self.detail}"
        return f"forwarded with status {self.status_code}"
