"""Settings de encaminhamento (alvos estáticos, timeout e retry).

A WeChat Pay exige resposta em até 5 segundos, por isso o timeout
padrão por tentativa é 4 segundos.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any
from urllib.parse import urlsplit

from config.settings.loader import env_or, get_raw_config, lookup

DEFAULT_TIMEOUT_SECONDS = 4.0
DEFAULT_MAX_RETRIES = 5
DEFAULT_BACKOFF_BASE_SECONDS = 0.1
DEFAULT_BACKOFF_MAX_SECONDS = 2.0


@dataclass(frozen=True)
class ForwardSettings:
    """Configurações de encaminhamento das notificações.

    Attributes:
        targets: URLs estáticas, na ordem em que serão chamadas
            (valor cru do YAML quando não é lista, reportado em validate)
        timeout_seconds: Timeout por tentativa
        max_retries: Retries em falha de transporte (não em status HTTP)
        backoff_base_seconds: Base do backoff exponencial entre retries
        backoff_max_seconds: Teto do backoff
    """

    targets: tuple[str, ...] = ()
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_retries: int = DEFAULT_MAX_RETRIES
    backoff_base_seconds: float = DEFAULT_BACKOFF_BASE_SECONDS
    backoff_max_seconds: float = DEFAULT_BACKOFF_MAX_SECONDS

    def validate(self) -> list[str]:
        """Valida configurações de encaminhamento.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not isinstance(self.targets, tuple):
            errors.append(
                f"forwards deve ser lista de URLs, recebido {type(self.targets).__name__}"
            )
        elif not self.targets:
            errors.append("forwards vazio: ao menos um alvo estático é obrigatório")
        else:
            for target in self.targets:
                parts = urlsplit(target)
                if parts.scheme.lower() not in ("http", "https") or not parts.netloc:
                    errors.append(f"forwards contém URL inválida: {target!r}")

        if self.timeout_seconds <= 0:
            errors.append("forward.timeoutSeconds deve ser > 0")

        if self.max_retries < 0:
            errors.append("forward.maxRetries deve ser >= 0")

        if self.backoff_base_seconds < 0 or self.backoff_max_seconds < 0:
            errors.append("forward.backoff* deve ser >= 0")

        return errors


def _parse_targets(value: Any) -> Any:
    """Normaliza para tupla; tipo desconhecido volta cru para validate()."""
    if value is None:
        return ()
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = [str(item) for item in value]
    else:
        return value
    return tuple(item.strip() for item in items if item.strip())


def _load_settings() -> ForwardSettings:
    raw = get_raw_config()
    return ForwardSettings(
        targets=_parse_targets(env_or("GATEWAY_FORWARDS", lookup(raw, "forwards"))),
        timeout_seconds=float(
            env_or(
                "FORWARD_TIMEOUT_SECONDS",
                lookup(raw, "forward.timeoutSeconds", DEFAULT_TIMEOUT_SECONDS),
            )
        ),
        max_retries=int(
            env_or("FORWARD_MAX_RETRIES", lookup(raw, "forward.maxRetries", DEFAULT_MAX_RETRIES))
        ),
        backoff_base_seconds=float(
            lookup(raw, "forward.backoffBaseSeconds", DEFAULT_BACKOFF_BASE_SECONDS)
        ),
        backoff_max_seconds=float(
            lookup(raw, "forward.backoffMaxSeconds", DEFAULT_BACKOFF_MAX_SECONDS)
        ),
    )


@lru_cache(maxsize=1)
def get_forward_settings() -> ForwardSettings:
    """Retorna instância cacheada de ForwardSettings."""
    return _load_settings()
