"""Settings base do gateway.

Configurações de processo: endereço de escuta, debug e logging.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from config.settings.loader import env_or, get_raw_config, lookup, parse_bool

DEFAULT_ADDRESS = ":8080"
DEFAULT_HOST = "0.0.0.0"


@dataclass(frozen=True)
class GatewaySettings:
    """Configurações base do processo.

    Attributes:
        address: Endereço de escuta ("host:porta" ou ":porta")
        debug: Modo debug (logs texto em DEBUG e rotas listadas no startup)
        log_level: Nível de log quando debug está desligado
        service_name: Nome do serviço para logs
    """

    address: str = DEFAULT_ADDRESS
    debug: bool = False
    log_level: str = "INFO"
    service_name: str = DEFAULT_SERVICE_NAME

    @property
    def effective_log_level(self) -> str:
        """DEBUG quando debug ativo, senão o nível configurado."""
        return "DEBUG" if self.debug else self.log_level.upper()

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        try:
            parse_listen_address(self.address)
        except ValueError as exc:
            errors.append(str(exc))

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"logLevel inválido: {self.log_level}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        return errors


def parse_listen_address(address: str) -> tuple[str, int]:
    """Converte endereço de escuta em (host, porta).

    ":8080" escuta em todas as interfaces.

    Raises:
        ValueError: Se o endereço não tiver porta numérica válida.
    """
    host, sep, port_str = address.strip().rpartition(":")
    if not sep or not port_str.isdigit():
        raise ValueError(f"address inválido: {address!r}")
    port = int(port_str)
    if not 0 < port < 65536:
        raise ValueError(f"address com porta fora do intervalo: {address!r}")
    return host.strip("[]") or DEFAULT_HOST, port


def _load_settings() -> GatewaySettings:
    raw = get_raw_config()
    return GatewaySettings(
        address=str(env_or("GATEWAY_ADDRESS", lookup(raw, "address", DEFAULT_ADDRESS))),
        debug=parse_bool(env_or("GATEWAY_DEBUG", lookup(raw, "debug", False))),
        log_level=str(env_or("LOG_LEVEL", lookup(raw, "logLevel", "INFO"))),
        service_name=str(env_or("SERVICE_NAME", DEFAULT_SERVICE_NAME)),
    )


@lru_cache(maxsize=1)
def get_gateway_settings() -> GatewaySettings:
    """Retorna instância cacheada de GatewaySettings."""
    return _load_settings()
