"""Carregamento do arquivo de configuração YAML do gateway.

O arquivo segue o mesmo formato usado em produção (`config.yml`):

    address: ":8080"
    debug: false
    wechat:
      publicKey: /etc/gateway/pub_key.pem
      publicKeyID: PUB_KEY_ID_0114232134912410000000000000
      apiV3Key: 0123456789abcdef0123456789abcdef
    forwards:
      - https://orders.internal/wechat/notify
      - https://billing.internal/wechat/notify

Variáveis de ambiente têm precedência sobre o arquivo (ver cada settings).
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATH = "config.yml"

_MISSING = object()


def resolve_config_path() -> Path:
    """Retorna caminho do arquivo de config (GATEWAY_CONFIG_PATH ou ./config.yml)."""
    return Path(os.getenv("GATEWAY_CONFIG_PATH", DEFAULT_CONFIG_PATH))


def load_config_file(path: Path) -> dict[str, Any]:
    """Lê o YAML de configuração.

    Arquivo ausente resulta em dict vazio; a configuração pode vir
    inteiramente de variáveis de ambiente.

    Raises:
        ValueError: Se o YAML não for um mapeamento.
    """
    if not path.exists():
        return {}

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} deve ser um mapeamento YAML")
    return data


@lru_cache(maxsize=1)
def get_raw_config() -> dict[str, Any]:
    """Retorna config bruta cacheada (lida uma vez por processo)."""
    return load_config_file(resolve_config_path())


def lookup(data: dict[str, Any], dotted_key: str, default: Any = None) -> Any:
    """Busca chave com notação de ponto (ex: "wechat.publicKey")."""
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return default
        current = current.get(part, _MISSING)
        if current is _MISSING:
            return default
    return current


def env_or(name: str, fallback: Any) -> Any:
    """Retorna variável de ambiente se definida e não vazia, senão fallback."""
    value = os.getenv(name)
    if value is None or value == "":
        return fallback
    return value


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes", "on")
