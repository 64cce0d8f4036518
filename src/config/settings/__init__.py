"""Agregador de settings do gateway.

Re-exporta todas as settings e funções de cada módulo.
Fonte: `config.yml` (ou GATEWAY_CONFIG_PATH) com override por env.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    GatewaySettings,
    get_gateway_settings,
    parse_listen_address,
)

# Encaminhamento
from config.settings.forward import ForwardSettings, get_forward_settings
from config.settings.loader import get_raw_config, load_config_file, resolve_config_path

# Provedor
from config.settings.wechatpay import (
    API_V3_KEY_LENGTH,
    WeChatPaySettings,
    get_wechatpay_settings,
)

__all__ = [
    # Constants
    "API_V3_KEY_LENGTH",
    "ForwardSettings",
    # Base
    "GatewaySettings",
    "WeChatPaySettings",
    "clear_settings_cache",
    "get_forward_settings",
    "get_gateway_settings",
    "get_raw_config",
    "get_wechatpay_settings",
    "load_config_file",
    "parse_listen_address",
    "resolve_config_path",
]


def clear_settings_cache() -> None:
    """Limpa caches de settings (usado em testes e reload)."""
    get_raw_config.cache_clear()
    get_gateway_settings.cache_clear()
    get_forward_settings.cache_clear()
    get_wechatpay_settings.cache_clear()
