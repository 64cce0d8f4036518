"""Agregador de settings base."""

from __future__ import annotations

from config.settings.base.core import (
    GatewaySettings,
    get_gateway_settings,
    parse_listen_address,
)

__all__ = [
    "GatewaySettings",
    "get_gateway_settings",
    "parse_listen_address",
]
