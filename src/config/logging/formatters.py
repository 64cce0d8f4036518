"""Formatters: JSON para coleta de logs, texto para debug local."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo record JSON (demais `extra` entram como chaves extras)
REQUIRED_LOG_FIELDS = frozenset(
    {"asctime", "levelname", "name", "message", "correlation_id", "service"}
)

FIELD_RENAME_MAP = {"levelname": "level", "name": "logger"}

TEXT_FORMAT = "%(asctime)s %(levelname)-8s [%(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """JsonFormatter com os campos obrigatórios e nomes padronizados.

    Saída típica de um relay:
        {"asctime": "...", "level": "INFO", "logger": "api.routes.notify.router",
         "message": "notify_relayed", "correlation_id": "08F78BB5AF0610D3...",
         "service": "wechatpay_notify_gateway", "routing": "static", "target_count": 2}
    """
    fields = " ".join(f"%({name})s" for name in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(fields, rename_fields=FIELD_RENAME_MAP)


def create_text_formatter() -> logging.Formatter:
    return logging.Formatter(TEXT_FORMAT)
