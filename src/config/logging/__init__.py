"""Logging estruturado do gateway.

    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", correlation_id_getter=get_correlation_id)
    logger = get_logger(__name__)
    logger.info("notify_relayed", extra={"routing": "attach", "target_count": 1})

Todo record sai com asctime, level, logger, message, correlation_id e
service. Corpo da notificação, ciphertext e attach nunca são logados em claro.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import REDACTED, CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
]
