"""Connector WeChat Pay: headers de assinatura, corpo e verificação."""

from .headers import (
    HEADER_NONCE,
    HEADER_REQUEST_ID,
    HEADER_SERIAL,
    HEADER_SIGNATURE,
    HEADER_SIGNATURE_TYPE,
    HEADER_TIMESTAMP,
    NotifySignatureHeaders,
    extract_signature_headers,
)
from .models import NotifyBody, NotifyResource
from .notify import WeChatPayNotifyVerifier

__all__ = [
    "HEADER_NONCE",
    "HEADER_REQUEST_ID",
    "HEADER_SERIAL",
    "HEADER_SIGNATURE",
    "HEADER_SIGNATURE_TYPE",
    "HEADER_TIMESTAMP",
    "NotifyBody",
    "NotifyResource",
    "NotifySignatureHeaders",
    "WeChatPayNotifyVerifier",
    "extract_signature_headers",
]
