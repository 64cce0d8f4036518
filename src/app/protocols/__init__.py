"""Protocolos e contratos do core da aplicação."""

from .http_client import ForwardHttpClientProtocol
from .notify_verifier import NotifyVerifierProtocol

__all__ = [
    "ForwardHttpClientProtocol",
    "NotifyVerifierProtocol",
]
