"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ForwardError,
    ForwardRejectedError,
    ForwardTransportError,
    NotifyVerificationError,
    RelayError,
    ResolutionError,
    VerificationFailureReason,
)

__all__ = [
    "ForwardError",
    "ForwardRejectedError",
    "ForwardTransportError",
    "NotifyVerificationError",
    "RelayError",
    "ResolutionError",
    "VerificationFailureReason",
]
