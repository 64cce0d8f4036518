"""Verificação de assinatura SHA256-RSA2048 das notificações."""

from __future__ import annotations

import base64
import binascii
from typing import TYPE_CHECKING

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey


def build_signature_message(timestamp: str, nonce: str, body: bytes) -> bytes:
    """Monta a mensagem assinada: "timestamp\\nnonce\\nbody\\n".

    O body entra como bytes brutos, sem re-serialização.
    """
    return timestamp.encode("utf-8") + b"\n" + nonce.encode("utf-8") + b"\n" + body + b"\n"


def verify_sha256_rsa(public_key: RSAPublicKey, message: bytes, signature_b64: str) -> bool:
    """Valida assinatura RSA PKCS#1 v1.5 / SHA-256 (base64).

    Args:
        public_key: Chave pública da WeChat Pay
        message: Mensagem montada por build_signature_message
        signature_b64: Header Wechatpay-Signature

    Returns:
        True se assinatura válida
    """
    try:
        signature = base64.b64decode(signature_b64, validate=True)
    except (ValueError, binascii.Error):
        return False

    try:
        public_key.verify(signature, message, padding.PKCS1v15(), hashes.SHA256())
    except InvalidSignature:
        return False
    return True
