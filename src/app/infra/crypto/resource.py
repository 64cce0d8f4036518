"""Decriptação do campo `resource` das notificações (AEAD_AES_256_GCM)."""

from __future__ import annotations

import base64
import binascii

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .constants import API_V3_KEY_SIZE, GCM_TAG_SIZE
from .errors import NotifyCryptoError


def decrypt_notify_resource(
    *,
    api_v3_key: bytes,
    nonce: str,
    ciphertext_b64: str,
    associated_data: str = "",
) -> bytes:
    """Descriptografa o resource da notificação.

    O formato enviado pela WeChat Pay é:
    - `ciphertext`: base64(ciphertext + auth tag)
    - `nonce`: string usada diretamente como IV (12 bytes)
    - `associated_data`: AAD (pode ser vazio)

    Raises:
        NotifyCryptoError: Se base64, chave ou tag forem inválidos
    """
    if len(api_v3_key) != API_V3_KEY_SIZE:
        raise NotifyCryptoError(f"Invalid APIv3 key size: {len(api_v3_key)}")

    try:
        ciphertext = base64.b64decode(ciphertext_b64, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise NotifyCryptoError(f"Invalid base64 ciphertext: {exc}") from exc

    if len(ciphertext) <= GCM_TAG_SIZE:
        raise NotifyCryptoError("Ciphertext shorter than GCM tag")

    aad = associated_data.encode("utf-8") if associated_data else None
    try:
        return AESGCM(api_v3_key).decrypt(nonce.encode("utf-8"), ciphertext, aad)
    except InvalidTag as exc:
        raise NotifyCryptoError("Resource decryption failed: authentication tag mismatch") from exc
    except ValueError as exc:
        raise NotifyCryptoError(f"Resource decryption failed: {exc}") from exc
