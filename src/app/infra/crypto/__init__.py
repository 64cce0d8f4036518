"""Módulo de criptografia das notificações WeChat Pay.

Contém a verificação SHA256-RSA2048 dos headers Wechatpay-* e a
decriptação AEAD_AES_256_GCM do campo `resource`.

Localizado em app/infra/ para manter boundaries corretas:
- app/ não importa de api/ (exceto via bootstrap)
- O connector em api/connectors/wechatpay usa estas primitivas
"""

from .constants import (
    API_V3_KEY_SIZE,
    NOTIFY_RESOURCE_ALGORITHM,
    SIGNATURE_TYPE,
    TIMESTAMP_TOLERANCE_SECONDS,
)
from .errors import KeyMaterialError, NotifyCryptoError
from .keys import (
    NotifyKeyMaterial,
    VerificationKey,
    load_key_material,
    load_public_key,
    load_public_key_file,
)
from .resource import decrypt_notify_resource
from .signature import build_signature_message, verify_sha256_rsa

__all__ = [
    "API_V3_KEY_SIZE",
    "NOTIFY_RESOURCE_ALGORITHM",
    "SIGNATURE_TYPE",
    "TIMESTAMP_TOLERANCE_SECONDS",
    "KeyMaterialError",
    "NotifyCryptoError",
    "NotifyKeyMaterial",
    "VerificationKey",
    "build_signature_message",
    "decrypt_notify_resource",
    "load_key_material",
    "load_public_key",
    "load_public_key_file",
    "verify_sha256_rsa",
]
