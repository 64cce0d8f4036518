"""Constantes criptográficas das notificações WeChat Pay (API v3)."""

API_V3_KEY_SIZE = 32  # 256 bits (AEAD_AES_256_GCM)
GCM_TAG_SIZE = 16  # 128 bits, anexado ao final do ciphertext
NOTIFY_RESOURCE_ALGORITHM = "AEAD_AES_256_GCM"
SIGNATURE_TYPE = "WECHATPAY2-SHA256-RSA2048"
TIMESTAMP_TOLERANCE_SECONDS = 5 * 60
