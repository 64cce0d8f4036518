"""Carga do material de chave usado na verificação de notificações."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from .constants import API_V3_KEY_SIZE
from .errors import KeyMaterialError


@dataclass(frozen=True, slots=True)
class VerificationKey:
    """Chave pública da WeChat Pay e seu identificador (Wechatpay-Serial)."""

    key_id: str
    public_key: RSAPublicKey


@dataclass(frozen=True, slots=True)
class NotifyKeyMaterial:
    """Material de chave do processo, carregado uma vez no startup."""

    verification_key: VerificationKey
    api_v3_key: bytes


def load_public_key(public_key_pem: str | bytes) -> RSAPublicKey:
    """Carrega chave pública RSA em formato PEM.

    Args:
        public_key_pem: Conteúdo PEM ("-----BEGIN PUBLIC KEY-----")

    Returns:
        Chave pública RSA

    Raises:
        KeyMaterialError: Se PEM inválido ou chave não for RSA
    """
    data = public_key_pem.encode("utf-8") if isinstance(public_key_pem, str) else public_key_pem
    try:
        public_key = serialization.load_pem_public_key(data)
    except ValueError as exc:
        raise KeyMaterialError(f"Invalid public key: {exc}") from exc

    if not isinstance(public_key, RSAPublicKey):
        raise KeyMaterialError("Invalid public key: expected RSA key")
    return public_key


def load_public_key_file(path: str | Path) -> RSAPublicKey:
    """Lê arquivo PEM do disco e carrega a chave pública."""
    try:
        pem = Path(path).read_bytes()
    except OSError as exc:
        raise KeyMaterialError(f"Cannot read public key file {path}: {exc}") from exc
    return load_public_key(pem)


def load_key_material(
    *,
    public_key_path: str | Path,
    public_key_id: str,
    api_v3_key: str,
) -> NotifyKeyMaterial:
    """Monta material de chave imutável a partir da configuração.

    Raises:
        KeyMaterialError: Se qualquer parte do material for inválida
    """
    if not public_key_id:
        raise KeyMaterialError("Public key ID is required")

    key_bytes = api_v3_key.encode("utf-8")
    if len(key_bytes) != API_V3_KEY_SIZE:
        raise KeyMaterialError(f"Invalid APIv3 key size: {len(key_bytes)}")

    return NotifyKeyMaterial(
        verification_key=VerificationKey(
            key_id=public_key_id,
            public_key=load_public_key_file(public_key_path),
        ),
        api_v3_key=key_bytes,
    )
