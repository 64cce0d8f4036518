"""Configuração do pytest para o gateway de notificações WeChat Pay."""

from __future__ import annotations

import base64
import json
import sys
import time
from pathlib import Path
from typing import Any

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from cryptography.hazmat.primitives import hashes, serialization  # noqa: E402
from cryptography.hazmat.primitives.asymmetric import padding, rsa  # noqa: E402
from cryptography.hazmat.primitives.ciphers.aead import AESGCM  # noqa: E402

from app.domain.notification import NotifyEnvelope  # noqa: E402
from app.infra.crypto import NotifyKeyMaterial, VerificationKey  # noqa: E402

TEST_PUBLIC_KEY_ID = "PUB_KEY_ID_0114232134912410000000000000"
TEST_API_V3_KEY = "0123456789abcdef0123456789abcdef"


class NotifyFactory:
    """Gera notificações assinadas e cifradas como a WeChat Pay."""

    def __init__(self) -> None:
        self.private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        self.key_id = TEST_PUBLIC_KEY_ID
        self.api_v3_key = TEST_API_V3_KEY

    @property
    def public_key_pem(self) -> bytes:
        return self.private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def key_material(self) -> NotifyKeyMaterial:
        return NotifyKeyMaterial(
            verification_key=VerificationKey(
                key_id=self.key_id,
                public_key=self.private_key.public_key(),
            ),
            api_v3_key=self.api_v3_key.encode("utf-8"),
        )

    def write_public_key(self, directory: Path) -> Path:
        path = directory / "pub_key.pem"
        path.write_bytes(self.public_key_pem)
        return path

    def encrypt(
        self,
        plaintext: bytes,
        nonce: str = "resourcenonc",
        associated_data: str = "transaction",
    ) -> str:
        aad = associated_data.encode("utf-8") if associated_data else None
        sealed = AESGCM(self.api_v3_key.encode("utf-8")).encrypt(
            nonce.encode("utf-8"), plaintext, aad
        )
        return base64.b64encode(sealed).decode("ascii")

    def body(self, attach: str | None = None, **resource_overrides: Any) -> bytes:
        transaction: dict[str, Any] = {
            "appid": "wxd678efh567hg6787",
            "mchid": "1230000109",
            "out_trade_no": "1217752501201407033233368018",
            "transaction_id": "1217752501201407033233368018",
            "trade_type": "JSAPI",
            "trade_state": "SUCCESS",
            "success_time": "2026-06-08T10:34:56+08:00",
            "payer": {"openid": "oUpF8uMuAJO_M2pxb1Q9zNjWeS6o"},
            "amount": {"total": 100, "payer_total": 100, "currency": "CNY"},
        }
        if attach is not None:
            transaction["attach"] = attach

        resource = {
            "algorithm": "AEAD_AES_256_GCM",
            "ciphertext": self.encrypt(json.dumps(transaction).encode("utf-8")),
            "nonce": "resourcenonc",
            "associated_data": "transaction",
            "original_type": "transaction",
        }
        resource.update(resource_overrides)

        payload = {
            "id": "EV-2018022511223320873",
            "create_time": "2026-06-08T10:34:56+08:00",
            "event_type": "TRANSACTION.SUCCESS",
            "resource_type": "encrypt-resource",
            "summary": "支付成功",
            "resource": resource,
        }
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")

    def sign(self, timestamp: str, nonce: str, body: bytes) -> str:
        message = timestamp.encode("utf-8") + b"\n" + nonce.encode("utf-8") + b"\n" + body + b"\n"
        signature = self.private_key.sign(message, padding.PKCS1v15(), hashes.SHA256())
        return base64.b64encode(signature).decode("ascii")

    def headers(
        self,
        body: bytes,
        *,
        timestamp: str | None = None,
        nonce: str = "fdasfwqewlkjasdf",
        serial: str | None = None,
        signature: str | None = None,
    ) -> list[tuple[str, str]]:
        ts = timestamp if timestamp is not None else str(int(time.time()))
        return [
            ("Content-Type", "application/json"),
            ("Wechatpay-Timestamp", ts),
            ("Wechatpay-Nonce", nonce),
            ("Wechatpay-Serial", serial if serial is not None else self.key_id),
            ("Wechatpay-Signature", signature if signature is not None else self.sign(ts, nonce, body)),
            ("Wechatpay-Signature-Type", "WECHATPAY2-SHA256-RSA2048"),
            ("Request-ID", "08F78BB5AF0610D302A8F7E70ADA3C"),
        ]

    def envelope(self, body: bytes, headers: list[tuple[str, str]]) -> NotifyEnvelope:
        return NotifyEnvelope(
            body=body,
            raw_headers=tuple(
                (name.lower().encode("latin-1"), value.encode("latin-1"))
                for name, value in headers
            ),
        )


@pytest.fixture(scope="session")
def notify_factory() -> NotifyFactory:
    """Par de chaves RSA gerado uma vez por sessão."""
    return NotifyFactory()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    from config.settings import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()
