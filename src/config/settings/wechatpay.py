"""Settings de verificação das notificações WeChat Pay (API v3).

Modo "chave pública da plataforma": a WeChat Pay assina as notificações
com a chave privada correspondente ao `publicKeyID` configurado.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from config.settings.loader import env_or, get_raw_config, lookup

# Tamanho da APIv3 key (AES-256-GCM)
API_V3_KEY_LENGTH = 32


@dataclass(frozen=True)
class WeChatPaySettings:
    """Material de chave para verificação e decriptação.

    Attributes:
        public_key_path: Caminho do PEM da chave pública da WeChat Pay
        public_key_id: Identificador da chave (comparado com Wechatpay-Serial)
        api_v3_key: Chave simétrica APIv3 (32 caracteres)
    """

    public_key_path: str = ""
    public_key_id: str = ""
    api_v3_key: str = ""

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.public_key_path:
            errors.append("wechat.publicKey não configurado")

        if not self.public_key_id:
            errors.append("wechat.publicKeyID não configurado")

        if not self.api_v3_key:
            errors.append("wechat.apiV3Key não configurado")
        elif len(self.api_v3_key.encode("utf-8")) != API_V3_KEY_LENGTH:
            errors.append(f"wechat.apiV3Key deve ter {API_V3_KEY_LENGTH} bytes")

        return errors


def _load_settings() -> WeChatPaySettings:
    raw = get_raw_config()
    return WeChatPaySettings(
        public_key_path=str(
            env_or("WECHATPAY_PUBLIC_KEY_PATH", lookup(raw, "wechat.publicKey", ""))
        ),
        public_key_id=str(
            env_or("WECHATPAY_PUBLIC_KEY_ID", lookup(raw, "wechat.publicKeyID", ""))
        ),
        api_v3_key=str(env_or("WECHATPAY_API_V3_KEY", lookup(raw, "wechat.apiV3Key", ""))),
    )


@lru_cache(maxsize=1)
def get_wechatpay_settings() -> WeChatPaySettings:
    """Retorna instância cacheada de WeChatPaySettings."""
    return _load_settings()
