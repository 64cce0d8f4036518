"""Factories de dependências (implementações concretas).

Centraliza a montagem do pipeline de relay a partir das settings:
material de chave, cliente HTTP, verificador e use case.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.wechatpay import WeChatPayNotifyVerifier
from app.infra.crypto import NotifyKeyMaterial, load_key_material
from app.infra.http import HttpClient, HttpClientConfig
from app.services import ForwardDispatcher
from app.use_cases.notify import RelayNotificationUseCase

if TYPE_CHECKING:
    import httpx

    from app.protocols import ForwardHttpClientProtocol, NotifyVerifierProtocol
    from config.settings import ForwardSettings, WeChatPaySettings

logger = logging.getLogger(__name__)


def create_key_material(settings: WeChatPaySettings) -> NotifyKeyMaterial:
    """Carrega chave pública e APIv3 key do disco/config.

    Raises:
        KeyMaterialError: Se o material for ilegível ou inválido.
    """
    key_material = load_key_material(
        public_key_path=settings.public_key_path,
        public_key_id=settings.public_key_id,
        api_v3_key=settings.api_v3_key,
    )
    logger.info(
        "key_material_loaded",
        extra={"component": "bootstrap", "public_key_id": settings.public_key_id},
    )
    return key_material


def create_http_client(
    settings: ForwardSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HttpClient:
    """Cria cliente HTTP compartilhado com timeout/retry das settings."""
    config = HttpClientConfig(
        timeout_seconds=settings.timeout_seconds,
        max_retries=settings.max_retries,
        backoff_base_seconds=settings.backoff_base_seconds,
        backoff_max_seconds=settings.backoff_max_seconds,
    )
    return HttpClient(config=config, transport=transport)


def create_notify_verifier(key_material: NotifyKeyMaterial) -> NotifyVerifierProtocol:
    return WeChatPayNotifyVerifier(key_material)


def create_relay_use_case(
    *,
    verifier: NotifyVerifierProtocol,
    http_client: ForwardHttpClientProtocol,
    static_targets: tuple[str, ...],
) -> RelayNotificationUseCase:
    """Monta o use case de relay com dispatcher sobre o cliente HTTP."""
    return RelayNotificationUseCase(
        verifier=verifier,
        dispatcher=ForwardDispatcher(http_client),
        static_targets=static_targets,
    )
