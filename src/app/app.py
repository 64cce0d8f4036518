"""Entrypoint do gateway de notificações WeChat Pay.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    wechatpay-notify-gateway

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.routing import APIRoute

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import (
    create_http_client,
    create_key_material,
    create_notify_verifier,
    create_relay_use_case,
)
from config.logging import get_logger
from config.settings import (
    get_forward_settings,
    get_gateway_settings,
    get_wechatpay_settings,
    parse_listen_address,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable
    from contextlib import AbstractAsyncContextManager

    import httpx

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def _build_lifespan(
    http_transport: httpx.AsyncBaseTransport | None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Gerencia ciclo de vida da aplicação.

        Startup:
        - Valida configurações (falha rápido)
        - Carrega material de chave uma única vez
        - Cria cliente HTTP compartilhado e use case de relay

        Shutdown:
        - Fecha o pool de conexões
        """
        gateway_settings = get_gateway_settings()
        logger.info("app_starting", extra={"service": gateway_settings.service_name})
        validate_runtime_settings()

        forward_settings = get_forward_settings()
        key_material = create_key_material(get_wechatpay_settings())
        http_client = create_http_client(forward_settings, transport=http_transport)

        app.state.key_material = key_material
        app.state.http_client = http_client
        app.state.relay_use_case = create_relay_use_case(
            verifier=create_notify_verifier(key_material),
            http_client=http_client,
            static_targets=forward_settings.targets,
        )

        if gateway_settings.debug:
            _log_routes(app)

        try:
            yield
        finally:
            logger.info("app_shutting_down", extra={"service": gateway_settings.service_name})
            await http_client.aclose()

    return lifespan


def _log_routes(app: FastAPI) -> None:
    for route in app.routes:
        if isinstance(route, APIRoute):
            logger.debug(
                "routes_registered",
                extra={"path": route.path, "methods": sorted(route.methods)},
            )


def create_app(http_transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        http_transport: Transport httpx alternativo para o encaminhamento
            (testes injetam httpx.MockTransport).

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="wechatpay-notify-gateway",
        description="Relay verificado de notificações de pagamento WeChat Pay",
        version="1.0.0",
        lifespan=_build_lifespan(http_transport),
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_gateway_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_gateway_settings()
    host, port = parse_listen_address(settings.address)
    logger.info("gateway_listening", extra={"host": host, "port": port})
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
