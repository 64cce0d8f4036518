"""Agregador de rotas do gateway."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.notify.router import router as notify_router


def create_api_router() -> APIRouter:
    """Router raiz: /health, /ready e POST /notify, todos sem prefixo.

    O path de notificação precisa bater com o notify_url cadastrado
    na WeChat Pay.
    """
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(notify_router, tags=["notify"])
    return api_router
