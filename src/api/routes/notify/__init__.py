"""Rotas de notificação de pagamento."""

from api.routes.notify.router import router

__all__ = ["router"]
