"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (notificação, health)
- Capturar request bruto (body e headers) sem alterá-lo
- Delegação para o use case de relay
- Mapeamento de erros para respostas ao provedor

Estrutura:
- routes/notify/: POST /notify
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
