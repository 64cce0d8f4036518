"""Respostas HTTP para a WeChat Pay.

A WeChat Pay só considera a notificação entregue com 2xx; qualquer
outro status faz o provedor reenviar mais tarde.
"""

from __future__ import annotations

from fastapi import Response, status
from fastapi.responses import JSONResponse

FAIL_CODE = "FAIL"


def success_response() -> Response:
    """204 sem corpo: todos os encaminhamentos tiveram sucesso."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def failure_response(status_code: int, message: str) -> JSONResponse:
    """Resposta de falha no formato esperado pelo provedor."""
    return JSONResponse(
        content={"code": FAIL_CODE, "message": message},
        status_code=status_code,
    )
