"""Endpoint de notificação da WeChat Pay.

Endpoints:
- POST /notify: recebe notificação assinada e encaminha aos alvos

Respostas:
- 204: todos os alvos responderam < 400
- 500: verificação falhou ou alvo inalcançável
- 502: alvo respondeu >= 400
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from fastapi import APIRouter, Request, Response, status

from api.routes.notify.responses import failure_response, success_response
from app.domain.notification import NotifyEnvelope
from app.observability import (
    correlation_id_from_headers,
    record_verification_failure,
    reset_correlation_id,
    set_correlation_id,
)
from utils.errors import (
    ForwardRejectedError,
    ForwardTransportError,
    NotifyVerificationError,
    ResolutionError,
)

if TYPE_CHECKING:
    from collections.abc import Coroutine

    from app.use_cases.notify import RelayNotificationUseCase, RelayResult

logger = logging.getLogger(__name__)

router = APIRouter()

# Intervalo de checagem de desconexão do provedor durante o relay
DISCONNECT_POLL_SECONDS = 0.1


class ClientDisconnectedError(Exception):
    """Provedor desconectou antes do fim do relay."""


def _get_relay_use_case(request: Request) -> RelayNotificationUseCase:
    use_case = getattr(request.app.state, "relay_use_case", None)
    if use_case is None:
        raise RuntimeError("relay use case not initialized")
    return use_case


async def _wait_disconnect(request: Request) -> None:
    while not await request.is_disconnected():
        await asyncio.sleep(DISCONNECT_POLL_SECONDS)


async def _run_until_disconnect(
    request: Request,
    relay: Coroutine[Any, Any, RelayResult],
) -> RelayResult:
    """Executa o relay, abandonando-o se o provedor desconectar.

    Raises:
        ClientDisconnectedError: Se o provedor desconectou primeiro.
    """
    relay_task = asyncio.ensure_future(relay)
    disconnect_task = asyncio.ensure_future(_wait_disconnect(request))
    try:
        done, _ = await asyncio.wait(
            {relay_task, disconnect_task},
            return_when=asyncio.FIRST_COMPLETED,
        )
    except asyncio.CancelledError:
        relay_task.cancel()
        raise
    finally:
        disconnect_task.cancel()

    if relay_task in done:
        return relay_task.result()

    relay_task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await relay_task
    raise ClientDisconnectedError


def _host(url: str) -> str:
    return urlsplit(url).netloc


@router.post("/notify", response_model=None)
async def receive_notify(request: Request) -> Response:
    """Recebimento de notificação da WeChat Pay.

    Validações:
    1. Headers Wechatpay-* e assinatura SHA256-RSA2048
    2. Decriptação AEAD_AES_256_GCM do resource

    Encaminhamento:
    - attach com URL absoluta: somente essa URL
    - caso contrário: todos os alvos estáticos, em ordem, até a primeira falha

    Returns:
        204 em sucesso, ou JSON {"code": "FAIL", "message": ...}.
    """
    token = set_correlation_id(correlation_id_from_headers(request.headers))

    try:
        use_case = _get_relay_use_case(request)

        # Body bruto e headers na forma recebida (encaminhados sem alteração)
        envelope = NotifyEnvelope(
            body=await request.body(),
            raw_headers=tuple(request.headers.raw),
        )
        logger.info("notify_received", extra={"payload_size": len(envelope.body)})

        try:
            result = await _run_until_disconnect(request, use_case.execute(envelope))

        except NotifyVerificationError as exc:
            record_verification_failure(exc.reason.value)
            logger.warning(
                "notify_verification_failed",
                extra={"reason": exc.reason.value, "error": exc.detail},
            )
            return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

        except ResolutionError as exc:
            logger.error("notify_resolution_failed", extra={"error": str(exc)})
            return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

        except ForwardTransportError as exc:
            logger.warning(
                "forward_transport_error",
                extra={"target_host": _host(exc.outcome.target), "error": exc.outcome.detail},
            )
            return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

        except ForwardRejectedError as exc:
            logger.warning(
                "forward_rejected",
                extra={
                    "target_host": _host(exc.outcome.target),
                    "status_code": exc.outcome.status_code,
                },
            )
            return failure_response(status.HTTP_502_BAD_GATEWAY, str(exc))

        except ClientDisconnectedError:
            logger.warning("notify_client_disconnected")
            return failure_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "client disconnected before relay finished"
            )

        logger.info(
            "notify_relayed",
            extra={
                "notification_id": result.notification_id,
                "routing": result.routing,
                "target_count": len(result.outcomes),
            },
        )
        return success_response()

    finally:
        reset_correlation_id(token)
