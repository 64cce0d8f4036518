"""Cliente HTTP de encaminhamento com retry em falhas de transporte.

Retry apenas quando não houve resposta (conexão recusada, timeout,
erro de protocolo). Qualquer status HTTP recebido é devolvido ao
chamador, que decide o que fazer com ele.

O timeout vale para a tentativa inteira (connect até o último byte do
body). O httpx.Timeout sozinho limita cada fase separadamente.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

import httpx

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 4.0
    max_retries: int = 5
    backoff_base_seconds: float = 0.1
    backoff_max_seconds: float = 2.0
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
        attempts: int = 0,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable
        self.attempts = attempts


class HttpClient:
    """Cliente HTTP compartilhado pelo processo (pool de conexões único)."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = httpx.AsyncClient(
            verify=self._config.verify_ssl,
            timeout=httpx.Timeout(self._config.timeout_seconds),
            follow_redirects=False,
            transport=transport,
        )

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def post_raw(
        self,
        url: str,
        content: bytes,
        headers: Sequence[tuple[bytes, bytes]],
    ) -> httpx.Response:
        """POST com body e headers exatamente como fornecidos.

        Raises:
            HttpError: Se o alvo não respondeu após todas as tentativas
                ou se a URL é inválida.
        """
        target_host = urlsplit(url).netloc
        for attempt in range(self._config.max_retries + 1):
            try:
                async with asyncio.timeout(self._config.timeout_seconds):
                    return await self._client.post(url, content=content, headers=list(headers))
            except httpx.InvalidURL as exc:
                raise HttpError(f"invalid_url: {exc}", attempts=attempt + 1) from exc
            except (httpx.TransportError, TimeoutError) as exc:
                if attempt >= self._config.max_retries:
                    raise HttpError(
                        _describe(exc, self._config.timeout_seconds),
                        is_retryable=True,
                        attempts=attempt + 1,
                    ) from exc
                logger.info(
                    "http_transport_retry",
                    extra={
                        "target_host": target_host,
                        "attempt": attempt + 1,
                        "error_type": type(exc).__name__,
                    },
                )
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
        raise HttpError("http_retry_exhausted", is_retryable=True)

    async def aclose(self) -> None:
        await self._client.aclose()


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.debug("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)


def _describe(exc: Exception, timeout_seconds: float) -> str:
    if isinstance(exc, TimeoutError):
        return f"TimeoutError: tentativa excedeu {timeout_seconds}s"
    return f"{type(exc).__name__}: {exc}"
