"""Testes do dispatcher de encaminhamento sequencial."""

from __future__ import annotations

import httpx
import pytest

from app.domain.forwarding import (
    MAX_DIAGNOSTIC_BODY_CHARS,
    ForwardFailureKind,
    SingleTarget,
    StaticTargets,
)
from app.infra.http import HttpClient, HttpClientConfig
from app.services import ForwardDispatcher

BODY = b'{"id":"EV-1","resource":{}}'
HEADERS = [(b"wechatpay-nonce", b"abc"), (b"content-type", b"application/json")]


class _Targets:
    """Transport falso que responde por URL e registra as chamadas."""

    def __init__(self, responses: dict[str, object]) -> None:
        self.responses = responses
        self.calls: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        answer = self.responses[str(request.url)]
        if isinstance(answer, Exception):
            raise answer
        return answer

    @property
    def called_urls(self) -> list[str]:
        return [str(request.url) for request in self.calls]


def _dispatcher(spy: _Targets, max_retries: int = 0) -> ForwardDispatcher:
    config = HttpClientConfig(
        max_retries=max_retries, backoff_base_seconds=0.0, backoff_max_seconds=0.0
    )
    return ForwardDispatcher(HttpClient(config=config, transport=httpx.MockTransport(spy)))


@pytest.mark.asyncio
async def test_dispatch_calls_every_target_in_order() -> None:
    spy = _Targets(
        {
            "https://t1.example/notify": httpx.Response(200),
            "https://t2.example/notify": httpx.Response(204),
        }
    )
    dispatcher = _dispatcher(spy)

    outcomes = await dispatcher.dispatch(
        StaticTargets(("https://t1.example/notify", "https://t2.example/notify")), BODY, HEADERS
    )

    assert spy.called_urls == ["https://t1.example/notify", "https://t2.example/notify"]
    assert [outcome.ok for outcome in outcomes] == [True, True]
    assert all(request.content == BODY for request in spy.calls)
    assert all(request.headers["wechatpay-nonce"] == "abc" for request in spy.calls)


@pytest.mark.asyncio
async def test_dispatch_stops_at_first_rejection() -> None:
    spy = _Targets(
        {
            "https://t1.example/notify": httpx.Response(500, text="boom"),
            "https://t2.example/notify": httpx.Response(200),
        }
    )
    dispatcher = _dispatcher(spy)

    outcomes = await dispatcher.dispatch(
        StaticTargets(("https://t1.example/notify", "https://t2.example/notify")), BODY, HEADERS
    )

    assert spy.called_urls == ["https://t1.example/notify"]
    assert len(outcomes) == 1
    assert outcomes[0].failure_kind is ForwardFailureKind.UPSTREAM_4XX_5XX
    assert outcomes[0].status_code == 500
    assert outcomes[0].describe() == "target server responded with status 500: boom"


@pytest.mark.asyncio
async def test_dispatch_stops_at_middle_failure() -> None:
    spy = _Targets(
        {
            "https://t1.example/notify": httpx.Response(200),
            "https://t2.example/notify": httpx.Response(404, text="missing"),
            "https://t3.example/notify": httpx.Response(200),
        }
    )
    dispatcher = _dispatcher(spy)

    outcomes = await dispatcher.dispatch(
        StaticTargets(
            (
                "https://t1.example/notify",
                "https://t2.example/notify",
                "https://t3.example/notify",
            )
        ),
        BODY,
        HEADERS,
    )

    assert spy.called_urls == ["https://t1.example/notify", "https://t2.example/notify"]
    assert [outcome.ok for outcome in outcomes] == [True, False]


@pytest.mark.asyncio
async def test_forward_rejection_is_not_retried() -> None:
    spy = _Targets({"https://t1.example/notify": httpx.Response(400, text="bad")})
    dispatcher = _dispatcher(spy, max_retries=5)

    outcome = await dispatcher.forward("https://t1.example/notify", BODY, HEADERS)

    assert len(spy.calls) == 1
    assert outcome.failure_kind is ForwardFailureKind.UPSTREAM_4XX_5XX


@pytest.mark.asyncio
async def test_forward_transport_error_after_retries() -> None:
    spy = _Targets(
        {"https://t1.example/notify": httpx.ConnectError("connection refused")}
    )
    dispatcher = _dispatcher(spy, max_retries=2)

    outcome = await dispatcher.forward("https://t1.example/notify", BODY, HEADERS)

    assert len(spy.calls) == 3
    assert outcome.failure_kind is ForwardFailureKind.TRANSPORT_ERROR
    assert outcome.status_code is None
    assert outcome.describe().startswith("failed to forward request: ConnectError")


@pytest.mark.asyncio
async def test_forward_redirect_counts_as_success() -> None:
    spy = _Targets(
        {"https://t1.example/notify": httpx.Response(301, headers={"location": "/x"})}
    )
    dispatcher = _dispatcher(spy)

    outcome = await dispatcher.forward("https://t1.example/notify", BODY, HEADERS)

    assert outcome.ok is True
    assert outcome.status_code == 301


@pytest.mark.asyncio
async def test_forward_truncates_diagnostic_body() -> None:
    spy = _Targets({"https://t1.example/notify": httpx.Response(502, text="x" * 10_000)})
    dispatcher = _dispatcher(spy)

    outcome = await dispatcher.forward("https://t1.example/notify", BODY, HEADERS)

    assert len(outcome.detail) == MAX_DIAGNOSTIC_BODY_CHARS


@pytest.mark.asyncio
async def test_dispatch_single_target() -> None:
    spy = _Targets({"https://x.example/cb": httpx.Response(200)})
    dispatcher = _dispatcher(spy)

    outcomes = await dispatcher.dispatch(SingleTarget("https://x.example/cb"), BODY, HEADERS)

    assert spy.called_urls == ["https://x.example/cb"]
    assert outcomes[0].ok is True
