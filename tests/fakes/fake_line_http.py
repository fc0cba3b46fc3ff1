"""Fakes HTTP para testes do conector LINE (httpx.MockTransport)."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from api.connectors.line import HttpClientConfig, LineHttpClient, LineMessagingClient
from app.infra.line import FixedChannelTokenSupplier
from app.protocols.token_supplier import ChannelTokenSupplier
from config.settings import LineSettings

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


class RecordingHandler:
    """Registra cada request que chega ao MockTransport."""

    def __init__(self, handler: Handler) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response | Awaitable[httpx.Response]:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def json_response(
    body: Any,
    status_code: int = 200,
    request_id: str | None = "req-abc",
) -> httpx.Response:
    """Resposta JSON com X-Line-Request-Id."""
    headers = {"X-Line-Request-Id": request_id} if request_id else {}
    return httpx.Response(status_code, json=body, headers=headers)


def error_response(status_code: int, message: str) -> httpx.Response:
    """Resposta de erro no formato da LINE."""
    return json_response({"message": message, "details": []}, status_code=status_code)


class LineClientFactory:
    """Cria LineMessagingClient sobre MockTransport e fecha os pools criados."""

    def __init__(self, settings: LineSettings) -> None:
        self._settings = settings
        self.http_clients: list[httpx.AsyncClient] = []

    def __call__(
        self,
        handler: Handler,
        *,
        token_supplier: ChannelTokenSupplier | None = None,
        max_retries: int = 0,
    ) -> tuple[LineMessagingClient, RecordingHandler]:
        recorder = RecordingHandler(handler)
        http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        self.http_clients.append(http)
        transport = LineHttpClient(
            token_supplier or FixedChannelTokenSupplier("test-token"),
            config=HttpClientConfig(max_retries=max_retries, backoff_base_seconds=0.0),
            client=http,
        )
        return LineMessagingClient(transport, self._settings), recorder

    async def aclose(self) -> None:
        for http in self.http_clients:
            await http.aclose()
