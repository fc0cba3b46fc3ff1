"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `max_retries=0` garante exatamente uma requisição por chamada.
    """

    timeout_seconds: float = 30.0
    max_retries: int = 0
    backoff_base_seconds: float = 2.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class HttpClient:
    """Cliente HTTP assíncrono para chamadas externas.

    Reusa um único httpx.AsyncClient (pool de conexões). Se um client
    for injetado, ele pertence ao chamador e não é fechado aqui.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                verify=self._config.verify_ssl,
                timeout=self._config.timeout_seconds,
            )
        return self._client

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        content: bytes | None = None,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa a requisição e devolve a resposta, qualquer que seja o status.

        Status 429/5xx e falhas de conexão só são repetidos quando
        `max_retries > 0`; esgotadas as tentativas, a última resposta é
        devolvida ou HttpError é levantado.

        Raises:
            HttpError: Falha de transporte (timeout, conexão, protocolo) ou
                body com Content-Encoding inválido
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        client = self._get_client()
        for attempt in range(self._config.max_retries + 1):
            try:
                response = await client.request(
                    method,
                    url,
                    json=json,
                    content=content,
                    params=params,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
            except httpx.DecodingError as exc:
                # DecodingError nunca é repetido
                raise HttpError(f"http_decoding_error: {type(exc).__name__}") from exc
            except httpx.TransportError as exc:
                if attempt >= self._config.max_retries:
                    raise HttpError(
                        f"http_connection_error: {type(exc).__name__}",
                        is_retryable=True,
                    ) from exc
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
                continue

            if response.status_code in _RETRYABLE_STATUS and attempt < self._config.max_retries:
                logger.info(
                    "http_retryable_status",
                    extra={"status_code": response.status_code, "attempt": attempt + 1},
                )
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
                continue
            return response
        # Inalcançável (a última tentativa retorna ou levanta); mantido para o type checker
        raise HttpError("http_retry_exhausted", is_retryable=True)

    async def aclose(self) -> None:
        """Fecha o pool de conexões se ele foi criado aqui."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)
