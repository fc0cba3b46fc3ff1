"""Cliente HTTP especializado para a LINE Messaging API.

Estende HttpClient genérico com comportamentos específicos da LINE:
- Credencial obtida do ChannelTokenSupplier a cada chamada
- Headers Authorization/User-Agent e propagação de correlation_id
- Decodificação de bodies JSON e binários
- Conversão de falhas na taxonomia de line_errors
- Logging estruturado sem tokens nem ids
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.line.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.line.line_errors import (
    InvalidCredentialError,
    LineApiError,
    TransportFailureError,
    build_line_api_error,
)
from api.connectors.line.line_logging import (
    log_line_error,
    log_success,
    log_transport_failure,
)
from app.constants.line import CORRELATION_ID_HEADER, REQUEST_ID_HEADER
from app.observability import get_correlation_id
from config.settings.line import LINE_USER_AGENT

if TYPE_CHECKING:
    import httpx

    from app.protocols.token_supplier import ChannelTokenSupplier

logger: logging.Logger = logging.getLogger(__name__)


class LineHttpClient(HttpClient):
    """Transport adapter da LINE (implementa LineTransportProtocol).

    Tratamento específico:
    - Token vazio: InvalidCredentialError antes de qualquer IO
    - Status >= 400: LineApiError classificado, com status e body preservados
    - Falha de rede/timeout ou body ilegível: TransportFailureError
    """

    def __init__(
        self,
        token_supplier: ChannelTokenSupplier,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
        user_agent: str = LINE_USER_AGENT,
    ) -> None:
        """Inicializa o transport.

        Args:
            token_supplier: Fornecedor do channel access token
            config: Configuração HTTP base
            client: httpx.AsyncClient externo (não é fechado aqui)
            user_agent: Valor do header User-Agent
        """
        super().__init__(config, client)
        self._token_supplier = token_supplier
        self._user_agent = user_agent

    async def request_json(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> tuple[dict[str, Any], str | None]:
        """Executa chamada com body JSON (ou vazio) na resposta."""
        extra_headers = {"Content-Type": "application/json"} if json is not None else {}
        response = await self._execute(
            method,
            url,
            operation=operation,
            json=json,
            params=params,
            extra_headers=extra_headers,
        )
        return self._decode_json(response, method, operation), response.headers.get(
            REQUEST_ID_HEADER
        )

    async def request_bytes(
        self,
        method: str,
        url: str,
        *,
        operation: str,
    ) -> tuple[bytes, str | None]:
        """Executa chamada cuja resposta é conteúdo binário."""
        response = await self._execute(method, url, operation=operation)
        return response.content, response.headers.get("Content-Type")

    async def upload_bytes(
        self,
        url: str,
        *,
        operation: str,
        content: bytes,
        content_type: str,
    ) -> tuple[dict[str, Any], str | None]:
        """Envia conteúdo binário com o Content-Type informado pelo chamador."""
        response = await self._execute(
            "POST",
            url,
            operation=operation,
            content=content,
            extra_headers={"Content-Type": content_type},
        )
        return self._decode_json(response, "POST", operation), response.headers.get(
            REQUEST_ID_HEADER
        )

    async def _resolve_token(self) -> str:
        token = self._token_supplier.get_token()
        if inspect.isawaitable(token):
            token = await token
        if not token or not token.strip():
            logger.error("line_channel_token_missing")
            raise InvalidCredentialError(
                "channel access token é obrigatório. "
                "Verifique se LINE_CHANNEL_ACCESS_TOKEN está configurado.",
                status_code=None,
            )
        return token

    async def _build_headers(self, extra_headers: dict[str, str] | None) -> dict[str, str]:
        """Monta headers com credencial atual e correlation_id."""
        token = await self._resolve_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "User-Agent": self._user_agent,
            **(extra_headers or {}),
        }
        correlation_id = get_correlation_id()
        if correlation_id:
            headers[CORRELATION_ID_HEADER] = correlation_id
        return headers

    async def _execute(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        json: dict[str, Any] | None = None,
        content: bytes | None = None,
        params: dict[str, str] | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa a requisição e converte falhas na taxonomia LINE."""
        headers = await self._build_headers(extra_headers)
        try:
            response = await self.request(
                method,
                url,
                json=json,
                content=content,
                params=params,
                headers=headers,
            )
        except HttpError as exc:
            log_transport_failure(method, operation, str(exc))
            raise TransportFailureError(f"Falha de transporte em {operation}") from exc

        if response.is_error:
            self._raise_api_error(response, method, operation)

        log_success(method, operation, response.status_code)
        return response

    def _raise_api_error(
        self,
        response: httpx.Response,
        method: str,
        operation: str,
    ) -> None:
        """Converte resposta de erro em LineApiError e levanta."""
        try:
            response_data: Any = response.json()
        except ValueError:
            response_data = None

        error: LineApiError = build_line_api_error(
            response.status_code,
            response_data,
            response.headers.get(REQUEST_ID_HEADER),
        )
        log_line_error(error, method, operation)
        raise error

    def _decode_json(
        self,
        response: httpx.Response,
        method: str,
        operation: str,
    ) -> dict[str, Any]:
        """Decodifica body JSON; body vazio vira {}."""
        if not response.content:
            return {}
        try:
            response_data = response.json()
        except ValueError as exc:
            log_transport_failure(method, operation, "invalid_json")
            raise TransportFailureError(f"Response JSON inválido em {operation}") from exc

        if not isinstance(response_data, dict):
            log_transport_failure(method, operation, "unexpected_json_type")
            raise TransportFailureError(f"Response JSON inesperado em {operation}")
        return response_data
