"""Erros e helpers de parsing para a LINE Messaging API.

Taxonomia entregue ao chamador (sempre via exceção no await):

    LineMessagingError
    ├── LineApiError            resposta de erro bem-formada da LINE
    │   ├── InvalidCredentialError
    │   ├── PermissionDeniedError
    │   ├── NotFoundError
    │   ├── QuotaExceededError
    │   ├── InvalidArgumentError
    │   └── LineServerError
    └── TransportFailureError   rede, timeout ou body malformado
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from utils.errors import NetworkUnavailableError
# Contagem ou cota atingida em 400; "limit" isolado também aparece em erros de tamanho
# Frases de contagem ou cota atingida em respostas 400 ("limit" sozinho cobre erros de tamanho)
_QUOTA_MARKERS = ("reached the limit", "maximum number", "has been reached", "quota")
_REPLY_TOKEN_MARKER = "reply token"


@dataclass(frozen=True)
class LineErrorDetail:
    """Detalhe de erro (campo `details[]` da LINE)."""

    message: str
    property: str | None = None


@dataclass(frozen=True)
class LineErrorResponse:
    """Body de erro retornado pela LINE."""

    message: str
    details: tuple[LineErrorDetail, ...] = ()


class LineMessagingError(Exception):
    """Base de toda falha entregue pelo client LINE."""


class LineApiError(LineMessagingError):
    """Erro bem-formado devolvido pela LINE.

    Attributes:
        status_code: Status HTTP da resposta
        error_response: Body de erro decodificado (None se ilegível)
        request_id: Header X-Line-Request-Id, quando presente
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None,
        error_response: LineErrorResponse | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_response = error_response
        self.request_id = request_id

    @property
    def is_retryable(self) -> bool:
        """True para rate limit e erros de servidor."""
        return self.status_code == 429 or (self.status_code or 0) >= 500


class InvalidCredentialError(LineApiError):
    """Token do canal inválido/ausente ou reply token expirado/já usado."""


class PermissionDeniedError(LineApiError):
    """Operação não permitida para o plano ou a conta (403)."""


class NotFoundError(LineApiError):
    """Usuário, group, room, rich menu ou conteúdo inexistente/inacessível."""


class QuotaExceededError(LineApiError):
    """Rate limit, cota mensal ou limite de recursos (ex.: rich menus) atingido."""


class InvalidArgumentError(LineApiError):
    """Request rejeitado pela LINE por conteúdo inválido."""


class LineServerError(LineApiError):
    """Erro interno da LINE (5xx)."""


class TransportFailureError(LineMessagingError, NetworkUnavailableError):
    """Falha de rede, timeout ou resposta malformada."""


def parse_line_error(response_data: Any) -> LineErrorResponse | None:
    """Extrai o body de erro da LINE.

    Args:
        response_data: JSON decodificado da resposta

    Returns:
        LineErrorResponse ou None se o body não tem o formato esperado
    """
    if not isinstance(response_data, dict):
        return None

    message = response_data.get("message")
    if not isinstance(message, str):
        return None

    details: list[LineErrorDetail] = []
    for item in response_data.get("details") or []:
        if not isinstance(item, dict):
            continue
        details.append(
            LineErrorDetail(
                message=str(item.get("message", "")),
                property=item.get("property"),
            )
        )
    return LineErrorResponse(message=message, details=tuple(details))


def classify_line_error(
    status_code: int,
    error_response: LineErrorResponse | None,
) -> type[LineApiError]:
    """Escolhe a classe de erro para status + body.

    401 e "Invalid reply token" (400) são credenciais; 429 e contagem ou
    cota atingida em 400 são cota; demais 4xx de conteúdo são argumento inválido.
    """
    message = error_response.message.lower() if error_response else ""

    if status_code == 401:
        return InvalidCredentialError
    if status_code == 403:
        return PermissionDeniedError
    if status_code == 404:
        return NotFoundError
    if status_code == 429:
        return QuotaExceededError
    if status_code >= 500:
        return LineServerError
    if status_code == 400:
        if _REPLY_TOKEN_MARKER in message:
            return InvalidCredentialError
        if any(marker in message for marker in _QUOTA_MARKERS):
            return QuotaExceededError
    return InvalidArgumentError


def build_line_api_error(
    status_code: int,
    response_data: Any,
    request_id: str | None = None,
) -> LineApiError:
    """Monta a exceção classificada preservando status e body."""
    error_response = parse_line_error(response_data)
    error_cls = classify_line_error(status_code, error_response)
    detail = error_response.message if error_response else "sem body de erro"
    return error_cls(
        f"LINE API error {status_code}: {detail}",
        status_code=status_code,
        error_response=error_response,
        request_id=request_id,
    )
