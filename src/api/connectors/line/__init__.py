"""Conector LINE - adapter de borda para a LINE Messaging API.

Este módulo é o único ponto de IO para o canal LINE.
Responsabilidades:
- Transport HTTP (credencial, headers, decodificação)
- Client com uma operação por endpoint
- Taxonomia de erros da LINE
- Paginação por continuation token
"""

from .client import LineMessagingClient
from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import LineHttpClient
from .line_errors import (
    InvalidArgumentError,
    InvalidCredentialError,
    LineApiError,
    LineErrorDetail,
    LineErrorResponse,
    LineMessagingError,
    LineServerError,
    NotFoundError,
    PermissionDeniedError,
    QuotaExceededError,
    TransportFailureError,
    classify_line_error,
    parse_line_error,
)
from .pagination import (
    PaginationLoopError,
    collect_group_members_ids,
    collect_room_members_ids,
    iter_group_members_ids,
    iter_room_members_ids,
)

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "InvalidArgumentError",
    "InvalidCredentialError",
    "LineApiError",
    "LineErrorDetail",
    "LineErrorResponse",
    "LineHttpClient",
    "LineMessagingClient",
    "LineMessagingError",
    "LineServerError",
    "NotFoundError",
    "PaginationLoopError",
    "PermissionDeniedError",
    "QuotaExceededError",
    "TransportFailureError",
    "classify_line_error",
    "collect_group_members_ids",
    "collect_room_members_ids",
    "iter_group_members_ids",
    "iter_room_members_ids",
    "parse_line_error",
]
