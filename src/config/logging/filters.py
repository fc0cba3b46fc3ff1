"""Filters de logging para injeção de contexto e remoção de segredos.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: line-bot-client)

Campos mascarados: qualquer atributo `extra` com nome de credencial.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Nomes de atributos que nunca podem sair em claro nos logs
SECRET_FIELD_NAMES = frozenset(
    {
        "access_token",
        "authorization",
        "channel_access_token",
        "channel_secret",
        "token",
    }
)

REDACTED = "***"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Mascara atributos de credenciais passados via `extra`."""

    def filter(self, record: logging.LogRecord) -> bool:
        for name in SECRET_FIELD_NAMES:
            if getattr(record, name, None):
                setattr(record, name, REDACTED)
        return True
