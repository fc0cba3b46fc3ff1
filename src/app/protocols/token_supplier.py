"""Protocolo de fornecimento de credencial do canal.

O client pede a credencial a cada chamada; a política de renovação
(estática, rotação via env, refresh OAuth) é do fornecedor.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Protocol, runtime_checkable


@runtime_checkable
class ChannelTokenSupplier(Protocol):
    """Contrato mínimo para obter o channel access token."""

    def get_token(self) -> str | Awaitable[str]: ...
