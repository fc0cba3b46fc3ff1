"""Implementações de ChannelTokenSupplier.

- FixedChannelTokenSupplier: token estático (long-lived)
- EnvChannelTokenSupplier: relê a env a cada chamada (rotação externa)
- CallableChannelTokenSupplier: delega a uma função sync ou async
  (ex.: emissão de channel access token v2.1 com refresh)
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

from app.infra.secrets import EnvSecretProvider

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class FixedChannelTokenSupplier:
    """Devolve sempre o mesmo token."""

    __slots__ = ("_token",)

    def __init__(self, token: str) -> None:
        self._token = token

    def get_token(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return "FixedChannelTokenSupplier(token=***)"


class EnvChannelTokenSupplier:
    """Lê LINE_CHANNEL_ACCESS_TOKEN do ambiente a cada chamada.

    Args:
        secret_provider: Provider de secrets (default: EnvSecretProvider())
    """

    __slots__ = ("_secrets",)

    def __init__(self, secret_provider: EnvSecretProvider | None = None) -> None:
        self._secrets = secret_provider or EnvSecretProvider()

    def get_token(self) -> str:
        return self._secrets.get("line-channel-access-token", "") or ""


class CallableChannelTokenSupplier:
    """Adapta uma função (sync ou async) ao protocolo de token.

    Útil para credenciais renováveis: a função decide quando fazer
    refresh; o client apenas pede o valor atual.
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[], str | Awaitable[str]]) -> None:
        self._func = func

    async def get_token(self) -> str:
        value = self._func()
        if inspect.isawaitable(value):
            value = await value
        logger.debug("line_token_supplied", extra={"supplier": "callable"})
        return value
