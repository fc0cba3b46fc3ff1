"""Factory de wiring para o client LINE (bootstrap).

Substitui o builder: escolhe o fornecedor de token, monta o transport
a partir de LineSettings e devolve o client pronto.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.line import HttpClientConfig, LineHttpClient, LineMessagingClient
from app.infra.line import EnvChannelTokenSupplier, FixedChannelTokenSupplier
from config.settings import get_line_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols.token_supplier import ChannelTokenSupplier
    from config.settings import LineSettings

logger = logging.getLogger(__name__)


def _select_token_supplier(
    channel_token: str | None,
    token_supplier: ChannelTokenSupplier | None,
    settings: LineSettings,
    settings_injected: bool,
) -> ChannelTokenSupplier:
    if channel_token is not None and token_supplier is not None:
        raise ValueError("Informe channel_token ou token_supplier, não ambos")
    if token_supplier is not None:
        return token_supplier
    if channel_token is not None:
        return FixedChannelTokenSupplier(channel_token)
    if settings_injected and settings.channel_access_token:
        return FixedChannelTokenSupplier(settings.channel_access_token)
    # Relê a env a cada chamada: rotação do token não exige restart
    return EnvChannelTokenSupplier()


def create_line_messaging_client(
    channel_token: str | None = None,
    *,
    token_supplier: ChannelTokenSupplier | None = None,
    settings: LineSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> LineMessagingClient:
    """Cria client LINE com config padrão.

    Args:
        channel_token: Token estático do canal
        token_supplier: Fornecedor dinâmico (exclusivo com channel_token)
        settings: LineSettings opcional. Se None, carrega do ambiente.
        http_client: httpx.AsyncClient externo (o chamador o fecha)

    Returns:
        LineMessagingClient configurado.

    Raises:
        ValueError: Se channel_token e token_supplier forem informados juntos
    """
    line = settings or get_line_settings()
    supplier = _select_token_supplier(
        channel_token,
        token_supplier,
        line,
        settings_injected=settings is not None,
    )
    config = HttpClientConfig(
        timeout_seconds=line.request_timeout_seconds,
        max_retries=line.max_retries,
    )
    transport = LineHttpClient(
        token_supplier=supplier,
        config=config,
        client=http_client,
        user_agent=line.user_agent,
    )
    logger.info(
        "line_client_created",
        extra={
            "supplier": type(supplier).__name__,
            "max_retries": line.max_retries,
            "timeout_seconds": line.request_timeout_seconds,
        },
    )
    return LineMessagingClient(transport, line)
