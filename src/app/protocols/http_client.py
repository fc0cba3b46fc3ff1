"""Protocolos HTTP usados pelo client LINE.

Define a fronteira do transport adapter: credencial, execução não
bloqueante, decodificação e classificação de falhas ficam do outro lado.
`operation` identifica a chamada nos logs sem expor ids.
"""

from __future__ import annotations

from typing import Any, Protocol


class LineTransportProtocol(Protocol):
    """Contrato mínimo do transport adapter LINE."""

    async def request_json(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> tuple[dict[str, Any], str | None]:
        """Executa a chamada e devolve (body JSON, X-Line-Request-Id)."""
        ...

    async def request_bytes(
        self,
        method: str,
        url: str,
        *,
        operation: str,
    ) -> tuple[bytes, str | None]:
        """Executa a chamada e devolve (conteúdo, Content-Type)."""
        ...

    async def upload_bytes(
        self,
        url: str,
        *,
        operation: str,
        content: bytes,
        content_type: str,
    ) -> tuple[dict[str, Any], str | None]:
        """Envia conteúdo binário e devolve (body JSON, X-Line-Request-Id)."""
        ...

    async def aclose(self) -> None: ...
