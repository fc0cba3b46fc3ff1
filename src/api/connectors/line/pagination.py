"""Varredura de ids de membros de group/room via continuation token.

A sweep começa com `start=None` e segue `next` até ele faltar. Cada
token é pedido no máximo uma vez; se a LINE devolver um token já visto,
a sweep é interrompida com PaginationLoopError em vez de girar para
sempre.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.line.line_errors import LineMessagingError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

    from app.domain.line.responses import MembersIdsResponse
    from app.protocols.line_client import GroupRoomOperations

logger = logging.getLogger(__name__)


class PaginationLoopError(LineMessagingError):
    """Continuation token repetido dentro de uma mesma sweep."""

    def __init__(self, scope: str, pages: int) -> None:
        super().__init__(f"continuation token repetido em {scope} após {pages} páginas")
        self.scope = scope
        self.pages = pages


async def _sweep(
    fetch: Callable[[str | None], Awaitable[MembersIdsResponse]],
    scope: str,
) -> AsyncIterator[MembersIdsResponse]:
    seen: set[str] = set()
    start: str | None = None
    pages = 0
    while True:
        page = await fetch(start)
        pages += 1
        yield page

        next_token = page.next
        if not next_token:
            logger.debug("line_members_sweep_done", extra={"scope": scope, "pages": pages})
            return
        if next_token in seen:
            logger.warning("line_members_sweep_loop", extra={"scope": scope, "pages": pages})
            raise PaginationLoopError(scope, pages)
        seen.add(next_token)
        start = next_token


def iter_group_members_ids(
    client: GroupRoomOperations,
    group_id: str,
) -> AsyncIterator[MembersIdsResponse]:
    """Itera todas as páginas de membros do group.

    Exemplo:
        async for page in iter_group_members_ids(client, group_id):
            handle(page.member_ids)
    """
    return _sweep(lambda start: client.get_group_members_ids(group_id, start), "group")


def iter_room_members_ids(
    client: GroupRoomOperations,
    room_id: str,
) -> AsyncIterator[MembersIdsResponse]:
    """Itera todas as páginas de membros do room."""
    return _sweep(lambda start: client.get_room_members_ids(room_id, start), "room")


async def collect_group_members_ids(client: GroupRoomOperations, group_id: str) -> list[str]:
    """Todos os ids de membros do group, na ordem das páginas."""
    return [
        member_id
        async for page in iter_group_members_ids(client, group_id)
        for member_id in page.member_ids
    ]


async def collect_room_members_ids(client: GroupRoomOperations, room_id: str) -> list[str]:
    return [
        member_id
        async for page in iter_room_members_ids(client, room_id)
        for member_id in page.member_ids
    ]
