"""Contratos do client da LINE Messaging API.

Um Protocol por grupo de capacidade; `LineMessagingClientProtocol`
agrega todos. Cada operação é um proxy direto de uma chamada HTTP:
o awaitable retornado é o handle do resultado, e falhas chegam ao
chamador como exceção no await.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.constants.line import RichMenuImageType
    from app.domain.line import (
        BotApiResponse,
        MembersIdsResponse,
        MessageContentResponse,
        Multicast,
        PushMessage,
        ReplyMessage,
        RichMenu,
        RichMenuIdResponse,
        RichMenuListResponse,
        RichMenuResponse,
        UserProfileResponse,
    )


class MessagingOperations(Protocol):
    """Envio de mensagens e download de conteúdo."""

    async def reply_message(self, reply_message: ReplyMessage) -> BotApiResponse: ...

    async def push_message(self, push_message: PushMessage) -> BotApiResponse: ...

    async def multicast(self, multicast: Multicast) -> BotApiResponse: ...

    async def get_message_content(self, message_id: str) -> MessageContentResponse: ...


class ProfileOperations(Protocol):
    """Perfis de usuário."""

    async def get_profile(self, user_id: str) -> UserProfileResponse: ...

    async def get_group_member_profile(
        self, group_id: str, user_id: str
    ) -> UserProfileResponse: ...

    async def get_room_member_profile(
        self, room_id: str, user_id: str
    ) -> UserProfileResponse: ...


class GroupRoomOperations(Protocol):
    """Membros de group/room (paginado) e saída do bot."""

    async def get_group_members_ids(
        self, group_id: str, start: str | None = None
    ) -> MembersIdsResponse: ...

    async def get_room_members_ids(
        self, room_id: str, start: str | None = None
    ) -> MembersIdsResponse: ...

    async def leave_group(self, group_id: str) -> BotApiResponse: ...

    async def leave_room(self, room_id: str) -> BotApiResponse: ...


class RichMenuOperations(Protocol):
    """Gestão de rich menus e vínculo com usuários."""

    async def get_rich_menu(self, rich_menu_id: str) -> RichMenuResponse: ...

    async def create_rich_menu(self, rich_menu: RichMenu) -> RichMenuIdResponse: ...

    async def delete_rich_menu(self, rich_menu_id: str) -> BotApiResponse: ...

    async def get_rich_menu_id_of_user(self, user_id: str) -> RichMenuIdResponse: ...

    async def link_rich_menu_id_to_user(
        self, user_id: str, rich_menu_id: str
    ) -> BotApiResponse: ...

    async def unlink_rich_menu_id_from_user(self, user_id: str) -> BotApiResponse: ...

    async def get_rich_menu_image(self, rich_menu_id: str) -> MessageContentResponse: ...

    async def set_rich_menu_image(
        self,
        rich_menu_id: str,
        content_type: RichMenuImageType | str,
        content: bytes,
    ) -> BotApiResponse: ...

    async def get_rich_menu_list(self) -> RichMenuListResponse: ...


class LineMessagingClientProtocol(
    MessagingOperations,
    ProfileOperations,
    GroupRoomOperations,
    RichMenuOperations,
    Protocol,
):
    """Contrato completo do client LINE."""
