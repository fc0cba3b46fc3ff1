"""Client da LINE Messaging API.

Cada operação é um proxy direto de um endpoint: monta a URL e o body,
delega ao transport e decodifica o resultado. Não há validação local,
retry, batching ou cache nesta camada; tudo isso é do transport ou
da própria LINE.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from api.connectors.line.line_errors import TransportFailureError
from api.payload_builders.line import (
    build_multicast_payload,
    build_push_payload,
    build_reply_payload,
    build_rich_menu_payload,
)
from app.domain.line.responses import (
    BotApiResponse,
    MembersIdsResponse,
    MessageContentResponse,
    RichMenuIdResponse,
    RichMenuListResponse,
    RichMenuResponse,
    UserProfileResponse,
)
from config.settings.line import LineSettings

if TYPE_CHECKING:
    from types import TracebackType

    from app.constants.line import RichMenuImageType
    from app.domain.line import Multicast, PushMessage, ReplyMessage, RichMenu
    from app.protocols.http_client import LineTransportProtocol

_ModelT = TypeVar("_ModelT", bound=BaseModel)

# Endpoints (api.line.me)
_REPLY = "/v2/bot/message/reply"
_PUSH = "/v2/bot/message/push"
_MULTICAST = "/v2/bot/message/multicast"
_PROFILE = "/v2/bot/profile/{}"
_GROUP_MEMBER_PROFILE = "/v2/bot/group/{}/member/{}"
_ROOM_MEMBER_PROFILE = "/v2/bot/room/{}/member/{}"
_GROUP_MEMBERS_IDS = "/v2/bot/group/{}/members/ids"
_ROOM_MEMBERS_IDS = "/v2/bot/room/{}/members/ids"
_LEAVE_GROUP = "/v2/bot/group/{}/leave"
_LEAVE_ROOM = "/v2/bot/room/{}/leave"
_RICH_MENU = "/v2/bot/richmenu/{}"
_RICH_MENU_CREATE = "/v2/bot/richmenu"
_RICH_MENU_LIST = "/v2/bot/richmenu/list"
_USER_RICH_MENU = "/v2/bot/user/{}/richmenu"
_USER_RICH_MENU_LINK = "/v2/bot/user/{}/richmenu/{}"

# Endpoints binários (api-data.line.me)
_MESSAGE_CONTENT = "/v2/bot/message/{}/content"
_RICH_MENU_CONTENT = "/v2/bot/richmenu/{}/content"


def _path(template: str, *segments: str) -> str:
    """Formata o path com segmentos URL-quoted (ids não são validados)."""
    return template.format(*(quote(segment, safe="") for segment in segments))


class LineMessagingClient:
    """Implementação padrão de LineMessagingClientProtocol.

    Usa-se preferencialmente via `create_line_messaging_client` e como
    async context manager para liberar o pool de conexões:

        async with create_line_messaging_client("TOKEN") as client:
            await client.push_message(PushMessage(to=user_id, messages=[...]))
    """

    def __init__(
        self,
        transport: LineTransportProtocol,
        settings: LineSettings | None = None,
    ) -> None:
        self._transport = transport
        self._settings = settings or LineSettings()

    async def __aenter__(self) -> LineMessagingClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    # ──────────────────────────────────────────────────────────────────────
    # Helpers
    # ──────────────────────────────────────────────────────────────────────

    async def _call_json(
        self,
        method: str,
        path: str,
        operation: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        data, _ = await self._transport.request_json(
            method,
            self._settings.api_url(path),
            operation=operation,
            json=json,
            params=params,
        )
        return data

    async def _call_ack(
        self,
        method: str,
        path: str,
        operation: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> BotApiResponse:
        data, request_id = await self._transport.request_json(
            method,
            self._settings.api_url(path),
            operation=operation,
            json=json,
        )
        return _to_bot_api_response(data, request_id)

    async def _download(self, path: str, operation: str) -> MessageContentResponse:
        content, mime_type = await self._transport.request_bytes(
            "GET",
            self._settings.data_api_url(path),
            operation=operation,
        )
        return MessageContentResponse(content=content, mime_type=mime_type, length=len(content))

    # ──────────────────────────────────────────────────────────────────────
    # Mensagens
    # ──────────────────────────────────────────────────────────────────────

    async def reply_message(self, reply_message: ReplyMessage) -> BotApiResponse:
        """Responde a um evento usando o reply token (uso único, expira).

        Raises:
            InvalidCredentialError: Reply token inválido, expirado ou já usado
        """
        return await self._call_ack(
            "POST", _REPLY, "reply_message", json=build_reply_payload(reply_message)
        )

    async def push_message(self, push_message: PushMessage) -> BotApiResponse:
        """Envia mensagem a um user, group ou room a qualquer momento.

        Raises:
            PermissionDeniedError: Plano da conta não permite push
        """
        return await self._call_ack(
            "POST", _PUSH, "push_message", json=build_push_payload(push_message)
        )

    async def multicast(self, multicast: Multicast) -> BotApiResponse:
        """Envia a mesma mensagem a vários user ids.

        Ids de group/room não são filtrados localmente; a LINE rejeita
        a chamada inteira (InvalidArgumentError).
        """
        return await self._call_ack(
            "POST", _MULTICAST, "multicast", json=build_multicast_payload(multicast)
        )

    async def get_message_content(self, message_id: str) -> MessageContentResponse:
        """Baixa imagem, vídeo, áudio ou arquivo enviado pelo usuário.

        Raises:
            NotFoundError: Conteúdo expirado ou indisponível
        """
        return await self._download(_path(_MESSAGE_CONTENT, message_id), "get_message_content")

    # ──────────────────────────────────────────────────────────────────────
    # Perfis
    # ──────────────────────────────────────────────────────────────────────

    async def get_profile(self, user_id: str) -> UserProfileResponse:
        """Perfil de um usuário que adicionou o bot como amigo."""
        data = await self._call_json("GET", _path(_PROFILE, user_id), "get_profile")
        return _decode(UserProfileResponse, data)

    async def get_group_member_profile(
        self,
        group_id: str,
        user_id: str,
    ) -> UserProfileResponse:
        """Perfil de um membro de group (mesmo sem amizade com o bot)."""
        data = await self._call_json(
            "GET",
            _path(_GROUP_MEMBER_PROFILE, group_id, user_id),
            "get_group_member_profile",
        )
        return _decode(UserProfileResponse, data)

    async def get_room_member_profile(
        self,
        room_id: str,
        user_id: str,
    ) -> UserProfileResponse:
        data = await self._call_json(
            "GET",
            _path(_ROOM_MEMBER_PROFILE, room_id, user_id),
            "get_room_member_profile",
        )
        return _decode(UserProfileResponse, data)

    # ──────────────────────────────────────────────────────────────────────
    # Groups e rooms
    # ──────────────────────────────────────────────────────────────────────

    async def get_group_members_ids(
        self,
        group_id: str,
        start: str | None = None,
    ) -> MembersIdsResponse:
        """Uma página de ids de membros do group.

        Args:
            group_id: ID do group
            start: Continuation token de uma resposta anterior; None pede
                a primeira página

        Returns:
            Página com `next` (None quando não há mais páginas)
        """
        data = await self._call_json(
            "GET",
            _path(_GROUP_MEMBERS_IDS, group_id),
            "get_group_members_ids",
            params=_start_params(start),
        )
        return _decode(MembersIdsResponse, data)

    async def get_room_members_ids(
        self,
        room_id: str,
        start: str | None = None,
    ) -> MembersIdsResponse:
        """Uma página de ids de membros do room (ver get_group_members_ids)."""
        data = await self._call_json(
            "GET",
            _path(_ROOM_MEMBERS_IDS, room_id),
            "get_room_members_ids",
            params=_start_params(start),
        )
        return _decode(MembersIdsResponse, data)

    async def leave_group(self, group_id: str) -> BotApiResponse:
        return await self._call_ack("POST", _path(_LEAVE_GROUP, group_id), "leave_group")

    async def leave_room(self, room_id: str) -> BotApiResponse:
        return await self._call_ack("POST", _path(_LEAVE_ROOM, room_id), "leave_room")

    # ──────────────────────────────────────────────────────────────────────
    # Rich menus
    # ──────────────────────────────────────────────────────────────────────

    async def get_rich_menu(self, rich_menu_id: str) -> RichMenuResponse:
        data = await self._call_json("GET", _path(_RICH_MENU, rich_menu_id), "get_rich_menu")
        return _decode(RichMenuResponse, data)

    async def create_rich_menu(self, rich_menu: RichMenu) -> RichMenuIdResponse:
        """Cria rich menu; a imagem é enviada depois via set_rich_menu_image.

        Raises:
            QuotaExceededError: Limite de rich menus do bot atingido
        """
        data = await self._call_json(
            "POST",
            _RICH_MENU_CREATE,
            "create_rich_menu",
            json=build_rich_menu_payload(rich_menu),
        )
        return _decode(RichMenuIdResponse, data)

    async def delete_rich_menu(self, rich_menu_id: str) -> BotApiResponse:
        return await self._call_ack(
            "DELETE", _path(_RICH_MENU, rich_menu_id), "delete_rich_menu"
        )

    async def get_rich_menu_id_of_user(self, user_id: str) -> RichMenuIdResponse:
        """ID do rich menu vinculado ao usuário.

        Raises:
            NotFoundError: Nenhum rich menu vinculado
        """
        data = await self._call_json(
            "GET", _path(_USER_RICH_MENU, user_id), "get_rich_menu_id_of_user"
        )
        return _decode(RichMenuIdResponse, data)

    async def link_rich_menu_id_to_user(
        self,
        user_id: str,
        rich_menu_id: str,
    ) -> BotApiResponse:
        return await self._call_ack(
            "POST",
            _path(_USER_RICH_MENU_LINK, user_id, rich_menu_id),
            "link_rich_menu_id_to_user",
        )

    async def unlink_rich_menu_id_from_user(self, user_id: str) -> BotApiResponse:
        return await self._call_ack(
            "DELETE", _path(_USER_RICH_MENU, user_id), "unlink_rich_menu_id_from_user"
        )

    async def get_rich_menu_image(self, rich_menu_id: str) -> MessageContentResponse:
        return await self._download(
            _path(_RICH_MENU_CONTENT, rich_menu_id), "get_rich_menu_image"
        )

    async def set_rich_menu_image(
        self,
        rich_menu_id: str,
        content_type: RichMenuImageType | str,
        content: bytes,
    ) -> BotApiResponse:
        """Envia a imagem do rich menu.

        Args:
            rich_menu_id: ID do rich menu
            content_type: RichMenuImageType.JPEG ou RichMenuImageType.PNG;
                outros valores são repassados sem checagem e voltam da LINE
                como InvalidArgumentError
            content: Bytes da imagem
        """
        data, request_id = await self._transport.upload_bytes(
            self._settings.data_api_url(_path(_RICH_MENU_CONTENT, rich_menu_id)),
            operation="set_rich_menu_image",
            content=content,
            content_type=str(content_type),
        )
        return _to_bot_api_response(data, request_id)

    async def get_rich_menu_list(self) -> RichMenuListResponse:
        data = await self._call_json("GET", _RICH_MENU_LIST, "get_rich_menu_list")
        return _decode(RichMenuListResponse, data)


def _start_params(start: str | None) -> dict[str, str] | None:
    return {"start": start} if start is not None else None


def _decode(model: type[_ModelT], data: dict[str, Any]) -> _ModelT:
    """Valida o JSON no modelo; body fora do contrato é falha de transporte."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise TransportFailureError(f"Response inválido para {model.__name__}") from exc


def _to_bot_api_response(data: dict[str, Any], request_id: str | None) -> BotApiResponse:
    return _decode(BotApiResponse, {**data, "requestId": request_id})
