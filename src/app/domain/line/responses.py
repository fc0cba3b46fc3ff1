"""Modelos de resposta da LINE Messaging API.

Decodificados a partir do JSON (camelCase) devolvido pela LINE.
Campos desconhecidos são ignorados para tolerar evolução da API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LineResponseModel(BaseModel):
    """Base imutável com aliases camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class BotApiResponse(LineResponseModel):
    """Ack genérico das operações sem payload de retorno."""

    message: str = Field(default="", description="Mensagem devolvida pela LINE (vazia em sucesso).")
    details: list[str] = Field(default_factory=list, description="Detalhes adicionais.")
    request_id: str | None = Field(
        default=None,
        description="Valor do header X-Line-Request-Id da resposta.",
    )


class UserProfileResponse(LineResponseModel):
    """Perfil de um usuário (amigo, membro de group ou room)."""

    display_name: str = Field(..., description="Nome de exibição.")
    user_id: str = Field(..., description="ID do usuário.")
    picture_url: str | None = Field(default=None, description="URL da foto de perfil.")
    status_message: str | None = Field(default=None, description="Mensagem de status.")


class MembersIdsResponse(LineResponseModel):
    """Página de ids de membros de um group/room."""

    member_ids: list[str] = Field(default_factory=list, description="IDs da página atual.")
    next: str | None = Field(
        default=None,
        description="Continuation token da próxima página; None indica fim.",
    )


class RichMenuSizeResponse(LineResponseModel):
    width: int
    height: int


class RichMenuBoundsResponse(LineResponseModel):
    x: int
    y: int
    width: int
    height: int


class RichMenuAreaResponse(LineResponseModel):
    bounds: RichMenuBoundsResponse
    action: dict[str, Any] = Field(default_factory=dict, description="Ação no formato da LINE.")


class RichMenuResponse(LineResponseModel):
    """Rich menu completo, como armazenado pela LINE."""

    rich_menu_id: str = Field(..., description="ID do rich menu.")
    size: RichMenuSizeResponse
    selected: bool = False
    name: str = ""
    chat_bar_text: str = ""
    areas: list[RichMenuAreaResponse] = Field(default_factory=list)


class RichMenuListResponse(LineResponseModel):
    """Todos os rich menus do bot."""

    richmenus: list[RichMenuResponse] = Field(default_factory=list)


class RichMenuIdResponse(LineResponseModel):
    rich_menu_id: str = Field(..., description="ID do rich menu.")


@dataclass(frozen=True, slots=True)
class MessageContentResponse:
    """Conteúdo binário (mídia de mensagem ou imagem de rich menu).

    Attributes:
        content: Bytes do conteúdo
        mime_type: Content-Type informado pela LINE
        length: Tamanho em bytes
    """

    content: bytes
    mime_type: str | None
    length: int
