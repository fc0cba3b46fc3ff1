"""Modelos de domínio da LINE Messaging API.

Requests são dataclasses imutáveis; responses são modelos Pydantic
decodificados do JSON da LINE.
"""

from app.domain.line.messages import (
    AudioMessage,
    ImageMessage,
    LocationMessage,
    Message,
    Multicast,
    PushMessage,
    ReplyMessage,
    StickerMessage,
    TextMessage,
    VideoMessage,
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
from app.domain.line.rich_menu import (
    Action,
    MessageAction,
    PostbackAction,
    RichMenu,
    RichMenuArea,
    RichMenuBounds,
    RichMenuSize,
    URIAction,
)

__all__ = [
    "Action",
    "AudioMessage",
    "BotApiResponse",
    "ImageMessage",
    "LocationMessage",
    "MembersIdsResponse",
    "Message",
    "MessageAction",
    "MessageContentResponse",
    "Multicast",
    "PostbackAction",
    "PushMessage",
    "ReplyMessage",
    "RichMenu",
    "RichMenuArea",
    "RichMenuBounds",
    "RichMenuIdResponse",
    "RichMenuListResponse",
    "RichMenuResponse",
    "RichMenuSize",
    "StickerMessage",
    "TextMessage",
    "URIAction",
    "UserProfileResponse",
    "VideoMessage",
]
