"""Modelos de mensagem outbound da LINE.

Value objects imutáveis construídos pelo chamador. Nenhuma validação
local é feita: limites de tamanho, URLs e ids são verificados pela LINE.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from app.constants.line import MessageType


@dataclass(frozen=True, slots=True)
class TextMessage:
    """Mensagem de texto simples."""

    type: ClassVar[MessageType] = MessageType.TEXT

    text: str


@dataclass(frozen=True, slots=True)
class ImageMessage:
    """Imagem hospedada em URL HTTPS."""

    type: ClassVar[MessageType] = MessageType.IMAGE

    original_content_url: str
    preview_image_url: str


@dataclass(frozen=True, slots=True)
class VideoMessage:
    """Vídeo hospedado em URL HTTPS com imagem de preview."""

    type: ClassVar[MessageType] = MessageType.VIDEO

    original_content_url: str
    preview_image_url: str


@dataclass(frozen=True, slots=True)
class AudioMessage:
    """Áudio hospedado em URL HTTPS.

    Attributes:
        original_content_url: URL do arquivo m4a
        duration: Duração em milissegundos
    """

    type: ClassVar[MessageType] = MessageType.AUDIO

    original_content_url: str
    duration: int


@dataclass(frozen=True, slots=True)
class LocationMessage:
    """Localização com título e endereço."""

    type: ClassVar[MessageType] = MessageType.LOCATION

    title: str
    address: str
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class StickerMessage:
    """Sticker identificado por pacote e id."""

    type: ClassVar[MessageType] = MessageType.STICKER

    package_id: str
    sticker_id: str


Message = (
    TextMessage
    | ImageMessage
    | VideoMessage
    | AudioMessage
    | LocationMessage
    | StickerMessage
)


@dataclass(frozen=True, slots=True)
class ReplyMessage:
    """Resposta a um evento inbound via reply token (uso único)."""

    reply_token: str
    messages: tuple[Message, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))


@dataclass(frozen=True, slots=True)
class PushMessage:
    """Mensagem enviada a qualquer momento para um user, group ou room."""

    to: str
    messages: tuple[Message, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))


@dataclass(frozen=True, slots=True)
class Multicast:
    """Mesma mensagem para vários user ids (group/room ids são rejeitados pela LINE)."""

    to: tuple[str, ...]
    messages: tuple[Message, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "to", tuple(self.to))
        object.__setattr__(self, "messages", tuple(self.messages))
