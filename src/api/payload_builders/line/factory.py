"""Factory para obter o builder correto por tipo de mensagem."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.line.base import PayloadBuilder, build_base_payload
from api.payload_builders.line.location import (
    LocationPayloadBuilder,
    StickerPayloadBuilder,
)
from api.payload_builders.line.media import (
    AudioPayloadBuilder,
    ImagePayloadBuilder,
    VideoPayloadBuilder,
)
from api.payload_builders.line.text import TextPayloadBuilder
from app.constants.line import MessageType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.line.messages import Message

# Mapeamento de tipo de mensagem para builder
_BUILDERS: dict[MessageType, PayloadBuilder] = {
    MessageType.TEXT: TextPayloadBuilder(),
    MessageType.IMAGE: ImagePayloadBuilder(),
    MessageType.VIDEO: VideoPayloadBuilder(),
    MessageType.AUDIO: AudioPayloadBuilder(),
    MessageType.LOCATION: LocationPayloadBuilder(),
    MessageType.STICKER: StickerPayloadBuilder(),
}


def get_payload_builder(message_type: MessageType) -> PayloadBuilder | None:
    """Retorna o builder para o tipo de mensagem (None se não suportado)."""
    return _BUILDERS.get(message_type)


def build_message_payload(message: Message) -> dict[str, Any]:
    """Constrói o objeto JSON de uma mensagem.

    Raises:
        ValueError: Se tipo de mensagem não suportado
    """
    msg_type = MessageType(message.type)
    builder = get_payload_builder(msg_type)

    if builder is None:
        raise ValueError(f"Tipo de mensagem não suportado: {msg_type}")

    payload = build_base_payload(message)
    payload.update(builder.build(message))
    return payload


def build_messages_payload(messages: Iterable[Message]) -> list[dict[str, Any]]:
    """Serializa a lista de mensagens preservando a ordem."""
    return [build_message_payload(message) for message in messages]
