"""Builders de payload para a LINE Messaging API.

Converte os modelos de app/domain/line nos objetos JSON da LINE,
um builder por tipo de mensagem.
"""

from api.payload_builders.line.base import PayloadBuilder, build_base_payload
from api.payload_builders.line.factory import (
    build_message_payload,
    build_messages_payload,
    get_payload_builder,
)
from api.payload_builders.line.requests import (
    build_multicast_payload,
    build_push_payload,
    build_reply_payload,
)
from api.payload_builders.line.rich_menu import (
    build_action_payload,
    build_rich_menu_payload,
)

__all__ = [
    "PayloadBuilder",
    "build_action_payload",
    "build_base_payload",
    "build_message_payload",
    "build_messages_payload",
    "build_multicast_payload",
    "build_push_payload",
    "build_reply_payload",
    "build_rich_menu_payload",
    "get_payload_builder",
]
