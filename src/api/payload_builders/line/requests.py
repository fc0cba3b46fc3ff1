"""Builders dos envelopes reply, push e multicast."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.line.factory import build_messages_payload

if TYPE_CHECKING:
    from app.domain.line.messages import Multicast, PushMessage, ReplyMessage


def build_reply_payload(reply: ReplyMessage) -> dict[str, Any]:
    return {
        "replyToken": reply.reply_token,
        "messages": build_messages_payload(reply.messages),
    }


def build_push_payload(push: PushMessage) -> dict[str, Any]:
    return {
        "to": push.to,
        "messages": build_messages_payload(push.messages),
    }


def build_multicast_payload(multicast: Multicast) -> dict[str, Any]:
    """Ids de group/room não são filtrados aqui; a LINE rejeita a chamada."""
    return {
        "to": list(multicast.to),
        "messages": build_messages_payload(multicast.messages),
    }
