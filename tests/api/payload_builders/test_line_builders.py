"""Testes para api.payload_builders.line.

Cobre: factory por tipo, envelopes reply/push/multicast e rich menu.
"""

from __future__ import annotations

import pytest

from api.payload_builders.line import (
    build_action_payload,
    build_message_payload,
    build_multicast_payload,
    build_push_payload,
    build_reply_payload,
    build_rich_menu_payload,
    get_payload_builder,
)
from api.payload_builders.line.location import StickerPayloadBuilder
from app.constants.line import MessageType
from app.domain.line import (
    AudioMessage,
    ImageMessage,
    LocationMessage,
    MessageAction,
    Multicast,
    PostbackAction,
    PushMessage,
    ReplyMessage,
    RichMenu,
    RichMenuArea,
    RichMenuBounds,
    RichMenuSize,
    StickerMessage,
    TextMessage,
    URIAction,
    VideoMessage,
)


class TestBuildMessagePayload:
    """Um objeto JSON por tipo de mensagem."""

    def test_text(self) -> None:
        assert build_message_payload(TextMessage(text="Olá")) == {"type": "text", "text": "Olá"}

    def test_image(self) -> None:
        payload = build_message_payload(
            ImageMessage(
                original_content_url="https://cdn.test/a.jpg",
                preview_image_url="https://cdn.test/a_p.jpg",
            )
        )
        assert payload == {
            "type": "image",
            "originalContentUrl": "https://cdn.test/a.jpg",
            "previewImageUrl": "https://cdn.test/a_p.jpg",
        }

    def test_video_has_preview(self) -> None:
        payload = build_message_payload(
            VideoMessage(
                original_content_url="https://cdn.test/v.mp4",
                preview_image_url="https://cdn.test/v.jpg",
            )
        )
        assert payload["type"] == "video"
        assert payload["previewImageUrl"] == "https://cdn.test/v.jpg"

    def test_audio_has_duration_and_no_preview(self) -> None:
        payload = build_message_payload(
            AudioMessage(original_content_url="https://cdn.test/a.m4a", duration=60000)
        )
        assert payload == {
            "type": "audio",
            "originalContentUrl": "https://cdn.test/a.m4a",
            "duration": 60000,
        }

    def test_location(self) -> None:
        payload = build_message_payload(
            LocationMessage(title="Escritório", address="Tóquio", latitude=35.65, longitude=139.7)
        )
        assert payload["type"] == "location"
        assert payload["latitude"] == 35.65
        assert payload["longitude"] == 139.7

    def test_sticker(self) -> None:
        payload = build_message_payload(StickerMessage(package_id="1", sticker_id="2"))
        assert payload == {"type": "sticker", "packageId": "1", "stickerId": "2"}

    def test_get_payload_builder_by_type(self) -> None:
        assert isinstance(get_payload_builder(MessageType.STICKER), StickerPayloadBuilder)


class TestEnvelopes:
    """reply/push/multicast preservam ordem e não validam ids."""

    def test_reply_payload(self) -> None:
        reply = ReplyMessage(
            reply_token="rtok",
            messages=[TextMessage(text="a"), TextMessage(text="b")],
        )
        payload = build_reply_payload(reply)
        assert payload["replyToken"] == "rtok"
        assert [m["text"] for m in payload["messages"]] == ["a", "b"]

    def test_push_payload(self) -> None:
        payload = build_push_payload(PushMessage(to="U123", messages=[TextMessage(text="oi")]))
        assert payload == {"to": "U123", "messages": [{"type": "text", "text": "oi"}]}

    def test_multicast_payload_keeps_group_ids(self) -> None:
        """Ids de group passam adiante: quem rejeita é a LINE."""
        multicast = Multicast(to=["U1", "C-group"], messages=[TextMessage(text="x")])
        payload = build_multicast_payload(multicast)
        assert payload["to"] == ["U1", "C-group"]

    def test_request_models_are_immutable(self) -> None:
        push = PushMessage(to="U1", messages=[TextMessage(text="x")])
        assert isinstance(push.messages, tuple)
        with pytest.raises(AttributeError):
            push.to = "U2"  # type: ignore[misc]


class TestRichMenuPayload:
    def test_full_menu(self) -> None:
        rich_menu = RichMenu(
            size=RichMenuSize.full(),
            selected=True,
            name="principal",
            chat_bar_text="Menu",
            areas=[
                RichMenuArea(
                    bounds=RichMenuBounds(x=0, y=0, width=1250, height=1686),
                    action=PostbackAction(data="action=buy", label="Comprar"),
                ),
                RichMenuArea(
                    bounds=RichMenuBounds(x=1250, y=0, width=1250, height=1686),
                    action=URIAction(uri="https://example.test"),
                ),
            ],
        )

        payload = build_rich_menu_payload(rich_menu)

        assert payload["size"] == {"width": 2500, "height": 1686}
        assert payload["selected"] is True
        assert payload["chatBarText"] == "Menu"
        assert payload["areas"][0]["bounds"] == {"x": 0, "y": 0, "width": 1250, "height": 1686}
        assert payload["areas"][0]["action"] == {
            "type": "postback",
            "data": "action=buy",
            "label": "Comprar",
        }
        assert payload["areas"][1]["action"] == {"type": "uri", "uri": "https://example.test"}

    def test_half_size(self) -> None:
        assert RichMenuSize.half() == RichMenuSize(width=2500, height=843)

    def test_postback_display_text(self) -> None:
        payload = build_action_payload(PostbackAction(data="d", display_text="Ver"))
        assert payload == {"type": "postback", "data": "d", "displayText": "Ver"}

    def test_message_action(self) -> None:
        payload = build_action_payload(MessageAction(text="ajuda", label="Ajuda"))
        assert payload == {"type": "message", "text": "ajuda", "label": "Ajuda"}
