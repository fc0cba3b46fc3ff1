"""Builders para localização e sticker."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.line.messages import LocationMessage, StickerMessage


class LocationPayloadBuilder:
    def build(self, message: LocationMessage) -> dict[str, Any]:
        return {
            "title": message.title,
            "address": message.address,
            "latitude": message.latitude,
            "longitude": message.longitude,
        }


class StickerPayloadBuilder:
    def build(self, message: StickerMessage) -> dict[str, Any]:
        return {
            "packageId": message.package_id,
            "stickerId": message.sticker_id,
        }
