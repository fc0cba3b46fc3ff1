"""Builders para mensagens de mídia (imagem, vídeo, áudio)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.line.messages import AudioMessage, ImageMessage, VideoMessage


def _build_media_object(
    original_content_url: str,
    preview_image_url: str,
) -> dict[str, Any]:
    return {
        "originalContentUrl": original_content_url,
        "previewImageUrl": preview_image_url,
    }


class ImagePayloadBuilder:
    def build(self, message: ImageMessage) -> dict[str, Any]:
        return _build_media_object(message.original_content_url, message.preview_image_url)


class VideoPayloadBuilder:
    def build(self, message: VideoMessage) -> dict[str, Any]:
        return _build_media_object(message.original_content_url, message.preview_image_url)


class AudioPayloadBuilder:
    """Áudio não tem preview; a duração é obrigatória para a LINE."""

    def build(self, message: AudioMessage) -> dict[str, Any]:
        return {
            "originalContentUrl": message.original_content_url,
            "duration": message.duration,
        }
