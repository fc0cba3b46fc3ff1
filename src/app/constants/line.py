"""Enums e constantes de domínio da LINE Messaging API."""

from __future__ import annotations

from enum import StrEnum


class MessageType(StrEnum):
    """Tipos de mensagem outbound suportados."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    LOCATION = "location"
    STICKER = "sticker"


class ActionType(StrEnum):
    """Tipos de ação associáveis a uma área de rich menu."""

    POSTBACK = "postback"
    MESSAGE = "message"
    URI = "uri"


class RichMenuImageType(StrEnum):
    """Content types aceitos pela LINE para imagem de rich menu."""

    JPEG = "image/jpeg"
    PNG = "image/png"


# Headers de resposta/requisição relevantes
REQUEST_ID_HEADER = "X-Line-Request-Id"
CORRELATION_ID_HEADER = "X-Correlation-Id"

