"""Protocolos e contratos do client LINE."""

from .http_client import LineTransportProtocol
from .line_client import (
    GroupRoomOperations,
    LineMessagingClientProtocol,
    MessagingOperations,
    ProfileOperations,
    RichMenuOperations,
)
from .token_supplier import ChannelTokenSupplier

__all__ = [
    "ChannelTokenSupplier",
    "GroupRoomOperations",
    "LineMessagingClientProtocol",
    "LineTransportProtocol",
    "MessagingOperations",
    "ProfileOperations",
    "RichMenuOperations",
]
