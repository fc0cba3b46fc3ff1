"""Contrato base dos builders de mensagem LINE."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.line.messages import Message


class PayloadBuilder(Protocol):
    """Converte um modelo de mensagem no objeto JSON da LINE."""

    def build(self, message: Message) -> dict[str, Any]: ...


def build_base_payload(message: Message) -> dict[str, Any]:
    """Campos comuns a todo objeto de mensagem."""
    return {"type": str(message.type)}
