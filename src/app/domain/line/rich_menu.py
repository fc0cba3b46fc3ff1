"""Modelos de definição de rich menu (lado request)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from app.constants.line import ActionType


@dataclass(frozen=True, slots=True)
class PostbackAction:
    """Ação que devolve `data` ao webhook como evento postback."""

    type: ClassVar[ActionType] = ActionType.POSTBACK

    data: str
    label: str | None = None
    display_text: str | None = None


@dataclass(frozen=True, slots=True)
class MessageAction:
    """Ação que envia `text` como mensagem do usuário."""

    type: ClassVar[ActionType] = ActionType.MESSAGE

    text: str
    label: str | None = None


@dataclass(frozen=True, slots=True)
class URIAction:
    """Ação que abre uma URI."""

    type: ClassVar[ActionType] = ActionType.URI

    uri: str
    label: str | None = None


Action = PostbackAction | MessageAction | URIAction


@dataclass(frozen=True, slots=True)
class RichMenuSize:
    """Dimensões da imagem do rich menu em pixels."""

    width: int
    height: int

    @classmethod
    def full(cls) -> RichMenuSize:
        return cls(width=2500, height=1686)

    @classmethod
    def half(cls) -> RichMenuSize:
        return cls(width=2500, height=843)


@dataclass(frozen=True, slots=True)
class RichMenuBounds:
    """Retângulo tocável, relativo ao canto superior esquerdo da imagem."""

    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class RichMenuArea:
    bounds: RichMenuBounds
    action: Action


@dataclass(frozen=True, slots=True)
class RichMenu:
    """Definição de rich menu enviada em create_rich_menu.

    Attributes:
        size: Dimensões da imagem
        selected: Se o menu abre expandido por padrão
        name: Nome interno (não exibido ao usuário)
        chat_bar_text: Texto exibido na barra do chat
        areas: Áreas tocáveis e suas ações
    """

    size: RichMenuSize
    selected: bool
    name: str
    chat_bar_text: str
    areas: tuple[RichMenuArea, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "areas", tuple(self.areas))
