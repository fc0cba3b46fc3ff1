"""Builder da definição de rich menu."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.line import ActionType

if TYPE_CHECKING:
    from app.domain.line.rich_menu import Action, RichMenu, RichMenuArea


def build_action_payload(action: Action) -> dict[str, Any]:
    """Serializa uma ação omitindo campos opcionais vazios."""
    action_type = ActionType(action.type)
    payload: dict[str, Any] = {"type": str(action_type)}
    if action_type is ActionType.POSTBACK:
        payload["data"] = action.data
        if action.display_text is not None:
            payload["displayText"] = action.display_text
    elif action_type is ActionType.MESSAGE:
        payload["text"] = action.text
    elif action_type is ActionType.URI:
        payload["uri"] = action.uri

    if action.label is not None:
        payload["label"] = action.label
    return payload


def _build_area(area: RichMenuArea) -> dict[str, Any]:
    bounds = area.bounds
    return {
        "bounds": {
            "x": bounds.x,
            "y": bounds.y,
            "width": bounds.width,
            "height": bounds.height,
        },
        "action": build_action_payload(area.action),
    }


def build_rich_menu_payload(rich_menu: RichMenu) -> dict[str, Any]:
    return {
        "size": {
            "width": rich_menu.size.width,
            "height": rich_menu.size.height,
        },
        "selected": rich_menu.selected,
        "name": rich_menu.name,
        "chatBarText": rich_menu.chat_bar_text,
        "areas": [_build_area(area) for area in rich_menu.areas],
    }
