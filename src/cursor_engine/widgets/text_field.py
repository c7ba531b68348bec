"""State of an editable single-line field."""

from __future__ import annotations

from typing import Optional, Tuple

from cursor_engine.actions import UserAction
from cursor_engine.behaviour import ActionResult, TypingBehaviour
from cursor_engine.cursor import VisibleText
from cursor_engine.keymaps import KeymapRegistry, KeyStroke


class TextFieldState:
    """Thin wrapper giving a widget the behaviour's edit and render surface."""

    def __init__(self, behaviour: Optional[TypingBehaviour] = None) -> None:
        self.behaviour = behaviour or TypingBehaviour()

    @property
    def text(self) -> str:
        return self.behaviour.text

    def handle_action(self, action: Optional[UserAction]) -> Optional[ActionResult]:
        if action is None:
            return None
        return self.behaviour.handle_action(action)

    def render(self, width: int) -> VisibleText:
        return self.behaviour.render(width)

    def visible_text(self, width: int) -> Tuple[str, Optional[Tuple[int, int]]]:
        return self.behaviour.visible_text(width)

    def cursor_location(self, width: int) -> int:
        return self.behaviour.cursor_column(width)


def convert_field_key(stroke: KeyStroke, registry: KeymapRegistry) -> UserAction:
    return registry.resolve(stroke)


__all__ = ["TextFieldState", "convert_field_key"]
