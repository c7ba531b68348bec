"""A text field that can also be submitted or cancelled."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from cursor_engine.actions import NULL_ACTION, UserAction
from cursor_engine.behaviour import ActionResult, TypingBehaviour
from cursor_engine.cursor import VisibleText
from cursor_engine.keymaps import KeymapRegistry, KeyStroke

from .text_field import TextFieldState, convert_field_key

SUBMIT_KEYS = frozenset({"ENTER", "RETURN"})
CANCEL_KEYS = frozenset({"ESC", "ESCAPE"})


class InputKind(str, Enum):
    ESC = "esc"
    ENTER = "enter"
    OTHER = "other"
    NULL = "null"


@dataclass(frozen=True, slots=True)
class TextInputAction:
    """Command for a text input: submit, cancel, or an editing action."""

    kind: InputKind
    action: Optional[UserAction] = None

    @classmethod
    def other(cls, action: UserAction) -> "TextInputAction":
        return cls(InputKind.OTHER, action)

    def to_user_action(self) -> UserAction:
        if self.kind is InputKind.OTHER and self.action is not None:
            return self.action
        return NULL_ACTION


class TextInputEventKind(str, Enum):
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"
    TYPING = "typing"


@dataclass(frozen=True, slots=True)
class TextInputEvent:
    """What happened to the input; ``result`` is set for editing actions."""

    kind: TextInputEventKind
    text: Optional[str] = None
    result: Optional[ActionResult] = None


class TextInputState:
    """Wraps a ``TextFieldState`` and reports submit/cancel to the host."""

    def __init__(self, behaviour: Optional[TypingBehaviour] = None) -> None:
        self.field = TextFieldState(behaviour)

    @property
    def text(self) -> str:
        return self.field.text

    def handle_action(self, action: Optional[TextInputAction]) -> TextInputEvent:
        if action is None:
            return TextInputEvent(TextInputEventKind.TYPING)
        if action.kind is InputKind.ESC:
            return TextInputEvent(TextInputEventKind.CANCELLED)
        if action.kind is InputKind.ENTER:
            return TextInputEvent(TextInputEventKind.SUBMITTED, self.field.text)
        result = self.field.handle_action(action.to_user_action())
        return TextInputEvent(TextInputEventKind.TYPING, result=result)

    def render(self, width: int) -> VisibleText:
        return self.field.render(width)

    def visible_text(self, width: int) -> Tuple[str, Optional[Tuple[int, int]]]:
        return self.field.visible_text(width)

    def cursor_location(self, width: int) -> int:
        return self.field.cursor_location(width)


def convert_input_key(stroke: KeyStroke, registry: KeymapRegistry) -> TextInputAction:
    if stroke.key in CANCEL_KEYS:
        return TextInputAction(InputKind.ESC)
    if stroke.key in SUBMIT_KEYS:
        return TextInputAction(InputKind.ENTER)
    return TextInputAction.other(convert_field_key(stroke, registry))


__all__ = [
    "InputKind",
    "TextInputAction",
    "TextInputEvent",
    "TextInputEventKind",
    "TextInputState",
    "convert_input_key",
]
