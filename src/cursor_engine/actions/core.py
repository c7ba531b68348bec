"""Normalized editing commands consumed by ``TypingBehaviour``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ActionKind(str, Enum):
    """Every command an input translator may produce."""

    TOGGLE_INSERT = "toggle_insert"
    TYPING = "typing"
    REMOVE = "remove"
    DELETE = "delete"
    CUT = "cut"
    PASTE = "paste"
    COPY = "copy"
    CURSOR_LEFT = "cursor_left"
    CURSOR_RIGHT = "cursor_right"
    CURSOR_LEFT_SELECT = "cursor_left_select"
    CURSOR_RIGHT_SELECT = "cursor_right_select"
    TO_START = "to_start"
    TO_START_SELECT = "to_start_select"
    TO_END = "to_end"
    TO_END_SELECT = "to_end_select"
    SELECT_ALL = "select_all"
    NULL = "null"


@dataclass(frozen=True, slots=True)
class UserAction:
    """A single command; ``char`` is set for ``TYPING`` and only then."""

    kind: ActionKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is ActionKind.TYPING:
            if self.char is None or len(self.char) != 1:
                raise ValueError("TYPING actions carry exactly one character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} actions do not carry a character")

    @classmethod
    def typing(cls, char: str) -> "UserAction":
        return cls(ActionKind.TYPING, char)

    @classmethod
    def of(cls, kind: ActionKind) -> "UserAction":
        return cls(kind)

    def __str__(self) -> str:
        if self.kind is ActionKind.TYPING:
            return f"typing({self.char!r})"
        return self.kind.value


NULL_ACTION = UserAction(ActionKind.NULL)


__all__ = ["ActionKind", "UserAction", "NULL_ACTION"]
