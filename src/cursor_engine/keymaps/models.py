"""Dataclasses describing key strokes and the bindings that map them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from cursor_engine.actions import ActionKind


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def _normalize_key(key: str) -> str:
    # Named keys are case-insensitive, characters are not.
    return key.upper() if len(key) > 1 else key


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press coming from a host toolkit.

    ``key`` is either one character (``"a"``, ``"%"``) or a key name
    (``"LEFT"``, ``"BACKSPACE"``). ``text`` is the character the key would
    type, if any.
    """

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", _normalize_key(self.key))
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @property
    def has_command_modifier(self) -> bool:
        return any(mod in {"ctrl", "alt", "meta"} for mod in self.modifiers)

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"shift+LEFT"`` / ``"ctrl+c"`` style tokens."""

        cleaned = token.strip()
        if not cleaned:
            raise ValueError("token cannot be empty")
        head, _, key = cleaned.rpartition("+")
        if not key:
            key, head = "+", head[:-1]
        modifiers = tuple(head.split("+")) if head else ()
        return cls(key, modifiers)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key stroke with the action it produces."""

    id: str
    stroke: KeyStroke
    action: ActionKind
    description: str = ""
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if self.action is ActionKind.TYPING:
            raise ValueError("typing actions come from key text, not bindings")

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = ["KeyStroke", "Binding"]
