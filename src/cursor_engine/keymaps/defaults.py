"""Built-in bindings for single-line text fields."""

from __future__ import annotations

from typing import Iterable, Sequence

from cursor_engine.actions import ActionKind

from .models import Binding, KeyStroke
from .registry import KeymapRegistry


def _bind(token: str, action: ActionKind, description: str) -> Binding:
    return Binding(
        id=f"field.{action.value}",
        stroke=KeyStroke.parse(token),
        action=action,
        description=description,
        source="defaults",
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("BACKSPACE", ActionKind.REMOVE, "Delete the character before the cursor"),
    _bind("DELETE", ActionKind.DELETE, "Delete the character under the cursor"),
    _bind("INSERT", ActionKind.TOGGLE_INSERT, "Toggle overwrite mode"),
    _bind("LEFT", ActionKind.CURSOR_LEFT, "Move left"),
    _bind("RIGHT", ActionKind.CURSOR_RIGHT, "Move right"),
    _bind("shift+LEFT", ActionKind.CURSOR_LEFT_SELECT, "Extend selection left"),
    _bind("shift+RIGHT", ActionKind.CURSOR_RIGHT_SELECT, "Extend selection right"),
    _bind("HOME", ActionKind.TO_START, "Jump to start of line"),
    _bind("END", ActionKind.TO_END, "Jump to end of line"),
    _bind("shift+HOME", ActionKind.TO_START_SELECT, "Select to start of line"),
    _bind("shift+END", ActionKind.TO_END_SELECT, "Select to end of line"),
    _bind("ctrl+c", ActionKind.COPY, "Copy selection"),
    _bind("ctrl+v", ActionKind.PASTE, "Paste clipboard"),
    _bind("ctrl+x", ActionKind.CUT, "Cut selection"),
    _bind("ctrl+a", ActionKind.SELECT_ALL, "Select everything"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in field bindings, then any ``extra_bindings``."""

    excluded = set(exclude_bindings or ())
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["load_default_keymaps", "DEFAULT_BINDINGS"]
