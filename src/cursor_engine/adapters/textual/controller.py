"""Textual adapter that feeds key events into a text input and reports views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from cursor_engine.behaviour import ClipboardError
from cursor_engine.keymaps import KeymapRegistry, KeyStroke, load_default_keymaps
from cursor_engine.widgets import (
    TextInputEvent,
    TextInputEventKind,
    TextInputState,
    convert_input_key,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(frozen=True, slots=True)
class FieldView:
    """Everything a host needs to paint the field, from one windowing pass."""

    text: str
    selection: Optional[Tuple[int, int]]
    cursor_index: int
    cursor_column: int
    insert_mode: bool
    full_text: str


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_field: Callable[[FieldView], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualFieldAdapter:
    """Bridges Textual key events to a ``TextInputState``."""

    def __init__(
        self,
        state: TextInputState,
        hooks: TextualUIHooks,
        *,
        registry: Optional[KeymapRegistry] = None,
        width: int = 40,
    ) -> None:
        self.state = state
        self.hooks = hooks
        if registry is None:
            registry = KeymapRegistry(logger_name="cursor_engine.keymaps")
            load_default_keymaps(registry)
        self.registry = registry
        self.width = width
        self._refresh_field()

    @property
    def insert_mode(self) -> bool:
        return self.state.field.behaviour.insert_enabled

    def resize(self, width: int) -> None:
        if width < 0:
            raise ValueError("width must not be negative")
        self.width = width
        self._refresh_field()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[TextInputEvent]:
        """Translate a key into a command, apply it, and push the new view.

        Returns ``None`` when the clipboard refused the command; the failure
        is shown on the status line and the field is left as it was.
        """

        stroke = KeyStroke(key, tuple(modifiers), text)
        action = convert_input_key(stroke, self.registry)
        self._log_state("key ->", token=stroke.token, action=action.kind.value)
        try:
            event = self.state.handle_action(action)
        except ClipboardError as exc:
            self.hooks.update_status(f"clipboard_error: {exc}")
            self._log_state("error <-", operation=exc.operation)
            return None

        self._after_event(event)
        return event

    def _after_event(self, event: TextInputEvent) -> None:
        if event.kind is TextInputEventKind.SUBMITTED:
            self.hooks.handle_event("input.submitted", event.text)
            self.hooks.update_status("submitted")
        elif event.kind is TextInputEventKind.CANCELLED:
            self.hooks.handle_event("input.cancelled", None)
            self.hooks.update_status("cancelled")
        elif event.result is not None and event.result.consumed:
            self.hooks.update_status(event.result.message or event.result.status)
            if event.result.text_changed:
                self.hooks.handle_event("input.changed", self.state.text)
        self._refresh_field()
        self._log_state("event <-", kind=event.kind.value)

    def _refresh_field(self) -> None:
        view = self.state.render(self.width)
        self.hooks.update_field(
            FieldView(
                text=view.text,
                selection=view.selection,
                cursor_index=view.cursor_index,
                cursor_column=view.cursor_column,
                insert_mode=self.insert_mode,
                full_text=self.state.text,
            )
        )

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        behaviour = self.state.field.behaviour
        return {
            "position": behaviour.position,
            "selection": behaviour.selection.range,
            "insert": behaviour.insert_enabled,
            "window_start": behaviour.cursor.window_start,
            "width": self.width,
        }


__all__ = ["TextualFieldAdapter", "TextualUIHooks", "FieldView"]
