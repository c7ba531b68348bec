"""Turns ``UserAction`` commands into cursor, selection and clipboard effects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from cursor_engine.actions import ActionKind, UserAction
from cursor_engine.cursor import (
    CoordinateMapper,
    CoordinateRange,
    Cursor,
    VisibleText,
    resolve_mapper,
)
from cursor_engine.runtime import telemetry
from cursor_engine.runtime.config import EngineConfig

from .clipboard import Clipboard, ClipboardError, SystemClipboard, create_clipboard
from .selection import Selection

_LOGGER_NAME = "cursor_engine.typing"


@dataclass(slots=True)
class ActionResult:
    """Outcome returned from ``TypingBehaviour.handle_action``."""

    consumed: bool
    status: str = "ok"
    text_changed: bool = False
    message: Optional[str] = None


class TypingBehaviour:
    """Editing state machine for one single-line field.

    Owns a ``Cursor``, the current ``Selection``, the insert/overwrite flag
    and a clipboard handle. Every mutation goes through ``handle_action``;
    renderers read through ``render`` (or ``visible_text``/``cursor_column``).
    ``insert_enabled`` set means typed characters overwrite the one under
    the cursor.
    """

    def __init__(
        self,
        text: str = "",
        clipboard: Optional[Clipboard] = None,
        *,
        mapper: Optional[CoordinateMapper] = None,
        insert_mode: bool = False,
    ) -> None:
        self.cursor = Cursor(text, mapper=mapper)
        self.selection = Selection()
        self.insert_enabled = insert_mode
        self.clipboard: Clipboard = (
            clipboard if clipboard is not None else SystemClipboard()
        )
        self._handlers: Dict[ActionKind, Callable[[], None]] = {
            ActionKind.TOGGLE_INSERT: self._action_toggle_insert,
            ActionKind.REMOVE: self._action_backspace,
            ActionKind.DELETE: self._action_delete,
            ActionKind.CUT: self._action_cut,
            ActionKind.PASTE: self._action_paste,
            ActionKind.COPY: self._action_copy,
            ActionKind.CURSOR_LEFT: self._action_cursor_left,
            ActionKind.CURSOR_RIGHT: self._action_cursor_right,
            ActionKind.CURSOR_LEFT_SELECT: self._action_cursor_left_select,
            ActionKind.CURSOR_RIGHT_SELECT: self._action_cursor_right_select,
            ActionKind.TO_START: self._action_cursor_to_start,
            ActionKind.TO_START_SELECT: self._action_cursor_to_start_select,
            ActionKind.TO_END: self._action_cursor_to_end,
            ActionKind.TO_END_SELECT: self._action_cursor_to_end_select,
            ActionKind.SELECT_ALL: self._action_select_all,
            ActionKind.NULL: _noop,
        }

    @classmethod
    def from_config(
        cls,
        config: Optional[EngineConfig] = None,
        *,
        text: str = "",
        clipboard: Optional[Clipboard] = None,
    ) -> "TypingBehaviour":
        config = config or EngineConfig.from_env()
        return cls(
            text,
            clipboard if clipboard is not None else create_clipboard(config.clipboard),
            mapper=resolve_mapper(config.mapper),
            insert_mode=config.insert_mode,
        )

    # Data access

    @property
    def text(self) -> str:
        return self.cursor.text

    @property
    def position(self) -> int:
        return self.cursor.position

    def selected_text(self) -> str:
        bounds = self.selection.ordered()
        if bounds is None:
            return ""
        return self.cursor.get_substring(*bounds)

    # Rendering

    def render(self, width: int) -> VisibleText:
        """Run one windowing pass; text, selection and caret come from it."""

        return self.cursor.get_visible_text(width, self.selection.range)

    def visible_text(self, width: int) -> Tuple[str, Optional[Tuple[int, int]]]:
        view = self.render(width)
        return view.text, view.selection

    def cursor_column(self, width: int) -> int:
        return self.render(width).cursor_column

    # Dispatch

    def handle_action(self, action: UserAction) -> ActionResult:
        before = self.cursor.text
        with telemetry.span(
            f"typing::{action.kind.value}",
            logger_name=_LOGGER_NAME,
            component="typing",
            metadata={"position": self.cursor.position, "insert": self.insert_enabled},
        ) as handle:
            try:
                if action.kind is ActionKind.TYPING:
                    self._action_typing(action.char or "")
                else:
                    self._handlers[action.kind]()
            except ClipboardError as exc:
                telemetry.record_event(
                    "clipboard.error",
                    level="warning",
                    logger_name=_LOGGER_NAME,
                    data={"action": action.kind.value, "operation": exc.operation},
                )
                raise
            handle.add_metadata("selection", self.selection.range)

        if action.kind is ActionKind.NULL:
            return ActionResult(consumed=False, status="noop")
        message = None
        if action.kind is ActionKind.TOGGLE_INSERT:
            message = "overwrite" if self.insert_enabled else "insert"
        return ActionResult(
            consumed=True,
            status=action.kind.value,
            text_changed=self.cursor.text != before,
            message=message,
        )

    # Actions

    def _action_toggle_insert(self) -> None:
        self.selection.clear()
        self.insert_enabled = not self.insert_enabled

    def _action_typing(self, char: str) -> None:
        selected = self.selection.take()
        if selected is None:
            if self.insert_enabled:
                self.cursor.replace_char_at_cursor(char)
            else:
                self.cursor.insert_char_at_cursor(char)
            self.cursor.move_right()
            return
        self._delete_range(selected)
        self.cursor.insert_char_at_cursor(char)
        if not self.insert_enabled:
            self.cursor.move_right()

    def _action_backspace(self) -> None:
        self._action_remove(inplace=False)

    def _action_delete(self) -> None:
        self._action_remove(inplace=True)

    def _action_remove(self, *, inplace: bool) -> None:
        selected = self.selection.take()
        if selected is not None:
            self._delete_range(selected)
        elif inplace:
            self.cursor.delete_char_at_cursor()
        elif self.cursor.move_left():
            self.cursor.delete_char_at_cursor()

    def _action_cursor_left(self) -> None:
        self.selection.clear()
        self.cursor.move_left()

    def _action_cursor_right(self) -> None:
        self.selection.clear()
        self.cursor.move_right()

    def _action_cursor_left_select(self) -> None:
        previous = self.cursor.position
        self.cursor.move_left()
        self.selection.extend(previous, self.cursor.position)

    def _action_cursor_right_select(self) -> None:
        previous = self.cursor.position
        self.cursor.move_right()
        self.selection.extend(previous, self.cursor.position)

    def _action_cursor_to_start(self) -> None:
        self.selection.clear()
        self.cursor.move_to_start()

    def _action_cursor_to_end(self) -> None:
        self.selection.clear()
        self.cursor.move_to_end()

    def _action_cursor_to_start_select(self) -> None:
        stop = self.selection.stop
        if stop is None:
            stop = self.cursor.position
        self.cursor.move_to_start()
        self.selection.update(self.cursor.position, stop)

    def _action_cursor_to_end_select(self) -> None:
        start = self.selection.start
        if start is None:
            start = self.cursor.position
        self.cursor.move_to_end()
        self.selection.update(start, self.cursor.position)

    def _action_select_all(self) -> None:
        self.selection.update(0, self.cursor.length())

    def _action_cut(self) -> None:
        if not self.selection:
            return
        self._action_copy()
        self._action_backspace()

    def _action_copy(self) -> None:
        if self.selection:
            self.clipboard.set_text(self.selected_text())

    def _action_paste(self) -> None:
        pasted = self.clipboard.get_text()
        selected = self.selection.take()
        if selected is not None:
            self._delete_range(selected)
        end = self.cursor.insert_string_at_cursor(pasted)
        self.cursor.set_position(end)

    def _delete_range(self, bounds: CoordinateRange) -> None:
        start, stop = sorted(bounds)
        self.cursor.set_position(start)
        self.cursor.delete_string_at_cursor(stop)


def _noop() -> None:
    return None


__all__ = ["TypingBehaviour", "ActionResult"]
