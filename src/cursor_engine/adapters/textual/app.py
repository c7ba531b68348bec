"""Executable Textual app that hosts a single-line text field.

Enter exits printing the field contents, Escape exits silently and Ctrl+Q
quits. Every other key goes through the field's keymap.
"""

from __future__ import annotations

import argparse
from typing import Any, Optional, Sequence, Tuple

from rich.style import Style
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Footer, Static

from cursor_engine.behaviour import TypingBehaviour
from cursor_engine.runtime import EngineConfig, telemetry
from cursor_engine.runtime.config import CLIPBOARD_NAMES, MAPPER_NAMES
from cursor_engine.widgets import TextInputState, render_line

from .controller import FieldView, TextualFieldAdapter, TextualUIHooks

_CURSOR_STYLE = Style(underline=True, bold=True)
_QUIT_KEY = "ctrl+q"

KeyTuple = Tuple[str, Optional[str], Tuple[str, ...]]


class CursorEngineApp(App[Optional[str]]):
    """One bordered text field with a mode/status line under it."""

    CSS = """
	#field {
		min-width: 10;
		height: 3;
		border: round $accent;
		padding: 0 1;
	}

	#status {
		dock: bottom;
		height: 1;
		color: $text-muted;
		padding: 0 1;
	}
	"""

    BINDINGS = [(_QUIT_KEY, "quit", "Quit")]

    def __init__(
        self, config: Optional[EngineConfig] = None, *, text: str = ""
    ) -> None:
        super().__init__()
        self.config = config or EngineConfig.from_env()
        self.initial_text = text
        self.adapter: TextualFieldAdapter | None = None
        self.last_status = ""

    def compose(self) -> ComposeResult:
        yield Static(id="field")
        yield Static(id="status")
        yield Footer()

    def on_mount(self) -> None:
        behaviour = TypingBehaviour.from_config(self.config, text=self.initial_text)
        self.adapter = TextualFieldAdapter(
            TextInputState(behaviour),
            TextualUIHooks(
                update_field=self._show_field,
                update_status=self._show_status,
                handle_event=self._on_input_event,
                log=self._log_line,
            ),
            width=self.config.width,
        )
        self._show_status(f"mapper={self.config.mapper}")

    def on_key(self, event: events.Key) -> None:
        stroke = self._normalize_key(event)
        if self.adapter is None or stroke is None:
            return
        key, text, modifiers = stroke
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()
        event.prevent_default()

    def _show_field(self, view: FieldView) -> None:
        line = render_line(view, cursor_style=_CURSOR_STYLE)
        self.query_one("#field", Static).update(line)

    def _show_status(self, status: str) -> None:
        self.last_status = status
        overwrite = self.adapter is not None and self.adapter.insert_mode
        mode = "OVR" if overwrite else "INS"
        self.query_one("#status", Static).update(f"[{mode}] {status}")

    def _on_input_event(self, name: str, payload: Any | None) -> None:
        if name == "input.submitted":
            self.exit(payload)
        elif name == "input.cancelled":
            self.exit(None)

    def _log_line(self, line: str) -> None:
        telemetry.record_event(
            "textual.key", level="debug", data={"line": line}, logger_name="textual"
        )

    @staticmethod
    def _normalize_key(event: events.Key) -> Optional[KeyTuple]:
        """Split Textual's ``"ctrl+shift+left"`` style key into a stroke."""

        if event.key == _QUIT_KEY:
            return None
        *prefix, key = event.key.split("+")
        modifiers = [mod for mod in prefix if mod]
        if event.is_printable and event.character:
            # Shift is already folded into the character.
            modifiers = [mod for mod in modifiers if mod != "shift"]
            return (event.character, event.character, tuple(modifiers))
        name = key if len(key) == 1 else key.upper()
        return (name, None, tuple(modifiers))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = EngineConfig.from_env()
    parser = argparse.ArgumentParser(description="Edit one line of text in Textual.")
    parser.add_argument("--text", default="", help="Initial field contents")
    parser.add_argument(
        "--mapper",
        choices=MAPPER_NAMES,
        default=defaults.mapper,
        help=f"Cursor coordinate unit (default: {defaults.mapper})",
    )
    parser.add_argument(
        "--clipboard",
        choices=CLIPBOARD_NAMES,
        default=defaults.clipboard,
        help=f"Clipboard backend (default: {defaults.clipboard})",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=defaults.width,
        help=f"Field width in terminal columns (default: {defaults.width})",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        default=defaults.insert_mode,
        help="Start in overwrite mode",
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> EngineConfig:
    return EngineConfig(
        mapper=args.mapper,
        clipboard=args.clipboard,
        insert_mode=args.overwrite,
        width=args.width,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    result = CursorEngineApp(config_from_args(args), text=args.text).run()
    if result is not None:
        print(result)


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
