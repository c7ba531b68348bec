"""Clipboard collaborators injected into ``TypingBehaviour``."""

from __future__ import annotations

from typing import Optional, Protocol

import pyperclip


class ClipboardError(RuntimeError):
    """Raised when the clipboard cannot be read or written."""

    def __init__(self, message: str, *, operation: str) -> None:
        super().__init__(message)
        self.operation = operation


class Clipboard(Protocol):
    """Two-method contract every clipboard backend satisfies."""

    def get_text(self) -> str:
        ...

    def set_text(self, text: str) -> None:
        ...


class SystemClipboard:
    """OS clipboard via pyperclip."""

    def get_text(self) -> str:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(
                f"Clipboard unavailable: {exc}", operation="get_text"
            ) from exc

    def set_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(
                f"Clipboard unavailable: {exc}", operation="set_text"
            ) from exc


class MemoryClipboard:
    """Process-local clipboard, for tests and hosts without an OS clipboard."""

    def __init__(self, text: Optional[str] = None) -> None:
        self._text = text

    def get_text(self) -> str:
        if self._text is None:
            raise ClipboardError("Clipboard is empty", operation="get_text")
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text


def create_clipboard(name: str) -> Clipboard:
    if name == "system":
        return SystemClipboard()
    if name == "memory":
        return MemoryClipboard()
    raise ValueError(f"Unknown clipboard backend '{name}'")


__all__ = [
    "Clipboard",
    "ClipboardError",
    "SystemClipboard",
    "MemoryClipboard",
    "create_clipboard",
]
