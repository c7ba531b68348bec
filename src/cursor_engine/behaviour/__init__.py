"""Selection handling, clipboard access and the typing state machine."""

from .clipboard import (
    Clipboard,
    ClipboardError,
    MemoryClipboard,
    SystemClipboard,
    create_clipboard,
)
from .selection import Selection
from .typing_behaviour import ActionResult, TypingBehaviour

__all__ = [
    "Clipboard",
    "ClipboardError",
    "MemoryClipboard",
    "SystemClipboard",
    "create_clipboard",
    "Selection",
    "ActionResult",
    "TypingBehaviour",
]
