"""Widget state for text fields and text inputs."""

from .render import LineView, inverted_selection, render_line
from .text_field import TextFieldState, convert_field_key
from .text_input import (
    InputKind,
    TextInputAction,
    TextInputEvent,
    TextInputEventKind,
    TextInputState,
    convert_input_key,
)

__all__ = [
    "TextFieldState",
    "convert_field_key",
    "InputKind",
    "TextInputAction",
    "TextInputEvent",
    "TextInputEventKind",
    "TextInputState",
    "convert_input_key",
    "LineView",
    "inverted_selection",
    "render_line",
]
