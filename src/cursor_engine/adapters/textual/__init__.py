"""Textual host integration."""

from .controller import FieldView, TextualFieldAdapter, TextualUIHooks

__all__ = ["FieldView", "TextualFieldAdapter", "TextualUIHooks"]
