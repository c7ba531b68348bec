"""Cursor, coordinate policies, and the windowing algorithm."""

from .cursor import CoordinateRange, Cursor, VisibleText
from .mapper import (
    CodepointMapper,
    CoordinateMapper,
    CursorCoordinate,
    GraphemeMapper,
    resolve_mapper,
)
from .validation import InvalidCursorPosition, clamp_position, ensure_position
from .width import char_width, display_width
from .window import TextWindow, compute_window, max_reach, min_reach

__all__ = [
    "Cursor",
    "CoordinateRange",
    "VisibleText",
    "CursorCoordinate",
    "CoordinateMapper",
    "CodepointMapper",
    "GraphemeMapper",
    "resolve_mapper",
    "InvalidCursorPosition",
    "ensure_position",
    "clamp_position",
    "char_width",
    "display_width",
    "TextWindow",
    "compute_window",
    "max_reach",
    "min_reach",
]
