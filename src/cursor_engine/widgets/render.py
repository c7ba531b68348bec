"""Styling of a rendered field line with rich."""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

from rich.style import Style
from rich.text import Text


class LineView(Protocol):
    """Anything carrying the windowed text, its selection and the caret index."""

    @property
    def text(self) -> str: ...

    @property
    def selection(self) -> Optional[Tuple[int, int]]: ...

    @property
    def cursor_index(self) -> int: ...


def inverted_selection(style: Optional[Style]) -> Style:
    """Selection style that swaps the foreground and background of ``style``."""

    if style is None or (style.color is None and style.bgcolor is None):
        return Style(reverse=True)
    return Style(color=style.bgcolor, bgcolor=style.color)


def render_line(
    view: LineView,
    *,
    style: Optional[Style] = None,
    selection_style: Optional[Style] = None,
    cursor_style: Optional[Style] = None,
) -> Text:
    """Split the visible text into unselected / selected / unselected spans.

    With ``cursor_style`` the character under the caret is highlighted too;
    a caret at the end of the text highlights a trailing space.
    """

    base = style or Style()
    line = Text(no_wrap=True, end="")
    if view.selection is None:
        line.append(view.text, base)
    else:
        start, stop = view.selection
        line.append(view.text[:start], base)
        selected = selection_style or inverted_selection(style)
        line.append(view.text[start:stop], selected)
        line.append(view.text[stop:], base)

    if cursor_style is not None:
        if view.cursor_index >= len(view.text):
            line.append(" ", cursor_style)
        else:
            line.stylize(cursor_style, view.cursor_index, view.cursor_index + 1)
    return line


__all__ = ["LineView", "inverted_selection", "render_line"]
