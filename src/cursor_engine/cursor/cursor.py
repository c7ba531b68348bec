"""Single-line text buffer with a cursor and a remembered view window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from cursor_engine.runtime import telemetry

from .mapper import CodepointMapper, CoordinateMapper, CursorCoordinate
from .validation import clamp_position, ensure_position
from .width import display_width
from .window import TextWindow, compute_window

CoordinateRange = Tuple[CursorCoordinate, CursorCoordinate]


@dataclass(frozen=True, slots=True)
class VisibleText:
    """What a renderer needs for one frame of a text field.

    ``selection`` and ``cursor_index`` are ``str`` indices into ``text``;
    ``cursor_column`` is the caret's on-screen column inside ``text``.
    """

    text: str
    cursor_index: int
    cursor_column: int
    selection: Optional[Tuple[int, int]]
    window: TextWindow


class Cursor:
    """Owns the text of one editable field and the caret inside it.

    Positions are ``CursorCoordinate`` values in the unit of the injected
    mapper. Movement is clamped and never fails; only ``set_position``
    rejects out-of-range input.
    """

    def __init__(
        self, text: str = "", *, mapper: Optional[CoordinateMapper] = None
    ) -> None:
        self._text = text
        self._mapper: CoordinateMapper = mapper or CodepointMapper()
        self._position = CursorCoordinate(0)
        self._window_start = CursorCoordinate(0)
        self._last_view: Optional[Tuple[tuple, VisibleText]] = None

    # Data access

    @property
    def text(self) -> str:
        return self._text

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def position(self) -> CursorCoordinate:
        return self._position

    @property
    def window_start(self) -> CursorCoordinate:
        return self._window_start

    def get_position(self) -> CursorCoordinate:
        return self._position

    def length(self) -> CursorCoordinate:
        return self._mapper.length(self._text)

    def get_substring(self, start: int, stop: int) -> str:
        first = self._index(start)
        second = self._index(stop)
        return self._text[first:second]

    def get_visible_text(
        self, width: int, selection: Optional[CoordinateRange] = None
    ) -> VisibleText:
        """Window the text for ``width`` columns and describe the frame.

        Repeated calls with the same text, caret, width and selection return
        the same frame, so callers asking for pieces of it separately always
        see one windowing pass.
        """

        key = (self._text, self._position, width, selection)
        if self._last_view is not None and self._last_view[0] == key:
            return self._last_view[1]
        window = compute_window(
            self._mapper, self._text, self._window_start, self._position, width
        )
        if window.start != self._window_start:
            telemetry.record_event(
                "window.scroll",
                level="debug",
                data={"from": self._window_start, "to": window.start, "width": width},
            )
        self._window_start = window.start

        start = self._index(window.start)
        stop = self._index(window.end)
        visible = self._text[start:stop]
        cursor_index = self._index(self._position) - start
        view = VisibleText(
            text=visible,
            cursor_index=cursor_index,
            cursor_column=display_width(visible[:cursor_index]),
            selection=self._clip_selection(selection, window, start),
            window=window,
        )
        self._last_view = (key, view)
        return view

    def _clip_selection(
        self, selection: Optional[CoordinateRange], window: TextWindow, offset: int
    ) -> Optional[Tuple[int, int]]:
        if selection is None:
            return None
        low, high = sorted(selection)
        low = max(low, window.start)
        high = min(high, window.end)
        if low >= high:
            return None
        return (self._index(low) - offset, self._index(high) - offset)

    def _index(self, coordinate: int) -> int:
        bounded = clamp_position(self._mapper, self._text, coordinate)
        return self._mapper.map(bounded, self._text)

    # Movement

    def move_left(self) -> bool:
        if self._position <= 0:
            return False
        self._position = CursorCoordinate(self._position - 1)
        return True

    def move_right(self) -> None:
        self._position = clamp_position(self._mapper, self._text, self._position + 1)

    def move_to_start(self) -> None:
        self._position = CursorCoordinate(0)

    def move_to_end(self) -> None:
        self._position = self.length()

    def set_position(self, position: int) -> None:
        self._position = ensure_position(self._mapper, self._text, position)

    # Editing -- single unit

    def insert_char_at_cursor(self, char: str) -> None:
        index = self._index(self._position)
        self._text = self._text[:index] + char + self._text[index:]

    def delete_char_at_cursor(self) -> bool:
        if self._position >= self.length():
            return False
        first = self._index(self._position)
        second = self._index(self._position + 1)
        self._text = self._text[:first] + self._text[second:]
        return True

    def replace_char_at_cursor(self, char: str) -> Optional[str]:
        if self._position >= self.length():
            return None
        first = self._index(self._position)
        second = self._index(self._position + 1)
        replaced = self._text[first:second]
        self._text = self._text[:first] + char + self._text[second:]
        return replaced

    # Editing -- strings

    def insert_string_at_cursor(self, value: str) -> CursorCoordinate:
        """Insert ``value`` and return the coordinate just after it.

        The cursor itself does not move; callers apply the result.
        """

        index = self._index(self._position)
        self._text = self._text[:index] + value + self._text[index:]
        return self._mapper.length(self._text[: index + len(value)])

    def delete_string_at_cursor(self, other: int) -> None:
        """Remove the text between the cursor and ``other``, in either order."""

        cursor_index = self._index(self._position)
        other_index = self._index(other)
        first, second = sorted((cursor_index, other_index))
        self._text = self._text[:first] + self._text[second:]
        self._position = clamp_position(self._mapper, self._text, self._position)


__all__ = ["Cursor", "VisibleText", "CoordinateRange"]
