"""Bounded-width windows over a single line of text.

The window is the slice of the line a field of ``width`` columns can show.
Its left edge is remembered between renders so that the view only scrolls
when the cursor would otherwise leave it.
"""

from __future__ import annotations

from dataclasses import dataclass

from .mapper import CoordinateMapper, CursorCoordinate
from .width import display_width


@dataclass(frozen=True, slots=True)
class TextWindow:
    """Half-open coordinate range ``[start, end)`` plus the cursor it contains."""

    start: CursorCoordinate
    end: CursorCoordinate
    cursor: CursorCoordinate

    def contains(self, coordinate: int) -> bool:
        return self.start <= coordinate <= self.end


def max_reach(
    mapper: CoordinateMapper, text: str, start: CursorCoordinate, width: int
) -> CursorCoordinate:
    """Furthest coordinate whose slice from ``start`` fits in ``width`` columns."""

    last = mapper.map(start, text)
    used = 0
    reach = start
    for coordinate in mapper.coordinates_forward(text, start):
        index = mapper.map(coordinate, text)
        used += display_width(text[last:index])
        if used > width:
            return reach
        last = index
        reach = coordinate
    # The forward enumeration stops short of the end position.
    if used + display_width(text[last:]) <= width:
        return mapper.length(text)
    return reach


def min_reach(
    mapper: CoordinateMapper, text: str, stop: CursorCoordinate, width: int
) -> CursorCoordinate:
    """Furthest-back coordinate whose slice up to ``stop`` fits in ``width``."""

    last = mapper.map(stop, text)
    used = 0
    reach = stop
    for coordinate in mapper.coordinates_backward(text, stop):
        index = mapper.map(coordinate, text)
        used += display_width(text[index:last])
        if used > width:
            break
        last = index
        reach = coordinate
    return reach


def compute_window(
    mapper: CoordinateMapper,
    text: str,
    anchor: CursorCoordinate,
    cursor: CursorCoordinate,
    width: int,
) -> TextWindow:
    """Return the window to show for ``cursor`` given the previous ``anchor``.

    1. If the whole line is narrower than ``width`` it is shown as is.
    2. If the cursor moved left of the anchor it becomes the left edge.
    3. Otherwise the anchor is kept while the cursor stays short of the
       anchor's reach; past it, the cursor becomes the right edge.
    """

    if width < 0:
        raise ValueError("width must not be negative")
    length = mapper.length(text)
    anchor = CursorCoordinate(min(anchor, length))

    if display_width(text) < width:
        return TextWindow(CursorCoordinate(0), length, cursor)

    if cursor < anchor:
        return TextWindow(cursor, max_reach(mapper, text, cursor, width), cursor)

    reach = max_reach(mapper, text, anchor, width)
    if cursor < reach:
        return TextWindow(anchor, reach, cursor)
    return TextWindow(min_reach(mapper, text, cursor, width), cursor, cursor)


__all__ = ["TextWindow", "compute_window", "max_reach", "min_reach"]
