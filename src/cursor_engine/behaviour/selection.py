"""Anchor-preserving selection ranges."""

from __future__ import annotations

from typing import Optional

from cursor_engine.cursor import CoordinateRange, CursorCoordinate


class Selection:
    """Holds ``(start, stop)`` or nothing; an empty range is never stored.

    ``start`` and ``stop`` are not labelled left/right. When the cursor moves
    with selection semantics, the edge it was sitting on follows it and the
    other edge stays put.
    """

    def __init__(self) -> None:
        self._range: Optional[CoordinateRange] = None

    def __bool__(self) -> bool:
        return self._range is not None

    def __repr__(self) -> str:
        return f"Selection({self._range!r})"

    @property
    def range(self) -> Optional[CoordinateRange]:
        return self._range

    @property
    def start(self) -> Optional[CursorCoordinate]:
        return self._range[0] if self._range else None

    @property
    def stop(self) -> Optional[CursorCoordinate]:
        return self._range[1] if self._range else None

    def ordered(self) -> Optional[CoordinateRange]:
        if self._range is None:
            return None
        start, stop = self._range
        return (start, stop) if start <= stop else (stop, start)

    def clear(self) -> None:
        self._range = None

    def take(self) -> Optional[CoordinateRange]:
        current, self._range = self._range, None
        return current

    def update(self, start: int, stop: int) -> None:
        if start == stop:
            self._range = None
        else:
            self._range = (CursorCoordinate(start), CursorCoordinate(stop))

    def extend(self, previous: int, current: int) -> None:
        """Follow a cursor that moved from ``previous`` to ``current``."""

        if self._range is None:
            self.update(min(previous, current), max(previous, current))
            return
        start, stop = self._range
        if previous == start:
            self.update(current, stop)
        else:
            self.update(start, current)


__all__ = ["Selection"]
