"""Validation helpers shared by the cursor and the behaviour layer."""

from __future__ import annotations

from .mapper import CoordinateMapper, CursorCoordinate


class InvalidCursorPosition(ValueError):
    """Raised when a coordinate falls outside ``[0, length(text)]``."""

    def __init__(self, message: str, *, position: int, length: int) -> None:
        super().__init__(message)
        self.position = position
        self.length = length


def ensure_position(
    mapper: CoordinateMapper, text: str, position: int
) -> CursorCoordinate:
    length = mapper.length(text)
    if position < 0 or position > length:
        raise InvalidCursorPosition(
            f"Cursor position {position} outside [0, {length}]",
            position=position,
            length=length,
        )
    return CursorCoordinate(position)


def clamp_position(
    mapper: CoordinateMapper, text: str, position: int
) -> CursorCoordinate:
    return CursorCoordinate(max(0, min(position, mapper.length(text))))


__all__ = ["InvalidCursorPosition", "ensure_position", "clamp_position"]
