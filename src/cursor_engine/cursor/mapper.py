"""Coordinate policies translating cursor coordinates into string indices.

A cursor never stores string indices directly. It stores a
``CursorCoordinate`` whose unit is chosen by a ``CoordinateMapper``: one code
point for ``CodepointMapper`` (the default), one extended grapheme cluster for
``GraphemeMapper``. Mappers are stateless and are injected into ``Cursor``.
"""

from __future__ import annotations

from functools import lru_cache
from itertools import accumulate
from typing import Dict, Iterator, NewType, Protocol, Tuple, Type

import grapheme

CursorCoordinate = NewType("CursorCoordinate", int)


@lru_cache(maxsize=64)
def _cluster_boundaries(text: str) -> Tuple[int, ...]:
    return (0, *accumulate(len(cluster) for cluster in grapheme.graphemes(text)))


class CoordinateMapper(Protocol):
    """Unit policy used by ``Cursor`` and the windowing scans."""

    name: str

    def map(self, coordinate: CursorCoordinate, text: str) -> int:
        """Return the ``str`` index of ``coordinate`` inside ``text``."""
        ...

    def length(self, text: str) -> CursorCoordinate:
        """Return the number of addressable units in ``text``."""
        ...

    def coordinates_forward(
        self, text: str, start: CursorCoordinate
    ) -> Iterator[CursorCoordinate]:
        """Yield every coordinate in ``(start, length(text))``, increasing."""
        ...

    def coordinates_backward(
        self, text: str, start: CursorCoordinate
    ) -> Iterator[CursorCoordinate]:
        """Yield every coordinate in ``[0, start)``, decreasing."""
        ...


class CodepointMapper:
    """One coordinate per Unicode scalar value.

    Combining sequences therefore span several coordinates; a cursor can sit
    between a base letter and its accent.
    """

    name = "codepoint"

    def map(self, coordinate: CursorCoordinate, text: str) -> int:
        del text
        return int(coordinate)

    def length(self, text: str) -> CursorCoordinate:
        return CursorCoordinate(len(text))

    def coordinates_forward(
        self, text: str, start: CursorCoordinate
    ) -> Iterator[CursorCoordinate]:
        for index in range(start + 1, len(text)):
            yield CursorCoordinate(index)

    def coordinates_backward(
        self, text: str, start: CursorCoordinate
    ) -> Iterator[CursorCoordinate]:
        for index in range(min(start, len(text)) - 1, -1, -1):
            yield CursorCoordinate(index)


class GraphemeMapper:
    """One coordinate per extended grapheme cluster."""

    name = "grapheme"

    def map(self, coordinate: CursorCoordinate, text: str) -> int:
        boundaries = _cluster_boundaries(text)
        index = max(0, min(int(coordinate), len(boundaries) - 1))
        return boundaries[index]

    def length(self, text: str) -> CursorCoordinate:
        return CursorCoordinate(len(_cluster_boundaries(text)) - 1)

    def coordinates_forward(
        self, text: str, start: CursorCoordinate
    ) -> Iterator[CursorCoordinate]:
        for index in range(start + 1, self.length(text)):
            yield CursorCoordinate(index)

    def coordinates_backward(
        self, text: str, start: CursorCoordinate
    ) -> Iterator[CursorCoordinate]:
        for index in range(min(start, self.length(text)) - 1, -1, -1):
            yield CursorCoordinate(index)


MAPPERS: Dict[str, Type[CoordinateMapper]] = {
    CodepointMapper.name: CodepointMapper,
    GraphemeMapper.name: GraphemeMapper,
}


def resolve_mapper(name: str) -> CoordinateMapper:
    try:
        return MAPPERS[name]()
    except KeyError as exc:
        raise ValueError(f"Unknown coordinate mapper '{name}'") from exc


__all__ = [
    "CursorCoordinate",
    "CoordinateMapper",
    "CodepointMapper",
    "GraphemeMapper",
    "MAPPERS",
    "resolve_mapper",
]
