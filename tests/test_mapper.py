import pytest

from cursor_engine.cursor import (
    CodepointMapper,
    CursorCoordinate,
    GraphemeMapper,
    char_width,
    display_width,
    resolve_mapper,
)

COMBINING = "e\u0301x"


def test_codepoint_mapper_counts_scalar_values() -> None:
    mapper = CodepointMapper()

    assert mapper.length(COMBINING) == 3
    assert mapper.map(CursorCoordinate(2), COMBINING) == 2
    assert mapper.map(mapper.length(COMBINING), COMBINING) == len(COMBINING)


def test_codepoint_enumeration_excludes_start_and_end() -> None:
    mapper = CodepointMapper()

    assert list(mapper.coordinates_forward("abcd", CursorCoordinate(1))) == [2, 3]
    assert list(mapper.coordinates_backward("abcd", CursorCoordinate(3))) == [2, 1, 0]
    assert list(mapper.coordinates_forward("abcd", CursorCoordinate(4))) == []
    assert list(mapper.coordinates_backward("abcd", CursorCoordinate(0))) == []


def test_grapheme_mapper_treats_cluster_as_one_unit() -> None:
    mapper = GraphemeMapper()

    assert mapper.length(COMBINING) == 2
    assert mapper.map(CursorCoordinate(1), COMBINING) == 2
    assert mapper.map(mapper.length(COMBINING), COMBINING) == len(COMBINING)
    assert list(mapper.coordinates_forward(COMBINING, CursorCoordinate(0))) == [1]
    assert list(mapper.coordinates_backward(COMBINING, CursorCoordinate(2))) == [1, 0]


def test_grapheme_mapper_on_empty_text() -> None:
    mapper = GraphemeMapper()

    assert mapper.length("") == 0
    assert mapper.map(CursorCoordinate(0), "") == 0
    assert list(mapper.coordinates_forward("", CursorCoordinate(0))) == []


@pytest.mark.parametrize("text", ["", "abc", "日本", COMBINING, "👍🏽ok"])
@pytest.mark.parametrize("mapper", [CodepointMapper(), GraphemeMapper()])
def test_enumerations_are_strictly_monotonic(text: str, mapper) -> None:
    length = mapper.length(text)
    for start in range(length + 1):
        forward = list(mapper.coordinates_forward(text, CursorCoordinate(start)))
        backward = list(mapper.coordinates_backward(text, CursorCoordinate(start)))
        assert forward == list(range(start + 1, length))
        assert backward == list(range(start - 1, -1, -1))


def test_resolve_mapper_by_name() -> None:
    assert isinstance(resolve_mapper("codepoint"), CodepointMapper)
    assert isinstance(resolve_mapper("grapheme"), GraphemeMapper)
    with pytest.raises(ValueError):
        resolve_mapper("bytes")


def test_display_width_counts_columns() -> None:
    assert display_width("hello") == 5
    assert display_width("日本") == 4
    assert display_width(COMBINING) == 2
    assert display_width("a\x07b") == 2
    assert display_width("") == 0


def test_char_width_never_negative() -> None:
    assert char_width("\x1b") == 0
    assert char_width("語") == 2
