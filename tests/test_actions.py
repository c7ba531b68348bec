import pytest

from cursor_engine.actions import NULL_ACTION, ActionKind, UserAction


def test_typing_requires_character() -> None:
    with pytest.raises(ValueError):
        UserAction(ActionKind.TYPING)


@pytest.mark.parametrize("char", ["", "ab", "e\u0301"])
def test_typing_carries_exactly_one_character(char: str) -> None:
    with pytest.raises(ValueError):
        UserAction.typing(char)


def test_non_typing_rejects_character() -> None:
    with pytest.raises(ValueError):
        UserAction(ActionKind.COPY, "c")


def test_action_str() -> None:
    assert str(UserAction.typing("a")) == "typing('a')"
    assert str(UserAction.of(ActionKind.SELECT_ALL)) == "select_all"
    assert str(NULL_ACTION) == "null"
