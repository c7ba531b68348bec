from rich.style import Style

from cursor_engine.actions import ActionKind, UserAction
from cursor_engine.behaviour import MemoryClipboard, TypingBehaviour
from cursor_engine.cursor import CursorCoordinate, TextWindow, VisibleText
from cursor_engine.keymaps import KeymapRegistry, KeyStroke, load_default_keymaps
from cursor_engine.widgets import (
    InputKind,
    TextFieldState,
    TextInputAction,
    TextInputEventKind,
    TextInputState,
    convert_field_key,
    convert_input_key,
    inverted_selection,
    render_line,
)


def make_input(text: str = "") -> TextInputState:
    return TextInputState(TypingBehaviour(text, MemoryClipboard()))


def make_registry() -> KeymapRegistry:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    return registry


def make_view(text: str, cursor_index: int, selection=None) -> VisibleText:
    window = TextWindow(
        CursorCoordinate(0), CursorCoordinate(len(text)), CursorCoordinate(cursor_index)
    )
    return VisibleText(
        text=text,
        cursor_index=cursor_index,
        cursor_column=cursor_index,
        selection=selection,
        window=window,
    )


def test_text_field_ignores_missing_action() -> None:
    field = TextFieldState(TypingBehaviour("abc", MemoryClipboard()))

    assert field.handle_action(None) is None
    assert field.text == "abc"


def test_text_field_renders_through_behaviour() -> None:
    field = TextFieldState(TypingBehaviour("", MemoryClipboard()))

    field.handle_action(UserAction.typing("h"))
    field.handle_action(UserAction.typing("i"))

    assert field.visible_text(10) == ("hi", None)
    assert field.cursor_location(10) == 2


def test_convert_field_key_uses_registry() -> None:
    registry = make_registry()

    action = convert_field_key(KeyStroke("BACKSPACE"), registry)

    assert action == UserAction.of(ActionKind.REMOVE)


def test_input_submit_reports_text() -> None:
    state = make_input("hello")

    event = state.handle_action(TextInputAction(InputKind.ENTER))

    assert event.kind is TextInputEventKind.SUBMITTED
    assert event.text == "hello"


def test_input_cancel() -> None:
    event = make_input("hello").handle_action(TextInputAction(InputKind.ESC))

    assert event.kind is TextInputEventKind.CANCELLED
    assert event.text is None


def test_input_passes_editing_actions_to_field() -> None:
    state = make_input("")

    event = state.handle_action(TextInputAction.other(UserAction.typing("x")))

    assert event.kind is TextInputEventKind.TYPING
    assert event.result is not None and event.result.text_changed
    assert state.text == "x"


def test_input_without_action_is_typing_event() -> None:
    event = make_input("abc").handle_action(None)

    assert event.kind is TextInputEventKind.TYPING
    assert event.result is None


def test_input_null_action_is_not_consumed() -> None:
    event = make_input("abc").handle_action(TextInputAction(InputKind.NULL))

    assert event.result is not None
    assert event.result.consumed is False


def test_convert_input_key_recognises_submit_and_cancel() -> None:
    registry = make_registry()

    assert convert_input_key(KeyStroke("enter"), registry).kind is InputKind.ENTER
    assert convert_input_key(KeyStroke("ESCAPE"), registry).kind is InputKind.ESC
    other = convert_input_key(KeyStroke("a", (), "a"), registry)
    assert other.kind is InputKind.OTHER
    assert other.to_user_action() == UserAction.typing("a")


def test_render_line_without_selection() -> None:
    line = render_line(make_view("hello", 0))

    assert line.plain == "hello"
    assert line.spans == []


def test_render_line_marks_selection() -> None:
    line = render_line(make_view("hello", 3, selection=(1, 3)))

    assert line.plain == "hello"
    assert [(span.start, span.end) for span in line.spans] == [(1, 3)]
    assert line.spans[0].style == Style(reverse=True)


def test_render_line_draws_cursor_past_end() -> None:
    cursor = Style(underline=True)

    line = render_line(make_view("hi", 2), cursor_style=cursor)

    assert line.plain == "hi "
    assert line.spans[-1].style == cursor


def test_inverted_selection_swaps_colours() -> None:
    inverted = inverted_selection(Style(color="red", bgcolor="blue"))

    assert inverted.color is not None and inverted.color.name == "blue"
    assert inverted.bgcolor is not None and inverted.bgcolor.name == "red"
    assert inverted_selection(None) == Style(reverse=True)
