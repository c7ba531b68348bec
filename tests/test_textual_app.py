from textual import events

from cursor_engine.adapters.textual.app import (
    CursorEngineApp,
    _parse_args,
    config_from_args,
)


def test_normalize_printable_key_drops_shift() -> None:
    event = events.Key("A", "A")

    assert CursorEngineApp._normalize_key(event) == ("A", "A", ())


def test_normalize_named_key_with_modifier() -> None:
    event = events.Key("shift+left", None)

    assert CursorEngineApp._normalize_key(event) == ("LEFT", None, ("shift",))


def test_normalize_ctrl_character() -> None:
    event = events.Key("ctrl+v", None)

    assert CursorEngineApp._normalize_key(event) == ("v", None, ("ctrl",))


def test_quit_key_is_left_to_textual() -> None:
    assert CursorEngineApp._normalize_key(events.Key("ctrl+q", None)) is None


def test_parse_args() -> None:
    args = _parse_args(["--text", "hi", "--mapper", "grapheme", "--width", "12"])

    assert args.text == "hi"
    assert args.mapper == "grapheme"
    assert args.width == 12
    assert args.overwrite is False


def test_config_from_args() -> None:
    args = _parse_args(["--clipboard", "memory", "--overwrite", "--width", "8"])

    config = config_from_args(args)

    assert config.clipboard == "memory"
    assert config.insert_mode is True
    assert config.width == 8
