import pytest

from cursor_engine.actions import NULL_ACTION, ActionKind, UserAction
from cursor_engine.keymaps import (
    DEFAULT_BINDINGS,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    KeyStroke,
    load_default_keymaps,
)


def make_registry() -> KeymapRegistry:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    return registry


def make_binding(binding_id: str, token: str, action: ActionKind) -> Binding:
    return Binding(id=binding_id, stroke=KeyStroke.parse(token), action=action)


def test_keystroke_normalizes_key_names_and_modifiers() -> None:
    stroke = KeyStroke("left", ("SHIFT", " ctrl ", "shift"))

    assert stroke.key == "LEFT"
    assert stroke.modifiers == ("ctrl", "shift")
    assert stroke.token == "ctrl+shift+LEFT"


def test_keystroke_keeps_character_case() -> None:
    assert KeyStroke("A").token == "A"
    assert KeyStroke("a").token == "a"


@pytest.mark.parametrize(
    ("token", "key", "modifiers"),
    [
        ("ctrl+c", "c", ("ctrl",)),
        ("shift+HOME", "HOME", ("shift",)),
        ("+", "+", ()),
        ("ctrl++", "+", ("ctrl",)),
    ],
)
def test_keystroke_parse(token: str, key: str, modifiers: tuple[str, ...]) -> None:
    stroke = KeyStroke.parse(token)

    assert stroke.key == key
    assert stroke.modifiers == modifiers


def test_empty_key_rejected() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")
    with pytest.raises(ValueError):
        KeyStroke.parse("  ")


def test_binding_cannot_produce_typing() -> None:
    with pytest.raises(ValueError):
        make_binding("bad", "a", ActionKind.TYPING)


def test_default_keymaps_registered() -> None:
    registry = make_registry()

    stats = registry.stats()

    assert stats.binding_count == len(DEFAULT_BINDINGS)
    assert "shift+LEFT" in stats.tokens
    assert "ctrl+a" in stats.tokens
    assert list(registry.iter_bindings()) == list(DEFAULT_BINDINGS)


@pytest.mark.parametrize(
    ("stroke", "kind"),
    [
        (KeyStroke("BACKSPACE"), ActionKind.REMOVE),
        (KeyStroke("DELETE"), ActionKind.DELETE),
        (KeyStroke("INSERT"), ActionKind.TOGGLE_INSERT),
        (KeyStroke("LEFT"), ActionKind.CURSOR_LEFT),
        (KeyStroke("RIGHT", ("shift",)), ActionKind.CURSOR_RIGHT_SELECT),
        (KeyStroke("HOME"), ActionKind.TO_START),
        (KeyStroke("END", ("shift",)), ActionKind.TO_END_SELECT),
        (KeyStroke("c", ("ctrl",), "c"), ActionKind.COPY),
        (KeyStroke("v", ("ctrl",)), ActionKind.PASTE),
        (KeyStroke("x", ("ctrl",)), ActionKind.CUT),
        (KeyStroke("a", ("ctrl",)), ActionKind.SELECT_ALL),
    ],
)
def test_resolve_bound_strokes(stroke: KeyStroke, kind: ActionKind) -> None:
    assert make_registry().resolve(stroke) == UserAction.of(kind)


def test_resolve_printable_text_to_typing() -> None:
    registry = make_registry()

    assert registry.resolve(KeyStroke("a", (), "a")) == UserAction.typing("a")
    assert registry.resolve(KeyStroke("A", (), "A")) == UserAction.typing("A")
    assert registry.resolve(KeyStroke("語", (), "語")) == UserAction.typing("語")


@pytest.mark.parametrize(
    "stroke",
    [
        KeyStroke("z", ("ctrl",), "z"),
        KeyStroke("x", ("alt",), "x"),
        KeyStroke("F5"),
        KeyStroke("TAB", (), "\t"),
        KeyStroke("a", (), "ab"),
    ],
)
def test_resolve_everything_else_to_null(stroke: KeyStroke) -> None:
    assert make_registry().resolve(stroke) is NULL_ACTION


def test_register_binding_conflict_detection() -> None:
    registry = make_registry()

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(
            make_binding("custom.left", "LEFT", ActionKind.TO_START)
        )

    assert excinfo.value.existing.id == "field.cursor_left"


def test_register_binding_replace() -> None:
    registry = make_registry()
    binding = make_binding("custom.left", "LEFT", ActionKind.TO_START)

    registry.register_binding(binding, replace=True)

    assert registry.resolve(KeyStroke("LEFT")) == UserAction.of(ActionKind.TO_START)
    with pytest.raises(KeyError):
        registry.get_binding("field.cursor_left")


def test_loading_defaults_twice_requires_replace() -> None:
    registry = make_registry()

    with pytest.raises(ValueError):
        load_default_keymaps(registry)

    load_default_keymaps(registry, replace=True)
    assert registry.stats().binding_count == len(DEFAULT_BINDINGS)


def test_load_defaults_with_exclusions_and_extras() -> None:
    registry = KeymapRegistry()
    extra = make_binding("custom.home", "ctrl+HOME", ActionKind.TO_START)

    load_default_keymaps(
        registry, extra_bindings=[extra], exclude_bindings=["field.select_all"]
    )

    assert registry.resolve(KeyStroke("a", ("ctrl",))) is NULL_ACTION
    assert registry.resolve(KeyStroke("HOME", ("ctrl",))) == UserAction.of(
        ActionKind.TO_START
    )


def test_unregister_binding() -> None:
    registry = make_registry()

    removed = registry.unregister_binding("field.delete")

    assert removed is not None
    assert registry.lookup(KeyStroke("DELETE")) is None
    assert registry.unregister_binding("field.delete") is None
