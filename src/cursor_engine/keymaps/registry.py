"""Keymap registry translating key strokes into ``UserAction`` commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from cursor_engine.actions import NULL_ACTION, UserAction
from cursor_engine.runtime.telemetry import span

from .models import Binding, KeyStroke


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    binding_count: int
    tokens: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when a new binding claims a key stroke that is already bound."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on '{binding.key_signature}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns the stroke -> action bindings for one kind of field.

    Strokes without a binding that carry printable text and no command
    modifier resolve to a typing action; everything else resolves to the
    null action.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._by_token: Dict[str, str] = {}
        self._logger_name = logger_name

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def lookup(self, stroke: KeyStroke) -> Optional[Binding]:
        binding_id = self._by_token.get(stroke.token)
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "token": binding.key_signature},
        ) as handle:
            existing = self.lookup(binding.stroke)
            if existing is not None and existing.id != binding.id and not replace:
                handle.add_metadata("conflict", existing.id)
                raise KeymapConflictError(binding, existing)
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            if existing is not None:
                self._drop(existing)
            if binding.id in self._bindings:
                self._drop(self._bindings[binding.id])

            self._bindings[binding.id] = binding
            self._by_token[binding.key_signature] = binding.id
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is None:
            return None
        self._drop(binding)
        return binding

    def iter_bindings(self) -> Iterator[Binding]:
        yield from self._bindings.values()

    def resolve(self, stroke: KeyStroke) -> UserAction:
        binding = self.lookup(stroke)
        if binding is not None:
            return UserAction.of(binding.action)
        if _types_text(stroke):
            return UserAction.typing(stroke.text or "")
        return NULL_ACTION

    def stats(self) -> RegistryStats:
        return RegistryStats(
            binding_count=len(self._bindings),
            tokens=tuple(sorted(self._by_token)),
        )

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        if self._by_token.get(binding.key_signature) == binding.id:
            del self._by_token[binding.key_signature]


def _types_text(stroke: KeyStroke) -> bool:
    if stroke.has_command_modifier or stroke.text is None:
        return False
    if len(stroke.text) != 1:
        return False
    return stroke.text.isprintable()


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
