"""Engine configuration and its environment bindings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX

MAPPER_NAMES = ("codepoint", "grapheme")
CLIPBOARD_NAMES = ("system", "memory")


def _flag(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _int(raw: Optional[str], default: int) -> int:
    if raw is None or not raw.strip().isdigit():
        return default
    return int(raw)


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Knobs a host can set before building a ``TypingBehaviour``."""

    mapper: str = "codepoint"
    clipboard: str = "system"
    insert_mode: bool = False
    width: int = 40

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError("width must not be negative")
        if self.mapper not in MAPPER_NAMES:
            raise ValueError(
                f"Unknown mapper '{self.mapper}', expected one of {MAPPER_NAMES}"
            )
        if self.clipboard not in CLIPBOARD_NAMES:
            raise ValueError(
                f"Unknown clipboard '{self.clipboard}', "
                f"expected one of {CLIPBOARD_NAMES}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        env = os.environ if environ is None else environ
        return cls(
            mapper=env.get(f"{ENV_PREFIX}MAPPER", "codepoint").lower(),
            clipboard=env.get(f"{ENV_PREFIX}CLIPBOARD", "system").lower(),
            insert_mode=_flag(env.get(f"{ENV_PREFIX}INSERT_MODE"), False),
            width=_int(env.get(f"{ENV_PREFIX}WIDTH"), 40),
        )


__all__ = ["EngineConfig", "MAPPER_NAMES", "CLIPBOARD_NAMES"]
