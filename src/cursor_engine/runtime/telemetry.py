"""Telemetry for the cursor engine, built directly on telelog.

The rest of the package only touches three names: ``record_event`` for
one-off structured records, ``span`` to profile an action, and
``configure`` for hosts that want a different telelog setup. Settings are
plain dictionaries so presets and the environment share one code path.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "CURSOR_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "cursor_engine")

Settings = Dict[str, Any]

_PRESETS: Dict[str, Settings] = {
    "development": {
        "level": "DEBUG",
        "console": True,
        "color": True,
        "json": False,
    },
    "production": {
        "level": "WARNING",
        "console": False,
        "file": "cursor_engine.log",
        "buffered": True,
    },
    "performance": {
        "level": "DEBUG",
        "console": False,
        "file": "cursor_engine-performance.log",
        "buffered": True,
        "json": True,
    },
}

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    raw = _env(name)
    return raw is not None and raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _settings_from_env() -> Settings:
    console = not _env_flag("DISABLE_CONSOLE")
    settings: Settings = {
        "level": (_env("LOG_LEVEL") or "WARNING").upper(),
        "console": console,
        "color": console and not _env_flag("NO_COLOR"),
        "json": _env_flag("LOG_JSON"),
        "file": _env("LOG_FILE") or None,
        "buffered": _env_flag("LOG_BUFFERED"),
    }
    if settings["buffered"]:
        settings["buffer_size"] = int(_env("LOG_BUFFER_SIZE") or "2048")
    return settings


def _build_config(settings: Settings) -> Any:
    config = tl.Config()
    config.with_min_level(settings["level"])
    config.with_console_output(settings.get("console", True))
    if settings.get("console", True):
        config.with_colored_output(settings.get("color", False))
    if "json" in settings:
        config.with_json_format(settings["json"])
    if settings.get("file"):
        config.with_file_output(settings["file"])
    if settings.get("buffered"):
        config.with_buffering(True)
        if "buffer_size" in settings:
            config.with_buffer_size(settings["buffer_size"])
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    ``preset`` is one of ``"development"``, ``"production"`` or
    ``"performance"``; a ``CURSOR_ENGINE_LOG_FILE`` overrides the preset's
    log file. With neither argument the configuration is rebuilt from the
    environment.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        try:
            settings = dict(_PRESETS[preset.lower()])
        except KeyError as exc:
            raise ValueError(f"Unknown preset '{preset}'.") from exc
        if settings.get("file") and _env("LOG_FILE"):
            settings["file"] = _env("LOG_FILE")
        config = _build_config(settings)
    elif config is None:
        config = _build_config(_settings_from_env())

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _build_config(_settings_from_env())
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _stringify(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` record."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span`` so callers can attach metadata as they go."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            payload["component"] = self.component
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, tracking it under ``component`` when given.

    ``metadata`` is attached to the logger as context while the block runs.
    An exception leaving the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(log, name, component)
    with ExitStack() as stack:
        for key, value in (metadata or {}).items():
            handle.add_metadata(key, value)
            log.add_context(key, handle.metadata[key])
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "ENV_PREFIX",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
