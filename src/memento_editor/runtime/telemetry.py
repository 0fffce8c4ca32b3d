"""Structured logging for editor sessions, backed by telelog.

Settings come from ``MEMENTO_EDITOR_LOG_*`` environment variables unless a
named preset is chosen. The Textual UI owns the terminal, so hosts running it
should pick the ``file`` preset to keep log lines off the screen.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "MEMENTO_EDITOR_"
LOGGER_NAME = "memento_editor"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class LogSettings:
    level: str = "WARNING"
    console: bool = True
    json: bool = False
    log_file: str = ""

    @classmethod
    def from_env(cls) -> "LogSettings":
        return cls(
            level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").upper(),
            console=_env_flag("LOG_CONSOLE", True),
            json=_env_flag("LOG_JSON", False),
            log_file=os.getenv(f"{ENV_PREFIX}LOG_FILE", ""),
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        # span() profiles every edit
        config.with_profiling(True)
        return config


PRESETS: Dict[str, LogSettings] = {
    "quiet": LogSettings(),
    "debug": LogSettings(level="DEBUG"),
    "file": LogSettings(
        level="DEBUG", console=False, json=True, log_file="memento_editor.log"
    ),
}

_LOGGERS: MutableMapping[str, Any] = {}
_ACTIVE: Optional[LogSettings] = None


def configure(
    *, settings: Optional[LogSettings] = None, preset: Optional[str] = None
) -> LogSettings:
    """Adopt ``settings``, a named ``preset``, or (neither) the environment."""

    global _ACTIVE
    if settings is not None and preset is not None:
        raise ValueError("Provide either `settings` or `preset`, not both.")
    if preset is not None:
        if preset not in PRESETS:
            raise ValueError(f"Unknown preset '{preset}'.")
        settings = PRESETS[preset]
    _ACTIVE = settings or LogSettings.from_env()
    _LOGGERS.clear()
    return _ACTIVE


def get_logger(name: str = LOGGER_NAME) -> Any:
    if name not in _LOGGERS:
        settings = _ACTIVE or configure()
        _LOGGERS[name] = tl.Logger.with_config(name, settings.to_config())
    return _LOGGERS[name]


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), str(value)) for key, value in data.items()]


def record_event(
    name: str, *, level: str = "info", data: Optional[Dict[str, Any]] = None
) -> None:
    emit = getattr(get_logger(), f"{level.lower()}_with")
    emit(f"event::{name}", _pairs({"event": name, **(data or {})}))


@contextmanager
def span(
    name: str,
    *,
    component: bool = False,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[None]:
    """Profile a block; ``metadata`` is logger context while it runs."""

    log = get_logger()
    context = {key: str(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)
    try:
        with ExitStack() as stack:
            if component:
                stack.enter_context(log.track_component(name))
            stack.enter_context(log.profile(name))
            yield
    except Exception as exc:
        log.error_with("span::fail", _pairs({"span": name, "reason": exc}))
        raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "LogSettings",
    "PRESETS",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
