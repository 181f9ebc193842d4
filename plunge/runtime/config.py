"""Centralized plunge configuration sourced from environment."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from plunge.api.logging import PlungeLoggingConfig


@dataclass(frozen=True, slots=True)
class PlungeConfig:
    """Immutable plunge runtime configuration."""

    log_level: str
    log_console_format: str
    log_file_path: str | None
    log_file_format: str
    trace_projection_enabled: bool
    trace_sampling_n: int

    def __post_init__(self) -> None:
        if self.trace_sampling_n < 1:
            raise ValueError("trace_sampling_n must be >= 1")

    def logging_config(self) -> PlungeLoggingConfig:
        return PlungeLoggingConfig(
            level_name=self.log_level,
            console_format=self.log_console_format,
            file_path=self.log_file_path,
            file_format=self.log_file_format,
        )


_PLUNGE_CONFIG: ContextVar[PlungeConfig | None] = ContextVar("plunge_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _log_format(raw: str) -> str:
    value = raw.strip().lower()
    return value if value in {"text", "json"} else "text"


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with plunge-prefixed override."""
    value = _raw("PLUNGE_LOG_LEVEL", env=env)
    if value is None:
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_plunge_config(*, env: Mapping[str, str] | None = None) -> PlungeConfig:
    file_path = _text("PLUNGE_LOG_FILE", "", env=env)
    return PlungeConfig(
        log_level=resolve_log_level_name(env=env),
        log_console_format=_log_format(_text("PLUNGE_LOG_FORMAT", "text", env=env)),
        log_file_path=file_path or None,
        log_file_format=_log_format(_text("PLUNGE_LOG_FILE_FORMAT", "json", env=env)),
        trace_projection_enabled=_flag("PLUNGE_TRACE_PROJECTION", False, env=env),
        trace_sampling_n=_int("PLUNGE_TRACE_SAMPLING_N", 1, minimum=1, env=env),
    )


def initialize_plunge_config(*, env: Mapping[str, str] | None = None) -> PlungeConfig:
    config = load_plunge_config(env=env)
    _PLUNGE_CONFIG.set(config)
    return config


def set_plunge_config(config: PlungeConfig) -> PlungeConfig:
    _PLUNGE_CONFIG.set(config)
    return config


def get_plunge_config() -> PlungeConfig:
    config = _PLUNGE_CONFIG.get()
    if config is not None:
        return config
    return initialize_plunge_config()


__all__ = [
    "PlungeConfig",
    "get_plunge_config",
    "initialize_plunge_config",
    "load_plunge_config",
    "resolve_log_level_name",
    "set_plunge_config",
]
