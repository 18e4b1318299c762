"""Dispatch debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


@dataclass(frozen=True, slots=True)
class DispatchDebugConfig:
    """Immutable dispatch debug configuration."""

    trace_dispatch: bool
    log_level: str
    log_format: str
    log_file: str | None


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("EVENTROUTE_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_debug_config() -> DispatchDebugConfig:
    """Load immutable debug configuration from env vars."""
    log_file = os.getenv("EVENTROUTE_LOG_FILE", "").strip()
    return DispatchDebugConfig(
        trace_dispatch=_flag("EVENTROUTE_TRACE_DISPATCH", False),
        log_level=resolve_log_level_name(),
        log_format=_choice("EVENTROUTE_LOG_FORMAT", ("text", "json"), "text"),
        log_file=log_file or None,
    )


def enabled_dispatch_trace() -> bool:
    return load_debug_config().trace_dispatch
