"""Engine-wide debug configuration sourced from environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool = False, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable runtime debug configuration."""

    trace_transitions: bool
    log_level: str


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve runtime log level with engine-prefixed override."""
    value = _raw("ENGINE_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_debug_config(*, env: Mapping[str, str] | None = None) -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    return DebugConfig(
        trace_transitions=_flag("ENGINE_TRACE_TRANSITIONS", False, env=env),
        log_level=resolve_log_level_name(env=env),
    )


def enabled_transition_trace() -> bool:
    return load_debug_config().trace_transitions
