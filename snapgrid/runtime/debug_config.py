"""Debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable runtime debug configuration."""

    trace_hits: bool
    trace_drag: bool
    log_level: str


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("SNAPGRID_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_debug_config() -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    return DebugConfig(
        trace_hits=env_flag("SNAPGRID_DEBUG_HITS", False),
        trace_drag=env_flag("SNAPGRID_DEBUG_DRAG", False),
        log_level=resolve_log_level_name(),
    )
