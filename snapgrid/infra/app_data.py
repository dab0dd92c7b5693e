"""Unified snapgrid app-data paths."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_app_data_root() -> Path:
    """Resolve app-data root directory for runtime state."""
    configured = os.getenv("SNAPGRID_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return Path.cwd() / candidate
    return Path.cwd() / "appdata"


def resolve_logs_dir() -> Path:
    """Resolve logs directory under app-data root."""
    configured = os.getenv("SNAPGRID_LOG_DIR", "").strip()
    if configured:
        return Path(configured)
    return resolve_app_data_root() / "logs"
