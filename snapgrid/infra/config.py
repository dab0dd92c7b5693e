"""Configuration and env loading."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from snapgrid.core.grid import GridConfig
from snapgrid.runtime.debug_config import env_flag

logger = logging.getLogger(__name__)

_DEFAULTS = GridConfig()


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Precedence is left-to-right because later loads may overwrite previous values.
    Default order: ``.env`` then ``.env.local``.
    """
    to_load = tuple(paths) if paths is not None else (".env", ".env.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_grid_config() -> GridConfig:
    """Build a grid configuration from ``SNAPGRID_*`` variables.

    Unset or unparsable values fall back to the ``GridConfig`` defaults.
    """
    cell_pixel_width = _float("SNAPGRID_CELL_PIXEL_WIDTH", 0.0)
    return GridConfig(
        width=_float("SNAPGRID_WIDTH", _DEFAULTS.width),
        height=_float("SNAPGRID_HEIGHT", _DEFAULTS.height),
        rows=_int("SNAPGRID_ROWS", _DEFAULTS.rows),
        cols=_int("SNAPGRID_COLS", _DEFAULTS.cols),
        cell_pixel_width=cell_pixel_width if cell_pixel_width > 0 else None,
        aspect_ratio=_float("SNAPGRID_ASPECT_RATIO", _DEFAULTS.aspect_ratio),
        gap=_float("SNAPGRID_GAP", _DEFAULTS.gap),
        cover=env_flag("SNAPGRID_COVER", _DEFAULTS.cover),
        pointer_mode=env_flag("SNAPGRID_POINTER_MODE", _DEFAULTS.pointer_mode),
        movable=env_flag("SNAPGRID_MOVABLE", _DEFAULTS.movable),
        auto_size=env_flag("SNAPGRID_AUTO_SIZE", _DEFAULTS.auto_size),
        auto_place=env_flag("SNAPGRID_AUTO_PLACE", _DEFAULTS.auto_place),
    )


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("config_invalid_int name=%s value=%r", name, raw)
        return default


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("config_invalid_float name=%s value=%r", name, raw)
        return default
