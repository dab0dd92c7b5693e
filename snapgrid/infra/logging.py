"""App-level logging policy over the logging pipeline."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime

from snapgrid.api.logging import JsonFormatter, LoggingConfig
from snapgrid.infra.app_data import resolve_logs_dir
from snapgrid.runtime.debug_config import env_flag, resolve_log_level_name
from snapgrid.runtime.logging import configure_logging

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config() -> LoggingConfig:
    """Build logging config from env; file logging is opt-in via SNAPGRID_LOG_FILE."""
    console_format = os.getenv("LOG_FORMAT", "text").strip().lower()
    file_path = _resolve_run_log_file_path() if env_flag("SNAPGRID_LOG_FILE", False) else None
    return LoggingConfig(
        level_name=resolve_log_level_name(),
        console_format=console_format,
        file_path=file_path,
        file_format="json",
    )


def setup_logging() -> None:
    """Configure application logging."""
    config = build_logging_config()
    configure_logging(config)
    if config.file_path:
        logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str:
    base_dir = resolve_logs_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"snapgrid_run_{stamp}.jsonl")
