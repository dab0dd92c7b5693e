from __future__ import annotations

from snapgrid.runtime.debug_config import env_flag, load_debug_config, resolve_log_level_name


def test_load_debug_config_parses_flags(monkeypatch) -> None:
    monkeypatch.setenv("SNAPGRID_DEBUG_HITS", "yes")
    monkeypatch.setenv("SNAPGRID_DEBUG_DRAG", "0")
    monkeypatch.setenv("SNAPGRID_LOG_LEVEL", "debug")

    cfg = load_debug_config()
    assert cfg.trace_hits is True
    assert cfg.trace_drag is False
    assert cfg.log_level == "DEBUG"


def test_resolve_log_level_prefers_package_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("SNAPGRID_LOG_LEVEL", "ERROR")
    assert resolve_log_level_name() == "ERROR"


def test_resolve_log_level_falls_back_to_generic_and_default(monkeypatch) -> None:
    monkeypatch.delenv("SNAPGRID_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert resolve_log_level_name() == "WARNING"
    monkeypatch.delenv("LOG_LEVEL")
    assert resolve_log_level_name(default="info") == "INFO"


def test_env_flag_uses_default_when_unset(monkeypatch) -> None:
    monkeypatch.delenv("SNAPGRID_DEBUG_HITS", raising=False)
    assert env_flag("SNAPGRID_DEBUG_HITS", True) is True
    monkeypatch.setenv("SNAPGRID_DEBUG_HITS", "off")
    assert env_flag("SNAPGRID_DEBUG_HITS", True) is False
