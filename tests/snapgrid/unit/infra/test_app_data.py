from __future__ import annotations

from pathlib import Path

from snapgrid.infra.app_data import resolve_app_data_root, resolve_logs_dir


def test_app_data_root_defaults_under_cwd(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SNAPGRID_APP_DATA_DIR", raising=False)
    monkeypatch.delenv("SNAPGRID_LOG_DIR", raising=False)
    assert resolve_app_data_root() == tmp_path / "appdata"
    assert resolve_logs_dir() == tmp_path / "appdata" / "logs"


def test_relative_app_data_root_resolves_against_cwd(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SNAPGRID_APP_DATA_DIR", "state")
    assert resolve_app_data_root() == Path.cwd() / "state"


def test_log_dir_override_wins(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SNAPGRID_APP_DATA_DIR", str(tmp_path / "ignored"))
    monkeypatch.setenv("SNAPGRID_LOG_DIR", str(tmp_path / "custom"))
    assert resolve_logs_dir() == tmp_path / "custom"
