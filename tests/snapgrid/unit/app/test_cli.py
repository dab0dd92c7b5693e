from __future__ import annotations

import json

import pytest

import snapgrid.main as cli


@pytest.fixture(autouse=True)
def _isolated_cli(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "setup_logging", lambda: None)
    for name in ("SNAPGRID_WIDTH", "SNAPGRID_HEIGHT", "SNAPGRID_ROWS", "SNAPGRID_COLS", "SNAPGRID_GAP"):
        # Registered so values loaded from .env are undone after the test.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def _write_layout(tmp_path, payload: object):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_prints_placements(tmp_path, capsys) -> None:
    layout = _write_layout(
        tmp_path,
        {"elements": [{"id": "a", "width": 20, "height": 20}, {"id": "b", "width": 45, "height": 20}]},
    )

    code = cli.main([str(layout), "--width", "80", "--height", "80"])

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert [item["id"] for item in output["placements"]] == ["b", "a"]
    assert output["placements"][0]["cols"] == 3
    assert output["placements"][1]["transform"] == "translate3d(60px, 0px, 0px)"
    assert output["unplaced"] == []
    assert output["grid"]["rows"] == 4


def test_cli_accepts_bare_list_and_reports_unplaced(tmp_path, capsys) -> None:
    layout = _write_layout(tmp_path, [{"width": 40, "height": 20}] * 3)

    code = cli.main([str(layout), "--width", "40", "--height", "40", "--rows", "2", "--cols", "2"])

    assert code == 1
    output = json.loads(capsys.readouterr().out)
    assert output["unplaced"] == ["0"]


def test_cli_env_file_configures_grid(tmp_path, capsys) -> None:
    (tmp_path / ".env").write_text("SNAPGRID_WIDTH=40\nSNAPGRID_HEIGHT=40\nSNAPGRID_ROWS=2\nSNAPGRID_COLS=2\n")
    layout = _write_layout(tmp_path, [{"id": "a", "width": 20, "height": 20}])

    assert cli.main([str(layout)]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["grid"]["cols"] == 2
    assert output["grid"]["cell_width"] == 20.0


def test_cli_malformed_element_exits_with_usage_code(tmp_path, capsys) -> None:
    layout = _write_layout(tmp_path, {"elements": [{"id": "a", "width": 20}]})

    assert cli.main([str(layout)]) == 2
    assert capsys.readouterr().out == ""


def test_cli_missing_file_exits_with_usage_code(tmp_path) -> None:
    assert cli.main([str(tmp_path / "missing.json")]) == 2


def test_cli_invalid_json_exits_with_usage_code(tmp_path, capsys) -> None:
    layout = tmp_path / "bad.json"
    layout.write_text("{not json", encoding="utf-8")

    assert cli.main([str(layout)]) == 2
    assert capsys.readouterr().out == ""
