"""Integration tests that exercise the CLI entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import litelog.cli as cli
from litelog import LiteLogger, iter_entries


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LITELOG_DIR", "LITELOG_MAX_FILE_SIZE", "LITELOG_CREATE_DIR", "LITELOG_TRACK_CLIENT_ORIGIN"):
        monkeypatch.delenv(name, raising=False)


def test_cli_appends_entry(tmp_path: Path) -> None:
    exit_code = cli.main(
        [
            "app.json",
            "auth",
            "user logged in",
            "--dir",
            str(tmp_path),
            "--context",
            '{"user_id": 42}',
            "--ip",
            "203.0.113.9",
        ]
    )
    assert exit_code == 0

    entry = next(iter_entries(tmp_path / "app.json"))
    assert entry["category"] == "auth"
    assert entry["message"] == "user logged in"
    assert entry["context"] == {"user_id": 42}
    assert entry["ip"] == "203.0.113.9"


def test_cli_uses_environment_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LITELOG_DIR", str(tmp_path))
    monkeypatch.setenv("LITELOG_MAX_FILE_SIZE", "1")
    captured = {}

    def _build_logger(config):
        captured["config"] = config
        return LiteLogger(config, clock=lambda: 1718000000.0)

    monkeypatch.setattr(cli, "build_logger", _build_logger)

    assert cli.main(["app.json", "app", "{\"event\": \"test\"}", "--json-message"]) == 0

    assert captured["config"].log_dir == tmp_path
    assert captured["config"].max_file_size == 1
    entry = next(iter_entries(tmp_path / "app.json"))
    assert json.loads(entry["message"]) == {"event": "test"}


def test_cli_reports_configuration_error(tmp_path: Path, capsys) -> None:
    exit_code = cli.main(["app.json", "app", "msg", "--dir", str(tmp_path / "missing")])
    assert exit_code == 1
    err = capsys.readouterr().err
    assert err.startswith("litelog: configuration: ")
    assert "does not exist" in err


def test_cli_create_dir(tmp_path: Path) -> None:
    target = tmp_path / "new"
    assert cli.main(["app.json", "app", "msg", "--dir", str(target), "--create-dir"]) == 0
    assert (target / "app.json").exists()


def test_cli_rejects_invalid_context(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["app.json", "app", "msg", "--dir", str(tmp_path), "--context", "{not json"])
    assert excinfo.value.code == 2
    assert list(tmp_path.iterdir()) == []


def test_cli_rejects_non_object_context(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["app.json", "app", "msg", "--dir", str(tmp_path), "--context", "[1]"])
    assert excinfo.value.code == 2
