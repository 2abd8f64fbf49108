from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from evconf.cli._dispatcher import main


def test_config_show_outputs_yaml(project_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["config", "show", "--repo-root", str(project_root)])
    assert rc == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["device_check"]["enabled"] is False
    assert data["language"] == "en"


def test_config_show_single_key_json(
    project_root: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("EVCONF_LOGGING__LEVEL", "DEBUG")
    rc = main(["config", "show", "logging.level", "--json", "--repo-root", str(project_root)])
    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {"logging.level": "DEBUG"}


def test_config_show_unknown_key(project_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["config", "show", "nope.key", "--repo-root", str(project_root)])
    assert rc == 1
    assert "Key not found: nope.key" in capsys.readouterr().out


def test_config_show_invalid_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".evconf").mkdir()
    (tmp_path / ".evconf" / "config.yaml").write_text("language: 1\n", encoding="utf-8")
    rc = main(["config", "show", "--repo-root", str(tmp_path)])
    assert rc == 1
    assert "Invalid configuration at language" in capsys.readouterr().err
