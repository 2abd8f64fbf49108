from __future__ import annotations

import pytest

from evconf import __version__
from evconf.cli._dispatcher import build_parser, discover_commands, discover_domains, discover_root_commands, main


def test_discovers_root_commands_and_domains() -> None:
    assert "configure" in discover_root_commands()
    assert set(discover_domains()) >= {"templates", "config"}
    assert "list" in discover_commands("templates")
    assert "show" in discover_commands("config")


def test_command_modules_expose_summary() -> None:
    info = discover_root_commands()["configure"]
    assert info["summary"] == "Interactively configure devices of one category"
    assert callable(info["main"])


def test_no_arguments_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "usage: evconf" in capsys.readouterr().out


def test_domain_without_command_prints_domain_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["templates"]) == 0
    assert "list" in capsys.readouterr().out


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_invalid_category_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as exc:
        main(["configure", "toaster"])
    assert exc.value.code == 2
