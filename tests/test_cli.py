"""Tests for the wolfdog command line."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from typer.testing import CliRunner

from wolfdog import __version__
from wolfdog.cli import app
from wolfdog.settings import Settings

runner = CliRunner()


def test_build_succeeds(make_site: Callable[..., Path]) -> None:
    site = make_site()

    result = runner.invoke(app, ["build", str(site)])

    assert result.exit_code == 0, result.output
    assert (site / "dist" / "posts" / "first" / "index.html").is_file()


def test_build_defaults_to_current_directory(
    make_site: Callable[..., Path], monkeypatch
) -> None:
    site = make_site()
    monkeypatch.chdir(site)

    result = runner.invoke(app, ["build"])

    assert result.exit_code == 0, result.output
    assert (site / "dist" / "index.html").is_file()


def test_build_failure_exits_with_one(make_site: Callable[..., Path]) -> None:
    site = make_site(postSettings={"postInputDir": "../outside"})

    result = runner.invoke(app, ["build", str(site)])

    assert result.exit_code == 1
    assert not (site / "dist").exists()


def test_missing_manifest_exits_with_one(tmp_path: Path) -> None:
    result = runner.invoke(app, ["build", str(tmp_path)])

    assert result.exit_code == 1


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"wolfdog {__version__}"


def test_unknown_option_is_a_usage_error() -> None:
    result = runner.invoke(app, ["build", "--frobnicate"])

    assert result.exit_code == 2


def test_invalid_log_level_exits_with_one(make_site: Callable[..., Path], monkeypatch) -> None:
    site = make_site()
    monkeypatch.setenv("WOLFDOG_LOG_LEVEL", "FOO")

    result = runner.invoke(app, ["build", str(site)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
    assert not (site / "dist").exists()


def test_log_level_is_case_insensitive(monkeypatch) -> None:
    monkeypatch.setenv("WOLFDOG_LOG_LEVEL", "debug")

    assert Settings().log_level == "DEBUG"
