"""Regression tests for the optional Rich dependency.

Every command prints through plain ``print`` when Rich is missing, so
the catalogue, usage banners and explain output keep working.
"""

from __future__ import annotations

import sys
from unittest.mock import patch

import pytest

from porta_dev.cli import exit_codes
from porta_dev.cli.app import main
from porta_dev.cli.console import get_rich_console
from porta_dev.exceptions import DependencyError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def test_rich_console_raises_dependency_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(DependencyError, match="rich is not installed"):
        get_rich_console()


def test_catalogue_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["help"]) == exit_codes.SUCCESS
    assert "Commands:" in capsys.readouterr().out


def test_version_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--version"]) == exit_codes.SUCCESS
    assert "porta " in capsys.readouterr().out


def test_command_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["server", "--help"]) == exit_codes.SUCCESS
    assert "Usage: porta server [options]" in capsys.readouterr().out


def test_explain_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    with patch("porta_dev.infra.process_executor.subprocess.run") as mock_run:
        assert main(["push", "--explain", "--image-tag", "quay.io/me/porta:x"]) == (
            exit_codes.SUCCESS
        )
    mock_run.assert_not_called()
    assert "[CMD] docker push quay.io/me/porta:x" in capsys.readouterr().out


def test_doctor_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    code = main(["doctor"])
    assert code in (exit_codes.SUCCESS, exit_codes.GENERAL_ERROR)
