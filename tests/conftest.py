"""Shared pytest fixtures for the porta-dev test suite.

Guidelines
----------
* No test spawns a real process — executors and git are faked
  (see ``fakes.py``) or ``subprocess`` is mocked at the infra boundary.
* ``HOME`` and ``PORTA_DEV_HOME`` point into ``tmp_path`` so the user's
  real settings file is never read.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

import pytest

from fakes import ListReporter, RecordingExecutor
from porta_dev.core.config import AppConfig, default_options


@pytest.fixture(autouse=True)
def _isolated_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("PORTA_DEV_HOME", str(home / ".porta-dev"))
    return home


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        install_root=tmp_path / "install",
        defaults=MappingProxyType(default_options(tmp_path)),
    )


@pytest.fixture
def reporter() -> ListReporter:
    return ListReporter()


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()
