"""Tests for the process executor (infra/process_executor.py).

``subprocess`` is mocked at the module boundary; no real process is
started.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from fakes import ListReporter
from porta_dev.exceptions import ExecutableNotFoundError, WorkingDirectoryError
from porta_dev.infra.process_executor import ProcessExecutor, describe, exit_status

_RUN = "porta_dev.infra.process_executor.subprocess.run"
_POPEN = "porta_dev.infra.process_executor.subprocess.Popen"


def _completed(returncode: int) -> subprocess.CompletedProcess[bytes]:
    return subprocess.CompletedProcess(args=[], returncode=returncode)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestDescribe:
    def test_plain_command(self) -> None:
        assert describe("docker push x") == "docker push x"

    def test_env_prefix(self) -> None:
        assert describe("bundle exec rails console", {"RAILS_ENV": "test"}) == (
            "RAILS_ENV=test bundle exec rails console"
        )


class TestExitStatus:
    def test_normal_status_passes_through(self) -> None:
        assert exit_status(0) == 0
        assert exit_status(3) == 3

    def test_signal_maps_to_shell_convention(self) -> None:
        assert exit_status(-2) == 130
        assert exit_status(-15) == 143


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

class TestRun:
    @patch(_RUN, return_value=_completed(0))
    def test_success(self, mock_run: MagicMock) -> None:
        reporter = ListReporter()
        assert ProcessExecutor(reporter).run("docker push 'quay.io/a b'") is True
        assert mock_run.call_args.args[0] == ["docker", "push", "quay.io/a b"]
        assert mock_run.call_args.kwargs["env"] is None
        assert reporter.lines == []

    @patch(_RUN, return_value=_completed(1))
    def test_failure_status(self, _mock_run: MagicMock) -> None:
        assert ProcessExecutor(ListReporter()).run("false") is False

    @patch(_RUN, return_value=_completed(0))
    def test_env_extends_process_environment(
        self, mock_run: MagicMock, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("PORTA_TEST_MARKER", "1")
        ProcessExecutor(ListReporter()).run("rake", env={"RAILS_ENV": "test"})
        env = mock_run.call_args.kwargs["env"]
        assert env["RAILS_ENV"] == "test"
        assert env["PORTA_TEST_MARKER"] == "1"

    @patch(_RUN, return_value=_completed(0))
    def test_verbose_echoes_then_runs(self, mock_run: MagicMock) -> None:
        reporter = ListReporter()
        ProcessExecutor(reporter, verbose=True).run("rake", env={"RAILS_ENV": "test"})
        assert reporter.lines == ["[CMD] RAILS_ENV=test rake"]
        mock_run.assert_called_once()

    @patch(_RUN)
    def test_explain_echoes_only(self, mock_run: MagicMock) -> None:
        reporter = ListReporter()
        assert ProcessExecutor(reporter, explain=True).run("docker push x") is True
        assert reporter.lines == ["[CMD] docker push x"]
        mock_run.assert_not_called()

    @patch(_RUN, side_effect=FileNotFoundError("docker"))
    def test_missing_executable(self, _mock_run: MagicMock) -> None:
        with pytest.raises(ExecutableNotFoundError, match="docker") as exc_info:
            ProcessExecutor(ListReporter()).run("docker push x")
        assert "porta doctor" in (exc_info.value.hint or "")

    @patch(_RUN, side_effect=PermissionError(13, "Permission denied"))
    def test_non_executable_binary(self, _mock_run: MagicMock) -> None:
        with pytest.raises(ExecutableNotFoundError, match="Cannot run ./bin/dev") as exc_info:
            ProcessExecutor(ListReporter()).run("./bin/dev --help")
        assert "Permission denied" in str(exc_info.value)


# ---------------------------------------------------------------------------
# replace
# ---------------------------------------------------------------------------

class TestReplace:
    @patch(_POPEN)
    def test_ends_with_child_status(self, mock_popen: MagicMock) -> None:
        mock_popen.return_value.wait.return_value = 3
        with pytest.raises(SystemExit) as exc_info:
            ProcessExecutor(ListReporter()).replace("bundle exec rails console")
        assert exc_info.value.code == 3
        assert mock_popen.call_args.args[0] == ["bundle", "exec", "rails", "console"]

    @patch(_POPEN)
    def test_success_exits_zero(self, mock_popen: MagicMock) -> None:
        mock_popen.return_value.wait.return_value = 0
        with pytest.raises(SystemExit) as exc_info:
            ProcessExecutor(ListReporter()).replace("npm run dev")
        assert exc_info.value.code == 0

    @patch(_POPEN)
    def test_interrupt_keeps_waiting(self, mock_popen: MagicMock) -> None:
        mock_popen.return_value.wait.side_effect = [KeyboardInterrupt, -2]
        with pytest.raises(SystemExit) as exc_info:
            ProcessExecutor(ListReporter()).replace("bundle exec sidekiq")
        assert exc_info.value.code == 130
        assert mock_popen.return_value.wait.call_count == 2

    @patch(_POPEN)
    def test_explain_returns_true(self, mock_popen: MagicMock) -> None:
        reporter = ListReporter()
        executor = ProcessExecutor(reporter, explain=True)
        assert executor.replace("npm run dev") is True
        assert reporter.lines == ["[CMD] npm run dev"]
        mock_popen.assert_not_called()

    @patch(_POPEN, side_effect=FileNotFoundError("oc"))
    def test_missing_executable(self, _mock_popen: MagicMock) -> None:
        with pytest.raises(ExecutableNotFoundError, match="oc"):
            ProcessExecutor(ListReporter()).replace("oc logs --follow dc/x")

    @patch(_POPEN, side_effect=PermissionError(13, "Permission denied"))
    def test_non_executable_binary(self, _mock_popen: MagicMock) -> None:
        with pytest.raises(ExecutableNotFoundError, match="Cannot run oc"):
            ProcessExecutor(ListReporter()).replace("oc logs --follow dc/x")


# ---------------------------------------------------------------------------
# working_directory
# ---------------------------------------------------------------------------

class TestWorkingDirectory:
    def test_changes_and_restores(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        start = tmp_path / "start"
        target = tmp_path / "porta"
        start.mkdir()
        target.mkdir()
        monkeypatch.chdir(start)

        with ProcessExecutor(ListReporter()).working_directory(target):
            assert Path.cwd() == target.resolve()
        assert Path.cwd() == start.resolve()

    def test_restores_after_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        target = tmp_path / "porta"
        target.mkdir()
        monkeypatch.chdir(tmp_path)

        with pytest.raises(RuntimeError):
            with ProcessExecutor(ListReporter()).working_directory(target):
                raise RuntimeError("boom")
        assert Path.cwd() == tmp_path.resolve()

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(WorkingDirectoryError, match="Directory not found"):
            with ProcessExecutor(ListReporter()).working_directory(tmp_path / "nope"):
                pass  # pragma: no cover

    def test_verbose_echoes_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        reporter = ListReporter()
        with ProcessExecutor(reporter, verbose=True).working_directory(tmp_path):
            pass
        assert reporter.lines == [f"[DIR] {tmp_path}"]

    def test_explain_does_not_change_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        reporter = ListReporter()
        missing = tmp_path / "nope"
        with ProcessExecutor(reporter, explain=True).working_directory(missing):
            assert Path(os.getcwd()) == tmp_path.resolve()
        assert reporter.lines == [f"[DIR] {missing}"]
