"""Tests for the git branch lookup (infra/git_branch.py).

``subprocess.run`` is mocked — no real ``git`` is invoked.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from porta_dev.infra.git_branch import GitBranchProvider

_RUN = "porta_dev.infra.git_branch.subprocess.run"


def _completed(returncode: int, stdout: str) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout)


class TestGitBranchProvider:
    @patch(_RUN, return_value=_completed(0, "feature/foo\n"))
    def test_returns_branch(self, mock_run: MagicMock, tmp_path: Path) -> None:
        assert GitBranchProvider().current_branch(tmp_path) == "feature/foo"
        assert mock_run.call_args.args[0] == ["git", "rev-parse", "--abbrev-ref", "HEAD"]
        assert mock_run.call_args.kwargs["cwd"] == tmp_path

    @patch(_RUN)
    def test_missing_directory(self, mock_run: MagicMock, tmp_path: Path) -> None:
        assert GitBranchProvider().current_branch(tmp_path / "nope") is None
        mock_run.assert_not_called()

    @patch(_RUN, return_value=_completed(128, ""))
    def test_not_a_repository(self, _mock_run: MagicMock, tmp_path: Path) -> None:
        assert GitBranchProvider().current_branch(tmp_path) is None

    @patch(_RUN, return_value=_completed(0, "HEAD\n"))
    def test_detached_head(self, _mock_run: MagicMock, tmp_path: Path) -> None:
        assert GitBranchProvider().current_branch(tmp_path) is None

    @patch(_RUN, return_value=_completed(0, "  \n"))
    def test_empty_output(self, _mock_run: MagicMock, tmp_path: Path) -> None:
        assert GitBranchProvider().current_branch(tmp_path) is None

    @patch(_RUN, side_effect=FileNotFoundError("git"))
    def test_git_not_installed(self, _mock_run: MagicMock, tmp_path: Path) -> None:
        assert GitBranchProvider().current_branch(tmp_path) is None
