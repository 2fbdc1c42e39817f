"""Tests for external tool detection (infra/tool_detector.py).

All ``shutil.which`` and ``platform.system`` calls are mocked.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from porta_dev.infra.tool_detector import (
    REQUIRED_TOOLS,
    ToolStatus,
    detect_tool,
    detect_tools,
    install_hint,
)


class TestDetectTool:
    @patch("porta_dev.infra.tool_detector.shutil.which", return_value="/usr/bin/docker")
    def test_found(self, _mock_which: MagicMock) -> None:
        status = detect_tool("docker")
        assert status.found is True
        assert status.path == Path("/usr/bin/docker").resolve()
        assert status.install_hint == ""

    @patch("porta_dev.infra.tool_detector.shutil.which", return_value=None)
    def test_missing(self, _mock_which: MagicMock) -> None:
        status = detect_tool("oc")
        assert status.found is False
        assert status.path is None
        assert "OpenShift" in status.install_hint

    @patch("porta_dev.infra.tool_detector.shutil.which", return_value=None)
    def test_detect_tools_keeps_order(self, mock_which: MagicMock) -> None:
        statuses = detect_tools()
        assert tuple(status.name for status in statuses) == REQUIRED_TOOLS
        assert mock_which.call_count == len(REQUIRED_TOOLS)

    def test_status_is_frozen(self) -> None:
        status = ToolStatus(name="git", path=None, install_hint="x")
        with pytest.raises(AttributeError):
            status.name = "other"  # type: ignore[misc]


class TestInstallHint:
    @pytest.mark.parametrize(
        ("system", "expected"),
        [
            ("Darwin", "brew install docker"),
            ("Linux", "sudo dnf install docker"),
            ("Windows", "winget install docker"),
            ("Plan9", "Install docker and make sure it is on PATH"),
        ],
    )
    def test_system_packages(self, system: str, expected: str) -> None:
        with patch("porta_dev.infra.tool_detector.platform.system", return_value=system):
            assert expected in install_hint("docker")

    def test_bundler_is_a_gem(self) -> None:
        assert install_hint("bundle") == "gem install bundler"

    def test_yarn_via_npm(self) -> None:
        assert install_hint("yarn") == "npm install --global yarn"

    @patch("porta_dev.infra.tool_detector.platform.system", return_value="Darwin")
    def test_oc_ignores_platform(self, _mock_system: MagicMock) -> None:
        assert "mirror.openshift.com" in install_hint("oc")
