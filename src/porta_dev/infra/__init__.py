"""Infrastructure layer — external system integration.

This layer wraps all interaction with subprocesses, git, the settings
file and ``PATH``.  Every raw ``OSError`` or PyYAML error is caught here
and re-raised as a :class:`~porta_dev.exceptions.PortaDevError`
subclass (or, for branch lookup, resolved to ``None``).

Rules
-----
* No imports from ``cli``.
* No direct user-facing output — diagnostics go through a ``Reporter``.
* Must expose clean, typed interfaces consumed by the core layer.
"""

from porta_dev.infra.git_branch import GitBranchProvider
from porta_dev.infra.process_executor import ProcessExecutor
from porta_dev.infra.settings_loader import load_settings
from porta_dev.infra.tool_detector import ToolStatus, detect_tool, detect_tools

__all__: list[str] = [
    "GitBranchProvider",
    "ProcessExecutor",
    "ToolStatus",
    "detect_tool",
    "detect_tools",
    "load_settings",
]
