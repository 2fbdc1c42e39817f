"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and the CLI
layer must satisfy.  Core code depends ONLY on these protocols — never
on concrete implementations — so handlers can be exercised with fakes.
"""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol


class Reporter(Protocol):
    """Sink for plain-text, user-facing lines."""

    def line(self, text: str = "") -> None:
        """Emit *text* followed by a newline, verbatim (no markup)."""
        ...  # pragma: no cover


class Executor(Protocol):
    """Contract for running external commands.

    Every implementation honours the same two modes: *explain* echoes
    each command without running it, *verbose* echoes and runs.
    """

    def run(self, command: str, env: Mapping[str, str] | None = None) -> bool:
        """Run *command* to completion.

        Returns ``True`` when the command exited with status 0, or when
        explain mode skipped it.
        """
        ...  # pragma: no cover

    def replace(self, command: str, env: Mapping[str, str] | None = None) -> bool:
        """Hand the terminal over to *command* as the final step.

        Does not return on the executing path: the invocation ends with
        the child's exit status.  Returns ``True`` only in explain mode.
        """
        ...  # pragma: no cover

    def working_directory(self, path: Path) -> AbstractContextManager[Path]:
        """Context manager scoping the process working directory to *path*."""
        ...  # pragma: no cover


class BranchProvider(Protocol):
    """Contract for source-control branch lookup."""

    def current_branch(self, repository: Path) -> str | None:
        """Return the checked-out branch of *repository*, or ``None``.

        ``None`` covers a missing checkout, a detached HEAD and a
        missing ``git`` binary alike.
        """
        ...  # pragma: no cover
