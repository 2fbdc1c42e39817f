"""Infrastructure: current-branch lookup for the primary repository.

Satisfies :class:`~porta_dev.core.protocols.BranchProvider`.  Every
failure (no checkout, no ``git`` binary, detached HEAD) resolves to
``None``: the branch only seeds derived defaults, so a missing value
simply leaves the built-in defaults in place.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

DETACHED_HEAD: str = "HEAD"


class GitBranchProvider:
    """Ask ``git`` which branch is checked out in a repository."""

    def current_branch(self, repository: Path) -> str | None:
        if not repository.is_dir():
            return None
        try:
            completed = subprocess.run(
                ["git", "rev-parse", "--abbrev-ref", "HEAD"],
                cwd=repository,
                check=False,
                text=True,
                capture_output=True,
            )
        except OSError:
            return None

        if completed.returncode != 0:
            return None
        branch = completed.stdout.strip()
        if not branch or branch == DETACHED_HEAD:
            return None
        return branch
