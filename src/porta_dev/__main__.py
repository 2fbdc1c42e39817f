"""Allow ``python -m porta_dev`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m porta_dev`` behaves identically to the ``porta``
console script.
"""

from __future__ import annotations

from porta_dev.cli.app import cli

if __name__ == "__main__":
    cli()
