"""CLI application entry point for porta-dev.

This module is the **sole error boundary** for the entire application.
It catches :class:`~porta_dev.exceptions.PortaDevError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing and orchestration are
  delegated to the dispatcher, the core layer and the handlers.
* This module wires the concrete infrastructure (subprocess executor,
  git branch lookup, YAML settings) into the dispatcher.
* ``SystemExit`` raised by argparse on malformed flags, or by a
  replaced process, passes through untouched.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from porta_dev.cli import exit_codes
from porta_dev.cli.commands import build_registry
from porta_dev.cli.console import ConsoleReporter, console
from porta_dev.cli.dispatcher import CommandDispatcher
from porta_dev.core.config import AppConfig
from porta_dev.exceptions import PortaDevError
from porta_dev.infra.git_branch import GitBranchProvider
from porta_dev.infra.process_executor import ProcessExecutor
from porta_dev.infra.settings_loader import load_settings
from porta_dev.version import __version__

VERSION_FLAGS: tuple[str, ...] = ("-V", "--version")


def build_dispatcher(config: AppConfig | None = None) -> CommandDispatcher:
    """Wire the production collaborators into a :class:`CommandDispatcher`."""
    return CommandDispatcher(
        build_registry(),
        config if config is not None else AppConfig.from_environment(),
        reporter=ConsoleReporter(),
        branches=GitBranchProvider(),
        settings_loader=load_settings,
        executor_factory=ProcessExecutor,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the porta CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    arguments = list(sys.argv[1:] if argv is None else argv)

    if arguments and arguments[0] in VERSION_FLAGS:
        ConsoleReporter().line(f"porta {__version__}")
        return exit_codes.SUCCESS

    return build_dispatcher().dispatch(arguments)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PortaDevError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}", highlight=False)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}", highlight=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
