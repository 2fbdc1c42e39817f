"""``porta doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the workstation has the tools the recipes call and a porta
checkout to run them in.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  It purely collects and
displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from pathlib import Path

from porta_dev.cli.console import console
from porta_dev.core.handlers import Handler
from porta_dev.infra.tool_detector import ToolStatus, detect_tools
from porta_dev.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _porta_dev_version_check() -> Check:
    return "porta-dev", __version__, "[green]OK[/green]"


def _checkout_check(porta_dir: Path) -> Check:
    """Return the row for the porta checkout directory."""
    if (porta_dir / ".git").exists():
        return "checkout", str(porta_dir), "[green]OK[/green]"
    if porta_dir.is_dir():
        return "checkout", str(porta_dir), "[yellow]WARN (not a git checkout)[/yellow]"
    return "checkout", str(porta_dir), "[yellow]WARN (missing)[/yellow]"


def _tool_check(status: ToolStatus) -> Check:
    if status.found:
        return status.name, str(status.path), "[green]OK[/green]"
    return status.name, "not found", "[yellow]WARN[/yellow]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\nporta doctor", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<48} {'Status':<8}", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<48} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_doctor_table(checks: list[Check]) -> None:
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        return

    table = Table(
        title="porta doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def run_doctor(porta_dir: Path) -> bool:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    bool
        ``False`` if a critical check fails.  Missing tools and a
        missing checkout are warnings only.
    """
    tools = detect_tools()
    checks = [
        _porta_dev_version_check(),
        _python_version_check(),
        _checkout_check(porta_dir),
        *(_tool_check(status) for status in tools),
    ]
    _print_doctor_table(checks)

    missing = [status for status in tools if not status.found]
    if missing:
        console.print("[yellow]Some tools are not installed:[/yellow]")
        for status in missing:
            console.print(f"  {status.name}: {status.install_hint}", markup=False)
        console.print()

    if any("FAIL" in status for _, _, status in checks):
        console.print("[bold red]Some checks failed.[/bold red]")
        return False
    console.print("[bold green]All checks passed.[/bold green]")
    return True


class DoctorHandler(Handler):
    def run(self) -> bool:
        return run_doctor(self.porta_dir)
