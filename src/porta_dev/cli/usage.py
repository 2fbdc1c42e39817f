"""Usage banner and command catalogue rendering.

Both renderers are pure: they return lines, and the caller decides
where to print them.
"""

from __future__ import annotations

from collections.abc import Sequence

from porta_dev.core.models import CommandSpec, FlagSpec
from porta_dev.core.options import OptionsStore

_INDENT = "  "


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

def flag_label(flag_spec: FlagSpec) -> str:
    """``-d, --porta-dir=PORTA_DIR`` or ``    --[no-]explain``."""
    if flag_spec.takes_value:
        long_form = f"{flag_spec.cli_flag}={flag_spec.metavar}"
    else:
        long_form = "--[no-]" + flag_spec.cli_flag.removeprefix("--")
    prefix = f"{flag_spec.short}, " if flag_spec.short else "    "
    return prefix + long_form


def flag_description(flag_spec: FlagSpec, options: OptionsStore) -> str:
    """Description, followed by the resolved value for value flags."""
    value = options.get(flag_spec.option_key)
    if flag_spec.takes_value and value not in (None, ""):
        return f"{flag_spec.description} ({value})"
    return flag_spec.description


def _columns(rows: Sequence[tuple[str, str]]) -> list[str]:
    width = max((len(left) for left, _ in rows), default=0) + 2
    return [f"{_INDENT}{left.ljust(width)}{right}".rstrip() for left, right in rows]


# ---------------------------------------------------------------------------
# Public renderers
# ---------------------------------------------------------------------------

def render_usage(
    program: str,
    spec: CommandSpec,
    flags: Sequence[FlagSpec],
    options: OptionsStore,
) -> list[str]:
    """Return the usage banner of *spec*, one flag per line."""
    synopsis = f"Usage: {program} {spec.name} [options]"
    if spec.requires_file:
        synopsis += " FILE"

    lines = [synopsis, ""]
    if spec.summary:
        lines.extend([spec.summary, ""])
    lines.append("Options:")
    lines.extend(
        _columns([(flag_label(f), flag_description(f, options)) for f in flags]),
    )
    return lines


def render_catalogue(program: str, catalogue: Sequence[tuple[str, str]]) -> list[str]:
    """Return the list of commands shown by ``help``."""
    lines = [f"Usage: {program} COMMAND [options]", "", "Commands:"]
    lines.extend(_columns(list(catalogue)))
    lines.extend(["", f"Run '{program} COMMAND --help' to see the options of a command."])
    return lines
