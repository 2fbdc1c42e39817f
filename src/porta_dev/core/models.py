"""Domain models for porta-dev.

Flag and command declarations are **frozen** dataclasses — immutable
value objects built once when the registry is populated.  The only
behaviour they carry is flag-list resolution, which is pure.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from porta_dev.core.options import OptionsStore, OptionValue
from porta_dev.exceptions import HelpRequested

if TYPE_CHECKING:
    from porta_dev.core.protocols import BranchProvider, Executor, Reporter

Setter = Callable[[OptionsStore, OptionValue], None]
Derivation = Callable[[OptionsStore, "BranchProvider"], None]


# ---------------------------------------------------------------------------
# Flag declaration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagSpec:
    """A single command-line flag bound to an option key."""

    option_key: str
    """Key written into the :class:`OptionsStore`."""

    description: str
    """One-line help text shown in the usage banner."""

    takes_value: bool = True
    """``False`` declares a ``--[no-]name`` boolean flag."""

    short: str | None = None
    """Optional single-dash alias, e.g. ``-v``."""

    flag: str | None = None
    """Explicit long flag; derived from :attr:`option_key` when unset."""

    setter: Setter | None = None
    """Custom assignment; the default stores the raw value."""

    @property
    def cli_flag(self) -> str:
        if self.flag is not None:
            return self.flag
        return "--" + self.option_key.replace("_", "-")

    @property
    def metavar(self) -> str:
        return self.option_key.upper()

    def apply(self, store: OptionsStore, value: OptionValue) -> None:
        """Write an explicitly supplied *value* into *store*."""
        if self.setter is not None:
            self.setter(store, value)
        else:
            store.set(self.option_key, value)


def _request_help(store: OptionsStore, value: OptionValue) -> None:
    if value:
        raise HelpRequested(store)


# Implicit flags shared by every concrete command.
PORTA_DIR_FLAG = FlagSpec("porta_dir", "Path of the porta checkout", short="-d")
EXPLAIN_FLAG = FlagSpec(
    "explain", "Print the commands instead of running them", takes_value=False,
)
VERBOSE_FLAG = FlagSpec(
    "verbose", "Print the commands before running them", takes_value=False, short="-v",
)
HELP_FLAG = FlagSpec(
    "help", "Show this message", takes_value=False, short="-h", setter=_request_help,
)


# ---------------------------------------------------------------------------
# Command declaration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Declarative description of a subcommand (or of a flag base).

    Inheritance is capped at two levels: a base spec may not itself
    have a parent.
    """

    name: str
    summary: str = ""
    flags: tuple[FlagSpec, ...] = ()
    parent: CommandSpec | None = None
    requires_file: bool = False
    uses_primary_repo: bool = False
    derivations: tuple[Derivation, ...] = ()

    def __post_init__(self) -> None:
        if self.parent is not None and self.parent.parent is not None:
            raise ValueError(
                f"Command {self.name!r} extends {self.parent.name!r}, "
                "which already has a parent; only one level of inheritance "
                "is supported.",
            )

    @property
    def all_derivations(self) -> tuple[Derivation, ...]:
        inherited = self.parent.derivations if self.parent is not None else ()
        return inherited + tuple(d for d in self.derivations if d not in inherited)

    @property
    def primary_repo(self) -> bool:
        if self.uses_primary_repo:
            return True
        return self.parent is not None and self.parent.uses_primary_repo

    def resolved_flags(self) -> tuple[FlagSpec, ...]:
        """Return the full, ordered flag list of this command.

        ``porta_dir`` comes first, then the parent's flags, then this
        command's own flags, then ``explain``, ``verbose`` and ``help``.
        A later declaration of an already-seen key replaces the earlier
        one in place.
        """
        declared: list[FlagSpec] = [PORTA_DIR_FLAG]
        if self.parent is not None:
            declared.extend(self.parent.flags)
        declared.extend(self.flags)

        merged: dict[str, FlagSpec] = {}
        for flag_spec in declared:
            # dict keeps first-insertion order while the value is replaced
            merged[flag_spec.option_key] = flag_spec
        for trailing in (EXPLAIN_FLAG, VERBOSE_FLAG, HELP_FLAG):
            merged.setdefault(trailing.option_key, trailing)
        return tuple(merged.values())


# ---------------------------------------------------------------------------
# Handler context
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HandlerContext:
    """Everything a handler needs to run one invocation."""

    options: OptionsStore
    executor: Executor
    reporter: Reporter
    catalogue: tuple[tuple[str, str], ...] = field(default=())
    """``(name, summary)`` of every registered command."""

    program: str = "porta"
