"""Core layer — option resolution, command declarations and handlers.

Rules
-----
* No ``print()`` calls; user-facing text goes through a ``Reporter``.
* No direct subprocess, filesystem or network access — handlers talk
  to the outside world through the protocols in ``core.protocols``.
* No imports from ``cli`` or ``infra``.
"""

from porta_dev.core.config import AppConfig
from porta_dev.core.models import CommandSpec, FlagSpec, HandlerContext
from porta_dev.core.options import OptionSource, OptionsStore
from porta_dev.core.parser import OptionParser
from porta_dev.core.protocols import BranchProvider, Executor, Reporter
from porta_dev.core.registry import CommandEntry, CommandRegistry

__all__: list[str] = [
    "AppConfig",
    "BranchProvider",
    "CommandEntry",
    "CommandRegistry",
    "CommandSpec",
    "Executor",
    "FlagSpec",
    "HandlerContext",
    "OptionParser",
    "OptionSource",
    "OptionsStore",
    "Reporter",
]
