"""Resolve a command's argument vector into an :class:`OptionsStore`.

Parsing proceeds in a fixed order:

1. file-argument check (file-requiring commands only)
2. defaults layer, then settings layer
3. flag parsing with :mod:`argparse`
4. flag application through each flag's setter, in declaration order
5. derivation hooks, each via ``set_if_absent``

Malformed flags are left to :mod:`argparse`, which prints its own
message and raises ``SystemExit(2)``.  That is deliberate: a bad
invocation of an interactive developer tool should fail fast.
"""

from __future__ import annotations

import argparse
from collections.abc import Mapping, Sequence
from typing import Any

from porta_dev.core.config import AppConfig
from porta_dev.core.derivations import derive_branch
from porta_dev.core.models import CommandSpec, FlagSpec
from porta_dev.core.options import OptionSource, OptionsStore
from porta_dev.core.protocols import BranchProvider
from porta_dev.exceptions import MissingArgumentError

FILE_KEY: str = "file"


class OptionParser:
    """Parser for one :class:`CommandSpec`.

    Parameters
    ----------
    spec:
        The command being invoked.
    config:
        Process configuration supplying the defaults table.
    settings:
        The persisted settings layer (may be empty).
    branches:
        Branch lookup used by primary-repository commands.
    """

    def __init__(
        self,
        spec: CommandSpec,
        config: AppConfig,
        settings: Mapping[str, Any],
        branches: BranchProvider,
    ) -> None:
        self._spec = spec
        self._config = config
        self._settings = settings
        self._branches = branches
        self._flags: tuple[FlagSpec, ...] = spec.resolved_flags()

    @property
    def spec(self) -> CommandSpec:
        return self._spec

    @property
    def flags(self) -> tuple[FlagSpec, ...]:
        return self._flags

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, argv: Sequence[str]) -> OptionsStore:
        """Return the fully resolved options for *argv*.

        Raises
        ------
        MissingArgumentError
            When a file-requiring command gets no file argument.
        HelpRequested
            When ``--help`` is supplied.
        SystemExit
            From :mod:`argparse` on unknown flags or malformed values.
        """
        options = OptionsStore()
        options.merge(self._config.defaults, OptionSource.DEFAULT)
        options.merge(self._settings, OptionSource.SETTINGS)

        if self._spec.requires_file and not self._has_file_argument(argv):
            raise MissingArgumentError(
                f"'{self._config.program} {self._spec.name}' requires a file argument.",
                options=options,
            )

        namespace = self._build_argparser().parse_args(list(argv))
        supplied = vars(namespace)

        for flag_spec in self._flags:
            if flag_spec.option_key in supplied:
                flag_spec.apply(options, supplied[flag_spec.option_key])
        if FILE_KEY in supplied:
            options.set(FILE_KEY, supplied[FILE_KEY])

        self._run_derivations(options)
        return options

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _has_file_argument(argv: Sequence[str]) -> bool:
        return bool(argv) and not argv[0].startswith("-")

    def _build_argparser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=f"{self._config.program} {self._spec.name}",
            add_help=False,
            allow_abbrev=False,
            argument_default=argparse.SUPPRESS,
        )
        for flag_spec in self._flags:
            names = [flag_spec.cli_flag]
            if flag_spec.short:
                names.insert(0, flag_spec.short)
            if flag_spec.takes_value:
                parser.add_argument(
                    *names, dest=flag_spec.option_key, metavar=flag_spec.metavar,
                )
            else:
                parser.add_argument(
                    *names,
                    dest=flag_spec.option_key,
                    action=argparse.BooleanOptionalAction,
                )
        if self._spec.requires_file:
            parser.add_argument(FILE_KEY)
        return parser

    def _run_derivations(self, options: OptionsStore) -> None:
        hooks = list(self._spec.all_derivations)
        if self._spec.primary_repo and derive_branch not in hooks:
            hooks.insert(0, derive_branch)
        for hook in hooks:
            hook(options, self._branches)
