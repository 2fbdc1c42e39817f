"""Command dispatch: argv in, exit code out.

The dispatcher resolves the command name, parses the remaining
arguments into an options store, builds the executor for the resolved
explain/verbose modes and runs the handler.  It is the only place that
turns parser signals (help requested, missing file) into exit codes.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

from porta_dev.cli import exit_codes
from porta_dev.cli.usage import render_usage
from porta_dev.core.config import AppConfig
from porta_dev.core.models import HandlerContext
from porta_dev.core.options import OptionsStore
from porta_dev.core.parser import OptionParser
from porta_dev.core.protocols import BranchProvider, Executor, Reporter
from porta_dev.core.registry import CommandRegistry
from porta_dev.exceptions import HelpRequested, MissingArgumentError

SettingsLoader = Callable[[Path], Mapping[str, Any]]
ExecutorFactory = Callable[..., Executor]


class CommandDispatcher:
    """Route one invocation to its handler.

    Parameters
    ----------
    registry:
        Registered commands; unknown names fall back to ``help``.
    config:
        Process configuration (defaults table, settings path).
    reporter:
        Sink for usage banners and diagnostics.
    branches:
        Branch lookup for primary-repository commands.
    settings_loader:
        Reads the persisted settings layer; called at most once.
    executor_factory:
        Builds the executor from ``(reporter, explain=…, verbose=…)``.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        config: AppConfig,
        *,
        reporter: Reporter,
        branches: BranchProvider,
        settings_loader: SettingsLoader,
        executor_factory: ExecutorFactory,
    ) -> None:
        self._registry = registry
        self._config = config
        self._reporter = reporter
        self._branches = branches
        self._settings_loader = settings_loader
        self._executor_factory = executor_factory
        self._settings: Mapping[str, Any] | None = None

    def settings(self) -> Mapping[str, Any]:
        """Return the settings layer, loading it on first use."""
        if self._settings is None:
            self._settings = self._settings_loader(self._config.settings_path)
        return self._settings

    def dispatch(self, argv: Sequence[str]) -> int:
        name = argv[0] if argv else None
        entry = self._registry.get(name)
        arguments = list(argv[1:])
        if entry is None:
            entry = self._registry.lookup(None)
            arguments = []

        parser = OptionParser(entry.spec, self._config, self.settings(), self._branches)
        try:
            options = parser.parse(arguments)
        except HelpRequested as exc:
            self._print_usage(parser, exc.options)
            return exit_codes.SUCCESS
        except MissingArgumentError as exc:
            self._reporter.line(str(exc))
            self._reporter.line()
            self._print_usage(parser, exc.options)
            return exit_codes.MISSING_ARGUMENT

        executor = self._executor_factory(
            self._reporter,
            explain=options.enabled("explain"),
            verbose=options.enabled("verbose"),
        )
        context = HandlerContext(
            options=options,
            executor=executor,
            reporter=self._reporter,
            catalogue=self._registry.catalogue(),
            program=self._config.program,
        )
        handler = entry.handler(context)
        return exit_codes.SUCCESS if handler.run() else exit_codes.GENERAL_ERROR

    def _print_usage(self, parser: OptionParser, options: OptionsStore) -> None:
        for line in render_usage(self._config.program, parser.spec, parser.flags, options):
            self._reporter.line(line)
