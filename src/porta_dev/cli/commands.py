"""Registry wiring: bind every command declaration to its handler."""

from __future__ import annotations

from porta_dev.cli.doctor import DoctorHandler
from porta_dev.cli.help import HelpHandler
from porta_dev.core import commands, handlers
from porta_dev.core.models import CommandSpec
from porta_dev.core.registry import CommandRegistry, HandlerFactory

COMMANDS: tuple[tuple[CommandSpec, HandlerFactory], ...] = (
    (commands.HELP, HelpHandler),
    (commands.DOCTOR, DoctorHandler),
    (commands.SERVER, handlers.ServerHandler),
    (commands.CONSOLE, handlers.ConsoleHandler),
    (commands.SIDEKIQ, handlers.SidekiqHandler),
    (commands.TEST, handlers.RailsTestHandler),
    (commands.CUCUMBER, handlers.CucumberHandler),
    (commands.SETUP, handlers.SetupHandler),
    (commands.WEBPACK, handlers.WebpackHandler),
    (commands.DEPS, handlers.DepsHandler),
    (commands.BUILD, handlers.BuildHandler),
    (commands.PUSH, handlers.PushHandler),
    (commands.DEPLOY, handlers.DeployHandler),
    (commands.LOGS, handlers.LogsHandler),
    (commands.DESTROY, handlers.DestroyHandler),
)


def build_registry() -> CommandRegistry:
    """Return a registry holding every porta command, ``help`` as fallback."""
    registry = CommandRegistry(fallback=commands.HELP.name)
    for spec, handler in COMMANDS:
        registry.register(spec, handler)
    return registry
