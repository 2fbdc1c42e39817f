"""Command handlers — short orchestration scripts over an executor.

Each handler receives a :class:`~porta_dev.core.models.HandlerContext`
and returns ``True`` on success from :meth:`Handler.run`.  Multi-step
handlers chain executor calls with ``and`` so the first failing step
stops the sequence; there are no retries and no rollback.

Terminal steps that hand the terminal to a long-running process
(servers, consoles, log tails) use :meth:`Executor.replace`.
"""

from __future__ import annotations

from pathlib import Path

from porta_dev.core import recipes
from porta_dev.core.models import HandlerContext
from porta_dev.core.options import OptionsStore
from porta_dev.core.protocols import Executor, Reporter
from porta_dev.exceptions import MissingOptionError, UnsupportedOptionError


class Handler:
    """Base class for every command handler."""

    def __init__(self, context: HandlerContext) -> None:
        self._context: HandlerContext = context

    @property
    def options(self) -> OptionsStore:
        return self._context.options

    @property
    def executor(self) -> Executor:
        return self._context.executor

    @property
    def reporter(self) -> Reporter:
        return self._context.reporter

    @property
    def porta_dir(self) -> Path:
        return Path(self.value("porta_dir")).expanduser()

    def value(self, key: str) -> str:
        """Return option *key* as a string, or raise when it is unset."""
        raw = self.options.get(key)
        if raw is None or raw == "":
            flag = "--" + key.replace("_", "-")
            raise MissingOptionError(
                f"No value for '{key}'.",
                hint=f"Pass {flag}=VALUE or add '{key}' to the settings file.",
            )
        return str(raw)

    def run(self) -> bool:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Rails application
# ---------------------------------------------------------------------------

class RailsHandler(Handler):
    """Handlers that run inside the porta checkout with ``RAILS_ENV`` set."""

    def rails_env(self) -> dict[str, str]:
        return {"RAILS_ENV": self.value("rails_env")}


class ServerHandler(RailsHandler):
    def run(self) -> bool:
        command = recipes.render(recipes.RAILS_SERVER, port=self.value("port"))
        with self.executor.working_directory(self.porta_dir):
            return self.executor.replace(command, env=self.rails_env())


class ConsoleHandler(RailsHandler):
    def run(self) -> bool:
        with self.executor.working_directory(self.porta_dir):
            return self.executor.replace(recipes.RAILS_CONSOLE, env=self.rails_env())


class SidekiqHandler(RailsHandler):
    def run(self) -> bool:
        with self.executor.working_directory(self.porta_dir):
            return self.executor.replace(recipes.SIDEKIQ, env=self.rails_env())


class RailsTestHandler(RailsHandler):
    """Run a single test file; the path is relative to the checkout."""

    recipe: str = recipes.RAILS_TEST

    def rails_env(self) -> dict[str, str]:
        return {"RAILS_ENV": "test"}

    def run(self) -> bool:
        command = recipes.render(self.recipe, file=self.value("file"))
        with self.executor.working_directory(self.porta_dir):
            return self.executor.replace(command, env=self.rails_env())


class CucumberHandler(RailsTestHandler):
    recipe = recipes.CUCUMBER


class SetupHandler(RailsHandler):
    """Install gems and packages, then create and seed the database."""

    def run(self) -> bool:
        env = self.rails_env()
        with self.executor.working_directory(self.porta_dir):
            return (
                self.executor.run(recipes.BUNDLE_INSTALL)
                and self.executor.run(recipes.YARN_INSTALL)
                and self.executor.run(recipes.DB_SETUP, env=env)
            )


class WebpackHandler(Handler):
    def run(self) -> bool:
        with self.executor.working_directory(self.porta_dir):
            return self.executor.replace(recipes.WEBPACK_DEV)


# ---------------------------------------------------------------------------
# Local dependencies (containers)
# ---------------------------------------------------------------------------

class DepsHandler(Handler):
    """Start the database, redis and memcached containers."""

    def database_recipe(self) -> str:
        database = self.value("database").lower()
        try:
            return recipes.DATABASE_CONTAINERS[database]
        except KeyError:
            supported = ", ".join(sorted(recipes.DATABASE_CONTAINERS))
            raise UnsupportedOptionError(
                f"Unsupported database: {database}",
                hint=f"Choose one of: {supported}",
            ) from None

    def run(self) -> bool:
        return (
            self.executor.run(self.database_recipe())
            and self.executor.run(recipes.REDIS_CONTAINER)
            and self.executor.run(recipes.MEMCACHED_CONTAINER)
        )


# ---------------------------------------------------------------------------
# Container image
# ---------------------------------------------------------------------------

class BuildHandler(Handler):
    def run(self) -> bool:
        command = recipes.render(
            recipes.DOCKER_BUILD,
            tag=self.value("image_tag"),
            dockerfile=self.value("dockerfile"),
        )
        with self.executor.working_directory(self.porta_dir):
            return self.executor.run(command)


class PushHandler(Handler):
    def run(self) -> bool:
        return self.executor.run(
            recipes.render(recipes.DOCKER_PUSH, tag=self.value("image_tag")),
        )


# ---------------------------------------------------------------------------
# OpenShift
# ---------------------------------------------------------------------------

class DeployHandler(Handler):
    """Log in, create the project, upload the pull secret, create the app."""

    def login_command(self) -> str:
        endpoint = self.value("cluster_endpoint")
        token = self.options.get("oc_token")
        if token:
            return recipes.render(recipes.OC_LOGIN_TOKEN, endpoint=endpoint, token=token)
        return recipes.render(
            recipes.OC_LOGIN_PASSWORD,
            endpoint=endpoint,
            username=self.value("oc_username"),
            password=self.value("oc_password"),
        )

    def run(self) -> bool:
        project = self.value("project")
        login = self.login_command()
        new_project = recipes.render(recipes.OC_NEW_PROJECT, project=project)
        secret = recipes.render(
            recipes.OC_PULL_SECRET,
            docker_config=Path(self.value("docker_config")).expanduser(),
            project=project,
        )
        new_app = recipes.render(
            recipes.OC_NEW_APP,
            template=self.value("template"),
            wildcard_domain=self.value("wildcard_domain"),
            image_tag=self.value("image_tag"),
            project=project,
        )
        with self.executor.working_directory(self.porta_dir):
            return (
                self.executor.run(login)
                and self.executor.run(new_project)
                and self.executor.run(secret)
                and self.executor.run(new_app)
            )


class LogsHandler(Handler):
    def run(self) -> bool:
        return self.executor.replace(
            recipes.render(
                recipes.OC_LOGS,
                component=self.value("component"),
                project=self.value("project"),
            ),
        )


class DestroyHandler(Handler):
    def run(self) -> bool:
        return self.executor.run(
            recipes.render(recipes.OC_DELETE_PROJECT, project=self.value("project")),
        )
