"""Infrastructure: running external commands.

:class:`ProcessExecutor` is the one place porta-dev spawns processes.
It satisfies :class:`~porta_dev.core.protocols.Executor` structurally.

Modes
-----
* *explain* — echo every command as ``[CMD] …`` and run nothing.
* *verbose* — echo every command, then run it.

Rules
-----
* Commands are split with :func:`shlex.split` and run without a shell.
* User-facing output goes through the injected ``Reporter`` only.
* ``OSError`` from spawning is mapped to typed porta-dev errors.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import NoReturn

from porta_dev.core.protocols import Reporter
from porta_dev.exceptions import ExecutableNotFoundError, WorkingDirectoryError

CMD_PREFIX: str = "[CMD]"
DIR_PREFIX: str = "[DIR]"


def describe(command: str, env: Mapping[str, str] | None = None) -> str:
    """Render *command* prefixed by its environment assignments."""
    assignments = " ".join(f"{key}={value}" for key, value in (env or {}).items())
    return f"{assignments} {command}" if assignments else command


def exit_status(returncode: int) -> int:
    """Map a ``Popen.returncode`` to a shell-style exit status."""
    if returncode < 0:
        # killed by a signal
        return 128 - returncode
    return returncode


class ProcessExecutor:
    """Run or echo external commands on behalf of the handlers.

    Parameters
    ----------
    reporter:
        Sink for the ``[CMD]``/``[DIR]`` diagnostic lines.
    explain:
        Echo commands without running them.
    verbose:
        Echo commands before running them.
    """

    def __init__(
        self,
        reporter: Reporter,
        *,
        explain: bool = False,
        verbose: bool = False,
    ) -> None:
        self._reporter: Reporter = reporter
        self._explain: bool = explain
        self._verbose: bool = verbose

    @property
    def explain(self) -> bool:
        return self._explain

    @property
    def verbose(self) -> bool:
        return self._verbose

    # ------------------------------------------------------------------
    # Executor protocol
    # ------------------------------------------------------------------

    def run(self, command: str, env: Mapping[str, str] | None = None) -> bool:
        """Run *command* to completion; ``True`` when it exited with 0."""
        self._echo(CMD_PREFIX, describe(command, env))
        if self._explain:
            return True

        argv = shlex.split(command)
        try:
            completed = subprocess.run(argv, env=self._environment(env), check=False)
        except OSError as exc:
            raise self._spawn_error(argv[0], exc) from exc
        return completed.returncode == 0

    def replace(self, command: str, env: Mapping[str, str] | None = None) -> bool:
        """Hand the terminal to *command* and end the invocation with its status.

        The child inherits stdin/stdout/stderr.  Ctrl-C reaches the
        child through the terminal; this process keeps waiting so the
        child's own exit status is the one reported.
        """
        self._echo(CMD_PREFIX, describe(command, env))
        if self._explain:
            return True
        self._spawn_and_exit(shlex.split(command), env)

    @contextmanager
    def working_directory(self, path: Path) -> Iterator[Path]:
        """Scope the process working directory to *path*.

        The previous directory is restored on every exit path.  In
        explain mode the directory is only echoed.
        """
        self._echo(DIR_PREFIX, str(path))
        if self._explain:
            yield path
            return

        previous = Path.cwd()
        try:
            os.chdir(path)
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise WorkingDirectoryError(
                f"Directory not found: {path}",
                hint="Pass --porta-dir=PATH or set 'porta_dir' in the settings file.",
            ) from exc
        try:
            yield path
        finally:
            os.chdir(previous)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _echo(self, prefix: str, text: str) -> None:
        if self._explain or self._verbose:
            self._reporter.line(f"{prefix} {text}")

    @staticmethod
    def _environment(env: Mapping[str, str] | None) -> dict[str, str] | None:
        if not env:
            return None
        return {**os.environ, **env}

    @staticmethod
    def _spawn_error(program: str, exc: OSError) -> ExecutableNotFoundError:
        if isinstance(exc, FileNotFoundError):
            return ExecutableNotFoundError(
                f"Command not found: {program}",
                hint="Run 'porta doctor' to see which tools are missing.",
            )
        return ExecutableNotFoundError(
            f"Cannot run {program}: {exc.strerror or exc}",
            hint=f"Check that {program} is an executable file.",
        )

    def _spawn_and_exit(
        self, argv: list[str], env: Mapping[str, str] | None,
    ) -> NoReturn:
        try:
            process = subprocess.Popen(argv, env=self._environment(env))
        except OSError as exc:
            raise self._spawn_error(argv[0], exc) from exc

        while True:
            try:
                returncode = process.wait()
                break
            except KeyboardInterrupt:
                continue
        raise SystemExit(exit_status(returncode))
