"""Custom exception hierarchy for porta-dev.

All exceptions that cross layer boundaries must inherit from
:class:`PortaDevError`.  Raw third-party exceptions (PyYAML parse
errors, ``OSError`` from process spawning) must NEVER propagate beyond
the infrastructure layer — they are caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
PortaDevError
├── SettingsError
├── MissingOptionError
├── UnsupportedOptionError
├── DependencyError
├── ExecutableNotFoundError
├── WorkingDirectoryError
└── MissingArgumentError

HelpRequested is a control-flow signal, not an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from porta_dev.core.options import OptionsStore


class PortaDevError(Exception):
    """Base exception for all porta-dev errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ----------------------------------------------------------

class SettingsError(PortaDevError):
    """Raised when the persisted settings file exists but cannot be read."""


class MissingOptionError(PortaDevError):
    """Raised when a handler needs an option that resolved to nothing."""


class UnsupportedOptionError(PortaDevError):
    """Raised when an option value has no matching recipe."""


# --- Environment / tooling --------------------------------------------------

class DependencyError(PortaDevError):
    """Raised when an optional Python dependency is not installed."""


# --- Process execution ------------------------------------------------------

class ExecutableNotFoundError(PortaDevError):
    """Raised when the program of an external command is not on PATH."""


class WorkingDirectoryError(PortaDevError):
    """Raised when a handler's working directory does not exist."""


# --- Argument parsing -------------------------------------------------------

class MissingArgumentError(PortaDevError):
    """Raised when a file-requiring command is invoked without its file.

    Carries the options resolved so far so the CLI layer can render the
    usage banner with current defaults.
    """

    def __init__(self, message: str, *, options: OptionsStore) -> None:
        super().__init__(message)
        self.options: OptionsStore = options


class HelpRequested(Exception):  # noqa: N818
    """Raised by the ``--help`` flag setter to stop parsing.

    Not an error: the dispatcher prints the usage banner and exits 0.
    """

    def __init__(self, options: OptionsStore) -> None:
        super().__init__("help requested")
        self.options: OptionsStore = options
