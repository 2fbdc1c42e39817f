"""Infrastructure: locating the external tools porta-dev drives.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

REQUIRED_TOOLS: tuple[str, ...] = ("git", "docker", "oc", "bundle", "yarn", "npm")
"""Every program referenced by a recipe, in catalogue order."""


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a single ``PATH`` probe.

    Attributes
    ----------
    name : str
        Program name that was looked up.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_hint : str
        Suggested way to install the tool.  Empty when it was found.
    """

    name: str
    path: Path | None
    install_hint: str

    @property
    def found(self) -> bool:
        return self.path is not None


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe ``PATH`` for *name*; never raises."""
    result = shutil.which(name)
    if result is not None:
        return ToolStatus(name=name, path=Path(result).resolve(), install_hint="")
    return ToolStatus(name=name, path=None, install_hint=install_hint(name))


def detect_tools(names: tuple[str, ...] = REQUIRED_TOOLS) -> tuple[ToolStatus, ...]:
    return tuple(detect_tool(name) for name in names)


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

_PACKAGES: dict[str, str] = {
    "git": "git",
    "docker": "docker",
    "bundle": "ruby-bundler",
    "yarn": "yarn",
    "npm": "npm",
}

_GEMS_AND_MODULES: dict[str, str] = {
    "bundle": "gem install bundler",
    "yarn": "npm install --global yarn",
}


def install_hint(name: str) -> str:
    """Return an install suggestion for *name* on the current OS."""
    if name == "oc":
        return "Download the OpenShift CLI from https://mirror.openshift.com/pub/openshift-v4/clients/ocp/"
    if name in _GEMS_AND_MODULES:
        return _GEMS_AND_MODULES[name]

    package = _PACKAGES.get(name, name)
    system = platform.system().lower()
    if system == "darwin":
        return f"brew install {package}"
    if system == "linux":
        return f"sudo dnf install {package}  (or: sudo apt install {package})"
    if system == "windows":
        return f"winget install {package}"
    return f"Install {name} and make sure it is on PATH"
