"""Process-scoped application configuration.

:class:`AppConfig` is built once at startup and handed explicitly to
the dispatcher, the parser and the settings loader.  It owns the
built-in defaults table — the lowest layer of every
:class:`~porta_dev.core.options.OptionsStore`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from porta_dev.core.options import OptionValue

HOME_ENV_VAR: str = "PORTA_DEV_HOME"
"""Environment variable overriding the installation root."""

SETTINGS_FILENAME: str = "settings.yml"


def default_options(home: Path) -> dict[str, OptionValue]:
    """Return the built-in defaults table for a user whose home is *home*."""
    return {
        "porta_dir": str(home / "porta"),
        "branch": None,
        "project": "porta",
        "rails_env": "development",
        "database": "mysql",
        "port": "3000",
        "image_repository": "quay.io/3scale/porta",
        "image_tag": None,
        "dockerfile": "openshift/system/Dockerfile",
        "cluster_domain": "apps-crc.testing",
        "cluster_endpoint": None,
        "wildcard_domain": None,
        "oc_token": None,
        "oc_username": "developer",
        "oc_password": "developer",
        "docker_config": str(home / ".docker" / "config.json"),
        "template": "openshift/system.yml",
        "component": "system-app",
        "explain": False,
        "verbose": False,
        "help": False,
    }


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Immutable configuration shared by one process."""

    install_root: Path
    defaults: Mapping[str, OptionValue]
    program: str = "porta"

    @property
    def settings_path(self) -> Path:
        return self.install_root / SETTINGS_FILENAME

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        home: Path | None = None,
    ) -> AppConfig:
        """Build the configuration from ``$PORTA_DEV_HOME`` and the home dir."""
        env = os.environ if environ is None else environ
        home_dir = Path.home() if home is None else home

        override = env.get(HOME_ENV_VAR)
        root = Path(override).expanduser() if override else home_dir / ".porta-dev"
        return cls(
            install_root=root,
            defaults=MappingProxyType(default_options(home_dir)),
        )
