"""Infrastructure: the persisted user settings file.

The file is a YAML document with a single top-level ``settings`` key::

    settings:
      porta_dir: ~/src/porta
      cluster_domain: apps.example.com

Every sub-key is taken as an option name.  A missing file is not an
error — it yields an empty settings layer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from porta_dev.exceptions import SettingsError

SETTINGS_KEY: str = "settings"


def load_settings(path: Path) -> dict[str, Any]:
    """Return the ``settings`` mapping stored at *path*.

    Raises
    ------
    SettingsError
        When the file exists but is unreadable, is not valid YAML, or
        its ``settings`` entry is not a mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc

    try:
        document: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SettingsError(
            f"Settings file {path} is not valid YAML.",
            hint=str(exc),
        ) from exc

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise SettingsError(
            f"Settings file {path} must contain a mapping.",
            hint=f"Put your options under a top-level '{SETTINGS_KEY}:' key.",
        )

    settings = document.get(SETTINGS_KEY)
    if settings is None:
        return {}
    if not isinstance(settings, dict):
        raise SettingsError(
            f"'{SETTINGS_KEY}' in {path} must be a mapping of option names to values.",
        )
    return {str(key): value for key, value in settings.items()}
