"""Layered option store shared by the parser, derivations and handlers.

Layers are merged in increasing precedence:

1. built-in defaults (:attr:`OptionSource.DEFAULT`)
2. derived values (:attr:`OptionSource.DERIVED`)
3. persisted settings (:attr:`OptionSource.SETTINGS`)
4. explicit command-line flags (:attr:`OptionSource.FLAG`)

Derived values are written with :meth:`OptionsStore.set_if_absent`
only, so they replace nothing but a built-in default.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from typing import Any, Union

OptionValue = Union[str, bool, None]


class OptionSource(enum.IntEnum):
    """Which layer last wrote an option.  Diagnostic only."""

    DEFAULT = 0
    DERIVED = 1
    SETTINGS = 2
    FLAG = 3


class OptionsStore:
    """Mutable key/value store for a single invocation.

    All commands share one flat namespace of option keys.
    """

    def __init__(self) -> None:
        self._values: dict[str, OptionValue] = {}
        self._sources: dict[str, OptionSource] = {}

    # ------------------------------------------------------------------
    # Layering
    # ------------------------------------------------------------------

    def merge(
        self,
        layer: Mapping[str, Any],
        source: OptionSource = OptionSource.DEFAULT,
    ) -> None:
        """Apply *layer* over the current contents; *layer* wins."""
        for key, value in layer.items():
            self.set(str(key), value, source=source)

    def set(
        self,
        key: str,
        value: OptionValue,
        *,
        source: OptionSource = OptionSource.FLAG,
    ) -> None:
        self._values[key] = value
        self._sources[key] = source

    def set_if_absent(self, key: str, value: OptionValue) -> bool:
        """Store a derived *value* unless *key* was set explicitly.

        Returns ``True`` when the value was stored.  A ``None`` value,
        or a key already written by a flag, the settings file or an
        earlier derivation leaves the store untouched.
        """
        if value is None:
            return False
        if self._sources.get(key, OptionSource.DEFAULT) > OptionSource.DEFAULT:
            return False
        self.set(key, value, source=OptionSource.DERIVED)
        return True

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, key: str, default: OptionValue = None) -> OptionValue:
        value = self._values.get(key)
        return default if value is None else value

    def enabled(self, key: str) -> bool:
        """Boolean reading of *key*; absent keys are ``False``."""
        return bool(self._values.get(key, False))

    def source_of(self, key: str) -> OptionSource | None:
        return self._sources.get(key)

    def as_dict(self) -> dict[str, OptionValue]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __getitem__(self, key: str) -> OptionValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"OptionsStore({self._values!r})"
