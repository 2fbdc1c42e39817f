"""Explicit command-name to (spec, handler) registration table."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from porta_dev.core.models import CommandSpec, HandlerContext

if TYPE_CHECKING:
    from porta_dev.core.handlers import Handler

HandlerFactory = Callable[[HandlerContext], "Handler"]


@dataclass(frozen=True, slots=True)
class CommandEntry:
    """A dispatchable command: its declaration and its handler factory."""

    spec: CommandSpec
    handler: HandlerFactory

    @property
    def name(self) -> str:
        return self.spec.name


class CommandRegistry:
    """Case-insensitive lookup of :class:`CommandEntry` objects.

    Unknown or missing command names resolve to the *fallback* entry,
    which must be registered before the first lookup.
    """

    def __init__(self, fallback: str = "help") -> None:
        self._entries: dict[str, CommandEntry] = {}
        self._fallback: str = fallback.casefold()

    def register(self, spec: CommandSpec, handler: HandlerFactory) -> CommandEntry:
        key = spec.name.casefold()
        if key in self._entries:
            raise ValueError(f"Command {spec.name!r} is already registered.")
        entry = CommandEntry(spec=spec, handler=handler)
        self._entries[key] = entry
        return entry

    def get(self, name: str | None) -> CommandEntry | None:
        if name is None:
            return None
        return self._entries.get(name.casefold())

    def lookup(self, name: str | None) -> CommandEntry:
        """Return the entry for *name*, or the fallback entry."""
        entry = self.get(name)
        if entry is not None:
            return entry
        try:
            return self._entries[self._fallback]
        except KeyError:
            raise LookupError(
                f"No fallback command {self._fallback!r} registered.",
            ) from None

    def catalogue(self) -> tuple[tuple[str, str], ...]:
        return tuple((entry.name, entry.spec.summary) for entry in self)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._entries

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
