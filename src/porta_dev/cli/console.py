"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

Two proxies are exported: :data:`console` writes to stderr (errors,
doctor report) and :data:`out` writes to stdout (usage banners, the
command catalogue, ``[CMD]``/``[DIR]`` diagnostics).
"""

from __future__ import annotations

import sys
from typing import Any

from porta_dev.exceptions import DependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``DependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise DependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = True) -> None:
		self._stderr: bool = stderr

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except DependencyError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, **options)


class ConsoleReporter:
	"""``Reporter`` that writes lines verbatim to stdout.

	Markup, emoji codes, highlighting and wrapping are disabled so a line
	such as ``[CMD] docker push …`` is printed exactly as built.
	"""

	def __init__(self, proxy: _ConsoleProxy | None = None) -> None:
		self._proxy: _ConsoleProxy = proxy if proxy is not None else out

	def line(self, text: str = "") -> None:
		self._proxy.print(
			text, markup=False, highlight=False, emoji=False, soft_wrap=True,
		)


console = _ConsoleProxy()
out = _ConsoleProxy(stderr=False)
