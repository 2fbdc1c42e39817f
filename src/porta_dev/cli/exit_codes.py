"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
Replaced processes (servers, consoles, log tails) end the invocation
with their own status instead.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed, or help was requested."""

GENERAL_ERROR: int = 1
"""A handler reported failure, or a known PortaDevError was caught."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

MISSING_ARGUMENT: int = 128
"""A file-requiring command was invoked without its file argument."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
