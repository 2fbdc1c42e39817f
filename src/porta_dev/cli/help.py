"""``porta help`` — the command catalogue.

Also the fallback for a missing or unknown command name.
"""

from __future__ import annotations

from porta_dev.cli.usage import render_catalogue
from porta_dev.core.handlers import Handler


class HelpHandler(Handler):
    def run(self) -> bool:
        for line in render_catalogue(self._context.program, self._context.catalogue):
            self.reporter.line(line)
        return True
