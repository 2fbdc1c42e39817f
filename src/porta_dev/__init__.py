"""porta-dev — developer workstation helper for the porta environment.

Dispatches ``porta <command>`` invocations to short orchestration
scripts over docker, oc, bundle, npm and yarn.
"""

from porta_dev.version import __version__

__all__: list[str] = ["__version__"]
