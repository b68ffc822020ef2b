"""cheetsheet — terminal cheatsheet viewer.

Looks up ``<command>.md`` in the cheatsheet directory and renders it
to the terminal with Rich.
"""

from cheetsheet.version import __version__

__all__: list[str] = ["__version__"]
