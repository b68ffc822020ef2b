"""Allow ``python -m cheetsheet`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cheetsheet`` behaves identically to the ``cheetsheet``
console script.
"""

from __future__ import annotations

from cheetsheet.cli.app import cli

if __name__ == "__main__":
    cli()
