"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — the sheet was rendered."""

GENERAL_ERROR: int = 1
"""A known CheetsheetError was caught. User-facing message was displayed."""

USAGE_ERROR: int = 2
"""Bad command-line arguments.  Matches argparse's own exit status."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries.

Shares its value with :data:`USAGE_ERROR` on purpose: any status other
than 0 or 1 means the lookup itself never ran to a known outcome.
"""
