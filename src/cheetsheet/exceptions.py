"""Custom exception hierarchy for cheetsheet.

Every failure that reaches the user is a subclass of
:class:`CheetsheetError`.  Raw ``OSError`` and friends are caught where
they happen and re-raised as one of the typed errors below, carrying the
structured fields the CLI needs to build its message.

Hierarchy
---------
CheetsheetError
├── ConfigDirUnavailableError
├── SheetNotFoundError
├── SheetUnreadableError
├── RenderOutputFailedError
└── MissingDependencyError
"""

from __future__ import annotations

from pathlib import Path


class CheetsheetError(Exception):
    """Base exception for all cheetsheet errors.

    The CLI error boundary renders ``str(exc)`` as a single line and,
    when present, :attr:`hint` on the line below it.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Config directory ------------------------------------------------------

class ConfigDirUnavailableError(CheetsheetError):
    """Raised when no config directory can be derived (no home directory)."""


# --- Sheet lookup ----------------------------------------------------------

class SheetNotFoundError(CheetsheetError):
    """Raised when ``<command>.md`` does not exist in the config directory."""

    def __init__(self, command: str, searched_path: Path) -> None:
        super().__init__(
            f"No cheatsheet found for '{command}' (looked in {searched_path})",
            hint="Create a markdown file at that path to get started.",
        )
        self.command: str = command
        self.searched_path: Path = searched_path


class SheetUnreadableError(CheetsheetError):
    """Raised when the sheet exists but cannot be read as a text file."""

    def __init__(self, path: Path, cause: str) -> None:
        super().__init__(f"Cannot read cheatsheet {path}: {cause}")
        self.path: Path = path
        self.cause: str = cause


# --- Rendering -------------------------------------------------------------

class RenderOutputFailedError(CheetsheetError):
    """Raised when writing rendered output to stdout fails (e.g. broken pipe)."""

    def __init__(self, cause: str) -> None:
        super().__init__(f"Failed to write rendered cheatsheet: {cause}")
        self.cause: str = cause


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(CheetsheetError):
    """Raised when an optional runtime dependency is not importable."""
