"""Infrastructure: cheatsheet files on the local filesystem.

A sheet for ``<command>`` lives at ``<config_dir>/<command>.md``.  The
command is joined as given: no escaping, normalisation or validation.
A command containing path separators or ``..`` therefore reaches outside
the config directory, and an absolute command replaces it entirely.

Rules
-----
* Exact, case-sensitive lookup — no listing, no fuzzy fallback.
* Every ``OSError`` is mapped to a typed error from
  :mod:`cheetsheet.exceptions`.
* No user-facing output.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from cheetsheet.exceptions import SheetNotFoundError, SheetUnreadableError

logger = logging.getLogger(__name__)

SHEET_SUFFIX: str = ".md"
SHEET_ENCODING: str = "utf-8"


def sheet_path(config_dir: Path, command: str) -> Path:
    """Return the expected sheet path for *command* (no existence check)."""
    return config_dir / f"{command}{SHEET_SUFFIX}"


class FilesystemSheetStore:
    """Reads cheatsheets from a flat directory of markdown files."""

    def locate(self, config_dir: Path, command: str) -> Path:
        """Return the sheet path for *command* if it is a readable file.

        Raises
        ------
        SheetNotFoundError
            If nothing exists at the expected path.
        SheetUnreadableError
            If the path is not a regular file or is not readable.
        """
        path = sheet_path(config_dir, command)
        logger.debug("Looking up sheet at %s", path)

        try:
            mode = path.stat().st_mode
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise SheetNotFoundError(command, path) from exc
        except OSError as exc:
            raise SheetUnreadableError(path, exc.strerror or str(exc)) from exc

        if not stat.S_ISREG(mode):
            raise SheetUnreadableError(path, "not a regular file")
        if not os.access(path, os.R_OK):
            raise SheetUnreadableError(path, "permission denied")

        return path

    def read(self, path: Path) -> str:
        """Return the UTF-8 text of the sheet at *path*."""
        try:
            with path.open(encoding=SHEET_ENCODING) as handle:
                content = handle.read()
        except UnicodeDecodeError as exc:
            raise SheetUnreadableError(path, f"not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise SheetUnreadableError(path, exc.strerror or str(exc)) from exc

        logger.debug("Read %d characters from %s", len(content), path)
        return content
