"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these contracts.  The filesystem store lives
in ``infra`` and the Rich renderer in ``cli``; either can be swapped
without touching resolution or lookup logic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class SheetStore(Protocol):
    """Contract for cheatsheet storage backends."""

    def locate(self, config_dir: Path, command: str) -> Path:
        """Return the path of the sheet for *command* inside *config_dir*.

        Raises
        ------
        SheetNotFoundError
            When no sheet exists for *command*.
        SheetUnreadableError
            When the sheet exists but is not a readable regular file.
        """
        ...  # pragma: no cover

    def read(self, path: Path) -> str:
        """Return the full text of the sheet at *path*.

        Raises
        ------
        SheetUnreadableError
            When the file cannot be opened or decoded.
        """
        ...  # pragma: no cover


class SheetRenderer(Protocol):
    """Contract for markdown renderers."""

    def render(self, content: str) -> None:
        """Write *content*, formatted, to the output stream.

        Raises
        ------
        RenderOutputFailedError
            When the output stream rejects the write.
        """
        ...  # pragma: no cover
