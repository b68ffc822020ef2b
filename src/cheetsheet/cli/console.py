"""Diagnostics console with optional Rich support.

Errors and hints go to stderr through :data:`console`.  Rich is imported
lazily so bootstrap paths (``--help``, ``--version``) keep working even
when it is not installed; in that case markup tags are stripped and the
text is printed plainly.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from cheetsheet.exceptions import MissingDependencyError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def escape(text: str) -> str:
    """Escape *text* so Rich prints square brackets literally."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain-text fallback."""

    def print(self, *objects: object, soft_wrap: bool = False) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            plain = [
                _MARKUP_TAG.sub("", obj) if isinstance(obj, str) else obj
                for obj in objects
            ]
            print(*plain, file=sys.stderr)
            return
        rich_console.print(*objects, soft_wrap=soft_wrap)


console = _ConsoleProxy()
