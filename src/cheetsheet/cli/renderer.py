"""Rich-based markdown renderer.

Turns cheatsheet markdown into styled terminal output: headings,
tables, code spans, lists and emphasis are all handled by
:class:`rich.markdown.Markdown`.  Markdown that Rich cannot interpret is
printed as plain text rather than rejected.

Width follows the terminal at the moment :meth:`render` runs; when
stdout is not a terminal (redirected to a file or a pipe) Rich falls
back to 80 columns.
"""

from __future__ import annotations

import logging
from typing import Any

from cheetsheet.exceptions import MissingDependencyError, RenderOutputFailedError

logger = logging.getLogger(__name__)

DEFAULT_CODE_THEME: str = "monokai"


def _import_rich_markdown() -> tuple[type[Any], type[Any]]:
    """Import Rich lazily and return a stdout ``Console`` class and ``Markdown``.

    Rich's own console answers a closed pipe with ``SystemExit(1)``; the
    returned subclass raises :class:`RenderOutputFailedError` instead so
    the CLI error boundary reports it.
    """
    try:
        from rich.console import Console
        from rich.markdown import Markdown
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc

    class _StdoutConsole(Console):
        def on_broken_pipe(self) -> None:
            self.quiet = True
            raise RenderOutputFailedError("Broken pipe")

    return _StdoutConsole, Markdown


class RichMarkdownRenderer:
    """Render markdown to stdout through Rich.

    Parameters
    ----------
    console:
        Rich console to print to.  When ``None`` (default) a fresh
        stdout console is created on every :meth:`render` call so the
        current terminal width is picked up.
    code_theme:
        Pygments theme name used for fenced code blocks.
    """

    def __init__(
        self,
        console: Any | None = None,
        *,
        code_theme: str = DEFAULT_CODE_THEME,
    ) -> None:
        self._console: Any | None = console
        self._code_theme: str = code_theme

    def render(self, content: str) -> None:
        """Print *content* as formatted markdown.

        Raises
        ------
        RenderOutputFailedError
            If writing to the output stream fails (e.g. broken pipe).
        MissingDependencyError
            If Rich is not installed.
        """
        console_class, markdown_class = _import_rich_markdown()
        console = self._console if self._console is not None else console_class()
        markdown = markdown_class(content, code_theme=self._code_theme)

        logger.debug("Rendering %d characters at width %s", len(content), console.width)
        try:
            console.print(markdown)
        except OSError as exc:
            raise RenderOutputFailedError(exc.strerror or str(exc)) from exc
