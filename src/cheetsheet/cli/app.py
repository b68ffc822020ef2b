"""CLI application entry point for cheetsheet.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cheetsheet.exceptions.CheetsheetError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering a
one-line message on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — resolution, lookup and rendering are
  delegated to ``core``, ``infra`` and :mod:`cheetsheet.cli.renderer`.
* Argument errors are reported by argparse (usage on stderr, exit 2)
  before any other component runs.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from cheetsheet.cli import exit_codes
from cheetsheet.cli.console import console, escape
from cheetsheet.core.models import InvocationArgs
from cheetsheet.core.protocols import SheetRenderer, SheetStore
from cheetsheet.exceptions import CheetsheetError, RenderOutputFailedError
from cheetsheet.version import __version__

logger = logging.getLogger(__name__)

LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="cheetsheet",
        description="Terminal cheatsheet viewer.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        metavar="COMMAND",
        help="Command name to look up (e.g. tmux, git, docker).",
    )
    parser.add_argument(
        "-c",
        "--config-dir",
        metavar="DIR",
        default=None,
        help="Custom config directory (default: $XDG_CONFIG_HOME/cheetsheet "
        "or ~/.config/cheetsheet).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log lookup details to stderr.",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> InvocationArgs:
    """Parse *argv* into :class:`InvocationArgs`.

    Exits with :data:`exit_codes.USAGE_ERROR` on bad arguments.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.error("COMMAND must not be empty")

    config_dir = Path(args.config_dir) if args.config_dir else None
    return InvocationArgs(
        command=args.command,
        config_dir=config_dir,
        verbose=args.verbose,
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_show(
    invocation: InvocationArgs,
    *,
    store: SheetStore | None = None,
    renderer: SheetRenderer | None = None,
) -> int:
    """Resolve, load and render a single cheatsheet.

    Flow:
    1. Resolve the config directory.
    2. Locate and read ``<command>.md`` through *store*.
    3. Render it through *renderer* (Rich on stdout by default).
    """
    from cheetsheet.cli.renderer import RichMarkdownRenderer
    from cheetsheet.core.config_dir import resolve_config_dir
    from cheetsheet.core.sheet_service import SheetService
    from cheetsheet.infra.sheet_store import FilesystemSheetStore

    sheet_store: SheetStore = store if store is not None else FilesystemSheetStore()
    sheet_renderer: SheetRenderer = (
        renderer if renderer is not None else RichMarkdownRenderer()
    )

    config_dir = resolve_config_dir(invocation.config_dir)
    sheet = SheetService(sheet_store).load(config_dir, invocation.command)
    logger.debug("Rendering sheet for %r from %s", sheet.command, sheet.path)

    sheet_renderer.render(sheet.content)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cheetsheet CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    invocation = parse_args(argv)
    _configure_logging(invocation.verbose)
    return _handle_show(invocation)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _discard_stdout() -> None:
    """Point stdout at ``os.devnull`` after the reader went away.

    Stops the interpreter from reporting a second ``BrokenPipeError``
    when it flushes stdout during shutdown.
    """
    try:
        stdout_fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, stdout_fd)
    os.close(devnull)


def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except CheetsheetError as exc:
        if isinstance(exc, RenderOutputFailedError):
            _discard_stdout()
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", soft_wrap=True)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", soft_wrap=True)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
