"""Domain models for cheetsheet.

All models are **frozen** dataclasses: value objects created once per
invocation and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class InvocationArgs:
    """Parsed command-line arguments for a single lookup."""

    command: str
    """Cheatsheet name, without the ``.md`` suffix."""

    config_dir: Path | None = None
    """Explicit ``--config-dir`` override, or ``None``."""

    verbose: bool = False
    """Whether DEBUG logging was requested."""


@dataclass(frozen=True, slots=True)
class Sheet:
    """A located and loaded cheatsheet."""

    command: str
    path: Path
    content: str
