"""Shared pytest fixtures and configuration for the cheetsheet test suite.

Guidelines
----------
* Tests never read the real ``~/.config/cheetsheet``.
* Sheets are written under ``tmp_path``.
* Rich output is captured uncoloured so substring checks stay stable.
"""

from __future__ import annotations

from pathlib import Path

import pytest

GIT_SHEET: str = "# Git\n\n| cmd | desc |\n|---|---|\n| status | show status |\n"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the user's environment out of every test."""
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def sheets_dir(tmp_path: Path) -> Path:
    """A config directory holding ``git.md`` and ``tmux.md``."""
    directory = tmp_path / "sheets"
    directory.mkdir()
    (directory / "git.md").write_text(GIT_SHEET, encoding="utf-8")
    (directory / "tmux.md").write_text(
        "# Tmux\n\n**prefix**: `Ctrl+b`\n", encoding="utf-8",
    )
    return directory
