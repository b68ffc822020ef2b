"""Tests for the frozen domain models (core/models.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from cheetsheet.core.models import InvocationArgs, Sheet


class TestInvocationArgs:
    def test_defaults(self) -> None:
        args = InvocationArgs(command="git")
        assert args.config_dir is None
        assert args.verbose is False

    def test_frozen(self) -> None:
        args = InvocationArgs(command="git")
        with pytest.raises(AttributeError):
            args.command = "tmux"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert InvocationArgs("git", Path("/a")) == InvocationArgs("git", Path("/a"))


class TestSheet:
    def test_fields(self) -> None:
        sheet = Sheet(command="git", path=Path("/a/git.md"), content="# Git\n")
        assert sheet.command == "git"
        assert sheet.path == Path("/a/git.md")
        assert sheet.content == "# Git\n"

    def test_frozen(self) -> None:
        sheet = Sheet(command="git", path=Path("/a/git.md"), content="")
        with pytest.raises(AttributeError):
            sheet.path = Path("/b")  # type: ignore[misc]
