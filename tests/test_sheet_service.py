"""Tests for SheetService (core/sheet_service.py).

The :class:`SheetStore` dependency is **mocked** except for one
end-to-end case against the real filesystem store.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cheetsheet.core.models import Sheet
from cheetsheet.core.sheet_service import SheetService
from cheetsheet.exceptions import SheetNotFoundError, SheetUnreadableError
from cheetsheet.infra.sheet_store import FilesystemSheetStore


def _fake_store(*, content: str | Exception = "# Sheet\n") -> MagicMock:
    store = MagicMock()
    store.locate.side_effect = lambda config_dir, command: config_dir / f"{command}.md"
    if isinstance(content, Exception):
        store.read.side_effect = content
    else:
        store.read.return_value = content
    return store


class TestLoad:
    def test_returns_sheet(self) -> None:
        svc = SheetService(_fake_store(content="# Git\n"))
        sheet = svc.load(Path("/sheets"), "git")
        assert sheet == Sheet(command="git", path=Path("/sheets/git.md"), content="# Git\n")

    def test_reads_located_path(self) -> None:
        store = _fake_store()
        SheetService(store).load(Path("/sheets"), "git")
        store.locate.assert_called_once_with(Path("/sheets"), "git")
        store.read.assert_called_once_with(Path("/sheets/git.md"))

    def test_not_found_propagates(self) -> None:
        store = _fake_store()
        store.locate.side_effect = SheetNotFoundError("git", Path("/sheets/git.md"))
        with pytest.raises(SheetNotFoundError):
            SheetService(store).load(Path("/sheets"), "git")
        store.read.assert_not_called()

    def test_our_read_errors_propagate_unchanged(self) -> None:
        original = SheetUnreadableError(Path("/sheets/git.md"), "permission denied")
        with pytest.raises(SheetUnreadableError) as exc_info:
            SheetService(_fake_store(content=original)).load(Path("/sheets"), "git")
        assert exc_info.value is original

    def test_unexpected_read_error_wrapped(self) -> None:
        svc = SheetService(_fake_store(content=ValueError("kaboom")))
        with pytest.raises(SheetUnreadableError, match="kaboom"):
            svc.load(Path("/sheets"), "git")


class TestWithFilesystemStore:
    def test_loads_real_sheet(self, sheets_dir: Path) -> None:
        sheet = SheetService(FilesystemSheetStore()).load(sheets_dir, "git")
        assert sheet.path == sheets_dir / "git.md"
        assert sheet.content.startswith("# Git")

    def test_sheet_is_frozen(self, sheets_dir: Path) -> None:
        sheet = SheetService(FilesystemSheetStore()).load(sheets_dir, "git")
        with pytest.raises(AttributeError):
            sheet.content = "changed"  # type: ignore[misc]
