"""Core sheet service — locate then load a cheatsheet.

Depends on a :class:`~cheetsheet.core.protocols.SheetStore` injected at
construction time, keeping the core free of direct filesystem access.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct I/O.
* Only :class:`~cheetsheet.exceptions.CheetsheetError` subclasses escape.
"""

from __future__ import annotations

from pathlib import Path

from cheetsheet.core.models import Sheet
from cheetsheet.core.protocols import SheetStore
from cheetsheet.exceptions import CheetsheetError, SheetUnreadableError


class SheetService:
    """Stateless service that turns a command name into a loaded sheet.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`SheetStore` protocol.
    """

    def __init__(self, store: SheetStore) -> None:
        self._store: SheetStore = store

    def load(self, config_dir: Path, command: str) -> Sheet:
        """Locate and read the sheet for *command* in *config_dir*.

        Raises
        ------
        SheetNotFoundError
            If no sheet exists for *command*.
        SheetUnreadableError
            If the sheet cannot be read, or the store fails unexpectedly.
        """
        path = self._store.locate(config_dir, command)
        try:
            content = self._store.read(path)
        except CheetsheetError:
            raise
        except Exception as exc:
            raise SheetUnreadableError(path, f"unexpected store error: {exc}") from exc
        return Sheet(command=command, path=path, content=content)
