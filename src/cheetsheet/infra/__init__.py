"""Infrastructure layer — filesystem access.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from cheetsheet.infra.sheet_store import FilesystemSheetStore, sheet_path

__all__: list[str] = [
    "FilesystemSheetStore",
    "sheet_path",
]
