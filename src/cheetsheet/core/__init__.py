"""Core / service layer — resolution policy and lookup orchestration.

Rules
-----
* No ``print()`` calls.
* No direct filesystem I/O; storage goes through :class:`SheetStore`.
* No imports from ``cli`` or ``infra``.
"""

from cheetsheet.core.config_dir import resolve_config_dir
from cheetsheet.core.models import InvocationArgs, Sheet
from cheetsheet.core.protocols import SheetRenderer, SheetStore
from cheetsheet.core.sheet_service import SheetService

__all__: list[str] = [
    "InvocationArgs",
    "Sheet",
    "SheetRenderer",
    "SheetService",
    "SheetStore",
    "resolve_config_dir",
]
