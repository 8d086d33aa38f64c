"""CommandTracker — LIFO stack of executed Undoable commands.

One tracker is created per LogicManager and injected wherever undo needs
it; it is never a module-level singleton. Nothing here is persisted: the
stack lives exactly as long as the process that owns it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from addrctl.logic.commands.base import Undoable

logger = logging.getLogger(__name__)


class CommandTracker:
    """Ordered record of commands that can be undone, newest last."""

    def __init__(self) -> None:
        self._stack: list[Undoable] = []

    def push(self, command: Undoable) -> None:
        self._stack.append(command)
        logger.debug("Tracked undoable %s (depth=%d)", type(command).__name__, len(self._stack))

    def pop(self) -> Undoable:
        """Remove and return the most recently tracked command.

        Raises:
            IndexError: If the tracker is empty.
        """
        if not self._stack:
            raise IndexError("pop from empty command tracker")
        return self._stack.pop()

    def peek(self) -> Undoable | None:
        return self._stack[-1] if self._stack else None

    def is_empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)
