"""Command: reverse the most recent undoable command."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from addrctl.domain.address_book import DuplicatePersonError, PersonNotFoundError
from addrctl.errors import CommandError
from addrctl.logic.commands.base import Command

if TYPE_CHECKING:
    from addrctl.domain.model import Model
    from addrctl.logic.result import CommandResult
    from addrctl.logic.tracker import CommandTracker

logger = logging.getLogger(__name__)

MESSAGE_NOTHING_TO_UNDO = "There is no command to undo."
MESSAGE_UNDO_FAILED = "Could not undo the last command: {reason}"


@dataclass
class UndoCommand(Command):
    """Pop the newest command off *tracker* and call its ``undo``.

    Undo itself is not undoable and is never pushed onto the tracker.
    """

    command_word = "undo"
    usage = "undo: Reverts the most recent add, edit, remark, delete or clear.\nExample: undo"

    tracker: CommandTracker = field(compare=False, repr=False)

    def execute(self, model: Model) -> CommandResult:
        if self.tracker.is_empty():
            raise CommandError(MESSAGE_NOTHING_TO_UNDO, code="NOTHING_TO_UNDO")
        command = self.tracker.pop()
        try:
            return command.undo(model)
        except (DuplicatePersonError, PersonNotFoundError) as exc:
            logger.warning("Undo of %s failed: %s", type(command).__name__, exc)
            raise CommandError(MESSAGE_UNDO_FAILED.format(reason=exc), code="COMMAND_FAILED") from exc
