"""Command: remove every person from the address book (confirm first)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from addrctl.domain.address_book import AddressBook
from addrctl.logic.commands.base import Command, Confirmable, Undoable
from addrctl.logic.result import CommandResult

if TYPE_CHECKING:
    from addrctl.domain.model import Model

MESSAGE_CONFIRM = "This will delete all {count} person(s). Are you sure? (y/n)"
MESSAGE_SUCCESS = "Address book has been cleared!"
MESSAGE_ABORTED = "Clear aborted. Address book unchanged."
MESSAGE_UNDONE = "Restored {count} person(s) to the address book."


@dataclass
class ClearCommand(Confirmable, Undoable, Command):
    command_word = "clear"
    usage = "clear: Deletes all persons from the address book.\nExample: clear"

    _snapshot: AddressBook | None = field(default=None, init=False, compare=False, repr=False)

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(message=MESSAGE_CONFIRM.format(count=len(model.address_book)), pending=self)

    def execute_confirmed(self, model: Model) -> CommandResult:
        self._snapshot = model.address_book.copy()
        model.set_address_book(AddressBook())
        return CommandResult(message=MESSAGE_SUCCESS)

    def execute_aborted(self) -> CommandResult:
        return CommandResult(message=MESSAGE_ABORTED)

    def undo(self, model: Model) -> CommandResult:
        if self._snapshot is None:
            raise self.not_applied()
        model.set_address_book(self._snapshot)
        return CommandResult(message=MESSAGE_UNDONE.format(count=len(self._snapshot)))
