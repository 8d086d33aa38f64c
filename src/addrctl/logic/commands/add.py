"""Command: add a person to the address book."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from addrctl.domain.person import Person, format_person
from addrctl.errors import CommandError
from addrctl.logic.commands.base import Command, Undoable
from addrctl.logic.result import CommandResult

if TYPE_CHECKING:
    from addrctl.domain.model import Model

MESSAGE_SUCCESS = "New person added: {person}"
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"
MESSAGE_UNDONE = "Removed newly added person: {person}"


@dataclass
class AddCommand(Undoable, Command):
    command_word = "add"
    usage = (
        "add: Adds a person to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [b/BIRTHDAY] [r/RELATIONSHIP] "
        "[nn/NICKNAME] [no/NOTES] [t/TAG]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2 t/friends"
    )

    person: Person

    def execute(self, model: Model) -> CommandResult:
        if model.has_person(self.person):
            raise CommandError(MESSAGE_DUPLICATE_PERSON, code="DUPLICATE_PERSON")
        model.add_person(self.person)
        return CommandResult(message=MESSAGE_SUCCESS.format(person=format_person(self.person)))

    def undo(self, model: Model) -> CommandResult:
        model.delete_person(self.person)
        return CommandResult(message=MESSAGE_UNDONE.format(person=format_person(self.person)))
