"""Command: delete one or more persons by displayed index (confirm first)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from addrctl.domain.person import Person, format_person
from addrctl.logic.commands.base import Command, Confirmable, Undoable, resolve_index
from addrctl.logic.result import CommandResult

if TYPE_CHECKING:
    from addrctl.domain.index import Index
    from addrctl.domain.model import Model

MESSAGE_CONFIRM = "Are you sure you want to delete the following person(s)? (y/n)\n{persons}"
MESSAGE_DELETE_PERSON_SUCCESS = "Deleted Person(s):\n{persons}"
MESSAGE_DELETE_ABORTED = "Deletion aborted. No persons were deleted."
MESSAGE_UNDONE = "Restored deleted person(s):\n{persons}"


def _format_all(persons: list[Person]) -> str:
    return "\n".join(format_person(p) for p in persons)


@dataclass
class DeleteCommand(Confirmable, Undoable, Command):
    """Delete the persons at ``target_indices`` of the filtered view.

    All indices resolve against the view as it is when the command runs,
    so ``delete 1 2`` removes the first two displayed persons rather than
    the first and then the (shifted) second.
    """

    command_word = "delete"
    usage = (
        "delete: Deletes the person(s) identified by the index numbers used in the displayed person list.\n"
        "Parameters: INDEX [INDEX]... (must be positive integers)\n"
        "Example: delete 1 3"
    )

    target_indices: tuple[Index, ...]
    _targets: list[Person] = field(default_factory=list, init=False, compare=False, repr=False)
    _removed: list[tuple[int, Person]] = field(default_factory=list, init=False, compare=False, repr=False)

    def _resolve_targets(self, model: Model) -> list[Person]:
        # Resolve every index before touching anything so a bad index fails atomically.
        persons = [resolve_index(model, idx) for idx in self.target_indices]
        return list(dict.fromkeys(persons))

    def execute(self, model: Model) -> CommandResult:
        self._targets = self._resolve_targets(model)
        return CommandResult(
            message=MESSAGE_CONFIRM.format(persons=_format_all(self._targets)),
            pending=self,
        )

    def execute_confirmed(self, model: Model) -> CommandResult:
        targets = self._targets or self._resolve_targets(model)
        book = model.address_book
        self._removed = sorted(((book.index_of(p), p) for p in targets), key=lambda item: item[0])
        for person in targets:
            model.delete_person(person)
        return CommandResult(message=MESSAGE_DELETE_PERSON_SUCCESS.format(persons=_format_all(targets)))

    def execute_aborted(self) -> CommandResult:
        self._targets = []
        return CommandResult(message=MESSAGE_DELETE_ABORTED)

    def undo(self, model: Model) -> CommandResult:
        # Ascending positions recreate the original ordering exactly.
        for position, person in self._removed:
            model.insert_person(position, person)
        restored = [p for _, p in self._removed]
        self._removed = []
        return CommandResult(message=MESSAGE_UNDONE.format(persons=_format_all(restored)))
