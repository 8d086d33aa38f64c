"""Command: set or clear the free-text remark of a displayed person."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from addrctl.domain.person import Person, format_person
from addrctl.logic.commands.base import Command, Undoable, resolve_index
from addrctl.logic.result import CommandResult

if TYPE_CHECKING:
    from addrctl.domain.index import Index
    from addrctl.domain.model import Model

MESSAGE_ADD_REMARK_SUCCESS = "Added remark to Person: {person}"
MESSAGE_DELETE_REMARK_SUCCESS = "Removed remark from Person: {person}"
MESSAGE_UNDONE = "Restored previous remark of Person: {person}"


@dataclass
class RemarkCommand(Undoable, Command):
    command_word = "remark"
    usage = (
        "remark: Edits the remark of the person identified by the index number used in the displayed "
        "person list. An empty remark removes it.\n"
        "Parameters: INDEX rm/[REMARK]\n"
        "Example: remark 1 rm/Likes to swim."
    )

    index: Index
    remark: str
    _original: Person | None = field(default=None, init=False, compare=False, repr=False)
    _edited: Person | None = field(default=None, init=False, compare=False, repr=False)

    def execute(self, model: Model) -> CommandResult:
        target = resolve_index(model, self.index)
        edited = target.model_copy(update={"remark": self.remark})
        model.set_person(target, edited)
        self._original, self._edited = target, edited

        template = MESSAGE_ADD_REMARK_SUCCESS if self.remark else MESSAGE_DELETE_REMARK_SUCCESS
        return CommandResult(message=template.format(person=format_person(edited)))

    def undo(self, model: Model) -> CommandResult:
        if self._original is None or self._edited is None:
            raise self.not_applied()
        model.set_person(self._edited, self._original)
        return CommandResult(message=MESSAGE_UNDONE.format(person=format_person(self._original)))
