"""Command: edit fields of a displayed person."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

from addrctl.domain.person import Person, format_person
from addrctl.domain.predicates import show_all
from addrctl.errors import CommandError
from addrctl.logic.commands.base import Command, Undoable, resolve_index
from addrctl.logic.result import CommandResult

if TYPE_CHECKING:
    from addrctl.domain.index import Index
    from addrctl.domain.model import Model

MESSAGE_EDIT_PERSON_SUCCESS = "Edited Person: {person}"
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book."
MESSAGE_UNDONE = "Reverted edit, restored: {person}"


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Replacement values for the fields being edited; ``None`` means unchanged."""

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    birthday: str | None = None
    relationship: str | None = None
    nickname: str | None = None
    notes: str | None = None
    tags: frozenset[str] | None = None

    def changes(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def is_any_field_edited(self) -> bool:
        return bool(self.changes())

    def apply(self, person: Person) -> Person:
        return person.model_copy(update=self.changes())


@dataclass
class EditCommand(Undoable, Command):
    command_word = "edit"
    usage = (
        "edit: Edits the details of the person identified by the index number used in the displayed "
        "person list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [b/BIRTHDAY] [r/RELATIONSHIP] "
        "[nn/NICKNAME] [no/NOTES] [t/TAG]...\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )

    index: Index
    descriptor: EditPersonDescriptor
    _original: Person | None = field(default=None, init=False, compare=False, repr=False)
    _edited: Person | None = field(default=None, init=False, compare=False, repr=False)

    def execute(self, model: Model) -> CommandResult:
        target = resolve_index(model, self.index)
        edited = self.descriptor.apply(target)
        if not target.is_same_person(edited) and model.has_person(edited):
            raise CommandError(MESSAGE_DUPLICATE_PERSON, code="DUPLICATE_PERSON")

        model.set_person(target, edited)
        model.update_filter(show_all)
        self._original, self._edited = target, edited
        return CommandResult(message=MESSAGE_EDIT_PERSON_SUCCESS.format(person=format_person(edited)))

    def undo(self, model: Model) -> CommandResult:
        if self._original is None or self._edited is None:
            raise self.not_applied()
        model.set_person(self._edited, self._original)
        return CommandResult(message=MESSAGE_UNDONE.format(person=format_person(self._original)))
