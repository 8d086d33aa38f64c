"""Command base class and the Confirmable / Undoable capabilities.

A command is any object with ``execute(model) -> CommandResult``. The two
optional capabilities are mixins that also flip a boolean class flag, so
the LogicManager decides "needs yes/no?" and "goes on the undo stack?" by
reading ``command.confirmable`` / ``command.undoable`` instead of probing
types.

Capability mixins must precede :class:`Command` in the base list so their
flag wins in the MRO::

    @dataclass
    class DeleteCommand(Confirmable, Undoable, Command):
        ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from addrctl.errors import CommandError
from addrctl.logic import messages

if TYPE_CHECKING:
    from addrctl.domain.index import Index
    from addrctl.domain.model import Model
    from addrctl.domain.person import Person
    from addrctl.logic.result import CommandResult


class Command(ABC):
    """An executable user action against the domain model."""

    command_word: ClassVar[str]
    usage: ClassVar[str] = ""
    confirmable: ClassVar[bool] = False
    undoable: ClassVar[bool] = False

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        """Apply the action to *model* and describe the outcome.

        Raises:
            CommandError: If a business rule prevents the action. The model
                must be left unchanged in that case.
        """


class Confirmable(ABC):
    """Capability: the action commits only after an explicit "yes".

    ``execute`` must not mutate the model. It returns a result whose
    ``pending`` is the command itself; the LogicManager then routes the
    next input to :meth:`execute_confirmed` or :meth:`execute_aborted`.
    """

    confirmable: ClassVar[bool] = True
    undoable: ClassVar[bool]

    @abstractmethod
    def execute_confirmed(self, model: Model) -> CommandResult: ...

    @abstractmethod
    def execute_aborted(self) -> CommandResult: ...


class Undoable(ABC):
    """Capability: the committed action can be reversed later."""

    undoable: ClassVar[bool] = True
    confirmable: ClassVar[bool]
    command_word: ClassVar[str]

    @abstractmethod
    def undo(self, model: Model) -> CommandResult: ...

    def not_applied(self) -> CommandError:
        """Error for an ``undo`` reached before the action was committed."""
        return CommandError(messages.MESSAGE_NOT_APPLIED.format(command=self.command_word))


def resolve_index(model: Model, index: Index) -> Person:
    """Return the person shown at *index* in the current filtered view."""
    view = model.filtered_persons
    if index.zero_based >= len(view):
        raise CommandError(messages.MESSAGE_INVALID_PERSON_DISPLAYED_INDEX, code="INVALID_INDEX")
    return view[index.zero_based]
