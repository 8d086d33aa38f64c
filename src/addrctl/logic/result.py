"""CommandResult — the universal return type of command execution.

INVARIANT: ``needs_confirmation`` is True iff ``pending`` holds the
Confirmable command that produced this result. The LogicManager is the
only consumer that acts on ``pending``; front-ends only read the flags.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class CommandResult(BaseModel):
    """Outcome of ``execute``, ``execute_confirmed`` or ``execute_aborted``.

    Attributes:
        message: Feedback shown to the user.
        pending: The Confirmable command awaiting a yes/no answer, if any.
        show_help: Ask the front-end to display usage help.
        show_persons: Ask the front-end to display the filtered person list.
        exit: Ask the front-end to end the session.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    message: str
    pending: Any = None
    show_help: bool = False
    show_persons: bool = False
    exit: bool = False

    @property
    def needs_confirmation(self) -> bool:
        return self.pending is not None
