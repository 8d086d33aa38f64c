"""Command: end the interactive session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from addrctl.logic.commands.base import Command
from addrctl.logic.result import CommandResult

if TYPE_CHECKING:
    from addrctl.domain.model import Model

MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Address Book as requested ..."


@dataclass
class ExitCommand(Command):
    command_word = "exit"
    usage = "exit: Exits the program.\nExample: exit"

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(message=MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
