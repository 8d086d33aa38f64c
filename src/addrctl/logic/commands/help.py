"""Command: show usage for every command word."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from addrctl.logic.commands.base import Command
from addrctl.logic.result import CommandResult

if TYPE_CHECKING:
    from addrctl.domain.model import Model


@dataclass
class HelpCommand(Command):
    command_word = "help"
    usage = "help: Shows program usage instructions.\nExample: help"

    def execute(self, model: Model) -> CommandResult:
        from addrctl.logic.commands import ALL_COMMANDS

        return CommandResult(message="\n\n".join(c.usage for c in ALL_COMMANDS), show_help=True)
