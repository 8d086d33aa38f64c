"""Command: show previously entered command lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from addrctl.logic.commands.base import Command
from addrctl.logic.result import CommandResult

if TYPE_CHECKING:
    from addrctl.domain.model import Model

MESSAGE_EMPTY = "No commands in history yet."
MESSAGE_HEADER = "Entered commands (oldest first):"


@dataclass
class HistoryCommand(Command):
    command_word = "history"
    usage = "history: Lists the previously entered commands.\nExample: history"

    def execute(self, model: Model) -> CommandResult:
        commands = model.command_history.commands
        if not commands:
            return CommandResult(message=MESSAGE_EMPTY)
        lines = [MESSAGE_HEADER]
        lines.extend(f"{i}. {text}" for i, text in enumerate(commands, start=1))
        return CommandResult(message="\n".join(lines))
