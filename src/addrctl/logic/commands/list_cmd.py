"""Command: show every person in the address book."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from addrctl.domain.predicates import show_all
from addrctl.logic.commands.base import Command
from addrctl.logic.result import CommandResult

if TYPE_CHECKING:
    from addrctl.domain.model import Model

MESSAGE_SUCCESS = "Listed all persons"


@dataclass
class ListCommand(Command):
    command_word = "list"
    usage = "list: Lists all persons in the address book.\nExample: list"

    def execute(self, model: Model) -> CommandResult:
        model.update_filter(show_all)
        return CommandResult(message=MESSAGE_SUCCESS, show_persons=True)
