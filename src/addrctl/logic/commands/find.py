"""Command: narrow the displayed list to persons matching name keywords."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from addrctl.domain.predicates import NameContainsKeywords
from addrctl.logic import messages
from addrctl.logic.commands.base import Command
from addrctl.logic.result import CommandResult

if TYPE_CHECKING:
    from addrctl.domain.model import Model


@dataclass
class FindCommand(Command):
    command_word = "find"
    usage = (
        "find: Finds all persons whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob charlie"
    )

    predicate: NameContainsKeywords

    def execute(self, model: Model) -> CommandResult:
        model.update_filter(self.predicate)
        count = len(model.filtered_persons)
        return CommandResult(
            message=messages.MESSAGE_PERSONS_LISTED_OVERVIEW.format(count=count),
            show_persons=True,
        )
