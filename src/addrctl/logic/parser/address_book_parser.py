"""AddressBookParser — command-word dispatch and yes/no resolution.

The parser owns a fixed registry mapping each command word to the parser
for its arguments. The only stateful collaborator it holds is the undo
tracker, which it hands to every ``UndoCommand`` it builds; parsing itself
never touches the tracker or the model.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from addrctl.errors import ParseError
from addrctl.logic import messages
from addrctl.logic.commands import HelpCommand, UndoCommand
from addrctl.logic.parser import command_parsers

if TYPE_CHECKING:
    from addrctl.logic.commands import Command
    from addrctl.logic.tracker import CommandTracker

DEFAULT_YES_TOKENS: tuple[str, ...] = ("y", "yes")
DEFAULT_NO_TOKENS: tuple[str, ...] = ("n", "no")

_BASIC_COMMAND_FORMAT = re.compile(r"^(?P<word>\S+)(?P<arguments>.*)$", re.DOTALL)


class AddressBookParser:
    """Parse raw input into commands or confirmation decisions.

    Args:
        tracker: Undo tracker injected into parsed ``undo`` commands.
        yes_tokens: Case-insensitive answers accepted as "yes".
        no_tokens: Case-insensitive answers accepted as "no".
    """

    def __init__(
        self,
        tracker: CommandTracker,
        *,
        yes_tokens: Iterable[str] = DEFAULT_YES_TOKENS,
        no_tokens: Iterable[str] = DEFAULT_NO_TOKENS,
    ) -> None:
        self._tracker = tracker
        self._yes = frozenset(t.strip().casefold() for t in yes_tokens)
        self._no = frozenset(t.strip().casefold() for t in no_tokens)
        if self._yes & self._no:
            msg = f"Confirmation tokens overlap: {sorted(self._yes & self._no)}"
            raise ValueError(msg)

        self._registry: dict[str, Callable[[str], Command]] = {
            "add": command_parsers.parse_add,
            "edit": command_parsers.parse_edit,
            "remark": command_parsers.parse_remark,
            "delete": command_parsers.parse_delete,
            "clear": command_parsers.parse_clear,
            "find": command_parsers.parse_find,
            "list": command_parsers.parse_list,
            "undo": self._parse_undo,
            "history": command_parsers.parse_history,
            "help": command_parsers.parse_help,
            "exit": command_parsers.parse_exit,
        }

    @property
    def command_words(self) -> tuple[str, ...]:
        return tuple(self._registry)

    def parse_command(self, text: str) -> Command:
        """Parse *text* into a command.

        Raises:
            ParseError: If the input is blank, the command word is unknown,
                or the command's arguments are invalid.
        """
        match = _BASIC_COMMAND_FORMAT.match(text.strip())
        if match is None:
            raise ParseError(messages.invalid_format(HelpCommand.usage))

        word = match.group("word")
        parser = self._registry.get(word)
        if parser is None:
            raise ParseError(messages.MESSAGE_UNKNOWN_COMMAND)
        return parser(match.group("arguments"))

    def parse_confirmation(self, text: str) -> bool:
        """Return True for a "yes" answer and False for a "no" answer.

        Raises:
            ParseError: If *text* is neither an accepted yes nor no token.
        """
        answer = text.strip().casefold()
        if answer in self._yes:
            return True
        if answer in self._no:
            return False
        raise ParseError(
            messages.MESSAGE_INVALID_CONFIRMATION.format(
                yes="/".join(sorted(self._yes)),
                no="/".join(sorted(self._no)),
            )
        )

    def _parse_undo(self, _args: str) -> Command:
        return UndoCommand(self._tracker)
