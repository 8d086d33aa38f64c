"""Executable commands.

Each module defines one command class. ``ALL_COMMANDS`` lists them in the
order help output presents them.
"""

from __future__ import annotations

from addrctl.logic.commands.add import AddCommand
from addrctl.logic.commands.base import Command, Confirmable, Undoable
from addrctl.logic.commands.clear import ClearCommand
from addrctl.logic.commands.delete import DeleteCommand
from addrctl.logic.commands.edit import EditCommand, EditPersonDescriptor
from addrctl.logic.commands.exit import ExitCommand
from addrctl.logic.commands.find import FindCommand
from addrctl.logic.commands.help import HelpCommand
from addrctl.logic.commands.history import HistoryCommand
from addrctl.logic.commands.list_cmd import ListCommand
from addrctl.logic.commands.remark import RemarkCommand
from addrctl.logic.commands.undo import UndoCommand

ALL_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    EditCommand,
    RemarkCommand,
    DeleteCommand,
    ClearCommand,
    FindCommand,
    ListCommand,
    UndoCommand,
    HistoryCommand,
    HelpCommand,
    ExitCommand,
)

__all__ = [
    "ALL_COMMANDS",
    "AddCommand",
    "ClearCommand",
    "Command",
    "Confirmable",
    "DeleteCommand",
    "EditCommand",
    "EditPersonDescriptor",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "HistoryCommand",
    "ListCommand",
    "RemarkCommand",
    "UndoCommand",
    "Undoable",
]
