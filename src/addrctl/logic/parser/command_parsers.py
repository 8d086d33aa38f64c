"""Per-command argument parsers.

Each parser takes the argument text that followed the command word and
returns a ready-to-execute command, or raises ``ParseError``. Parsers are
pure: they read nothing but their input.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from addrctl.domain.person import Person
from addrctl.domain.predicates import NameContainsKeywords
from addrctl.errors import ParseError
from addrctl.logic import messages
from addrctl.logic.commands import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    ExitCommand,
    FindCommand,
    HelpCommand,
    HistoryCommand,
    ListCommand,
    RemarkCommand,
)
from addrctl.logic.commands.edit import MESSAGE_NOT_EDITED
from addrctl.logic.parser import parser_util
from addrctl.logic.parser.tokenizer import (
    PREFIX_ADDRESS,
    PREFIX_BIRTHDAY,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_NICKNAME,
    PREFIX_NOTES,
    PREFIX_PHONE,
    PREFIX_RELATIONSHIP,
    PREFIX_REMARK,
    PREFIX_TAG,
    ArgumentMultimap,
    tokenize,
)

if TYPE_CHECKING:
    from addrctl.logic.commands import Command

PERSON_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_BIRTHDAY,
    PREFIX_RELATIONSHIP,
    PREFIX_NICKNAME,
    PREFIX_NOTES,
    PREFIX_TAG,
)

# Every person prefix except tags may be given at most once.
SINGLE_VALUED_PREFIXES = PERSON_PREFIXES[:-1]

_REQUIRED_FOR_ADD = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)


def _optional(argmap: ArgumentMultimap, prefix: str, parse: Callable[[str], str]) -> str | None:
    value = argmap.get_value(prefix)
    return None if value is None else parse(value)


def parse_add(args: str) -> Command:
    argmap = tokenize(args, PERSON_PREFIXES)
    if argmap.preamble or not all(argmap.has(p) for p in _REQUIRED_FOR_ADD):
        raise ParseError(messages.invalid_format(AddCommand.usage))
    argmap.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

    person = Person(
        name=parser_util.parse_name(argmap.get_value(PREFIX_NAME) or ""),
        phone=parser_util.parse_phone(argmap.get_value(PREFIX_PHONE) or ""),
        email=parser_util.parse_email(argmap.get_value(PREFIX_EMAIL) or ""),
        address=parser_util.parse_address(argmap.get_value(PREFIX_ADDRESS) or ""),
        birthday=_optional(argmap, PREFIX_BIRTHDAY, parser_util.parse_birthday),
        relationship=_optional(argmap, PREFIX_RELATIONSHIP, parser_util.parse_relationship),
        nickname=_optional(argmap, PREFIX_NICKNAME, parser_util.parse_nickname),
        notes=_optional(argmap, PREFIX_NOTES, parser_util.parse_notes),
        tags=parser_util.parse_tags(argmap.get_all_values(PREFIX_TAG)),
    )
    return AddCommand(person)


def parse_edit(args: str) -> Command:
    argmap = tokenize(args, PERSON_PREFIXES)
    try:
        index = parser_util.parse_index(argmap.preamble)
    except ParseError as exc:
        raise ParseError(messages.invalid_format(EditCommand.usage)) from exc
    argmap.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

    tags: frozenset[str] | None = None
    if argmap.has(PREFIX_TAG):
        raw_tags = argmap.get_all_values(PREFIX_TAG)
        # A lone empty ``t/`` clears all tags.
        tags = frozenset() if raw_tags == [""] else parser_util.parse_tags(raw_tags)

    descriptor = EditPersonDescriptor(
        name=_optional(argmap, PREFIX_NAME, parser_util.parse_name),
        phone=_optional(argmap, PREFIX_PHONE, parser_util.parse_phone),
        email=_optional(argmap, PREFIX_EMAIL, parser_util.parse_email),
        address=_optional(argmap, PREFIX_ADDRESS, parser_util.parse_address),
        birthday=_optional(argmap, PREFIX_BIRTHDAY, parser_util.parse_birthday),
        relationship=_optional(argmap, PREFIX_RELATIONSHIP, parser_util.parse_relationship),
        nickname=_optional(argmap, PREFIX_NICKNAME, parser_util.parse_nickname),
        notes=_optional(argmap, PREFIX_NOTES, parser_util.parse_notes),
        tags=tags,
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(MESSAGE_NOT_EDITED)
    return EditCommand(index, descriptor)


def parse_remark(args: str) -> Command:
    argmap = tokenize(args, (PREFIX_REMARK,))
    try:
        index = parser_util.parse_index(argmap.preamble)
    except ParseError as exc:
        raise ParseError(messages.invalid_format(RemarkCommand.usage)) from exc
    argmap.verify_no_duplicate_prefixes_for(PREFIX_REMARK)
    return RemarkCommand(index, parser_util.parse_remark(argmap.get_value(PREFIX_REMARK) or ""))


def parse_delete(args: str) -> Command:
    try:
        return DeleteCommand(parser_util.parse_indices(args))
    except ParseError as exc:
        raise ParseError(messages.invalid_format(DeleteCommand.usage)) from exc


def parse_find(args: str) -> Command:
    keywords = tuple(args.split())
    if not keywords:
        raise ParseError(messages.invalid_format(FindCommand.usage))
    return FindCommand(NameContainsKeywords(keywords))


def _no_arguments(command_cls: type[Command]) -> Callable[[str], Command]:
    """Build a parser for commands that ignore trailing arguments."""

    def parse(_args: str) -> Command:
        return command_cls()

    return parse


parse_list = _no_arguments(ListCommand)
parse_clear = _no_arguments(ClearCommand)
parse_history = _no_arguments(HistoryCommand)
parse_help = _no_arguments(HelpCommand)
parse_exit = _no_arguments(ExitCommand)
