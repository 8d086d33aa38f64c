"""Tests for AddressBookParser and the per-command parsers."""

from __future__ import annotations

import pytest

from addrctl.domain.index import Index
from addrctl.errors import ParseError
from addrctl.logic import messages
from addrctl.logic.commands import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    HistoryCommand,
    ListCommand,
    RemarkCommand,
    UndoCommand,
)
from addrctl.logic.parser import AddressBookParser
from addrctl.logic.tracker import CommandTracker

ADD_ARGS = "n/Amy Bee p/85355255 e/amy@example.com a/123, Jurong West Ave 6"


@pytest.fixture
def tracker() -> CommandTracker:
    return CommandTracker()


@pytest.fixture
def parser(tracker: CommandTracker) -> AddressBookParser:
    return AddressBookParser(tracker)


class TestDispatch:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("list", ListCommand),
            ("list extra", ListCommand),
            ("clear", ClearCommand),
            ("history", HistoryCommand),
            ("help", HelpCommand),
            ("exit", ExitCommand),
            ("find alex", FindCommand),
            ("delete 1", DeleteCommand),
            ("remark 1 rm/hi", RemarkCommand),
            ("edit 1 p/999", EditCommand),
            (f"add {ADD_ARGS}", AddCommand),
        ],
    )
    def test_command_words(self, parser: AddressBookParser, text: str, expected: type) -> None:
        assert isinstance(parser.parse_command(text), expected)

    def test_undo_receives_tracker(self, parser: AddressBookParser, tracker: CommandTracker) -> None:
        command = parser.parse_command("undo")
        assert isinstance(command, UndoCommand)
        assert command.tracker is tracker

    def test_surrounding_whitespace(self, parser: AddressBookParser) -> None:
        assert isinstance(parser.parse_command("   list  "), ListCommand)

    def test_blank_input(self, parser: AddressBookParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse_command("   ")
        assert exc_info.value.message == messages.invalid_format(HelpCommand.usage)

    def test_unknown_word(self, parser: AddressBookParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse_command("remove 1")
        assert exc_info.value.message == messages.MESSAGE_UNKNOWN_COMMAND

    def test_words_are_case_sensitive(self, parser: AddressBookParser) -> None:
        with pytest.raises(ParseError):
            parser.parse_command("LIST")

    def test_command_words(self, parser: AddressBookParser) -> None:
        assert set(parser.command_words) == {
            "add", "edit", "remark", "delete", "clear", "find", "list", "undo", "history", "help", "exit",
        }


class TestAddParser:
    def test_full_person(self, parser: AddressBookParser) -> None:
        command = parser.parse_command(
            f"add {ADD_ARGS} b/01-01-1990 r/step-sister nn/Ames no/vegetarian t/friends t/work"
        )
        assert isinstance(command, AddCommand)
        person = command.person
        assert person.name == "Amy Bee"
        assert person.address == "123, Jurong West Ave 6"
        assert person.relationship == "step-sister"
        assert person.tags == frozenset({"friends", "work"})

    def test_missing_required(self, parser: AddressBookParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse_command("add n/Amy Bee p/85355255 e/amy@example.com")
        assert exc_info.value.message == messages.invalid_format(AddCommand.usage)

    def test_preamble_rejected(self, parser: AddressBookParser) -> None:
        with pytest.raises(ParseError):
            parser.parse_command(f"add junk {ADD_ARGS}")

    def test_duplicate_single_valued_prefix(self, parser: AddressBookParser) -> None:
        with pytest.raises(ParseError, match="single-valued field"):
            parser.parse_command(f"add {ADD_ARGS} p/999")

    def test_invalid_field(self, parser: AddressBookParser) -> None:
        with pytest.raises(ParseError, match="Emails should be"):
            parser.parse_command("add n/Amy Bee p/85355255 e/amy a/street")


class TestEditParser:
    def test_descriptor(self, parser: AddressBookParser) -> None:
        command = parser.parse_command("edit 2 p/91234567 e/new@example.com")
        assert isinstance(command, EditCommand)
        assert command.index == Index(1)
        assert command.descriptor.changes() == {"phone": "91234567", "email": "new@example.com"}

    def test_empty_tag_clears(self, parser: AddressBookParser) -> None:
        command = parser.parse_command("edit 1 t/")
        assert isinstance(command, EditCommand)
        assert command.descriptor.tags == frozenset()

    def test_no_fields(self, parser: AddressBookParser) -> None:
        with pytest.raises(ParseError, match="At least one field to edit must be provided."):
            parser.parse_command("edit 1")

    def test_missing_index(self, parser: AddressBookParser) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse_command("edit p/123")
        assert exc_info.value.message == messages.invalid_format(EditCommand.usage)


class TestOtherParsers:
    def test_remark_empty_clears(self, parser: AddressBookParser) -> None:
        command = parser.parse_command("remark 3 rm/")
        assert isinstance(command, RemarkCommand)
        assert command.index == Index(2)
        assert command.remark == ""

    def test_remark_without_prefix(self, parser: AddressBookParser) -> None:
        command = parser.parse_command("remark 1")
        assert isinstance(command, RemarkCommand)
        assert command.remark == ""

    def test_delete_many(self, parser: AddressBookParser) -> None:
        command = parser.parse_command("delete 1 2 2")
        assert command == DeleteCommand((Index(0), Index(1)))

    @pytest.mark.parametrize("args", ["", "0", "a", "1 -2"])
    def test_delete_invalid(self, parser: AddressBookParser, args: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            parser.parse_command(f"delete {args}")
        assert exc_info.value.message == messages.invalid_format(DeleteCommand.usage)

    def test_find_keywords(self, parser: AddressBookParser) -> None:
        command = parser.parse_command("find  alex \t yu ")
        assert isinstance(command, FindCommand)
        assert command.predicate.keywords == ("alex", "yu")

    def test_find_without_keywords(self, parser: AddressBookParser) -> None:
        with pytest.raises(ParseError):
            parser.parse_command("find   ")


class TestParseConfirmation:
    @pytest.mark.parametrize("text", ["y", "yes", " YES ", "Y"])
    def test_yes(self, parser: AddressBookParser, text: str) -> None:
        assert parser.parse_confirmation(text) is True

    @pytest.mark.parametrize("text", ["n", "no", "No"])
    def test_no(self, parser: AddressBookParser, text: str) -> None:
        assert parser.parse_confirmation(text) is False

    @pytest.mark.parametrize("text", ["", "maybe", "list", "yess"])
    def test_invalid(self, parser: AddressBookParser, text: str) -> None:
        with pytest.raises(ParseError, match="Please answer with"):
            parser.parse_confirmation(text)

    def test_custom_tokens(self, tracker: CommandTracker) -> None:
        parser = AddressBookParser(tracker, yes_tokens=("ok",), no_tokens=("cancel",))
        assert parser.parse_confirmation("OK") is True
        with pytest.raises(ParseError):
            parser.parse_confirmation("y")

    def test_overlapping_tokens(self, tracker: CommandTracker) -> None:
        with pytest.raises(ValueError):
            AddressBookParser(tracker, yes_tokens=("y",), no_tokens=("Y",))
