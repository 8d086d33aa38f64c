"""Tests for the prefix tokenizer."""

from __future__ import annotations

import pytest

from addrctl.errors import ParseError
from addrctl.logic.parser.tokenizer import (
    PREFIX_NAME,
    PREFIX_NICKNAME,
    PREFIX_NOTES,
    PREFIX_PHONE,
    PREFIX_TAG,
    ArgumentMultimap,
    tokenize,
)

PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_NICKNAME, PREFIX_NOTES, PREFIX_TAG)


class TestTokenize:
    def test_no_prefixes(self) -> None:
        argmap = tokenize("  some text ", ())
        assert argmap.preamble == "some text"
        assert argmap.values == {}

    def test_preamble_and_values(self) -> None:
        argmap = tokenize(" 1 n/John Doe p/123", PREFIXES)
        assert argmap.preamble == "1"
        assert argmap.get_value(PREFIX_NAME) == "John Doe"
        assert argmap.get_value(PREFIX_PHONE) == "123"

    def test_longer_prefix_wins(self) -> None:
        argmap = tokenize(" nn/Johnny no/quiet n/John", PREFIXES)
        assert argmap.get_value(PREFIX_NICKNAME) == "Johnny"
        assert argmap.get_value(PREFIX_NOTES) == "quiet"
        assert argmap.get_value(PREFIX_NAME) == "John"

    def test_prefix_inside_word_ignored(self) -> None:
        argmap = tokenize(" n/John p/12 ten/twenty", PREFIXES)
        assert argmap.get_value(PREFIX_PHONE) == "12 ten/twenty"

    def test_repeated_prefix_keeps_all(self) -> None:
        argmap = tokenize(" t/a t/b t/", PREFIXES)
        assert argmap.get_all_values(PREFIX_TAG) == ["a", "b", ""]
        assert argmap.get_value(PREFIX_TAG) == ""

    def test_absent_prefix(self) -> None:
        argmap = tokenize(" n/John", PREFIXES)
        assert not argmap.has(PREFIX_PHONE)
        assert argmap.get_value(PREFIX_PHONE) is None
        assert argmap.get_all_values(PREFIX_PHONE) == []


class TestVerifyNoDuplicates:
    def test_duplicates_reported(self) -> None:
        argmap = ArgumentMultimap(values={"n/": ["a", "b"], "p/": ["1", "2"], "t/": ["x", "y"]})
        with pytest.raises(ParseError) as exc_info:
            argmap.verify_no_duplicate_prefixes_for("n/", "p/")
        assert exc_info.value.message == (
            "Multiple values specified for the following single-valued field(s): n/ p/"
        )

    def test_no_duplicates(self) -> None:
        ArgumentMultimap(values={"n/": ["a"]}).verify_no_duplicate_prefixes_for("n/", "p/")
