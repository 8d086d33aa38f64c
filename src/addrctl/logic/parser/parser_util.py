"""Shared argument parsers used by the per-command parsers.

Field values go through the domain validators in
:mod:`addrctl.domain.fields`; a ``ValueError`` there becomes a
``ParseError`` carrying the same constraint message.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from addrctl.domain import fields
from addrctl.domain.index import Index
from addrctl.errors import ParseError
from addrctl.logic import messages


def parse_index(one_based: str) -> Index:
    """Parse a non-zero unsigned integer into an :class:`Index`."""
    trimmed = one_based.strip()
    if not trimmed.isdecimal() or not trimmed.isascii() or int(trimmed) == 0:
        raise ParseError(messages.MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def parse_indices(text: str) -> tuple[Index, ...]:
    """Parse whitespace-separated indices, dropping repeats but keeping order."""
    tokens = text.split()
    if not tokens:
        raise ParseError(messages.MESSAGE_INVALID_INDEX)
    return tuple(dict.fromkeys(parse_index(t) for t in tokens))


def _checked(validator: Callable[[str], str], value: str) -> str:
    try:
        return validator(value)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def parse_name(value: str) -> str:
    return _checked(fields.validate_name, value)


def parse_phone(value: str) -> str:
    return _checked(fields.validate_phone, value)


def parse_email(value: str) -> str:
    return _checked(fields.validate_email, value)


def parse_address(value: str) -> str:
    return _checked(fields.validate_address, value)


def parse_birthday(value: str) -> str:
    return _checked(fields.validate_birthday, value)


def parse_relationship(value: str) -> str:
    return _checked(fields.validate_relationship, value)


def parse_nickname(value: str) -> str:
    return _checked(fields.validate_nickname, value)


def parse_notes(value: str) -> str:
    return _checked(fields.validate_notes, value)


def parse_remark(value: str) -> str:
    return _checked(fields.validate_remark, value.strip())


def parse_tags(values: Iterable[str]) -> frozenset[str]:
    return frozenset(_checked(fields.validate_tag, v) for v in values)
