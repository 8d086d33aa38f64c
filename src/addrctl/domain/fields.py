"""Field-level value rules for person records.

Each validator trims its input and either returns the normalized value or
raises ``ValueError`` carrying the field's constraint message. The parser
layer maps these failures to ``ParseError``; the Person model reuses them
as pydantic field validators so persisted data is checked on load too.
"""

from __future__ import annotations

import re
from datetime import date, datetime

NAME_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"
PHONE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
EMAIL_CONSTRAINTS = "Emails should be of the format local-part@domain and adhere to the usual restrictions"
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
BIRTHDAY_CONSTRAINTS = "Birthdays should be a valid date in the format DD-MM-YYYY and not be in the future"
NICKNAME_CONSTRAINTS = "Nicknames should not be blank and be at most 30 characters long"
NOTES_CONSTRAINTS = "Notes should be at most 200 characters long"
REMARK_CONSTRAINTS = "Remarks should be at most 50 characters long"
TAG_CONSTRAINTS = "Tags names should be alphanumeric"
RELATIONSHIP_CONSTRAINTS = "Relationships should be alphanumeric, hyphens allowed between words"

BIRTHDAY_FORMAT = "%d-%m-%Y"

_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 ]*$")
_PHONE_RE = re.compile(r"^\d{3,}$")
_EMAIL_RE = re.compile(
    r"^[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*"
    r"@(?:[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*\.)*[A-Za-z0-9]{2,}(?:-[A-Za-z0-9]+)*$"
)
_TAG_RE = re.compile(r"^[A-Za-z0-9]+$")
_RELATIONSHIP_RE = re.compile(r"^[A-Za-z0-9]+(?:[- ][A-Za-z0-9]+)*$")

MAX_NICKNAME_LENGTH = 30
MAX_NOTES_LENGTH = 200
MAX_REMARK_LENGTH = 50


def validate_name(value: str) -> str:
    trimmed = value.strip()
    if not _NAME_RE.match(trimmed):
        raise ValueError(NAME_CONSTRAINTS)
    return trimmed


def validate_phone(value: str) -> str:
    trimmed = value.strip()
    if not _PHONE_RE.match(trimmed):
        raise ValueError(PHONE_CONSTRAINTS)
    return trimmed


def validate_email(value: str) -> str:
    trimmed = value.strip()
    if not _EMAIL_RE.match(trimmed):
        raise ValueError(EMAIL_CONSTRAINTS)
    return trimmed


def validate_address(value: str) -> str:
    trimmed = value.strip()
    if not trimmed:
        raise ValueError(ADDRESS_CONSTRAINTS)
    return trimmed


def validate_birthday(value: str, *, today: date | None = None) -> str:
    """Validate a ``DD-MM-YYYY`` birthday that is a real, non-future date."""
    trimmed = value.strip()
    try:
        parsed = datetime.strptime(trimmed, BIRTHDAY_FORMAT).date()
    except ValueError as exc:
        raise ValueError(BIRTHDAY_CONSTRAINTS) from exc
    if parsed > (today or date.today()):
        raise ValueError(BIRTHDAY_CONSTRAINTS)
    return trimmed


def validate_nickname(value: str) -> str:
    trimmed = value.strip()
    if not trimmed or len(trimmed) > MAX_NICKNAME_LENGTH:
        raise ValueError(NICKNAME_CONSTRAINTS)
    return trimmed


def validate_notes(value: str) -> str:
    trimmed = value.strip()
    if len(trimmed) > MAX_NOTES_LENGTH:
        raise ValueError(NOTES_CONSTRAINTS)
    return trimmed


def validate_remark(value: str) -> str:
    # Remarks keep their inner spacing; an empty remark clears it.
    if len(value) > MAX_REMARK_LENGTH:
        raise ValueError(REMARK_CONSTRAINTS)
    return value


def validate_relationship(value: str) -> str:
    trimmed = value.strip()
    if not _RELATIONSHIP_RE.match(trimmed):
        raise ValueError(RELATIONSHIP_CONSTRAINTS)
    return trimmed


def validate_tag(value: str) -> str:
    trimmed = value.strip()
    if not _TAG_RE.match(trimmed):
        raise ValueError(TAG_CONSTRAINTS)
    return trimmed
