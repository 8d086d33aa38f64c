"""Person — the single record type held by the address book.

Persons are frozen value objects. Mutating commands build a new Person
(``model_copy(update=...)``) and swap it in via the model, so an undo can
always restore the exact previous instance.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from addrctl.domain import fields


class Person(BaseModel):
    """A contact in the address book.

    Identity for duplicate detection is the case-insensitive name
    (see :meth:`is_same_person`); full equality compares every field.
    """

    model_config = {"frozen": True}

    name: str
    phone: str
    email: str
    address: str
    birthday: str | None = None
    relationship: str | None = None
    nickname: str | None = None
    notes: str | None = None
    remark: str = ""
    tags: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        return fields.validate_name(v)

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, v: str) -> str:
        return fields.validate_phone(v)

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        return fields.validate_email(v)

    @field_validator("address")
    @classmethod
    def _check_address(cls, v: str) -> str:
        return fields.validate_address(v)

    @field_validator("birthday")
    @classmethod
    def _check_birthday(cls, v: str | None) -> str | None:
        return None if v is None else fields.validate_birthday(v)

    @field_validator("relationship")
    @classmethod
    def _check_relationship(cls, v: str | None) -> str | None:
        return None if v is None else fields.validate_relationship(v)

    @field_validator("nickname")
    @classmethod
    def _check_nickname(cls, v: str | None) -> str | None:
        return None if v is None else fields.validate_nickname(v)

    @field_validator("notes")
    @classmethod
    def _check_notes(cls, v: str | None) -> str | None:
        return None if v is None else fields.validate_notes(v)

    @field_validator("remark")
    @classmethod
    def _check_remark(cls, v: str) -> str:
        return fields.validate_remark(v)

    @field_validator("tags")
    @classmethod
    def _check_tags(cls, v: frozenset[str]) -> frozenset[str]:
        return frozenset(fields.validate_tag(t) for t in v)

    def is_same_person(self, other: Person | None) -> bool:
        """Return True if *other* has the same name, ignoring case."""
        if other is None:
            return False
        return self.name.casefold() == other.name.casefold()


def format_person(person: Person) -> str:
    """Render a person on one line for command feedback messages."""
    parts = [
        person.name,
        f"Phone: {person.phone}",
        f"Email: {person.email}",
        f"Address: {person.address}",
    ]
    if person.birthday:
        parts.append(f"Birthday: {person.birthday}")
    if person.relationship:
        parts.append(f"Relationship: {person.relationship}")
    if person.nickname:
        parts.append(f"Nickname: {person.nickname}")
    if person.notes:
        parts.append(f"Notes: {person.notes}")
    if person.remark:
        parts.append(f"Remark: {person.remark}")
    if person.tags:
        parts.append("Tags: " + "".join(f"[{t}]" for t in sorted(person.tags)))
    return "; ".join(parts)
