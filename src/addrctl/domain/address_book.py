"""AddressBook — the ordered, duplicate-free record collection.

INVARIANT: No two persons in the book satisfy ``is_same_person``.
Removal is by identity-equal value, never by name, so a stale reference to
an edited person cannot remove its replacement.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from addrctl.domain.person import Person


class DuplicatePersonError(ValueError):
    """Raised when an operation would put two same-name persons in the book."""


class PersonNotFoundError(LookupError):
    """Raised when a person to remove or replace is not in the book."""


class AddressBook:
    """Mutable ordered collection of :class:`Person` records."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: list[Person] = []
        for person in persons:
            self.add_person(person)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    def has_person(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def index_of(self, person: Person) -> int:
        """Return the position of *person* in the book."""
        for i, p in enumerate(self._persons):
            if p == person:
                return i
        msg = f"Person not in address book: {person.name}"
        raise PersonNotFoundError(msg)

    def __len__(self) -> int:
        return len(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(tuple(self._persons))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons

    def __repr__(self) -> str:
        return f"AddressBook(persons={len(self._persons)})"

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            msg = f"Duplicate person: {person.name}"
            raise DuplicatePersonError(msg)
        self._persons.append(person)

    def insert_person(self, position: int, person: Person) -> None:
        """Insert *person* at *position* (clamped to the end of the book)."""
        if self.has_person(person):
            msg = f"Duplicate person: {person.name}"
            raise DuplicatePersonError(msg)
        self._persons.insert(min(position, len(self._persons)), person)

    def remove_person(self, person: Person) -> None:
        self._persons.pop(self.index_of(person))

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace *target* with *edited* in place."""
        position = self.index_of(target)
        if not target.is_same_person(edited) and self.has_person(edited):
            msg = f"Duplicate person: {edited.name}"
            raise DuplicatePersonError(msg)
        self._persons[position] = edited

    def reset_data(self, other: AddressBook) -> None:
        """Replace the entire contents with a copy of *other*."""
        self._persons = list(other._persons)

    def copy(self) -> AddressBook:
        book = AddressBook()
        book._persons = list(self._persons)
        return book
