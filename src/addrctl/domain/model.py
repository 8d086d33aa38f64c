"""Model — the mutable domain state a command executes against.

Holds the address book, the predicate behind the filtered view, and the
command history. The filtered view is recomputed from the predicate on
every access, never cached, so it always reflects the current book.
"""

from __future__ import annotations

from pathlib import Path

from addrctl.domain.address_book import AddressBook
from addrctl.domain.history import CommandHistory
from addrctl.domain.person import Person
from addrctl.domain.predicates import PersonPredicate, show_all


class Model:
    """In-memory domain state owned by one LogicManager.

    Args:
        address_book: Initial records; copied so the caller's book is not shared.
        command_history: Initial history; copied likewise.
        address_book_path: Where the book is persisted (informational only).
    """

    def __init__(
        self,
        address_book: AddressBook | None = None,
        command_history: CommandHistory | None = None,
        *,
        address_book_path: Path | None = None,
    ) -> None:
        self._address_book = address_book.copy() if address_book is not None else AddressBook()
        self._history = command_history.copy() if command_history is not None else CommandHistory()
        self._predicate: PersonPredicate = show_all
        self.address_book_path = address_book_path

    # --- Address book -----------------------------------------------------

    @property
    def address_book(self) -> AddressBook:
        return self._address_book

    def set_address_book(self, address_book: AddressBook) -> None:
        self._address_book.reset_data(address_book)

    def has_person(self, person: Person) -> bool:
        return self._address_book.has_person(person)

    def add_person(self, person: Person) -> None:
        """Add *person* and reset the view so the new record is visible."""
        self._address_book.add_person(person)
        self.update_filter(show_all)

    def insert_person(self, position: int, person: Person) -> None:
        self._address_book.insert_person(position, person)

    def delete_person(self, person: Person) -> None:
        self._address_book.remove_person(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self._address_book.set_person(target, edited)

    # --- Filtered view ----------------------------------------------------

    @property
    def filtered_persons(self) -> tuple[Person, ...]:
        return tuple(p for p in self._address_book if self._predicate(p))

    def update_filter(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate

    # --- Command history --------------------------------------------------

    @property
    def command_history(self) -> CommandHistory:
        return self._history

    def add_to_command_history(self, command_text: str) -> None:
        self._history.add(command_text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self.filtered_persons == other.filtered_persons
            and self._history == other._history
        )
