"""JSON file persistence for the address book and command history.

Both artifacts are pydantic envelopes written with ``model_dump_json``.
Save errors are left as the ``OSError`` the filesystem raised
(``PermissionError`` included) so the caller can classify them; only load
errors are translated, into :class:`~addrctl.errors.DataLoadingError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from addrctl.domain.address_book import AddressBook, DuplicatePersonError
from addrctl.domain.history import DEFAULT_MAX_ENTRIES, CommandHistory
from addrctl.domain.person import Person
from addrctl.errors import DataLoadingError

logger = logging.getLogger(__name__)


class _AddressBookFile(BaseModel):
    persons: list[Person] = Field(default_factory=list)


class _CommandHistoryFile(BaseModel):
    commands: list[str] = Field(default_factory=list)


def _write(path: Path, payload: BaseModel) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload.model_dump_json(indent=2), encoding="utf-8")


def _read_text(path: Path) -> str | None:
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Could not read {path}: {exc}"
        raise DataLoadingError(msg) from exc


class JsonStorage:
    """Reads and writes the two persisted artifacts.

    Args:
        address_book_path: JSON file holding ``{"persons": [...]}``.
        history_path: JSON file holding ``{"commands": [...]}``.
    """

    def __init__(self, address_book_path: Path, history_path: Path) -> None:
        self.address_book_path = address_book_path
        self.history_path = history_path

    # ------------------------------------------------------------------
    # Address book
    # ------------------------------------------------------------------

    def read_address_book(self) -> AddressBook | None:
        """Load the address book, or return None if the file does not exist.

        Raises:
            DataLoadingError: If the file exists but is malformed.
        """
        raw = _read_text(self.address_book_path)
        if raw is None:
            logger.debug("No address book at %s", self.address_book_path)
            return None
        try:
            envelope = _AddressBookFile.model_validate_json(raw)
            book = AddressBook(envelope.persons)
        except (ValidationError, DuplicatePersonError) as exc:
            msg = f"Address book file {self.address_book_path} is invalid: {exc}"
            raise DataLoadingError(msg) from exc
        logger.debug("Loaded %d persons from %s", len(book), self.address_book_path)
        return book

    def save_address_book(self, address_book: AddressBook) -> None:
        _write(self.address_book_path, _AddressBookFile(persons=list(address_book.persons)))
        logger.debug("Saved %d persons to %s", len(address_book), self.address_book_path)

    # ------------------------------------------------------------------
    # Command history
    # ------------------------------------------------------------------

    def read_command_history(self, *, max_entries: int = DEFAULT_MAX_ENTRIES) -> CommandHistory | None:
        """Load the command history, or return None if the file does not exist.

        Raises:
            DataLoadingError: If the file exists but is malformed.
        """
        raw = _read_text(self.history_path)
        if raw is None:
            return None
        try:
            envelope = _CommandHistoryFile.model_validate_json(raw)
        except ValidationError as exc:
            msg = f"Command history file {self.history_path} is invalid: {exc}"
            raise DataLoadingError(msg) from exc
        return CommandHistory(envelope.commands, max_entries=max_entries)

    def save_command_history(self, history: CommandHistory) -> None:
        _write(self.history_path, _CommandHistoryFile(commands=list(history.commands)))
        logger.debug("Saved %d history entries to %s", len(history), self.history_path)
