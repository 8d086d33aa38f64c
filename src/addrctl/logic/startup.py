"""Build the initial Model from persisted data.

Load policy:
- address book missing  -> sample data (or empty if seeding is disabled)
- address book corrupt  -> empty book, warning logged; the bad file is
  overwritten by the next successful save
- history missing/corrupt -> empty history
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from addrctl.domain.address_book import AddressBook
from addrctl.domain.history import DEFAULT_MAX_ENTRIES, CommandHistory
from addrctl.domain.model import Model
from addrctl.domain.sample_data import sample_address_book
from addrctl.errors import DataLoadingError

if TYPE_CHECKING:
    from addrctl.infrastructure.storage import JsonStorage

logger = logging.getLogger(__name__)


def load_model(
    storage: JsonStorage,
    *,
    seed_sample_data: bool = True,
    max_history_entries: int = DEFAULT_MAX_ENTRIES,
) -> Model:
    """Read both artifacts through *storage* and assemble a Model."""
    try:
        book = storage.read_address_book()
        if book is None:
            logger.info("Data file not found at %s", storage.address_book_path)
            book = sample_address_book() if seed_sample_data else AddressBook()
    except DataLoadingError as exc:
        logger.warning("Starting with an empty address book: %s", exc.message)
        book = AddressBook()

    try:
        history = storage.read_command_history(max_entries=max_history_entries)
    except DataLoadingError as exc:
        logger.warning("Starting with an empty command history: %s", exc.message)
        history = None
    if history is None:
        history = CommandHistory(max_entries=max_history_entries)

    return Model(book, history, address_book_path=storage.address_book_path)
