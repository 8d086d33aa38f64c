"""LogicManager — the single entry point that runs one interaction.

Pipeline per call: PARSE → EXECUTE → TRACK → PERSIST → RESPOND

The manager owns the pending-confirmation slot. While a Confirmable
command is pending, the next input is resolved as yes/no and is never
parsed as an ordinary command.

INVARIANT: At most one confirmation is pending at any time.
INVARIANT: A command reaches the undo tracker only once it has committed:
directly for undoable commands that need no confirmation, or via "yes"
for Confirmable ones. Aborted commands are never tracked.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from addrctl.errors import CommandError
from addrctl.logic import messages
from addrctl.logic.parser import AddressBookParser
from addrctl.logic.tracker import CommandTracker

if TYPE_CHECKING:
    from addrctl.domain.address_book import AddressBook
    from addrctl.domain.history import CommandHistory
    from addrctl.domain.model import Model
    from addrctl.domain.person import Person
    from addrctl.logic.commands import Confirmable
    from addrctl.logic.result import CommandResult

logger = logging.getLogger(__name__)


class Storage(Protocol):
    """Persistence boundary used by the manager after every interaction.

    Save methods raise ``OSError`` (including ``PermissionError``) on
    failure; the manager classifies them.
    """

    address_book_path: Path

    def save_address_book(self, address_book: AddressBook) -> None: ...

    def save_command_history(self, history: CommandHistory) -> None: ...


class LogicManager:
    """Coordinates parser, commands, undo tracker, and storage.

    Args:
        model: Domain state mutated by commands.
        storage: Persistence boundary saved after every interaction.
        tracker: Undo tracker; a fresh one is created when omitted.
        parser: Command parser; built around *tracker* when omitted.
    """

    def __init__(
        self,
        model: Model,
        storage: Storage,
        *,
        tracker: CommandTracker | None = None,
        parser: AddressBookParser | None = None,
    ) -> None:
        self._model = model
        self._storage = storage
        self._tracker = tracker if tracker is not None else CommandTracker()
        self._parser = parser if parser is not None else AddressBookParser(self._tracker)
        self._pending: Confirmable | None = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute(self, command_text: str) -> CommandResult:
        """Run one line of user input to completion.

        Raises:
            ParseError: Malformed command, unknown word, or an answer that
                is neither yes nor no while a confirmation is pending.
            CommandError: Business-rule violation, or a save failure
                (``PERMISSION_DENIED`` / ``FILE_OPS``). On a save failure
                the in-memory change is kept.
        """
        with self._lock:
            logger.info("[USER COMMAND][%s]", command_text)

            if self._pending is not None:
                result = self._execute_confirmation(self._pending, command_text)
            else:
                result = self._execute_command(command_text)

            self._save_state(command_text)
            return result

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def is_pending_confirmation(self) -> bool:
        return self._pending is not None

    @property
    def pending_confirmation(self) -> Confirmable | None:
        return self._pending

    @property
    def tracker(self) -> CommandTracker:
        return self._tracker

    @property
    def model(self) -> Model:
        return self._model

    @property
    def address_book(self) -> AddressBook:
        return self._model.address_book

    @property
    def filtered_persons(self) -> tuple[Person, ...]:
        return self._model.filtered_persons

    @property
    def command_history(self) -> CommandHistory:
        return self._model.command_history

    @property
    def address_book_path(self) -> Path:
        return self._storage.address_book_path

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _execute_command(self, command_text: str) -> CommandResult:
        command = self._parser.parse_command(command_text)
        result = command.execute(self._model)

        if result.needs_confirmation:
            self._pending = result.pending
            logger.debug("Awaiting confirmation for %s", type(result.pending).__name__)
        elif command.undoable:
            self._tracker.push(command)  # type: ignore[arg-type]
        return result

    def _execute_confirmation(self, pending: Confirmable, command_text: str) -> CommandResult:
        # A ParseError here leaves the pending command in place.
        confirmed = self._parser.parse_confirmation(command_text)
        try:
            if confirmed:
                result = pending.execute_confirmed(self._model)
                if pending.undoable:
                    self._tracker.push(pending)  # type: ignore[arg-type]
            else:
                result = pending.execute_aborted()
        finally:
            self._pending = None
        logger.debug("Confirmation resolved: %s", "yes" if confirmed else "no")
        return result

    def _save_state(self, command_text: str) -> None:
        try:
            self._storage.save_address_book(self._model.address_book)
            self._model.add_to_command_history(command_text)
            self._storage.save_command_history(self._model.command_history)
        except PermissionError as exc:
            path = exc.filename or self._storage.address_book_path
            logger.warning("Save denied for %s", path)
            raise CommandError(
                messages.FILE_OPS_PERMISSION_ERROR_FORMAT % path, code="PERMISSION_DENIED"
            ) from exc
        except OSError as exc:
            logger.warning("Save failed: %s", exc)
            raise CommandError(messages.FILE_OPS_ERROR_FORMAT % exc, code="FILE_OPS") from exc
