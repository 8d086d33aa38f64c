"""CommandHistory — bounded append-only log of raw command lines."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

DEFAULT_MAX_ENTRIES = 100


class CommandHistory:
    """Ordered log of command strings, oldest first.

    When more than *max_entries* commands are added, the oldest ones are
    dropped. Entries are never edited in place.
    """

    def __init__(self, commands: Iterable[str] = (), *, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            msg = f"max_entries must be positive, got {max_entries}"
            raise ValueError(msg)
        self._max_entries = max_entries
        self._commands: deque[str] = deque(commands, maxlen=max_entries)

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def commands(self) -> tuple[str, ...]:
        return tuple(self._commands)

    def add(self, command_text: str) -> None:
        self._commands.append(command_text)

    def copy(self) -> CommandHistory:
        return CommandHistory(self._commands, max_entries=self.max_entries)

    def __len__(self) -> int:
        return len(self._commands)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandHistory):
            return NotImplemented
        return tuple(self._commands) == tuple(other._commands)

    def __repr__(self) -> str:
        return f"CommandHistory(entries={len(self._commands)}, max_entries={self.max_entries})"
