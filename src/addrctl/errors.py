"""Exception hierarchy for addrctl.

Every user-visible failure maps to a subclass of :class:`AddrError` so the
CLI error boundary can print a clean message and keep running.

Hierarchy
---------
AddrError
├── ParseError        malformed or unrecognized input; nothing changed
├── CommandError      business rule or persistence failure (see ``code``)
└── DataLoadingError  persisted file exists but cannot be read
"""

from __future__ import annotations


class AddrError(Exception):
    """Base exception for all addrctl errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseError(AddrError):
    """Raised when command or confirmation text cannot be parsed."""


class CommandError(AddrError):
    """Raised when a parsed command cannot complete.

    Attributes:
        code: Machine-readable failure class, e.g. ``INVALID_INDEX``,
            ``PERMISSION_DENIED`` or ``FILE_OPS``.
    """

    def __init__(self, message: str, *, code: str = "COMMAND_FAILED") -> None:
        super().__init__(message)
        self.code = code


class DataLoadingError(AddrError):
    """Raised when a persisted data file is present but unreadable."""
