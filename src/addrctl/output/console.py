"""Rich Console factory and theme for addrctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_*() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ADDR_THEME = Theme(
    {
        "addr.ok": "bold green",
        "addr.error": "bold red",
        "addr.warning": "bold yellow",
        "addr.prompt": "bold cyan",
        "addr.command": "bold cyan",
        "addr.index": "dim",
        "addr.name": "bold",
        "addr.phone": "green",
        "addr.email": "blue",
        "addr.tag": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ADDR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
