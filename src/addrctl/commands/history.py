"""Command: print the persisted command history."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from addrctl.commands._base import AddrCommand
from addrctl.errors import AddrError

if TYPE_CHECKING:
    from addrctl.commands._context import AppContext


@click.command(
    cls=AddrCommand,
    examples="""\
  addrctl history
  addrctl history --limit 5""",
)
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Show only the newest N commands.")
@click.pass_obj
def history(app: AppContext, limit: int | None) -> None:
    """Show previously entered commands, oldest first."""
    try:
        loaded = app.storage.read_command_history(max_entries=app.settings.history.max_entries)
    except AddrError as exc:
        app.fail(exc)
        raise SystemExit(1) from exc

    commands = loaded.commands if loaded is not None else ()
    if not commands:
        click.echo("No commands in history yet.")
        return

    start = max(len(commands) - limit, 0) if limit else 0
    for number, text in enumerate(commands[start:], start=start + 1):
        click.echo(f"{number:>4}  {text}")
