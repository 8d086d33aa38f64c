"""Subcommand modules for addrctl.

Provides register_commands() which uses deferred imports to keep
``addrctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from addrctl.commands.history import history
    from addrctl.commands.run import run
    from addrctl.commands.shell import shell

    cli.add_command(shell)
    cli.add_command(run)
    cli.add_command(history)
