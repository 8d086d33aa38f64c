"""Command: execute a single address book command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from addrctl.commands._base import AddrCommand, usage_examples
from addrctl.errors import AddrError

if TYPE_CHECKING:
    from addrctl.commands._context import AppContext


def _examples() -> str:
    return "\n".join(
        [
            "  addrctl run --yes delete 1 2",
            "  addrctl --no-interact run clear",
            usage_examples(prefix="addrctl run -- "),
        ]
    )


@click.command(cls=AddrCommand, examples=_examples)
@click.argument("command_text", nargs=-1, required=True)
@click.option("-y", "--yes", "assume_yes", is_flag=True, help="Confirm destructive commands without asking.")
@click.pass_obj
def run(app: AppContext, command_text: tuple[str, ...], assume_yes: bool) -> None:
    """Run one COMMAND_TEXT against the address book and save.

    Commands that need confirmation are confirmed with --yes, prompted for
    interactively, or aborted under --no-interact.
    """
    logic = app.logic
    try:
        result = logic.execute(" ".join(command_text))
        app.emit(result)
        if result.needs_confirmation:
            if assume_yes:
                confirmed = True
            elif app.settings.no_interact:
                confirmed = False
            else:
                confirmed = click.confirm("Proceed?", default=False)
            app.emit(logic.execute(app.yes_answer if confirmed else app.no_answer))
    except AddrError as exc:
        app.fail(exc)
        raise SystemExit(1) from exc
