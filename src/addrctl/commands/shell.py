"""Command: interactive session over the logic manager."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from addrctl.commands._base import AddrCommand, usage_examples
from addrctl.errors import AddrError
from addrctl.output.formatters import format_person_table

if TYPE_CHECKING:
    from addrctl.commands._context import AppContext


def _examples() -> str:
    return (
        "  addrctl shell\n"
        "  addrctl --data-root ~/contacts shell\n"
        "  printf 'list\\ndelete 1\\ny\\nexit\\n' | addrctl shell\n"
        "\nAt the addrctl> prompt:\n" + usage_examples()
    )


@click.command(cls=AddrCommand, examples=_examples)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Start an interactive session (type 'help' for commands, 'exit' to quit)."""
    logic = app.logic
    click.echo(format_person_table(logic.filtered_persons))

    while True:
        prompt = "confirm" if logic.is_pending_confirmation else "addrctl"
        try:
            text = click.prompt(prompt, prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            # End of input or Ctrl-C ends the session like ``exit``.
            click.echo()
            break

        if not text.strip() and not logic.is_pending_confirmation:
            continue
        try:
            result = logic.execute(text)
        except AddrError as exc:
            app.fail(exc)
            continue

        app.emit(result)
        if result.exit:
            break
