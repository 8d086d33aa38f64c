"""Click base classes for addrctl commands.

``AddrCommand`` / ``AddrGroup`` accept an ``examples`` argument and expose
it as an eager ``--examples`` flag, so ``--help`` stays short. Examples are
either literal text or a zero-argument callable evaluated only when the
flag is given; :func:`usage_examples` builds such text from the
``Example:`` lines the address book commands already carry in ``usage``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

ExamplesSource = str | Callable[[], str]

_EXAMPLE_MARKER = "Example: "


def usage_examples(prefix: str = "") -> str:
    """Collect every command's ``Example:`` line, each prefixed by *prefix*."""
    from addrctl.logic.commands import ALL_COMMANDS

    lines = [
        f"  {prefix}{line.removeprefix(_EXAMPLE_MARKER)}"
        for command in ALL_COMMANDS
        for line in command.usage.splitlines()
        if line.startswith(_EXAMPLE_MARKER)
    ]
    return "\n".join(lines)


class ExamplesOption(click.Option):
    """Eager ``--examples`` flag that prints examples and exits."""

    def __init__(self, examples: ExamplesSource) -> None:
        self.examples = examples
        super().__init__(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._show,
            help="Show usage examples and exit.",
        )

    def render(self) -> str:
        return self.examples() if callable(self.examples) else self.examples

    def _show(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.render())
        ctx.exit(0)


class AddrCommand(click.Command):
    """Click Command that takes an optional ``examples`` source."""

    def __init__(self, *args: Any, examples: ExamplesSource | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples is not None:
            self.params.append(ExamplesOption(examples))


class AddrGroup(click.Group):
    """Click Group counterpart of :class:`AddrCommand`.

    Subcommands declared through the group default to ``AddrCommand``.
    """

    command_class = AddrCommand

    def __init__(self, *args: Any, examples: ExamplesSource | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples is not None:
            self.params.append(ExamplesOption(examples))
