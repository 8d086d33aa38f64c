"""Render CommandResults, errors, and the person list for the terminal.

Every function returns a string so the click layer decides where it goes
(stdout for feedback, stderr for errors).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from addrctl.errors import CommandError
from addrctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from addrctl.domain.person import Person
    from addrctl.errors import AddrError
    from addrctl.logic.result import CommandResult


def format_result(result: CommandResult) -> str:
    """Render the feedback message, styled by outcome."""
    console = create_console()
    style = "addr.prompt" if result.needs_confirmation else "addr.ok"
    console.print(Text(result.message, style=style))
    return get_output(console).rstrip("\n")


def format_help(result: CommandResult) -> str:
    """Render a help result as one usage block per command word.

    Blocks are separated by blank lines; long usage lines are not wrapped.
    """
    console = create_console()
    for n, block in enumerate(result.message.split("\n\n")):
        if n:
            console.print()
        head, *details = block.splitlines()
        word, _, summary = head.partition(":")
        console.print(Text(word, style="addr.command").append(":" + summary), soft_wrap=True)
        for detail in details:
            label, sep, value = detail.partition(": ")
            line = Text("  ")
            line.append(label + sep, style="dim" if sep else None)
            line.append(value)
            console.print(line, soft_wrap=True)
    return get_output(console).rstrip("\n")


def format_error(exc: AddrError) -> str:
    """Render an error with its failure code when one is known."""
    console = create_console()
    label = Text("ERROR", style="addr.error")
    if isinstance(exc, CommandError) and exc.code != "COMMAND_FAILED":
        label.append(f" [{exc.code}]", style="dim")
    console.print(label, Text(exc.message))
    return get_output(console).rstrip("\n")


def format_person_table(persons: Sequence[Person]) -> str:
    """Render the displayed persons with their one-based indices."""
    console = create_console()
    if not persons:
        console.print(Text("No persons to show.", style="dim"))
        return get_output(console).rstrip("\n")

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="addr.index", justify="right", no_wrap=True)
    table.add_column("Name", style="addr.name")
    table.add_column("Phone", style="addr.phone", no_wrap=True)
    table.add_column("Email", style="addr.email")
    table.add_column("Address")
    table.add_column("Birthday", no_wrap=True)
    table.add_column("Relationship")
    table.add_column("Tags", style="addr.tag")

    for i, person in enumerate(persons, start=1):
        table.add_row(
            str(i),
            escape(person.name),
            person.phone,
            escape(person.email),
            escape(person.address),
            person.birthday or "",
            escape(person.relationship or ""),
            ", ".join(sorted(person.tags)),
        )
    console.print(table)
    return get_output(console).rstrip("\n")
