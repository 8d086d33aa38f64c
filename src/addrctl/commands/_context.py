"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy LogicManager initialization and
centralized output (stdout for feedback, stderr for errors).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from addrctl.output.formatters import format_error, format_help, format_person_table, format_result

if TYPE_CHECKING:
    from addrctl.config.settings import AddrSettings
    from addrctl.errors import AddrError
    from addrctl.infrastructure.storage import JsonStorage
    from addrctl.logic.manager import LogicManager
    from addrctl.logic.result import CommandResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Storage and the logic
    manager are created on first use so ``--help`` and ``--version`` never
    touch the data files.
    """

    def __init__(self, settings: AddrSettings) -> None:
        self.settings = settings
        self._storage: JsonStorage | None = None
        self._logic: LogicManager | None = None

        from addrctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def storage(self) -> JsonStorage:
        """JSON storage at the configured paths (created lazily)."""
        if self._storage is None:
            from addrctl.infrastructure.storage import JsonStorage

            self._storage = JsonStorage(self.settings.address_book_path, self.settings.history_path)
        return self._storage

    @property
    def logic(self) -> LogicManager:
        """The logic manager over the loaded model (created lazily)."""
        if self._logic is None:
            from addrctl.logic.manager import LogicManager
            from addrctl.logic.parser import AddressBookParser
            from addrctl.logic.startup import load_model
            from addrctl.logic.tracker import CommandTracker

            model = load_model(
                self.storage,
                seed_sample_data=self.settings.storage.seed_sample_data,
                max_history_entries=self.settings.history.max_entries,
            )
            tracker = CommandTracker()
            parser = AddressBookParser(
                tracker,
                yes_tokens=self.settings.confirmation.yes_tokens,
                no_tokens=self.settings.confirmation.no_tokens,
            )
            self._logic = LogicManager(model, self.storage, tracker=tracker, parser=parser)
        return self._logic

    @property
    def yes_answer(self) -> str:
        return self.settings.confirmation.yes_tokens[0]

    @property
    def no_answer(self) -> str:
        return self.settings.confirmation.no_tokens[0]

    def emit(self, result: CommandResult) -> None:
        """Write a result to stdout, followed by the person list if requested."""
        click.echo(format_help(result) if result.show_help else format_result(result))
        if result.show_persons:
            click.echo(format_person_table(self.logic.filtered_persons))

    def fail(self, exc: AddrError) -> None:
        """Write an error to stderr. The caller decides whether to exit."""
        click.echo(format_error(exc), err=True)
