"""Root CLI group for addrctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from addrctl import __version__
from addrctl.commands import register_commands
from addrctl.commands._base import AddrGroup
from addrctl.commands._context import AppContext
from addrctl.config.settings import AddrSettings


@click.group(
    cls=AddrGroup,
    invoke_without_command=True,
    examples="""\
  addrctl shell
  addrctl run list
  addrctl --data-root ~/contacts run find alex
  addrctl -v --log-json run --yes clear""",
)
@click.version_option(version=__version__, prog_name="addrctl")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (pending confirmations are aborted).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--data-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory the data files are stored under.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    data_root: Path | None,
) -> None:
    """addrctl — address book manager for the terminal."""
    ctx.ensure_object(dict)
    settings = AddrSettings.from_cli(
        config_path=config_path,
        data_root=data_root,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
