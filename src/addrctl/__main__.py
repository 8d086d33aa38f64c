"""Allow ``python -m addrctl``."""

from addrctl.cli import cli

cli()
