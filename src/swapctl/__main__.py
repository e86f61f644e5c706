"""Allow ``python -m swapctl``."""

from swapctl.cli import cli

cli()
