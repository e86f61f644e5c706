"""Root CLI group for swapctl with global flags and command registration."""

from __future__ import annotations

import click

from swapctl import __version__
from swapctl.commands import register_commands
from swapctl.commands._context import AppContext
from swapctl.config.settings import SwapSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="swapctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """swapctl: normalize amounts and quote coin swaps."""
    settings = SwapSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
