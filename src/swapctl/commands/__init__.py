"""Subcommand modules for swapctl.

register_commands() imports command modules lazily so ``swapctl --help``
stays cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root group."""
    # --- Groups ---
    from swapctl.commands.amount import amount
    from swapctl.commands.coins import coins

    cli.add_command(amount)
    cli.add_command(coins)

    # --- Standalone commands ---
    from swapctl.commands.quote import quote, rate, swap

    cli.add_command(quote)
    cli.add_command(rate)
    cli.add_command(swap)
