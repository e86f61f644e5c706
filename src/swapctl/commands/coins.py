"""Command group: coin catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from swapctl.commands._base import SwapGroup

if TYPE_CHECKING:
    from swapctl.commands._context import AppContext


@click.group(cls=SwapGroup)
def coins() -> None:
    """Browse the coin catalog."""


@coins.command(
    name="list",
    examples=[
        "swapctl coins list",
        "swapctl coins list --with-balance",
        "swapctl coins list --search atom",
        "swapctl -q coins list --with-balance",
    ],
)
@click.option("--search", default=None, help="Filter by name or symbol substring.")
@click.option("--with-balance", is_flag=True, help="Only coins the wallet holds.")
@click.pass_obj
def list_cmd(app: AppContext, search: str | None, with_balance: bool) -> None:
    """List coins with their USD price and wallet balance."""
    from swapctl.services.quote import QuoteService

    app.emit(QuoteService(app.store).list_coins(search=search, with_balance=with_balance))
