"""Commands: quote, rate, and swap."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from swapctl.commands._base import SwapCommand

if TYPE_CHECKING:
    from swapctl.commands._context import AppContext


@click.command(
    cls=SwapCommand,
    examples=[
        "swapctl quote 1.5",
        "swapctl quote 100 --pay usdc --receive atom",
        "swapctl quote 0.25 --pay eth --receive wbtc --decimals 8",
        "swapctl --json quote 2500 --pay busd",
    ],
)
@click.argument("amount")
@click.option("--pay", default=None, help="Coin to pay with (default: first coin held).")
@click.option("--receive", default=None, help="Coin to receive (default: ETH).")
@click.option(
    "--decimals",
    "decimal_places",
    type=int,
    default=None,
    help="Decimal places for the received amount (default: [display] decimal_places).",
)
@click.pass_obj
def quote(
    app: AppContext,
    amount: str,
    pay: str | None,
    receive: str | None,
    decimal_places: int | None,
) -> None:
    """Quote swapping AMOUNT of one coin into another.

    AMOUNT goes through the same normalization as the amount field.  Warns
    when the amount is not positive or exceeds the wallet balance.
    """
    from swapctl.services.quote import QuoteService

    svc = QuoteService(app.store)
    app.emit(svc.quote(amount, pay=pay, receive=receive, decimal_places=decimal_places))


@click.command(
    cls=SwapCommand,
    examples=[
        "swapctl rate eth usdc",
        "swapctl -q rate atom osmo",
    ],
)
@click.argument("pay")
@click.argument("receive")
@click.pass_obj
def rate(app: AppContext, pay: str, receive: str) -> None:
    """Show how much RECEIVE one unit of PAY buys."""
    from swapctl.services.quote import QuoteService

    app.emit(QuoteService(app.store).rate(pay, receive))


@click.command(
    cls=SwapCommand,
    examples=["swapctl swap eth usdc"],
)
@click.argument("pay")
@click.argument("receive")
@click.pass_obj
def swap(app: AppContext, pay: str, receive: str) -> None:
    """Flip the PAY/RECEIVE pair and show the rate the other way round."""
    from swapctl.services.quote import QuoteService

    app.emit(QuoteService(app.store).swap(pay, receive))
