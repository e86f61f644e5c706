"""Command group: amount normalization and display formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from swapctl.commands._base import SwapGroup

if TYPE_CHECKING:
    from swapctl.commands._context import AppContext


@click.group(
    cls=SwapGroup,
    examples=[
        "swapctl amount normalize 0123",
        "swapctl amount normalize 12345678901.23",
        "swapctl -q amount normalize .5",
        "swapctl amount format 1.234567 --decimals 4",
        "swapctl --json amount format 0",
    ],
)
def amount() -> None:
    """Normalize typed amounts and format computed ones."""


@amount.command(
    examples=[
        "swapctl amount normalize 007",
        "swapctl amount normalize 00.5",
        "swapctl --json amount normalize 12a.3",
    ],
)
@click.argument("raw")
@click.pass_obj
def normalize(app: AppContext, raw: str) -> None:
    """Normalize RAW the way the amount field does on every edit.

    Exits with status 1 when RAW contains anything besides digits and a
    single dot.  Over-long amounts are truncated, with a warning when the
    integer part had more than 10 digits.
    """
    from swapctl.services.amount import AmountService

    app.emit(AmountService().normalize(raw))


@amount.command(
    name="format",
    examples=[
        "swapctl amount format 1.2 --decimals 4",
        "swapctl amount format 0.5",
        "swapctl -q amount format 3.14159265 --decimals 2",
    ],
)
@click.argument("value", type=float)
@click.option(
    "--decimals",
    "decimal_places",
    type=int,
    default=None,
    help="Decimal places to round to (default: [display] decimal_places).",
)
@click.pass_obj
def format_cmd(app: AppContext, value: float, decimal_places: int | None) -> None:
    """Format VALUE for display: rounded, trailing zeros removed."""
    from swapctl.services.amount import AmountService

    places = app.settings.display.decimal_places if decimal_places is None else decimal_places
    app.emit(AmountService().format(value, places))
