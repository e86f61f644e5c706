"""Conversion math and balance checks for a pay/receive coin pair."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel

from swapctl.domain.amounts import is_amount_format
from swapctl.domain.coins import Coin
from swapctl.domain.display import format_usd, to_fixed

RATE_DECIMAL_PLACES = 6
ZERO_RATE = "0.000000"
ZERO_USD = "0.00"

AMOUNT_NOT_POSITIVE = "Amount must be positive"
INSUFFICIENT_BALANCE = "Insufficient Balance"


class BalanceCheck(BaseModel):
    """Outcome of checking a pay amount against the wallet balance."""

    model_config = {"frozen": True}

    is_zero_or_negative: bool
    exceeds_balance: bool
    transfer_disabled: bool
    reason: str | None = None


def parse_amount(amount: str) -> float:
    """Numeric value of a live amount string.

    Transient states (``""``, ``"."``) and anything that is not a plain
    digits-and-dot amount count as 0.
    """
    if not is_amount_format(amount):
        return 0.0
    try:
        return float(amount)
    except ValueError:
        return 0.0


def received_amount(amount: str, pay: Coin | None, receive: Coin | None) -> float:
    """How much of *receive* the *amount* of *pay* converts to."""
    value = parse_amount(amount)
    if pay is None or receive is None or value <= 0 or receive.value_usd <= 0:
        return 0.0
    return value * pay.value_usd / receive.value_usd


def conversion_rate(pay: Coin | None, receive: Coin | None) -> str:
    """Units of *receive* per unit of *pay*, six fixed decimals."""
    if pay is None or receive is None or receive.value_usd <= 0:
        return ZERO_RATE
    return to_fixed(pay.value_usd / receive.value_usd, RATE_DECIMAL_PLACES)


def usd_value(amount: str, coin: Coin | None) -> str:
    """USD worth of *amount* of *coin*, e.g. ``"1,234.50"``."""
    if not amount or coin is None:
        return ZERO_USD
    return format_usd(parse_amount(amount) * coin.value_usd)


def check_balance(amount: str, pay: Coin | None, *, enforce_balance: bool = True) -> BalanceCheck:
    """Decide whether a transfer of *amount* may proceed.

    A non-positive amount always blocks the transfer.  Exceeding the
    balance blocks it only while balance enforcement is on.
    """
    value = parse_amount(amount)
    balance = pay.balance if pay is not None else 0.0
    is_zero_or_negative = value <= 0
    exceeds_balance = value > balance

    reason: str | None = None
    if is_zero_or_negative:
        reason = AMOUNT_NOT_POSITIVE
    elif enforce_balance and exceeds_balance:
        reason = INSUFFICIENT_BALANCE

    return BalanceCheck(
        is_zero_or_negative=is_zero_or_negative,
        exceeds_balance=exceeds_balance,
        transfer_disabled=reason is not None,
        reason=reason,
    )


_CoinT = TypeVar("_CoinT", bound=Coin | None)


def swap_pair(pay: _CoinT, receive: _CoinT) -> tuple[_CoinT, _CoinT]:
    """Exchange the pay and receive sides."""
    return receive, pay
