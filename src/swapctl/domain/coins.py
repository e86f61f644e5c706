"""Coin catalog built from price records and wallet balances.

Price feeds may list the same currency several times; only the newest
record per currency is kept.  Symbols are stored lower-cased and display
names upper-cased, matching the balance file keys.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime

from pydantic import BaseModel, Field

ICON_BASE_URL = "https://raw.githubusercontent.com/Switcheo/token-icons/main/tokens"

# Icon files whose names are not simply the upper-cased currency.
ICON_NAME_OVERRIDES: dict[str, str] = {
    "RATOM": "rATOM",
    "STATOM": "stATOM",
    "STDYDX": "stDYDX",
    "STDYM": "stDYM",
    "STETH": "stETH",
    "STEVMOS": "stEVMOS",
    "STOSMO": "stOSMO",
    "STLUNA": "stLUNA",
}

DEFAULT_RECEIVE_SYMBOL = "eth"


class PriceRecord(BaseModel):
    """One entry of the price feed."""

    model_config = {"frozen": True}

    currency: str
    date: datetime
    price: float = Field(ge=0, allow_inf_nan=False)


class Coin(BaseModel):
    """A swappable token with its USD price and the wallet balance."""

    model_config = {"frozen": True}

    symbol: str
    name: str
    value_usd: float
    img: str
    balance: float = 0.0


def token_icon_url(currency: str) -> str:
    """Return the icon URL for *currency*, honoring ICON_NAME_OVERRIDES."""
    file_name = ICON_NAME_OVERRIDES.get(currency.upper(), currency)
    return f"{ICON_BASE_URL}/{file_name}.svg"


def latest_prices(prices: Iterable[PriceRecord]) -> dict[str, PriceRecord]:
    """Keep the newest record per currency; the first one wins on equal dates."""
    latest: dict[str, PriceRecord] = {}
    for record in prices:
        existing = latest.get(record.currency)
        if existing is None or record.date > existing.date:
            latest[record.currency] = record
    return latest


def build_coins(
    prices: Iterable[PriceRecord],
    balances: Mapping[str, float] | None = None,
) -> list[Coin]:
    """Build the sorted coin catalog.

    Args:
        prices: Raw price feed, duplicates allowed.
        balances: Wallet balances keyed by upper-cased symbol.
    """
    balances = balances or {}
    coins: list[Coin] = []
    for currency, record in latest_prices(prices).items():
        name = currency.upper()
        coins.append(
            Coin(
                symbol=name.lower(),
                name=name,
                value_usd=record.price,
                img=token_icon_url(currency),
                balance=balances.get(name, 0.0),
            )
        )
    coins.sort(key=lambda coin: coin.symbol)
    return coins


def coins_with_balance(coins: Iterable[Coin]) -> list[Coin]:
    """Coins the wallet can pay with."""
    return [coin for coin in coins if coin.balance > 0]


def find_coin(coins: Iterable[Coin], symbol: str) -> Coin | None:
    """Case-insensitive lookup by symbol."""
    wanted = symbol.lower()
    for coin in coins:
        if coin.symbol.lower() == wanted:
            return coin
    return None


def search_coins(coins: Iterable[Coin], term: str) -> list[Coin]:
    """Coins whose name or symbol contains *term* (case-insensitive)."""
    needle = term.lower()
    return [
        coin for coin in coins if needle in coin.name.lower() or needle in coin.symbol.lower()
    ]


def default_pair(coins: list[Coin]) -> tuple[Coin | None, Coin | None]:
    """Pick the initial ``(pay, receive)`` coins.

    Pay is the first coin with a balance.  Receive is ETH when listed and
    not already the pay coin; otherwise the next coin with a balance, then
    any other listed coin.  A single-coin catalog pairs the coin with
    itself.  Returns ``(None, None)`` when no coin has a balance.
    """
    payable = coins_with_balance(coins)
    if not payable:
        return None, None
    pay = payable[0]
    receive = find_coin(coins, DEFAULT_RECEIVE_SYMBOL)
    if receive is None or receive.symbol == pay.symbol:
        fallbacks = (c for c in [*payable[1:], *coins] if c.symbol != pay.symbol)
        receive = next(fallbacks, pay)
    return pay, receive
