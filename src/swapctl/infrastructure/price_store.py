"""PriceStore: local price and balance data behind the coin catalog.

Prices are a JSON list of ``{currency, date, price}`` records; balances are
``{"balances": {SYMBOL: amount}}``.  Paths come from the ``[data]`` config
section and resolve against the config directory; unset paths use the data
set packaged with swapctl.  The catalog is built once, on first access.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter, ValidationError

from swapctl.domain.coins import Coin, PriceRecord, build_coins

if TYPE_CHECKING:
    from swapctl.config.settings import SwapSettings

logger = logging.getLogger(__name__)

_PRICE_LIST = TypeAdapter(list[PriceRecord])
_BALANCE_MAP = TypeAdapter(dict[str, float])


class PriceDataError(Exception):
    """Raised when price or balance data cannot be read or parsed."""

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(message)
        self.source = source


def _packaged(name: str) -> Traversable:
    return resources.files("swapctl").joinpath(f"data/{name}")


def _read_json(source: Path | Traversable) -> Any:
    try:
        return json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise PriceDataError(f"Data file not found: {source}", source=str(source)) from exc
    except OSError as exc:
        raise PriceDataError(f"Cannot read {source}: {exc}", source=str(source)) from exc
    except json.JSONDecodeError as exc:
        raise PriceDataError(f"Invalid JSON in {source}: {exc}", source=str(source)) from exc


def load_prices(source: Path | Traversable) -> list[PriceRecord]:
    """Parse a price feed file."""
    raw = _read_json(source)
    try:
        return _PRICE_LIST.validate_python(raw)
    except ValidationError as exc:
        msg = f"Malformed price data in {source}: {exc.error_count()} invalid field(s)"
        raise PriceDataError(msg, source=str(source)) from exc


def load_balances(source: Path | Traversable) -> dict[str, float]:
    """Parse a balances file, keyed by upper-cased symbol."""
    raw = _read_json(source)
    if not isinstance(raw, dict) or "balances" not in raw:
        raise PriceDataError(f"Missing 'balances' object in {source}", source=str(source))
    try:
        balances = _BALANCE_MAP.validate_python(raw["balances"])
    except ValidationError as exc:
        msg = f"Malformed balance data in {source}: {exc.error_count()} invalid field(s)"
        raise PriceDataError(msg, source=str(source)) from exc
    return {symbol.upper(): amount for symbol, amount in balances.items()}


class PriceStore:
    """Single data dependency injected into the quote services."""

    def __init__(self, settings: SwapSettings) -> None:
        self.settings = settings
        self._coins: list[Coin] | None = None

    def _resolve(self, configured: str | None, packaged_name: str) -> Path | Traversable:
        if configured is None:
            return _packaged(packaged_name)
        path = Path(configured).expanduser()
        if not path.is_absolute():
            path = self.settings.config_dir / path
        return path

    @property
    def prices_source(self) -> Path | Traversable:
        return self._resolve(self.settings.data.prices_path, "prices.json")

    @property
    def balances_source(self) -> Path | Traversable:
        return self._resolve(self.settings.data.balances_path, "balances.json")

    @property
    def coins(self) -> list[Coin]:
        """The coin catalog (built lazily on first access).

        Raises:
            PriceDataError: If either data file is missing or malformed.
        """
        if self._coins is None:
            prices = load_prices(self.prices_source)
            balances = load_balances(self.balances_source)
            self._coins = build_coins(prices, balances)
            logger.debug(
                "Loaded %d coins from %d price records", len(self._coins), len(prices)
            )
        return self._coins
