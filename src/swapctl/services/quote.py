"""QuoteService: coin listing, rates, swap quotes, and pair swapping.

Quote pipeline: RESOLVE → NORMALIZE → CONVERT → FORMAT → CHECK BALANCE
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from swapctl.domain.coins import (
    Coin,
    coins_with_balance,
    default_pair,
    find_coin,
    search_coins,
)
from swapctl.domain.conversion import (
    check_balance,
    conversion_rate,
    received_amount,
    swap_pair,
    usd_value,
)
from swapctl.domain.display import format_received_amount
from swapctl.services.amount import AmountService
from swapctl.services.base import BaseService
from swapctl.services.result import ServiceResult
from swapctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from swapctl.infrastructure.price_store import PriceStore

logger = logging.getLogger(__name__)


def _coin_item(coin: Coin) -> dict[str, Any]:
    return {
        "symbol": coin.symbol,
        "name": coin.name,
        "value_usd": coin.value_usd,
        "balance": coin.balance,
        "img": coin.img,
    }


def _pick_coin(
    op: str, coins: list[Coin], requested: str | None, fallback: Coin | None, side: str
) -> Coin | ServiceResult:
    """The requested coin, or *fallback* when nothing was requested."""
    coin = find_coin(coins, requested) if requested else fallback
    if coin is not None:
        return coin
    if requested:
        message = f"Unknown coin: {requested}"
    else:
        message = f"No default {side} coin: no coin has a balance"
    return ServiceResult.failure(op, "UNKNOWN_COIN", message, side=side, symbol=requested or "")


class QuoteService(BaseService):
    """Answers "what would I get" questions against the coin catalog."""

    def __init__(self, store: PriceStore) -> None:
        super().__init__(store)
        self._settings = store.settings
        self._amounts = AmountService()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def list_coins(self, *, search: str | None = None, with_balance: bool = False) -> ServiceResult:
        """List the catalog, optionally filtered by a search term or balance."""
        op = "list_coins"
        coins = self._load_coins(op)
        if isinstance(coins, ServiceResult):
            return coins

        if with_balance:
            coins = coins_with_balance(coins)
        if search:
            coins = search_coins(coins, search)

        items = [_coin_item(c) for c in coins]
        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})

    @traced
    def rate(self, pay: str, receive: str) -> ServiceResult:
        """Units of *receive* per unit of *pay*."""
        op = "rate"
        resolved = self._resolve_pair(op, pay, receive)
        if isinstance(resolved, ServiceResult):
            return resolved
        pay_coin, receive_coin = resolved
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "pay": pay_coin.symbol,
                "receive": receive_coin.symbol,
                "rate": conversion_rate(pay_coin, receive_coin),
            },
        )

    @traced
    def quote(
        self,
        amount: str,
        *,
        pay: str | None = None,
        receive: str | None = None,
        decimal_places: int | None = None,
    ) -> ServiceResult:
        """Quote a swap of *amount* units of *pay* into *receive*.

        Missing coins fall back to the default pair.  *decimal_places*
        defaults to the ``[display]`` setting.
        """
        op = "quote"
        places = self._settings.display.decimal_places if decimal_places is None else decimal_places
        if places < 0:
            return ServiceResult.failure(
                op,
                "INVALID_VALUE",
                f"decimal_places must be >= 0, got {places}",
                decimal_places=places,
            )

        # ── RESOLVE ──────────────────────────────────────────────
        with trace_span("resolve"):
            resolved = self._resolve_pair(op, pay, receive)
        if isinstance(resolved, ServiceResult):
            return resolved
        pay_coin, receive_coin = resolved

        # ── NORMALIZE ────────────────────────────────────────────
        with trace_span("normalize"):
            normalized = self._amounts.normalize(amount)
        if not normalized.ok:
            return normalized.model_copy(update={"op": op})
        value = str(normalized.data["value"])
        warnings = list(normalized.warnings)

        # ── CONVERT + FORMAT ─────────────────────────────────────
        with trace_span("convert"):
            received = received_amount(value, pay_coin, receive_coin)
            try:
                display = format_received_amount(received, places)
            except ValueError as exc:
                return ServiceResult.failure(op, "INVALID_VALUE", str(exc), amount=value)

        # ── CHECK BALANCE ────────────────────────────────────────
        balance = check_balance(value, pay_coin, enforce_balance=self._settings.balance.enforce)
        if balance.reason:
            warnings.append(balance.reason)

        data: dict[str, Any] = {
            "amount": value,
            "pay": pay_coin.symbol,
            "receive": receive_coin.symbol,
            "received": display,
            "rate": conversion_rate(pay_coin, receive_coin),
            "decimal_places": places,
            "balance": pay_coin.balance,
            "exceeds_balance": balance.exceeds_balance,
            "transfer_disabled": balance.transfer_disabled,
        }
        if self._settings.display.show_usd_comparison:
            data["usd_value"] = usd_value(value, pay_coin)

        logger.debug("Quoted %s %s -> %s %s", value, pay_coin.symbol, display, receive_coin.symbol)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def swap(self, pay: str, receive: str) -> ServiceResult:
        """Flip the pair and report the rate in the new direction."""
        op = "swap"
        resolved = self._resolve_pair(op, pay, receive)
        if isinstance(resolved, ServiceResult):
            return resolved
        new_pay, new_receive = swap_pair(*resolved)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "pay": new_pay.symbol,
                "receive": new_receive.symbol,
                "rate": conversion_rate(new_pay, new_receive),
            },
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve_pair(
        self, op: str, pay: str | None, receive: str | None
    ) -> tuple[Coin, Coin] | ServiceResult:
        """Look up both coins, falling back to the default pair for omitted sides."""
        coins = self._load_coins(op)
        if isinstance(coins, ServiceResult):
            return coins

        default_pay, default_receive = default_pair(coins)
        pay_coin = _pick_coin(op, coins, pay, default_pay, "pay")
        if isinstance(pay_coin, ServiceResult):
            return pay_coin
        receive_coin = _pick_coin(op, coins, receive, default_receive, "receive")
        if isinstance(receive_coin, ServiceResult):
            return receive_coin
        return pay_coin, receive_coin
