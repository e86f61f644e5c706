"""BaseService: shared foundation for catalog-backed services.

Every such service receives a :class:`PriceStore` at construction time and
reads coins through it.  Data errors are turned into ``DATA_ERROR`` results
here so individual operations never need their own handling.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from swapctl.infrastructure.price_store import PriceDataError
from swapctl.services.result import ServiceResult

if TYPE_CHECKING:
    from swapctl.domain.coins import Coin
    from swapctl.infrastructure.price_store import PriceStore

logger = logging.getLogger(__name__)


class BaseService:
    """Base for services that work on the coin catalog.

    Usage::

        class QuoteService(BaseService):
            def rate(self, pay: str, receive: str) -> ServiceResult:
                coins = self._load_coins("rate")
                if isinstance(coins, ServiceResult):
                    return coins
                ...
    """

    def __init__(self, store: PriceStore) -> None:
        self._store = store

    def _load_coins(self, op: str) -> list[Coin] | ServiceResult:
        """Return the catalog, or a failed result if the data is unusable."""
        try:
            return self._store.coins
        except PriceDataError as exc:
            logger.warning("Price data unavailable: %s", exc)
            return ServiceResult.failure(op, "DATA_ERROR", str(exc), source=exc.source)
