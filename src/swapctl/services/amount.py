"""AmountService: live amount normalization and display formatting.

Wraps the pure domain functions in the ServiceResult contract: a rejected
edit becomes ``INVALID_FORMAT``, an over-long integer part becomes a
warning on an otherwise successful result.
"""

from __future__ import annotations

import logging

from swapctl.domain.amounts import (
    INTEGER_LIMIT_WARNING,
    MAX_INTEGER_DIGITS,
    collapse_leading_zeros,
    integer_part_exceeds_limit,
    normalize_amount,
    split_amount,
)
from swapctl.domain.display import format_received_amount
from swapctl.services.result import ServiceResult
from swapctl.services.telemetry import traced

logger = logging.getLogger(__name__)


def _was_truncated(raw: str, value: str) -> bool:
    """Whether normalizing *raw* into *value* dropped any digits."""
    in_integer, in_decimal = split_amount(collapse_leading_zeros(raw))
    _, out_decimal = split_amount(value)
    return len(in_integer) > MAX_INTEGER_DIGITS or len(out_decimal or "") < len(in_decimal or "")


class AmountService:
    """Stateless; safe to share across calls."""

    @traced
    def normalize(self, raw: str) -> ServiceResult:
        """Normalize one edit of the amount field."""
        op = "normalize_amount"
        warnings: list[str] = []
        if integer_part_exceeds_limit(raw):
            warnings.append(INTEGER_LIMIT_WARNING)

        value = normalize_amount(raw)
        if value is None:
            logger.debug("Rejected amount edit %r", raw)
            return ServiceResult.failure(
                op,
                "INVALID_FORMAT",
                f"Invalid amount format: {raw!r}. Use digits and at most one dot.",
                raw=raw,
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "raw": raw,
                "value": value,
                "changed": value != raw,
                "truncated": _was_truncated(raw, value),
            },
            warnings=warnings,
        )

    @traced
    def format(self, value: float, decimal_places: int) -> ServiceResult:
        """Format a computed amount for display."""
        op = "format_amount"
        try:
            display = format_received_amount(value, decimal_places)
        except ValueError as exc:
            return ServiceResult.failure(
                op, "INVALID_VALUE", str(exc), value=value, decimal_places=decimal_places
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"value": value, "decimal_places": decimal_places, "display": display},
        )
