"""Display formatting for computed amounts.

Amounts computed from prices are floats.  Rounding is done on the exact
binary value of the float with ROUND_HALF_UP, which is what fixed-point
formatting in the browser widget did, so ``1.005`` (really
``1.00499999999999989...``) rounds down to ``1.00`` at two places.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

ZERO_DISPLAY = "0.00"
DEFAULT_DECIMAL_PLACES = 6


def _check_places(decimal_places: int) -> None:
    if decimal_places < 0:
        raise ValueError(f"decimal_places must be >= 0, got {decimal_places}")


def _check_value(value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"Amount must be finite, got {value!r}")
    if value < 0:
        raise ValueError(f"Amount must not be negative, got {value!r}")


def to_fixed(value: float, decimal_places: int) -> str:
    """Render *value* with exactly *decimal_places* fractional digits.

    Raises:
        ValueError: If *value* is negative or not finite, or if
            *decimal_places* is negative.
    """
    _check_places(decimal_places)
    _check_value(value)

    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-decimal_places)
    with localcontext() as ctx:
        # quantize fails once the result has more digits than the context allows
        ctx.prec = max(ctx.prec, exact.adjusted() + decimal_places + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def strip_trailing_zeros(text: str) -> str:
    """Drop trailing fractional zeros, and the dot if nothing is left after it.

    Integer digits are never touched: ``"100"`` stays ``"100"``.
    """
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def format_received_amount(value: float, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """Format a computed amount for the "you receive" field.

    Exactly zero always renders as ``"0.00"`` so the field shows a stable
    placeholder whatever *decimal_places* is set to.  Anything else is
    rounded to *decimal_places* and stripped of trailing zeros.

    Examples:
        >>> format_received_amount(0, 4)
        '0.00'
        >>> format_received_amount(1.0, 6)
        '1'
        >>> format_received_amount(1.234567, 4)
        '1.2346'

    Raises:
        ValueError: For negative or non-finite values, or negative
            *decimal_places*.
    """
    _check_places(decimal_places)
    _check_value(value)
    if value == 0:
        return ZERO_DISPLAY
    return strip_trailing_zeros(to_fixed(value, decimal_places))


def format_usd(value: float) -> str:
    """Two-decimal USD rendering with thousands grouping (``1,234.50``)."""
    return f"{Decimal(to_fixed(value, 2)):,.2f}"
