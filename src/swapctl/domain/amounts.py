"""Live amount normalization for the "you pay" field.

Every edit hands the full field value to :func:`normalize_amount`, which
returns the canonical string the field should adopt, or ``None`` when the
edit must be discarded.

Limits are enforced by truncation, never by rejection: the only rejected
input is one containing characters other than ASCII digits and a single dot.

INVARIANT: accepted output consists of ASCII digits and at most one dot, has at most
MAX_INTEGER_DIGITS integer digits and at most MAX_TOTAL_DIGITS digits overall.
"""

from __future__ import annotations

import re

MAX_INTEGER_DIGITS = 10
MAX_TOTAL_DIGITS = 15

INTEGER_LIMIT_WARNING = f"Integer part - max {MAX_INTEGER_DIGITS} digits"

# Always applied with fullmatch.
AMOUNT_PATTERN = re.compile(r"[0-9]*\.?[0-9]*")


def collapse_leading_zeros(raw: str) -> str:
    """Strip redundant leading zeros unless the zero is followed by a dot.

    Examples:
        >>> collapse_leading_zeros("007")
        '7'
        >>> collapse_leading_zeros("00.5")
        '.5'
        >>> collapse_leading_zeros("0.5")
        '0.5'
    """
    if len(raw) > 1 and raw.startswith("0") and raw[1] != ".":
        return raw.lstrip("0")
    return raw


def is_amount_format(value: str) -> bool:
    """Check that *value* holds only ASCII digits and at most one dot."""
    return AMOUNT_PATTERN.fullmatch(value) is not None


def split_amount(value: str) -> tuple[str, str | None]:
    """Split on the first dot into ``(integer, decimal)``.

    ``decimal`` is None when there is no dot at all.
    """
    integer, dot, decimal = value.partition(".")
    return integer, decimal if dot else None


def integer_part_exceeds_limit(raw: str) -> bool:
    """Whether the integer part of *raw* is longer than MAX_INTEGER_DIGITS.

    Callers use this to warn before normalizing, since
    :func:`normalize_amount` truncates silently.  Malformed input never
    exceeds the limit; it is rejected instead.
    """
    collapsed = collapse_leading_zeros(raw)
    if not is_amount_format(collapsed):
        return False
    integer, _ = split_amount(collapsed)
    return len(integer) > MAX_INTEGER_DIGITS


def normalize_amount(raw: str) -> str | None:
    """Turn the current field value into its canonical amount string.

    Returns None when *raw* contains anything besides digits and one dot;
    the caller keeps the previous value in that case.  Empty input and a
    bare ``"."`` are transient typing states and pass through unchanged.

    The integer part is cut to MAX_INTEGER_DIGITS and the decimal part to
    whatever is left of MAX_TOTAL_DIGITS, counting the ``"0"`` that a bare
    leading dot gains.  The result therefore never exceeds the total limit
    and no second length check is needed.

    Examples:
        >>> normalize_amount("0123")
        '123'
        >>> normalize_amount(".5")
        '0.5'
        >>> normalize_amount("12345678901.23")
        '1234567890.23'
        >>> normalize_amount("12a.3") is None
        True
    """
    if raw in ("", "."):
        return raw

    value = collapse_leading_zeros(raw)
    if not is_amount_format(value):
        return None

    integer, decimal = split_amount(value)
    integer = integer[:MAX_INTEGER_DIGITS]
    if decimal is None:
        return integer

    # ".5" renders as "0.5"; the implied zero counts against the digit budget
    integer = integer or "0"
    available = max(0, MAX_TOTAL_DIGITS - len(integer))
    return f"{integer}.{decimal[:available]}"
