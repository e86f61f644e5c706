"""Tests for conversion math and balance checks."""

from __future__ import annotations

import pytest

from swapctl.domain.conversion import (
    AMOUNT_NOT_POSITIVE,
    INSUFFICIENT_BALANCE,
    ZERO_RATE,
    check_balance,
    conversion_rate,
    parse_amount,
    received_amount,
    swap_pair,
    usd_value,
)
from tests.conftest import make_coin

ATOM = make_coin("atom", 8, balance=10)
ETH = make_coin("eth", 2000)
USDC = make_coin("usdc", 1, balance=1000)
DEAD = make_coin("dead", 0)


class TestParseAmount:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [("5", 5.0), ("0.5", 0.5), ("5.", 5.0), ("", 0.0), (".", 0.0), ("abc", 0.0)],
    )
    def test_parse(self, amount: str, expected: float) -> None:
        assert parse_amount(amount) == expected


class TestReceivedAmount:
    def test_converts_through_usd(self) -> None:
        assert received_amount("100", USDC, ATOM) == 12.5

    def test_missing_coin(self) -> None:
        assert received_amount("5", None, ETH) == 0.0
        assert received_amount("5", ATOM, None) == 0.0

    def test_zero_amount(self) -> None:
        assert received_amount("0", ATOM, ETH) == 0.0

    def test_empty_amount(self) -> None:
        assert received_amount("", ATOM, ETH) == 0.0

    def test_unpriced_receive_coin(self) -> None:
        assert received_amount("5", ATOM, DEAD) == 0.0


class TestConversionRate:
    def test_rate(self) -> None:
        assert conversion_rate(ATOM, ETH) == "0.004000"
        assert conversion_rate(ETH, ATOM) == "250.000000"

    def test_missing_or_unpriced(self) -> None:
        assert conversion_rate(None, ETH) == ZERO_RATE
        assert conversion_rate(ATOM, DEAD) == ZERO_RATE


class TestUsdValue:
    def test_value(self) -> None:
        assert usd_value("5", ATOM) == "40.00"
        assert usd_value("1.5", ETH) == "3,000.00"

    def test_empty_or_missing(self) -> None:
        assert usd_value("", ATOM) == "0.00"
        assert usd_value("5", None) == "0.00"


class TestCheckBalance:
    def test_within_balance(self) -> None:
        check = check_balance("5", ATOM)
        assert not check.transfer_disabled
        assert not check.exceeds_balance
        assert check.reason is None

    def test_exactly_balance(self) -> None:
        assert not check_balance("10", ATOM).transfer_disabled

    def test_exceeds_balance(self) -> None:
        check = check_balance("20", ATOM)
        assert check.exceeds_balance
        assert check.transfer_disabled
        assert check.reason == INSUFFICIENT_BALANCE

    def test_exceeds_balance_not_enforced(self) -> None:
        check = check_balance("20", ATOM, enforce_balance=False)
        assert check.exceeds_balance
        assert not check.transfer_disabled
        assert check.reason is None

    @pytest.mark.parametrize("amount", ["", ".", "0", "0.000"])
    def test_zero_amount_always_blocks(self, amount: str) -> None:
        check = check_balance(amount, ATOM, enforce_balance=False)
        assert check.is_zero_or_negative
        assert check.transfer_disabled
        assert check.reason == AMOUNT_NOT_POSITIVE

    def test_no_pay_coin_has_zero_balance(self) -> None:
        check = check_balance("1", None)
        assert check.exceeds_balance
        assert check.reason == INSUFFICIENT_BALANCE


class TestSwapPair:
    def test_swap(self) -> None:
        assert swap_pair(ATOM, ETH) == (ETH, ATOM)

    def test_swap_twice_restores(self) -> None:
        assert swap_pair(*swap_pair(ATOM, ETH)) == (ATOM, ETH)
