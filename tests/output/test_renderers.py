"""Tests for operation-specific renderers."""

from __future__ import annotations

from swapctl.output.renderers import render_quiet, render_result
from swapctl.services.result import ServiceResult


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _coin(symbol: str, value_usd: float, balance: float = 0.0) -> dict[str, object]:
    return {
        "symbol": symbol,
        "name": symbol.upper(),
        "value_usd": value_usd,
        "balance": balance,
        "img": f"https://icons/{symbol.upper()}.svg",
    }


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = ServiceResult.failure("rate", "UNKNOWN_COIN", "Unknown coin: doge", side="pay")
        output = render_result(result)
        assert "ERROR" in output
        assert "rate: Unknown coin: doge" in output
        assert "side" not in output

    def test_verbose_shows_detail(self) -> None:
        result = ServiceResult.failure("rate", "UNKNOWN_COIN", "Unknown coin: doge", side="pay")
        output = render_result(result, verbose=True)
        assert "side: pay" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="quote"))
        assert "Unknown error" in output


class TestAmountRenderers:
    def test_normalize_changed(self) -> None:
        result = _ok("normalize_amount", raw="0123", value="123", changed=True, truncated=False)
        output = render_result(result)
        assert "OK" in output
        assert "value: 123" in output
        assert "raw: 0123" in output
        assert "truncated" not in output

    def test_normalize_unchanged_hides_raw(self) -> None:
        result = _ok("normalize_amount", raw="5", value="5", changed=False, truncated=False)
        assert "raw:" not in render_result(result)

    def test_normalize_truncated(self) -> None:
        result = _ok(
            "normalize_amount",
            raw="12345678901",
            value="1234567890",
            changed=True,
            truncated=True,
        )
        assert "truncated: true" in render_result(result)

    def test_format(self) -> None:
        result = _ok("format_amount", value=1.2, decimal_places=4, display="1.2")
        output = render_result(result)
        assert "display: 1.2" in output
        assert "decimal_places" not in output
        assert "decimal_places: 4" in render_result(result, verbose=True)


class TestCoinTable:
    def test_table(self) -> None:
        result = _ok("list_coins", items=[_coin("atom", 8, 10), _coin("eth", 2000)], count=2)
        output = render_result(result)
        assert "Symbol" in output
        assert "atom" in output
        assert "2000.000000" in output
        assert "2 coins" in output
        assert "https://icons" not in output

    def test_verbose_shows_icon(self) -> None:
        result = _ok("list_coins", items=[_coin("atom", 8, 10)], count=1)
        assert "Icon" in render_result(result, verbose=True)


class TestPairRenderers:
    def test_rate(self) -> None:
        result = _ok("rate", pay="atom", receive="eth", rate="0.004000")
        assert "1 ATOM = 0.004000 ETH" in render_result(result)

    def test_swap(self) -> None:
        result = _ok("swap", pay="eth", receive="atom", rate="250.000000")
        output = render_result(result)
        assert "swap" in output
        assert "1 ETH = 250.000000 ATOM" in output


class TestQuoteRenderer:
    def _quote(self, **overrides: object) -> ServiceResult:
        data: dict[str, object] = {
            "amount": "5",
            "pay": "atom",
            "receive": "eth",
            "received": "0.02",
            "rate": "0.004000",
            "decimal_places": 6,
            "balance": 10.0,
            "exceeds_balance": False,
            "transfer_disabled": False,
            "usd_value": "40.00",
        }
        data.update(overrides)
        return ServiceResult(ok=True, op="quote", data=data)

    def test_quote(self) -> None:
        output = render_result(self._quote())
        assert "you pay: 5 ATOM" in output
        assert "you receive: 0.02 ETH" in output
        assert "rate: 1 ATOM = 0.004000 ETH" in output
        assert "usd value: $40.00" in output
        assert "transfer blocked" not in output

    def test_empty_amount_placeholder(self) -> None:
        assert "you pay: 0.00 ATOM" in render_result(self._quote(amount=""))

    def test_blocked(self) -> None:
        output = render_result(self._quote(transfer_disabled=True))
        assert "transfer blocked" in output

    def test_verbose_fields(self) -> None:
        output = render_result(self._quote(), verbose=True)
        assert "balance: 10.0" in output
        assert "decimal_places: 6" in output


class TestGenericAndMeta:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("mystery", flag=True, items_seen=3))
        assert "flag: true" in output
        assert "items_seen: 3" in output

    def test_verbose_meta_telemetry(self) -> None:
        result = ServiceResult(
            ok=True,
            op="rate",
            data={"pay": "eth", "receive": "usdc", "rate": "1"},
            meta={"telemetry": {"name": "QuoteService.rate", "duration_ms": 1.5}},
        )
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "QuoteService.rate" in output


class TestRenderQuiet:
    def test_value_keys(self) -> None:
        assert render_quiet(_ok("normalize_amount", value="123")) == "123"
        assert render_quiet(_ok("format_amount", display="1.2")) == "1.2"
        assert render_quiet(_ok("quote", received="0.02")) == "0.02"
        assert render_quiet(_ok("rate", rate="0.004000")) == "0.004000"

    def test_items(self) -> None:
        result = _ok("list_coins", items=[_coin("atom", 8), _coin("eth", 2000)], count=2)
        assert render_quiet(result) == "atom\neth"

    def test_fallback(self) -> None:
        assert render_quiet(_ok("swap", pay="eth")) == "OK: swap"

    def test_error(self) -> None:
        result = ServiceResult.failure("rate", "UNKNOWN_COIN", "Unknown coin: doge")
        assert render_quiet(result) == "ERROR: rate: Unknown coin: doge"
