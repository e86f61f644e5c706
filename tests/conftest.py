"""Shared pytest fixtures and test helpers for swapctl tests."""

from __future__ import annotations

import json
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from swapctl.config.models import DataConfig
from swapctl.config.settings import SwapSettings
from swapctl.domain.coins import Coin
from swapctl.infrastructure.price_store import PriceStore
from swapctl.services.telemetry import _current_span, disable_telemetry

# Small, round-numbered feed: ATOM has a stale and a fresh price.
PRICES: list[dict[str, Any]] = [
    {"currency": "ATOM", "date": "2023-08-29T07:10:30.000Z", "price": 7},
    {"currency": "ATOM", "date": "2023-08-29T07:10:50.000Z", "price": 8},
    {"currency": "ETH", "date": "2023-08-29T07:10:52.000Z", "price": 2000},
    {"currency": "USDC", "date": "2023-08-29T07:10:40.000Z", "price": 1},
    {"currency": "OSMO", "date": "2023-08-29T07:10:40.000Z", "price": 0.5},
]

BALANCES: dict[str, Any] = {"balances": {"ATOM": 10, "usdc": 1000}}


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep the developer's SWAPCTL_* environment and telemetry state out of tests."""
    monkeypatch.delenv("SWAPCTL_CONFIG", raising=False)
    monkeypatch.delenv("SWAPCTL_DISPLAY__DECIMAL_PLACES", raising=False)
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding the small PRICES/BALANCES data set."""
    (tmp_path / "prices.json").write_text(json.dumps(PRICES), encoding="utf-8")
    (tmp_path / "balances.json").write_text(json.dumps(BALANCES), encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(data_dir: Path) -> SwapSettings:
    """Settings pointing at the test data set."""
    return SwapSettings(
        config_dir=data_dir,
        data=DataConfig(prices_path="prices.json", balances_path="balances.json"),
    )


@pytest.fixture
def store(settings: SwapSettings) -> PriceStore:
    return PriceStore(settings)


@pytest.fixture
def _swap_home(data_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from a directory whose swapctl.toml points at the test data.

    Use via ``@pytest.mark.usefixtures("_swap_home")`` on command test classes.
    """
    (data_dir / "swapctl.toml").write_text(
        '[data]\nprices_path = "prices.json"\nbalances_path = "balances.json"\n',
        encoding="utf-8",
    )
    monkeypatch.chdir(data_dir)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_coin(symbol: str, value_usd: float, balance: float = 0.0) -> Coin:
    """Build a Coin without going through the price feed."""
    return Coin(
        symbol=symbol.lower(),
        name=symbol.upper(),
        value_usd=value_usd,
        img="",
        balance=balance,
    )
