"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, swapctl.toml only contains overrides.
A fresh install needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from swapctl.domain.display import DEFAULT_DECIMAL_PLACES

# --- swapctl.toml sections ---


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    decimal_places: int = Field(default=DEFAULT_DECIMAL_PLACES, ge=0)
    decimal_options: list[int] = Field(default_factory=lambda: [2, 4, 6, 8, 10])
    show_usd_comparison: bool = True


class BalanceConfig(BaseModel):
    """[balance] section."""

    model_config = {"frozen": True}

    enforce: bool = True


class DataConfig(BaseModel):
    """[data] section.

    Unset paths fall back to the data set packaged with swapctl.
    """

    model_config = {"frozen": True}

    prices_path: str | None = None
    balances_path: str | None = None

