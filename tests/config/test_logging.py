"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from swapctl.commands._context import AppContext
from swapctl.config.logging import configure_logging, log_level
from swapctl.config.settings import SwapSettings


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    swap = logging.getLogger("swapctl")
    swap_level = swap.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    swap.setLevel(swap_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("swapctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("swapctl").level == logging.WARNING

    def test_quiet_hides_warnings(self) -> None:
        configure_logging(quiet=True)
        assert logging.getLogger("swapctl").level == logging.ERROR

    def test_verbose_wins_over_quiet(self) -> None:
        assert log_level(verbose=True, quiet=True) == logging.DEBUG
        assert log_level() == logging.WARNING

    def test_single_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("swapctl.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "swapctl.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_routed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("swapctl.services.quote").debug("Quoted %s", "5")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Quoted 5"
        assert parsed["level"] == "debug"


class TestAppContextLogging:
    def test_json_output_logs_json(self, capfd: pytest.CaptureFixture[str]) -> None:
        AppContext(SwapSettings(json_output=True))
        logging.getLogger("swapctl.test").warning("structured")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "structured"

    def test_quiet_flag_reaches_logger(self) -> None:
        AppContext(SwapSettings(quiet=True))
        assert logging.getLogger("swapctl").level == logging.ERROR
