"""Tests for the Rich logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from uricraft.adapters.io.enhanced_logging import (
    LoggerManager,
    LogMode,
    get_logger,
    setup_enhanced_logging,
)


@pytest.fixture(autouse=True)
def _no_quiet_env(monkeypatch):
    monkeypatch.delenv("URICRAFT_QUIET", raising=False)


def _rich_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]


class TestLoggerManager:
    """Test global logging configuration."""

    def test_setup_is_idempotent(self):
        setup_enhanced_logging()
        setup_enhanced_logging()

        assert len(_rich_handlers()) == 1

    def test_reset_removes_handler(self):
        setup_enhanced_logging()
        LoggerManager.reset()

        assert _rich_handlers() == []

    @pytest.mark.parametrize(
        "mode, verbose, quiet, expected",
        [
            (LogMode.CLASSIC, False, False, logging.INFO),
            (LogMode.MINIMAL, False, False, logging.WARNING),
            (LogMode.CLASSIC, True, False, logging.DEBUG),
            (LogMode.CLASSIC, True, True, logging.WARNING),
        ],
    )
    def test_log_levels(self, mode, verbose, quiet, expected):
        level = LoggerManager.set_log_mode(mode, verbose=verbose, quiet=quiet)

        assert level == expected
        assert logging.getLogger().level == expected
        assert LoggerManager.log_mode == mode

    def test_quiet_environment_variable(self, monkeypatch):
        monkeypatch.setenv("URICRAFT_QUIET", "true")

        assert LoggerManager.set_log_mode(LogMode.CLASSIC, verbose=True) == logging.WARNING

    def test_get_logger_reuses_instances(self):
        assert get_logger("uricraft.test") is get_logger("uricraft.test")


class TestStructuredLogger:
    """Test operation context handling."""

    def test_operation_context_adds_details(self, caplog):
        log = get_logger("uricraft.test.ops")

        with caplog.at_level(logging.DEBUG, logger="uricraft.test.ops"):
            with log.operation_context("build_uri", scheme="acme"):
                log.info("building")

        messages = [r.getMessage() for r in caplog.records]
        assert "Starting build_uri (scheme=acme)" in messages
        assert "building (scheme=acme)" in messages

    def test_operation_context_reraises_and_restores(self):
        log = get_logger("uricraft.test.fail")

        with pytest.raises(RuntimeError):
            with log.operation_context("explode"):
                raise RuntimeError("boom")

        assert log._format("after") == "after"

    def test_operation_name_required(self):
        log = get_logger("uricraft.test.invalid")

        with pytest.raises(ValueError):
            with log.operation_context(""):
                pass
