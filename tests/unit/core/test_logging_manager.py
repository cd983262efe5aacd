"""
Tests for logging_manager module.

Tests ConversionLogger file output plus the safe_logger function and
NullLogger class that provide null-safe logging throughout the codebase.
"""
import logging
from unittest.mock import MagicMock

import click
import pytest

from dayone2md.core.logging_manager import (
    ConversionLogger,
    NullLogger,
    handle_cli_error,
    safe_logger,
)


class TestConversionLogger:
    """Tests for ConversionLogger file handlers."""

    def test_creates_log_files(self, tmp_path):
        logger = ConversionLogger(tmp_path / "logs", component_name="test_files")
        logger.log_operation("convert_start", {"input": "export.zip"})
        logger.log_error(ValueError("boom"), {"operation": "extract_entry"})

        main_log = (tmp_path / "logs" / "test_files.log").read_text(encoding="utf-8")
        error_log = (tmp_path / "logs" / "errors.log").read_text(encoding="utf-8")

        assert 'OPERATION - convert_start: {"input": "export.zip"}' in main_log
        assert "ERROR - ValueError: boom" in error_log
        assert "operation=extract_entry" in error_log

    def test_console_level(self, tmp_path):
        logger = ConversionLogger(
            tmp_path, component_name="test_console", console_level=logging.INFO
        )
        console = [
            h for h in logger.main_logger.handlers
            if type(h) is logging.StreamHandler
        ]
        assert len(console) == 1
        assert console[0].level == logging.INFO

    def test_reinitialising_replaces_handlers(self, tmp_path):
        ConversionLogger(tmp_path, component_name="test_reinit")
        logger = ConversionLogger(tmp_path, component_name="test_reinit")
        assert len(logger.main_logger.handlers) == 2
        assert len(logger.error_logger.handlers) == 1

    def test_log_cli_error_message(self, tmp_path):
        logger = ConversionLogger(tmp_path, component_name="test_cli")
        message = logger.log_cli_error(KeyError("entries"))
        assert message.startswith("❌ KeyError")


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_null_logger_methods_no_op(self):
        logger = NullLogger()
        logger.log_operation("test_op", {"key": "value"})
        logger.log_error(ValueError("test error"), {"context": "test"})
        logger.log_debug("debug message")
        logger.log_info("info message", {"key": "value"})
        logger.log_warning("warning message")

    def test_null_logger_log_cli_error_returns_formatted(self):
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert "ValueError" in result
        assert "test error" in result


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_safe_logger_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=ConversionLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_safe_logger_returns_null_logger_when_none(self):
        assert isinstance(safe_logger(None), NullLogger)

    def test_safe_logger_null_logger_is_singleton(self):
        assert safe_logger(None) is safe_logger(None)


class TestHandleCliError:
    """Tests for handle_cli_error."""

    def test_exits_with_code(self, capsys):
        ctx = click.Context(click.Command("convert"), obj={"verbose": False})

        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, RuntimeError("bad input"), "convert")

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "convert failed" in err
        assert "RuntimeError: bad input" in err
