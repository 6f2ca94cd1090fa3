#!/usr/bin/env python3

"""Unit tests for the logging setup and helpers."""

import logging

import pytest

from overload_activator.infrastructure.logging import LoggerSetup, get_logger, log_timing
from overload_activator.infrastructure.logging.logger_setup import LIBRARY_LOGGER_NAME


@pytest.mark.usefixtures("reset_logging")
class TestLoggerSetup:
    @pytest.mark.unit
    def test_console_only(self):
        LoggerSetup.initialize(None)

        package_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        assert LoggerSetup.is_initialized()
        assert LoggerSetup.get_log_file_path() is None
        assert len(package_logger.handlers) == 1
        assert package_logger.handlers[0].level == logging.INFO
        assert package_logger.propagate is False

    @pytest.mark.unit
    def test_verbose_console(self):
        LoggerSetup.initialize(None, verbose=True)

        assert logging.getLogger(LIBRARY_LOGGER_NAME).handlers[0].level == logging.DEBUG

    @pytest.mark.unit
    def test_file_handler(self, tmp_path):
        log_dir = tmp_path / "logs"

        LoggerSetup.initialize(log_dir)
        get_logger("overload_activator.tests").info("written to file")

        log_file = LoggerSetup.get_log_file_path()
        assert log_file is not None
        assert log_file.parent == log_dir
        assert log_file.name.startswith("overload_activator_")
        for handler in logging.getLogger(LIBRARY_LOGGER_NAME).handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    @pytest.mark.unit
    def test_initialize_is_idempotent(self):
        LoggerSetup.initialize(None)
        LoggerSetup.initialize(None, verbose=True)

        package_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        assert len(package_logger.handlers) == 1
        assert package_logger.handlers[0].level == logging.INFO

    @pytest.mark.unit
    def test_reset(self):
        LoggerSetup.initialize(None)

        LoggerSetup.reset()

        assert not LoggerSetup.is_initialized()
        assert logging.getLogger(LIBRARY_LOGGER_NAME).handlers == []


class TestLogTiming:
    @pytest.mark.unit
    def test_logs_completion(self, caplog):
        @log_timing
        def work(value):
            return value * 2

        with caplog.at_level(logging.DEBUG, logger=__name__):
            assert work(21) == 42

        assert any("work completed in" in message for message in caplog.messages)

    @pytest.mark.unit
    def test_reraises_and_logs_failure(self, caplog):
        @log_timing
        def fail():
            raise ValueError("boom")

        with caplog.at_level(logging.DEBUG, logger=__name__):
            with pytest.raises(ValueError, match="boom"):
                fail()

        assert any("raised ValueError" in message for message in caplog.messages)

    @pytest.mark.unit
    def test_preserves_metadata(self):
        @log_timing
        def documented():
            """Docstring kept."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring kept."
