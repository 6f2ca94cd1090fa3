#!/usr/bin/env python3

"""Logger setup and configuration for the command line tool.

The library itself never configures logging; only the CLI calls
``LoggerSetup.initialize``.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

LIBRARY_LOGGER_NAME = "overload_activator"


class LoggerSetup:
    """Manages logging configuration for the command line tool."""

    _initialized = False
    _log_file_path: Path | None = None

    @classmethod
    def initialize(cls, log_dir: Path | None, verbose: bool = False) -> None:
        """
        Initialize logging with a console handler and an optional file handler.

        Args:
            log_dir: Directory to store log files; None disables file logging
            verbose: If True, set console to DEBUG level; otherwise INFO
        """
        if cls._initialized:
            return

        package_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        package_logger.setLevel(logging.DEBUG)
        package_logger.handlers.clear()
        package_logger.propagate = False

        # Console handler - level depends on verbose flag
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        package_logger.addHandler(console_handler)

        # File handler - always DEBUG level
        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            cls._log_file_path = log_dir / f"overload_activator_{timestamp}.log"

            file_handler = logging.FileHandler(cls._log_file_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            package_logger.addHandler(file_handler)

        cls._initialized = True

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging initialized. Log file: {cls._log_file_path}")
        logger.debug(f"Verbose mode: {verbose}")

    @classmethod
    def reset(cls) -> None:
        """Close and remove installed handlers so ``initialize`` can run again."""
        package_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        for handler in list(package_logger.handlers):
            handler.close()
            package_logger.removeHandler(handler)
        package_logger.propagate = True
        cls._initialized = False
        cls._log_file_path = None

    @classmethod
    def get_log_file_path(cls) -> Path | None:
        """Get the current log file path."""
        return cls._log_file_path

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized
