"""Configuration management for the overload activator."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..domain.models.reflection.builtin_types import FLOAT_TYPE_NAMES, INTEGER_TYPE_NAMES

ENV_PREFIX = "ACTIVATOR_"


@dataclass
class Config:
    """Configuration for the overload activator command line tool."""

    verbose: bool = False
    log_dir: Optional[Path] = None
    int_type: str = "Int32"
    float_type: str = "Double"

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Variables already set in the environment win over the .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path, override=False)

        verbose_str = os.getenv(f"{ENV_PREFIX}VERBOSE", "false").lower()
        log_dir_str = os.getenv(f"{ENV_PREFIX}LOG_DIR")

        return cls(
            verbose=verbose_str in ("true", "1", "yes", "on"),
            log_dir=Path(log_dir_str) if log_dir_str else None,
            int_type=os.getenv(f"{ENV_PREFIX}INT_TYPE", "Int32"),
            float_type=os.getenv(f"{ENV_PREFIX}FLOAT_TYPE", "Double"),
        )

    @classmethod
    def from_args(
        cls,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
        int_type: Optional[str] = None,
        float_type: Optional[str] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            verbose: Enable debug output (overrides env)
            log_dir: Directory for log files (overrides env)
            int_type: Built-in type name for Python ints (overrides env)
            float_type: Built-in type name for Python floats (overrides env)
            env_path: Optional path to .env file

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir
        if int_type is not None:
            config.int_type = int_type
        if float_type is not None:
            config.float_type = float_type

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.int_type not in INTEGER_TYPE_NAMES:
            raise ValueError(
                f"Unknown integer type: {self.int_type} "
                f"(expected one of {', '.join(sorted(INTEGER_TYPE_NAMES))})"
            )

        if self.float_type not in FLOAT_TYPE_NAMES:
            raise ValueError(
                f"Unknown float type: {self.float_type} "
                f"(expected one of {', '.join(sorted(FLOAT_TYPE_NAMES))})"
            )

        if self.log_dir is not None and self.log_dir.exists() and not self.log_dir.is_dir():
            raise ValueError(f"Log directory is not a directory: {self.log_dir}")

    def ensure_log_dir(self) -> None:
        """Create the log directory if one is configured."""
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
