"""Configuration management for the hostel backend.

This module provides utilities for loading and validating configuration
from environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)

_PORT_UPPER_BOUND = 65536


def configure_logging(app_config: AppConfig) -> None:
    """Configure logging based on the application configuration.

    :param app_config: The application configuration instance
    """
    if not app_config.logging_level:
        logging.basicConfig(level=logging.INFO, force=True)
        return

    numeric_level = getattr(logging, app_config.logging_level.upper(), None)
    if not isinstance(numeric_level, int):
        LOGGER.warning("Invalid log level: %s, using INFO", app_config.logging_level)
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, force=True)


@dataclass
class AppConfig:
    """Application configuration loaded from environment variables.

    All fields are initialized from environment variables using field creators.

    **Usage:**

    Load a .env file first if needed, then create the config:

    .. code-block:: python

        from dotenv import load_dotenv
        load_dotenv('.env')  # User's responsibility
        config = AppConfig()
    """

    DEFAULT_DATABASE_PATH = "hostel.db"
    DEFAULT_DATABASE_TIMEOUT = 5
    DEFAULT_HOST = "0.0.0.0"  # noqa: S104
    DEFAULT_PORT = 5000

    # Database configuration
    db_path: str = field(
        default_factory=lambda: os.getenv("DB_PATH", AppConfig.DEFAULT_DATABASE_PATH),
    )
    db_timeout: int = field(
        default_factory=lambda: AppConfig._getenv_int_required(
            "DB_TIMEOUT",
            AppConfig.DEFAULT_DATABASE_TIMEOUT,
        ),
    )

    # Logging configuration
    logging_level: str | None = field(
        default_factory=lambda: os.getenv("LOGGING_LEVEL"),
    )

    # Server configuration
    root_path: str = field(
        default_factory=lambda: os.getenv("ROOT_PATH", ""),
    )
    host: str = field(
        default_factory=lambda: os.getenv("HOST", AppConfig.DEFAULT_HOST),
    )
    port: int = field(
        default_factory=lambda: AppConfig._getenv_int_required(
            "PORT",
            AppConfig.DEFAULT_PORT,
        ),
    )

    def __post_init__(self) -> None:
        """Post-initialization validation."""
        if self.db_timeout <= 0:
            msg = "DB_TIMEOUT must be a positive integer"
            raise ValueError(msg)
        if not 0 < self.port < _PORT_UPPER_BOUND:
            msg = f"PORT must be between 1 and {_PORT_UPPER_BOUND - 1}"
            raise ValueError(msg)

    @staticmethod
    def _getenv_int_required(key: str, default: int) -> int:
        """Get an integer environment variable with a default.

        :param key: Environment variable name
        :type key: str
        :param default: Default value if not set
        :type default: int
        :return: The environment variable value as integer or default
        :rtype: int
        :raises ValueError: If value cannot be converted to int
        """
        value_str = os.getenv(key)

        if value_str is None or value_str == "":
            return default

        try:
            return int(value_str)
        except ValueError as e:
            msg = f"Environment variable {key} must be an integer, got: {value_str}"
            raise ValueError(msg) from e


def load_config_from_env(env_file: str | Path | None = None) -> AppConfig:
    """Load application configuration, reading a .env file first if present.

    :param env_file: Optional path to the environment configuration file
    :return: An AppConfig instance populated with environment variable values
    """
    if env_file and Path(env_file).exists():
        LOGGER.info("Loading environment variables from %s", env_file)
        load_dotenv(dotenv_path=env_file)
    elif env_file:
        LOGGER.debug("No .env file found at %s", env_file)

    return AppConfig()
