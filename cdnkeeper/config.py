"""cdnkeeper configuration and environment profiles."""

from __future__ import annotations

import abc
import logging
import os
import sys
from typing import Dict, Optional, Type

import structlog

__all__ = [
    "Config",
    "DevelopmentConfig",
    "TestConfig",
    "ProductionConfig",
    "config",
    "get_config",
]

PROFILE_ENV_VAR = "CDNKEEPER_PROFILE"
"""Environment variable naming the configuration profile."""


class Config(abc.ABC):
    """Configuration baseclass."""

    FASTLY_API_KEY: Optional[str] = os.environ.get("FASTLY_API_KEY")
    """The Fastly API key, sent in the ``Fastly-Key`` header."""

    FASTLY_API_URL: str = os.getenv("FASTLY_API_URL", "https://api.fastly.com")
    """Root URL of the Fastly API."""

    FASTLY_DEBUG_MODE: bool = os.getenv("FASTLY_DEBUG_MODE") == "true"
    """Log request and response dumps when ``"true"``."""

    FASTLY_USER_AGENT: Optional[str] = os.getenv("FASTLY_USER_AGENT")
    """Prefix for the ``User-Agent`` header."""

    LOGGER_NAME: str = "cdnkeeper"

    @abc.abstractclassmethod
    def configure_logging(cls) -> None:
        pass

    @classmethod
    def _configure_stream_handler(cls, level: int) -> None:
        # Logs go to stderr; stdout carries command output.
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        stream_handler.setFormatter(logging.Formatter("%(message)s"))
        logger = logging.getLogger(cls.LOGGER_NAME)
        if logger.hasHandlers():
            logger.handlers.clear()
        logger.addHandler(stream_handler)
        logger.setLevel(level)


class DevelopmentConfig(Config):
    """Local development configuration."""

    @classmethod
    def configure_logging(cls) -> None:
        """Log key-value formatted messages at the debug level."""
        cls._configure_stream_handler(logging.DEBUG)

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.KeyValueRenderer(
                    key_order=["event", "method", "path", "status"],
                ),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )


class TestConfig(Config):
    """Test configuration (for py.test harness).

    Requests go to a fake endpoint and log records are passed to the
    standard library without a handler, so that pytest's ``caplog`` captures
    them.
    """

    FASTLY_API_KEY = "test-api-key"
    FASTLY_API_URL = "https://api.fastly.test"
    FASTLY_DEBUG_MODE = False
    FASTLY_USER_AGENT = None

    @classmethod
    def configure_logging(cls) -> None:
        logging.getLogger(cls.LOGGER_NAME).setLevel(logging.DEBUG)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.KeyValueRenderer(
                    key_order=["event", "method", "path", "status"],
                ),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )


class ProductionConfig(Config):
    """Production configuration."""

    @classmethod
    def configure_logging(cls) -> None:
        """Log JSON-formatted messages at the info level."""
        cls._configure_stream_handler(logging.INFO)

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.processors.JSONRenderer(),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )


config: Dict[str, Type[Config]] = {
    "development": DevelopmentConfig,
    "testing": TestConfig,
    "production": ProductionConfig,
    "default": ProductionConfig,
}


def get_config(profile: Optional[str] = None) -> Type[Config]:
    """Look up a configuration profile.

    Parameters
    ----------
    profile : str, optional
        One of the keys of `config`. Defaults to the ``CDNKEEPER_PROFILE``
        environment variable, then ``"default"``.

    Raises
    ------
    KeyError
        Raised if the profile doesn't exist.
    """
    if profile is None:
        profile = os.getenv(PROFILE_ENV_VAR, "default")
    return config[profile]
