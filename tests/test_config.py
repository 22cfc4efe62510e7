"""Tests for the cdnkeeper.config module."""

from __future__ import annotations

import logging
import sys
from typing import Iterator

import pytest
import structlog

from cdnkeeper import config as profiles
from cdnkeeper.config import get_config


@pytest.fixture
def reset_logging() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    logger = logging.getLogger("cdnkeeper")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_get_config_by_name() -> None:
    assert get_config("testing") is profiles.TestConfig
    assert get_config("development") is profiles.DevelopmentConfig
    assert get_config("production") is profiles.ProductionConfig


def test_get_config_default(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_config() is profiles.ProductionConfig

    monkeypatch.setenv("CDNKEEPER_PROFILE", "testing")
    assert get_config() is profiles.TestConfig


def test_get_config_unknown() -> None:
    with pytest.raises(KeyError):
        get_config("staging")


def test_testing_profile() -> None:
    testing = get_config("testing")

    assert testing.FASTLY_API_KEY == "test-api-key"
    assert testing.FASTLY_API_URL == "https://api.fastly.test"
    assert testing.FASTLY_DEBUG_MODE is False


@pytest.mark.usefixtures("reset_logging")
@pytest.mark.parametrize(
    "profile, level",
    [("development", logging.DEBUG), ("production", logging.INFO)],
)
def test_configure_logging(profile: str, level: int) -> None:
    get_config(profile).configure_logging()

    logger = logging.getLogger("cdnkeeper")
    assert logger.level == level
    assert len(logger.handlers) == 1
    assert logger.handlers[0].stream is sys.stderr


@pytest.mark.usefixtures("reset_logging")
def test_testing_profile_logs_to_caplog(
    caplog: pytest.LogCaptureFixture,
) -> None:
    get_config("testing").configure_logging()

    structlog.get_logger("cdnkeeper.test").info("Hello", answer=42)

    assert "event='Hello'" in caplog.text
    assert "answer=42" in caplog.text
