"""Tests for logging configuration."""

import logging

import pytest

import app_logging
from app_logging import configure_logging, resolve_level


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("nutrition_calculator")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


@pytest.mark.parametrize(
    "name,level",
    [
        ("INFO", logging.INFO),
        ("debug", logging.DEBUG),
        (" warning ", logging.WARNING),
        ("verbose", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_resolve_level(name, level) -> None:
    assert resolve_level(name) == level


def test_configure_logging_uses_log_level(monkeypatch) -> None:
    logger = logging.getLogger("nutrition_calculator")

    monkeypatch.setattr(app_logging, "LOG_LEVEL", "debug")
    configure_logging()
    assert logger.level == logging.DEBUG

    monkeypatch.setattr(app_logging, "LOG_LEVEL", "verbose")
    configure_logging()
    assert logger.level == logging.INFO
