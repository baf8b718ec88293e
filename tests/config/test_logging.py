# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the logging setup."""

import logging
from collections.abc import Iterator

import pytest

from schemagen.config import ChalkFormatter, resolve_env_log_level, setup_logging
from schemagen.config.logging import LOG_LEVEL_ENV_VAR, ROOT_LOGGER_NAME

# ###############
# Helpers
# ###############


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    """Remove handlers installed by a test so later tests start clean."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


def _record(level: int, msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("schemagen.test", level, __file__, 1, msg, None, None)


# ###############
# Normal Cases
# ###############


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("DEBUG", logging.DEBUG), ("info", logging.INFO), (" warning ", logging.WARNING), ("15", 15)],
)
def test_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_env_log_level_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    assert resolve_env_log_level() is None


def test_env_log_level_invalid(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "loud")
    assert resolve_env_log_level() is None


def test_setup_logging_sets_level_and_is_idempotent() -> None:
    """A second call updates the level without adding another handler."""
    logger = setup_logging(logging.INFO)
    assert logger.name == ROOT_LOGGER_NAME
    assert logger.level == logging.INFO
    count = len(logger.handlers)

    setup_logging(logging.DEBUG)
    assert len(logger.handlers) == count
    assert logger.level == logging.DEBUG


def test_formatter_keeps_message_text() -> None:
    """Coloring wraps the formatted message without changing it."""
    formatter = ChalkFormatter("[%(levelname)s] %(message)s")
    for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR):
        text = formatter.format(_record(level))
        assert f"[{logging.getLevelName(level)}] hello" in text
