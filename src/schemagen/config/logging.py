# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Logging setup for the schemagen command line.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers and levels are installed here, once, by the CLI.
"""

from __future__ import annotations

import logging
import os
import sys

from yachalk import chalk

# ###############
# Public Interface
# ###############

ROOT_LOGGER_NAME = "schemagen"
LOG_LEVEL_ENV_VAR = "SCHEMAGEN_LOG_LEVEL"

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        level = record.levelno
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        return chalk.gray(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``SCHEMAGEN_LOG_LEVEL``, or None if unset or invalid.

    Accepts level names (``"DEBUG"``, ``"info"``) and numbers (``"10"``).
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else None


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure the ``schemagen`` logger to write colored records to stderr.

    Calling it again only updates the level; no second handler is added.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    fmt = DEBUG_LOG_FORMAT if level <= logging.DEBUG else LOG_FORMAT
    handler = next((h for h in logger.handlers if isinstance(h.formatter, ChalkFormatter)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        logger.addHandler(handler)
    handler.setFormatter(ChalkFormatter(fmt))
    return logger
