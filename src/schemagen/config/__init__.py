# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator configuration and logging setup."""

from schemagen.config.logging import ChalkFormatter, resolve_env_log_level, setup_logging
from schemagen.config.settings import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    load_generator_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ChalkFormatter",
    "GeneratorConfig",
    "GeneratorConfigError",
    "load_generator_config",
    "resolve_env_log_level",
    "setup_logging",
]
