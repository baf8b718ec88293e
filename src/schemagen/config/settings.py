# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the generator configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".schemagen.yaml"

# Placeholder earlier generated code used for an uninitialized Value. The
# value model has no null, so a Bool stood in for "nothing".
LEGACY_VALUE_ZERO = "{types}.Bool(false)"


class GeneratorConfigError(Exception):
    """Raised when a generator configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings that shape the emitted source text.

    Attributes:
        types_package: Import alias of the runtime value library.
        ref_package: Import alias of the content-addressing library.
        legacy_value_zero: Emit ``types.Bool(false)`` instead of ``nil`` as
            the zero value of the opaque Value kind.
    """

    types_package: str = "types"
    ref_package: str = "ref"
    legacy_value_zero: bool = False

    @property
    def value_zero(self) -> str:
        """The zero value of the opaque Value kind."""
        if self.legacy_value_zero:
            return LEGACY_VALUE_ZERO.format(types=self.types_package)
        return "nil"


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load and parse a generator configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A GeneratorConfig populated from the file. An empty file yields the defaults.

    Raises:
        GeneratorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorConfigError(f"Generator config file not found: {path}") from None
    except OSError as exc:
        raise GeneratorConfigError(f"Cannot read generator config file: {exc}") from exc

    return _parse_generator_config(text, source_label=str(path))


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"types-package", "ref-package", "legacy-value-zero"})


def _parse_generator_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse generator config YAML text into a GeneratorConfig.

    Raises:
        GeneratorConfigError: If the YAML is invalid, a key is unknown or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GeneratorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise GeneratorConfigError(f"{source_label}: generator config must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise GeneratorConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    defaults = GeneratorConfig()
    return GeneratorConfig(
        types_package=_optional_identifier(data, "types-package", defaults.types_package, source_label),
        ref_package=_optional_identifier(data, "ref-package", defaults.ref_package, source_label),
        legacy_value_zero=_optional_bool(data, "legacy-value-zero", defaults.legacy_value_zero, source_label),
    )


def _optional_identifier(mapping: dict[str, object], key: str, default: str, source_label: str) -> str:
    """Extract an optional import alias, which must be a valid identifier."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, str) or not value.isidentifier():
        raise GeneratorConfigError(f"{source_label}: '{key}' must be an identifier")
    return value


def _optional_bool(mapping: dict[str, object], key: str, default: bool, source_label: str) -> bool:
    """Extract an optional boolean flag."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, bool):
        raise GeneratorConfigError(f"{source_label}: '{key}' must be a boolean")
    return value
