# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the schemagen command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from yachalk import chalk

from schemagen.codegen import GenerationError, Generator, PackageResolver, Representation
from schemagen.config.logging import resolve_env_log_level, setup_logging
from schemagen.config.settings import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    load_generator_config,
)
from schemagen.model.package import Package
from schemagen.model.types import TypeDescriptor

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the schemagen CLI."""
    parser = argparse.ArgumentParser(
        prog="schemagen",
        description="schemagen - type representation mapping for schema-driven code generation",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # describe subcommand
    describe_parser = subparsers.add_parser(
        "describe",
        help="Show the generated names and expressions for every declared type of a package",
        description=(
            "Read a package (JSON) and print, for each declared type, its generated names, "
            "zero values and the expression that rebuilds its type descriptor."
        ),
    )
    describe_parser.add_argument("package", help="Path to the package JSON file")
    describe_parser.add_argument(
        "--dependency",
        "-d",
        action="append",
        default=[],
        metavar="FILE",
        help="Path to a built dependency package JSON file (repeatable)",
    )
    describe_parser.add_argument(
        "--config",
        help=f"Path to the generator configuration (default: {CONFIG_FILE_NAME} next to the package, if present)",
    )
    describe_parser.add_argument(
        "--file-id",
        default="",
        help="Identifier of the generated file; forward references then use the package's cached ref",
    )
    describe_parser.add_argument(
        "--package-name",
        default="",
        help="Name of the generated package, used in the cached ref variable name",
    )
    describe_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "describe":
        return _cmd_describe(args)
    return 0


def _cmd_describe(args: argparse.Namespace) -> int:
    """Handle the describe subcommand."""
    level = logging.DEBUG if args.verbose else resolve_env_log_level()
    setup_logging(level if level is not None else logging.WARNING)

    package_path = Path(args.package).resolve()
    try:
        package = _load_package(package_path)
        dependencies = [_load_package(Path(p).resolve()) for p in args.dependency]
        config = _load_config(args.config, package_path)
    except (_InputError, GeneratorConfigError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        resolver = PackageResolver(package, dependencies)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    generator = Generator(resolver, config)
    logger.debug("describing %d declared type(s) of %s", len(package.types), package_path)
    if not package.types:
        print("No declared types found in the package.")
        return 0

    # A failure aborts the whole package; nothing is printed for earlier types.
    try:
        blocks = [
            _describe_type(generator, ordinal, t, args.file_id, args.package_name)
            for ordinal, t in enumerate(package.types)
        ]
    except GenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    for block in blocks:
        print(block)
    return 0


class _InputError(Exception):
    """Raised when a package file cannot be read or decoded."""


def _load_package(path: Path) -> Package:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise _InputError(f"Cannot read package file '{path}': {exc}") from exc
    try:
        return Package.model_validate_json(text)
    except ValidationError as exc:
        raise _InputError(f"Invalid package file '{path}': {exc}") from exc


def _load_config(config_arg: str | None, package_path: Path) -> GeneratorConfig:
    if config_arg is not None:
        return load_generator_config(Path(config_arg).resolve())
    default_path = package_path.parent / CONFIG_FILE_NAME
    if default_path.exists():
        return load_generator_config(default_path)
    return GeneratorConfig()


def _describe_type(generator: Generator, ordinal: int, t: TypeDescriptor, file_id: str, package_name: str) -> str:
    """Render the description block of the declared type at *ordinal*."""
    lines = [
        chalk.blue(f"[{ordinal}] {generator.name_for(t)}"),
        f"  def type:   {generator.type_expression_for(t, Representation.DEFINITION)}",
        f"  user type:  {generator.type_expression_for(t, Representation.USER)}",
        f"  user zero:  {generator.zero_value_expression(t, Representation.USER)}",
        f"  value zero: {generator.zero_value_expression(t, Representation.STORAGE)}",
        "  type ref:",
    ]
    type_ref = generator.serialize_descriptor(t, file_id, package_name)
    lines.extend(f"    {line}" for line in type_ref.splitlines())
    return "\n".join(lines)
