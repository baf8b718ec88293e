# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while generating code fragments.

Every error is local to one generation call and is never retried: the input
is deterministic, so a malformed descriptor stays malformed. Drivers are
expected to abort generation of the affected compilation unit.
"""

from __future__ import annotations

from typing import Self

from schemagen.model.kinds import Kind, kind_to_string
from schemagen.model.types import TypeDescriptor

# ###############
# Public Interface
# ###############


class GenerationError(Exception):
    """Base class for all code generation failures.

    Attributes:
        kind: Kind of the offending descriptor, if known.
        name: Declared name of the offending descriptor ("" when anonymous).
        ordinal: Ordinal of the offending descriptor, if it has one.
        operation: The generator operation that failed.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: Kind | None = None,
        name: str = "",
        ordinal: int | None = None,
        operation: str = "",
    ) -> None:
        self.kind = kind
        self.name = name
        self.ordinal = ordinal
        self.operation = operation
        super().__init__(_with_context(message, kind, name, ordinal, operation))

    @classmethod
    def for_descriptor(cls, message: str, t: TypeDescriptor, operation: str = "") -> Self:
        """Build an error carrying the context of descriptor *t*."""
        return cls(message, kind=t.kind, name=t.name, ordinal=t.ordinal, operation=operation)


class UnsupportedKindError(GenerationError):
    """A descriptor's kind has no mapping for the requested operation."""


class UnresolvedWithoutOrdinalError(GenerationError):
    """An unresolved descriptor lacks the ordinal needed to address it."""


class MalformedDescriptorError(GenerationError):
    """A descriptor claims a kind but lacks the payload that kind requires."""


class UnknownReferenceError(GenerationError):
    """A forward reference names a package or ordinal that does not exist."""


def unsupported(t: TypeDescriptor, operation: str) -> UnsupportedKindError:
    """Return the error for an operation that has no mapping for *t*'s kind."""
    return UnsupportedKindError.for_descriptor(f"no mapping for kind {kind_to_string(t.kind)}", t, operation)


# ################
# Implementation
# ################


def _with_context(message: str, kind: Kind | None, name: str, ordinal: int | None, operation: str) -> str:
    context: list[str] = []
    if operation:
        context.append(f"operation={operation}")
    if kind is not None:
        context.append(f"kind={kind_to_string(kind)}")
    if name:
        context.append(f"name={name!r}")
    if ordinal is not None:
        context.append(f"ordinal={ordinal}")
    if not context:
        return message
    return f"{message} [{', '.join(context)}]"
