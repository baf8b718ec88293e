# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Checked access to descriptor payloads."""

from __future__ import annotations

from schemagen.codegen.errors import MalformedDescriptorError
from schemagen.model.kinds import COMPOUND_ARITY, kind_to_string
from schemagen.model.types import CompoundDesc, EnumDesc, StructDesc, TypeDescriptor

# ###############
# Public Interface
# ###############


def elem_types(t: TypeDescriptor, operation: str) -> tuple[TypeDescriptor, ...]:
    """Return the element types of compound descriptor *t*, checking their number.

    Raises:
        MalformedDescriptorError: If *t* has no compound payload or the wrong
            number of element types for its kind.
    """
    if not isinstance(t.desc, CompoundDesc):
        raise MalformedDescriptorError.for_descriptor("compound kind without element types", t, operation)
    expected = COMPOUND_ARITY.get(t.kind)
    if expected is None or len(t.desc.elem_types) != expected:
        raise MalformedDescriptorError.for_descriptor(
            f"{kind_to_string(t.kind)} expects {expected} element type(s), got {len(t.desc.elem_types)}",
            t,
            operation,
        )
    return t.desc.elem_types


def struct_desc(t: TypeDescriptor, operation: str) -> StructDesc:
    """Return the struct payload of *t*.

    Raises:
        MalformedDescriptorError: If *t* has no struct payload.
    """
    if not isinstance(t.desc, StructDesc):
        raise MalformedDescriptorError.for_descriptor("struct kind without field list", t, operation)
    return t.desc


def enum_desc(t: TypeDescriptor, operation: str) -> EnumDesc:
    """Return the enum payload of *t*.

    Raises:
        MalformedDescriptorError: If *t* has no enum payload.
    """
    if not isinstance(t.desc, EnumDesc):
        raise MalformedDescriptorError.for_descriptor("enum kind without member list", t, operation)
    return t.desc
