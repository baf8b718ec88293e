# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema data model (kinds, type descriptors, packages)."""

from schemagen.model.kinds import (
    COMPOUND_ARITY,
    NATIVE_KINDS,
    PRIMITIVE_KINDS,
    Kind,
    is_compound_kind,
    is_native_kind,
    is_primitive_kind,
    kind_to_string,
)
from schemagen.model.package import Package
from schemagen.model.types import (
    CompoundDesc,
    EnumDesc,
    Field,
    PrimitiveDesc,
    StructDesc,
    TypeDesc,
    TypeDescriptor,
    make_compound,
    make_enum,
    make_primitive,
    make_struct,
    make_unresolved,
)

__all__ = [
    # Kinds
    "Kind",
    "NATIVE_KINDS",
    "PRIMITIVE_KINDS",
    "COMPOUND_ARITY",
    "kind_to_string",
    "is_native_kind",
    "is_primitive_kind",
    "is_compound_kind",
    # Descriptors
    "PrimitiveDesc",
    "CompoundDesc",
    "EnumDesc",
    "StructDesc",
    "TypeDesc",
    "Field",
    "TypeDescriptor",
    "make_primitive",
    "make_compound",
    "make_enum",
    "make_struct",
    "make_unresolved",
    # Packages
    "Package",
]
