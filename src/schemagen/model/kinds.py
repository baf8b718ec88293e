# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""The closed set of kinds a type descriptor can have."""

from __future__ import annotations

from enum import Enum

# ###############
# Public Interface
# ###############


class Kind(Enum):
    """Kinds supported by the schema type system.

    The value of each member is its canonical name, which is also the suffix
    used by the runtime library for kind constants (``types.Int32Kind``).
    """

    BOOL = "Bool"
    UINT8 = "UInt8"
    UINT16 = "UInt16"
    UINT32 = "UInt32"
    UINT64 = "UInt64"
    INT8 = "Int8"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    FLOAT32 = "Float32"
    FLOAT64 = "Float64"
    STRING = "String"
    BLOB = "Blob"
    VALUE = "Value"
    LIST = "List"
    MAP = "Map"
    REF = "Ref"
    SET = "Set"
    ENUM = "Enum"
    STRUCT = "Struct"
    TYPE_REF = "TypeRef"
    PACKAGE = "Package"
    UNRESOLVED = "Unresolved"


# Kinds with a host-native representation (bool, integers, floats, string).
NATIVE_KINDS: frozenset[Kind] = frozenset(
    {
        Kind.BOOL,
        Kind.UINT8,
        Kind.UINT16,
        Kind.UINT32,
        Kind.UINT64,
        Kind.INT8,
        Kind.INT16,
        Kind.INT32,
        Kind.INT64,
        Kind.FLOAT32,
        Kind.FLOAT64,
        Kind.STRING,
    }
)

# Kinds whose descriptors carry no payload.
PRIMITIVE_KINDS: frozenset[Kind] = NATIVE_KINDS | {Kind.BLOB, Kind.VALUE, Kind.TYPE_REF, Kind.PACKAGE}

# Compound kinds and the number of element types each one takes.
COMPOUND_ARITY: dict[Kind, int] = {
    Kind.LIST: 1,
    Kind.REF: 1,
    Kind.SET: 1,
    Kind.MAP: 2,
}


def kind_to_string(kind: Kind) -> str:
    """Return the canonical name of *kind* (e.g. ``"UInt8"``)."""
    return kind.value


def is_native_kind(kind: Kind) -> bool:
    """Return True if *kind* maps onto a host-native type."""
    return kind in NATIVE_KINDS


def is_primitive_kind(kind: Kind) -> bool:
    """Return True if descriptors of *kind* carry no payload."""
    return kind in PRIMITIVE_KINDS


def is_compound_kind(kind: Kind) -> bool:
    """Return True if *kind* is parameterized by element types."""
    return kind in COMPOUND_ARITY
