# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emission of source expressions that rebuild a type descriptor at run time.

Generated packages embed the descriptors of their types so that schemas are
self-describing. References to types of other packages are emitted by hash and
ordinal, and forward or self-references inside the package being generated go
through the package's lazily computed ref, so cyclic schemas are never expanded.
"""

from __future__ import annotations

import logging

from schemagen.codegen.errors import MalformedDescriptorError, UnresolvedWithoutOrdinalError
from schemagen.codegen.payload import elem_types
from schemagen.config.settings import GeneratorConfig
from schemagen.model.kinds import Kind, is_compound_kind, is_primitive_kind, kind_to_string
from schemagen.model.types import CompoundDesc, EnumDesc, Field, StructDesc, TypeDescriptor

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def cached_ref_name(package_name: str, file_id: str) -> str:
    """Return the name of the variable caching the ref of the package defined in *file_id*."""
    return f"__{package_name}PackageInFile_{file_id}_CachedRef"


class DescriptorSerializer:
    """Turns descriptors into expressions that reconstruct them."""

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self._config = config or GeneratorConfig()
        self._types = self._config.types_package
        self._ref = self._config.ref_package

    def serialize(self, t: TypeDescriptor, file_id: str = "", package_name: str = "") -> str:
        """Return an expression that reconstructs *t*.

        Args:
            t: The descriptor to serialize, resolved or not.
            file_id: Identifies the file being generated. When set, references
                into the current package use its cached package ref.
            package_name: Name of the package being generated, part of the
                cached ref's variable name.

        Raises:
            UnresolvedWithoutOrdinalError: If a reference lacks its ordinal.
            MalformedDescriptorError: If a payload does not match its kind.
        """
        if t.package_ref is not None:
            ordinal = self._ordinal(t)
            return f"{self._types}.MakeTypeRef({self._ref}.Parse({_go_string(t.package_ref)}), {ordinal})"
        if t.is_unresolved and file_id:
            ordinal = self._ordinal(t)
            return f"{self._types}.MakeTypeRef({cached_ref_name(package_name, file_id)}, {ordinal})"
        if t.is_unresolved:
            ordinal = self._ordinal(t)
            return f"{self._types}.MakeTypeRef({self._ref}.Ref{{}}, {ordinal})"

        if is_primitive_kind(t.kind):
            return f"{self._types}.MakePrimitiveTypeRef({self._kind_constant(t)})"

        match t.desc:
            case CompoundDesc() if is_compound_kind(t.kind):
                elems = [self.serialize(e, file_id, package_name) for e in elem_types(t, "serialize")]
                args = ", ".join([_go_string(t.name), self._kind_constant(t), *elems])
                return f"{self._types}.MakeCompoundTypeRef({args})"
            case EnumDesc(ids=ids) if t.kind is Kind.ENUM:
                args = ", ".join(_go_string(s) for s in (t.name, *ids))
                return f"{self._types}.MakeEnumTypeRef({args})"
            case StructDesc(fields=fields, union=union) if t.kind is Kind.STRUCT:
                logger.debug("serializing struct %s", t.describe())
                fields_expr = self._field_list(f"[]{self._types}.Field", fields, file_id, package_name)
                choices_expr = self._field_list(f"{self._types}.Choices", union, file_id, package_name)
                return f"{self._types}.MakeStructTypeRef({_go_string(t.name)},\n{fields_expr},\n{choices_expr},\n)"
            case _:
                raise MalformedDescriptorError.for_descriptor(
                    f"payload does not match kind {kind_to_string(t.kind)}", t, "serialize"
                )

    def _ordinal(self, t: TypeDescriptor) -> int:
        if t.ordinal is None:
            raise UnresolvedWithoutOrdinalError.for_descriptor(
                f"{t.describe()} does not have an ordinal set", t, "serialize"
            )
        return t.ordinal

    def _kind_constant(self, t: TypeDescriptor) -> str:
        return f"{self._types}.{kind_to_string(t.kind)}Kind"

    def _field_list(self, type_expr: str, fields: tuple[Field, ...], file_id: str, package_name: str) -> str:
        if not fields:
            return type_expr + "{}"
        entries = [
            f"{self._types}.Field{{{_go_string(f.name)}, {self.serialize(f.type, file_id, package_name)}, "
            f"{str(f.optional).lower()}}},"
            for f in fields
        ]
        return type_expr + "{\n" + "\n".join(entries) + "\n}"


# ################
# Implementation
# ################


_GO_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _go_string(s: str) -> str:
    """Quote *s* as a Go interpreted string literal.

    Printable characters are kept as they are, including those outside the
    Basic Multilingual Plane; everything else uses Go's ``\\x``, ``\\u`` or
    ``\\U`` escapes. Lone surrogates have no UTF-8 encoding and become U+FFFD.
    """
    return '"' + "".join(_go_char(c) for c in s) + '"'


def _go_char(c: str) -> str:
    escaped = _GO_ESCAPES.get(c)
    if escaped is not None:
        return escaped
    if c.isprintable():
        return c
    code = ord(c)
    if code < 0x80:
        return f"\\x{code:02x}"
    if 0xD800 <= code <= 0xDFFF:
        return "\\ufffd"
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"
