# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifiers for schema types in generated code.

Composite types get generics-style names built from their element ids
(``ListOfInt32``, ``MapOfStringToPerson``), anonymous unions get a name
synthesized from their variants, and types declared in another package are
qualified with that package's tag.
"""

from __future__ import annotations

import re

from schemagen.codegen.errors import MalformedDescriptorError, unsupported
from schemagen.codegen.payload import elem_types, struct_desc
from schemagen.codegen.representation import Representation
from schemagen.codegen.resolver import Resolver
from schemagen.model.kinds import Kind, is_native_kind, kind_to_string
from schemagen.model.types import Field, TypeDescriptor

# ###############
# Public Interface
# ###############

# Representations that spell native kinds the way the host language does.
LOWER_CASE_REPRESENTATIONS = frozenset({Representation.DEFINITION, Representation.NATIVE})

_NON_IDENTIFIER_CHARS = re.compile(r"[^0-9A-Za-z_]")


def to_tag(package_ref: str) -> str:
    """Turn a package identity hash into something usable in an identifier.

    ``"sha1-00ff"`` becomes ``"sha1_00ff"``.
    """
    return _NON_IDENTIFIER_CHARS.sub("_", package_ref)


class NamingEngine:
    """Derives representation-qualified identifiers for descriptors."""

    def __init__(self, resolver: Resolver) -> None:
        self._resolver = resolver

    def name_for(self, t: TypeDescriptor, representation: Representation = Representation.USER) -> str:
        """Return the identifier of *t* under *representation*.

        Enums and named structs carrying a package ref are qualified as
        ``<tag>.<Name>``.

        Raises:
            UnsupportedKindError: If *t* still resolves to an unresolved descriptor.
            MalformedDescriptorError: If *t* lacks the payload its kind requires.
        """
        return self._name(t, representation, qualify=True)

    def unqualified_name(self, t: TypeDescriptor) -> str:
        """Return the User name of *t* without its package qualification."""
        return self._name(t, Representation.USER, qualify=False)

    def constructor_call(self, t: TypeDescriptor) -> str:
        """Return a call to the generated zero-argument constructor of *t*.

        The constructor lives in the package that declares the type, so a
        package ref on *t* qualifies the call (``<tag>.NewPoint()``).
        """
        name = f"New{self.unqualified_name(t)}()"
        if t.package_ref is not None:
            return f"{to_tag(t.package_ref)}.{name}"
        return name

    def _name(self, t: TypeDescriptor, representation: Representation, *, qualify: bool) -> str:
        rt = self._resolver.resolve(t)
        match rt.kind:
            case kind if is_native_kind(kind):
                name = kind_to_string(kind)
                return name.lower() if representation in LOWER_CASE_REPRESENTATIONS else name
            case Kind.BLOB | Kind.VALUE | Kind.TYPE_REF | Kind.PACKAGE:
                return kind_to_string(rt.kind)
            case Kind.ENUM:
                return self._qualified(t, rt.name, qualify)
            case Kind.LIST | Kind.REF | Kind.SET:
                (elem,) = elem_types(rt, "name_for")
                return f"{kind_to_string(rt.kind)}Of{self._elem_id(elem, representation)}"
            case Kind.MAP:
                key, value = elem_types(rt, "name_for")
                return f"MapOf{self._elem_id(key, representation)}To{self._elem_id(value, representation)}"
            case Kind.STRUCT:
                if rt.name == "":
                    return self._union_name(rt, representation)
                return self._qualified(t, rt.name, qualify)
            case _:
                raise unsupported(rt, "name_for")

    def _qualified(self, t: TypeDescriptor, name: str, qualify: bool) -> str:
        if qualify and t.package_ref is not None:
            return f"{to_tag(t.package_ref)}.{name}"
        return name

    def _elem_id(self, t: TypeDescriptor, representation: Representation) -> str:
        # An imported element type is joined to its tag with "_" so the
        # composite name stays a single identifier.
        if not (t.is_unresolved and t.package_ref is not None):
            return self.name_for(t, representation)
        rt = self._resolver.resolve(t)
        return f"{to_tag(t.package_ref)}_{self.name_for(rt, representation)}"

    def _union_name(self, rt: TypeDescriptor, representation: Representation) -> str:
        choices = struct_desc(rt, "name_for").union
        if not choices:
            raise MalformedDescriptorError.for_descriptor("anonymous struct without union variants", rt, "name_for")
        return "__unionOf" + "And".join(self._choice_id(f, representation) for f in choices)

    def _choice_id(self, field: Field, representation: Representation) -> str:
        return f"{_title(field.name)}Of{self._elem_id(field.type, representation)}"


# ################
# Implementation
# ################


def _title(name: str) -> str:
    """Upper-case the first character only (``fooBar`` -> ``FooBar``)."""
    return name[:1].upper() + name[1:]
