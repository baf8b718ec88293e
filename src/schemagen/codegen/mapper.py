# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapping of schema types onto the four representations used in generated code.

For every kind this module knows the type expression of each representation,
how to convert a value between representations, and how to spell an
uninitialized value. All output is source text; ``val`` arguments are source
expressions too.
"""

from __future__ import annotations

from schemagen.codegen.errors import unsupported
from schemagen.codegen.naming import NamingEngine
from schemagen.codegen.representation import Representation
from schemagen.codegen.resolver import Resolver
from schemagen.config.settings import GeneratorConfig
from schemagen.model.kinds import Kind, is_native_kind, kind_to_string
from schemagen.model.types import TypeDescriptor

# ###############
# Public Interface
# ###############


class RepresentationMapper:
    """Emits type expressions, conversions and zero values per representation.

    Every public method resolves its descriptor first, so forward and
    self-references are handled the same way as inline types.
    """

    def __init__(self, resolver: Resolver, naming: NamingEngine, config: GeneratorConfig | None = None) -> None:
        self._resolver = resolver
        self._naming = naming
        self._config = config or GeneratorConfig()
        self._types = self._config.types_package
        self._ref = self._config.ref_package

    # -------- type expressions --------

    def type_expression(self, t: TypeDescriptor, representation: Representation) -> str:
        """Return the type of *t* under *representation*."""
        match representation:
            case Representation.DEFINITION:
                return self.def_type(t)
            case Representation.NATIVE:
                return self.native_type(t)
            case Representation.STORAGE:
                return self.storage_type(t)
            case Representation.USER:
                return self.user_type(t)

    def def_type(self, t: TypeDescriptor) -> str:
        """Return the type used as the 'Def' of *t*."""
        rt = self._resolver.resolve(t)
        match rt.kind:
            case kind if is_native_kind(kind):
                return _native_name(kind)
            case Kind.BLOB:
                return f"{self._types}.Blob"
            case Kind.ENUM:
                return self._naming.name_for(t)
            case Kind.LIST | Kind.MAP | Kind.SET | Kind.STRUCT:
                return self._naming.name_for(t) + "Def"
            case Kind.PACKAGE:
                return f"{self._types}.Package"
            case Kind.REF:
                return f"{self._ref}.Ref"
            case Kind.VALUE:
                return f"{self._types}.Value"
            case Kind.TYPE_REF:
                return f"{self._types}.TypeRef"
            case _:
                raise unsupported(rt, "def_type")

    def native_type(self, t: TypeDescriptor) -> str:
        """Return the host primitive type of *t*; only native kinds have one."""
        rt = self._resolver.resolve(t)
        if not is_native_kind(rt.kind):
            raise unsupported(rt, "native_type")
        return _native_name(rt.kind)

    def storage_type(self, t: TypeDescriptor) -> str:
        """Return the generic stored-value type, which is the same for every kind."""
        rt = self._resolver.resolve(t)
        if rt.is_unresolved:
            raise unsupported(rt, "storage_type")
        return f"{self._types}.Value"

    def user_type(self, t: TypeDescriptor) -> str:
        """Return the type used by generated getters and setters for *t*."""
        rt = self._resolver.resolve(t)
        match rt.kind:
            case kind if is_native_kind(kind):
                return _native_name(kind)
            case Kind.BLOB:
                return f"{self._types}.Blob"
            case Kind.ENUM | Kind.LIST | Kind.MAP | Kind.REF | Kind.SET | Kind.STRUCT:
                return self._naming.name_for(t)
            case Kind.PACKAGE:
                return f"{self._types}.Package"
            case Kind.VALUE:
                return f"{self._types}.Value"
            case Kind.TYPE_REF:
                return f"{self._types}.TypeRef"
            case _:
                raise unsupported(rt, "user_type")

    # -------- conversions --------

    def convert(self, val: str, t: TypeDescriptor, from_repr: Representation, to_repr: Representation) -> str:
        """Return code converting *val* of type *t* from one representation to another.

        Conversions that do not involve Storage go through it
        (``from -> Storage -> to``).
        """
        rt = self._resolver.resolve(t)
        if Representation.NATIVE in (from_repr, to_repr) and not is_native_kind(rt.kind):
            raise unsupported(rt, f"convert {from_repr.value} -> {to_repr.value}")
        if from_repr is to_repr:
            return val
        if from_repr is Representation.STORAGE:
            return self._from_value(val, t, to_repr)
        if to_repr is Representation.STORAGE:
            return self._to_value(val, t, from_repr)
        return self._from_value(self._to_value(val, t, from_repr), t, to_repr)

    def def_to_value(self, val: str, t: TypeDescriptor) -> str:
        """Return code converting a Def instance *val* to a stored value."""
        rt = self._resolver.resolve(t)
        match rt.kind:
            case Kind.BLOB | Kind.ENUM | Kind.PACKAGE | Kind.VALUE | Kind.TYPE_REF:
                return val  # No separate Def representation.
            case kind if is_native_kind(kind):
                return self._native_to_value(val, rt)
            case Kind.LIST | Kind.MAP | Kind.SET | Kind.STRUCT:
                return f"{val}.New()"
            case Kind.REF:
                return f"New{self._naming.name_for(rt)}({val})"
            case _:
                raise unsupported(rt, "def_to_value")

    def value_to_def(self, val: str, t: TypeDescriptor) -> str:
        """Return code converting a stored value *val* to the Def of *t*."""
        rt = self._resolver.resolve(t)
        match rt.kind:
            case Kind.BLOB | Kind.PACKAGE | Kind.TYPE_REF:
                return self.value_to_user(val, rt)  # No separate Def representation.
            case kind if is_native_kind(kind):
                return self._value_to_native(val, rt)
            case Kind.ENUM:
                return f"{val}.({self._naming.name_for(t)})"
            case Kind.LIST | Kind.MAP | Kind.SET | Kind.STRUCT:
                return f"{self.value_to_user(val, t)}.Def()"
            case Kind.REF:
                return f"{val}.Ref()"
            case Kind.VALUE:
                return val
            case _:
                raise unsupported(rt, "value_to_def")

    def native_to_value(self, val: str, t: TypeDescriptor) -> str:
        """Return code wrapping the native *val* into a stored value."""
        return self._native_to_value(val, self._resolver.resolve(t))

    def value_to_native(self, val: str, t: TypeDescriptor) -> str:
        """Return code unwrapping the stored value *val* into a native."""
        return self._value_to_native(val, self._resolver.resolve(t))

    def user_to_value(self, val: str, t: TypeDescriptor) -> str:
        """Return code converting a User instance *val* to a stored value.

        Non-primitive User types already are stored values (or wrap one), so
        only natives need converting.
        """
        rt = self._resolver.resolve(t)
        if is_native_kind(rt.kind):
            return self._native_to_value(val, rt)
        if rt.is_unresolved:
            raise unsupported(rt, "user_to_value")
        return val

    def value_to_user(self, val: str, t: TypeDescriptor) -> str:
        """Return code converting a stored value *val* to the User type of *t*."""
        rt = self._resolver.resolve(t)
        match rt.kind:
            case Kind.BLOB:
                return f"{val}.({self._types}.Blob)"
            case kind if is_native_kind(kind):
                return self._value_to_native(val, rt)
            case Kind.ENUM | Kind.LIST | Kind.MAP | Kind.REF | Kind.SET | Kind.STRUCT:
                return f"{val}.({self._naming.name_for(t)})"
            case Kind.PACKAGE:
                return f"{val}.({self._types}.Package)"
            case Kind.VALUE:
                return val
            case Kind.TYPE_REF:
                return f"{val}.({self._types}.TypeRef)"
            case _:
                raise unsupported(rt, "value_to_user")

    # -------- zero values --------

    def zero(self, t: TypeDescriptor, representation: Representation) -> str:
        """Return code creating an uninitialized instance of *t* under *representation*."""
        match representation:
            case Representation.DEFINITION:
                return self.def_zero(t)
            case Representation.NATIVE:
                return self.native_zero(t)
            case Representation.STORAGE:
                return self.value_zero(t)
            case Representation.USER:
                return self.user_zero(t)

    def user_zero(self, t: TypeDescriptor) -> str:
        """Return code creating an uninitialized instance of the User type of *t*."""
        rt = self._resolver.resolve(t)
        match rt.kind:
            case Kind.BLOB:
                return f"{self._types}.NewEmptyBlob()"
            case Kind.BOOL:
                return "false"
            case Kind.STRING:
                return '""'
            case kind if is_native_kind(kind):
                return f"{_native_name(kind)}(0)"
            case Kind.ENUM | Kind.LIST | Kind.MAP | Kind.PACKAGE | Kind.SET | Kind.STRUCT:
                return self._naming.constructor_call(t)
            case Kind.REF:
                return f"New{self._naming.name_for(rt)}({self._ref}.Ref{{}})"
            case Kind.VALUE:
                return self._config.value_zero
            case Kind.TYPE_REF:
                return f"{self._types}.TypeRef{{R: {self._ref}.Ref{{}}}}"
            case _:
                raise unsupported(rt, "user_zero")

    def value_zero(self, t: TypeDescriptor) -> str:
        """Return code creating an uninitialized stored value of type *t*."""
        rt = self._resolver.resolve(t)
        match rt.kind:
            case Kind.BLOB:
                return f"{self._types}.NewEmptyBlob()"
            case Kind.BOOL:
                return f"{self._types}.Bool(false)"
            case Kind.STRING:
                return f'{self._types}.NewString("")'
            case kind if is_native_kind(kind):
                return f"{self._types}.{kind_to_string(kind)}(0)"
            case Kind.ENUM | Kind.LIST | Kind.MAP | Kind.REF | Kind.SET:
                return self.user_zero(t)
            case Kind.PACKAGE:
                return f"{self._types}.NewPackage()"
            case Kind.STRUCT:
                return self._naming.constructor_call(t)
            case Kind.VALUE:
                return self._config.value_zero
            case Kind.TYPE_REF:
                return f"{self._types}.TypeRef{{}}"
            case _:
                raise unsupported(rt, "value_zero")

    def def_zero(self, t: TypeDescriptor) -> str:
        """Return code creating an uninitialized Def of *t*."""
        rt = self._resolver.resolve(t)
        match rt.kind:
            case Kind.BLOB | Kind.ENUM | Kind.PACKAGE | Kind.VALUE | Kind.TYPE_REF:
                return self.user_zero(t)
            case kind if is_native_kind(kind):
                return self.user_zero(t)
            case Kind.LIST | Kind.MAP | Kind.SET | Kind.STRUCT:
                return f"{self._naming.constructor_call(t)}.Def()"
            case Kind.REF:
                return f"{self._ref}.Ref{{}}"
            case _:
                raise unsupported(rt, "def_zero")

    def native_zero(self, t: TypeDescriptor) -> str:
        """Return the native zero literal of *t*; only native kinds have one."""
        rt = self._resolver.resolve(t)
        if not is_native_kind(rt.kind):
            raise unsupported(rt, "native_zero")
        return self.user_zero(rt)

    def _to_value(self, val: str, t: TypeDescriptor, from_repr: Representation) -> str:
        match from_repr:
            case Representation.DEFINITION:
                return self.def_to_value(val, t)
            case Representation.NATIVE:
                return self.native_to_value(val, t)
            case Representation.USER:
                return self.user_to_value(val, t)
            case Representation.STORAGE:
                return val

    def _from_value(self, val: str, t: TypeDescriptor, to_repr: Representation) -> str:
        match to_repr:
            case Representation.DEFINITION:
                return self.value_to_def(val, t)
            case Representation.NATIVE:
                return self.value_to_native(val, t)
            case Representation.USER:
                return self.value_to_user(val, t)
            case Representation.STORAGE:
                return val

    def _native_to_value(self, val: str, rt: TypeDescriptor) -> str:
        match rt.kind:
            case Kind.STRING:
                return f"{self._types}.NewString({val})"
            case kind if is_native_kind(kind):
                return f"{self._types}.{kind_to_string(kind)}({val})"
            case _:
                raise unsupported(rt, "native_to_value")

    def _value_to_native(self, val: str, rt: TypeDescriptor) -> str:
        match rt.kind:
            case Kind.STRING:
                return f"{val}.({self._types}.String).String()"
            case kind if is_native_kind(kind):
                name = kind_to_string(kind)
                return f"{name.lower()}({val}.({self._types}.{name}))"
            case _:
                raise unsupported(rt, "value_to_native")


# ################
# Implementation
# ################


def _native_name(kind: Kind) -> str:
    return kind_to_string(kind).lower()
