# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors: the schema-level description of a value's structural type."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from schemagen.model.kinds import Kind, is_compound_kind, is_primitive_kind, kind_to_string

# ###############
# Public Interface
# ###############


class PrimitiveDesc(BaseModel):
    """Payload of a primitive descriptor (there is none)."""

    model_config = ConfigDict(frozen=True)

    shape: Literal["primitive"] = "primitive"


class CompoundDesc(BaseModel):
    """Payload of a List, Map, Ref or Set descriptor."""

    model_config = ConfigDict(frozen=True)

    shape: Literal["compound"] = "compound"
    elem_types: tuple[TypeDescriptor, ...] = ()


class EnumDesc(BaseModel):
    """Payload of an enum descriptor: its member identifiers in declared order."""

    model_config = ConfigDict(frozen=True)

    shape: Literal["enum"] = "enum"
    ids: tuple[str, ...] = ()


class StructDesc(BaseModel):
    """Payload of a struct descriptor.

    ``union`` holds the mutually exclusive variants; it is empty when the
    struct has no union.
    """

    model_config = ConfigDict(frozen=True)

    shape: Literal["struct"] = "struct"
    fields: tuple[Field, ...] = ()
    union: tuple[Field, ...] = ()


# The payload of a descriptor. The `shape` discriminator keeps JSON decoding unambiguous.
TypeDesc = Annotated[
    PrimitiveDesc | CompoundDesc | EnumDesc | StructDesc,
    _Field(discriminator="shape"),
]


class Field(BaseModel):
    """A named, typed struct field or union variant."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeDescriptor
    optional: bool = False


class TypeDescriptor(BaseModel):
    """A (possibly unresolved) type descriptor.

    Unresolved descriptors have kind :attr:`Kind.UNRESOLVED` and no payload.
    They address a declared type by *ordinal*, either in the compilation unit
    being generated (no *package_ref*) or in another package.
    """

    model_config = ConfigDict(frozen=True)

    kind: Kind
    name: str = ""
    desc: TypeDesc | None = None
    package_ref: str | None = None
    ordinal: int | None = None

    @property
    def is_unresolved(self) -> bool:
        return self.kind is Kind.UNRESOLVED

    @property
    def has_package_ref(self) -> bool:
        return self.package_ref is not None

    @property
    def has_ordinal(self) -> bool:
        return self.ordinal is not None

    @property
    def is_anonymous_union(self) -> bool:
        """True for a struct with no name whose content is a union."""
        return (
            self.kind is Kind.STRUCT
            and self.name == ""
            and isinstance(self.desc, StructDesc)
            and len(self.desc.union) > 0
        )

    def describe(self) -> str:
        """Return a short human-readable label, used in error messages."""
        label = kind_to_string(self.kind)
        if self.name:
            label += f" '{self.name}'"
        if self.package_ref is not None:
            label += f" from package {self.package_ref}"
        if self.ordinal is not None:
            label += f" (ordinal {self.ordinal})"
        return label


def make_primitive(kind: Kind) -> TypeDescriptor:
    """Return the descriptor of a payload-less kind.

    Raises:
        ValueError: If *kind* takes a payload.
    """
    if not is_primitive_kind(kind):
        raise ValueError(f"{kind_to_string(kind)} is not a primitive kind")
    return TypeDescriptor(kind=kind, desc=PrimitiveDesc())


def make_compound(
    kind: Kind,
    *elem_types: TypeDescriptor,
    name: str = "",
    package_ref: str | None = None,
    ordinal: int | None = None,
) -> TypeDescriptor:
    """Return a List, Map, Ref or Set descriptor over *elem_types*.

    Raises:
        ValueError: If *kind* is not a compound kind.
    """
    if not is_compound_kind(kind):
        raise ValueError(f"{kind_to_string(kind)} is not a compound kind")
    return TypeDescriptor(
        kind=kind,
        name=name,
        desc=CompoundDesc(elem_types=elem_types),
        package_ref=package_ref,
        ordinal=ordinal,
    )


def make_enum(
    name: str,
    *ids: str,
    package_ref: str | None = None,
    ordinal: int | None = None,
) -> TypeDescriptor:
    """Return an enum descriptor with members *ids* in declared order."""
    return TypeDescriptor(
        kind=Kind.ENUM,
        name=name,
        desc=EnumDesc(ids=ids),
        package_ref=package_ref,
        ordinal=ordinal,
    )


def make_struct(
    name: str,
    fields: Iterable[Field] = (),
    union: Iterable[Field] = (),
    *,
    package_ref: str | None = None,
    ordinal: int | None = None,
) -> TypeDescriptor:
    """Return a struct descriptor. Pass an empty *name* for an anonymous union."""
    return TypeDescriptor(
        kind=Kind.STRUCT,
        name=name,
        desc=StructDesc(fields=tuple(fields), union=tuple(union)),
        package_ref=package_ref,
        ordinal=ordinal,
    )


def make_unresolved(
    ordinal: int | None = None,
    package_ref: str | None = None,
    name: str = "",
) -> TypeDescriptor:
    """Return a forward reference to the declared type at *ordinal*.

    Without *package_ref* the reference points into the compilation unit being
    generated, which is how a struct refers to itself.
    """
    return TypeDescriptor(kind=Kind.UNRESOLVED, name=name, package_ref=package_ref, ordinal=ordinal)


# Resolve forward references between the mutually recursive models.
CompoundDesc.model_rebuild()
StructDesc.model_rebuild()
Field.model_rebuild()
TypeDescriptor.model_rebuild()
