# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the naming engine."""

import pytest

from schemagen.codegen import (
    MalformedDescriptorError,
    NamingEngine,
    PackageResolver,
    Representation,
    UnsupportedKindError,
    to_tag,
)
from schemagen.model import (
    CompoundDesc,
    Field,
    Kind,
    Package,
    TypeDescriptor,
    make_compound,
    make_enum,
    make_primitive,
    make_struct,
    make_unresolved,
)

DEP_REF = "sha1-a1b2-c3"
DEP_TAG = "sha1_a1b2_c3"

# ###############
# Helpers
# ###############


def _p(kind: Kind) -> TypeDescriptor:
    return make_primitive(kind)


def _list(elem: TypeDescriptor) -> TypeDescriptor:
    return make_compound(Kind.LIST, elem)


def _naming(*local_types: TypeDescriptor) -> NamingEngine:
    dep = Package(
        ref=DEP_REF,
        types=(
            make_struct("Point", [Field(name="x", type=_p(Kind.INT32)), Field(name="y", type=_p(Kind.INT32))]),
            make_enum("Color", "red", "green"),
        ),
    )
    return NamingEngine(PackageResolver(Package(types=local_types), [dep]))


# ###############
# Tags
# ###############


def test_to_tag_replaces_dashes() -> None:
    assert to_tag("sha1-00ff") == "sha1_00ff"


def test_to_tag_replaces_every_illegal_character() -> None:
    assert to_tag("sha1-a.b/c d") == "sha1_a_b_c_d"


# ###############
# Primitive kinds
# ###############


@pytest.mark.parametrize(
    ("kind", "user_name", "def_name"),
    [
        (Kind.BOOL, "Bool", "bool"),
        (Kind.UINT8, "UInt8", "uint8"),
        (Kind.INT64, "Int64", "int64"),
        (Kind.FLOAT32, "Float32", "float32"),
        (Kind.STRING, "String", "string"),
    ],
)
def test_native_kind_names(kind: Kind, user_name: str, def_name: str) -> None:
    """Native kinds are capitalized for User/Storage and lower-cased for Definition/Native."""
    naming = _naming()
    assert naming.name_for(_p(kind), Representation.USER) == user_name
    assert naming.name_for(_p(kind), Representation.STORAGE) == user_name
    assert naming.name_for(_p(kind), Representation.DEFINITION) == def_name
    assert naming.name_for(_p(kind), Representation.NATIVE) == def_name


@pytest.mark.parametrize("kind", [Kind.BLOB, Kind.VALUE, Kind.TYPE_REF, Kind.PACKAGE])
def test_fixed_names(kind: Kind) -> None:
    """Blob, Value, TypeRef and Package have the same name in every representation."""
    naming = _naming()
    for representation in Representation:
        assert naming.name_for(_p(kind), representation) == kind.value


# ###############
# Composite names
# ###############


def test_list_set_and_ref_names() -> None:
    naming = _naming()
    assert naming.name_for(_list(_p(Kind.INT32))) == "ListOfInt32"
    assert naming.name_for(make_compound(Kind.SET, _p(Kind.STRING))) == "SetOfString"
    assert naming.name_for(make_compound(Kind.REF, _p(Kind.BLOB))) == "RefOfBlob"


def test_map_name_casing_depends_on_representation() -> None:
    """Element casing follows the representation, independently of the map's kind."""
    naming = _naming()
    t = make_compound(Kind.MAP, _p(Kind.STRING), _p(Kind.INT32))
    assert naming.name_for(t, Representation.DEFINITION) == "MapOfstringToint32"
    assert naming.name_for(t, Representation.USER) == "MapOfStringToInt32"


def test_nested_composite_name() -> None:
    naming = _naming()
    t = make_compound(Kind.MAP, _p(Kind.STRING), _list(make_compound(Kind.SET, _p(Kind.BOOL))))
    assert naming.name_for(t) == "MapOfStringToListOfSetOfBool"


def test_local_forward_reference_element_uses_declared_name() -> None:
    naming = _naming(make_struct("Person", [Field(name="name", type=_p(Kind.STRING))]))
    assert naming.name_for(_list(make_unresolved(0))) == "ListOfPerson"


def test_imported_element_is_joined_with_underscore() -> None:
    """An element imported from another package becomes <tag>_<Name>, keeping one identifier."""
    naming = _naming()
    assert naming.name_for(_list(make_unresolved(0, package_ref=DEP_REF))) == f"ListOf{DEP_TAG}_Point"
    assert naming.name_for(make_compound(Kind.REF, make_unresolved(1, package_ref=DEP_REF))) == f"RefOf{DEP_TAG}_Color"


# ###############
# Enums and structs
# ###############


def test_struct_and_enum_use_declared_name() -> None:
    naming = _naming()
    assert naming.name_for(make_struct("Person")) == "Person"
    assert naming.name_for(make_enum("Mood", "happy")) == "Mood"


def test_struct_with_package_ref_is_qualified() -> None:
    """A type declared in another package is qualified with the package tag."""
    naming = _naming()
    point = make_struct(
        "Point",
        [Field(name="x", type=_p(Kind.INT32)), Field(name="y", type=_p(Kind.INT32))],
        package_ref="sha1-9f-8e",
    )
    assert naming.name_for(point, Representation.USER) == "sha1_9f_8e.Point"


def test_imported_reference_is_qualified() -> None:
    naming = _naming()
    assert naming.name_for(make_unresolved(0, package_ref=DEP_REF)) == f"{DEP_TAG}.Point"
    assert naming.name_for(make_unresolved(1, package_ref=DEP_REF)) == f"{DEP_TAG}.Color"


def test_unqualified_name_and_constructor_call() -> None:
    naming = _naming()
    imported = make_unresolved(0, package_ref=DEP_REF)
    assert naming.unqualified_name(imported) == "Point"
    assert naming.constructor_call(imported) == f"{DEP_TAG}.NewPoint()"
    assert naming.constructor_call(_list(_p(Kind.INT32))) == "NewListOfInt32()"


# ###############
# Anonymous unions
# ###############


def test_anonymous_union_name() -> None:
    """Variants are concatenated in declared order, title-cased and joined with 'And'."""
    naming = _naming()
    union = make_struct(
        "",
        union=[
            Field(name="foo", type=_list(_p(Kind.INT32))),
            Field(name="bar", type=_p(Kind.STRING)),
        ],
    )
    assert naming.name_for(union, Representation.DEFINITION) == "__unionOfFooOfListOfint32AndBarOfstring"
    assert naming.name_for(union, Representation.USER) == "__unionOfFooOfListOfInt32AndBarOfString"


def test_anonymous_union_title_keeps_inner_capitals() -> None:
    naming = _naming()
    union = make_struct("", union=[Field(name="userId", type=_p(Kind.UINT64))])
    assert naming.name_for(union) == "__unionOfUserIdOfUInt64"


def test_anonymous_union_with_imported_variant() -> None:
    naming = _naming()
    union = make_struct("", union=[Field(name="at", type=make_unresolved(0, package_ref=DEP_REF))])
    assert naming.name_for(union) == f"__unionOfAtOf{DEP_TAG}_Point"


def test_union_names_distinguish_variant_order_and_types() -> None:
    """Different union shapes never share a name."""
    naming = _naming()
    a = Field(name="a", type=_p(Kind.INT32))
    b = Field(name="b", type=_p(Kind.STRING))
    b_blob = Field(name="b", type=_p(Kind.BLOB))
    names = {
        naming.name_for(make_struct("", union=[a, b])),
        naming.name_for(make_struct("", union=[b, a])),
        naming.name_for(make_struct("", union=[a, b_blob])),
    }
    assert len(names) == 3


# ###############
# Determinism
# ###############


def test_names_are_deterministic_and_distinct() -> None:
    """The same descriptor always gets the same name; different ones never collide."""
    naming = _naming()
    types = [
        _list(_p(Kind.INT32)),
        make_compound(Kind.SET, _p(Kind.INT32)),
        make_compound(Kind.REF, _p(Kind.INT32)),
        _list(_p(Kind.INT64)),
        make_compound(Kind.MAP, _p(Kind.INT32), _p(Kind.STRING)),
        make_compound(Kind.MAP, _p(Kind.STRING), _p(Kind.INT32)),
        _list(_list(_p(Kind.INT32))),
    ]
    first = [naming.name_for(t) for t in types]
    second = [naming.name_for(t) for t in types]
    assert first == second
    assert len(set(first)) == len(types)


# ###############
# Error Cases
# ###############


def test_map_with_one_element_type_is_malformed() -> None:
    naming = _naming()
    with pytest.raises(MalformedDescriptorError) as exc_info:
        naming.name_for(make_compound(Kind.MAP, _p(Kind.STRING)))
    assert exc_info.value.kind is Kind.MAP
    assert exc_info.value.operation == "name_for"


def test_list_without_payload_is_malformed() -> None:
    naming = _naming()
    with pytest.raises(MalformedDescriptorError):
        naming.name_for(TypeDescriptor(kind=Kind.LIST))


def test_list_with_wrong_payload_is_malformed() -> None:
    naming = _naming()
    t = TypeDescriptor(kind=Kind.STRUCT, name="", desc=CompoundDesc(elem_types=(_p(Kind.BOOL),)))
    with pytest.raises(MalformedDescriptorError):
        naming.name_for(t)


def test_anonymous_struct_without_union_is_malformed() -> None:
    naming = _naming()
    with pytest.raises(MalformedDescriptorError, match="without union variants"):
        naming.name_for(make_struct(""))


class _StuckResolver:
    """A resolver that leaves references unresolved."""

    def resolve(self, t: TypeDescriptor) -> TypeDescriptor:
        return t


def test_unresolvable_reference_is_unsupported() -> None:
    naming = NamingEngine(_StuckResolver())
    with pytest.raises(UnsupportedKindError) as exc_info:
        naming.name_for(make_unresolved(4))
    assert exc_info.value.kind is Kind.UNRESOLVED
    assert exc_info.value.ordinal == 4
