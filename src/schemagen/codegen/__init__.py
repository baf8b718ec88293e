# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Code generation core: naming, representation mapping and descriptor serialization."""

from schemagen.codegen.errors import (
    GenerationError,
    MalformedDescriptorError,
    UnknownReferenceError,
    UnresolvedWithoutOrdinalError,
    UnsupportedKindError,
)
from schemagen.codegen.generator import Generator
from schemagen.codegen.mapper import RepresentationMapper
from schemagen.codegen.naming import NamingEngine, to_tag
from schemagen.codegen.representation import Representation
from schemagen.codegen.resolver import PackageResolver, Resolver
from schemagen.codegen.serializer import DescriptorSerializer, cached_ref_name

__all__ = [
    "Generator",
    "Representation",
    "Resolver",
    "PackageResolver",
    "NamingEngine",
    "RepresentationMapper",
    "DescriptorSerializer",
    "to_tag",
    "cached_ref_name",
    "GenerationError",
    "UnsupportedKindError",
    "UnresolvedWithoutOrdinalError",
    "MalformedDescriptorError",
    "UnknownReferenceError",
]
