# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Driver-facing entry point of the code generation core.

Conceptually there are four type spaces in generated code:

- Definition: convenient host types for building data (``MyStructDef``, ``ListOfBoolDef``).
- Native: host primitives such as ``string`` or ``uint32``.
- Storage: the generic stored value (``types.Value``).
- User: what generated getters and setters take and return; natives for
  primitive kinds, the generated wrapper type otherwise.

A :class:`Generator` answers naming, typing, conversion, zero-value and
descriptor-serialization questions for any descriptor in those spaces. It is
stateless apart from its resolver, so one instance can serve many generation
requests in any order.
"""

from __future__ import annotations

from schemagen.codegen.mapper import RepresentationMapper
from schemagen.codegen.naming import NamingEngine
from schemagen.codegen.representation import Representation
from schemagen.codegen.resolver import Resolver
from schemagen.codegen.serializer import DescriptorSerializer
from schemagen.config.settings import GeneratorConfig
from schemagen.model.types import TypeDescriptor

# ###############
# Public Interface
# ###############


class Generator:
    """Generates code snippets for resolved and unresolved descriptors.

    Args:
        resolver: Resolves forward references before code is generated for them.
        config: Output settings; defaults to :class:`GeneratorConfig()`.
    """

    def __init__(self, resolver: Resolver, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()
        self.resolver = resolver
        self.naming = NamingEngine(resolver)
        self.mapper = RepresentationMapper(resolver, self.naming, self.config)
        self.serializer = DescriptorSerializer(self.config)

    def name_for(self, t: TypeDescriptor, representation: Representation = Representation.USER) -> str:
        """Return the identifier of *t* under *representation*."""
        return self.naming.name_for(t, representation)

    def type_expression_for(self, t: TypeDescriptor, representation: Representation) -> str:
        """Return the source type of *t* under *representation*."""
        return self.mapper.type_expression(t, representation)

    def convert_expression(
        self,
        value_expr: str,
        t: TypeDescriptor,
        from_representation: Representation,
        to_representation: Representation,
    ) -> str:
        """Return code converting *value_expr* between two representations of *t*."""
        return self.mapper.convert(value_expr, t, from_representation, to_representation)

    def zero_value_expression(self, t: TypeDescriptor, representation: Representation) -> str:
        """Return code creating an uninitialized instance of *t* under *representation*."""
        return self.mapper.zero(t, representation)

    def serialize_descriptor(self, t: TypeDescriptor, file_id: str = "", package_name: str = "") -> str:
        """Return code that reconstructs descriptor *t* at run time."""
        return self.serializer.serialize(t, file_id, package_name)
