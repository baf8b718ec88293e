# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of forward references to declared types.

Unresolved descriptors are indices into a package's declared type list. They
are resolved by lookup, never by expanding the type graph, so cyclic schemas
(a struct referring to itself or to a later peer) resolve in constant time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Protocol

from schemagen.codegen.errors import (
    MalformedDescriptorError,
    UnknownReferenceError,
    UnresolvedWithoutOrdinalError,
)
from schemagen.model.package import Package
from schemagen.model.types import TypeDescriptor

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class Resolver(Protocol):
    """Anything that can map a possibly-unresolved descriptor to its resolved form.

    Implementations must be idempotent and must return resolved input unchanged.
    """

    def resolve(self, t: TypeDescriptor) -> TypeDescriptor: ...


class PackageResolver:
    """Resolves references against the package being generated and its dependencies.

    Args:
        package: The compilation unit being generated. References without a
            package ref, or with a ref equal to ``package.ref``, point into it.
        dependencies: Already-built packages, keyed by their ``ref``.
    """

    def __init__(self, package: Package, dependencies: Iterable[Package] = ()) -> None:
        self._package = package
        self._registry: dict[str, Package] = {}
        for dep in dependencies:
            self.register(dep)

    @property
    def package(self) -> Package:
        return self._package

    @property
    def registry(self) -> Mapping[str, Package]:
        return self._registry

    def register(self, package: Package) -> None:
        """Make *package* available for cross-package references.

        Raises:
            ValueError: If *package* has no identity ref.
        """
        if package.ref is None:
            raise ValueError("only built packages (with a ref) can be registered as dependencies")
        self._registry[package.ref] = package

    def resolve(self, t: TypeDescriptor) -> TypeDescriptor:
        """Return the declared type *t* refers to, or *t* itself if it is resolved.

        Raises:
            UnresolvedWithoutOrdinalError: If *t* is unresolved and has no ordinal.
            UnknownReferenceError: If the package or ordinal does not exist.
            MalformedDescriptorError: If the declared type is itself unresolved.
        """
        if not t.is_unresolved:
            return t
        if t.ordinal is None:
            raise UnresolvedWithoutOrdinalError.for_descriptor("cannot resolve reference without ordinal", t, "resolve")

        package = self._lookup_package(t)
        try:
            resolved = package.type_at(t.ordinal)
        except IndexError as exc:
            raise UnknownReferenceError.for_descriptor(str(exc), t, "resolve") from exc

        if resolved.is_unresolved:
            raise MalformedDescriptorError.for_descriptor(
                "declared type is itself an unresolved reference", resolved, "resolve"
            )
        logger.debug("resolved %s to %s", t.describe(), resolved.describe())
        return resolved

    def _lookup_package(self, t: TypeDescriptor) -> Package:
        if t.package_ref is None or t.package_ref == self._package.ref:
            return self._package
        package = self._registry.get(t.package_ref)
        if package is None:
            raise UnknownReferenceError.for_descriptor(f"unknown package {t.package_ref}", t, "resolve")
        return package
