# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Packages: compilation units whose declared types are addressed by ordinal."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from schemagen.model.types import TypeDescriptor

# ###############
# Public Interface
# ###############


class Package(BaseModel):
    """A compilation unit.

    Attributes:
        ref: Identity hash of an already-built package (e.g. ``"sha1-00ff..."``),
            or None while the unit is still being generated.
        dependencies: Identity hashes of the packages this one imports from.
        types: The declared types. Forward references address them by index.
    """

    model_config = ConfigDict(frozen=True)

    ref: str | None = None
    dependencies: tuple[str, ...] = ()
    types: tuple[TypeDescriptor, ...] = ()

    def type_at(self, ordinal: int) -> TypeDescriptor:
        """Return the declared type at *ordinal*.

        Raises:
            IndexError: If *ordinal* is outside the declared type list.
        """
        if ordinal < 0 or ordinal >= len(self.types):
            raise IndexError(f"ordinal {ordinal} out of range for {len(self.types)} declared type(s)")
        return self.types[ordinal]
