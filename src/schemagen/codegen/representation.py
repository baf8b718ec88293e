# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""The four interchangeable forms a schema value takes in generated code."""

from enum import Enum

# ###############
# Public Interface
# ###############


class Representation(Enum):
    """A representation of a schema type in generated code.

    - DEFINITION: plain host values for building data before it is stored
      (``MyStructDef``, ``ListOfBoolDef``).
    - NATIVE: host primitives (``int32``, ``string``); primitive kinds only.
    - STORAGE: the generic stored value, uniform across kinds (``types.Value``).
    - USER: the type used in generated accessors; natives for primitive
      kinds, the generated wrapper type for everything else.
    """

    DEFINITION = "def"
    NATIVE = "native"
    STORAGE = "storage"
    USER = "user"
