# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-representation mapping and naming engine for schema-driven code generation."""

__version__ = "0.1.0"
