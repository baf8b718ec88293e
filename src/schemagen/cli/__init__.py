# Copyright 2026 Schemagen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for schemagen."""
