# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Leaf entities shared by the schema, security, and document modules."""

from __future__ import annotations

from enum import Enum

from oasmodel.model.base import ExtensibleRecord

# ###############
# Public Interface
# ###############


class ParameterLocation(Enum):
    """Where a parameter (or an API key) is carried in a request."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


class ExternalDocs(ExtensibleRecord):
    """A pointer to documentation hosted elsewhere."""

    description: str | None = None
    url: str
