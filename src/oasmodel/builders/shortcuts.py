# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Ready-made values for the most common building blocks."""

from __future__ import annotations

from oasmodel.model.entities import MediaType, Parameter, RequestBody, Response
from oasmodel.model.refs import Referenceable
from oasmodel.model.schema import Schema

# ###############
# Public Interface
# ###############

JSON_MEDIA_TYPE = "application/json"


def ok(description: str = "Success") -> Response:
    return Response(description=description)


def error(description: str) -> Response:
    return Response(description=description)


def json_content(schema: Referenceable[Schema]) -> dict[str, MediaType]:
    """A ``content`` map with a single ``application/json`` entry."""
    return {JSON_MEDIA_TYPE: MediaType(schema_=schema)}


def json_body(schema: Referenceable[Schema], required: bool | None = None) -> RequestBody:
    if required is None:
        return RequestBody(content=json_content(schema))
    return RequestBody(content=json_content(schema), required=required)


def path_param(name: str, schema: Referenceable[Schema] | None = None) -> Parameter:
    """A required path parameter, typed as a string unless *schema* says otherwise."""
    return Parameter.path(name, schema if schema is not None else Schema.string())


def query_param(name: str, schema: Referenceable[Schema] | None = None) -> Parameter:
    return Parameter.query(name, schema)


def header_param(name: str, schema: Referenceable[Schema] | None = None) -> Parameter:
    return Parameter.header(name, schema)


def cookie_param(name: str, schema: Referenceable[Schema] | None = None) -> Parameter:
    return Parameter.cookie(name, schema)
