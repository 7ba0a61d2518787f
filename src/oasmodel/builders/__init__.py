# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fluent, value-returning builders over the document model."""

from oasmodel.builders.base import RecordBuilder
from oasmodel.builders.components import ComponentsBuilder
from oasmodel.builders.document import DocumentBuilder, api
from oasmodel.builders.operation import OperationBuilder, delete, get, operation, patch, post, put
from oasmodel.builders.parameter import ParameterBuilder
from oasmodel.builders.path_item import PathItemBuilder
from oasmodel.builders.response import ResponseBuilder, response
from oasmodel.builders.schema import SchemaBuilder
from oasmodel.builders.shortcuts import (
    JSON_MEDIA_TYPE,
    cookie_param,
    error,
    header_param,
    json_body,
    json_content,
    ok,
    path_param,
    query_param,
)

__all__ = [
    "RecordBuilder",
    "DocumentBuilder",
    "PathItemBuilder",
    "OperationBuilder",
    "ParameterBuilder",
    "ResponseBuilder",
    "SchemaBuilder",
    "ComponentsBuilder",
    "api",
    "operation",
    "response",
    "get",
    "post",
    "put",
    "patch",
    "delete",
    "JSON_MEDIA_TYPE",
    "ok",
    "error",
    "json_content",
    "json_body",
    "path_param",
    "query_param",
    "header_param",
    "cookie_param",
]
