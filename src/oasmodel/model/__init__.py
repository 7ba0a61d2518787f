# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed model of an OpenAPI 3.0 document."""

from oasmodel.model.base import EXTENSION_PREFIX, ExtensibleRecord, PatternedRecord, ReferenceVariantError
from oasmodel.model.common import ExternalDocs, ParameterLocation
from oasmodel.model.entities import (
    HTTP_METHODS,
    Callback,
    Components,
    Contact,
    Document,
    Encoding,
    Example,
    Header,
    Info,
    License,
    Link,
    MediaType,
    Operation,
    Parameter,
    PathItem,
    Paths,
    RequestBody,
    Response,
    Responses,
    Server,
    ServerVariable,
    Tag,
)
from oasmodel.model.refs import (
    Reference,
    Referenceable,
    callback_ref,
    component_ref,
    example_ref,
    header_ref,
    link_ref,
    parameter_ref,
    request_body_ref,
    response_ref,
    schema_ref,
    security_scheme_ref,
)
from oasmodel.model.schema import XML, Discriminator, Schema
from oasmodel.model.security import (
    ApiKeySecurityScheme,
    HttpSecurityScheme,
    OAuth2SecurityScheme,
    OAuthFlow,
    OAuthFlows,
    OpenIdConnectSecurityScheme,
    SecurityRequirement,
    SecurityScheme,
)

__all__ = [
    # Record discipline
    "EXTENSION_PREFIX",
    "ExtensibleRecord",
    "PatternedRecord",
    # References
    "Reference",
    "Referenceable",
    "ReferenceVariantError",
    "component_ref",
    "schema_ref",
    "response_ref",
    "parameter_ref",
    "example_ref",
    "request_body_ref",
    "header_ref",
    "security_scheme_ref",
    "link_ref",
    "callback_ref",
    # Schema
    "Schema",
    "Discriminator",
    "XML",
    # Security
    "ApiKeySecurityScheme",
    "HttpSecurityScheme",
    "OAuth2SecurityScheme",
    "OpenIdConnectSecurityScheme",
    "OAuthFlow",
    "OAuthFlows",
    "SecurityScheme",
    "SecurityRequirement",
    # Document
    "HTTP_METHODS",
    "Document",
    "Info",
    "Contact",
    "License",
    "Server",
    "ServerVariable",
    "Paths",
    "PathItem",
    "Operation",
    "Parameter",
    "ParameterLocation",
    "RequestBody",
    "MediaType",
    "Encoding",
    "Responses",
    "Response",
    "Callback",
    "Example",
    "Link",
    "Header",
    "Tag",
    "ExternalDocs",
    "Components",
]
