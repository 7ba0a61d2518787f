# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""The OpenAPI 3.0 document and the entities it is built from."""

from __future__ import annotations

from typing import Any

from pydantic import Field as _Field
from pydantic import model_validator

from oasmodel.model.base import ExtensibleRecord, PatternedRecord
from oasmodel.model.common import ExternalDocs, ParameterLocation
from oasmodel.model.refs import Referenceable
from oasmodel.model.schema import Schema
from oasmodel.model.security import SecurityRequirement, SecurityScheme

# ###############
# Public Interface
# ###############

HTTP_METHODS: tuple[str, ...] = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class Contact(ExtensibleRecord):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(ExtensibleRecord):
    name: str
    url: str | None = None


class Info(ExtensibleRecord):
    """Metadata about the API."""

    title: str
    description: str | None = None
    terms_of_service: str | None = _Field(default=None, alias="termsOfService")
    contact: Contact | None = None
    license: License | None = None
    version: str


class ServerVariable(ExtensibleRecord):
    """A substitution variable in a server URL template."""

    enum: list[str] | None = None
    default: str
    description: str | None = None


class Server(ExtensibleRecord):
    url: str
    description: str | None = None
    variables: dict[str, ServerVariable] | None = None


class Example(ExtensibleRecord):
    summary: str | None = None
    description: str | None = None
    value: Any = None
    external_value: str | None = _Field(default=None, alias="externalValue")


class Header(ExtensibleRecord):
    """A header definition; a Parameter without ``name`` and ``in``."""

    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    allow_empty_value: bool | None = _Field(default=None, alias="allowEmptyValue")
    style: str | None = None
    explode: bool | None = None
    allow_reserved: bool | None = _Field(default=None, alias="allowReserved")
    schema_: Referenceable[Schema] | None = _Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Referenceable[Example]] | None = None
    content: dict[str, MediaType] | None = None


class Encoding(ExtensibleRecord):
    """How one property of a multipart or form body is encoded."""

    content_type: str | None = _Field(default=None, alias="contentType")
    headers: dict[str, Referenceable[Header]] | None = None
    style: str | None = None
    explode: bool | None = None
    allow_reserved: bool | None = _Field(default=None, alias="allowReserved")


class MediaType(ExtensibleRecord):
    """Schema and examples for one content type."""

    schema_: Referenceable[Schema] | None = _Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Referenceable[Example]] | None = None
    encoding: dict[str, Encoding] | None = None


class Parameter(ExtensibleRecord):
    """A single operation parameter.

    A parameter located in the path is always required: constructing one
    forces ``required`` to True.
    """

    name: str
    location: ParameterLocation = _Field(alias="in")
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    allow_empty_value: bool | None = _Field(default=None, alias="allowEmptyValue")
    style: str | None = None
    explode: bool | None = None
    allow_reserved: bool | None = _Field(default=None, alias="allowReserved")
    schema_: Referenceable[Schema] | None = _Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Referenceable[Example]] | None = None
    content: dict[str, MediaType] | None = None

    @model_validator(mode="before")
    @classmethod
    def _path_parameters_are_required(cls, data: Any) -> Any:
        if isinstance(data, dict):
            location = data.get("location", data.get("in"))
            if location in (ParameterLocation.PATH, ParameterLocation.PATH.value):
                data = {**data, "required": True}
        return data

    @classmethod
    def path(cls, name: str, schema: Referenceable[Schema] | None = None) -> Parameter:
        return cls(name=name, location=ParameterLocation.PATH, schema_=schema)

    @classmethod
    def query(cls, name: str, schema: Referenceable[Schema] | None = None) -> Parameter:
        return cls(name=name, location=ParameterLocation.QUERY, schema_=schema)

    @classmethod
    def header(cls, name: str, schema: Referenceable[Schema] | None = None) -> Parameter:
        return cls(name=name, location=ParameterLocation.HEADER, schema_=schema)

    @classmethod
    def cookie(cls, name: str, schema: Referenceable[Schema] | None = None) -> Parameter:
        return cls(name=name, location=ParameterLocation.COOKIE, schema_=schema)


class RequestBody(ExtensibleRecord):
    description: str | None = None
    content: dict[str, MediaType]
    required: bool | None = None


class Link(ExtensibleRecord):
    """A design-time link from a response to another operation."""

    operation_ref: str | None = _Field(default=None, alias="operationRef")
    operation_id: str | None = _Field(default=None, alias="operationId")
    parameters: dict[str, Any] | None = None
    request_body: Any = _Field(default=None, alias="requestBody")
    description: str | None = None
    server: Server | None = None


class Response(ExtensibleRecord):
    description: str
    headers: dict[str, Referenceable[Header]] | None = None
    content: dict[str, MediaType] | None = None
    links: dict[str, Referenceable[Link]] | None = None


class Responses(PatternedRecord):
    """Responses of an operation keyed by status code (or ``default``)."""

    entries: dict[str, Referenceable[Response]] = _Field(default_factory=dict, validate_default=True)


class PathItem(ExtensibleRecord):
    """The operations available on a single path."""

    ref: str | None = _Field(default=None, alias="$ref")
    summary: str | None = None
    description: str | None = None
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: list[Server] | None = None
    parameters: list[Referenceable[Parameter]] | None = None

    def operations(self) -> dict[str, Operation]:
        """Return the operations defined on this path, keyed by lower-case method."""
        found = {}
        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                found[method] = operation
        return found


class Callback(PatternedRecord):
    """Out-of-band requests keyed by runtime expression."""

    entries: dict[str, PathItem] = _Field(default_factory=dict, validate_default=True)


class Operation(ExtensibleRecord):
    """A single API operation on a path."""

    wire_required = frozenset({"responses"})

    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocs | None = _Field(default=None, alias="externalDocs")
    operation_id: str | None = _Field(default=None, alias="operationId")
    parameters: list[Referenceable[Parameter]] | None = None
    request_body: Referenceable[RequestBody] | None = _Field(default=None, alias="requestBody")
    responses: Responses = _Field(default_factory=Responses)
    callbacks: dict[str, Referenceable[Callback]] | None = None
    deprecated: bool | None = None
    security: list[SecurityRequirement] | None = None
    servers: list[Server] | None = None


class Paths(PatternedRecord):
    """Path templates mapped to their operations."""

    entries: dict[str, PathItem] = _Field(default_factory=dict, validate_default=True)


class Components(ExtensibleRecord):
    """Registries of reusable, named objects."""

    schemas: dict[str, Referenceable[Schema]] | None = None
    responses: dict[str, Referenceable[Response]] | None = None
    parameters: dict[str, Referenceable[Parameter]] | None = None
    examples: dict[str, Referenceable[Example]] | None = None
    request_bodies: dict[str, Referenceable[RequestBody]] | None = _Field(default=None, alias="requestBodies")
    headers: dict[str, Referenceable[Header]] | None = None
    security_schemes: dict[str, Referenceable[SecurityScheme]] | None = _Field(default=None, alias="securitySchemes")
    links: dict[str, Referenceable[Link]] | None = None
    callbacks: dict[str, Referenceable[Callback]] | None = None


class Tag(ExtensibleRecord):
    name: str
    description: str | None = None
    external_docs: ExternalDocs | None = _Field(default=None, alias="externalDocs")

    @classmethod
    def simple(cls, name: str) -> Tag:
        return cls(name=name)


class Document(ExtensibleRecord):
    """The root of an OpenAPI 3.0 document."""

    wire_required = frozenset({"openapi", "paths"})

    openapi: str = "3.0.3"
    info: Info
    servers: list[Server] | None = None
    paths: Paths = _Field(default_factory=Paths)
    components: Components | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocs | None = _Field(default=None, alias="externalDocs")


# Resolve forward references in the mutually recursive models.
Header.model_rebuild()
Encoding.model_rebuild()
MediaType.model_rebuild()
Parameter.model_rebuild()
RequestBody.model_rebuild()
Response.model_rebuild()
Responses.model_rebuild()
PathItem.model_rebuild()
Callback.model_rebuild()
Operation.model_rebuild()
Paths.model_rebuild()
Components.model_rebuild()
Document.model_rebuild()
