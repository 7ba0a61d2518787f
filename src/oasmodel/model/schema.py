# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""The Schema Object and its leaf helpers.

Schema is the only self-referential entity: ``items``, ``properties``,
``additionalProperties``, ``not`` and the ``*Of`` lists hold further schemas
(or references to them). Each nested schema belongs to its parent alone.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field as _Field

from oasmodel.model.base import ExtensibleRecord
from oasmodel.model.common import ExternalDocs
from oasmodel.model.refs import Referenceable

# ###############
# Public Interface
# ###############


class Discriminator(ExtensibleRecord):
    """Selects a schema from a ``oneOf``/``anyOf`` by the value of one property."""

    property_name: str = _Field(alias="propertyName")
    mapping: dict[str, str] | None = None


class XML(ExtensibleRecord):
    """XML rendering hints for a schema."""

    name: str | None = None
    namespace: str | None = None
    prefix: str | None = None
    attribute: bool | None = None
    wrapped: bool | None = None


class Schema(ExtensibleRecord):
    """An OpenAPI 3.0 Schema Object."""

    title: str | None = None
    multiple_of: int | float | None = _Field(default=None, alias="multipleOf")
    maximum: int | float | None = None
    exclusive_maximum: bool | None = _Field(default=None, alias="exclusiveMaximum")
    minimum: int | float | None = None
    exclusive_minimum: bool | None = _Field(default=None, alias="exclusiveMinimum")
    max_length: int | None = _Field(default=None, alias="maxLength")
    min_length: int | None = _Field(default=None, alias="minLength")
    pattern: str | None = None
    max_items: int | None = _Field(default=None, alias="maxItems")
    min_items: int | None = _Field(default=None, alias="minItems")
    unique_items: bool | None = _Field(default=None, alias="uniqueItems")
    max_properties: int | None = _Field(default=None, alias="maxProperties")
    min_properties: int | None = _Field(default=None, alias="minProperties")
    required: list[str] | None = None
    enum: list[Any] | None = None
    type: str | None = None
    all_of: list[Referenceable[Schema]] | None = _Field(default=None, alias="allOf")
    one_of: list[Referenceable[Schema]] | None = _Field(default=None, alias="oneOf")
    any_of: list[Referenceable[Schema]] | None = _Field(default=None, alias="anyOf")
    not_: Referenceable[Schema] | None = _Field(default=None, alias="not")
    items: Referenceable[Schema] | None = None
    properties: dict[str, Referenceable[Schema]] | None = None
    additional_properties: bool | Referenceable[Schema] | None = _Field(default=None, alias="additionalProperties")
    description: str | None = None
    format: str | None = None
    default: Any = None
    nullable: bool | None = None
    discriminator: Discriminator | None = None
    read_only: bool | None = _Field(default=None, alias="readOnly")
    write_only: bool | None = _Field(default=None, alias="writeOnly")
    xml: XML | None = None
    external_docs: ExternalDocs | None = _Field(default=None, alias="externalDocs")
    example: Any = None
    deprecated: bool | None = None

    @classmethod
    def string(cls, format: str | None = None) -> Schema:
        return cls(type="string", format=format) if format else cls(type="string")

    @classmethod
    def integer(cls, format: str | None = None) -> Schema:
        return cls(type="integer", format=format) if format else cls(type="integer")

    @classmethod
    def number(cls, format: str | None = None) -> Schema:
        return cls(type="number", format=format) if format else cls(type="number")

    @classmethod
    def boolean(cls) -> Schema:
        return cls(type="boolean")

    @classmethod
    def array(cls, items: Referenceable[Schema]) -> Schema:
        """An array schema whose elements follow *items*."""
        return cls(type="array", items=items)

    @classmethod
    def object(
        cls,
        properties: dict[str, Referenceable[Schema]] | None = None,
        required: list[str] | None = None,
    ) -> Schema:
        """An object schema; absent arguments stay absent in the output."""
        fields: dict[str, Any] = {"type": "object"}
        if properties is not None:
            fields["properties"] = properties
        if required is not None:
            fields["required"] = required
        return cls(**fields)


# Resolve the self-references in Schema.
Schema.model_rebuild()
