# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fluent construction of schemas."""

from __future__ import annotations

from typing import Any

from oasmodel.builders.base import RecordBuilder, appended, built, inserted
from oasmodel.model.common import ExternalDocs
from oasmodel.model.refs import Referenceable
from oasmodel.model.schema import XML, Discriminator, Schema

# ###############
# Public Interface
# ###############


class SchemaBuilder(RecordBuilder[Schema]):
    """Builds a :class:`Schema`.

    Nested schemas may be given as finished schemas, references or other
    builders; builders are finished on the spot.

    Example::

        user = (
            SchemaBuilder.object()
            .add_property("id", Schema.integer("int64"), required=True)
            .add_property("email", SchemaBuilder.string("email"))
            .build()
        )
    """

    def __init__(self, value: Schema | None = None) -> None:
        super().__init__(value if value is not None else Schema())

    @classmethod
    def string(cls, format: str | None = None) -> SchemaBuilder:
        return cls(Schema.string(format))

    @classmethod
    def integer(cls, format: str | None = None) -> SchemaBuilder:
        return cls(Schema.integer(format))

    @classmethod
    def number(cls, format: str | None = None) -> SchemaBuilder:
        return cls(Schema.number(format))

    @classmethod
    def boolean(cls) -> SchemaBuilder:
        return cls(Schema.boolean())

    @classmethod
    def array(cls, items: Referenceable[Schema] | RecordBuilder) -> SchemaBuilder:
        return cls(Schema.array(built(items)))

    @classmethod
    def object(cls) -> SchemaBuilder:
        return cls(Schema.object())

    def with_type(self, type_: str) -> SchemaBuilder:
        return self._updated(type=type_)

    def with_format(self, format: str) -> SchemaBuilder:
        return self._updated(format=format)

    def with_title(self, title: str) -> SchemaBuilder:
        return self._updated(title=title)

    def with_description(self, description: str) -> SchemaBuilder:
        return self._updated(description=description)

    def with_nullable(self, nullable: bool = True) -> SchemaBuilder:
        return self._updated(nullable=nullable)

    def add_property(
        self, name: str, schema: Referenceable[Schema] | RecordBuilder, required: bool = False
    ) -> SchemaBuilder:
        """Add (or replace) one property, optionally listing it as required."""
        properties = inserted(self._value.properties, name, built(schema))
        if required:
            return self._updated(properties=properties).add_required(name)
        return self._updated(properties=properties)

    def add_required(self, name: str) -> SchemaBuilder:
        """List *name* as required; a name already listed is kept once."""
        if name in (self._value.required or []):
            return self._updated()
        return self._updated(required=appended(self._value.required, name))

    def with_items(self, items: Referenceable[Schema] | RecordBuilder) -> SchemaBuilder:
        return self._updated(items=built(items))

    def with_enum(self, values: list[Any]) -> SchemaBuilder:
        return self._updated(enum=list(values))

    def with_default(self, default: Any) -> SchemaBuilder:
        """Set ``default``; None is kept and written as an explicit null."""
        return self._updated(default=default)

    def with_example(self, example: Any) -> SchemaBuilder:
        return self._updated(example=example)

    def with_additional_properties(self, allowed: bool | Referenceable[Schema] | RecordBuilder) -> SchemaBuilder:
        return self._updated(additional_properties=built(allowed))

    def with_discriminator(self, property_name: str, mapping: dict[str, str] | None = None) -> SchemaBuilder:
        return self._updated(discriminator=Discriminator(property_name=property_name, mapping=mapping))

    def add_all_of(self, schema: Referenceable[Schema] | RecordBuilder) -> SchemaBuilder:
        return self._updated(all_of=appended(self._value.all_of, built(schema)))

    def add_one_of(self, schema: Referenceable[Schema] | RecordBuilder) -> SchemaBuilder:
        return self._updated(one_of=appended(self._value.one_of, built(schema)))

    def add_any_of(self, schema: Referenceable[Schema] | RecordBuilder) -> SchemaBuilder:
        return self._updated(any_of=appended(self._value.any_of, built(schema)))

    def with_not(self, schema: Referenceable[Schema] | RecordBuilder) -> SchemaBuilder:
        return self._updated(not_=built(schema))

    def with_minimum(self, minimum: int | float, exclusive: bool | None = None) -> SchemaBuilder:
        if exclusive is None:
            return self._updated(minimum=minimum)
        return self._updated(minimum=minimum, exclusive_minimum=exclusive)

    def with_maximum(self, maximum: int | float, exclusive: bool | None = None) -> SchemaBuilder:
        if exclusive is None:
            return self._updated(maximum=maximum)
        return self._updated(maximum=maximum, exclusive_maximum=exclusive)

    def with_multiple_of(self, multiple_of: int | float) -> SchemaBuilder:
        return self._updated(multiple_of=multiple_of)

    def with_min_length(self, min_length: int) -> SchemaBuilder:
        return self._updated(min_length=min_length)

    def with_max_length(self, max_length: int) -> SchemaBuilder:
        return self._updated(max_length=max_length)

    def with_pattern(self, pattern: str) -> SchemaBuilder:
        return self._updated(pattern=pattern)

    def with_min_items(self, min_items: int) -> SchemaBuilder:
        return self._updated(min_items=min_items)

    def with_max_items(self, max_items: int) -> SchemaBuilder:
        return self._updated(max_items=max_items)

    def with_unique_items(self, unique: bool = True) -> SchemaBuilder:
        return self._updated(unique_items=unique)

    def with_read_only(self, read_only: bool = True) -> SchemaBuilder:
        return self._updated(read_only=read_only)

    def with_write_only(self, write_only: bool = True) -> SchemaBuilder:
        return self._updated(write_only=write_only)

    def with_deprecated(self, deprecated: bool = True) -> SchemaBuilder:
        return self._updated(deprecated=deprecated)

    def with_xml(self, xml: XML) -> SchemaBuilder:
        return self._updated(xml=xml)

    def with_external_docs(self, url: str, description: str | None = None) -> SchemaBuilder:
        return self._updated(external_docs=ExternalDocs(url=url, description=description))
