# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fluent construction of parameters."""

from __future__ import annotations

import logging
from typing import Any

from oasmodel.builders.base import RecordBuilder, built, inserted
from oasmodel.model.common import ParameterLocation
from oasmodel.model.entities import Example, MediaType, Parameter
from oasmodel.model.refs import Reference, Referenceable
from oasmodel.model.schema import Schema

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ParameterBuilder(RecordBuilder[Parameter]):
    """Builds a :class:`Parameter`.

    Path parameters stay required whatever ``with_required`` is given.
    """

    def __init__(self, value: Parameter) -> None:
        super().__init__(value)

    @classmethod
    def named(cls, name: str, location: ParameterLocation | str) -> ParameterBuilder:
        return cls(Parameter(name=name, location=ParameterLocation(location)))

    def with_name(self, name: str) -> ParameterBuilder:
        return self._updated(name=name)

    def with_location(self, location: ParameterLocation | str) -> ParameterBuilder:
        location = ParameterLocation(location)
        if location is ParameterLocation.PATH:
            return self._updated(location=location, required=True)
        return self._updated(location=location)

    def with_description(self, description: str) -> ParameterBuilder:
        return self._updated(description=description)

    def with_required(self, required: bool = True) -> ParameterBuilder:
        if self._value.location is ParameterLocation.PATH and not required:
            logger.warning("Path parameter %r stays required", self._value.name)
            return self._updated()
        return self._updated(required=required)

    def with_deprecated(self, deprecated: bool = True) -> ParameterBuilder:
        return self._updated(deprecated=deprecated)

    def with_style(self, style: str) -> ParameterBuilder:
        return self._updated(style=style)

    def with_explode(self, explode: bool = True) -> ParameterBuilder:
        return self._updated(explode=explode)

    def with_schema(self, schema: Referenceable[Schema] | RecordBuilder) -> ParameterBuilder:
        return self._updated(schema_=built(schema))

    def with_example(self, example: Any) -> ParameterBuilder:
        return self._updated(example=example)

    def add_example(self, name: str, example: Example | Reference) -> ParameterBuilder:
        return self._updated(examples=inserted(self._value.examples, name, example))

    def add_content(self, media_type: str, content: MediaType) -> ParameterBuilder:
        return self._updated(content=inserted(self._value.content, media_type, content))
