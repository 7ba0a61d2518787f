# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fluent construction of the component registries."""

from __future__ import annotations

from oasmodel.builders.base import RecordBuilder, built, inserted
from oasmodel.model.entities import Callback, Components, Example, Header, Link, Parameter, RequestBody, Response
from oasmodel.model.refs import Referenceable
from oasmodel.model.schema import Schema
from oasmodel.model.security import SecurityScheme

# ###############
# Public Interface
# ###############


class ComponentsBuilder(RecordBuilder[Components]):
    """Builds :class:`Components`; adding a name twice keeps the latest entry."""

    def __init__(self, value: Components | None = None) -> None:
        super().__init__(value if value is not None else Components())

    def add_schema(self, name: str, schema: Referenceable[Schema] | RecordBuilder) -> ComponentsBuilder:
        return self._updated(schemas=inserted(self._value.schemas, name, built(schema)))

    def add_response(self, name: str, response: Referenceable[Response] | RecordBuilder) -> ComponentsBuilder:
        return self._updated(responses=inserted(self._value.responses, name, built(response)))

    def add_parameter(self, name: str, parameter: Referenceable[Parameter] | RecordBuilder) -> ComponentsBuilder:
        return self._updated(parameters=inserted(self._value.parameters, name, built(parameter)))

    def add_example(self, name: str, example: Referenceable[Example]) -> ComponentsBuilder:
        return self._updated(examples=inserted(self._value.examples, name, example))

    def add_request_body(self, name: str, request_body: Referenceable[RequestBody]) -> ComponentsBuilder:
        return self._updated(request_bodies=inserted(self._value.request_bodies, name, request_body))

    def add_header(self, name: str, header: Referenceable[Header]) -> ComponentsBuilder:
        return self._updated(headers=inserted(self._value.headers, name, header))

    def add_security_scheme(self, name: str, scheme: Referenceable[SecurityScheme]) -> ComponentsBuilder:
        return self._updated(security_schemes=inserted(self._value.security_schemes, name, scheme))

    def add_link(self, name: str, link: Referenceable[Link]) -> ComponentsBuilder:
        return self._updated(links=inserted(self._value.links, name, link))

    def add_callback(self, name: str, callback: Referenceable[Callback]) -> ComponentsBuilder:
        return self._updated(callbacks=inserted(self._value.callbacks, name, callback))
