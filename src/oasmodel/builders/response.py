# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fluent construction of responses."""

from __future__ import annotations

from oasmodel.builders.base import RecordBuilder, built, inserted
from oasmodel.builders.shortcuts import JSON_MEDIA_TYPE
from oasmodel.model.entities import Header, Link, MediaType, Response
from oasmodel.model.refs import Referenceable
from oasmodel.model.schema import Schema

# ###############
# Public Interface
# ###############


class ResponseBuilder(RecordBuilder[Response]):
    def __init__(self, value: Response) -> None:
        super().__init__(value)

    def with_description(self, description: str) -> ResponseBuilder:
        return self._updated(description=description)

    def add_content(self, media_type: str, content: MediaType) -> ResponseBuilder:
        return self._updated(content=inserted(self._value.content, media_type, content))

    def add_json_content(self, schema: Referenceable[Schema] | RecordBuilder) -> ResponseBuilder:
        """Describe an ``application/json`` body by its schema."""
        return self.add_content(JSON_MEDIA_TYPE, MediaType(schema_=built(schema)))

    def add_header(self, name: str, header: Referenceable[Header]) -> ResponseBuilder:
        return self._updated(headers=inserted(self._value.headers, name, header))

    def add_link(self, name: str, link: Referenceable[Link]) -> ResponseBuilder:
        return self._updated(links=inserted(self._value.links, name, link))


def response(description: str) -> ResponseBuilder:
    return ResponseBuilder(Response(description=description))
