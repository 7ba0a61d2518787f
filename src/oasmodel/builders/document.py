# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fluent construction of whole documents.

Example::

    document = (
        api("User API", "1.0.0")
        .with_description("Manages users")
        .add_server("https://api.example.com")
        .add_operation("/users/{id}", "get", get("Get user").add_parameter(path_param("id")))
        .add_schema("User", Schema.object())
        .build()
    )
"""

from __future__ import annotations

import logging

from oasmodel.builders.base import RecordBuilder, appended, built, inserted, with_entries
from oasmodel.builders.components import ComponentsBuilder
from oasmodel.builders.path_item import PathItemBuilder
from oasmodel.model.common import ExternalDocs
from oasmodel.model.entities import (
    HTTP_METHODS,
    Components,
    Contact,
    Document,
    Info,
    License,
    Operation,
    PathItem,
    Server,
    Tag,
)
from oasmodel.model.refs import Referenceable
from oasmodel.model.schema import Schema
from oasmodel.model.security import SecurityRequirement, SecurityScheme

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DocumentBuilder(RecordBuilder[Document]):
    """Builds a :class:`Document`."""

    def __init__(self, value: Document) -> None:
        super().__init__(value)

    def with_openapi_version(self, version: str) -> DocumentBuilder:
        return self._updated(openapi=version)

    def with_info(self, info: Info) -> DocumentBuilder:
        return self._updated(info=info)

    def with_title(self, title: str) -> DocumentBuilder:
        return self._with_info_fields(title=title)

    def with_version(self, version: str) -> DocumentBuilder:
        return self._with_info_fields(version=version)

    def with_description(self, description: str) -> DocumentBuilder:
        return self._with_info_fields(description=description)

    def with_terms_of_service(self, url: str) -> DocumentBuilder:
        return self._with_info_fields(terms_of_service=url)

    def with_contact(self, contact: Contact) -> DocumentBuilder:
        return self._with_info_fields(contact=contact)

    def with_license(self, license: License | str, url: str | None = None) -> DocumentBuilder:
        if isinstance(license, str):
            license = License(name=license, url=url) if url is not None else License(name=license)
        return self._with_info_fields(license=license)

    def add_server(self, server: Server | str, description: str | None = None) -> DocumentBuilder:
        if isinstance(server, str):
            server = Server(url=server, description=description) if description is not None else Server(url=server)
        return self._updated(servers=appended(self._value.servers, server))

    def replace_servers(self, servers: list[Server]) -> DocumentBuilder:
        return self._updated(servers=list(servers))

    def add_path(self, path: str, item: PathItem | RecordBuilder) -> DocumentBuilder:
        """Set the path item for *path*; an existing entry is replaced."""
        paths = self._value.paths
        entries = inserted(paths.entries, path, built(item))
        return self._updated(paths=with_entries(paths, entries))

    def add_operation(self, path: str, method: str, operation: Operation | RecordBuilder) -> DocumentBuilder:
        """Attach *operation* to *path*, keeping the other operations already on that path."""
        if method.lower() not in HTTP_METHODS:
            logger.warning("Ignoring operation for unknown HTTP method %r on %s", method, path)
            return self._updated()
        item = PathItemBuilder(self._value.paths.get(path))
        return self.add_path(path, item.with_operation(method, operation))

    def with_components(self, components: Components | RecordBuilder) -> DocumentBuilder:
        return self._updated(components=built(components))

    def add_schema(self, name: str, schema: Referenceable[Schema] | RecordBuilder) -> DocumentBuilder:
        return self.with_components(self._components().add_schema(name, schema))

    def add_security_scheme(self, name: str, scheme: Referenceable[SecurityScheme]) -> DocumentBuilder:
        return self.with_components(self._components().add_security_scheme(name, scheme))

    def add_security_requirement(self, requirement: SecurityRequirement) -> DocumentBuilder:
        return self._updated(security=appended(self._value.security, dict(requirement)))

    def replace_security(self, requirements: list[SecurityRequirement]) -> DocumentBuilder:
        return self._updated(security=[dict(requirement) for requirement in requirements])

    def add_tag(self, tag: Tag | str, description: str | None = None) -> DocumentBuilder:
        if isinstance(tag, str):
            tag = Tag(name=tag, description=description) if description is not None else Tag.simple(tag)
        return self._updated(tags=appended(self._value.tags, tag))

    def replace_tags(self, tags: list[Tag]) -> DocumentBuilder:
        return self._updated(tags=list(tags))

    def with_external_docs(self, url: str, description: str | None = None) -> DocumentBuilder:
        return self._updated(external_docs=ExternalDocs(url=url, description=description))

    def _with_info_fields(self, **changes) -> DocumentBuilder:
        return self._updated(info=self._value.info.model_copy(update=changes))

    def _components(self) -> ComponentsBuilder:
        return ComponentsBuilder(self._value.components)


def api(title: str, version: str) -> DocumentBuilder:
    """Start a document with the given title and version and no paths."""
    return DocumentBuilder(Document(info=Info(title=title, version=version)))
