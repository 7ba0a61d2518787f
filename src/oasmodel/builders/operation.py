# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fluent construction of operations, plus per-method shortcuts with default responses."""

from __future__ import annotations

from oasmodel.builders.base import RecordBuilder, appended, built, inserted, with_entries
from oasmodel.builders.shortcuts import error, ok
from oasmodel.model.common import ExternalDocs
from oasmodel.model.entities import Callback, Operation, Parameter, RequestBody, Response, Responses, Server
from oasmodel.model.refs import Reference, Referenceable
from oasmodel.model.security import SecurityRequirement

# ###############
# Public Interface
# ###############


class OperationBuilder(RecordBuilder[Operation]):
    """Builds an :class:`Operation` one field at a time.

    Example::

        operation = (
            OperationBuilder()
            .with_summary("Get user profile")
            .add_tag("users")
            .add_parameter(path_param("id"))
            .add_response("200", ok("User profile"))
            .build()
        )
    """

    def __init__(self, value: Operation | None = None) -> None:
        super().__init__(value if value is not None else Operation())

    def with_summary(self, summary: str) -> OperationBuilder:
        return self._updated(summary=summary)

    def with_description(self, description: str) -> OperationBuilder:
        return self._updated(description=description)

    def with_operation_id(self, operation_id: str) -> OperationBuilder:
        return self._updated(operation_id=operation_id)

    def with_deprecated(self, deprecated: bool = True) -> OperationBuilder:
        return self._updated(deprecated=deprecated)

    def with_external_docs(self, url: str, description: str | None = None) -> OperationBuilder:
        return self._updated(external_docs=ExternalDocs(url=url, description=description))

    def add_tag(self, tag: str) -> OperationBuilder:
        return self._updated(tags=appended(self._value.tags, tag))

    def replace_tags(self, tags: list[str]) -> OperationBuilder:
        return self._updated(tags=list(tags))

    def add_parameter(self, parameter: Referenceable[Parameter] | RecordBuilder) -> OperationBuilder:
        return self._updated(parameters=appended(self._value.parameters, built(parameter)))

    def replace_parameters(self, parameters: list[Referenceable[Parameter]]) -> OperationBuilder:
        return self._updated(parameters=list(parameters))

    def with_request_body(self, request_body: Referenceable[RequestBody]) -> OperationBuilder:
        return self._updated(request_body=request_body)

    def add_response(self, status: str | int, response: Referenceable[Response] | RecordBuilder) -> OperationBuilder:
        """Set the response for one status code; a later call for the same code wins."""
        responses = self._value.responses
        entries = inserted(responses.entries, str(status), built(response))
        return self._updated(responses=with_entries(responses, entries))

    def with_default_response(self, response: Referenceable[Response] | RecordBuilder) -> OperationBuilder:
        return self.add_response("default", response)

    def replace_responses(self, responses: dict[str, Referenceable[Response]]) -> OperationBuilder:
        """Replace every response, including any seeded by a method shortcut."""
        return self._updated(responses=with_entries(self._value.responses, dict(responses)))

    def add_callback(self, name: str, callback: Callback | Reference) -> OperationBuilder:
        return self._updated(callbacks=inserted(self._value.callbacks, name, callback))

    def add_security_requirement(self, requirement: SecurityRequirement) -> OperationBuilder:
        return self._updated(security=appended(self._value.security, dict(requirement)))

    def replace_security(self, requirements: list[SecurityRequirement]) -> OperationBuilder:
        return self._updated(security=[dict(requirement) for requirement in requirements])

    def add_server(self, server: Server) -> OperationBuilder:
        return self._updated(servers=appended(self._value.servers, server))


def operation() -> OperationBuilder:
    """Start an operation with no fields set."""
    return OperationBuilder()


def get(summary: str) -> OperationBuilder:
    """A GET operation answering 200."""
    return OperationBuilder().with_summary(summary).add_response("200", ok("Success"))


def post(summary: str) -> OperationBuilder:
    """A POST operation answering 201 or 400."""
    return (
        OperationBuilder()
        .with_summary(summary)
        .add_response("201", ok("Created"))
        .add_response("400", error("Bad Request"))
    )


def put(summary: str) -> OperationBuilder:
    """A PUT operation answering 200 or 404."""
    return (
        OperationBuilder()
        .with_summary(summary)
        .add_response("200", ok("Updated"))
        .add_response("404", error("Not Found"))
    )


def patch(summary: str) -> OperationBuilder:
    """A PATCH operation answering 200 or 404."""
    return (
        OperationBuilder()
        .with_summary(summary)
        .add_response("200", ok("Updated"))
        .add_response("404", error("Not Found"))
    )


def delete(summary: str) -> OperationBuilder:
    """A DELETE operation answering 204 or 404."""
    return (
        OperationBuilder()
        .with_summary(summary)
        .add_response("204", ok("Deleted"))
        .add_response("404", error("Not Found"))
    )
