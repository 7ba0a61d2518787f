# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fluent construction of path items."""

from __future__ import annotations

import logging

from oasmodel.builders.base import RecordBuilder, appended, built
from oasmodel.model.entities import HTTP_METHODS, Operation, Parameter, PathItem, Server
from oasmodel.model.refs import Referenceable

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class PathItemBuilder(RecordBuilder[PathItem]):
    """Builds a :class:`PathItem`; one operation per HTTP method, the latest one wins."""

    def __init__(self, value: PathItem | None = None) -> None:
        super().__init__(value if value is not None else PathItem())

    def with_summary(self, summary: str) -> PathItemBuilder:
        return self._updated(summary=summary)

    def with_description(self, description: str) -> PathItemBuilder:
        return self._updated(description=description)

    def with_ref(self, ref: str) -> PathItemBuilder:
        return self._updated(ref=ref)

    def with_operation(self, method: str, operation: Operation | RecordBuilder) -> PathItemBuilder:
        """Set the operation for *method* (case-insensitive); unknown methods are ignored."""
        key = method.lower()
        if key not in HTTP_METHODS:
            logger.warning("Ignoring operation for unknown HTTP method %r", method)
            return self._updated()
        return self._updated(**{key: built(operation)})

    def with_get(self, operation: Operation | RecordBuilder) -> PathItemBuilder:
        return self.with_operation("get", operation)

    def with_put(self, operation: Operation | RecordBuilder) -> PathItemBuilder:
        return self.with_operation("put", operation)

    def with_post(self, operation: Operation | RecordBuilder) -> PathItemBuilder:
        return self.with_operation("post", operation)

    def with_delete(self, operation: Operation | RecordBuilder) -> PathItemBuilder:
        return self.with_operation("delete", operation)

    def with_patch(self, operation: Operation | RecordBuilder) -> PathItemBuilder:
        return self.with_operation("patch", operation)

    def with_options(self, operation: Operation | RecordBuilder) -> PathItemBuilder:
        return self.with_operation("options", operation)

    def with_head(self, operation: Operation | RecordBuilder) -> PathItemBuilder:
        return self.with_operation("head", operation)

    def with_trace(self, operation: Operation | RecordBuilder) -> PathItemBuilder:
        return self.with_operation("trace", operation)

    def add_parameter(self, parameter: Referenceable[Parameter] | RecordBuilder) -> PathItemBuilder:
        return self._updated(parameters=appended(self._value.parameters, built(parameter)))

    def replace_parameters(self, parameters: list[Referenceable[Parameter]]) -> PathItemBuilder:
        return self._updated(parameters=list(parameters))

    def add_server(self, server: Server) -> PathItemBuilder:
        return self._updated(servers=appended(self._value.servers, server))
