# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""The reference-or-inline wrapper used wherever the grammar allows ``$ref``.

A ``Referenceable[T]`` value is either a :class:`Reference` or an instance of
``T`` itself. The two variants are distinct classes, so a value can never be
both, nor neither. An inline value serializes exactly like a bare ``T``; a
reference serializes as ``{"$ref": "..."}``.

Pointers built by :func:`component_ref` take the form
``#/components/<registry>/<name>``. Names are inserted verbatim: a name
containing ``/`` or ``~`` yields a pointer that does not round-trip through
JSON-pointer unescaping. That case is logged, not rewritten.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar, Union

from pydantic import Field as _Field

from oasmodel.model.base import ExtensibleRecord, ReferenceVariantError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

T = TypeVar("T")

COMPONENTS_PREFIX = "#/components/"


class Reference(ExtensibleRecord):
    """A ``$ref`` pointer to a named component.

    ``extensions`` stays empty unless a document was parsed with the
    ``preserve`` sibling policy, in which case it holds the keys that sat
    next to ``$ref``.
    """

    ref: str = _Field(alias="$ref")

    def __init__(self, ref: str | None = None, /, **data: Any) -> None:
        if ref is not None:
            data["ref"] = ref
        super().__init__(**data)

    @property
    def component(self) -> tuple[str, str] | None:
        """Split a local component pointer into ``(registry, name)``; None for any other pointer."""
        if not self.ref.startswith(COMPONENTS_PREFIX):
            return None
        registry, sep, name = self.ref[len(COMPONENTS_PREFIX) :].partition("/")
        if not sep or not registry or not name or "/" in name:
            return None
        return registry, name

    def is_reference(self) -> bool:
        return True

    def is_inline(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise ReferenceVariantError(f"expected an inline value, found a $ref pointer to {self.ref!r}")

    def expect_reference(self) -> Reference:
        return self


# Either a pointer into a registry or an inline value of type T.
Referenceable = Union[Reference, T]


def component_ref(registry: str, name: str) -> Reference:
    """Build a reference to ``#/components/<registry>/<name>``."""
    if "/" in name or "~" in name:
        logger.warning("Component name %r contains reserved pointer characters and is not escaped", name)
    return Reference(f"{COMPONENTS_PREFIX}{registry}/{name}")


def schema_ref(name: str) -> Reference:
    return component_ref("schemas", name)


def response_ref(name: str) -> Reference:
    return component_ref("responses", name)


def parameter_ref(name: str) -> Reference:
    return component_ref("parameters", name)


def example_ref(name: str) -> Reference:
    return component_ref("examples", name)


def request_body_ref(name: str) -> Reference:
    return component_ref("requestBodies", name)


def header_ref(name: str) -> Reference:
    return component_ref("headers", name)


def security_scheme_ref(name: str) -> Reference:
    return component_ref("securitySchemes", name)


def link_ref(name: str) -> Reference:
    return component_ref("links", name)


def callback_ref(name: str) -> Reference:
    return component_ref("callbacks", name)
