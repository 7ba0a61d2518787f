# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared plumbing for the fluent builders."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, Self, TypeVar

from oasmodel.model.base import EXTENSION_PREFIX, ExtensibleRecord, PatternedRecord, frozen_extensions

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

R = TypeVar("R", bound=ExtensibleRecord)
P = TypeVar("P", bound=PatternedRecord)
V = TypeVar("V")


class RecordBuilder(Generic[R]):
    """Base class of all builders.

    A builder wraps a frozen record. Every step returns a new builder around
    an updated copy and leaves the builder it was called on untouched, so a
    half-finished builder can be branched safely. Steps never raise.
    """

    def __init__(self, value: R) -> None:
        self._value = value

    def build(self) -> R:
        """Return the finished, frozen record."""
        return self._value

    def with_extension(self, key: str, value: Any) -> Self:
        """Set one extension key; a key naming a fixed field is ignored."""
        if self._names_fixed_field(key):
            return self._updated()
        return self._updated(extensions={**self._value.extensions, key: value})

    def replace_extensions(self, extensions: dict[str, Any]) -> Self:
        """Replace all extension keys at once."""
        kept = {key: value for key, value in extensions.items() if not self._names_fixed_field(key)}
        return self._updated(extensions=kept)

    def _updated(self, **changes: Any) -> Self:
        if "extensions" in changes:
            changes["extensions"] = frozen_extensions(changes["extensions"])
        return type(self)(self._value.model_copy(update=changes))

    def _names_fixed_field(self, key: str) -> bool:
        record_type = type(self._value)
        if key in record_type.fixed_keys():
            logger.warning("Ignoring extension %r: it names a fixed field of %s", key, record_type.__name__)
            return True
        return False


def built(value: Any) -> Any:
    """Return ``value.build()`` for a builder and *value* itself otherwise."""
    return value.build() if isinstance(value, RecordBuilder) else value


def appended(items: list[V] | None, item: V) -> list[V]:
    return [*(items or []), item]


def inserted(mapping: Mapping[str, V] | None, key: str, item: V) -> dict[str, V]:
    """Return a copy of *mapping* with *key* set; an existing key keeps its position."""
    return {**(mapping or {}), key: item}


def with_entries(record: P, entries: dict[str, Any]) -> P:
    """Return a copy of the patterned *record* holding *entries*.

    Keys starting with ``x-`` would be read back as extensions, so they are
    left out with a logged warning.
    """
    kept = {}
    for key, item in entries.items():
        if key.startswith(EXTENSION_PREFIX):
            logger.warning("Ignoring entry %r of %s: it would read back as an extension", key, type(record).__name__)
        else:
            kept[key] = item
    return type(record)(entries=kept, extensions=record.extensions)
