# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extensible records: typed fixed fields plus a side-channel for unmodeled keys."""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic import Field as _Field

if TYPE_CHECKING:
    from oasmodel.model.refs import Reference

# ###############
# Public Interface
# ###############

EXTENSION_PREFIX = "x-"


class ReferenceVariantError(TypeError):
    """Raised when a reference-or-inline value holds the other variant than requested."""


class ExtensibleRecord(BaseModel):
    """Base class of every entity in the document model.

    Fixed fields are ordinary pydantic fields; the field alias (or the field
    name when there is none) is the JSON key. Every other key seen while
    decoding is kept in ``extensions`` and written back after the fixed
    fields, in lexicographic key order.

    A record is also the *inline* variant of a reference-or-inline value, so
    it answers the same variant queries as :class:`~oasmodel.model.refs.Reference`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # JSON keys that must appear in a document even though the Python
    # constructor fills in a default.
    wire_required: ClassVar[frozenset[str]] = frozenset()

    extensions: Mapping[str, Any] = _Field(default_factory=dict, validate_default=True)

    @classmethod
    def fixed_keys(cls) -> dict[str, str]:
        """Return the fixed fields as a mapping of JSON key to attribute name, in declaration order."""
        return {(info.alias or name): name for name, info in cls.model_fields.items() if name != "extensions"}

    @field_validator("extensions")
    @classmethod
    def _extensions_do_not_shadow_fixed_fields(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        clashes = sorted(set(value) & set(cls.fixed_keys()))
        if clashes:
            raise ValueError(f"extension keys {clashes} collide with fixed fields of {cls.__name__}")
        return frozen_extensions(value)

    def is_reference(self) -> bool:
        """Return True if this value is a ``$ref`` pointer."""
        return False

    def is_inline(self) -> bool:
        """Return True if this value is an inline entity."""
        return True

    def unwrap(self) -> Self:
        """Return the inline payload."""
        return self

    def expect_reference(self) -> Reference:
        """Return the pointer, failing because this value is inline."""
        raise ReferenceVariantError(f"expected a $ref pointer, found an inline {type(self).__name__}")


class PatternedRecord(ExtensibleRecord):
    """A record whose keys are free-form patterns rather than fixed names.

    Subclasses declare ``entries: dict[str, <value type>]``. Keys starting
    with ``x-`` are extensions; every other key is an entry. Entries keep the
    order in which they were first seen.

    Both ``entries`` and ``extensions`` are read-only mappings. Iterating a
    patterned record yields its entry keys, like a dict.
    """

    entries: Mapping[str, Any] = _Field(default_factory=dict, validate_default=True)

    @classmethod
    def fixed_keys(cls) -> dict[str, str]:
        return {}

    @field_validator("entries")
    @classmethod
    def _entries_are_not_extensions(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        misplaced = sorted(key for key in value if key.startswith(EXTENSION_PREFIX))
        if misplaced:
            raise ValueError(f"entry keys {misplaced} of {cls.__name__} start with {EXTENSION_PREFIX!r}")
        return MappingProxyType(dict(value))

    @model_validator(mode="after")
    def _extensions_are_prefixed(self) -> Self:
        unprefixed = sorted(key for key in self.extensions if not key.startswith(EXTENSION_PREFIX))
        if unprefixed:
            name = type(self).__name__
            raise ValueError(f"extension keys {unprefixed} of {name} lack the {EXTENSION_PREFIX!r} prefix")
        return self

    def __getitem__(self, key: str) -> Any:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.entries)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the entry stored under *key*, or *default*."""
        return self.entries.get(key, default)

    def keys(self) -> list[str]:
        return list(self.entries)

    def items(self) -> list[tuple[str, Any]]:
        return list(self.entries.items())


def frozen_extensions(extensions: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only copy of *extensions* that shares no containers with the caller's."""
    return MappingProxyType(copy.deepcopy(dict(extensions)))
