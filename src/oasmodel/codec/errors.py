# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while turning text or structured values into the document model.

Every error carries ``path``, the keys and indices leading from the document
root to the offending value, and a ``category`` of ``"syntax"`` (the input
is not a well-formed tree) or ``"schema"`` (the tree does not fit the model).
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

# ###############
# Public Interface
# ###############

PathSegment = str | int


def format_path(path: Sequence[PathSegment]) -> str:
    """Render a key path as ``paths["/pets"].get.parameters[0].in``."""
    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif _BARE_KEY.fullmatch(segment):
            parts.append(f".{segment}" if parts else segment)
        else:
            parts.append(f"[{json.dumps(segment)}]")
    return "".join(parts) or "<root>"


class ParseError(Exception):
    """Base class of all parse-time failures.

    Attributes:
        path: Keys and indices from the document root to the failing value.
        reason: The message without the rendered path.
    """

    category: ClassVar[str] = "schema"

    def __init__(self, reason: str, path: Sequence[PathSegment] = ()) -> None:
        self.path = tuple(path)
        self.reason = reason
        super().__init__(f"{format_path(self.path)}: {reason}" if self.path else reason)


class DecodeError(ParseError):
    """The input text is not well-formed JSON or YAML.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    category = "syntax"

    def __init__(self, reason: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {reason}")
        self.line = line
        self.column = column


class NestingTooDeep(ParseError):
    """The input nests objects deeper than the configured limit."""

    category = "syntax"

    def __init__(self, limit: int | None, path: Sequence[PathSegment] = ()) -> None:
        if limit is None:
            reason = "nesting exceeds the interpreter recursion limit"
        else:
            reason = f"nesting exceeds the limit of {limit} objects"
        super().__init__(reason, path)
        self.limit = limit


class DuplicateExtensionKey(ParseError):
    """A key appears more than once in the same JSON object."""

    category = "syntax"

    def __init__(self, key: str, path: Sequence[PathSegment]) -> None:
        super().__init__(f"key {key!r} appears more than once", path)
        self.key = key


class SchemaMismatch(ParseError):
    """A known key holds a value of the wrong kind, or a required key is missing."""

    @classmethod
    def wrong_kind(cls, expected: str, value: Any, path: Sequence[PathSegment]) -> SchemaMismatch:
        return cls(f"expected {expected}, got {json_kind(value)}", path)

    @classmethod
    def missing(cls, path: Sequence[PathSegment]) -> SchemaMismatch:
        return cls("required field is missing", path)


class UnsupportedVersion(SchemaMismatch):
    """The ``openapi`` field names a dialect other than 3.0.x."""

    def __init__(self, version: str) -> None:
        super().__init__(f"unsupported OpenAPI version {version!r}, expected 3.0.x", ("openapi",))
        self.version = version


class AmbiguousReference(ParseError):
    """An object carries ``$ref`` together with other keys."""

    def __init__(self, siblings: Sequence[str], path: Sequence[PathSegment]) -> None:
        super().__init__(f"$ref cannot be combined with {', '.join(repr(key) for key in siblings)}", path)
        self.siblings = tuple(siblings)


@dataclass
class ParseOutcome:
    """Result of a non-raising parse: exactly one of ``value`` and ``error`` is set."""

    value: Any = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        """Return True if parsing succeeded."""
        return self.error is None


def json_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


# ################
# Implementation
# ################

_BARE_KEY = re.compile(r"[A-Za-z_$][A-Za-z0-9_$-]*")
