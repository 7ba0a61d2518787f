# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Decoding of JSON text and structured values into the document model.

Decoding walks the pydantic field declarations of each record: a key that
names a fixed field is checked against the JSON kind its annotation implies,
every other key is copied into ``extensions``. Decoding is all-or-nothing;
the first problem raises a :class:`~oasmodel.codec.errors.ParseError` and no
partial document escapes.
"""

from __future__ import annotations

import json
import logging
import math
import re
import types
from collections.abc import Sequence
from enum import Enum
from typing import Any, Literal, TypeVar, Union, get_args, get_origin

from pydantic import ValidationError

from oasmodel.codec.errors import (
    AmbiguousReference,
    DecodeError,
    DuplicateExtensionKey,
    NestingTooDeep,
    ParseError,
    ParseOutcome,
    PathSegment,
    SchemaMismatch,
    UnsupportedVersion,
)
from oasmodel.codec.options import ParseOptions, RefSiblingPolicy
from oasmodel.model.base import EXTENSION_PREFIX, ExtensibleRecord, PatternedRecord
from oasmodel.model.common import ParameterLocation
from oasmodel.model.entities import Document, Parameter
from oasmodel.model.refs import Reference

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

R = TypeVar("R", bound=ExtensibleRecord)


class JsonObject(dict):
    """A decoded JSON object that remembers keys repeated in the source."""

    duplicates: tuple[str, ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Sequence[tuple[str, Any]]) -> JsonObject:
        obj = cls()
        repeated = []
        for key, value in pairs:
            if key in obj:
                repeated.append(key)
            obj[key] = value
        if repeated:
            obj.duplicates = tuple(repeated)
        return obj


def parse(text: str, into: type[R] = Document, options: ParseOptions | None = None) -> R:
    """Parse JSON text into a model object.

    Args:
        text: The JSON document.
        into: The record class to decode the top-level object as.
        options: Decoder settings; defaults apply when omitted.

    Returns:
        A frozen instance of *into*.

    Raises:
        DecodeError: If the text is not valid JSON, including the non-standard
            ``NaN`` and ``Infinity`` constants.
        NestingTooDeep: If the input nests deeper than allowed.
        DuplicateExtensionKey: If an object repeats a key.
        SchemaMismatch: If the tree does not fit the model.
        AmbiguousReference: If ``$ref`` has siblings under the ``reject`` policy.
    """
    logger.debug("Parsing %d characters of JSON as %s", len(text), into.__name__)
    try:
        data = json.loads(text, object_pairs_hook=JsonObject.from_pairs, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise DecodeError(exc.msg, exc.lineno, exc.colno) from exc
    except _NonFiniteConstant as exc:
        raise _constant_error(text, exc.name) from None
    except RecursionError:
        raise NestingTooDeep(None) from None
    return from_value(data, into=into, options=options)


def from_value(data: Any, into: type[R] = Document, options: ParseOptions | None = None) -> R:
    """Decode an already-parsed structured value (dicts, lists, scalars) into a model object.

    Raises the same errors as :func:`parse`, except :class:`DecodeError`.
    """
    options = options or ParseOptions()
    if options.check_version and issubclass(into, Document) and isinstance(data, dict):
        version = data.get("openapi")
        if isinstance(version, str) and not _DIALECT.fullmatch(version):
            raise UnsupportedVersion(version)
    try:
        return _Decoder(options).record(into, data, ())
    except RecursionError:
        raise NestingTooDeep(None) from None


def try_parse(text: str, into: type[R] = Document, options: ParseOptions | None = None) -> ParseOutcome:
    """Parse like :func:`parse` but report failure in the returned outcome instead of raising."""
    try:
        return ParseOutcome(value=parse(text, into=into, options=options))
    except ParseError as exc:
        logger.debug("Parse failed: %s", exc)
        return ParseOutcome(error=exc)


# ################
# Implementation
# ################

_DIALECT = re.compile(r"3\.0\.\d+")

_UNION_TYPES = (Union, types.UnionType)

# A JSON string literal, or one of the constants Python's json module accepts beyond the grammar.
_CONSTANT_OR_STRING = re.compile(r'"(?:[^"\\]|\\.)*"|(-?Infinity|NaN)')


class _NonFiniteConstant(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


def _reject_constant(name: str) -> float:
    raise _NonFiniteConstant(name)


def _constant_error(text: str, name: str) -> DecodeError:
    reason = f"{name} is not a valid JSON value"
    for match in _CONSTANT_OR_STRING.finditer(text):
        if match.group(1):
            position = match.start(1)
            line = text.count("\n", 0, position) + 1
            column = position - text.rfind("\n", 0, position)
            return DecodeError(reason, line, column)
    return DecodeError(reason, 0, 0)


class _Decoder:
    """Recursive walker from JSON values to model objects."""

    def __init__(self, options: ParseOptions) -> None:
        self._options = options
        self._depth = 0

    def record(self, cls: type[R], raw: Any, path: tuple[PathSegment, ...]) -> R:
        if not isinstance(raw, dict):
            raise SchemaMismatch.wrong_kind("object", raw, path)
        self._check_duplicates(raw, path)
        self._depth += 1
        try:
            if self._depth > self._options.max_depth:
                raise NestingTooDeep(self._options.max_depth, path)
            if issubclass(cls, PatternedRecord):
                fields = self._patterned_fields(cls, raw, path)
            else:
                fields = self._fixed_fields(cls, raw, path)
            if issubclass(cls, Parameter):
                _check_path_parameter(raw, path)
            try:
                return cls(**fields)
            except ValidationError as exc:
                raise SchemaMismatch(str(exc), path) from exc
        finally:
            self._depth -= 1

    def value(self, annotation: Any, raw: Any, path: tuple[PathSegment, ...]) -> Any:
        if annotation is Any:
            return self.plain(raw, path)
        origin = get_origin(annotation)
        if origin in _UNION_TYPES:
            return self._union(get_args(annotation), raw, path)
        if origin is Literal:
            choices = get_args(annotation)
            if not isinstance(raw, str) or raw not in choices:
                raise SchemaMismatch(f"expected one of {list(choices)}, got {raw!r}", path)
            return raw
        if origin is list:
            if not isinstance(raw, list):
                raise SchemaMismatch.wrong_kind("array", raw, path)
            (item_type,) = get_args(annotation)
            return [self.value(item_type, item, (*path, index)) for index, item in enumerate(raw)]
        if origin is dict:
            if not isinstance(raw, dict):
                raise SchemaMismatch.wrong_kind("object", raw, path)
            self._check_duplicates(raw, path)
            _, item_type = get_args(annotation)
            return {key: self.value(item_type, item, (*path, key)) for key, item in raw.items()}
        if isinstance(annotation, type):
            if issubclass(annotation, ExtensibleRecord):
                return self.record(annotation, raw, path)
            if issubclass(annotation, Enum):
                return _enum_member(annotation, raw, path)
            return _scalar(annotation, raw, path)
        raise TypeError(f"unsupported field annotation {annotation!r}")

    def plain(self, raw: Any, path: tuple[PathSegment, ...]) -> Any:
        """Copy an uninterpreted value into plain dicts and lists."""
        if isinstance(raw, dict):
            self._check_duplicates(raw, path)
            return {key: self.plain(item, (*path, key)) for key, item in raw.items()}
        if isinstance(raw, list):
            return [self.plain(item, (*path, index)) for index, item in enumerate(raw)]
        if raw is None or isinstance(raw, (str, bool, int)):
            return raw
        if isinstance(raw, float):
            return _finite(raw, path)
        raise SchemaMismatch(f"expected a JSON value, got {type(raw).__name__}", path)

    def _fixed_fields(self, cls: type[ExtensibleRecord], raw: dict, path: tuple[PathSegment, ...]) -> dict[str, Any]:
        fixed = cls.fixed_keys()
        declared = cls.model_fields
        for key, name in fixed.items():
            if key not in raw and (declared[name].is_required() or key in cls.wire_required):
                raise SchemaMismatch.missing((*path, key))

        fields: dict[str, Any] = {}
        extensions: dict[str, Any] = {}
        for key, item in raw.items():
            name = fixed.get(key)
            if name is None:
                extensions[key] = self.plain(item, (*path, key))
            else:
                fields[name] = self.value(declared[name].annotation, item, (*path, key))
        fields["extensions"] = extensions
        return fields

    def _patterned_fields(self, cls: type[PatternedRecord], raw: dict, path: tuple[PathSegment, ...]) -> dict[str, Any]:
        _, entry_type = get_args(cls.model_fields["entries"].annotation)
        entries: dict[str, Any] = {}
        extensions: dict[str, Any] = {}
        for key, item in raw.items():
            if not isinstance(key, str):
                raise SchemaMismatch(f"expected string keys, got {key!r}", path)
            if key.startswith(EXTENSION_PREFIX):
                extensions[key] = self.plain(item, (*path, key))
            else:
                entries[key] = self.value(entry_type, item, (*path, key))
        return {"entries": entries, "extensions": extensions}

    def _union(self, members: tuple[Any, ...], raw: Any, path: tuple[PathSegment, ...]) -> Any:
        candidates = [member for member in members if member is not type(None)]
        if len(candidates) == 1:
            return self.value(candidates[0], raw, path)
        if set(candidates) <= {int, float}:
            return _scalar(float, raw, path)
        if bool in candidates:
            if isinstance(raw, bool):
                return raw
            candidates.remove(bool)
        if Reference in candidates:
            if isinstance(raw, dict) and "$ref" in raw:
                return self._reference(raw, path)
            candidates.remove(Reference)
        if len(candidates) == 1:
            return self.value(candidates[0], raw, path)
        return self._tagged(candidates, raw, path)

    def _reference(self, raw: dict, path: tuple[PathSegment, ...]) -> Reference:
        self._check_duplicates(raw, path)
        target = raw["$ref"]
        if not isinstance(target, str):
            raise SchemaMismatch.wrong_kind("string", target, (*path, "$ref"))
        siblings = [key for key in raw if key != "$ref"]
        extensions: dict[str, Any] = {}
        if siblings:
            policy = self._options.ref_siblings
            if policy is RefSiblingPolicy.REJECT:
                raise AmbiguousReference(siblings, path)
            if policy is RefSiblingPolicy.PRESERVE:
                extensions = {key: self.plain(raw[key], (*path, key)) for key in siblings}
            else:
                logger.debug("Dropping keys %s next to $ref at %s", siblings, path)
        return Reference(ref=target, extensions=extensions)

    def _tagged(self, members: list[type[ExtensibleRecord]], raw: Any, path: tuple[PathSegment, ...]) -> Any:
        """Pick one of several record classes by the value of their ``type`` key."""
        if not isinstance(raw, dict):
            raise SchemaMismatch.wrong_kind("object", raw, path)
        kinds = {member.model_fields["type"].default: member for member in members}
        if "type" not in raw:
            raise SchemaMismatch.missing((*path, "type"))
        kind = raw["type"]
        if not isinstance(kind, str) or kind not in kinds:
            raise SchemaMismatch(f"expected one of {sorted(kinds)}, got {kind!r}", (*path, "type"))
        return self.record(kinds[kind], raw, path)

    @staticmethod
    def _check_duplicates(raw: dict, path: tuple[PathSegment, ...]) -> None:
        duplicates = getattr(raw, "duplicates", ())
        if duplicates:
            raise DuplicateExtensionKey(duplicates[0], path)


def _scalar(expected: type, raw: Any, path: tuple[PathSegment, ...]) -> Any:
    if expected is bool:
        ok = isinstance(raw, bool)
        kind = "boolean"
    elif expected is int:
        ok = isinstance(raw, int) and not isinstance(raw, bool)
        kind = "integer"
    elif expected is float:
        ok = isinstance(raw, (int, float)) and not isinstance(raw, bool)
        kind = "number"
    elif expected is str:
        ok = isinstance(raw, str)
        kind = "string"
    else:
        raise TypeError(f"unsupported scalar type {expected!r}")
    if not ok:
        raise SchemaMismatch.wrong_kind(kind, raw, path)
    if isinstance(raw, float):
        return _finite(raw, path)
    return raw


def _finite(raw: float, path: tuple[PathSegment, ...]) -> float:
    if not math.isfinite(raw):
        raise SchemaMismatch(f"expected a finite number, got {raw!r}", path)
    return raw


def _enum_member(enum: type[Enum], raw: Any, path: tuple[PathSegment, ...]) -> Enum:
    members = {member.value: member for member in enum}
    if not isinstance(raw, str) or raw not in members:
        raise SchemaMismatch(f"expected one of {sorted(members)}, got {raw!r}", path)
    return members[raw]


def _check_path_parameter(raw: dict, path: tuple[PathSegment, ...]) -> None:
    if raw.get("in") == ParameterLocation.PATH.value and raw.get("required") is not True:
        raise SchemaMismatch("path parameters must be required", (*path, "required"))
