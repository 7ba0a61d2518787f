# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parsing and serialization of OpenAPI documents: JSON, YAML, and structured values."""

from oasmodel.codec.decode import from_value, parse, try_parse
from oasmodel.codec.encode import serialize, to_value
from oasmodel.codec.errors import (
    AmbiguousReference,
    DecodeError,
    DuplicateExtensionKey,
    NestingTooDeep,
    ParseError,
    ParseOutcome,
    SchemaMismatch,
    UnsupportedVersion,
    format_path,
)
from oasmodel.codec.options import OptionsError, ParseOptions, RefSiblingPolicy, load_parse_options
from oasmodel.codec.yaml_io import parse_yaml, serialize_yaml

__all__ = [
    "parse",
    "from_value",
    "try_parse",
    "serialize",
    "to_value",
    "parse_yaml",
    "serialize_yaml",
    "ParseOptions",
    "RefSiblingPolicy",
    "OptionsError",
    "load_parse_options",
    "ParseError",
    "ParseOutcome",
    "DecodeError",
    "NestingTooDeep",
    "DuplicateExtensionKey",
    "SchemaMismatch",
    "UnsupportedVersion",
    "AmbiguousReference",
    "format_path",
]
