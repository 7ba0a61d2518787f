# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML input and output for documents.

YAML is read with a safe loader restricted to JSON-compatible values:
mapping keys become strings (``200:`` is the status code ``"200"``) and
timestamps stay as the text they were written as. Only ``true`` and
``false`` are booleans, as in YAML 1.2, so ``on``, ``off``, ``yes`` and ``no``
stay strings. Tags with no JSON counterpart (``!!binary``, ``!!set``,
``!!omap``, ``!!pairs``) and the numbers ``.nan`` and ``.inf`` are syntax
errors. Repeated keys are reported like repeated JSON keys.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

import yaml

from oasmodel.codec.decode import JsonObject, R, from_value
from oasmodel.codec.encode import to_value
from oasmodel.codec.errors import DecodeError, NestingTooDeep
from oasmodel.codec.options import ParseOptions
from oasmodel.model.base import ExtensibleRecord
from oasmodel.model.entities import Document

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse_yaml(text: str, into: type[R] = Document, options: ParseOptions | None = None) -> R:
    """Parse YAML text into a model object.

    Raises the same errors as :func:`oasmodel.codec.decode.parse`.
    """
    logger.debug("Parsing %d characters of YAML as %s", len(text), into.__name__)
    try:
        data = yaml.load(text, Loader=_DocumentLoader)  # noqa: S506 - _DocumentLoader is a SafeLoader
    except yaml.MarkedYAMLError as exc:
        mark = exc.problem_mark or exc.context_mark
        line, column = (mark.line + 1, mark.column + 1) if mark is not None else (0, 0)
        raise DecodeError(exc.problem or str(exc), line, column) from exc
    except yaml.YAMLError as exc:
        raise DecodeError(str(exc), 0, 0) from exc
    except RecursionError:
        raise NestingTooDeep(None) from None
    return from_value(data, into=into, options=options)


def serialize_yaml(value: ExtensibleRecord) -> str:
    """Serialize a model object to block-style YAML, keeping the JSON key order."""
    logger.debug("Serializing %s to YAML", type(value).__name__)
    return yaml.safe_dump(to_value(value), default_flow_style=False, sort_keys=False, allow_unicode=True)


# ################
# Implementation
# ################


_MERGE_TAG = "tag:yaml.org,2002:merge"
_BOOL_TAG = "tag:yaml.org,2002:bool"


class _DocumentLoader(yaml.SafeLoader):
    """SafeLoader producing only JSON-compatible values."""


def _construct_mapping(loader: yaml.SafeLoader, node: yaml.MappingNode) -> JsonObject:
    own_count = sum(1 for key_node, _ in node.value if key_node.tag != _MERGE_TAG)
    # Merged pairs are placed in front of the mapping's own pairs.
    loader.flatten_mapping(node)
    pairs = []
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=True)
        value = loader.construct_object(value_node, deep=True)
        pairs.append((_key_text(key), value))

    split = len(pairs) - own_count
    own = JsonObject.from_pairs(pairs[split:])
    if split == 0:
        return own
    # Own keys override merged ones; only repeats among own keys are errors.
    mapping = JsonObject({**dict(pairs[:split]), **own})
    mapping.duplicates = own.duplicates
    return mapping


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def _construct_timestamp(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> str:
    return loader.construct_scalar(node)


def _construct_float(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> float:
    value = loader.construct_yaml_float(node)
    if not math.isfinite(value):
        raise yaml.constructor.ConstructorError(None, None, f"{node.value!r} is not a finite number", node.start_mark)
    return value


def _refuse(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    raise yaml.constructor.ConstructorError(None, None, f"{node.tag} values have no JSON form", node.start_mark)


# Drop the YAML 1.1 booleans (yes/no/on/off) in favor of the YAML 1.2 core schema.
_DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_DocumentLoader.add_implicit_resolver(_BOOL_TAG, re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"), list("tTfF"))


_DocumentLoader.add_constructor(yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_mapping)
_DocumentLoader.add_constructor("tag:yaml.org,2002:timestamp", _construct_timestamp)
_DocumentLoader.add_constructor("tag:yaml.org,2002:float", _construct_float)
for _tag in ("binary", "set", "omap", "pairs"):
    _DocumentLoader.add_constructor(f"tag:yaml.org,2002:{_tag}", _refuse)
