# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Encoding of model objects into structured values and JSON text.

Output order is deterministic: fixed fields in declaration order, absent
fields skipped, then extension keys sorted lexicographically. Entries of
patterned records (paths, responses, callbacks) keep their insertion order.
"""

from __future__ import annotations

import json
import logging
import math
from enum import Enum
from typing import Any

from oasmodel.model.base import ExtensibleRecord, PatternedRecord

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def to_value(value: ExtensibleRecord) -> dict[str, Any]:
    """Convert a model object into plain dicts, lists, and scalars.

    The result shares no containers with *value* and can be merged or
    edited freely before a final :func:`json.dumps`.

    Raises:
        ValueError: If *value* holds a NaN or infinite number, which JSON
            cannot represent.
    """
    return _record_to_value(value)


def serialize(value: ExtensibleRecord, pretty: bool = False) -> str:
    """Serialize a model object to JSON text.

    Args:
        value: Any record of the document model, usually a Document.
        pretty: Indent by two spaces instead of producing compact output.

    Returns:
        The JSON text.

    Raises:
        ValueError: If *value* holds a NaN or infinite number.
    """
    logger.debug("Serializing %s (pretty=%s)", type(value).__name__, pretty)
    data = to_value(value)
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


# ################
# Implementation
# ################


def _record_to_value(record: ExtensibleRecord) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if isinstance(record, PatternedRecord):
        for key, item in record.entries.items():
            out[key] = _to_value(item)
    else:
        declared = type(record).model_fields
        explicitly_set = record.model_fields_set
        for key, name in type(record).fixed_keys().items():
            item = getattr(record, name)
            # Untyped fields may hold a JSON null on purpose; only an unset one is absent.
            if item is None and not (declared[name].annotation is Any and name in explicitly_set):
                continue
            out[key] = _to_value(item)
    for key in sorted(record.extensions):
        out[key] = _to_value(record.extensions[key])
    return out


def _to_value(item: Any) -> Any:
    if isinstance(item, ExtensibleRecord):
        return _record_to_value(item)
    if isinstance(item, Enum):
        return item.value
    if isinstance(item, list):
        return [_to_value(element) for element in item]
    if isinstance(item, dict):
        return {key: _to_value(element) for key, element in item.items()}
    if isinstance(item, float) and not math.isfinite(item):
        raise ValueError(f"{item!r} has no JSON representation")
    return item
