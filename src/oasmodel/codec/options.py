# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parse options and their YAML configuration file."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############


class OptionsError(Exception):
    """Raised when a parse options file cannot be read or is invalid."""


class RefSiblingPolicy(Enum):
    """What to do with keys that sit next to ``$ref``.

    OpenAPI 3.0 says such keys SHALL be ignored, later revisions give them
    meaning, so the choice is left to the caller.
    """

    REJECT = "reject"
    DROP = "drop"
    PRESERVE = "preserve"


class ParseOptions(BaseModel):
    """Knobs for the decoder.

    Attributes:
        max_depth: Maximum number of nested model objects in one document.
        ref_siblings: Policy for keys next to ``$ref``.
        check_version: Reject documents whose ``openapi`` field is not 3.0.x.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    max_depth: int = Field(default=64, alias="max-depth", ge=1)
    ref_siblings: RefSiblingPolicy = Field(default=RefSiblingPolicy.REJECT, alias="ref-siblings")
    check_version: bool = Field(default=True, alias="check-version")


def load_parse_options(path: Path) -> ParseOptions:
    """Load parse options from a YAML file.

    An empty file yields the defaults.

    Args:
        path: Path to the options file.

    Returns:
        A validated ParseOptions instance.

    Raises:
        OptionsError: If the file cannot be read, contains invalid YAML,
            or has unknown or ill-typed keys.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OptionsError(f"Cannot read parse options '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise OptionsError(f"Invalid YAML in parse options '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise OptionsError(f"{path}: parse options must be a YAML mapping")

    try:
        return ParseOptions.model_validate(data)
    except ValidationError as exc:
        raise OptionsError(f"Invalid parse options '{path}': {exc}") from exc
