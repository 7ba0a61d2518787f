# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for parse options and their YAML configuration file."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from oasmodel.codec import OptionsError, ParseOptions, RefSiblingPolicy, load_parse_options

# ###############
# Helpers
# ###############


def _write_options(tmp_path: Path, content: str) -> Path:
    """Write a parse options file and return its path."""
    options_file = tmp_path / "oasmodel.yaml"
    options_file.write_text(content, encoding="utf-8")
    return options_file


# ###############
# Normal Cases
# ###############


def test_defaults() -> None:
    options = ParseOptions()
    assert options.max_depth == 64
    assert options.ref_siblings is RefSiblingPolicy.REJECT
    assert options.check_version is True


def test_full_options_file(tmp_path: Path) -> None:
    content = """\
max-depth: 16
ref-siblings: preserve
check-version: false
"""
    options = load_parse_options(_write_options(tmp_path, content))

    assert options.max_depth == 16
    assert options.ref_siblings is RefSiblingPolicy.PRESERVE
    assert options.check_version is False


def test_partial_options_file_keeps_other_defaults(tmp_path: Path) -> None:
    options = load_parse_options(_write_options(tmp_path, "ref-siblings: drop\n"))
    assert options.ref_siblings is RefSiblingPolicy.DROP
    assert options.max_depth == 64


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    assert load_parse_options(_write_options(tmp_path, "")) == ParseOptions()


def test_options_are_frozen() -> None:
    options = ParseOptions()
    with pytest.raises(ValidationError):
        options.max_depth = 3  # type: ignore[misc]


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OptionsError, match="Cannot read parse options"):
        load_parse_options(tmp_path / "absent.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    with pytest.raises(OptionsError, match="Invalid YAML"):
        load_parse_options(_write_options(tmp_path, "max-depth: [unclosed\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    with pytest.raises(OptionsError, match="must be a YAML mapping"):
        load_parse_options(_write_options(tmp_path, "- max-depth\n- 3\n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    with pytest.raises(OptionsError, match="Invalid parse options"):
        load_parse_options(_write_options(tmp_path, "max-depht: 3\n"))


def test_unknown_policy_raises(tmp_path: Path) -> None:
    with pytest.raises(OptionsError):
        load_parse_options(_write_options(tmp_path, "ref-siblings: merge\n"))


@pytest.mark.parametrize("depth", [0, -1])
def test_depth_must_be_positive(tmp_path: Path, depth: int) -> None:
    with pytest.raises(OptionsError):
        load_parse_options(_write_options(tmp_path, f"max-depth: {depth}\n"))
