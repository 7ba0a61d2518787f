# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Round-trip and rejection tests over the fixture corpora."""

import json
from pathlib import Path

import pytest

from oasmodel.codec import ParseError, parse, serialize, to_value, try_parse
from oasmodel.model import Document

# ###############
# Helpers
# ###############

_FIXTURES = Path(__file__).parent.parent / "fixtures"
_ACCEPTED = sorted((_FIXTURES / "accepted").glob("*.json"))
_REJECTED = sorted((_FIXTURES / "rejected").glob("*.json"))


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


# ###############
# Accepted corpus
# ###############


def test_corpora_are_not_empty() -> None:
    assert _ACCEPTED
    assert _REJECTED


@pytest.mark.parametrize("path", _ACCEPTED, ids=lambda p: p.stem)
class TestAcceptedCorpus:
    def test_parses_to_document(self, path: Path) -> None:
        assert isinstance(parse(_read(path)), Document)

    def test_nothing_is_lost(self, path: Path) -> None:
        """Every key and value of the source survives, known or not."""
        assert to_value(parse(_read(path))) == json.loads(_read(path))

    def test_reparse_is_equal(self, path: Path) -> None:
        doc = parse(_read(path))
        assert parse(serialize(doc)) == doc
        assert parse(serialize(doc, pretty=True)) == doc

    def test_serialization_is_idempotent(self, path: Path) -> None:
        once = serialize(parse(_read(path)))
        assert serialize(parse(once)) == once


# ###############
# Rejected corpus
# ###############


@pytest.mark.parametrize("path", _REJECTED, ids=lambda p: p.stem)
def test_rejected_documents_raise_a_classified_error(path: Path) -> None:
    """File names start with the expected error category."""
    expected_category = path.stem.split("_", 1)[0]
    with pytest.raises(ParseError) as exc_info:
        parse(_read(path))
    assert exc_info.value.category == expected_category


@pytest.mark.parametrize("path", _REJECTED, ids=lambda p: p.stem)
def test_try_parse_reports_rejection(path: Path) -> None:
    outcome = try_parse(_read(path))
    assert not outcome.ok
    assert isinstance(outcome.error, ParseError)
