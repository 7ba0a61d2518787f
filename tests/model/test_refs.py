# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the reference-or-inline wrapper."""

import logging

import pytest

from oasmodel.codec import parse, serialize, to_value
from oasmodel.model import (
    MediaType,
    Reference,
    ReferenceVariantError,
    Response,
    Schema,
    callback_ref,
    component_ref,
    example_ref,
    header_ref,
    link_ref,
    parameter_ref,
    request_body_ref,
    response_ref,
    schema_ref,
    security_scheme_ref,
)

# ###############
# Construction
# ###############


class TestReferenceConstruction:
    def test_positional_pointer(self) -> None:
        assert Reference("#/components/schemas/User").ref == "#/components/schemas/User"

    def test_keyword_pointer(self) -> None:
        assert Reference(ref="#/components/schemas/User") == Reference("#/components/schemas/User")

    def test_by_json_key(self) -> None:
        assert Reference.model_validate({"$ref": "other.yaml#/Pet"}).ref == "other.yaml#/Pet"

    @pytest.mark.parametrize(
        "factory, pointer",
        [
            (schema_ref, "#/components/schemas/Pet"),
            (response_ref, "#/components/responses/Pet"),
            (parameter_ref, "#/components/parameters/Pet"),
            (example_ref, "#/components/examples/Pet"),
            (request_body_ref, "#/components/requestBodies/Pet"),
            (header_ref, "#/components/headers/Pet"),
            (security_scheme_ref, "#/components/securitySchemes/Pet"),
            (link_ref, "#/components/links/Pet"),
            (callback_ref, "#/components/callbacks/Pet"),
        ],
    )
    def test_registry_shortcuts(self, factory, pointer: str) -> None:
        assert factory("Pet").ref == pointer

    def test_component_ref_does_not_escape_reserved_characters(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="oasmodel.model.refs"):
            ref = component_ref("schemas", "a/b")
        assert ref.ref == "#/components/schemas/a/b"
        assert "not escaped" in caplog.text

    def test_plain_component_name_logs_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="oasmodel.model.refs"):
            component_ref("schemas", "User")
        assert caplog.records == []


class TestComponentSplit:
    def test_local_component_pointer(self) -> None:
        assert schema_ref("User").component == ("schemas", "User")

    @pytest.mark.parametrize(
        "pointer",
        [
            "https://example.com/schemas/user.json",
            "#/components/schemas",
            "#/components/schemas/",
            "#/paths/~1users/get",
            "#/components/schemas/a/b",
        ],
    )
    def test_other_pointers_have_no_component(self, pointer: str) -> None:
        assert Reference(pointer).component is None


# ###############
# Variant queries
# ###############


class TestVariants:
    def test_reference_variant(self) -> None:
        ref = schema_ref("User")
        assert ref.is_reference()
        assert not ref.is_inline()
        assert ref.expect_reference() is ref

    def test_inline_variant(self) -> None:
        schema = Schema.string()
        assert schema.is_inline()
        assert not schema.is_reference()
        assert schema.unwrap() is schema

    def test_unwrap_reference_raises(self) -> None:
        with pytest.raises(ReferenceVariantError, match="#/components/schemas/User"):
            schema_ref("User").unwrap()

    def test_expect_reference_on_inline_raises(self) -> None:
        with pytest.raises(ReferenceVariantError, match="Schema"):
            Schema.string().expect_reference()

    def test_variant_error_is_a_type_error(self) -> None:
        assert issubclass(ReferenceVariantError, TypeError)


# ###############
# Transparency on the wire
# ###############


class TestWireForm:
    def test_reference_serializes_to_bare_pointer(self) -> None:
        assert serialize(schema_ref("User")) == '{"$ref":"#/components/schemas/User"}'

    def test_inline_value_has_no_wrapper(self) -> None:
        media = MediaType(schema_=Schema.string())
        assert to_value(media) == {"schema": {"type": "string"}}

    def test_reference_in_field(self) -> None:
        media = MediaType(schema_=schema_ref("User"))
        assert to_value(media) == {"schema": {"$ref": "#/components/schemas/User"}}

    def test_decoding_picks_variant_by_ref_key(self) -> None:
        ref = parse('{"schema": {"$ref": "#/components/schemas/User"}}', into=MediaType).schema_
        inline = parse('{"schema": {"type": "string"}}', into=MediaType).schema_
        assert isinstance(ref, Reference)
        assert isinstance(inline, Schema)

    def test_response_reference_round_trip(self) -> None:
        text = '{"description":"ok","links":{"next":{"$ref":"#/components/links/Next"}}}'
        response = parse(text, into=Response)
        assert response.links["next"] == link_ref("Next")
        assert serialize(response) == text
