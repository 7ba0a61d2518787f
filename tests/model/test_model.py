# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the document model entities and the extensible record discipline."""

import pytest
from pydantic import ValidationError

from oasmodel.codec import to_value
from oasmodel.model import (
    HTTP_METHODS,
    ApiKeySecurityScheme,
    Callback,
    Components,
    Document,
    ExternalDocs,
    Info,
    License,
    Operation,
    Parameter,
    ParameterLocation,
    PathItem,
    Paths,
    Response,
    Responses,
    Schema,
    Tag,
)

# ###############
# Helpers
# ###############


def _info() -> Info:
    return Info(title="Pet Store", version="1.0.0")


# ###############
# Minimal construction
# ###############


class TestMinimalConstruction:
    def test_document_needs_only_info(self) -> None:
        doc = Document(info=_info())
        assert doc.openapi == "3.0.3"
        assert doc.paths == Paths()
        assert doc.servers is None
        assert doc.components is None

    def test_info_requires_title_and_version(self) -> None:
        with pytest.raises(ValidationError):
            Info(title="No version")  # type: ignore[call-arg]

    def test_operation_defaults_to_empty_responses(self) -> None:
        op = Operation()
        assert len(op.responses) == 0

    def test_license_requires_name(self) -> None:
        with pytest.raises(ValidationError):
            License(url="https://example.com")  # type: ignore[call-arg]

    def test_construct_by_json_key(self) -> None:
        """Fields may be given by their JSON key as well as by attribute name."""
        info = Info.model_validate({"title": "T", "version": "1", "termsOfService": "https://example.com/tos"})
        assert info.terms_of_service == "https://example.com/tos"


class TestFrozen:
    def test_records_are_immutable(self) -> None:
        info = _info()
        with pytest.raises(ValidationError):
            info.title = "Changed"  # type: ignore[misc]

    def test_model_copy_leaves_original_untouched(self) -> None:
        info = _info()
        changed = info.model_copy(update={"description": "Now described"})
        assert info.description is None
        assert changed.description == "Now described"


# ###############
# Extensions
# ###############


class TestExtensions:
    def test_extensions_default_to_empty(self) -> None:
        assert _info().extensions == {}

    def test_extension_keys_are_kept(self) -> None:
        info = Info(title="T", version="1", extensions={"x-logo": {"url": "logo.png"}})
        assert info.extensions["x-logo"] == {"url": "logo.png"}

    def test_extension_may_not_shadow_fixed_field(self) -> None:
        with pytest.raises(ValidationError, match="collide with fixed fields"):
            Info(title="T", version="1", extensions={"title": "Other"})

    def test_extension_may_not_shadow_aliased_field(self) -> None:
        with pytest.raises(ValidationError):
            Info(title="T", version="1", extensions={"termsOfService": "https://example.com"})

    def test_fixed_keys_use_json_names_in_declaration_order(self) -> None:
        assert list(Info.fixed_keys()) == ["title", "description", "termsOfService", "contact", "license", "version"]
        assert Info.fixed_keys()["termsOfService"] == "terms_of_service"

    def test_extension_values_are_copied(self) -> None:
        logo = {"url": "logo.png", "sizes": [16]}
        info = Info(title="T", version="1", extensions={"x-logo": logo})
        logo["sizes"].append(32)
        logo["url"] = "other.png"
        assert info.extensions["x-logo"] == {"url": "logo.png", "sizes": [16]}

    def test_extensions_are_read_only(self) -> None:
        info = Info(title="T", version="1", extensions={"x-a": 1})
        with pytest.raises(TypeError):
            info.extensions["x-b"] = 2  # type: ignore[index]
        with pytest.raises(TypeError):
            _info().extensions["x-b"] = 2  # type: ignore[index]

    def test_fixed_keys_exclude_extensions(self) -> None:
        assert "extensions" not in Schema.fixed_keys()
        assert Schema.fixed_keys()["not"] == "not_"


# ###############
# Patterned records
# ###############


class TestPatternedRecords:
    def test_mapping_access(self) -> None:
        item = PathItem(summary="Pets")
        paths = Paths(entries={"/pets": item})
        assert "/pets" in paths
        assert "/owners" not in paths
        assert paths["/pets"] is item
        assert len(paths) == 1
        assert paths.keys() == ["/pets"]
        assert paths.items() == [("/pets", item)]

    def test_get_with_default(self) -> None:
        responses = Responses(entries={"200": Response(description="ok")})
        assert responses.get("404") is None
        assert responses.get("200") == Response(description="ok")

    def test_missing_entry_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            Paths()["/missing"]

    def test_entries_keep_insertion_order(self) -> None:
        responses = Responses(
            entries={
                "404": Response(description="missing"),
                "200": Response(description="ok"),
                "default": Response(description="error"),
            }
        )
        assert responses.keys() == ["404", "200", "default"]

    def test_entry_keys_may_not_look_like_extensions(self) -> None:
        with pytest.raises(ValidationError, match="start with"):
            Paths(entries={"x-a": PathItem()})

    def test_extension_keys_need_the_prefix(self) -> None:
        with pytest.raises(ValidationError, match="lack the"):
            Responses(extensions={"cache": True})

    def test_iteration_yields_entry_keys(self) -> None:
        paths = Paths(entries={"/b": PathItem(), "/a": PathItem()}, extensions={"x-a": 1})
        assert list(paths) == ["/b", "/a"]

    def test_entries_are_read_only(self) -> None:
        entries = {"/pets": PathItem()}
        paths = Paths(entries=entries)
        entries["/owners"] = PathItem()
        assert paths.keys() == ["/pets"]
        with pytest.raises(TypeError):
            paths.entries["/owners"] = PathItem()  # type: ignore[index]
        with pytest.raises(TypeError):
            Paths().entries["/owners"] = PathItem()  # type: ignore[index]

    def test_callback_holds_path_items(self) -> None:
        callback = Callback(entries={"{$request.body#/url}": PathItem(post=Operation())})
        assert callback["{$request.body#/url}"].post == Operation()


# ###############
# Parameters
# ###############


class TestParameter:
    def test_path_parameter_is_forced_required(self) -> None:
        param = Parameter(name="id", location=ParameterLocation.PATH, required=False)
        assert param.required is True

    def test_path_parameter_by_location_string(self) -> None:
        param = Parameter.model_validate({"name": "id", "in": "path"})
        assert param.required is True

    def test_query_parameter_required_is_absent_by_default(self) -> None:
        assert Parameter.query("limit").required is None

    @pytest.mark.parametrize(
        "factory, location",
        [
            (Parameter.path, ParameterLocation.PATH),
            (Parameter.query, ParameterLocation.QUERY),
            (Parameter.header, ParameterLocation.HEADER),
            (Parameter.cookie, ParameterLocation.COOKIE),
        ],
    )
    def test_location_constructors(self, factory, location: ParameterLocation) -> None:
        param = factory("p", Schema.string())
        assert param.name == "p"
        assert param.location is location
        assert param.schema_ == Schema.string()

    def test_unknown_location_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Parameter(name="body", location="body")  # type: ignore[arg-type]


# ###############
# Convenience constructors and helpers
# ###############


class TestSchemaConstructors:
    @pytest.mark.parametrize(
        "schema, expected",
        [
            (Schema.string(), {"type": "string"}),
            (Schema.string("email"), {"type": "string", "format": "email"}),
            (Schema.integer("int64"), {"type": "integer", "format": "int64"}),
            (Schema.number(), {"type": "number"}),
            (Schema.boolean(), {"type": "boolean"}),
            (Schema.object(), {"type": "object"}),
        ],
    )
    def test_scalar_shapes(self, schema: Schema, expected: dict) -> None:
        assert to_value(schema) == expected

    def test_array_of_strings(self) -> None:
        assert to_value(Schema.array(Schema.string())) == {"type": "array", "items": {"type": "string"}}

    def test_object_with_properties(self) -> None:
        schema = Schema.object({"id": Schema.integer()}, required=["id"])
        assert to_value(schema) == {"required": ["id"], "type": "object", "properties": {"id": {"type": "integer"}}}

    def test_additional_properties_accepts_bool_or_schema(self) -> None:
        assert Schema(additional_properties=False).additional_properties is False
        assert Schema(additional_properties=Schema.string()).additional_properties == Schema.string()


class TestMisc:
    def test_tag_simple(self) -> None:
        assert Tag.simple("pets") == Tag(name="pets")

    def test_path_item_operations_in_method_order(self) -> None:
        item = PathItem(post=Operation(summary="create"), get=Operation(summary="list"))
        assert list(item.operations()) == ["get", "post"]
        assert set(HTTP_METHODS) >= set(item.operations())

    def test_external_docs_requires_url(self) -> None:
        with pytest.raises(ValidationError):
            ExternalDocs(description="no url")  # type: ignore[call-arg]

    def test_api_key_scheme_type_is_fixed(self) -> None:
        scheme = ApiKeySecurityScheme(name="api_key", location=ParameterLocation.HEADER)
        assert scheme.type == "apiKey"
        assert to_value(scheme) == {"type": "apiKey", "name": "api_key", "in": "header"}

    def test_components_registries_are_absent_by_default(self) -> None:
        assert to_value(Components()) == {}
