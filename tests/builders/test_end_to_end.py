# Copyright 2026 oasmodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Builds whole documents and checks them against their JSON form."""

import json

from oasmodel.builders import (
    ComponentsBuilder,
    SchemaBuilder,
    api,
    delete,
    error,
    get,
    json_body,
    path_param,
    post,
    query_param,
    response,
)
from oasmodel.codec import parse, parse_yaml, serialize, serialize_yaml
from oasmodel.model import HttpSecurityScheme, Schema, response_ref, schema_ref


def test_minimal_user_api() -> None:
    doc = (
        api("User API", "1.0.0")
        .add_operation("/users/{id}", "get", get("Get user").add_parameter(path_param("id")))
        .build()
    )
    assert serialize(doc) == (
        '{"openapi":"3.0.3","info":{"title":"User API","version":"1.0.0"},'
        '"paths":{"/users/{id}":{"get":{"summary":"Get user",'
        '"parameters":[{"name":"id","in":"path","required":true,"schema":{"type":"string"}}],'
        '"responses":{"200":{"description":"Success"}}}}}}'
    )
    assert parse(serialize(doc)) == doc


def test_pet_store() -> None:
    pet = (
        SchemaBuilder.object()
        .add_property("id", Schema.integer("int64"), required=True)
        .add_property("name", Schema.string(), required=True)
        .add_property("tag", SchemaBuilder.string().with_nullable())
        .with_extension("x-go-type", "Pet")
    )
    components = (
        ComponentsBuilder()
        .add_schema("Pet", pet)
        .add_schema("Pets", Schema.array(schema_ref("Pet")))
        .add_response("NotFound", error("Not Found"))
        .add_security_scheme("bearer", HttpSecurityScheme(scheme="bearer", bearer_format="JWT"))
    )
    doc = (
        api("Pet Store", "1.0.0")
        .with_description("A sample API")
        .add_server("https://petstore.example.com/v1")
        .add_tag("pets")
        .add_operation(
            "/pets",
            "get",
            get("List pets")
            .add_tag("pets")
            .add_parameter(query_param("limit", Schema.integer("int32")))
            .add_response("200", response("A list of pets").add_json_content(schema_ref("Pets"))),
        )
        .add_operation(
            "/pets",
            "post",
            post("Create a pet").add_tag("pets").with_request_body(json_body(schema_ref("Pet"), required=True)),
        )
        .add_operation(
            "/pets/{petId}",
            "delete",
            delete("Delete a pet").add_parameter(path_param("petId")).add_response("404", response_ref("NotFound")),
        )
        .with_components(components)
        .add_security_requirement({"bearer": []})
        .with_extension("x-audience", "public")
        .build()
    )

    value = json.loads(serialize(doc))
    assert list(value) == ["openapi", "info", "servers", "paths", "components", "security", "tags", "x-audience"]
    assert list(value["paths"]) == ["/pets", "/pets/{petId}"]
    assert list(value["paths"]["/pets"]) == ["get", "post"]
    assert value["paths"]["/pets/{petId}"]["delete"]["responses"] == {
        "204": {"description": "Deleted"},
        "404": {"$ref": "#/components/responses/NotFound"},
    }
    assert value["components"]["schemas"]["Pet"]["required"] == ["id", "name"]
    assert value["components"]["schemas"]["Pet"]["x-go-type"] == "Pet"
    bearer = value["components"]["securitySchemes"]["bearer"]
    assert bearer == {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"}

    assert parse(serialize(doc)) == doc
    assert parse_yaml(serialize_yaml(doc)) == doc


def test_parse_minimal_document_and_back() -> None:
    text = '{"openapi":"3.0.0","info":{"title":"T","version":"1"},"paths":{}}'
    doc = parse(text)
    assert doc.info.title == "T"
    assert len(doc.paths) == 0
    assert json.loads(serialize(doc)) == json.loads(text)


def test_schema_extension_survives() -> None:
    assert serialize(parse('{"type":"string","x-nullable":true}', into=Schema)) == '{"type":"string","x-nullable":true}'


def test_latest_description_wins() -> None:
    doc = api("T", "1").with_description("first").with_description("second").build()
    assert doc.info.description == "second"
    assert "first" not in serialize(doc)
