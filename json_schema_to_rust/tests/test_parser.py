"""
Tests for the schema parser (Schema AST).
"""

from __future__ import annotations

import pytest

from json_schema_to_rust.pipeline.errors import SchemaParseError
from json_schema_to_rust.pipeline.schema_ast import (
    AdditionalPropertiesMode,
    DefaultPresence,
    SchemaKind,
    SchemaParser,
)


@pytest.fixture
def parser():
    return SchemaParser()


def test_parse_text_and_dict_give_equal_trees(parser):
    text = '{"type": "object", "properties": {"a": {"type": "string"}}}'
    assert parser.parse(text) == parser.parse({"type": "object", "properties": {"a": {"type": "string"}}})


def test_parse_nested_structure(parser):
    root = parser.parse(
        {
            "type": "object",
            "title": "Root",
            "description": "The root",
            "required": ["id"],
            "properties": {
                "id": {"type": "integer", "minimum": 0, "maximum": 10},
                "tags": {"type": "array", "items": {"type": "string"}},
            },
        }
    )
    assert root.kind is SchemaKind.OBJECT
    assert root.title == "Root"
    assert root.description == "The root"
    assert root.required == frozenset({"id"})
    assert list(root.properties) == ["id", "tags"]

    id_node = root.properties["id"]
    assert id_node.kind is SchemaKind.INTEGER
    assert (id_node.minimum, id_node.maximum) == (0, 10)
    assert id_node.source_path == "/properties/id"

    tags = root.properties["tags"]
    assert tags.items.kind is SchemaKind.STRING
    assert tags.items.source_path == "/properties/tags/items"


@pytest.mark.parametrize(
    "schema,kind",
    [
        ({"type": "null"}, SchemaKind.UNKNOWN),
        ({"type": ["string", "null"]}, SchemaKind.UNKNOWN),
        ({"type": "date"}, SchemaKind.UNKNOWN),
        ({}, SchemaKind.UNKNOWN),
        ({"type": "number"}, SchemaKind.NUMBER),
        ({"type": "boolean"}, SchemaKind.BOOLEAN),
    ],
)
def test_kind_of_type_keyword(parser, schema, kind):
    assert parser.parse(schema).kind is kind


def test_default_keeps_absent_and_null_apart(parser):
    root = parser.parse(
        {
            "type": "object",
            "properties": {
                "absent": {"type": "string"},
                "null": {"type": "string", "default": None},
                "value": {"type": "string", "default": "x"},
            },
        }
    )
    assert root.properties["absent"].default.presence is DefaultPresence.ABSENT
    assert root.properties["null"].default.presence is DefaultPresence.NULL
    assert root.properties["null"].default.is_present
    assert root.properties["value"].default.presence is DefaultPresence.VALUE
    assert root.properties["value"].default.value == "x"


@pytest.mark.parametrize(
    "value,mode",
    [
        (False, AdditionalPropertiesMode.DISALLOWED),
        (True, AdditionalPropertiesMode.ALLOWED),
        ({}, AdditionalPropertiesMode.ALLOWED),
        ({"type": "integer"}, AdditionalPropertiesMode.SCHEMA),
    ],
)
def test_additional_properties_modes(parser, value, mode):
    root = parser.parse({"type": "object", "additionalProperties": value})
    assert root.additional_properties.mode is mode


def test_additional_properties_absent_is_allowed(parser):
    root = parser.parse({"type": "object"})
    assert root.additional_properties.mode is AdditionalPropertiesMode.ALLOWED
    assert root.additional_properties.schema is None


def test_additional_properties_schema_is_parsed(parser):
    root = parser.parse({"type": "object", "additionalProperties": {"type": "integer"}})
    assert root.additional_properties.schema.kind is SchemaKind.INTEGER
    assert root.additional_properties.schema.source_path == "/additionalProperties"


def test_string_enum_values(parser):
    assert parser.parse({"enum": ["a", "b"]}).string_enum_values == ("a", "b")
    assert parser.parse({"enum": ["a", 1]}).string_enum_values is None
    assert parser.parse({"enum": []}).string_enum_values is None


def test_unknown_keywords_are_ignored(parser):
    root = parser.parse({"type": "object", "$ref": "#/x", "pattern": "a+", "x-custom": 1})
    assert root.kind is SchemaKind.OBJECT


def test_property_keys_are_escaped_in_paths(parser):
    root = parser.parse({"type": "object", "properties": {"a/b": {"type": "string"}}})
    assert root.properties["a/b"].source_path == "/properties/a~1b"


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        "[1, 2]",
        '"object"',
        '{"type": "object", "properties": []}',
        '{"type": "object", "properties": {"a": 3}}',
        '{"type": "object", "required": "a"}',
        '{"type": "object", "required": [1]}',
    ],
)
def test_malformed_schemas_raise(parser, text):
    with pytest.raises(SchemaParseError):
        parser.parse(text)


def test_parse_error_carries_path(parser):
    with pytest.raises(SchemaParseError) as excinfo:
        parser.parse({"type": "object", "properties": {"a": {"properties": {"b": []}}}})
    assert excinfo.value.path == "/properties/a/properties/b"
    assert "/properties/a/properties/b" in str(excinfo.value)


if __name__ == "__main__":
    pytest.main([__file__])
