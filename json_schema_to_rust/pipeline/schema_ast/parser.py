"""
JSON Schema parser that builds an AST.

Phase 1 of the pipeline: parse schema text into SchemaNode trees without
any type resolution or naming. Only structural well-formedness is checked;
unknown keywords are ignored.
"""

from __future__ import annotations

import json
from typing import Any

from ...utils import json_pointer
from ..errors import SchemaParseError
from .nodes import (
    AdditionalProperties,
    AdditionalPropertiesMode,
    SchemaDefault,
    SchemaKind,
    SchemaNode,
)


class SchemaParser:
    """Parses JSON Schema into an AST."""

    KINDS = {kind.value: kind for kind in SchemaKind if kind is not SchemaKind.UNKNOWN}

    def load(self, schema_text: str) -> dict[str, Any]:
        """
        Decode schema text into a dictionary.

        Raises:
            SchemaParseError: If the text is not JSON or not a JSON object
        """
        try:
            document = json.loads(schema_text)
        except json.JSONDecodeError as e:
            raise SchemaParseError(f"Schema is not valid JSON: {e}") from e
        if not isinstance(document, dict):
            raise SchemaParseError(f"Schema must be a JSON object, got {type(document).__name__}")
        return document

    def parse(self, schema: str | dict[str, Any]) -> SchemaNode:
        """
        Parse a JSON Schema into an AST.

        Args:
            schema: Schema text, or an already-decoded schema dictionary

        Returns:
            The root SchemaNode
        """
        if isinstance(schema, str):
            schema = self.load(schema)
        elif not isinstance(schema, dict):
            raise SchemaParseError(f"Schema must be a JSON object, got {type(schema).__name__}")
        return self._parse_schema_node(schema, "")

    def _parse_schema_node(self, schema: dict[str, Any], path: str) -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema dictionary
            path: JSON Pointer of the node (for identity and error messages)
        """
        type_value = schema.get("type")
        type_name = type_value if isinstance(type_value, str) else None
        kind = self.KINDS.get(type_name, SchemaKind.UNKNOWN)

        properties, has_properties = self._parse_properties(schema, path)

        return SchemaNode(
            kind=kind,
            type_name=type_name,
            source_path=path,
            title=self._string_or_none(schema.get("title")),
            description=self._string_or_none(schema.get("description")),
            format=self._string_or_none(schema.get("format")),
            properties=properties,
            required=self._parse_required(schema, path),
            has_properties=has_properties,
            items=self._parse_items(schema, path),
            enum_values=tuple(schema["enum"]) if isinstance(schema.get("enum"), list) else None,
            default=SchemaDefault.from_schema(schema),
            additional_properties=self._parse_additional_properties(schema, path),
            minimum=schema.get("minimum"),
            maximum=schema.get("maximum"),
        )

    def _parse_properties(self, schema: dict[str, Any], path: str) -> tuple[dict[str, SchemaNode], bool]:
        """Parse the `properties` mapping."""
        if "properties" not in schema:
            return {}, False

        raw_properties = schema["properties"]
        properties_path = json_pointer(path, "properties")
        if not isinstance(raw_properties, dict):
            raise SchemaParseError("'properties' must be an object", properties_path)

        properties = {}
        for prop_name, prop_schema in raw_properties.items():
            prop_path = json_pointer(properties_path, prop_name)
            if not isinstance(prop_schema, dict):
                raise SchemaParseError(f"Schema for property '{prop_name}' must be an object", prop_path)
            properties[prop_name] = self._parse_schema_node(prop_schema, prop_path)
        return properties, True

    def _parse_required(self, schema: dict[str, Any], path: str) -> frozenset[str]:
        """Parse the `required` list."""
        required = schema.get("required")
        if required is None:
            return frozenset()
        if not isinstance(required, list) or not all(isinstance(name, str) for name in required):
            raise SchemaParseError("'required' must be an array of strings", json_pointer(path, "required"))
        return frozenset(required)

    def _parse_items(self, schema: dict[str, Any], path: str) -> SchemaNode | None:
        """Parse a single-schema `items`; tuple forms are not supported."""
        items = schema.get("items")
        if not isinstance(items, dict):
            return None
        return self._parse_schema_node(items, json_pointer(path, "items"))

    def _parse_additional_properties(self, schema: dict[str, Any], path: str) -> AdditionalProperties:
        """Parse `additionalProperties` into its three modes."""
        value = schema.get("additionalProperties")
        if value is False:
            return AdditionalProperties(AdditionalPropertiesMode.DISALLOWED)
        if isinstance(value, dict) and value:
            node = self._parse_schema_node(value, json_pointer(path, "additionalProperties"))
            return AdditionalProperties(AdditionalPropertiesMode.SCHEMA, node)
        return AdditionalProperties(AdditionalPropertiesMode.ALLOWED)

    def _string_or_none(self, value: Any) -> str | None:
        return value if isinstance(value, str) else None
