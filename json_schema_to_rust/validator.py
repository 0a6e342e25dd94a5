"""
Strict-mode schema validator.

Used when `deny_invalid_unknown_json_schema` is set: walks the raw schema
document and reports every keyword or shape the generator would otherwise
ignore, instead of silently skipping it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .pipeline.errors import SchemaValidationError
from .utils import json_pointer

# Keywords the generator understands
KNOWN_KEYWORDS = {
    "title",
    "description",
    "type",
    "properties",
    "required",
    "enum",
    "items",
    "format",
    "additionalProperties",
    "default",
    "minimum",
    "maximum",
}

# Recognized keywords the generator does not implement
UNSUPPORTED_KEYWORDS = {
    "$ref",
    "$defs",
    "definitions",
    "minLength",
    "maxLength",
    "pattern",
    "oneOf",
    "anyOf",
    "allOf",
    "$id",
    "examples",
    "const",
    "not",
    "minProperties",
    "maxProperties",
    "minItems",
    "maxItems",
    "uniqueItems",
    "exclusiveMinimum",
    "exclusiveMaximum",
    "multipleOf",
    "readOnly",
    "writeOnly",
    "deprecated",
    "propertyNames",
    "additionalItems",
    "optional",
}

SUPPORTED_TYPES = {"string", "boolean", "integer", "number", "object", "array"}


class IssueKind(Enum):
    """Kinds of strict-mode issues; values are the messages."""

    ROOT_NOT_OBJECT = 'root schema must have type "object"'
    ROOT_MISSING_TYPE = "root has no type key"
    NO_STRUCTS_TO_GENERATE = "root object has no supported properties"
    INVALID_TYPE_VALUE = "type is not a string or array of strings"
    TYPE_ARRAY_NOT_SUPPORTED = "type array (multiple types) not supported"
    NULL_TYPE_NOT_SUPPORTED = 'type "null" not supported'
    INVALID_REQUIRED_FORMAT = "required is not an array of strings"
    REQUIRED_PROPERTY_NOT_IN_PROPERTIES = "required references property not in properties"
    INVALID_ENUM_FORMAT = "enum is not an array"
    ENUM_EMPTY = "enum is empty array"
    ENUM_CONTAINS_NON_STRING_VALUES = "enum has non-string values; only string enums supported"
    INVALID_ITEMS_FORMAT = "items is not an object when type is array"
    ARRAY_MISSING_ITEMS = "type is array but items is missing"
    UNSUPPORTED_DEFAULT_OBJECT = "default is object (not supported)"
    UNSUPPORTED_DEFAULT_NON_EMPTY_ARRAY = "default is non-empty array (not supported)"
    INVALID_MINIMUM_MAXIMUM = "minimum/maximum must be number when present"
    PROPERTY_WITH_UNSUPPORTED_TYPE = "property has unsupported type"
    ADDITIONAL_PROPERTIES_UNSUPPORTED_SCHEMA = "additionalProperties schema not supported"
    UNSUPPORTED_KEYWORD = "keyword not supported"
    UNKNOWN_KEYWORD = "unknown keyword"


@dataclass(frozen=True)
class SchemaValidationIssue:
    """One problem found in the schema, located by JSON Pointer."""

    path: str
    kind: IssueKind

    # Offending keyword, for UNSUPPORTED_KEYWORD and UNKNOWN_KEYWORD
    keyword: str | None = None

    @property
    def message(self) -> str:
        if self.kind is IssueKind.UNSUPPORTED_KEYWORD:
            if self.keyword == "optional":
                return "keyword optional not supported (use required array)"
            return f"keyword {self.keyword} not supported"
        if self.kind is IssueKind.UNKNOWN_KEYWORD:
            return f"unknown keyword: {self.keyword}"
        return self.kind.value

    def __str__(self) -> str:
        return f"{self.path or '(root)'}: {self.message}"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class SchemaValidator:
    """Collects every strict-mode issue in a schema document."""

    def validate(self, document: Any) -> list[SchemaValidationIssue]:
        """
        Validate a decoded schema document.

        Args:
            document: The schema as decoded from JSON

        Returns:
            All issues found, in document order; empty when the schema is clean
        """
        self._issues: list[SchemaValidationIssue] = []
        if not isinstance(document, dict):
            self._add("", IssueKind.ROOT_NOT_OBJECT)
            return self._issues

        root_type = document.get("type")
        if "type" not in document:
            self._add("", IssueKind.ROOT_MISSING_TYPE)
        elif isinstance(root_type, list):
            self._add("", IssueKind.TYPE_ARRAY_NOT_SUPPORTED)
        elif root_type != "object":
            self._add("", IssueKind.ROOT_NOT_OBJECT)

        self._check_schema(document, "")

        if root_type == "object":
            properties = document.get("properties")
            if not isinstance(properties, dict) or not properties:
                self._add("", IssueKind.NO_STRUCTS_TO_GENERATE)
        return self._issues

    def check(self, document: Any) -> None:
        """
        Validate a document and raise if anything was found.

        Raises:
            SchemaValidationError: Listing every issue
        """
        issues = self.validate(document)
        if issues:
            raise SchemaValidationError(issues)

    def _add(self, path: str, kind: IssueKind, keyword: str | None = None) -> None:
        self._issues.append(SchemaValidationIssue(path, kind, keyword))

    def _check_schema(self, schema: Any, path: str) -> None:
        """Check one schema object and recurse into its subschemas."""
        if not isinstance(schema, dict):
            return

        if schema.get("type") == "array" and "items" not in schema:
            self._add(path, IssueKind.ARRAY_MISSING_ITEMS)

        for key, value in schema.items():
            key_path = json_pointer(path, key)
            if key in KNOWN_KEYWORDS:
                self._check_keyword(schema, key, value, key_path)
            elif key in UNSUPPORTED_KEYWORDS:
                self._add(key_path, IssueKind.UNSUPPORTED_KEYWORD, key)
            else:
                self._add(key_path, IssueKind.UNKNOWN_KEYWORD, key)

    def _check_keyword(self, schema: dict[str, Any], key: str, value: Any, path: str) -> None:
        if key == "type":
            self._check_type(value, path)
        elif key == "required":
            self._check_required(schema, value, path)
        elif key == "enum":
            self._check_enum(value, path)
        elif key == "items":
            if schema.get("type") == "array" and not isinstance(value, dict):
                self._add(path, IssueKind.INVALID_ITEMS_FORMAT)
            self._check_schema(value, path)
        elif key == "properties":
            if isinstance(value, dict):
                for prop_name, prop_schema in value.items():
                    self._check_schema(prop_schema, json_pointer(path, prop_name))
        elif key == "additionalProperties":
            self._check_additional_properties(value, path)
        elif key == "default":
            if isinstance(value, dict):
                self._add(path, IssueKind.UNSUPPORTED_DEFAULT_OBJECT)
            elif isinstance(value, list) and value:
                self._add(path, IssueKind.UNSUPPORTED_DEFAULT_NON_EMPTY_ARRAY)
        elif key in ("minimum", "maximum"):
            if not _is_number(value):
                self._add(path, IssueKind.INVALID_MINIMUM_MAXIMUM)

    def _check_type(self, value: Any, path: str) -> None:
        if isinstance(value, str):
            if value == "null":
                self._add(path, IssueKind.NULL_TYPE_NOT_SUPPORTED)
            elif value not in SUPPORTED_TYPES:
                self._add(path, IssueKind.PROPERTY_WITH_UNSUPPORTED_TYPE)
        elif isinstance(value, list):
            self._add(path, IssueKind.TYPE_ARRAY_NOT_SUPPORTED)
        else:
            self._add(path, IssueKind.INVALID_TYPE_VALUE)

    def _check_required(self, schema: dict[str, Any], value: Any, path: str) -> None:
        if not isinstance(value, list):
            self._add(path, IssueKind.INVALID_REQUIRED_FORMAT)
            return
        properties = schema.get("properties")
        property_names = set(properties) if isinstance(properties, dict) else set()
        # One issue per required list
        for name in value:
            if not isinstance(name, str):
                self._add(path, IssueKind.INVALID_REQUIRED_FORMAT)
                return
            if name not in property_names:
                self._add(path, IssueKind.REQUIRED_PROPERTY_NOT_IN_PROPERTIES)
                return

    def _check_enum(self, value: Any, path: str) -> None:
        if not isinstance(value, list):
            self._add(path, IssueKind.INVALID_ENUM_FORMAT)
            return
        if not value:
            self._add(path, IssueKind.ENUM_EMPTY)
        if any(not isinstance(v, str) for v in value):
            self._add(path, IssueKind.ENUM_CONTAINS_NON_STRING_VALUES)

    def _check_additional_properties(self, value: Any, path: str) -> None:
        if isinstance(value, bool):
            return
        if not isinstance(value, dict):
            self._add(path, IssueKind.ADDITIONAL_PROPERTIES_UNSUPPORTED_SCHEMA)
            return
        type_value = value.get("type")
        if not isinstance(type_value, str) or type_value not in SUPPORTED_TYPES:
            self._add(path, IssueKind.ADDITIONAL_PROPERTIES_UNSUPPORTED_SCHEMA)
        self._check_schema(value, path)
