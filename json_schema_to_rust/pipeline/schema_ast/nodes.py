"""
AST (Abstract Syntax Tree) node definitions for JSON Schema.

These nodes represent the parsed structure of a JSON Schema before
any type resolution or naming. Nodes are immutable once parsed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SchemaKind(str, Enum):
    """Value of the `type` keyword, collapsed to what the generator understands."""

    OBJECT = "object"
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    ARRAY = "array"
    UNKNOWN = "unknown"  # null, type arrays, unrecognized or missing type


class DefaultPresence(Enum):
    """Whether a schema carries a `default`, and whether it is null."""

    ABSENT = "absent"
    NULL = "null"
    VALUE = "value"


@dataclass(frozen=True)
class SchemaDefault:
    """The `default` keyword, keeping "no default" apart from "default: null"."""

    presence: DefaultPresence = DefaultPresence.ABSENT
    value: Any = None

    @staticmethod
    def from_schema(schema: dict[str, Any]) -> SchemaDefault:
        if "default" not in schema:
            return SchemaDefault()
        if schema["default"] is None:
            return SchemaDefault(DefaultPresence.NULL)
        return SchemaDefault(DefaultPresence.VALUE, schema["default"])

    @property
    def is_present(self) -> bool:
        return self.presence is not DefaultPresence.ABSENT


class AdditionalPropertiesMode(Enum):
    """How an object treats keys not listed in `properties`."""

    DISALLOWED = "disallowed"  # additionalProperties: false
    ALLOWED = "allowed"  # absent, true, or {}
    SCHEMA = "schema"  # additionalProperties: {...}


@dataclass(frozen=True)
class AdditionalProperties:
    """The `additionalProperties` keyword."""

    mode: AdditionalPropertiesMode = AdditionalPropertiesMode.ALLOWED
    schema: SchemaNode | None = None


@dataclass(frozen=True)
class SchemaNode:
    """One parsed position of the schema document."""

    kind: SchemaKind = SchemaKind.UNKNOWN

    # Raw `type` value when it is a string, None otherwise
    type_name: str | None = None

    # JSON Pointer of this node; unique per position, used as its identity
    source_path: str = ""

    title: str | None = None
    description: str | None = None
    format: str | None = None

    # Property key -> child node, in document order
    properties: dict[str, SchemaNode] = field(default_factory=dict)
    required: frozenset[str] = frozenset()
    has_properties: bool = False

    items: SchemaNode | None = None

    # Raw `enum` values when `enum` is an array
    enum_values: tuple[Any, ...] | None = None

    default: SchemaDefault = field(default_factory=SchemaDefault)
    additional_properties: AdditionalProperties = field(default_factory=AdditionalProperties)

    minimum: Any = None
    maximum: Any = None

    @property
    def string_enum_values(self) -> tuple[str, ...] | None:
        """The enum values when the enum is non-empty and all strings."""
        if not self.enum_values:
            return None
        if not all(isinstance(v, str) for v in self.enum_values):
            return None
        return self.enum_values
