"""
Schema AST (Abstract Syntax Tree) module.

Contains the AST node definitions and parser for JSON Schema.
"""

from __future__ import annotations

from .nodes import (
    AdditionalProperties,
    AdditionalPropertiesMode,
    DefaultPresence,
    SchemaDefault,
    SchemaKind,
    SchemaNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "SchemaKind",
    "SchemaDefault",
    "DefaultPresence",
    "AdditionalProperties",
    "AdditionalPropertiesMode",
    "SchemaParser",
]
