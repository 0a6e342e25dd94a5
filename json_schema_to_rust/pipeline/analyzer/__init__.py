"""
Analyzer module.

Contains type resolution, collection, name resolution, default analysis
and emission ordering.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer
from .default_analyzer import DefaultAnalyzer
from .emission_order import EmissionOrderer
from .ir_nodes import (
    IR,
    DefaultFunction,
    DefaultKind,
    DefaultStrategy,
    EnumDef,
    FieldDef,
    Primitive,
    StructDef,
    TypeKind,
    TypeRef,
    VariantDef,
)
from .name_resolver import NameResolver
from .type_resolver import TypeResolver

__all__ = [
    "StructDef",
    "FieldDef",
    "TypeRef",
    "TypeKind",
    "Primitive",
    "EnumDef",
    "VariantDef",
    "DefaultKind",
    "DefaultStrategy",
    "DefaultFunction",
    "IR",
    "SchemaAnalyzer",
    "TypeResolver",
    "NameResolver",
    "DefaultAnalyzer",
    "EmissionOrderer",
]
