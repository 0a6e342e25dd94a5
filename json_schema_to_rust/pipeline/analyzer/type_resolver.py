"""
Type resolver: maps one property schema to a Rust type.

Numeric bounds only select a width; they are never emitted as checks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ...logging_config import get_logger
from ..schema_ast.nodes import SchemaKind, SchemaNode
from .ir_nodes import Primitive, TypeRef

if TYPE_CHECKING:
    from .analyzer import SchemaAnalyzer

logger = get_logger(__name__)

# Largest finite single-precision value
F32_MAX = 3.4028235e38

UNSIGNED_WIDTHS = (Primitive.U8, Primitive.U16, Primitive.U32, Primitive.U64)
SIGNED_WIDTHS = (Primitive.I8, Primitive.I16, Primitive.I32, Primitive.I64)

UUID_FORMATS = {"uuid"} | {f"uuid{n}" for n in range(1, 9)}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def choose_integer_type(minimum: Any, maximum: Any) -> Primitive:
    """
    Pick the narrowest integer type covering [minimum, maximum].

    Unsigned types are preferred when minimum >= 0. Without two integer
    bounds, or with bounds no 64-bit type covers, the result is i64.
    """
    if not (_is_int(minimum) and _is_int(maximum)) or minimum > maximum:
        return Primitive.I64

    candidates = UNSIGNED_WIDTHS if minimum >= 0 else SIGNED_WIDTHS
    for primitive in candidates:
        low, high = primitive.integer_range
        if low <= minimum and maximum <= high:
            return primitive
    return Primitive.I64


def choose_float_type(minimum: Any, maximum: Any) -> Primitive:
    """f32 when both bounds exist and lie within single-precision range, f64 otherwise."""
    if not (_is_number(minimum) and _is_number(maximum)):
        return Primitive.F64
    if minimum >= -F32_MAX and maximum <= F32_MAX:
        return Primitive.F32
    return Primitive.F64


def is_uuid_format(format_name: str | None) -> bool:
    return format_name is not None and format_name.lower() in UUID_FORMATS


class TypeResolver:
    """Resolves property schemas to TypeRefs.

    Object and enum schemas are handed back to the analyzer, which collects
    them as definitions and returns the definition id to reference.
    """

    def __init__(self, analyzer: SchemaAnalyzer, use_uuid_format: bool = False):
        self.analyzer = analyzer
        self.use_uuid_format = use_uuid_format

    def resolve_property(self, node: SchemaNode, name_hint: str, is_required: bool) -> TypeRef | None:
        """
        Resolve the type of a property, wrapping it in Option when not required.

        Args:
            node: The property schema
            name_hint: Name for a nested struct or enum when the node has no title
            is_required: Whether the property is in its parent's `required` set

        Returns:
            The field type, or None when the property must be skipped
        """
        type_ref = self.resolve(node, name_hint)
        if type_ref is None or is_required:
            return type_ref
        return TypeRef.optional(type_ref)

    def resolve(self, node: SchemaNode, name_hint: str) -> TypeRef | None:
        """Resolve a schema node to a type, or None for unsupported schemas."""
        if self._is_string_enum(node):
            return TypeRef.enum_ref(self.analyzer.collect_enum(node, name_hint))

        kind = node.kind
        if kind is SchemaKind.STRING:
            if self.use_uuid_format and is_uuid_format(node.format):
                return TypeRef.of(Primitive.UUID)
            return TypeRef.of(Primitive.STRING)
        if kind is SchemaKind.BOOLEAN:
            return TypeRef.of(Primitive.BOOL)
        if kind is SchemaKind.INTEGER:
            return TypeRef.of(choose_integer_type(node.minimum, node.maximum))
        if kind is SchemaKind.NUMBER:
            return TypeRef.of(choose_float_type(node.minimum, node.maximum))
        if kind is SchemaKind.ARRAY:
            return self._resolve_array(node, name_hint)
        if kind is SchemaKind.OBJECT:
            if not node.properties:
                logger.debug("Skipping %s: object without properties", node.source_path)
                return None
            return TypeRef.struct_ref(self.analyzer.collect_struct(node, name_hint))

        logger.debug("Skipping %s: unsupported type %r", node.source_path, node.type_name)
        return None

    def _resolve_array(self, node: SchemaNode, name_hint: str) -> TypeRef | None:
        if node.items is None:
            logger.debug("Skipping %s: array without items schema", node.source_path)
            return None
        item_type = self.resolve(node.items, name_hint)
        if item_type is None:
            return None
        return TypeRef.list_of(item_type)

    def _is_string_enum(self, node: SchemaNode) -> bool:
        if node.string_enum_values is None:
            return False
        return node.kind is SchemaKind.STRING or node.type_name is None
