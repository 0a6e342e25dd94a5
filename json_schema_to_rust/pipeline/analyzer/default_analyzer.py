"""
Default analyzer: chooses how each field's schema `default` is emitted.

Unsupported defaults are dropped without error; the field then behaves as
if it had no default.
"""

from __future__ import annotations

import math
import uuid
from typing import Any

from ...logging_config import get_logger
from ...utils import rust_string_literal, unraw
from ..schema_ast.nodes import DefaultPresence
from .ir_nodes import IR, DefaultStrategy, FieldDef, Primitive, StructDef, TypeKind, TypeRef
from .type_resolver import F32_MAX

logger = get_logger(__name__)

NO_DEFAULT = DefaultStrategy()


def default_function_name(struct_name: str, identifier: str) -> str:
    return f"default_{struct_name}_{unraw(identifier)}"


def float_literal(value: float, primitive: Primitive) -> str:
    """Rust float literal with a type suffix: 0.5 -> "0.5f32", 1e+20 -> "1e20f64"."""
    return repr(float(value)).replace("e+", "e") + primitive.value


class DefaultAnalyzer:
    """Classifies field defaults into strategies."""

    def analyze(self, ir: IR) -> None:
        """Set the default strategy of every field in the IR."""
        for struct_def in ir.structs.values():
            for field_def in struct_def.fields:
                field_def.default_strategy = self.classify(ir, struct_def, field_def)

    def classify(self, ir: IR, struct_def: StructDef, field_def: FieldDef) -> DefaultStrategy:
        """
        Classify one field's default.

        Args:
            ir: The IR, for enum variant lookups
            struct_def: Struct owning the field; names the helper function
            field_def: The field

        Returns:
            The strategy; NO_DEFAULT when the default is absent or unsupported
        """
        default = field_def.default
        if default.presence is DefaultPresence.ABSENT:
            return NO_DEFAULT

        optional = field_def.type_ref.is_optional
        if default.presence is DefaultPresence.NULL:
            if optional:
                return DefaultStrategy.zero_value()
            logger.debug("Ignoring null default of required field %s.%s", struct_def.name, field_def.json_key)
            return NO_DEFAULT

        expression = self._literal(ir, field_def.type_ref.unwrap_optional(), default.value)
        if expression is None:
            logger.debug(
                "Ignoring unsupported default %r of %s.%s", default.value, struct_def.name, field_def.json_key
            )
            return NO_DEFAULT
        if expression == "":
            return DefaultStrategy.zero_value()
        return DefaultStrategy.custom_function(
            default_function_name(struct_def.name, field_def.identifier),
            expression,
        )

    def _literal(self, ir: IR, type_ref: TypeRef, value: Any) -> str | None:
        """Rust expression for a default value.

        Returns "" for the type's zero value and None when the value is
        not supported for the type.
        """
        if type_ref.kind is TypeKind.LIST:
            if isinstance(value, list) and not value:
                return ""
            return None
        if type_ref.kind is TypeKind.ENUM:
            if not isinstance(value, str):
                return None
            enum_def = ir.enums[type_ref.target]
            variant = enum_def.variant_for(value)
            if variant is None:
                return None
            return f"{enum_def.name}::{variant.identifier}"
        if type_ref.kind is not TypeKind.PRIMITIVE:
            # struct and map fields
            return None

        primitive = type_ref.primitive
        if primitive is Primitive.BOOL:
            if not isinstance(value, bool):
                return None
            return "true" if value else ""
        if primitive.is_integer:
            return self._integer_literal(primitive, value)
        if primitive.is_float:
            return self._float_literal(primitive, value)
        if primitive is Primitive.STRING:
            if not isinstance(value, str):
                return None
            return f"{rust_string_literal(value)}.to_string()" if value else ""
        if primitive is Primitive.UUID:
            return self._uuid_literal(value)
        return None

    def _integer_literal(self, primitive: Primitive, value: Any) -> str | None:
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        low, high = primitive.integer_range
        if not low <= value <= high:
            return None
        return f"{value}{primitive.value}" if value != 0 else ""

    def _float_literal(self, primitive: Primitive, value: Any) -> str | None:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            return None
        try:
            number = float(value)
        except OverflowError:
            return None
        if not math.isfinite(number):
            return None
        if primitive is Primitive.F32 and abs(number) > F32_MAX:
            return None
        return float_literal(number, primitive) if number != 0 else ""

    def _uuid_literal(self, value: Any) -> str | None:
        if not isinstance(value, str):
            return None
        try:
            uuid.UUID(value)
        except ValueError:
            return None
        return f'Uuid::parse_str({rust_string_literal(value)}).expect("invalid default uuid")'
