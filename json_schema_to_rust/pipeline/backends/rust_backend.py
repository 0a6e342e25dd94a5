"""
Rust code generation backend.

Generates serde-annotated Rust structs and enums from IR. Every string
placed in the templates is computed here; the templates only lay them out.
"""

from __future__ import annotations

from typing import Any

from ...utils import rust_string_literal
from ..analyzer.ir_nodes import IR, DefaultKind, EnumDef, FieldDef, Primitive, StructDef, TypeKind, TypeRef
from .base import CodeBackend

DERIVE_LINE = "#[derive(Debug, Clone, Serialize, Deserialize)]"

SERDE_IMPORT = "use serde::{Deserialize, Serialize};"
BTREEMAP_IMPORT = "use std::collections::BTreeMap;"
UUID_IMPORT = "use uuid::Uuid;"


def doc_comment_lines(description: str | None) -> list[str]:
    """
    Turn a description into `///` lines.

    Each line is trimmed and blank lines are dropped, so a blank or missing
    description gives no lines.
    """
    if not description:
        return []
    return [f"/// {line.strip()}" for line in description.splitlines() if line.strip()]


class RustBackend(CodeBackend):
    """Rust code generation backend."""

    TEMPLATE_LANG = "rust"
    FILE_EXTENSION = "rs"
    COMMENT_PREFIX = "//!"
    TEMPLATE_NAMES = ("prefix", "enum", "default_fn", "struct")

    def generate(self, ir: IR) -> str:
        """Generate Rust code from IR."""
        prefix = self.render(
            "prefix",
            generation_comment=ir.generation_comment,
            imports=self._imports(ir),
        )

        blocks = [self.render("enum", **self._prepare_enum_context(e)) for e in ir.ordered_enums]
        blocks.extend(
            self.render(
                "default_fn",
                name=function.name,
                return_type=self.translate_type(ir, function.return_type),
                body=function.body,
            )
            for function in ir.default_functions
        )
        blocks.extend(self.render("struct", **self._prepare_struct_context(ir, s)) for s in ir.ordered_structs)

        return prefix + "\n\n" + "\n\n".join(blocks) + "\n"

    def translate_type(self, ir: IR, type_ref: TypeRef) -> str:
        """Translate IR type to Rust type string."""
        if type_ref.kind == TypeKind.PRIMITIVE:
            return type_ref.primitive.value
        if type_ref.kind in (TypeKind.ENUM, TypeKind.STRUCT):
            return ir.name_of(type_ref)

        inner = self.translate_type(ir, type_ref.inner)
        if type_ref.kind == TypeKind.LIST:
            return f"Vec<{inner}>"
        if type_ref.kind == TypeKind.MAP:
            return f"BTreeMap<String, {inner}>"
        return f"Option<{inner}>"

    def _imports(self, ir: IR) -> list[str]:
        imports = [SERDE_IMPORT]
        if ir.uses_map():
            imports.append(BTREEMAP_IMPORT)
        if ir.uses_primitive(Primitive.UUID):
            imports.append(UUID_IMPORT)
        return imports

    def _prepare_enum_context(self, enum_def: EnumDef) -> dict[str, Any]:
        return {
            "doc_lines": doc_comment_lines(enum_def.description),
            "derive": DERIVE_LINE,
            "name": enum_def.name,
            "variants": [
                {"rename": rust_string_literal(v.value), "identifier": v.identifier} for v in enum_def.variants
            ],
        }

    def _prepare_struct_context(self, ir: IR, struct_def: StructDef) -> dict[str, Any]:
        """
        Prepare the template context for a struct.

        Args:
            ir: The IR, for type names
            struct_def: The struct definition

        Returns:
            Dictionary of template variables
        """
        fields = [self._prepare_field_context(ir, f) for f in struct_def.fields]
        if struct_def.additional_properties is not None:
            map_field = struct_def.additional_properties
            fields.append(
                {
                    "attributes": ["#[serde(flatten)]"],
                    "identifier": map_field.identifier,
                    "type": self.translate_type(ir, map_field.type_ref),
                }
            )

        return {
            "doc_lines": doc_comment_lines(struct_def.description),
            "derive": DERIVE_LINE,
            "deny_unknown_fields": struct_def.deny_unknown_fields,
            "name": struct_def.name,
            "fields": fields,
        }

    def _prepare_field_context(self, ir: IR, field_def: FieldDef) -> dict[str, Any]:
        """Field attributes in order: doc comment, rename, default."""
        attributes = doc_comment_lines(field_def.description)
        if field_def.needs_rename:
            attributes.append(f"#[serde(rename = {rust_string_literal(field_def.json_key)})]")

        strategy = field_def.default_strategy
        if strategy.kind is DefaultKind.ZERO_VALUE:
            attributes.append("#[serde(default)]")
        elif strategy.kind is DefaultKind.CUSTOM_FUNCTION:
            attributes.append(f'#[serde(default = "{strategy.function_name}")]')

        return {
            "attributes": attributes,
            "identifier": field_def.identifier,
            "type": self.translate_type(ir, field_def.type_ref),
        }
