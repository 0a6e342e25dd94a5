"""
Schema analyzer that transforms AST to IR.

Phase 2 of the pipeline: collect every struct and enum definition,
reconcile names, classify defaults and fix the emission order.
"""

from __future__ import annotations

from ...logging_config import get_logger
from ...utils import to_struct_name
from ..config import CodeGeneratorConfig
from ..errors import InvalidRootError
from ..schema_ast.nodes import AdditionalPropertiesMode, SchemaKind, SchemaNode
from .default_analyzer import DefaultAnalyzer
from .emission_order import EmissionOrderer
from .ir_nodes import IR, EnumDef, FieldDef, StructDef, TypeRef, VariantDef
from .name_resolver import ADDITIONAL_PROPERTIES_FIELD, NameResolver
from .type_resolver import TypeResolver

logger = get_logger(__name__)


class SchemaAnalyzer:
    """Analyzes the schema AST and builds IR."""

    def __init__(self, config: CodeGeneratorConfig | None = None):
        """
        Initialize the analyzer.

        Args:
            config: Code generation configuration
        """
        self.config = config or CodeGeneratorConfig()
        self.type_resolver = TypeResolver(self, use_uuid_format=self.config.use_uuid_format)
        self.name_resolver = NameResolver()
        self.default_analyzer = DefaultAnalyzer()
        self.emission_orderer = EmissionOrderer()

        # Will be set during analysis
        self.ir: IR | None = None

    def analyze(self, root: SchemaNode, root_name: str | None = None) -> IR:
        """
        Analyze the AST and build IR.

        Args:
            root: The root schema node; must be an object schema
            root_name: Root struct name used when the root has no title

        Returns:
            IR ready for code generation

        Raises:
            InvalidRootError: If the root schema is not an object
        """
        if root.kind is not SchemaKind.OBJECT:
            raise InvalidRootError(root.type_name)

        self.ir = IR(root_id=root.source_path)
        self.collect_struct(root, root_name or self.config.root_name)
        logger.debug("Collected %d struct(s) and %d enum(s)", len(self.ir.structs), len(self.ir.enums))

        self.name_resolver.resolve(self.ir)
        self.default_analyzer.analyze(self.ir)
        self.ir.check_references()
        self.emission_orderer.order(self.ir)
        return self.ir

    def collect_struct(self, node: SchemaNode, name_hint: str) -> str:
        """
        Collect an object schema as a struct definition.

        Args:
            node: Object schema
            name_hint: Name used when the node has no title

        Returns:
            The definition id of the struct
        """
        def_id = node.source_path
        if def_id in self.ir.structs:
            return def_id

        struct_def = StructDef(
            def_id=def_id,
            candidate_name=self._candidate_name(node, name_hint),
            description=node.description,
            deny_unknown_fields=node.additional_properties.mode is AdditionalPropertiesMode.DISALLOWED,
        )
        self.ir.structs[def_id] = struct_def

        for key in sorted(node.properties):
            field_def = self._collect_field(node, key)
            if field_def is not None:
                struct_def.fields.append(field_def)

        if node.additional_properties.mode is AdditionalPropertiesMode.SCHEMA:
            struct_def.additional_properties = self._collect_additional_properties(
                node.additional_properties.schema, struct_def
            )
        return def_id

    def collect_enum(self, node: SchemaNode, name_hint: str) -> str:
        """
        Collect a string enum schema as an enum definition.

        Variants are the distinct values in sorted order; identifiers are
        assigned later by the name resolver.

        Returns:
            The definition id of the enum
        """
        def_id = node.source_path
        if def_id not in self.ir.enums:
            self.ir.enums[def_id] = EnumDef(
                def_id=def_id,
                candidate_name=self._candidate_name(node, name_hint),
                variants=[VariantDef(value=value) for value in sorted(set(node.string_enum_values))],
                description=node.description,
            )
        return def_id

    def _collect_field(self, parent: SchemaNode, key: str) -> FieldDef | None:
        prop = parent.properties[key]
        is_required = key in parent.required
        type_ref = self.type_resolver.resolve_property(prop, key, is_required)
        if type_ref is None:
            logger.debug("Omitting property %s", prop.source_path)
            return None
        return FieldDef(
            json_key=key,
            type_ref=type_ref,
            is_required=is_required,
            description=prop.description,
            default=prop.default,
        )

    def _collect_additional_properties(self, constraint: SchemaNode, owner: StructDef) -> FieldDef | None:
        """Build the flattened map field for a schema-constrained additionalProperties."""
        suffix = "Value" if constraint.string_enum_values is not None else "Extra"
        value_type = self.type_resolver.resolve(constraint, owner.candidate_name + suffix)
        if value_type is None:
            logger.debug("Omitting additional properties map at %s", constraint.source_path)
            return None
        return FieldDef(
            json_key=ADDITIONAL_PROPERTIES_FIELD,
            identifier=ADDITIONAL_PROPERTIES_FIELD,
            type_ref=TypeRef.map_of(value_type),
            is_required=True,
        )

    def _candidate_name(self, node: SchemaNode, name_hint: str) -> str:
        if node.title and node.title.strip():
            return to_struct_name(node.title)
        return to_struct_name(name_hint)
