"""
Emission orderer: linearizes the collected definitions.

Enums come first sorted by name, then default helper functions, then
structs in dependency order with ties broken by name.
"""

from __future__ import annotations

import heapq

from ...logging_config import get_logger
from ..errors import JsonSchemaGenError
from .ir_nodes import IR, DefaultFunction, DefaultKind, StructDef, TypeKind

logger = get_logger(__name__)


def struct_dependencies(struct_def: StructDef) -> set[str]:
    """Definition ids of the structs a struct refers to, through any container."""
    return {
        ref.target
        for field_def in struct_def.all_fields()
        for ref in field_def.type_ref.references()
        if ref.kind is TypeKind.STRUCT and ref.target != struct_def.def_id
    }


class EmissionOrderer:
    """Fixes the output order of an IR."""

    def order(self, ir: IR) -> None:
        """Fill ordered_enums, ordered_structs and default_functions."""
        ir.ordered_enums = sorted(ir.enums.values(), key=lambda e: e.name)
        ir.ordered_structs = self.sort_structs(ir)
        ir.default_functions = [
            DefaultFunction(
                name=field_def.default_strategy.function_name,
                return_type=field_def.type_ref,
                body=(
                    f"Some({field_def.default_strategy.expression})"
                    if field_def.type_ref.is_optional
                    else field_def.default_strategy.expression
                ),
            )
            for struct_def in ir.ordered_structs
            for field_def in struct_def.fields
            if field_def.default_strategy.kind is DefaultKind.CUSTOM_FUNCTION
        ]

    def sort_structs(self, ir: IR) -> list[StructDef]:
        """
        Topologically sort structs so that referenced structs come first.

        Among structs whose dependencies are all emitted, the smallest name
        goes next.

        Raises:
            JsonSchemaGenError: If the structs refer to each other in a cycle
        """
        dependencies = {def_id: struct_dependencies(s) for def_id, s in ir.structs.items()}
        dependents: dict[str, list[str]] = {def_id: [] for def_id in ir.structs}
        for def_id, deps in dependencies.items():
            for dep in deps:
                dependents[dep].append(def_id)

        remaining = {def_id: len(deps) for def_id, deps in dependencies.items()}
        ready = [(ir.structs[def_id].name, def_id) for def_id, count in remaining.items() if count == 0]
        heapq.heapify(ready)

        ordered = []
        while ready:
            _, def_id = heapq.heappop(ready)
            ordered.append(ir.structs[def_id])
            for dependent in dependents[def_id]:
                remaining[dependent] -= 1
                if remaining[dependent] == 0:
                    heapq.heappush(ready, (ir.structs[dependent].name, dependent))

        if len(ordered) != len(ir.structs):
            raise JsonSchemaGenError("Struct definitions refer to each other in a cycle")
        logger.debug("Emission order: %s", ", ".join(s.name for s in ordered))
        return ordered
