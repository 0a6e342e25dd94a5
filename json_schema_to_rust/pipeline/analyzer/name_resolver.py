"""
Name resolver for handling naming collisions.

Runs after collection, once every candidate name is known: type names are
reconciled across the whole run, field identifiers within their struct and
variant identifiers within their enum.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable

from ...logging_config import get_logger
from ...utils import sanitize_field_name, to_variant_name, unraw
from .ir_nodes import IR, EnumDef, StructDef

logger = get_logger(__name__)

# Identifier of the flattened map field capturing additional properties
ADDITIONAL_PROPERTIES_FIELD = "additional_properties"


def disambiguate(candidates: list[str], reserved: Iterable[str] = ()) -> list[str]:
    """
    Make a list of identifiers pairwise distinct.

    Every member of a colliding group, the first one included, gets a
    suffix `_0`, `_1`, ... in list order. A candidate equal to a reserved
    name counts as colliding. Suffixed names already in use are skipped.

    Examples:
        ["Pending", "Pending", "Active"] -> ["Pending_0", "Pending_1", "Active"]
    """
    reserved = set(reserved)
    counts = Counter(candidates)
    taken = reserved | set(candidates)
    next_index: dict[str, int] = defaultdict(int)

    result = []
    for name in candidates:
        if counts[name] == 1 and name not in reserved:
            result.append(name)
            continue
        while True:
            suffixed = f"{name}_{next_index[name]}"
            next_index[name] += 1
            if suffixed not in taken:
                break
        taken.add(suffixed)
        result.append(suffixed)
    return result


class NameResolver:
    """Assigns final names to structs, enums, variants and fields."""

    def resolve(self, ir: IR) -> None:
        """
        Resolve all names in the IR in place.

        Args:
            ir: IR with candidate names set by the collector
        """
        self._resolve_type_names(ir)
        for enum_def in ir.enums.values():
            self._resolve_variants(enum_def)
        for struct_def in ir.structs.values():
            self._resolve_fields(struct_def)

    def _resolve_type_names(self, ir: IR) -> None:
        """Give every struct and enum a unique name.

        Definitions sharing a candidate name are ordered by schema position;
        the first keeps the name, the others get 2, 3, ... appended. The root
        sits at the empty position and so always keeps its name.
        """
        definitions: list[StructDef | EnumDef] = [*ir.structs.values(), *ir.enums.values()]
        groups: dict[str, list[StructDef | EnumDef]] = defaultdict(list)
        for definition in definitions:
            groups[definition.candidate_name].append(definition)

        taken = set(groups)
        for candidate, members in sorted(groups.items()):
            members.sort(key=lambda d: d.def_id)
            members[0].name = candidate
            number = 2
            for definition in members[1:]:
                while f"{candidate}{number}" in taken:
                    number += 1
                definition.name = f"{candidate}{number}"
                taken.add(definition.name)
                logger.debug(
                    "Type name %s at %s already used, renamed to %s",
                    candidate,
                    definition.def_id,
                    definition.name,
                )

    def _resolve_variants(self, enum_def: EnumDef) -> None:
        names = disambiguate([to_variant_name(v.value) for v in enum_def.variants])
        for variant, name in zip(enum_def.variants, names):
            variant.identifier = name

    def _resolve_fields(self, struct_def: StructDef) -> None:
        """Give every field a unique identifier.

        A key that is already a usable identifier keeps it, so it needs no
        rename. Sanitized keys that collide with it or with each other get
        `_0`, `_1`, ... suffixes. The map field name is reserved only while
        the struct has a map.
        """
        reserved = {ADDITIONAL_PROPERTIES_FIELD} if struct_def.additional_properties is not None else set()
        kept = set()
        sanitized = []
        for field_def in struct_def.fields:
            name = sanitize_field_name(field_def.json_key)
            if unraw(name) == field_def.json_key and name not in reserved:
                field_def.identifier = name
                kept.add(name)
            else:
                sanitized.append(field_def)

        names = disambiguate([sanitize_field_name(f.json_key) for f in sanitized], reserved | kept)
        for field_def, name in zip(sanitized, names):
            if name != sanitize_field_name(field_def.json_key):
                logger.debug("Field %s of %s renamed to %s", field_def.json_key, struct_def.name, name)
            field_def.identifier = name
