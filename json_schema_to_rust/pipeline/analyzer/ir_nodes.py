"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed schema, ready for code generation.
Struct and enum references point at definitions through their definition
id (the JSON Pointer of the defining schema node), so names can be
reconciled after collection without rewriting any types.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from ...utils import unraw
from ..errors import DanglingReferenceError
from ..schema_ast.nodes import SchemaDefault


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # String, bool, i8..u64, f32, f64, Uuid
    ENUM = "enum"  # A generated enum
    STRUCT = "struct"  # A generated struct
    LIST = "list"  # Vec<T>
    MAP = "map"  # BTreeMap<String, T>
    OPTIONAL = "optional"  # Option<T>


class Primitive(str, Enum):
    """Primitive Rust types; values are the Rust spellings."""

    STRING = "String"
    BOOL = "bool"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"
    UUID = "Uuid"

    @property
    def is_integer(self) -> bool:
        return self.value[0] in "iu"

    @property
    def is_float(self) -> bool:
        return self in (Primitive.F32, Primitive.F64)

    @property
    def integer_range(self) -> tuple[int, int]:
        """Inclusive value range of an integer type."""
        bits = int(self.value[1:])
        if self.value[0] == "u":
            return 0, 2**bits - 1
        return -(2 ** (bits - 1)), 2 ** (bits - 1) - 1


@dataclass(frozen=True)
class TypeRef:
    """A resolved type reference."""

    kind: TypeKind = TypeKind.PRIMITIVE
    primitive: Primitive | None = None

    # Definition id, for ENUM and STRUCT
    target: str = ""

    # Element type, for LIST, MAP and OPTIONAL
    inner: TypeRef | None = None

    @staticmethod
    def of(primitive: Primitive) -> TypeRef:
        return TypeRef(TypeKind.PRIMITIVE, primitive=primitive)

    @staticmethod
    def enum_ref(target: str) -> TypeRef:
        return TypeRef(TypeKind.ENUM, target=target)

    @staticmethod
    def struct_ref(target: str) -> TypeRef:
        return TypeRef(TypeKind.STRUCT, target=target)

    @staticmethod
    def list_of(inner: TypeRef) -> TypeRef:
        return TypeRef(TypeKind.LIST, inner=inner)

    @staticmethod
    def map_of(inner: TypeRef) -> TypeRef:
        return TypeRef(TypeKind.MAP, inner=inner)

    @staticmethod
    def optional(inner: TypeRef) -> TypeRef:
        return TypeRef(TypeKind.OPTIONAL, inner=inner)

    @property
    def is_optional(self) -> bool:
        return self.kind is TypeKind.OPTIONAL

    def unwrap_optional(self) -> TypeRef:
        return self.inner if self.is_optional else self

    def references(self) -> Iterator[TypeRef]:
        """Yield every ENUM/STRUCT reference inside this type."""
        if self.kind in (TypeKind.ENUM, TypeKind.STRUCT):
            yield self
        elif self.inner is not None:
            yield from self.inner.references()

    def uses_primitive(self, primitive: Primitive) -> bool:
        if self.kind is TypeKind.PRIMITIVE:
            return self.primitive is primitive
        return self.inner is not None and self.inner.uses_primitive(primitive)


class DefaultKind(Enum):
    """How a field is filled when its key is missing from the input."""

    NONE = "none"  # no default attribute
    ZERO_VALUE = "zero_value"  # #[serde(default)]
    CUSTOM_FUNCTION = "custom_function"  # #[serde(default = "fn")]


@dataclass(frozen=True)
class DefaultStrategy:
    """Default strategy chosen for one field."""

    kind: DefaultKind = DefaultKind.NONE
    function_name: str = ""
    expression: str = ""  # Rust literal returned by the helper, before Some(...) wrapping

    @staticmethod
    def zero_value() -> DefaultStrategy:
        return DefaultStrategy(DefaultKind.ZERO_VALUE)

    @staticmethod
    def custom_function(function_name: str, expression: str) -> DefaultStrategy:
        return DefaultStrategy(DefaultKind.CUSTOM_FUNCTION, function_name, expression)


@dataclass
class FieldDef:
    """A field definition in a struct."""

    json_key: str = ""
    identifier: str = ""  # Rust field identifier, set by the name resolver
    type_ref: TypeRef | None = None
    is_required: bool = False
    description: str | None = None

    # The schema `default`, and the strategy chosen for it
    default: SchemaDefault = field(default_factory=SchemaDefault)
    default_strategy: DefaultStrategy = field(default_factory=DefaultStrategy)

    @property
    def needs_rename(self) -> bool:
        """Whether serde needs a rename back to the JSON key."""
        return unraw(self.identifier) != self.json_key


@dataclass
class VariantDef:
    """One enum variant: the raw JSON value and its Rust identifier."""

    value: str = ""
    identifier: str = ""


@dataclass
class EnumDef:
    """An enum definition."""

    def_id: str = ""
    candidate_name: str = ""
    name: str = ""
    variants: list[VariantDef] = field(default_factory=list)
    description: str | None = None

    def variant_for(self, value: str) -> VariantDef | None:
        return next((v for v in self.variants if v.value == value), None)


@dataclass
class StructDef:
    """A struct definition."""

    def_id: str = ""
    candidate_name: str = ""
    name: str = ""

    # Sorted by JSON key
    fields: list[FieldDef] = field(default_factory=list)
    description: str | None = None

    # #[serde(deny_unknown_fields)]
    deny_unknown_fields: bool = False

    # Flattened BTreeMap field capturing additional properties
    additional_properties: FieldDef | None = None

    def all_fields(self) -> list[FieldDef]:
        if self.additional_properties is None:
            return list(self.fields)
        return [*self.fields, self.additional_properties]


@dataclass
class DefaultFunction:
    """A generated helper returning a field's default value."""

    name: str = ""
    return_type: TypeRef | None = None
    body: str = ""


@dataclass
class IR:
    """The complete Intermediate Representation of one generation run."""

    root_id: str = ""

    # Definition id -> definition
    structs: dict[str, StructDef] = field(default_factory=dict)
    enums: dict[str, EnumDef] = field(default_factory=dict)

    # Filled by the emission orderer
    ordered_enums: list[EnumDef] = field(default_factory=list)
    default_functions: list[DefaultFunction] = field(default_factory=list)
    ordered_structs: list[StructDef] = field(default_factory=list)

    # Generation comment
    generation_comment: str = ""

    def name_of(self, type_ref: TypeRef) -> str:
        """Resolved name of the struct or enum a reference points at."""
        if type_ref.kind is TypeKind.STRUCT:
            return self.structs[type_ref.target].name
        return self.enums[type_ref.target].name

    def check_references(self) -> None:
        """Ensure every struct/enum reference resolves to a collected definition.

        Raises:
            DanglingReferenceError: If a reference has no definition
        """
        for struct_def in self.structs.values():
            for field_def in struct_def.all_fields():
                for ref in field_def.type_ref.references():
                    table = self.structs if ref.kind is TypeKind.STRUCT else self.enums
                    if ref.target not in table:
                        raise DanglingReferenceError(struct_def.name or struct_def.def_id, field_def.json_key, ref.target)

    def uses_primitive(self, primitive: Primitive) -> bool:
        return any(f.type_ref.uses_primitive(primitive) for s in self.structs.values() for f in s.all_fields())

    def uses_map(self) -> bool:
        return any(s.additional_properties is not None for s in self.structs.values())
