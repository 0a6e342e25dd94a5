"""JSON Schema to Rust Generator

A Python package for generating serde-annotated Rust structs and enums
from JSON Schema definitions, with deterministic naming and ordering,
optional rustfmt formatting and atomic file output.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    FormatterConfig,
    InvalidRootError,
    JsonSchemaGenError,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    SchemaParseError,
    SchemaValidationError,
    generate_to_writer,
)

__all__ = [
    "PipelineGenerator",
    "generate_to_writer",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "JsonSchemaGenError",
    "SchemaParseError",
    "InvalidRootError",
    "SchemaValidationError",
    "AtomicWriter",
]
