"""
Pipeline - JSON Schema to Rust generator.

This module provides a multi-phase architecture for generating
serde-annotated Rust code from JSON schemas:

1. Phase 1 (Parser): Parse JSON Schema into Schema AST
2. Phase 2 (Analyzer): Collect definitions, resolve names and defaults, build IR
3. Phase 3 (Backend): Render IR to Rust source with Jinja2 templates
4. Phase 4 (Formatter): Optional post-processing with rustfmt
5. Phase 5 (Output): Atomic file writes
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode
from .errors import (
    DanglingReferenceError,
    InvalidRootError,
    JsonSchemaGenError,
    OutputWriteError,
    SchemaParseError,
    SchemaValidationError,
)
from .generator import PipelineGenerator, generate_to_writer
from .output import AtomicWriter

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
    "DanglingReferenceError",
    "OutputWriteError",
    "AtomicWriter",
]
