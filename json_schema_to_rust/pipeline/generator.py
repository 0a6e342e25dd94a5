"""
Pipeline generator: schema text in, Rust source text out.

Runs the phases in order; each consumes the complete output of the previous
one. All text is produced before anything reaches the destination.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..logging_config import get_logger
from .analyzer import SchemaAnalyzer
from .backends import RustBackend
from .config import CodeGeneratorConfig
from .formatters import RustfmtFormatter
from .schema_ast import SchemaParser

logger = get_logger(__name__)


class TextSink(Protocol):
    def write(self, text: str) -> Any: ...


class PipelineGenerator:
    """Generates Rust code from a JSON Schema.

    Phases:
    1. Parser: schema text to Schema AST (strict-mode validation first, if enabled)
    2. Analyzer: collect, name, classify defaults and order into IR
    3. Backend: render IR through the Rust templates
    4. Formatter: optional rustfmt pass
    """

    def __init__(
        self,
        schema: str | dict[str, Any],
        config: CodeGeneratorConfig | None = None,
        root_name: str | None = None,
    ):
        """
        Initialize the generator.

        Args:
            schema: Schema text, or an already-decoded schema dictionary
            config: Code generation configuration
            root_name: Root struct name when the root schema has no title;
                overrides config.root_name
        """
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.root_name = root_name

        self.parser = SchemaParser()
        self.analyzer = SchemaAnalyzer(self.config)
        self.backend = RustBackend(self.config)
        self.formatter = RustfmtFormatter()

    def generate(self) -> str:
        """
        Run the pipeline.

        Returns:
            The generated Rust source

        Raises:
            JsonSchemaGenError: On malformed schemas, non-object roots, or
                strict-mode issues
        """
        document = self.parser.load(self.schema) if isinstance(self.schema, str) else self.schema

        if self.config.deny_invalid_unknown_json_schema:
            from ..validator import SchemaValidator

            SchemaValidator().check(document)

        root = self.parser.parse(document)
        ir = self.analyzer.analyze(root, self.root_name)
        ir.generation_comment = self._generate_command_comment()

        code = self.backend.generate(ir)
        logger.info("Generated %d struct(s) and %d enum(s)", len(ir.ordered_structs), len(ir.ordered_enums))

        if self.config.formatter.enabled:
            code = self.formatter.format(code, self.config.formatter)
        return code

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        from .. import __version__
        from ..cli_utils import reconstruct_command_line

        # Reconstruct command line using CLI utilities
        try:
            from ..json_schema_to_rust import json_schema_to_rust as click_command

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "json_schema_to_rust"

        return f"{self.backend.COMMENT_PREFIX} Generated by json_schema_to_rust v{__version__} : {command_line}"


def generate_to_writer(
    schema: str | dict[str, Any],
    writer: TextSink,
    config: CodeGeneratorConfig | None = None,
    root_name: str | None = None,
) -> None:
    """
    Generate Rust code and hand it to a writer in a single call.

    Nothing is written when generation fails.

    Args:
        schema: Schema text, or an already-decoded schema dictionary
        writer: Any object with a `write(str)` method
        config: Code generation configuration
        root_name: Root struct name when the root schema has no title
    """
    code = PipelineGenerator(schema, config, root_name).generate()
    writer.write(code)
