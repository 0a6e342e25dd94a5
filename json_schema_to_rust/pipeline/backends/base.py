"""
Base class for code generation backends.

Defines the interface that language-specific backends implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..analyzer.ir_nodes import IR, TypeRef
from ..config import CodeGeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Prefix of the generation comment line
    COMMENT_PREFIX: str = ""

    # Template names to load, without the "<name>.<ext>.jinja2" decoration
    TEMPLATE_NAMES: tuple[str, ...] = ()

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self.templates = {
            name: self.jinja_env.get_template(f"{name}.{self.FILE_EXTENSION}.jinja2") for name in self.TEMPLATE_NAMES
        }

    def render(self, template_name: str, **context) -> str:
        """Render one template; the result never ends with a newline."""
        return self.templates[template_name].render(**context).rstrip("\n")

    @abstractmethod
    def generate(self, ir: IR) -> str:
        """
        Generate code from IR.

        Args:
            ir: The intermediate representation

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def translate_type(self, ir: IR, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type string.

        Args:
            ir: The IR, for resolving struct and enum names
            type_ref: The type reference

        Returns:
            Language-specific type string
        """
