"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ...logging_config import get_logger
from ..errors import OutputWriteError

logger = get_logger(__name__)

# String literals and line comments, whose braces do not count
_LITERAL_OR_COMMENT = re.compile(r'"(?:\\.|[^"\\])*"|//[^\n]*')


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate_rust: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_rust: Optional validation function for Rust code
        """
        self._validate_rust = validate_rust or self._default_validate_rust

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputWriteError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self.validate(content)

            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise
        logger.info("Wrote %s", path)

    def validate(self, content: str) -> None:
        """Validate Rust code without writing it.

        Raises:
            OutputWriteError: If validation fails
        """
        self._validate_rust(content)

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> bool:
        """Write content only if the file doesn't exist.

        Returns:
            True once the file is written

        Raises:
            FileExistsError: If the file already exists
            OutputWriteError: If validation fails
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")

        self.write(path, content, validate)
        return True

    def _default_validate_rust(self, content: str) -> None:
        """Default Rust validation.

        Args:
            content: Rust code to validate

        Raises:
            OutputWriteError: If validation fails
        """
        if "pub struct " not in content:
            raise OutputWriteError("Generated Rust code has no struct definitions")

        # Balanced braces outside string literals and comments (simple heuristic)
        code = _LITERAL_OR_COMMENT.sub("", content)
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise OutputWriteError(
                f"Generated Rust code has unbalanced braces: {open_braces} open, {close_braces} close"
            )
