"""
rustfmt formatter for Rust code.
"""

from __future__ import annotations

import subprocess

from ...logging_config import get_logger
from ..config import FormatterConfig
from .base import Formatter

logger = get_logger(__name__)


class RustfmtFormatter(Formatter):
    """Formatter using rustfmt for Rust code."""

    def __init__(self, executable: str = "rustfmt"):
        self.executable = executable
        self._available = None

    def is_available(self) -> bool:
        """Check if rustfmt is installed."""
        if self._available is None:
            try:
                result = subprocess.run(
                    [self.executable, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=5,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format Rust code using rustfmt.

        Args:
            code: Rust source code to format
            config: Formatter configuration

        Returns:
            Formatted code, or the input unchanged if rustfmt is missing or fails
        """
        if not self.is_available():
            logger.warning("%s not found, leaving generated code unformatted", self.executable)
            return code

        # rustfmt reads stdin and writes the result to stdout
        cmd = [self.executable, "--edition", config.edition, "--emit", "stdout"]
        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=config.timeout,
            )
        except subprocess.SubprocessError as e:
            logger.warning("rustfmt failed: %s", e)
            return code

        if result.returncode != 0:
            logger.warning("rustfmt exited with status %d: %s", result.returncode, result.stderr.strip())
            return code
        return result.stdout


def format_with_rustfmt(code: str, edition: str = "2021") -> str:
    """
    Convenience function to format Rust code with rustfmt.

    Args:
        code: Rust source code
        edition: Rust edition passed to rustfmt

    Returns:
        Formatted code
    """
    formatter = RustfmtFormatter()
    config = FormatterConfig(enabled=True, edition=edition)
    return formatter.format(code, config)
