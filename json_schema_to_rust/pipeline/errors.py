"""
Errors raised by the generator pipeline.

Every error is raised before any generated text reaches its destination.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..validator import SchemaValidationIssue


class JsonSchemaGenError(Exception):
    """Base class for all generation failures."""

    pass


class SchemaParseError(JsonSchemaGenError):
    """Raised when the schema text is not a well-formed schema document.

    This can happen when:
    - The text is not valid JSON
    - The document is not a JSON object
    - `properties` is not an object, or a property schema is not an object
    - `required` is not an array of strings
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)


class InvalidRootError(JsonSchemaGenError):
    """Raised when the root schema's type is not "object"."""

    def __init__(self, root_type: object):
        self.root_type = root_type
        super().__init__(f'Root schema must have type "object", got {root_type!r}')


class SchemaValidationError(JsonSchemaGenError):
    """Raised in strict mode when the schema uses invalid or unsupported features."""

    def __init__(self, issues: list[SchemaValidationIssue]):
        self.issues = list(issues)
        lines = [f"Schema validation failed with {len(self.issues)} issue(s):"]
        for issue in self.issues:
            lines.append(f"  {issue}")
        super().__init__("\n".join(lines))


class DanglingReferenceError(JsonSchemaGenError):
    """Raised when a field refers to a struct or enum that will not be emitted."""

    def __init__(self, owner: str, field: str, target: str):
        self.owner = owner
        self.field = field
        self.target = target
        super().__init__(f"Field '{field}' of '{owner}' refers to missing definition at '{target}'")


class OutputWriteError(JsonSchemaGenError):
    """Raised when generated code fails validation before being written."""

    pass
