"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Evaluation errors (declaration fields not statically known)
        2000-2999: Message syntax errors (ICU MessageFormat grammar)
        3000-3999: Descriptor errors (missing fields, duplicates, bad arguments)
        4000-4999: Traversal errors (tree limits)
        5000-5999: Catalog errors (cross-unit aggregation)
    """

    # Evaluation errors (1000-1999)
    FIELD_NOT_STATIC = 1001
    FIELD_NOT_STRING = 1002

    # Message syntax errors (2000-2999)
    MESSAGE_SYNTAX_INVALID = 2001
    ICU_PARSE_ERROR = 2002

    # Descriptor errors (3000-3999)
    MISSING_DEFAULT_MESSAGE = 3001
    MISSING_DESCRIPTION = 3002
    MISSING_ID = 3003
    CANNOT_GENERATE_ID = 3004
    DUPLICATE_MESSAGE_ID = 3005
    MALFORMED_DESCRIPTOR_ARGUMENT = 3006

    # Traversal errors (4000-4999)
    MAX_DEPTH_EXCEEDED = 4001

    # Catalog errors (5000-5999)
    CATALOG_DUPLICATE_ID = 5001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Built from the host tree's node locations. Lines and columns are
    1-indexed here even though hosts usually report 0-indexed columns.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        end_line: Last line of the node (1-indexed, optional)
        end_column: Column just past the node end (1-indexed, optional)
    """

    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If line or column is less than 1, or the end
                position precedes the start.
        """
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)
        if self.end_line is not None and self.end_line < self.line:
            msg = f"SourceSpan.end_line ({self.end_line}) must be >= line ({self.line})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (build pipelines, editor integrations).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location of the triggering node (None if unknown)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        filename: Compilation unit the diagnostic belongs to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    filename: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DUPLICATE_MESSAGE_ID]: Duplicate message id "greet" with differing content
              --> src/App.js:12:5
              = help: Give one of the messages a different id
              = note: see https://formatjs.io/docs/core-concepts/icu-syntax

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
