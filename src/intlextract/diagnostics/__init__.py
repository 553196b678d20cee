"""Diagnostic system for extraction errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DuplicateMessageIdError,
    ExtractionError,
    IntlError,
    MalformedDescriptorError,
    MessageFormatSyntaxError,
    MessageValidationError,
    MissingMessageFieldError,
    StaticEvaluationError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateMessageIdError",
    "ErrorTemplate",
    "ExtractionError",
    "IntlError",
    "MalformedDescriptorError",
    "MessageFormatSyntaxError",
    "MessageValidationError",
    "MissingMessageFieldError",
    "OutputFormat",
    "SourceSpan",
    "StaticEvaluationError",
]
