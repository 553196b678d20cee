"""intlextract exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Every ExtractionError is fatal for the compilation unit that raised it;
recoverable per-site problems are reported as warning Diagnostics instead.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import replace
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from intlextract.icu.cursor import ParseError

__all__ = [
    "DuplicateMessageIdError",
    "ExtractionError",
    "IntlError",
    "MalformedDescriptorError",
    "MessageFormatSyntaxError",
    "MessageValidationError",
    "MissingMessageFieldError",
    "StaticEvaluationError",
]


class IntlError(Exception):
    """Base exception for all intlextract errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IntlError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MessageFormatSyntaxError(IntlError):
    """Message text is not valid ICU MessageFormat.

    Raised by the grammar validator. The extractor wraps it in a
    MessageValidationError that points at the declaration site.

    Attributes:
        parse_error: Position and expectation details from the parser
    """

    def __init__(self, message: str | Diagnostic, parse_error: "ParseError | None" = None) -> None:
        """Initialize MessageFormatSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            parse_error: Parser failure details (optional)
        """
        super().__init__(message)
        self.parse_error = parse_error


class ExtractionError(IntlError):
    """Unit-fatal failure while extracting message descriptors.

    Processing of the current compilation unit stops; no partial catalog
    is produced for it.
    """

    def with_filename(self, filename: str) -> "ExtractionError":
        """Attach the compilation unit filename to the diagnostic.

        Args:
            filename: Unit path as reported to the user

        Returns:
            self, with diagnostic and message updated in place
        """
        if self.diagnostic is not None and self.diagnostic.filename is None:
            self.diagnostic = replace(self.diagnostic, filename=filename)
            self.args = (self.diagnostic.format_error(),)
        return self


class StaticEvaluationError(ExtractionError):
    """A recognized descriptor field cannot be resolved at build time.

    Example:
        <FormattedMessage id="x" defaultMessage={greeting} />
        ← greeting is a runtime variable
    """


class MessageValidationError(ExtractionError):
    """A default message failed interpolation-grammar validation.

    The underlying MessageFormatSyntaxError is chained as __cause__.
    """


class MissingMessageFieldError(ExtractionError):
    """A descriptor lacks a field required at this point.

    Covers a missing id after generation was attempted or declined, a
    missing description under enforced mode, and id generation without a
    default message.
    """


class DuplicateMessageIdError(ExtractionError):
    """Two declarations share an id but differ in content."""


class MalformedDescriptorError(ExtractionError):
    """A descriptor function was called without an object-literal argument."""
