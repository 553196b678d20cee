"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from intlextract.constants import MESSAGE_SYNTAX_URL

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every message in one place where tests can assert on it.
    """

    _DOCS_BASE = "https://formatjs.io/docs"

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    @staticmethod
    def field_not_static(field: str, span: SourceSpan | None = None) -> Diagnostic:
        """Recognized field value cannot be folded to a constant.

        Args:
            field: Descriptor field name (id, description, defaultMessage)
            span: Location of the value node

        Returns:
            Diagnostic for FIELD_NOT_STATIC
        """
        msg = f"Message field `{field}` must be statically evaluable for extraction"
        return Diagnostic(
            code=DiagnosticCode.FIELD_NOT_STATIC,
            message=msg,
            span=span,
            hint="Use a string literal or a template literal without expressions",
        )

    @staticmethod
    def field_not_string(field: str, type_name: str, span: SourceSpan | None = None) -> Diagnostic:
        """Recognized field folds to a constant that is not a string.

        Args:
            field: Descriptor field name
            type_name: JavaScript type of the folded value
            span: Location of the value node

        Returns:
            Diagnostic for FIELD_NOT_STRING
        """
        msg = f"Message field `{field}` must be a string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.FIELD_NOT_STRING,
            message=msg,
            span=span,
            hint="Quote the value so it is a string literal",
        )

    # ------------------------------------------------------------------
    # Message syntax
    # ------------------------------------------------------------------

    @staticmethod
    def message_syntax_invalid(detail: str, span: SourceSpan | None = None) -> Diagnostic:
        """Default message failed interpolation-grammar validation.

        Args:
            detail: Parser error description
            span: Location of the defaultMessage value node

        Returns:
            Diagnostic for MESSAGE_SYNTAX_INVALID
        """
        msg = f"Message failed interpolation-grammar validation: {detail}"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_SYNTAX_INVALID,
            message=msg,
            span=span,
            hint="Check braces, argument types and plural/select options",
            help_url=MESSAGE_SYNTAX_URL,
        )

    @staticmethod
    def icu_parse_error(detail: str, line: int, column: int) -> Diagnostic:
        """ICU MessageFormat parser failure.

        Args:
            detail: What the parser expected or found
            line: Line inside the message text (1-indexed)
            column: Column inside the message text (1-indexed)

        Returns:
            Diagnostic for ICU_PARSE_ERROR
        """
        msg = f"{line}:{column}: {detail}"
        return Diagnostic(
            code=DiagnosticCode.ICU_PARSE_ERROR,
            message=msg,
            span=SourceSpan(line=line, column=column),
            help_url=MESSAGE_SYNTAX_URL,
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Message text ended while the parser expected more input.

        Args:
            position: Character offset of the end of input

        Returns:
            Diagnostic for ICU_PARSE_ERROR
        """
        msg = f"Unexpected end of message at position {position}"
        return Diagnostic(code=DiagnosticCode.ICU_PARSE_ERROR, message=msg)

    # ------------------------------------------------------------------
    # Descriptors
    # ------------------------------------------------------------------

    @staticmethod
    def missing_default_message(span: SourceSpan | None = None) -> Diagnostic:
        """Declaration has no default message and is left out (warning).

        Args:
            span: Location of the declaration site

        Returns:
            Warning Diagnostic for MISSING_DEFAULT_MESSAGE
        """
        where = f"Line {span.line}: " if span is not None else ""
        msg = f"{where}Message is missing a `defaultMessage` and will not be extracted"
        return Diagnostic(
            code=DiagnosticCode.MISSING_DEFAULT_MESSAGE,
            message=msg,
            span=span,
            severity="warning",
        )

    @staticmethod
    def missing_description(span: SourceSpan | None = None) -> Diagnostic:
        """Description required by enforceDescriptions but absent.

        Args:
            span: Location of the declaration site

        Returns:
            Diagnostic for MISSING_DESCRIPTION
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_DESCRIPTION,
            message="Message must have a `description`",
            span=span,
            hint="Describe where and how the message is shown for translators",
        )

    @staticmethod
    def missing_id(span: SourceSpan | None = None) -> Diagnostic:
        """Descriptor reached the registry without an id.

        Args:
            span: Location of the declaration site

        Returns:
            Diagnostic for MISSING_ID
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_ID,
            message="Message is missing an `id`",
            span=span,
            hint="Add an explicit id or enable generateMessageIds",
        )

    @staticmethod
    def cannot_generate_id(span: SourceSpan | None = None) -> Diagnostic:
        """Id generation requested for a descriptor with no default message.

        Args:
            span: Location of the declaration site

        Returns:
            Diagnostic for CANNOT_GENERATE_ID
        """
        return Diagnostic(
            code=DiagnosticCode.CANNOT_GENERATE_ID,
            message="Message must have a `defaultMessage` or an explicit `id`",
            span=span,
        )

    @staticmethod
    def duplicate_message_id(message_id: str, span: SourceSpan | None = None) -> Diagnostic:
        """Id already stored with a different description or default message.

        Args:
            message_id: The conflicting id
            span: Location of the second declaration

        Returns:
            Diagnostic for DUPLICATE_MESSAGE_ID
        """
        msg = (
            f'Duplicate message id: "{message_id}", '
            "but the `description` and/or `defaultMessage` are different"
        )
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_MESSAGE_ID,
            message=msg,
            span=span,
            hint="Give one of the messages a different id or make them identical",
        )

    @staticmethod
    def malformed_descriptor_argument(callee: str, span: SourceSpan | None = None) -> Diagnostic:
        """Descriptor function called without an object-literal descriptor.

        Args:
            callee: Name of the called function as written
            span: Location of the call

        Returns:
            Diagnostic for MALFORMED_DESCRIPTOR_ARGUMENT
        """
        msg = (
            f"`{callee}()` must be called with message descriptors "
            "defined via object expressions"
        )
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_DESCRIPTOR_ARGUMENT,
            message=msg,
            span=span,
            help_url=f"{ErrorTemplate._DOCS_BASE}/react-intl/api#definemessages",
        )

    # ------------------------------------------------------------------
    # Traversal and catalogs
    # ------------------------------------------------------------------

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Tree nesting exceeded the traversal limit.

        Args:
            max_depth: The configured limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="The syntax tree is unusually deep; check the host parser output",
        )

    @staticmethod
    def catalog_duplicate_id(message_id: str, first: str, second: str) -> Diagnostic:
        """Two units declare the same id with different content.

        Args:
            message_id: The conflicting id
            first: Unit that declared the id first
            second: Unit with the conflicting declaration

        Returns:
            Diagnostic for CATALOG_DUPLICATE_ID
        """
        msg = (
            f'Duplicate message id: "{message_id}" declared in {first} and {second} '
            "with different `description` and/or `defaultMessage`"
        )
        return Diagnostic(
            code=DiagnosticCode.CATALOG_DUPLICATE_ID,
            message=msg,
            filename=second,
        )
