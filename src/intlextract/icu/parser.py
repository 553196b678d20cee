"""Recursive-descent parser for ICU MessageFormat text.

Grammar (ICU apostrophe mode DOUBLE_OPTIONAL, as in formatjs):

    message     := (text | argument | "#")*          "#" only inside plural options
    argument    := "{" name "}"
                 | "{" name "," format-type ["," style] "}"
                 | "{" name "," ("plural" | "selectordinal") "," ["offset:" int] option+ "}"
                 | "{" name "," "select" "," option+ "}"
    option      := selector "{" message "}"
    selector    := "=" number | keyword

Quoting: "''" is a literal apostrophe; an apostrophe before a syntax
character ("{", "}", or "#" inside plural options) starts a quoted literal
that runs to the next single apostrophe. Any other apostrophe is literal.

Python 3.13+. Zero external dependencies.
"""

from typing import NoReturn

from intlextract.constants import MAX_DEPTH
from intlextract.core.depth_guard import DepthGuard
from intlextract.diagnostics import ErrorTemplate, MessageFormatSyntaxError

from .ast import (
    ArgumentElement,
    Element,
    FormattedElement,
    Message,
    Option,
    PluralElement,
    PoundElement,
    SelectElement,
    TextElement,
)
from .cursor import Cursor, ParseError, ParseResult

__all__ = [
    "FORMAT_TYPES",
    "PLURAL_KEYWORDS",
    "MessageParser",
    "parse_message",
]

# Typed placeholders taking an optional free-form style.
FORMAT_TYPES: frozenset[str] = frozenset({
    "number",
    "date",
    "time",
    "spellout",
    "ordinal",
    "duration",
})

# CLDR plural categories.
PLURAL_KEYWORDS: frozenset[str] = frozenset({"zero", "one", "two", "few", "many", "other"})

_PLURAL_TYPES: dict[str, bool] = {"plural": False, "selectordinal": True}

# Characters that end an argument name, type or selector.
_NAME_STOP: frozenset[str] = frozenset("{}#,'=:|")

_OFFSET_PREFIX = "offset:"


def _fail(message: str, cursor: Cursor, expected: tuple[str, ...] = ()) -> NoReturn:
    error = ParseError(message, cursor, expected)
    diagnostic = ErrorTemplate.icu_parse_error(error.describe(), error.line, error.column)
    raise MessageFormatSyntaxError(diagnostic, parse_error=error)


class MessageParser:
    """ICU MessageFormat parser.

    Raises MessageFormatSyntaxError (carrying a ParseError) on the first
    problem; there is no recovery.

    Example:
        >>> MessageParser().parse("Hello {name}!")
        Message(elements=(TextElement(value='Hello '), ArgumentElement(name='name'), TextElement(value='!')))
    """

    __slots__ = ("_depth_guard",)

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        self._depth_guard = DepthGuard(max_depth=max_depth)

    def parse(self, text: str) -> Message:
        """Parse message text into a Message tree.

        Raises:
            MessageFormatSyntaxError: If text is not valid MessageFormat
        """
        self._depth_guard.reset()
        result = self._parse_message(Cursor(text, 0), plural=False)
        if not result.cursor.is_eof:
            _fail("Unmatched '}'", result.cursor)
        return result.value

    # ------------------------------------------------------------------
    # Messages and text
    # ------------------------------------------------------------------

    def _parse_message(self, cursor: Cursor, *, plural: bool) -> ParseResult[Message]:
        """Parse elements up to EOF or an unmatched '}' (not consumed)."""
        elements: list[Element] = []
        while not cursor.is_eof:
            ch = cursor.current
            if ch == "}":
                break
            if ch == "{":
                argument = self._parse_argument(cursor)
                elements.append(argument.value)
                cursor = argument.cursor
            elif ch == "#" and plural:
                elements.append(PoundElement())
                cursor = cursor.advance()
            else:
                text = self._parse_text(cursor, plural=plural)
                elements.append(text.value)
                cursor = text.cursor
        return ParseResult(Message(tuple(elements)), cursor)

    def _nested_message(self, cursor: Cursor, *, plural: bool) -> ParseResult[Message]:
        if self._depth_guard.depth >= self._depth_guard.max_depth:
            _fail(f"Message nesting exceeds maximum depth ({self._depth_guard.max_depth})", cursor)
        with self._depth_guard:
            return self._parse_message(cursor, plural=plural)

    @staticmethod
    def _parse_text(cursor: Cursor, *, plural: bool) -> ParseResult[TextElement]:
        special = "{}#" if plural else "{}"
        parts: list[str] = []
        while not cursor.is_eof:
            ch = cursor.current
            if ch in special:
                break
            if ch == "'":
                nxt = cursor.peek(1)
                if nxt == "'":
                    parts.append("'")
                    cursor = cursor.advance(2)
                    continue
                if nxt is not None and nxt in special:
                    quoted = MessageParser._parse_quoted(cursor.advance())
                    parts.append(quoted.value)
                    cursor = quoted.cursor
                    continue
            parts.append(ch)
            cursor = cursor.advance()
        return ParseResult(TextElement("".join(parts)), cursor)

    @staticmethod
    def _parse_quoted(cursor: Cursor) -> ParseResult[str]:
        """Quoted literal body; an unterminated quote runs to the end of text."""
        parts: list[str] = []
        while not cursor.is_eof:
            ch = cursor.current
            if ch == "'":
                if cursor.peek(1) == "'":
                    parts.append("'")
                    cursor = cursor.advance(2)
                    continue
                return ParseResult("".join(parts), cursor.advance())
            parts.append(ch)
            cursor = cursor.advance()
        return ParseResult("".join(parts), cursor)

    # ------------------------------------------------------------------
    # Arguments
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_name(cursor: Cursor, what: str) -> ParseResult[str]:
        start = cursor
        while not cursor.is_eof and not cursor.current.isspace() and cursor.current not in _NAME_STOP:
            cursor = cursor.advance()
        if cursor.pos == start.pos:
            _fail(f"Expected {what}", cursor)
        return ParseResult(start.slice_to(cursor.pos), cursor)

    def _parse_argument(self, cursor: Cursor) -> ParseResult[Element]:
        """Parse from '{' through the matching '}'."""
        cursor = cursor.advance().skip_whitespace()
        name = self._parse_name(cursor, "argument name")
        cursor = name.cursor.skip_whitespace()

        if cursor.is_eof:
            _fail("Unclosed argument", cursor, ("}",))
        if cursor.current == "}":
            return ParseResult(ArgumentElement(name.value), cursor.advance())
        if cursor.current != ",":
            _fail("Unexpected character in argument", cursor, (",", "}"))

        cursor = cursor.advance().skip_whitespace()
        kind_start = cursor
        kind = self._parse_name(cursor, "argument type")
        cursor = kind.cursor.skip_whitespace()

        if kind.value in FORMAT_TYPES:
            return self._parse_format_tail(cursor, name.value, kind.value)

        if kind.value in _PLURAL_TYPES or kind.value == "select":
            after_comma = cursor.expect(",")
            if after_comma is None:
                _fail(f"Expected options for {kind.value}", cursor, (",",))
            if kind.value == "select":
                options = self._parse_options(after_comma, plural=False)
                return ParseResult(SelectElement(name.value, options.value), options.cursor)
            return self._parse_plural_tail(
                after_comma, name.value, ordinal=_PLURAL_TYPES[kind.value]
            )

        _fail(f"Unknown argument type '{kind.value}'", kind_start)

    def _parse_format_tail(self, cursor: Cursor, name: str, kind: str) -> ParseResult[Element]:
        if cursor.is_eof:
            _fail("Unclosed argument", cursor, ("}",))
        if cursor.current == "}":
            return ParseResult(FormattedElement(name, kind), cursor.advance())
        if cursor.current != ",":
            _fail("Unexpected character in argument", cursor, (",", "}"))
        style = self._parse_style(cursor.advance())
        return ParseResult(FormattedElement(name, kind, style.value), style.cursor)

    @staticmethod
    def _parse_style(cursor: Cursor) -> ParseResult[str]:
        """Style text up to the argument's closing '}' (consumed).

        Braces inside the style must balance; quoted segments are copied
        verbatim.
        """
        start = cursor
        depth = 0
        while not cursor.is_eof:
            ch = cursor.current
            if ch == "'":
                quoted = MessageParser._parse_quoted(cursor.advance())
                cursor = quoted.cursor
                continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                if depth == 0:
                    style = start.slice_to(cursor.pos).strip()
                    if not style:
                        _fail("Expected argument style", start)
                    return ParseResult(style, cursor.advance())
                depth -= 1
            cursor = cursor.advance()
        _fail("Unclosed argument", cursor, ("}",))

    def _parse_plural_tail(self, cursor: Cursor, name: str, *, ordinal: bool) -> ParseResult[Element]:
        cursor = cursor.skip_whitespace()
        offset = 0
        if cursor.source.startswith(_OFFSET_PREFIX, cursor.pos):
            cursor = cursor.advance(len(_OFFSET_PREFIX)).skip_whitespace()
            number = self._parse_number(cursor, signed=False)
            offset = int(number.value)
            cursor = number.cursor
        options = self._parse_options(cursor, plural=True)
        return ParseResult(PluralElement(name, ordinal, offset, options.value), options.cursor)

    @staticmethod
    def _parse_number(cursor: Cursor, *, signed: bool) -> ParseResult[str]:
        start = cursor
        if signed and not cursor.is_eof and cursor.current == "-":
            cursor = cursor.advance()
        digits_start = cursor.pos
        while not cursor.is_eof and cursor.current in "0123456789":
            cursor = cursor.advance()
        if cursor.pos == digits_start:
            _fail("Expected number", cursor)
        if signed and not cursor.is_eof and cursor.current == ".":
            fraction = cursor.advance()
            while not fraction.is_eof and fraction.current in "0123456789":
                fraction = fraction.advance()
            if fraction.pos > cursor.pos + 1:
                cursor = fraction
        return ParseResult(start.slice_to(cursor.pos), cursor)

    def _parse_options(self, cursor: Cursor, *, plural: bool) -> ParseResult[tuple[Option, ...]]:
        """Parse `selector {message}` pairs and the closing '}' (consumed)."""
        options: list[Option] = []
        seen: set[str] = set()
        while True:
            cursor = cursor.skip_whitespace()
            if cursor.is_eof:
                _fail("Unclosed argument", cursor, ("}",))
            if cursor.current == "}":
                break

            selector_start = cursor
            if plural and cursor.current == "=":
                number = self._parse_number(cursor.advance(), signed=True)
                selector = "=" + number.value
                cursor = number.cursor
            else:
                keyword = self._parse_name(cursor, "option selector")
                selector = keyword.value
                cursor = keyword.cursor
                if plural and selector not in PLURAL_KEYWORDS:
                    _fail(
                        f"Invalid plural selector '{selector}'",
                        selector_start,
                        tuple(sorted(PLURAL_KEYWORDS)),
                    )
            if selector in seen:
                _fail(f"Duplicate selector '{selector}'", selector_start)
            seen.add(selector)

            opened = cursor.skip_whitespace().expect("{")
            if opened is None:
                _fail(f"Expected message for selector '{selector}'", cursor.skip_whitespace(), ("{",))
            body = self._nested_message(opened, plural=plural)
            closed = body.cursor.expect("}")
            if closed is None:
                _fail("Unclosed option message", body.cursor, ("}",))
            options.append(Option(selector, body.value))
            cursor = closed

        if "other" not in seen:
            _fail("Missing 'other' option", cursor, ("other",))
        return ParseResult(tuple(options), cursor.advance())


def parse_message(text: str) -> Message:
    """Parse ICU MessageFormat text.

    Raises:
        MessageFormatSyntaxError: If text is not valid MessageFormat
    """
    return MessageParser().parse(text)
