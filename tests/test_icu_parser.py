"""Tests for icu.parser: MessageFormat grammar, quoting and error reporting."""

import pytest
from hypothesis import given

from intlextract.diagnostics import DiagnosticCode, MessageFormatSyntaxError
from intlextract.icu import (
    ArgumentElement,
    Cursor,
    FormattedElement,
    Message,
    MessageParser,
    Option,
    ParseError,
    PluralElement,
    PoundElement,
    SelectElement,
    TextElement,
    parse_message,
)
from tests.strategies import argument_names, plain_texts

# ============================================================================
# CURSOR
# ============================================================================


class TestCursor:
    """Immutable cursor primitives."""

    def test_advance_returns_new_cursor(self) -> None:
        cursor = Cursor("ab", 0)
        moved = cursor.advance()
        assert cursor.pos == 0
        assert moved.pos == 1

    def test_advance_clamps_at_eof(self) -> None:
        assert Cursor("ab", 1).advance(10).pos == 2

    def test_current_at_eof_raises(self) -> None:
        with pytest.raises(EOFError, match="Unexpected end of message"):
            _ = Cursor("a", 1).current

    def test_peek_beyond_eof_is_none(self) -> None:
        assert Cursor("a", 0).peek(1) is None

    def test_expect(self) -> None:
        assert Cursor("{x", 0).expect("{") == Cursor("{x", 1)
        assert Cursor("{x", 0).expect("}") is None

    def test_compute_line_col_multiline(self) -> None:
        assert Cursor("one\ntwo", 0).compute_line_col() == (1, 1)
        assert Cursor("one\ntwo", 5).compute_line_col() == (2, 2)


class TestParseError:
    """ParseError formatting."""

    def test_format_error_with_expected(self) -> None:
        error = ParseError("Unclosed argument", Cursor("{name", 5), expected=("}",))
        assert error.format_error() == "1:6: Unclosed argument (expected: '}')"

    def test_describe_without_expected(self) -> None:
        error = ParseError("Unmatched '}'", Cursor("}", 0))
        assert error.describe() == "Unmatched '}'"

    def test_format_with_context_points_at_column(self) -> None:
        error = ParseError("Unclosed argument", Cursor("Hi {name", 8))
        lines = error.format_with_context().split("\n")
        assert lines[0] == "1:9: Unclosed argument"
        assert lines[2] == "   1 | Hi {name"
        assert lines[3].index("^") == len("   1 | ") + 8


# ============================================================================
# ARGUMENTS
# ============================================================================


class TestSimpleMessages:
    """Text and simple placeholders."""

    def test_empty_message(self) -> None:
        assert parse_message("") == Message(())

    def test_plain_text(self) -> None:
        assert parse_message("Hello, world") == Message((TextElement("Hello, world"),))

    def test_simple_argument(self) -> None:
        assert parse_message("Hello {name}!") == Message(
            (TextElement("Hello "), ArgumentElement("name"), TextElement("!"))
        )

    def test_whitespace_inside_braces_is_ignored(self) -> None:
        assert parse_message("{  name \n}") == Message((ArgumentElement("name"),))

    def test_pound_outside_plural_is_text(self) -> None:
        assert parse_message("#1 fan") == Message((TextElement("#1 fan"),))

    @given(text=plain_texts)
    def test_plain_text_parses_to_single_element(self, text: str) -> None:
        expected = Message((TextElement(text),)) if text else Message(())
        assert parse_message(text) == expected

    @given(name=argument_names)
    def test_any_identifier_is_an_argument_name(self, name: str) -> None:
        assert parse_message(f"{{{name}}}") == Message((ArgumentElement(name),))


class TestFormattedArguments:
    """Typed placeholders."""

    @pytest.mark.parametrize("kind", ["number", "date", "time", "spellout", "ordinal", "duration"])
    def test_format_types(self, kind: str) -> None:
        assert parse_message(f"{{v, {kind}}}") == Message((FormattedElement("v", kind),))

    def test_style_is_trimmed(self) -> None:
        assert parse_message("{when, date,  short }") == Message(
            (FormattedElement("when", "date", "short"),)
        )

    def test_skeleton_style(self) -> None:
        assert parse_message("{n, number, ::currency/EUR}") == Message(
            (FormattedElement("n", "number", "::currency/EUR"),)
        )

    def test_style_with_balanced_braces(self) -> None:
        message = parse_message("{n, number, a{b}c}")
        assert message == Message((FormattedElement("n", "number", "a{b}c"),))


class TestPlural:
    """plural and selectordinal arguments."""

    def test_plural_with_pound(self) -> None:
        message = parse_message("{n, plural, one {# item} other {# items}}")
        assert message == Message(
            (
                PluralElement(
                    name="n",
                    ordinal=False,
                    offset=0,
                    options=(
                        Option("one", Message((PoundElement(), TextElement(" item")))),
                        Option("other", Message((PoundElement(), TextElement(" items")))),
                    ),
                ),
            )
        )

    def test_exact_selectors_and_offset(self) -> None:
        message = parse_message("{n, plural, offset:1 =0 {none} =1 {one} other {# more}}")
        plural = message.elements[0]
        assert isinstance(plural, PluralElement)
        assert plural.offset == 1
        assert [option.selector for option in plural.options] == ["=0", "=1", "other"]

    def test_selectordinal(self) -> None:
        message = parse_message("{n, selectordinal, one {#st} two {#nd} few {#rd} other {#th}}")
        plural = message.elements[0]
        assert isinstance(plural, PluralElement)
        assert plural.ordinal is True
        assert len(plural.options) == 4

    def test_quoted_pound_inside_plural_is_text(self) -> None:
        message = parse_message("{n, plural, other {'#' tag}}")
        plural = message.elements[0]
        assert isinstance(plural, PluralElement)
        assert plural.options[0].value == Message((TextElement("# tag"),))

    def test_nested_argument_in_option(self) -> None:
        message = parse_message("{n, plural, other {{who} has # cats}}")
        plural = message.elements[0]
        assert isinstance(plural, PluralElement)
        assert plural.options[0].value.elements[0] == ArgumentElement("who")


class TestSelect:
    """select arguments."""

    def test_select(self) -> None:
        message = parse_message("{g, select, male {He} female {She} other {They}}")
        assert message == Message(
            (
                SelectElement(
                    "g",
                    (
                        Option("male", Message((TextElement("He"),))),
                        Option("female", Message((TextElement("She"),))),
                        Option("other", Message((TextElement("They"),))),
                    ),
                ),
            )
        )

    def test_pound_in_select_is_text(self) -> None:
        message = parse_message("{g, select, other {#}}")
        select = message.elements[0]
        assert isinstance(select, SelectElement)
        assert select.options[0].value == Message((TextElement("#"),))

    def test_select_nesting_plural(self) -> None:
        message = parse_message("{g, select, other {{n, plural, one {# cat} other {# cats}}}}")
        select = message.elements[0]
        assert isinstance(select, SelectElement)
        assert isinstance(select.options[0].value.elements[0], PluralElement)


# ============================================================================
# QUOTING
# ============================================================================


class TestQuoting:
    """Apostrophe handling."""

    def test_apostrophe_before_letter_is_literal(self) -> None:
        assert parse_message("It's") == Message((TextElement("It's"),))

    def test_doubled_apostrophe(self) -> None:
        assert parse_message("a''b") == Message((TextElement("a'b"),))

    def test_quoted_braces(self) -> None:
        assert parse_message("'{literal}'") == Message((TextElement("{literal}"),))

    def test_unterminated_quote_runs_to_end(self) -> None:
        assert parse_message("'{open") == Message((TextElement("{open"),))

    def test_trailing_apostrophe_is_literal(self) -> None:
        assert parse_message("end'") == Message((TextElement("end'"),))


# ============================================================================
# ERRORS
# ============================================================================


def _error(text: str) -> MessageFormatSyntaxError:
    with pytest.raises(MessageFormatSyntaxError) as info:
        parse_message(text)
    return info.value


class TestErrors:
    """Syntax errors carry a ParseError with position and expectations."""

    def test_unclosed_argument(self) -> None:
        error = _error("{name")
        assert error.parse_error is not None
        assert error.parse_error.format_error() == "1:6: Unclosed argument (expected: '}')"

    def test_unmatched_closing_brace(self) -> None:
        error = _error("Hi }")
        assert error.parse_error is not None
        assert error.parse_error.message == "Unmatched '}'"
        assert error.parse_error.column == 4

    def test_diagnostic_code(self) -> None:
        error = _error("{name")
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.ICU_PARSE_ERROR

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("{}", "Expected argument name"),
            ("{n plural}", "Unexpected character in argument"),
            ("{n, foo}", "Unknown argument type 'foo'"),
            ("{n, plural}", "Expected options for plural"),
            ("{n, plural, one {x}}", "Missing 'other' option"),
            ("{n, plural, foo {x} other {y}}", "Invalid plural selector 'foo'"),
            ("{n, select, a {x} a {y} other {z}}", "Duplicate selector 'a'"),
            ("{n, select, a x other {y}}", "Expected message for selector 'a'"),
            ("{n, select, other {x}", "Unclosed argument"),
            ("{n, select, other {x", "Unclosed option message"),
            ("{n, number, }", "Expected argument style"),
            ("{n, plural, offset:x other {y}}", "Expected number"),
        ],
    )
    def test_error_messages(self, text: str, message: str) -> None:
        error = _error(text)
        assert error.parse_error is not None
        assert error.parse_error.message == message

    def test_error_position_on_second_line(self) -> None:
        error = _error("line one\n{name")
        assert error.parse_error is not None
        assert (error.parse_error.line, error.parse_error.column) == (2, 6)

    def test_nesting_limit(self) -> None:
        text = "{a, select, other {{b, select, other {{c, select, other {x}}}}}}"
        parser = MessageParser(max_depth=2)
        with pytest.raises(MessageFormatSyntaxError) as info:
            parser.parse(text)
        assert info.value.parse_error is not None
        assert "maximum depth (2)" in info.value.parse_error.message

    def test_parser_is_reusable_after_error(self) -> None:
        parser = MessageParser()
        with pytest.raises(MessageFormatSyntaxError):
            parser.parse("{n, select, other {{")
        assert parser.parse("{x}") == Message((ArgumentElement("x"),))
