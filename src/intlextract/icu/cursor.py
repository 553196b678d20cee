"""Immutable cursor infrastructure for the message-text parser.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns a NEW cursor, so a parsing loop that forgets
      to reassign cannot spin forever
    - Line:column computed on demand (only needed for errors)

Message text is usually one line, but descriptors written as template
literals can span several; \\n is the line delimiter.
"""

from dataclasses import dataclass, field

from intlextract.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position in message text.

    Example:
        >>> cursor = Cursor("{name}", 0)
        >>> cursor.current
        '{'
        >>> cursor.advance().current
        'n'
        >>> Cursor("x", 1).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True when every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at pos + offset, or None beyond EOF (lookahead only)."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """New cursor moved forward by count characters (clamped at EOF)."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def slice_to(self, end_pos: int) -> str:
        """Source text from this cursor up to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip Unicode whitespace between argument tokens.

        Example:
            >>> Cursor("  ,", 0).skip_whitespace().pos
            2
        """
        c = self
        while not c.is_eof and c.current.isspace():
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume char if it is next, else None."""
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """(line, column) of the cursor, both 1-indexed.

        Example:
            >>> Cursor("one\\ntwo", 5).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parsed value together with the cursor just past it.

    Type Parameters:
        T: The type of the parsed value
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse failure with location and expectations.

    Example:
        >>> error = ParseError("Unclosed argument", Cursor("{name", 5), expected=("}",))
        >>> error.format_error()
        "1:6: Unclosed argument (expected: '}')"
    """

    message: str
    cursor: Cursor
    expected: tuple[str, ...] = field(default_factory=tuple)

    @property
    def line(self) -> int:
        """1-indexed line of the failure."""
        return self.cursor.compute_line_col()[0]

    @property
    def column(self) -> int:
        """1-indexed column of the failure."""
        return self.cursor.compute_line_col()[1]

    def describe(self) -> str:
        """Message plus expectations, without the position prefix."""
        if not self.expected:
            return self.message
        expected_str = ", ".join(f"'{e}'" for e in self.expected)
        return f"{self.message} (expected: {expected_str})"

    def format_error(self) -> str:
        """Format error as "line:column: message (expected: ...)"."""
        line, col = self.cursor.compute_line_col()
        return f"{line}:{col}: {self.describe()}"

    def format_with_context(self) -> str:
        """Format error with the offending line and a caret under the column.

        Example:
            >>> error = ParseError("Unclosed argument", Cursor("Hi {name", 8))
            >>> print(error.format_with_context())
            1:9: Unclosed argument
            <BLANKLINE>
               1 | Hi {name
                 |         ^
        """
        line, col = self.cursor.compute_line_col()
        text = self.cursor.source.split("\n")[line - 1]
        prefix = f"{line:4} | "
        pointer = " " * 4 + " | " + " " * (col - 1) + "^"
        return "\n".join([self.format_error(), "", prefix + text, pointer])
