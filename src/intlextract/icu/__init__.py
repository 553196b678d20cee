"""ICU MessageFormat grammar.

Validates default messages and prints them in a canonical form so that
equivalent spellings ("{ name }" and "{name}") hash to the same id.

Python 3.13+. Zero external dependencies.
"""

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
from .parser import FORMAT_TYPES, PLURAL_KEYWORDS, MessageParser, parse_message
from .printer import print_message, quote_text

__all__ = [
    "FORMAT_TYPES",
    "PLURAL_KEYWORDS",
    "ArgumentElement",
    "Cursor",
    "Element",
    "FormattedElement",
    "Message",
    "MessageParser",
    "Option",
    "ParseError",
    "ParseResult",
    "PluralElement",
    "PoundElement",
    "SelectElement",
    "TextElement",
    "normalize_message",
    "parse_message",
    "print_message",
    "quote_text",
]


def normalize_message(text: str) -> str:
    """Validate message text and return its canonical spelling.

    Args:
        text: ICU MessageFormat source

    Returns:
        Canonical MessageFormat text

    Raises:
        MessageFormatSyntaxError: If text is not valid MessageFormat

    Example:
        >>> normalize_message("Hello, { name }!")
        'Hello, {name}!'
    """
    return print_message(parse_message(text))
