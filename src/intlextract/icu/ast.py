"""ICU MessageFormat syntax tree.

Immutable nodes produced by intlextract.icu.parser and consumed by
intlextract.icu.printer.

Example:
    "{count, plural, one {# file} other {# files}}" parses to
    Message(elements=(
        PluralElement(name="count", ordinal=False, offset=0, options=(
            Option("one", Message((PoundElement(), TextElement(" file")))),
            Option("other", Message((PoundElement(), TextElement(" files")))),
        )),
    ))

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = [
    "ArgumentElement",
    "Element",
    "FormattedElement",
    "Message",
    "Option",
    "PluralElement",
    "PoundElement",
    "SelectElement",
    "TextElement",
]


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text with quoting already resolved."""

    value: str


@dataclass(frozen=True, slots=True)
class ArgumentElement:
    """Simple placeholder: {name}."""

    name: str


@dataclass(frozen=True, slots=True)
class PoundElement:
    """`#` inside a plural option: the (offset-adjusted) number."""


@dataclass(frozen=True, slots=True)
class FormattedElement:
    """Typed placeholder: {name, number}, {when, date, short}.

    Attributes:
        name: Argument name
        kind: number, date, time, spellout, ordinal or duration
        style: Style text as written (trimmed), or None
    """

    name: str
    kind: str
    style: str | None = None


@dataclass(frozen=True, slots=True)
class Option:
    """One `selector {message}` branch of a plural or select."""

    selector: str
    value: "Message"


@dataclass(frozen=True, slots=True)
class PluralElement:
    """{name, plural, ...} or {name, selectordinal, ...}.

    Attributes:
        name: Argument name
        ordinal: True for selectordinal
        offset: Value subtracted before keyword selection (plural only)
        options: Branches in source order
    """

    name: str
    ordinal: bool
    offset: int
    options: tuple[Option, ...]


@dataclass(frozen=True, slots=True)
class SelectElement:
    """{name, select, key {message} ... other {message}}."""

    name: str
    options: tuple[Option, ...]


type Element = (
    TextElement | ArgumentElement | PoundElement | FormattedElement | PluralElement | SelectElement
)


@dataclass(frozen=True, slots=True)
class Message:
    """Sequence of elements; the root of every parse and every option body."""

    elements: tuple[Element, ...]
