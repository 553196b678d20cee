"""Canonical printer for ICU MessageFormat trees.

Output uses single spaces after argument commas and between options, and
quotes syntax characters in literal text so that parsing the output yields
the same tree. Apostrophes stay single wherever that is unambiguous, so
"it's" prints as written.

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

__all__ = ["print_message", "quote_text"]


def quote_text(value: str, *, plural: bool = False, at_end: bool = False) -> str:
    """Quote literal text for MessageFormat.

    Runs of syntax characters (with any apostrophes directly following
    them) are wrapped in apostrophes. Any other apostrophe stays single
    unless it precedes an apostrophe or a syntax character, where it is
    doubled. A trailing apostrophe is doubled as well unless at_end marks
    the text as the end of the whole message.

    Example:
        >>> quote_text("{braces} and it's")
        "'{'braces'}' and it's"
        >>> quote_text("it'", at_end=True)
        "it'"
    """
    special = "{}#" if plural else "{}"
    out: list[str] = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch in special:
            j = i
            while j < len(value) and (value[j] in special or value[j] == "'"):
                j += 1
            run = value[i:j].replace("'", "''")
            out.append(f"'{run}'")
            i = j
            continue
        if ch == "'":
            nxt = value[i + 1] if i + 1 < len(value) else None
            if nxt is None:
                lone = at_end
            else:
                lone = nxt != "'" and nxt not in special
            out.append("'" if lone else "''")
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def _print_options(options: tuple[Option, ...], *, plural: bool) -> str:
    return " ".join(f"{opt.selector} {{{_print(opt.value, plural=plural)}}}" for opt in options)


def _print_element(element: Element, *, plural: bool, at_end: bool = False) -> str:
    match element:
        case TextElement(value=value):
            return quote_text(value, plural=plural, at_end=at_end)
        case ArgumentElement(name=name):
            return f"{{{name}}}"
        case PoundElement():
            return "#"
        case FormattedElement(name=name, kind=kind, style=None):
            return f"{{{name}, {kind}}}"
        case FormattedElement(name=name, kind=kind, style=style):
            return f"{{{name}, {kind}, {style}}}"
        case PluralElement(name=name, ordinal=ordinal, offset=offset, options=options):
            kind = "selectordinal" if ordinal else "plural"
            prefix = f"offset:{offset} " if offset else ""
            return f"{{{name}, {kind}, {prefix}{_print_options(options, plural=True)}}}"
        case SelectElement(name=name, options=options):
            return f"{{{name}, select, {_print_options(options, plural=False)}}}"
        case _:
            msg = f"Unknown message element: {type(element).__name__}"
            raise TypeError(msg)


def _print(message: Message, *, plural: bool, at_end: bool = False) -> str:
    last = len(message.elements) - 1
    return "".join(
        _print_element(element, plural=plural, at_end=at_end and index == last)
        for index, element in enumerate(message.elements)
    )


def print_message(message: Message) -> str:
    """Print a Message tree as canonical MessageFormat text.

    Example:
        >>> from intlextract.icu.parser import parse_message
        >>> print_message(parse_message("{n,plural,one{# item}other{# items}}"))
        '{n, plural, one {# item} other {# items}}'
    """
    return _print(message, plural=False, at_end=True)
