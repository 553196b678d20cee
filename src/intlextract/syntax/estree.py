"""ESTree JSON interchange for the host tree.

Converts between the JSON trees produced by JavaScript parsers and the
frozen dataclasses in intlextract.syntax.ast. Both Babel-flavoured trees
(`File`, `StringLiteral`, `ObjectProperty`, `JSXText.extra.raw`) and plain
ESTree trees (`Literal`, `Property`) are accepted; output is always
Babel-flavoured.

Node kinds without a dedicated class become GenericNode and round-trip
unchanged. A known node kind carrying extra non-empty keys the dataclass has
no field for (TypeScript annotations on an Identifier, for example) is also
kept as GenericNode so nothing is lost.

Positional offsets (`start`, `end`, `range`) and comment attachments on
dedicated nodes are not carried; `loc` is.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import Any

from .ast import (
    ArrayExpression,
    BinaryExpression,
    BooleanLiteral,
    CallExpression,
    ConditionalExpression,
    ExportDefaultDeclaration,
    ExportNamedDeclaration,
    ExpressionStatement,
    GenericNode,
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    JSXAttribute,
    JSXClosingElement,
    JSXElement,
    JSXEmptyExpression,
    JSXExpressionContainer,
    JSXIdentifier,
    JSXMemberExpression,
    JSXNamespacedName,
    JSXOpeningElement,
    JSXSpreadAttribute,
    JSXText,
    LogicalExpression,
    MemberExpression,
    Node,
    NullLiteral,
    NumericLiteral,
    ObjectExpression,
    ObjectProperty,
    Program,
    SourceLocation,
    SpreadElement,
    StringLiteral,
    TemplateElement,
    TemplateLiteral,
    UnaryExpression,
    VariableDeclaration,
    VariableDeclarator,
)

__all__ = ["ESTreeError", "from_estree", "to_estree"]


class ESTreeError(ValueError):
    """Raised when a JSON tree is not a well-formed ESTree node."""


# ESTree key -> dataclass attribute, per dedicated node class.
_FIELD_MAP: dict[type, tuple[tuple[str, str], ...]] = {
    Program: (
        ("body", "body"),
        ("sourceType", "source_type"),
        ("directives", "directives"),
        ("interpreter", "interpreter"),
    ),
    ImportDeclaration: (
        ("specifiers", "specifiers"),
        ("source", "source"),
        ("importKind", "import_kind"),
    ),
    ImportSpecifier: (("imported", "imported"), ("local", "local"), ("importKind", "import_kind")),
    ImportDefaultSpecifier: (("local", "local"),),
    ImportNamespaceSpecifier: (("local", "local"),),
    ExpressionStatement: (("expression", "expression"),),
    VariableDeclaration: (("kind", "kind"), ("declarations", "declarations")),
    VariableDeclarator: (("id", "id"), ("init", "init")),
    ExportNamedDeclaration: (
        ("declaration", "declaration"),
        ("specifiers", "specifiers"),
        ("source", "source"),
    ),
    ExportDefaultDeclaration: (("declaration", "declaration"),),
    StringLiteral: (("value", "value"),),
    NumericLiteral: (("value", "value"),),
    BooleanLiteral: (("value", "value"),),
    NullLiteral: (),
    TemplateLiteral: (("quasis", "quasis"), ("expressions", "expressions")),
    Identifier: (("name", "name"),),
    UnaryExpression: (("operator", "operator"), ("argument", "argument"), ("prefix", "prefix")),
    BinaryExpression: (("operator", "operator"), ("left", "left"), ("right", "right")),
    LogicalExpression: (("operator", "operator"), ("left", "left"), ("right", "right")),
    ConditionalExpression: (
        ("test", "test"),
        ("consequent", "consequent"),
        ("alternate", "alternate"),
    ),
    ObjectExpression: (("properties", "properties"),),
    ObjectProperty: (
        ("key", "key"),
        ("value", "value"),
        ("computed", "computed"),
        ("shorthand", "shorthand"),
    ),
    SpreadElement: (("argument", "argument"),),
    ArrayExpression: (("elements", "elements"),),
    CallExpression: (("callee", "callee"), ("arguments", "arguments"), ("optional", "optional")),
    MemberExpression: (("object", "object"), ("property", "property"), ("computed", "computed")),
    JSXElement: (
        ("openingElement", "opening_element"),
        ("children", "children"),
        ("closingElement", "closing_element"),
    ),
    JSXOpeningElement: (
        ("name", "name"),
        ("attributes", "attributes"),
        ("selfClosing", "self_closing"),
    ),
    JSXClosingElement: (("name", "name"),),
    JSXAttribute: (("name", "name"), ("value", "value")),
    JSXSpreadAttribute: (("argument", "argument"),),
    JSXIdentifier: (("name", "name"),),
    JSXNamespacedName: (("namespace", "namespace"), ("name", "name")),
    JSXMemberExpression: (("object", "object"), ("property", "property")),
    JSXExpressionContainer: (("expression", "expression"),),
    JSXEmptyExpression: (),
}

_CLASS_BY_TYPE: dict[str, type] = {cls.__name__: cls for cls in _FIELD_MAP}

# Keys never carried on dedicated nodes.
_IGNORED_KEYS: frozenset[str] = frozenset({
    "type",
    "loc",
    "start",
    "end",
    "range",
    "extra",
    "leadingComments",
    "trailingComments",
    "innerComments",
})

# Keys dropped from GenericNode fields (positions live in `loc`).
_POSITION_KEYS: frozenset[str] = frozenset({"type", "loc", "start", "end", "range"})


def _parse_loc(data: Any) -> SourceLocation | None:
    if not isinstance(data, Mapping):
        return None
    start = data.get("start") or {}
    end = data.get("end") or {}
    if "line" not in start or "column" not in start:
        return None
    return SourceLocation(
        line=start["line"],
        column=start["column"],
        end_line=end.get("line"),
        end_column=end.get("column"),
    )


def _dump_loc(loc: SourceLocation | None) -> dict[str, Any] | None:
    if loc is None:
        return None
    dumped: dict[str, Any] = {"start": {"line": loc.line, "column": loc.column}}
    if loc.end_line is not None and loc.end_column is not None:
        dumped["end"] = {"line": loc.end_line, "column": loc.end_column}
    return dumped


def _convert(value: Any) -> Any:
    """Convert one JSON value: nodes, lists of nodes, nested mappings, scalars."""
    if isinstance(value, Mapping):
        if "type" in value:
            return from_estree(value)
        return {key: _convert(item) for key, item in value.items()}
    if isinstance(value, list):
        return tuple(_convert(item) for item in value)
    return value


def _generic(data: Mapping[str, Any], loc: SourceLocation | None) -> GenericNode:
    return GenericNode(
        type=data["type"],
        fields=tuple(
            (key, _convert(value)) for key, value in data.items() if key not in _POSITION_KEYS
        ),
        loc=loc,
    )


def _has_unmapped_content(data: Mapping[str, Any], cls: type) -> bool:
    """True when data carries non-empty keys the dataclass cannot hold."""
    known = {key for key, _ in _FIELD_MAP[cls]}
    return any(
        value not in (None, False, [], {})
        for key, value in data.items()
        if key not in known and key not in _IGNORED_KEYS
    )


def _from_literal(data: Mapping[str, Any], loc: SourceLocation | None) -> Node:
    """Plain-ESTree `Literal` to the Babel-flavoured literal classes."""
    if "regex" in data or "bigint" in data:
        return _generic(data, loc)
    value = data.get("value")
    match value:
        case bool():
            return BooleanLiteral(value=value, loc=loc)
        case int() | float():
            return NumericLiteral(value=value, loc=loc)
        case str():
            return StringLiteral(value=value, loc=loc)
        case None:
            return NullLiteral(loc=loc)
        case _:
            return _generic(data, loc)


def from_estree(data: Mapping[str, Any]) -> Node:
    """Build a tree node from ESTree/Babel JSON.

    Args:
        data: Parsed JSON object with a "type" key. A Babel `File` wrapper
            is unwrapped to its Program.

    Returns:
        The corresponding node (GenericNode for unsupported kinds)

    Raises:
        ESTreeError: If data is not a node or lacks required fields

    Example:
        >>> node = from_estree({"type": "StringLiteral", "value": "Hi"})
        >>> node
        StringLiteral(value='Hi', loc=None)
    """
    if not isinstance(data, Mapping) or not isinstance(data.get("type"), str):
        msg = f"Expected an ESTree node with a string 'type', got {type(data).__name__}"
        raise ESTreeError(msg)

    node_type: str = data["type"]
    loc = _parse_loc(data.get("loc"))

    match node_type:
        case "File":
            return from_estree(data["program"])
        case "Literal":
            return _from_literal(data, loc)
        case "Property":
            if data.get("kind", "init") != "init" or data.get("method"):
                return _generic(data, loc)
            return ObjectProperty(
                key=_convert(data["key"]),
                value=_convert(data["value"]),
                computed=bool(data.get("computed", False)),
                shorthand=bool(data.get("shorthand", False)),
                loc=loc,
            )
        case "TemplateElement":
            raw_value = data.get("value") or {}
            return TemplateElement(
                raw=raw_value.get("raw", ""),
                cooked=raw_value.get("cooked"),
                tail=bool(data.get("tail", False)),
                loc=loc,
            )
        case "JSXText":
            extra = data.get("extra") or {}
            return JSXText(value=data.get("value", ""), raw=data.get("raw", extra.get("raw")), loc=loc)

    cls = _CLASS_BY_TYPE.get(node_type)
    if cls is None or _has_unmapped_content(data, cls):
        return _generic(data, loc)

    kwargs: dict[str, Any] = {}
    for key, attr in _FIELD_MAP[cls]:
        if key in data:
            kwargs[attr] = _convert(data[key])
    try:
        node: Node = cls(**kwargs, loc=loc)
    except TypeError as e:
        msg = f"Malformed {node_type} node: {e}"
        raise ESTreeError(msg) from e
    return node


def _dump(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_dump(item) for item in value]
    if isinstance(value, dict):
        return {key: _dump(item) for key, item in value.items()}
    if hasattr(value, "__dataclass_fields__") and not isinstance(value, SourceLocation):
        return to_estree(value)
    return value


def to_estree(node: Node) -> dict[str, Any]:
    """Serialize a tree node to Babel-flavoured ESTree JSON.

    Args:
        node: Any node, typically the Program returned by an extraction pass

    Returns:
        JSON-compatible dict

    Example:
        >>> to_estree(Identifier(name="defineMessages"))
        {'type': 'Identifier', 'name': 'defineMessages'}
    """
    data: dict[str, Any]
    match node:
        case GenericNode():
            data = {"type": node.type}
            data.update((key, _dump(value)) for key, value in node.fields)
        case TemplateElement():
            data = {
                "type": "TemplateElement",
                "value": {"raw": node.raw, "cooked": node.cooked},
                "tail": node.tail,
            }
        case JSXText():
            data = {"type": "JSXText", "value": node.value}
            if node.raw is not None:
                data["extra"] = {"raw": node.raw, "rawValue": node.value}
        case _:
            cls = type(node)
            data = {"type": cls.__name__}
            for key, attr in _FIELD_MAP[cls]:
                data[key] = _dump(getattr(node, attr))

    loc = _dump_loc(node.loc)
    if loc is not None:
        data["loc"] = loc
    return data
