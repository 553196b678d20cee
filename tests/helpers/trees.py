"""Host tree builders for tests.

Short constructors for the node shapes a JavaScript parser would hand
over, so tests read close to the source they stand for.
"""

from __future__ import annotations

from typing import Any

from intlextract.extraction import CompilationUnit
from intlextract.syntax import (
    ASTVisitor,
    BooleanLiteral,
    CallExpression,
    ExpressionStatement,
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    JSXIdentifier,
    JSXOpeningElement,
    Node,
    NumericLiteral,
    ObjectExpression,
    ObjectProperty,
    Program,
    SourceLocation,
    StringLiteral,
    VariableDeclaration,
    VariableDeclarator,
)


def at(line: int, column: int = 0) -> SourceLocation:
    """Location on one line."""
    return SourceLocation(line=line, column=column)


def literal(value: Any) -> Node:
    """Literal node for a Python scalar; nodes pass through."""
    match value:
        case bool():
            return BooleanLiteral(value)
        case int() | float():
            return NumericLiteral(value)
        case str():
            return StringLiteral(value)
        case _:
            return value  # type: ignore[no-any-return]


def import_from(
    *names: str, source: str = "react-intl", aliases: dict[str, str] | None = None
) -> ImportDeclaration:
    """import {name, imported as local} from source."""
    aliases = aliases or {}
    specifiers = tuple(
        ImportSpecifier(imported=Identifier(name), local=Identifier(aliases.get(name, name)))
        for name in names
    )
    return ImportDeclaration(specifiers=specifiers, source=StringLiteral(source))


def jsx(name: str, loc: SourceLocation | None = None, **attrs: Any) -> JSXElement:
    """Self-closing element; True means a bare attribute, nodes are wrapped in {}."""
    attributes: list[JSXAttribute] = []
    for attr_name, value in attrs.items():
        if value is True:
            attr_value = None
        elif isinstance(value, str):
            attr_value = StringLiteral(value)
        else:
            attr_value = JSXExpressionContainer(literal(value))
        attributes.append(JSXAttribute(JSXIdentifier(attr_name), attr_value))  # type: ignore[arg-type]
    opening = JSXOpeningElement(
        name=JSXIdentifier(name), attributes=tuple(attributes), self_closing=True, loc=loc
    )
    return JSXElement(opening_element=opening)


def obj(**fields: Any) -> ObjectExpression:
    """Object literal with identifier keys."""
    return ObjectExpression(
        properties=tuple(
            ObjectProperty(key=Identifier(key), value=literal(value))
            for key, value in fields.items()
        )
    )


def call(name: str, *args: Node, loc: SourceLocation | None = None) -> CallExpression:
    """name(args...)."""
    return CallExpression(callee=Identifier(name), arguments=args, loc=loc)


def stmt(expression: Node) -> ExpressionStatement:
    return ExpressionStatement(expression)


def const(name: str, init: Node) -> VariableDeclaration:
    """const name = init."""
    return VariableDeclaration(
        kind="const", declarations=(VariableDeclarator(id=Identifier(name), init=init),)
    )


def program(*body: Node) -> Program:
    return Program(body=body)


def unit(*body: Node, filename: str = "src/App.js", **kwargs: Any) -> CompilationUnit:
    """Compilation unit over a program built from body."""
    return CompilationUnit(program=program(*body), filename=filename, **kwargs)


class _Collector(ASTVisitor):
    def __init__(self, node_type: type) -> None:
        super().__init__()
        self.node_type = node_type
        self.found: list[Any] = []

    def visit(self, node: Node) -> Node:
        if isinstance(node, self.node_type):
            self.found.append(node)
        return super().visit(node)


def find_all[T](tree: Node, node_type: type[T]) -> list[T]:
    """Every node of node_type in tree, in pre-order."""
    collector = _Collector(node_type)
    collector.visit(tree)
    return collector.found


def attribute_names(element: JSXOpeningElement) -> list[str]:
    return [
        attr.name.name
        for attr in element.attributes
        if isinstance(attr, JSXAttribute) and isinstance(attr.name, JSXIdentifier)
    ]


def property_names(node: ObjectExpression) -> list[str]:
    return [
        prop.key.name
        for prop in node.properties
        if isinstance(prop, ObjectProperty) and isinstance(prop.key, Identifier)
    ]
