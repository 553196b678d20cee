"""Host syntax tree package.

Provides JavaScript/JSX node definitions, the visitor pattern, ESTree JSON
interchange, and import-binding resolution. Parsing source text is left to
the host toolchain; this package works on the tree it hands over.

Python 3.13+.
"""

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
    Literal,
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
    span_of,
)
from .bindings import ImportBinding, ImportBindings
from .estree import ESTreeError, from_estree, to_estree
from .visitor import ASTTransformer, ASTVisitor

__all__ = [
    "ASTTransformer",
    "ASTVisitor",
    "ArrayExpression",
    "BinaryExpression",
    "BooleanLiteral",
    "CallExpression",
    "ConditionalExpression",
    "ESTreeError",
    "ExportDefaultDeclaration",
    "ExportNamedDeclaration",
    "ExpressionStatement",
    "GenericNode",
    "Identifier",
    "ImportBinding",
    "ImportBindings",
    "ImportDeclaration",
    "ImportDefaultSpecifier",
    "ImportNamespaceSpecifier",
    "ImportSpecifier",
    "JSXAttribute",
    "JSXClosingElement",
    "JSXElement",
    "JSXEmptyExpression",
    "JSXExpressionContainer",
    "JSXIdentifier",
    "JSXMemberExpression",
    "JSXNamespacedName",
    "JSXOpeningElement",
    "JSXSpreadAttribute",
    "JSXText",
    "Literal",
    "LogicalExpression",
    "MemberExpression",
    "Node",
    "NullLiteral",
    "NumericLiteral",
    "ObjectExpression",
    "ObjectProperty",
    "Program",
    "SourceLocation",
    "SpreadElement",
    "StringLiteral",
    "TemplateElement",
    "TemplateLiteral",
    "UnaryExpression",
    "VariableDeclaration",
    "VariableDeclarator",
    "from_estree",
    "span_of",
    "to_estree",
]
