"""JavaScript/JSX syntax tree node definitions.

Frozen dataclass rendition of the ESTree/Babel node kinds the extractor
inspects. Every other node kind is carried by GenericNode so that foreign
syntax (functions, classes, loops, TypeScript annotations...) survives
traversal and rewriting untouched.

Field names follow ESTree, in snake_case. Child sequences are tuples.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from intlextract.diagnostics.codes import SourceSpan

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "SourceLocation",
    "GenericNode",
    "span_of",
    # Program structure
    "Program",
    "ImportDeclaration",
    "ImportSpecifier",
    "ImportDefaultSpecifier",
    "ImportNamespaceSpecifier",
    "ExpressionStatement",
    "VariableDeclaration",
    "VariableDeclarator",
    "ExportNamedDeclaration",
    "ExportDefaultDeclaration",
    # Literals
    "StringLiteral",
    "NumericLiteral",
    "BooleanLiteral",
    "NullLiteral",
    "TemplateLiteral",
    "TemplateElement",
    # Expressions
    "Identifier",
    "UnaryExpression",
    "BinaryExpression",
    "LogicalExpression",
    "ConditionalExpression",
    "ObjectExpression",
    "ObjectProperty",
    "SpreadElement",
    "ArrayExpression",
    "CallExpression",
    "MemberExpression",
    # JSX
    "JSXElement",
    "JSXOpeningElement",
    "JSXClosingElement",
    "JSXAttribute",
    "JSXSpreadAttribute",
    "JSXIdentifier",
    "JSXNamespacedName",
    "JSXMemberExpression",
    "JSXExpressionContainer",
    "JSXEmptyExpression",
    "JSXText",
    # Type aliases
    "Literal",
    "Node",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Node position as reported by the host parser.

    Lines are 1-indexed and columns 0-indexed, matching Babel's `loc`.

    Example:
        Source: 'const a = <FormattedMessage id="x" />;'
        JSXOpeningElement loc: SourceLocation(line=1, column=10, end_line=1, end_column=36)
    """

    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    def __post_init__(self) -> None:
        """Validate location invariants."""
        if self.line < 1:
            msg = f"SourceLocation.line must be >= 1, got {self.line}"
            raise ValueError(msg)
        if self.column < 0:
            msg = f"SourceLocation.column must be >= 0, got {self.column}"
            raise ValueError(msg)

    def to_span(self) -> SourceSpan:
        """Convert to a 1-indexed SourceSpan for diagnostics."""
        return SourceSpan(
            line=self.line,
            column=self.column + 1,
            end_line=self.end_line,
            end_column=self.end_column + 1 if self.end_column is not None else None,
        )


def span_of(node: "Node | None") -> SourceSpan | None:
    """Diagnostic span for a node, or None when the host gave no location."""
    if node is None or node.loc is None:
        return None
    return node.loc.to_span()


@dataclass(frozen=True, slots=True)
class GenericNode:
    """Any ESTree node kind without a dedicated class.

    Fields keep their ESTree names and order. Values are nodes, tuples of
    nodes (or None holes), or plain JSON scalars.

    Example:
        ArrowFunctionExpression becomes
        GenericNode(type="ArrowFunctionExpression",
                    fields=(("params", ()), ("body", <node>), ("async", False)))
    """

    type: str
    fields: tuple[tuple[str, object], ...]
    loc: SourceLocation | None = None

    def get(self, name: str, default: object = None) -> object:
        """Field value by ESTree name."""
        for key, value in self.fields:
            if key == name:
                return value
        return default


# ============================================================================
# PROGRAM STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Program:
    """Root node of one compilation unit.

    Attributes:
        body: Top-level statements
        source_type: "module" or "script"
        directives: Prologue directives such as "use strict" (Babel)
        interpreter: Hashbang line (Babel), if any
    """

    body: tuple["Node", ...]
    source_type: str = "module"
    directives: tuple["Node", ...] = ()
    interpreter: "Node | None" = None
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class ImportSpecifier:
    """Named import: the `FormattedMessage as FM` in `import {FormattedMessage as FM}`.

    import_kind is "type" for TypeScript `import {type X}` specifiers.
    """

    imported: "Identifier | StringLiteral"
    local: "Identifier"
    import_kind: str | None = None
    loc: SourceLocation | None = None

    @property
    def imported_name(self) -> str:
        """Exported name in the source module."""
        if isinstance(self.imported, StringLiteral):
            return self.imported.value
        return self.imported.name


@dataclass(frozen=True, slots=True)
class ImportDefaultSpecifier:
    """Default import: `import intl from "..."`."""

    local: "Identifier"
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class ImportNamespaceSpecifier:
    """Namespace import: `import * as intl from "..."`."""

    local: "Identifier"
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class ImportDeclaration:
    """Import statement.

    Example:
        import {FormattedMessage, defineMessages} from "react-intl";

    import_kind is "type" for `import type {...}` (TypeScript/Flow).
    """

    specifiers: tuple["ImportSpecifier | ImportDefaultSpecifier | ImportNamespaceSpecifier", ...]
    source: "StringLiteral"
    import_kind: str | None = None
    loc: SourceLocation | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["ImportDeclaration"]:
        """Type guard for ImportDeclaration (used in body filtering)."""
        return isinstance(node, ImportDeclaration)


@dataclass(frozen=True, slots=True)
class ExpressionStatement:
    """Expression used as a statement."""

    expression: "Node"
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class VariableDeclarator:
    """One `name = init` binding inside a declaration."""

    id: "Node"
    init: "Node | None" = None
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class VariableDeclaration:
    """`const`, `let` or `var` declaration."""

    kind: str
    declarations: tuple[VariableDeclarator, ...]
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class ExportNamedDeclaration:
    """`export const messages = defineMessages({...})` and re-exports."""

    declaration: "Node | None"
    specifiers: tuple["Node", ...] = ()
    source: "StringLiteral | None" = None
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class ExportDefaultDeclaration:
    """`export default ...`."""

    declaration: "Node"
    loc: SourceLocation | None = None


# ============================================================================
# LITERALS
# ============================================================================


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """String literal, already unescaped: "Hello" → value="Hello"."""

    value: str
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class NumericLiteral:
    """Number literal."""

    value: int | float
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    """`true` or `false`."""

    value: bool
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class NullLiteral:
    """`null`."""

    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class TemplateElement:
    """Literal fragment of a template literal.

    Attributes:
        raw: Source text of the fragment
        cooked: Fragment with escapes processed (None for invalid escapes
            in tagged templates)
        tail: True for the last fragment
    """

    raw: str
    cooked: str | None
    tail: bool = False
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class TemplateLiteral:
    """Backtick string: quasis interleave with expressions.

    Example:
        `Hello ${name}!` → quasis=("Hello ", "!"), expressions=(name,)
    """

    quasis: tuple[TemplateElement, ...]
    expressions: tuple["Node", ...]
    loc: SourceLocation | None = None


# ============================================================================
# EXPRESSIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Identifier:
    """Name token in expression position: `defineMessage`, `undefined`."""

    name: str
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class UnaryExpression:
    """Prefix operator: `-1`, `!x`, `typeof x`, `void 0`."""

    operator: str
    argument: "Node"
    prefix: bool = True
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class BinaryExpression:
    """Binary operator: `"a" + "b"`, `1 * 2`, `x === y`."""

    operator: str
    left: "Node"
    right: "Node"
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class LogicalExpression:
    """Short-circuit operator: `&&`, `||`, `??`."""

    operator: str
    left: "Node"
    right: "Node"
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class ConditionalExpression:
    """`test ? consequent : alternate`."""

    test: "Node"
    consequent: "Node"
    alternate: "Node"
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class ObjectProperty:
    """`key: value` entry of an object literal.

    Attributes:
        key: Identifier, string/number literal, or any expression when computed
        value: Property value
        computed: True for `[expr]: value`
        shorthand: True for `{id}` (key and value are the same identifier)
    """

    key: "Node"
    value: "Node"
    computed: bool = False
    shorthand: bool = False
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class SpreadElement:
    """`...expr` inside an object, array or argument list."""

    argument: "Node"
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class ObjectExpression:
    """Object literal. Methods and getters are carried as GenericNode."""

    properties: tuple["ObjectProperty | SpreadElement | GenericNode", ...]
    loc: SourceLocation | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["ObjectExpression"]:
        """Type guard for ObjectExpression (descriptor arguments)."""
        return isinstance(node, ObjectExpression)


@dataclass(frozen=True, slots=True)
class ArrayExpression:
    """Array literal. Holes are None."""

    elements: tuple["Node | None", ...]
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class CallExpression:
    """Function call: `defineMessages({...})`."""

    callee: "Node"
    arguments: tuple["Node", ...]
    optional: bool = False
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class MemberExpression:
    """Property access: `intl.formatMessage`, `obj["key"]`."""

    object: "Node"
    property: "Node"
    computed: bool = False
    loc: SourceLocation | None = None


# ============================================================================
# JSX
# ============================================================================


@dataclass(frozen=True, slots=True)
class JSXIdentifier:
    """Name token inside JSX: tag names and attribute names."""

    name: str
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class JSXNamespacedName:
    """`ns:name` attribute or tag name."""

    namespace: JSXIdentifier
    name: JSXIdentifier
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class JSXMemberExpression:
    """Dotted tag name: `<Intl.FormattedMessage>`."""

    object: "JSXIdentifier | JSXMemberExpression"
    property: JSXIdentifier
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class JSXEmptyExpression:
    """The empty `{}` (or `{/* comment */}`) inside JSX."""

    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class JSXExpressionContainer:
    """`{expression}` inside JSX."""

    expression: "Node"
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class JSXAttribute:
    """`name="value"`, `name={expr}` or bare `name` (value None)."""

    name: JSXIdentifier | JSXNamespacedName
    value: "StringLiteral | JSXExpressionContainer | JSXElement | None" = None
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class JSXSpreadAttribute:
    """`{...props}` in an attribute list."""

    argument: "Node"
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class JSXOpeningElement:
    """Opening tag with its attribute list.

    Example:
        <FormattedMessage id="greet" defaultMessage="Hi" />
    """

    name: JSXIdentifier | JSXMemberExpression | JSXNamespacedName
    attributes: tuple[JSXAttribute | JSXSpreadAttribute, ...]
    self_closing: bool = False
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class JSXClosingElement:
    """Closing tag."""

    name: JSXIdentifier | JSXMemberExpression | JSXNamespacedName
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class JSXText:
    """Literal text between JSX tags."""

    value: str
    raw: str | None = None
    loc: SourceLocation | None = None


@dataclass(frozen=True, slots=True)
class JSXElement:
    """Element: opening tag, children, optional closing tag."""

    opening_element: JSXOpeningElement
    children: tuple["Node", ...] = ()
    closing_element: JSXClosingElement | None = None
    loc: SourceLocation | None = None


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Literal = StringLiteral | NumericLiteral | BooleanLiteral | NullLiteral

type Node = (
    GenericNode
    | Program
    | ImportDeclaration
    | ImportSpecifier
    | ImportDefaultSpecifier
    | ImportNamespaceSpecifier
    | ExpressionStatement
    | VariableDeclaration
    | VariableDeclarator
    | ExportNamedDeclaration
    | ExportDefaultDeclaration
    | StringLiteral
    | NumericLiteral
    | BooleanLiteral
    | NullLiteral
    | TemplateLiteral
    | TemplateElement
    | Identifier
    | UnaryExpression
    | BinaryExpression
    | LogicalExpression
    | ConditionalExpression
    | ObjectExpression
    | ObjectProperty
    | SpreadElement
    | ArrayExpression
    | CallExpression
    | MemberExpression
    | JSXElement
    | JSXOpeningElement
    | JSXClosingElement
    | JSXAttribute
    | JSXSpreadAttribute
    | JSXIdentifier
    | JSXNamespacedName
    | JSXMemberExpression
    | JSXExpressionContainer
    | JSXEmptyExpression
    | JSXText
)
