"""Visitor pattern for syntax tree traversal.

Enables tools to traverse and transform the host tree without modifying
node classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name (snake_case),
so visit_JSXOpeningElement handles JSXOpeningElement nodes.

Type Parameters:
- ASTVisitor[T] is generic over return type T
- ASTVisitor (no type param) defaults to T=Node
- ASTTransformer uses extended return type: Node | None | list[Node]

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import Field, fields, replace
from typing import Any, ClassVar

from intlextract.core.depth_guard import DepthGuard, traversal_depth

from .ast import GenericNode, Node, SourceLocation

__all__ = ["ASTTransformer", "ASTVisitor"]

type TransformerResult = Node | None | list[Node]


def _is_node(value: object) -> bool:
    """True for tree nodes (dataclasses other than SourceLocation)."""
    return hasattr(value, "__dataclass_fields__") and not isinstance(value, SourceLocation)


class ASTVisitor[T = Node]:
    """Base visitor for traversing the syntax tree.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses all child nodes. Override visit_NodeType methods to add custom
    behavior.

    Uses class-level dispatch table built once per class via __init_subclass__.
    GenericNode instances dispatch on their ESTree type name as well, so
    visit_ArrowFunctionExpression receives GenericNode(type="ArrowFunctionExpression").

    Example:
        >>> class CountCallsVisitor(ASTVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_CallExpression(self, node: CallExpression) -> Node:
        ...         self.count += 1
        ...         return self.generic_visit(node)  # Traverse children
        ...
        >>> visitor = CountCallsVisitor()
        >>> visitor.visit(program)
        >>> print(visitor.count)
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    _class_visit_methods: ClassVar[dict[str, str]] = {}

    # Dataclass fields per node type, minus `loc`
    _fields_cache: ClassVar[dict[type, tuple[Field[object], ...]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard and dispatch cache.

        Subclasses MUST call super().__init__() to ensure depth protection
        is properly initialized.

        Args:
            max_depth: Maximum traversal depth (default: traversal_depth(), sized
                from the interpreter recursion limit).
        """
        effective_max_depth = max_depth if max_depth is not None else traversal_depth()
        self._depth_guard = DepthGuard(max_depth=effective_max_depth)
        self._instance_dispatch_cache: dict[str, Callable[[Any], T]] = {}

    def visit(self, node: Node) -> T:
        """Visit a node (dispatcher with class-level + instance-level caching).

        Args:
            node: Tree node to visit

        Returns:
            Result of visiting the node
        """
        type_name = node.type if isinstance(node, GenericNode) else type(node).__name__

        if type_name in self._instance_dispatch_cache:
            return self._instance_dispatch_cache[type_name](node)

        if type_name in self._class_visit_methods:
            method = getattr(self, self._class_visit_methods[type_name])
        else:
            method = self.generic_visit

        self._instance_dispatch_cache[type_name] = method
        return method(node)  # type: ignore[no-any-return]  # getattr returns Any

    @staticmethod
    def _get_node_fields(node_type: type) -> tuple[Field[object], ...]:
        """Get cached dataclass fields for a node type, excluding `loc`."""
        cached = ASTVisitor._fields_cache.get(node_type)
        if cached is None:
            cached = tuple(f for f in fields(node_type) if f.name != "loc")
            ASTVisitor._fields_cache[node_type] = cached
        return cached

    @classmethod
    def _children(cls, node: Node) -> list[tuple[str, object]]:
        """(name, value) pairs of a node's child-bearing fields."""
        if isinstance(node, GenericNode):
            return list(node.fields)
        return [(f.name, getattr(node, f.name)) for f in cls._get_node_fields(type(node))]

    def generic_visit(self, node: Node) -> T:
        """Default visitor (traverses children with depth protection).

        Raises:
            DepthLimitExceededError: If traversal depth exceeds max_depth
        """
        with self._depth_guard:
            for _, value in self._children(node):
                if isinstance(value, tuple):
                    for item in value:
                        if _is_node(item):
                            self.visit(item)
                elif _is_node(value):
                    self.visit(value)  # type: ignore[arg-type]

        return node  # type: ignore[return-value]  # T defaults to Node


class ASTTransformer(ASTVisitor[TransformerResult]):
    """Tree transformer producing a rewritten copy.

    Extends ASTVisitor to enable transforming nodes. Each visit method
    can return:
    - The modified node (replaces original)
    - None (removes node from its parent sequence, or clears the field)
    - A list of nodes (replaces single node with multiple, sequences only)

    Nodes are frozen; parents are rebuilt with dataclasses.replace() only
    when a child actually changed, so untouched subtrees keep their identity.

    Example - Drop every spread attribute:
        >>> class DropSpreads(ASTTransformer):
        ...     def visit_JSXSpreadAttribute(self, node):
        ...         return None
        ...
        >>> cleaned = DropSpreads().transform(program)
    """

    def transform(self, node: Node) -> TransformerResult:
        """Transform a node or tree (main entry point)."""
        return self.visit(node)

    def generic_visit(self, node: Node) -> TransformerResult:
        """Transform node children (default behavior with depth protection).

        Raises:
            DepthLimitExceededError: If traversal depth exceeds max_depth
            TypeError: If a single-node field is replaced by a list
        """
        with self._depth_guard:
            changes: dict[str, object] = {}
            for name, value in self._children(node):
                if isinstance(value, tuple):
                    new_value: object = self._transform_list(value)
                elif _is_node(value):
                    new_value = self.visit(value)  # type: ignore[arg-type]
                    if isinstance(new_value, list):
                        msg = f"Cannot expand single-node field '{name}' into a list"
                        raise TypeError(msg)
                else:
                    continue
                if new_value is not value:
                    changes[name] = new_value

            if not changes:
                return node
            if isinstance(node, GenericNode):
                rebuilt = tuple((k, changes.get(k, v)) for k, v in node.fields)
                return replace(node, fields=rebuilt)
            return replace(node, **changes)  # type: ignore[arg-type]

    def _transform_list(self, nodes: tuple[object, ...]) -> tuple[object, ...]:
        """Transform a tuple of nodes.

        Handles node removal (None) and expansion (lists). Holes (None
        entries, as in sparse arrays) and scalars are kept as they are.
        """
        result: list[object] = []
        changed = False
        for item in nodes:
            if not _is_node(item):
                result.append(item)
                continue

            transformed = self.visit(item)  # type: ignore[arg-type]
            changed = changed or transformed is not item
            match transformed:
                case None:
                    continue
                case list():
                    result.extend(transformed)
                case _:
                    result.append(transformed)

        return tuple(result) if changed else nodes
