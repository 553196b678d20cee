"""Import binding resolution for one compilation unit.

Answers "does this reference denote an import of name N from module M?"
for the top-level import declarations of a Program. Only plain references
(Identifier, JSXIdentifier) resolve. Local shadowing of an imported
binding (a parameter or inner variable with the same name) is not tracked.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from .ast import (
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    JSXIdentifier,
    Node,
    Program,
)

__all__ = ["ImportBinding", "ImportBindings"]

# Imported name recorded for default and namespace imports.
DEFAULT_IMPORT = "default"
NAMESPACE_IMPORT = "*"


@dataclass(frozen=True, slots=True)
class ImportBinding:
    """One local name introduced by an import.

    Attributes:
        local: Name the binding is known by in this unit
        source: Module specifier string
        imported: Exported name ("default" and "*" for default/namespace imports)
    """

    local: str
    source: str
    imported: str


class ImportBindings:
    """Local-name table of a Program's value imports.

    Type-only imports (`import type {...}`) introduce no runtime binding
    and are skipped.

    Example:
        >>> bindings = ImportBindings.from_program(program)
        >>> bindings.references_import(call.callee, "react-intl", {"defineMessages"})
        'defineMessages'
    """

    __slots__ = ("_by_local",)

    def __init__(self, bindings: Iterable[ImportBinding] = ()) -> None:
        self._by_local: dict[str, ImportBinding] = {}
        for binding in bindings:
            self._by_local[binding.local] = binding

    @classmethod
    def from_program(cls, program: Program) -> "ImportBindings":
        """Collect bindings from the top-level import declarations."""
        collected: list[ImportBinding] = []
        for statement in program.body:
            if not ImportDeclaration.guard(statement) or statement.import_kind == "type":
                continue
            source = statement.source.value
            for spec in statement.specifiers:
                match spec:
                    case ImportSpecifier() if spec.import_kind != "type":
                        imported = spec.imported_name
                    case ImportDefaultSpecifier():
                        imported = DEFAULT_IMPORT
                    case ImportNamespaceSpecifier():
                        imported = NAMESPACE_IMPORT
                    case _:
                        continue
                collected.append(ImportBinding(spec.local.name, source, imported))
        return cls(collected)

    def __len__(self) -> int:
        return len(self._by_local)

    def __contains__(self, local: object) -> bool:
        return local in self._by_local

    def get(self, local: str) -> ImportBinding | None:
        """Binding for a local name, if it was imported."""
        return self._by_local.get(local)

    def bindings(self) -> tuple[ImportBinding, ...]:
        """All bindings in declaration order."""
        return tuple(self._by_local.values())

    def imports(self) -> dict[str, frozenset[str]]:
        """Import table: module specifier to the exported names imported from it."""
        table: dict[str, set[str]] = {}
        for binding in self._by_local.values():
            table.setdefault(binding.source, set()).add(binding.imported)
        return {source: frozenset(names) for source, names in table.items()}

    def resolve(self, node: Node) -> ImportBinding | None:
        """Binding a plain reference denotes, if it refers to an import."""
        if isinstance(node, (Identifier, JSXIdentifier)):
            return self._by_local.get(node.name)
        return None

    def references_import(self, node: Node, source: str, names: Iterable[str]) -> str | None:
        """Imported name when node refers to one of names imported from source.

        Args:
            node: Callee or JSX element name
            source: Module specifier that must be the import's origin
            names: Accepted exported names

        Returns:
            The matched exported name, or None
        """
        binding = self.resolve(node)
        if binding is None or binding.source != source or binding.imported not in set(names):
            return None
        return binding.imported
