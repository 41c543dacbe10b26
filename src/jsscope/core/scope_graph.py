"""Scope graph data structures.

Scopes live in an arena (`ScopeGraph.scopes`) and refer to each other by
index. Variables and references keep the tree-sitter nodes they came from,
so later passes can inspect the surrounding syntax.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jsscope.core.models import DefinitionKind, ReferenceFlag, ScopeKind

if TYPE_CHECKING:
    from tree_sitter import Node


@dataclass(eq=False)
class Variable:
    """A name bound in a scope.

    `kind` describes the first declaring identifier and stays None for
    bindings introduced without one, such as `arguments`.
    """

    name: str
    scope_id: int
    kind: DefinitionKind | None = None
    identifiers: list[Node] = field(default_factory=list)
    references: list[Reference] = field(default_factory=list)


@dataclass(eq=False)
class Reference:
    """A single identifier use.

    `init` marks the write made by a declarator initializer; `initializing`
    marks any occurrence that stores a first value (`var x = ...`, `x = ...`).
    """

    identifier: Node
    name: str
    from_scope: int
    flag: ReferenceFlag = ReferenceFlag.READ
    init: bool = False
    initializing: bool = False
    resolved_scope: int | None = None
    variable: Variable | None = None

    @property
    def is_resolved(self) -> bool:
        return self.variable is not None


@dataclass(eq=False)
class Scope:
    """A lexical scope in the arena."""

    id: int
    kind: ScopeKind
    anchor: Node
    parent: int | None = None
    block: Node | None = None
    children: list[int] = field(default_factory=list)
    variables: list[Variable] = field(default_factory=list)
    references: list[Reference] = field(default_factory=list)
    this_found: bool = False
    closed: bool = False
    _variable_map: dict[str, Variable] = field(default_factory=dict, repr=False)
    _pending: list[Reference] = field(default_factory=list, repr=False)

    @property
    def declaration_block(self) -> Node:
        """Node that declarations synthesized for this scope belong to."""
        return self.block if self.block is not None else self.anchor

    @property
    def is_hoisting_target(self) -> bool:
        """Whether var and function declarations bind here."""
        return self.kind in (ScopeKind.GLOBAL, ScopeKind.FUNCTION)

    def get_variable(self, name: str) -> Variable | None:
        return self._variable_map.get(name)


class ScopeGraph:
    """Arena of scopes with escope-style reference resolution.

    References are collected as pending on the scope they occur in and
    resolved when that scope is closed: a reference binds to the closing
    scope's variable of the same name, or moves up to the parent scope.
    References still pending when the global scope closes stay unresolved.
    """

    def __init__(self) -> None:
        self.scopes: list[Scope] = []

    @property
    def root(self) -> Scope:
        return self.scopes[0]

    def __len__(self) -> int:
        return len(self.scopes)

    def __getitem__(self, scope_id: int) -> Scope:
        return self.scopes[scope_id]

    def add_scope(self, kind: ScopeKind, anchor: Node, parent: int | None = None) -> Scope:
        """Create a scope and link it under its parent.

        Args:
            kind: The scope kind.
            anchor: Syntax node the scope is attached to.
            parent: Id of the enclosing scope, None for the root.

        Returns:
            The new scope.
        """
        scope = Scope(id=len(self.scopes), kind=kind, anchor=anchor, parent=parent)
        self.scopes.append(scope)
        if parent is not None:
            self.scopes[parent].children.append(scope.id)
        return scope

    def declare(
        self,
        scope_id: int,
        name: str,
        identifier: Node | None = None,
        kind: DefinitionKind | None = None,
    ) -> Variable:
        """Bind a name in a scope, reusing an existing binding of that name.

        Args:
            scope_id: The scope to bind in.
            name: The bound name.
            identifier: Declaring identifier node, if there is one.
            kind: Form of the declaring identifier; recorded when it is the
                variable's first.

        Returns:
            The variable for the name.
        """
        scope = self.scopes[scope_id]
        variable = scope.get_variable(name)
        if variable is None:
            variable = Variable(name=name, scope_id=scope_id)
            scope.variables.append(variable)
            scope._variable_map[name] = variable
        if identifier is not None:
            if not variable.identifiers:
                variable.kind = kind
            variable.identifiers.append(identifier)
        return variable

    def add_reference(
        self,
        scope_id: int,
        identifier: Node,
        name: str,
        flag: ReferenceFlag = ReferenceFlag.READ,
        init: bool = False,
        initializing: bool = False,
    ) -> Reference:
        """Record an identifier use made from a scope."""
        reference = Reference(
            identifier=identifier,
            name=name,
            from_scope=scope_id,
            flag=flag,
            init=init,
            initializing=initializing,
        )
        scope = self.scopes[scope_id]
        scope.references.append(reference)
        scope._pending.append(reference)
        return reference

    def close_scope(self, scope_id: int) -> None:
        """Resolve the pending references of a scope.

        All child scopes must be closed first so their escaping references
        have already been handed up.
        """
        scope = self.scopes[scope_id]
        pending, scope._pending = scope._pending, []
        for reference in pending:
            variable = scope.get_variable(reference.name)
            if variable is not None:
                reference.variable = variable
                reference.resolved_scope = scope.id
                variable.references.append(reference)
            elif scope.parent is not None:
                self.scopes[scope.parent]._pending.append(reference)
        scope.closed = True

    def close_all(self) -> None:
        """Close every open scope, children before parents."""
        for scope in reversed(self.scopes):
            if not scope.closed:
                self.close_scope(scope.id)

    def parent_of(self, scope: Scope) -> Scope | None:
        if scope.parent is None:
            return None
        return self.scopes[scope.parent]

    def children_of(self, scope: Scope) -> list[Scope]:
        return [self.scopes[child_id] for child_id in scope.children]

    def variable_scope_of(self, scope_id: int) -> Scope:
        """Nearest enclosing function or global scope (the scope itself included)."""
        scope = self.scopes[scope_id]
        while not scope.is_hoisting_target and scope.parent is not None:
            scope = self.scopes[scope.parent]
        return scope

    def walk(self) -> Iterator[Scope]:
        """Yield scopes in pre-order (creation order)."""
        yield from self.scopes
