"""Implicit declaration detection pass."""

from __future__ import annotations

import logging

from jsscope.core.annotations import Annotations
from jsscope.core.models import DefinitionKind, ScopeKind
from jsscope.core.scope_graph import Scope, ScopeGraph, Variable
from jsscope.passes.base import PassContext, ScopePass

logger = logging.getLogger(__name__)


class ImplicitAssignmentDetector(ScopePass):
    """Mark var-declared names whose declaration the generator must synthesize.

    A variable qualifies when no direct child scope leaves its name
    unresolved and its first reference from the declaring scope writes an
    initial value (`var x = ...` or `x = ...`). The child check looks at
    names only, so a sibling redeclaring the same name still blocks the mark.

    Requires the ScopeIndexer to have run.
    """

    @property
    def name(self) -> str:
        return "implicit-assignments"

    def run(self, context: PassContext) -> None:
        marked = 0
        for scope in context.graph.walk():
            if scope.kind not in (ScopeKind.FUNCTION, ScopeKind.GLOBAL):
                continue
            block = scope.declaration_block
            for variable in scope.variables:
                if self._is_implicit(context.graph, scope, variable, context.annotations):
                    context.annotations.add_implicit_var(block, variable.name)
                    marked += 1
        logger.debug(f"Marked {marked} implicit declarations")

    def _is_implicit(
        self,
        graph: ScopeGraph,
        scope: Scope,
        variable: Variable,
        annotations: Annotations,
    ) -> bool:
        if variable.kind is not DefinitionKind.VARIABLE:
            return False

        if self._used_lexically(graph, scope, variable.name, annotations):
            return False

        first = next(
            (ref for ref in scope.references if ref.name == variable.name),
            None,
        )
        if first is None:
            return False
        return first.initializing

    def _used_lexically(
        self,
        graph: ScopeGraph,
        scope: Scope,
        name: str,
        annotations: Annotations,
    ) -> bool:
        """Whether a direct child scope needs `name` from an enclosing scope."""
        for child in graph.children_of(scope):
            index = annotations.scope_index_for(child.anchor)
            if index is not None and name in index.unresolved:
                return True
        return False
