"""Scope indexing pass.

Computes, bottom-up, which names every scope defines, references, and
leaves unresolved, and stores the result under the scope's anchor node.
"""

from __future__ import annotations

import logging

from jsscope.core.annotations import Annotations
from jsscope.core.models import ScopeIndex, ScopeKind
from jsscope.core.scope_graph import Scope, ScopeGraph
from jsscope.passes.base import PassContext, ScopePass

logger = logging.getLogger(__name__)


class ScopeIndexer(ScopePass):
    """Attach a ScopeIndex to the anchor node of every scope.

    Children are indexed before their parent merges them. A name left
    unresolved by a child is always referenced by the parent, and stays
    unresolved there unless the parent defines it.
    """

    @property
    def name(self) -> str:
        return "scope-indexer"

    def run(self, context: PassContext) -> None:
        if not len(context.graph):
            return
        root_index = self.index_scope(context.graph, context.graph.root, context.annotations)
        logger.debug(
            f"Indexed {len(context.graph)} scopes; "
            f"{len(root_index.unresolved)} names unresolved at the root"
        )

    def index_scope(self, graph: ScopeGraph, scope: Scope, annotations: Annotations) -> ScopeIndex:
        """Index a scope and all of its descendants.

        Args:
            graph: The scope graph
            scope: The scope to index
            annotations: Side table receiving the indexes

        Returns:
            The index of `scope`
        """
        if scope.kind is ScopeKind.FUNCTION_EXPRESSION_NAME:
            # The wrapper only holds the expression's own name; use the function scope.
            return self.index_scope(graph, graph[scope.children[0]], annotations)

        defined = {variable.name for variable in scope.variables}

        referenced: set[str] = set()
        unresolved: set[str] = set()
        for reference in scope.references:
            referenced.add(reference.name)
            if reference.resolved_scope is None or reference.resolved_scope != scope.id:
                unresolved.add(reference.name)

        for child in graph.children_of(scope):
            child_index = self.index_scope(graph, child, annotations)
            for name in child_index.unresolved:
                referenced.add(name)
                if name not in defined:
                    unresolved.add(name)

        index = ScopeIndex(
            defined=defined,
            referenced=referenced,
            unresolved=unresolved,
            this_found=scope.this_found,
        )
        annotations.set_scope_index(scope.anchor, index)
        return index
