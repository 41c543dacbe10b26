"""Phase 2: build the scope graph for a JavaScript syntax tree.

Scopes follow escope's model for ES5 scripts: a global scope, one scope
per function, one per catch clause, and a wrapper scope for the name of a
named function expression. Blocks get a scope of their own only when they
declare let/const/class bindings directly.
"""

from __future__ import annotations

import logging

from tree_sitter import Node

from jsscope.adapters.javascript.ast_utils import (
    FUNCTION_DECLARATION_TYPES,
    FUNCTION_EXPRESSION_TYPES,
    IDENTIFIER_TYPES,
    JsAstUtils,
)
from jsscope.core.annotations import Annotations
from jsscope.core.models import DefinitionKind, ReferenceFlag, ScopeKind
from jsscope.core.scope_graph import ScopeGraph

logger = logging.getLogger(__name__)

_DESTRUCTURING_PATTERNS = ("object_pattern", "array_pattern")


class ScopeAnalyzer:
    """Builds a ScopeGraph from a tree-sitter tree.

    Hoisting targets are seeded from the hoist records collected in
    Phase 1, so their variables list hoisted functions and vars up front.
    Declaring identifiers and references are added in document order as
    the walk reaches them; each scope is closed (its references resolved)
    when the walk leaves it.
    """

    def __init__(self, content: bytes, annotations: Annotations) -> None:
        self._content = content
        self._annotations = annotations
        self._graph = ScopeGraph()

    def analyze(self, root: Node) -> ScopeGraph:
        """Build the scope graph of a program.

        Args:
            root: The program node

        Returns:
            ScopeGraph with all references resolved
        """
        self._graph = ScopeGraph()
        scope = self._graph.add_scope(ScopeKind.GLOBAL, root)
        self._seed_hoisted(scope.id, root)
        self._visit_children(root, scope.id)
        self._graph.close_scope(scope.id)

        logger.debug(f"Built scope graph with {len(self._graph)} scopes")
        return self._graph

    def _text(self, node: Node) -> str:
        return JsAstUtils.get_node_text(node, self._content)

    def _seed_hoisted(self, scope_id: int, node: Node) -> None:
        record = self._annotations.hoist_record_for(node)
        if record is None:
            return
        for name in record.funcs:
            self._graph.declare(scope_id, name)
        for name in record.vars:
            self._graph.declare(scope_id, name)

    def _reference(
        self,
        node: Node,
        scope_id: int,
        flag: ReferenceFlag = ReferenceFlag.READ,
        init: bool = False,
    ) -> None:
        self._graph.add_reference(
            scope_id,
            node,
            self._text(node),
            flag=flag,
            init=init,
            initializing=JsAstUtils.is_initializing_occurrence(node),
        )

    def _visit_children(self, node: Node, scope_id: int) -> None:
        for child in node.named_children:
            self._visit(child, scope_id)

    def _visit(self, node: Node, scope_id: int) -> None:
        node_type = node.type

        if node_type in IDENTIFIER_TYPES or node_type == "shorthand_property_identifier":
            self._reference(node, scope_id)
        elif node_type == "this":
            self._graph.variable_scope_of(scope_id).this_found = True
        elif node_type in FUNCTION_DECLARATION_TYPES:
            name_node = node.child_by_field_name("name")
            if name_node is not None:
                target = self._graph.variable_scope_of(scope_id)
                self._graph.declare(
                    target.id, self._text(name_node), name_node, DefinitionKind.FUNCTION_NAME
                )
            self._visit_function(node, scope_id)
        elif node_type in FUNCTION_EXPRESSION_TYPES:
            self._visit_function_expression(node, scope_id)
        elif node_type == "arrow_function":
            self._visit_function(node, scope_id)
        elif node_type == "method_definition":
            name_node = node.child_by_field_name("name")
            if name_node is not None and name_node.type == "computed_property_name":
                self._visit(name_node, scope_id)
            self._visit_function(node, scope_id)
        elif node_type in ("class_declaration", "class"):
            self._visit_class(node, scope_id)
        elif node_type == "variable_declaration":
            target = self._graph.variable_scope_of(scope_id)
            self._visit_declaration(node, target.id, scope_id)
        elif node_type == "lexical_declaration":
            self._visit_declaration(node, scope_id, scope_id)
        elif node_type == "for_in_statement":
            self._visit_for_in(node, scope_id)
        elif node_type == "assignment_expression":
            self._visit_assignment(node, scope_id)
        elif node_type == "augmented_assignment_expression":
            self._visit_update_target(node.child_by_field_name("left"), scope_id)
            right = node.child_by_field_name("right")
            if right is not None:
                self._visit(right, scope_id)
        elif node_type == "update_expression":
            self._visit_update_target(node.child_by_field_name("argument"), scope_id)
        elif node_type == "catch_clause":
            self._visit_catch(node, scope_id)
        elif node_type == "statement_block":
            self._visit_block(node, scope_id)
        elif node_type == "import_statement":
            return
        else:
            self._visit_children(node, scope_id)

    def _visit_function_expression(self, node: Node, scope_id: int) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            self._visit_function(node, scope_id)
            return

        wrapper = self._graph.add_scope(ScopeKind.FUNCTION_EXPRESSION_NAME, node, scope_id)
        self._graph.declare(
            wrapper.id, self._text(name_node), name_node, DefinitionKind.FUNCTION_NAME
        )
        self._visit_function(node, wrapper.id)
        self._graph.close_scope(wrapper.id)

    def _visit_function(self, node: Node, parent_id: int) -> None:
        """Open a function scope, bind its parameters and walk its body."""
        scope = self._graph.add_scope(ScopeKind.FUNCTION, node, parent_id)
        scope.block = JsAstUtils.get_block_of(node)
        if node.type != "arrow_function":
            self._graph.declare(scope.id, "arguments")

        params: list[Node] = []
        single_param = node.child_by_field_name("parameter")
        if single_param is not None:
            params.append(single_param)
        params_node = node.child_by_field_name("parameters")
        if params_node is not None:
            params.extend(params_node.named_children)

        defaults: list[Node] = []
        for param in params:
            bindings, param_defaults = JsAstUtils.collect_pattern(param)
            for binding in bindings:
                self._graph.declare(
                    scope.id, self._text(binding), binding, DefinitionKind.PARAMETER
                )
            defaults.extend(param_defaults)

        self._seed_hoisted(scope.id, node)

        for default in defaults:
            self._visit(default, scope.id)

        body = node.child_by_field_name("body")
        if body is not None:
            if body.type == "statement_block":
                self._visit_children(body, scope.id)
            else:
                self._visit(body, scope.id)

        self._graph.close_scope(scope.id)

    def _visit_class(self, node: Node, scope_id: int) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is not None and node.type == "class_declaration":
            self._graph.declare(
                scope_id, self._text(name_node), name_node, DefinitionKind.CLASS_NAME
            )
        for child in node.named_children:
            if JsAstUtils.same_node(child, name_node):
                continue
            self._visit(child, scope_id)

    def _visit_declaration(self, node: Node, bind_scope_id: int, scope_id: int) -> None:
        """Bind declarator names and record initializing writes.

        Args:
            node: A variable_declaration or lexical_declaration
            bind_scope_id: Scope the names bind in
            scope_id: Scope the declaration occurs in
        """
        for declarator in JsAstUtils.iter_declarators(node):
            name_node = declarator.child_by_field_name("name")
            value_node = declarator.child_by_field_name("value")
            if name_node is None:
                continue

            bindings, defaults = JsAstUtils.collect_pattern(name_node)
            for binding in bindings:
                kind = (
                    DefinitionKind.VARIABLE
                    if JsAstUtils.same_node(binding, name_node)
                    else DefinitionKind.PATTERN
                )
                self._graph.declare(bind_scope_id, self._text(binding), binding, kind)
                if value_node is not None:
                    self._reference(binding, scope_id, ReferenceFlag.WRITE, init=True)
            for default in defaults:
                self._visit(default, scope_id)
            if value_node is not None:
                self._visit(value_node, scope_id)

    def _visit_for_in(self, node: Node, scope_id: int) -> None:
        left = node.child_by_field_name("left")
        kind = JsAstUtils.get_declaration_kind(node, self._content)

        if left is not None:
            if kind is not None:
                bind_scope_id = (
                    self._graph.variable_scope_of(scope_id).id if kind == "var" else scope_id
                )
                bindings, defaults = JsAstUtils.collect_pattern(left)
                for binding in bindings:
                    self._graph.declare(
                        bind_scope_id, self._text(binding), binding, DefinitionKind.PATTERN
                    )
                    self._reference(binding, scope_id, ReferenceFlag.WRITE)
                for default in defaults:
                    self._visit(default, scope_id)
            else:
                self._visit_write_target(left, scope_id)

        for child in node.named_children:
            if JsAstUtils.same_node(child, left):
                continue
            self._visit(child, scope_id)

    def _visit_assignment(self, node: Node, scope_id: int) -> None:
        left = node.child_by_field_name("left")
        right = node.child_by_field_name("right")
        if left is not None:
            self._visit_write_target(left, scope_id)
        if right is not None:
            self._visit(right, scope_id)

    def _visit_write_target(self, target: Node, scope_id: int) -> None:
        if target.type in IDENTIFIER_TYPES:
            self._reference(target, scope_id, ReferenceFlag.WRITE)
        elif target.type in _DESTRUCTURING_PATTERNS:
            bindings, defaults = JsAstUtils.collect_pattern(target)
            for binding in bindings:
                self._reference(binding, scope_id, ReferenceFlag.WRITE)
            for default in defaults:
                self._visit(default, scope_id)
        else:
            self._visit(target, scope_id)

    def _visit_update_target(self, target: Node | None, scope_id: int) -> None:
        if target is None:
            return
        if target.type in IDENTIFIER_TYPES:
            self._reference(target, scope_id, ReferenceFlag.READ_WRITE)
        else:
            self._visit(target, scope_id)

    def _visit_catch(self, node: Node, scope_id: int) -> None:
        scope = self._graph.add_scope(ScopeKind.CATCH, node, scope_id)

        param = node.child_by_field_name("parameter")
        if param is not None:
            bindings, defaults = JsAstUtils.collect_pattern(param)
            for binding in bindings:
                self._graph.declare(
                    scope.id, self._text(binding), binding, DefinitionKind.CATCH_PARAMETER
                )
            for default in defaults:
                self._visit(default, scope.id)

        body = node.child_by_field_name("body")
        if body is not None:
            self._visit_children(body, scope.id)

        self._graph.close_scope(scope.id)

    def _visit_block(self, node: Node, scope_id: int) -> None:
        if not JsAstUtils.declares_lexically(node):
            self._visit_children(node, scope_id)
            return

        scope = self._graph.add_scope(ScopeKind.BLOCK, node, scope_id)
        self._visit_children(node, scope.id)
        self._graph.close_scope(scope.id)
