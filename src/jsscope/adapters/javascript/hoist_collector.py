"""Phase 1: collect hoisted declarations per function or program node."""

from __future__ import annotations

import logging

from tree_sitter import Node

from jsscope.adapters.javascript.ast_utils import FUNCTION_DECLARATION_TYPES, JsAstUtils
from jsscope.core.annotations import Annotations

logger = logging.getLogger(__name__)


class HoistCollector:
    """Records var names and function declarations on their hoisting targets.

    Runs before any scope graph exists. A declaration binds to the nearest
    enclosing function or program node no matter how many blocks sit in
    between.
    """

    def __init__(self, content: bytes) -> None:
        self._content = content

    def collect(self, root: Node, annotations: Annotations) -> None:
        """Walk the tree in document order and fill hoist records.

        Args:
            root: The program node
            annotations: Side table receiving the hoist records
        """
        self._visit(root, annotations)
        logger.debug(f"Collected hoist records for {len(annotations.hoisting)} scopes")

    def _visit(self, node: Node, annotations: Annotations) -> None:
        for child in node.named_children:
            if child.type == "variable_declaration":
                self._record_declarators(child, annotations)
            elif child.type == "for_in_statement":
                self._record_loop_head(child, annotations)
            elif child.type in FUNCTION_DECLARATION_TYPES:
                self._record_function(child, annotations)

            self._visit(child, annotations)

    def _record_declarators(self, node: Node, annotations: Annotations) -> None:
        target = JsAstUtils.get_hoisting_target(node)
        if target is None:
            return
        record = annotations.ensure_hoist_record(target)
        for declarator in JsAstUtils.iter_declarators(node):
            name_node = declarator.child_by_field_name("name")
            if name_node is None:
                continue
            bindings, _ = JsAstUtils.collect_pattern(name_node)
            for binding in bindings:
                record.add_var(JsAstUtils.get_node_text(binding, self._content))

    def _record_loop_head(self, node: Node, annotations: Annotations) -> None:
        """Record `for (var x in/of ...)` heads, which declare without a declarator."""
        if JsAstUtils.get_declaration_kind(node, self._content) != "var":
            return
        left = node.child_by_field_name("left")
        target = JsAstUtils.get_hoisting_target(node)
        if left is None or target is None:
            return
        record = annotations.ensure_hoist_record(target)
        bindings, _ = JsAstUtils.collect_pattern(left)
        for binding in bindings:
            record.add_var(JsAstUtils.get_node_text(binding, self._content))

    def _record_function(self, node: Node, annotations: Annotations) -> None:
        name_node = node.child_by_field_name("name")
        target = JsAstUtils.get_hoisting_target(node)
        if name_node is None or target is None:
            return
        name = JsAstUtils.get_node_text(name_node, self._content)
        annotations.ensure_hoist_record(target).add_func(name, node.id)
