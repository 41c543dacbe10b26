"""JavaScript AST utility functions.

This module provides utility functions for extracting information
from tree-sitter AST nodes for JavaScript source code.
"""

from __future__ import annotations

from tree_sitter import Node

# Nodes that open a function scope. `function` is the expression node name
# used by older tree-sitter-javascript grammars.
FUNCTION_NODE_TYPES = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "function_expression",
        "function",
        "generator_function",
        "arrow_function",
        "method_definition",
    }
)

FUNCTION_DECLARATION_TYPES = frozenset(
    {"function_declaration", "generator_function_declaration"}
)

FUNCTION_EXPRESSION_TYPES = frozenset({"function_expression", "function", "generator_function"})

LEXICAL_DECLARATION_TYPES = frozenset({"lexical_declaration", "class_declaration"})

# `undefined` is a plain name in JavaScript but gets its own node type
IDENTIFIER_TYPES = frozenset({"identifier", "undefined"})

_PATTERN_BINDING_TYPES = IDENTIFIER_TYPES | {"shorthand_property_identifier_pattern"}

PROGRAM_NODE_TYPE = "program"


class JsAstUtils:
    """JavaScript AST utility functions for tree-sitter nodes."""

    @staticmethod
    def get_node_text(node: Node, content: bytes) -> str:
        """Get the text content of a node.

        Args:
            node: The AST node
            content: Source file content

        Returns:
            The text content of the node
        """
        return content[node.start_byte:node.end_byte].decode("utf-8", errors="ignore")

    @staticmethod
    def same_node(a: Node | None, b: Node | None) -> bool:
        """Check whether two node handles point at the same tree node."""
        if a is None or b is None:
            return False
        return a.id == b.id

    @staticmethod
    def is_function(node: Node) -> bool:
        return node.type in FUNCTION_NODE_TYPES

    @staticmethod
    def is_hoisting_target(node: Node) -> bool:
        """Whether var and function declarations inside `node` bind to it."""
        return node.type == PROGRAM_NODE_TYPE or node.type in FUNCTION_NODE_TYPES

    @staticmethod
    def get_hoisting_target(node: Node) -> Node | None:
        """Find the nearest enclosing function or program node.

        Blocks between `node` and the target are skipped; `node` itself is
        never returned.

        Args:
            node: The declaration node

        Returns:
            The hoisting target, or None for a detached node
        """
        current = node.parent
        while current is not None:
            if JsAstUtils.is_hoisting_target(current):
                return current
            current = current.parent
        return None

    @staticmethod
    def get_declaration_kind(node: Node, content: bytes) -> str | None:
        """Return `var`, `let` or `const` for a declaration or for-in/of head."""
        if node.type == "variable_declaration":
            return "var"
        kind_node = node.child_by_field_name("kind")
        if kind_node is None:
            return None
        return JsAstUtils.get_node_text(kind_node, content)

    @staticmethod
    def iter_declarators(node: Node) -> list[Node]:
        """Return the variable_declarator children of a declaration."""
        return [child for child in node.named_children if child.type == "variable_declarator"]

    @staticmethod
    def collect_pattern(pattern: Node) -> tuple[list[Node], list[Node]]:
        """Split a binding pattern into bound identifiers and default values.

        Handles plain identifiers and object/array destructuring with
        defaults and rest elements.

        Args:
            pattern: The pattern node (identifier, object_pattern, ...)

        Returns:
            Tuple of (binding identifier nodes, default value expressions),
            both in document order
        """
        bindings: list[Node] = []
        defaults: list[Node] = []

        def visit(node: Node) -> None:
            node_type = node.type
            if node_type in _PATTERN_BINDING_TYPES:
                bindings.append(node)
            elif node_type in ("assignment_pattern", "object_assignment_pattern"):
                left = node.child_by_field_name("left")
                right = node.child_by_field_name("right")
                if left is not None:
                    visit(left)
                if right is not None:
                    defaults.append(right)
            elif node_type == "pair_pattern":
                key = node.child_by_field_name("key")
                value = node.child_by_field_name("value")
                # Computed keys are evaluated like defaults
                if key is not None and key.type == "computed_property_name":
                    defaults.append(key)
                if value is not None:
                    visit(value)
            elif node_type in ("object_pattern", "array_pattern", "rest_pattern"):
                for child in node.named_children:
                    visit(child)

        visit(pattern)
        return bindings, defaults

    @staticmethod
    def is_initializing_occurrence(identifier: Node) -> bool:
        """Check whether an identifier is initialized where it occurs.

        True for the name of a declarator that has an initializer, and for
        the target of a plain assignment (`x = ...`).

        Args:
            identifier: An identifier node

        Returns:
            True when the occurrence writes an initial value
        """
        parent = identifier.parent
        if parent is None:
            return False
        if parent.type == "variable_declarator":
            return parent.child_by_field_name("value") is not None
        if parent.type == "assignment_expression":
            return JsAstUtils.same_node(parent.child_by_field_name("left"), identifier)
        return False

    @staticmethod
    def get_block_of(node: Node) -> Node:
        """Return the block a function or program node declares into.

        Function nodes yield their body statement_block; anything else
        (the program, an arrow function with an expression body) is its
        own block.
        """
        if node.type in FUNCTION_NODE_TYPES:
            body = node.child_by_field_name("body")
            if body is not None and body.type == "statement_block":
                return body
        return node

    @staticmethod
    def declares_lexically(block: Node) -> bool:
        """Whether a statement_block directly declares let/const/class bindings."""
        return any(child.type in LEXICAL_DECLARATION_TYPES for child in block.named_children)
