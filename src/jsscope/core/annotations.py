"""Side table holding the facts derived for syntax nodes.

Annotations are keyed by `node.id` instead of being written onto the tree,
so the tree stays valid input for any other consumer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jsscope.core.models import HoistRecord, ScopeIndex

if TYPE_CHECKING:
    from tree_sitter import Node


@dataclass
class Annotations:
    """Per-node annotation storage shared by all passes."""

    hoisting: dict[int, HoistRecord] = field(default_factory=dict)
    scope_indexes: dict[int, ScopeIndex] = field(default_factory=dict)
    implicit_vars: dict[int, set[str]] = field(default_factory=dict)
    rename_suffixes: dict[int, str] = field(default_factory=dict)

    def hoist_record_for(self, node: Node) -> HoistRecord | None:
        return self.hoisting.get(node.id)

    def ensure_hoist_record(self, node: Node) -> HoistRecord:
        """Get the hoist record of a node, creating it on first use."""
        record = self.hoisting.get(node.id)
        if record is None:
            record = self.hoisting[node.id] = HoistRecord()
        return record

    def scope_index_for(self, node: Node) -> ScopeIndex | None:
        return self.scope_indexes.get(node.id)

    def set_scope_index(self, node: Node, index: ScopeIndex) -> None:
        self.scope_indexes[node.id] = index

    def implicit_vars_for(self, node: Node) -> set[str]:
        return self.implicit_vars.get(node.id, set())

    def add_implicit_var(self, node: Node, name: str) -> None:
        self.implicit_vars.setdefault(node.id, set()).add(name)

    def rename_suffix_for(self, node: Node) -> str | None:
        return self.rename_suffixes.get(node.id)

    def set_rename_suffix(self, node: Node, suffix: str) -> None:
        self.rename_suffixes[node.id] = suffix


@dataclass
class SuffixCounter:
    """Monotonic counter for rename suffixes.

    Each call to `next_suffix` yields a value never handed out before by the
    same counter, formatted as `_<n>_`.
    """

    value: int = 0

    def next_suffix(self) -> str:
        self.value += 1
        return f"_{self.value}_"
