"""Base classes for language adapters.

This module defines the LanguageAdapter abstract interface that turns source
text into a syntax tree and a scope graph, along with the ParsedSource
container shared by the annotation passes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from tree_sitter import Node, Tree

from jsscope.core.annotations import Annotations
from jsscope.core.scope_graph import ScopeGraph


@dataclass
class ParsedSource:
    """A parsed program together with the bytes it was parsed from."""

    content: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def has_errors(self) -> bool:
        return self.tree.root_node.has_error


class LanguageAdapter(ABC):
    """Abstract base class for language-specific front ends.

    Implements a two-phase strategy:
    - Phase 1 (Hoisting): record hoisted declarations on their target nodes
    - Phase 2 (Scope analysis): build the scope graph, using the Phase 1
      records to place hoisted bindings

    Subclasses must implement the abstract methods for their specific language.
    """

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the supported language name."""
        ...

    @abstractmethod
    def parse(self, source: str | bytes) -> ParsedSource:
        """Parse source text into a syntax tree.

        Args:
            source: Source text, as str or UTF-8 bytes

        Returns:
            ParsedSource holding the tree and the source bytes
        """
        ...

    @abstractmethod
    def collect_hoisting(self, parsed: ParsedSource, annotations: Annotations) -> None:
        """Phase 1: record hoisted declarations in the annotation side table.

        Args:
            parsed: The parsed program
            annotations: Side table receiving hoist records
        """
        ...

    @abstractmethod
    def build_scope_graph(self, parsed: ParsedSource, annotations: Annotations) -> ScopeGraph:
        """Phase 2: build the scope graph of a parsed program.

        Args:
            parsed: The parsed program
            annotations: Side table holding the Phase 1 hoist records

        Returns:
            ScopeGraph with resolved references
        """
        ...

    def analyze(self, source: str | bytes, annotations: Annotations) -> tuple[ParsedSource, ScopeGraph]:
        """Parse a program and run both phases.

        Args:
            source: Source text
            annotations: Side table receiving hoist records

        Returns:
            Tuple of (parsed program, scope graph)
        """
        parsed = self.parse(source)
        self.collect_hoisting(parsed, annotations)
        return parsed, self.build_scope_graph(parsed, annotations)

    def parse_file(self, path: Path, encoding: str = "utf-8") -> ParsedSource:
        """Read and parse a source file."""
        return self.parse(path.read_text(encoding=encoding))
