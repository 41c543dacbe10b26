"""Base interface for scope annotation passes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from tree_sitter import Node

from jsscope.core.annotations import Annotations, SuffixCounter
from jsscope.core.scope_graph import ScopeGraph


@dataclass
class PassContext:
    """Everything a pass reads from or writes to."""

    root: Node
    content: bytes
    graph: ScopeGraph
    annotations: Annotations = field(default_factory=Annotations)
    counter: SuffixCounter = field(default_factory=SuffixCounter)


class ScopePass(ABC):
    """Post-process a scope graph to attach derived facts to syntax nodes."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique pass name."""

    @abstractmethod
    def run(self, context: PassContext) -> None:
        """Mutate the context's annotations in-place."""
