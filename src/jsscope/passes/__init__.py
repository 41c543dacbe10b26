"""Scope annotation passes.

Passes run after a language adapter has built the scope graph, attaching
scope indexes, implicit declarations and catch rename suffixes to syntax
nodes through the annotation side table.
"""

from jsscope.passes.base import PassContext, ScopePass
from jsscope.passes.catch_renamer import CatchBindingRenamer
from jsscope.passes.implicit_assignments import ImplicitAssignmentDetector
from jsscope.passes.registry import get_default_passes, run_passes
from jsscope.passes.scope_indexer import ScopeIndexer

__all__ = [
    "CatchBindingRenamer",
    "ImplicitAssignmentDetector",
    "PassContext",
    "ScopeIndexer",
    "ScopePass",
    "get_default_passes",
    "run_passes",
]
