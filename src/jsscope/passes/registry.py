"""Pass registry and orchestration."""

from __future__ import annotations

from jsscope.passes.base import PassContext, ScopePass
from jsscope.passes.catch_renamer import CatchBindingRenamer
from jsscope.passes.implicit_assignments import ImplicitAssignmentDetector
from jsscope.passes.scope_indexer import ScopeIndexer


def get_default_passes() -> list[ScopePass]:
    """Return built-in passes in the order they must run.

    The implicit assignment detector reads the indexes written by the
    indexer; the renamer is independent of both.
    """
    return [
        ScopeIndexer(),
        ImplicitAssignmentDetector(),
        CatchBindingRenamer(),
    ]


def run_passes(context: PassContext, passes: list[ScopePass] | None = None) -> list[str]:
    """Apply passes in order and return the names of the passes that ran."""
    applied: list[str] = []
    for scope_pass in passes if passes is not None else get_default_passes():
        scope_pass.run(context)
        applied.append(scope_pass.name)
    return applied
