"""Catch binding renaming pass."""

from __future__ import annotations

import logging

from jsscope.core.models import DefinitionKind, ScopeKind
from jsscope.passes.base import PassContext, ScopePass

logger = logging.getLogger(__name__)


class CatchBindingRenamer(ScopePass):
    """Give every catch binding and its uses a globally unique suffix.

    Every catch clause with a parameter draws one suffix from the shared
    counter, whether or not the name collides with an outer binding. Names
    declared with let/const/class in the catch body share the catch scope
    but are not catch-bound and keep their names.
    """

    @property
    def name(self) -> str:
        return "catch-renamer"

    def run(self, context: PassContext) -> None:
        renamed = 0
        for scope in context.graph.walk():
            if scope.kind is not ScopeKind.CATCH:
                continue
            bound = [
                variable
                for variable in scope.variables
                if variable.kind is DefinitionKind.CATCH_PARAMETER
            ]
            if not bound:
                continue

            suffix = context.counter.next_suffix()
            for variable in bound:
                identifiers = variable.identifiers[:1]
                identifiers.extend(ref.identifier for ref in variable.references)
                for identifier in identifiers:
                    context.annotations.set_rename_suffix(identifier, suffix)
                    renamed += 1
        logger.debug(f"Attached rename suffixes to {renamed} identifiers")
