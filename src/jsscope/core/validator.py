"""Scope index validation module.

This module checks computed scope indexes against the set relations the
indexing pass guarantees, so callers can verify annotations before handing
them to a code generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from jsscope.core.annotations import Annotations
from jsscope.core.models import ScopeKind
from jsscope.core.scope_graph import ScopeGraph


class ValidationErrorType(str, Enum):
    """Types of validation errors."""

    MISSING_INDEX = "missing_index"
    UNRESOLVED_NOT_REFERENCED = "unresolved_not_referenced"
    UNRESOLVED_DEFINED = "unresolved_defined"
    CHILD_NAME_NOT_REFERENCED = "child_name_not_referenced"
    CHILD_NAME_NOT_PROPAGATED = "child_name_not_propagated"


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    scope_id: int
    name: str | None
    message: str


@dataclass
class ValidationResult:
    """Result of scope index validation."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    def add_error(
        self,
        error_type: ValidationErrorType,
        scope_id: int,
        name: str | None,
        message: str,
    ) -> None:
        """Add a validation error."""
        self.errors.append(
            ValidationError(
                error_type=error_type,
                scope_id=scope_id,
                name=name,
                message=message,
            )
        )
        self.is_valid = False


def validate_scope_indexes(graph: ScopeGraph, annotations: Annotations) -> ValidationResult:
    """Validate the scope indexes attached for a scope graph.

    Function-expression-name scopes share their anchor with the wrapped
    function scope and are checked through it.

    Args:
        graph: The scope graph the indexes were computed from.
        annotations: Annotations holding the scope indexes.

    Returns:
        ValidationResult containing validation status and any errors found.
    """
    result = ValidationResult(is_valid=True)

    for scope in graph.walk():
        if scope.kind is ScopeKind.FUNCTION_EXPRESSION_NAME:
            continue

        index = annotations.scope_index_for(scope.anchor)
        if index is None:
            result.add_error(
                error_type=ValidationErrorType.MISSING_INDEX,
                scope_id=scope.id,
                name=None,
                message=f"Scope {scope.id} ({scope.kind.value}) has no index",
            )
            continue

        for name in sorted(index.unresolved - index.referenced):
            result.add_error(
                error_type=ValidationErrorType.UNRESOLVED_NOT_REFERENCED,
                scope_id=scope.id,
                name=name,
                message=f"Scope {scope.id} leaves '{name}' unresolved without referencing it",
            )
        for name in sorted(index.unresolved & index.defined):
            result.add_error(
                error_type=ValidationErrorType.UNRESOLVED_DEFINED,
                scope_id=scope.id,
                name=name,
                message=f"Scope {scope.id} defines '{name}' but leaves it unresolved",
            )

        for child in graph.children_of(scope):
            child_index = annotations.scope_index_for(child.anchor)
            if child_index is None:
                # Reported when the child itself is visited
                continue
            for name in sorted(child_index.unresolved):
                if name not in index.referenced:
                    result.add_error(
                        error_type=ValidationErrorType.CHILD_NAME_NOT_REFERENCED,
                        scope_id=scope.id,
                        name=name,
                        message=f"Scope {scope.id} does not reference '{name}' "
                        f"left free by child scope {child.id}",
                    )
                if name not in index.defined and name not in index.unresolved:
                    result.add_error(
                        error_type=ValidationErrorType.CHILD_NAME_NOT_PROPAGATED,
                        scope_id=scope.id,
                        name=name,
                        message=f"Scope {scope.id} does not propagate '{name}' "
                        f"left free by child scope {child.id}",
                    )

    return result
