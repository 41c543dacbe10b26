"""Unit tests for scope index validation."""

from jsscope.core.annotations import Annotations
from jsscope.core.models import ScopeIndex, ScopeKind
from jsscope.core.scope_graph import ScopeGraph
from jsscope.core.validator import ValidationErrorType, validate_scope_indexes


class _Node:
    def __init__(self, node_id: int) -> None:
        self.id = node_id


def two_level_graph() -> tuple[ScopeGraph, Annotations]:
    graph = ScopeGraph()
    root = graph.add_scope(ScopeKind.GLOBAL, _Node(0))
    child = graph.add_scope(ScopeKind.FUNCTION, _Node(1), root.id)
    annotations = Annotations()
    annotations.set_scope_index(
        root.anchor, ScopeIndex(defined={"f"}, referenced={"f", "x"}, unresolved={"x"})
    )
    annotations.set_scope_index(child.anchor, ScopeIndex(referenced={"x"}, unresolved={"x"}))
    return graph, annotations


def error_types(result) -> list[ValidationErrorType]:
    return [error.error_type for error in result.errors]


class TestValidateScopeIndexes:
    def test_consistent_indexes_are_valid(self) -> None:
        graph, annotations = two_level_graph()

        result = validate_scope_indexes(graph, annotations)

        assert result.is_valid
        assert result.errors == []

    def test_missing_index(self) -> None:
        graph, annotations = two_level_graph()
        del annotations.scope_indexes[1]

        result = validate_scope_indexes(graph, annotations)

        assert not result.is_valid
        assert error_types(result) == [ValidationErrorType.MISSING_INDEX]
        assert result.errors[0].scope_id == 1

    def test_unresolved_must_be_referenced(self) -> None:
        graph, annotations = two_level_graph()
        annotations.scope_indexes[1].unresolved.add("ghost")

        result = validate_scope_indexes(graph, annotations)

        assert ValidationErrorType.UNRESOLVED_NOT_REFERENCED in error_types(result)
        names = {error.name for error in result.errors}
        assert "ghost" in names

    def test_unresolved_must_not_be_defined(self) -> None:
        graph, annotations = two_level_graph()
        annotations.scope_indexes[0].unresolved.add("f")

        result = validate_scope_indexes(graph, annotations)

        assert error_types(result) == [ValidationErrorType.UNRESOLVED_DEFINED]

    def test_child_names_must_reach_parent(self) -> None:
        graph, annotations = two_level_graph()
        annotations.scope_indexes[0] = ScopeIndex(defined={"f"}, referenced={"f"})

        result = validate_scope_indexes(graph, annotations)

        assert error_types(result) == [
            ValidationErrorType.CHILD_NAME_NOT_REFERENCED,
            ValidationErrorType.CHILD_NAME_NOT_PROPAGATED,
        ]
        assert all(error.name == "x" and error.scope_id == 0 for error in result.errors)

    def test_child_name_defined_by_parent_is_fine(self) -> None:
        graph, annotations = two_level_graph()
        annotations.scope_indexes[0] = ScopeIndex(defined={"f", "x"}, referenced={"f", "x"})

        assert validate_scope_indexes(graph, annotations).is_valid

    def test_function_expression_name_scope_is_skipped(self) -> None:
        graph = ScopeGraph()
        root = graph.add_scope(ScopeKind.GLOBAL, _Node(0))
        graph.add_scope(ScopeKind.FUNCTION_EXPRESSION_NAME, _Node(1), root.id)
        annotations = Annotations()
        annotations.set_scope_index(root.anchor, ScopeIndex())

        assert validate_scope_indexes(graph, annotations).is_valid
