"""Integration tests for implicit declaration detection."""

from __future__ import annotations

from jsscope.core.annotations import Annotations
from jsscope.core.scope_graph import ScopeGraph
from jsscope.passes import ImplicitAssignmentDetector, PassContext


def body_of(program, nodes, index: int = 0):
    func = nodes(program, "function_declaration")[index]
    return func.child_by_field_name("body")


class TestImplicitDeclarations:
    def test_assigned_before_hoisted_declaration(self, annotate, nodes) -> None:
        program = annotate("function f() { x = 1; var x; }")

        assert program.implicit_vars_for(body_of(program, nodes)) == {"x"}

    def test_captured_variable_is_not_implicit(self, annotate, nodes) -> None:
        program = annotate("function f() { x = 1; function g() { return x; } var x; }")

        g = nodes(program, "function_declaration")[1]
        g_index = program.scope_index_for(g)
        assert g_index is not None
        assert "x" in g_index.unresolved
        assert program.implicit_vars_for(body_of(program, nodes)) == set()
        assert program.annotations.implicit_vars == {}

    def test_initialized_declaration_is_implicit(self, annotate, nodes) -> None:
        program = annotate("function f() { var a = 1, b; b = 2; var c; return c; }")

        assert program.implicit_vars_for(body_of(program, nodes)) == {"a", "b"}

    def test_global_declarations_mark_the_program(self, annotate) -> None:
        program = annotate("var a = 1; var b; b;")

        assert program.implicit_vars_for(program.root) == {"a"}

    def test_read_before_write_is_not_implicit(self, annotate, nodes) -> None:
        program = annotate("function f() { var y; log(y); y = 1; }")

        assert program.implicit_vars_for(body_of(program, nodes)) == set()

    def test_compound_assignment_is_not_initializing(self, annotate, nodes) -> None:
        program = annotate("function f() { var n; n += 1; }")

        assert program.implicit_vars_for(body_of(program, nodes)) == set()

    def test_undeclared_assignment_is_never_implicit(self, annotate, nodes) -> None:
        program = annotate("function f() { x = 1; }")

        assert program.annotations.implicit_vars == {}
        root_index = program.scope_index_for(program.root)
        assert root_index is not None
        assert "x" in root_index.unresolved

    def test_parameters_and_functions_are_not_candidates(self, annotate, nodes) -> None:
        program = annotate("function f(p) { p = 1; function h() {} h = null; }")

        assert program.implicit_vars_for(body_of(program, nodes)) == set()

    def test_write_inside_catch_counts_as_capture(self, annotate, nodes) -> None:
        program = annotate("function f() { try {} catch (e) { var r = e; } }")

        assert program.implicit_vars_for(body_of(program, nodes)) == set()

    def test_captured_initialized_variable_is_not_implicit(self, annotate, nodes) -> None:
        program = annotate("function f() { var t = 1; function g() { t; } }")

        assert program.implicit_vars_for(body_of(program, nodes)) == set()

    def test_runs_on_empty_graph_context(self) -> None:
        context = PassContext(root=None, content=b"", graph=ScopeGraph(), annotations=Annotations())

        ImplicitAssignmentDetector().run(context)

        assert context.annotations.implicit_vars == {}
