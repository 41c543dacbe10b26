"""Integration tests for catch binding renaming."""

from __future__ import annotations

from jsscope.core.config import JsScopeConfig
from jsscope.services import AnnotatorService


class TestCatchRenaming:
    def test_sibling_catches_get_distinct_suffixes(self, annotate, nodes) -> None:
        program = annotate("try { } catch (e) { e; } try { } catch (e) { log(e); }")

        suffixes = [program.rename_suffix_for(node) for node in nodes(program, "identifier", "e")]
        assert suffixes == ["_1_", "_1_", "_2_", "_2_"]
        assert program.rename_suffix_for(nodes(program, "identifier", "log")[0]) is None

    def test_nested_references_share_the_suffix(self, annotate, nodes) -> None:
        program = annotate(
            "function f() { try {} catch (err) { return function () { return err; }; } }"
        )

        identifiers = nodes(program, "identifier", "err")
        assert len(identifiers) == 2
        assert {program.rename_suffix_for(node) for node in identifiers} == {"_1_"}
        assert [program.renamed_name(node) for node in identifiers] == ["err_1_", "err_1_"]

    def test_outer_binding_with_same_name_is_untouched(self, annotate, nodes) -> None:
        program = annotate("var e = 0; try {} catch (e) { e; } e;")

        suffixes = [program.rename_suffix_for(node) for node in nodes(program, "identifier", "e")]
        assert suffixes == [None, "_1_", "_1_", None]

    def test_counter_spans_whole_tree(self, annotate, nodes) -> None:
        program = annotate(
            "function a() { try {} catch (x) {} }"
            " function b() { try {} catch (y) { try {} catch (z) {} } }"
        )

        names = ["x", "y", "z"]
        suffixes = [program.rename_suffix_for(nodes(program, "identifier", n)[0]) for n in names]
        assert suffixes == ["_1_", "_2_", "_3_"]

    def test_destructured_parameter_shares_one_suffix(self, annotate, nodes) -> None:
        program = annotate("try {} catch ({ message, code }) { message + code; }")

        renamed = {
            program.text_of(node): program.rename_suffix_for(node)
            for node in nodes(program, {"identifier", "shorthand_property_identifier_pattern"})
        }
        assert renamed == {"message": "_1_", "code": "_1_"}

    def test_catch_without_parameter_draws_no_suffix(self, annotate, nodes) -> None:
        program = annotate("try {} catch { } try {} catch (e) { }")

        assert program.rename_suffix_for(nodes(program, "identifier", "e")[0]) == "_1_"

    def test_suffix_start_from_config(self, js_adapter, nodes) -> None:
        config = JsScopeConfig(_env_file=None, suffix_start=10)
        program = AnnotatorService(adapter=js_adapter, config=config).annotate(
            "try {} catch (e) {}"
        )

        assert program.rename_suffix_for(nodes(program, "identifier", "e")[0]) == "_11_"

    def test_lexical_names_in_catch_body_are_not_renamed(self, annotate, nodes) -> None:
        program = annotate("try {} catch (e) { let y = 1; y; e; }")

        suffixes = {
            name: [program.rename_suffix_for(node) for node in nodes(program, "identifier", name)]
            for name in ("y", "e")
        }
        assert suffixes == {"y": [None, None], "e": ["_1_", "_1_"]}

    def test_parameterless_catch_with_lexical_body_draws_no_suffix(self, annotate, nodes) -> None:
        program = annotate("try {} catch { let z = 1; z; } try {} catch (e) { }")

        assert program.rename_suffix_for(nodes(program, "identifier", "e")[0]) == "_1_"
        assert all(
            program.rename_suffix_for(node) is None for node in nodes(program, "identifier", "z")
        )
        assert [r.name for r in program.to_report().renames] == ["e"]
