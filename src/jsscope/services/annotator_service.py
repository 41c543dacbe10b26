"""Annotator service for coordinating scope annotation.

This module provides the AnnotatorService, which runs a language adapter
and the annotation passes over one program, and the AnnotatedProgram it
returns to code generators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from tree_sitter import Node

from jsscope.adapters import JavaScriptAdapter, LanguageAdapter, ParsedSource
from jsscope.adapters.javascript.ast_utils import JsAstUtils
from jsscope.core.annotations import Annotations, SuffixCounter
from jsscope.core.config import JsScopeConfig, get_config
from jsscope.core.models import (
    AnnotationReport,
    HoistRecord,
    HoistReport,
    ImplicitVarsReport,
    RenameReport,
    ScopeIndex,
    ScopeKind,
    ScopeReport,
    SourcePosition,
)
from jsscope.core.scope_graph import ScopeGraph
from jsscope.passes import PassContext, ScopePass, run_passes

logger = logging.getLogger(__name__)


def _position(node: Node) -> SourcePosition:
    return SourcePosition(line=node.start_point[0], column=node.start_point[1])


@dataclass
class AnnotatedProgram:
    """A program with its scope graph and derived annotations."""

    parsed: ParsedSource
    graph: ScopeGraph
    annotations: Annotations
    passes_applied: list[str] = field(default_factory=list)

    @property
    def root(self) -> Node:
        return self.parsed.root

    def text_of(self, node: Node) -> str:
        return JsAstUtils.get_node_text(node, self.parsed.content)

    def hoist_record_for(self, node: Node) -> HoistRecord | None:
        return self.annotations.hoist_record_for(node)

    def scope_index_for(self, node: Node) -> ScopeIndex | None:
        return self.annotations.scope_index_for(node)

    def implicit_vars_for(self, node: Node) -> set[str]:
        return self.annotations.implicit_vars_for(node)

    def rename_suffix_for(self, node: Node) -> str | None:
        return self.annotations.rename_suffix_for(node)

    def renamed_name(self, identifier: Node) -> str:
        """Return the identifier's printed name, with its rename suffix if any."""
        return self.text_of(identifier) + (self.rename_suffix_for(identifier) or "")

    def to_report(self) -> AnnotationReport:
        """Build the JSON-ready report of every annotation.

        Returns:
            AnnotationReport listing scopes, hoist records, implicit
            declarations and renames in document order.
        """
        report = AnnotationReport()

        for scope in self.graph.walk():
            anchor = scope.anchor
            report.scopes.append(
                ScopeReport(
                    id=scope.id,
                    kind=scope.kind,
                    node_type=anchor.type,
                    position=_position(anchor),
                    parent=scope.parent,
                    children=list(scope.children),
                    index=self.scope_index_for(anchor),
                )
            )

            if scope.is_hoisting_target:
                record = self.hoist_record_for(anchor)
                if record is not None:
                    report.hoisting.append(
                        HoistReport(
                            node_type=anchor.type,
                            position=_position(anchor),
                            vars=list(record.vars),
                            funcs=list(record.funcs),
                        )
                    )

                block = scope.declaration_block
                names = self.implicit_vars_for(block)
                if names:
                    report.implicit_vars.append(
                        ImplicitVarsReport(
                            node_type=block.type,
                            position=_position(block),
                            names=sorted(names),
                        )
                    )

            if scope.kind is ScopeKind.CATCH:
                for variable in scope.variables:
                    identifiers = variable.identifiers[:1]
                    identifiers.extend(ref.identifier for ref in variable.references)
                    for identifier in identifiers:
                        suffix = self.rename_suffix_for(identifier)
                        if suffix is None:
                            continue
                        report.renames.append(
                            RenameReport(
                                name=self.text_of(identifier),
                                suffix=suffix,
                                position=_position(identifier),
                            )
                        )

        report.renames.sort(key=lambda r: (r.position.line, r.position.column))
        return report


class AnnotatorService:
    """Service for annotating programs for code generation.

    Runs the adapter's hoisting and scope-analysis phases, then the
    annotation passes, with a fresh suffix counter per program.
    """

    def __init__(
        self,
        adapter: LanguageAdapter | None = None,
        config: JsScopeConfig | None = None,
        passes: list[ScopePass] | None = None,
    ) -> None:
        """Initialize annotator service.

        Args:
            adapter: Language adapter; defaults to JavaScript.
            config: Configuration; defaults to the global configuration.
            passes: Passes to run; defaults to the built-in passes.
        """
        self._adapter = adapter or JavaScriptAdapter()
        self._config = config or get_config()
        self._passes = passes

    def annotate(self, source: str | bytes) -> AnnotatedProgram:
        """Annotate a program given as source text.

        Args:
            source: Program source text.

        Returns:
            AnnotatedProgram holding the tree, scope graph and annotations.
        """
        return self._annotate_parsed(self._adapter.parse(source))

    def annotate_file(self, path: Path) -> AnnotatedProgram:
        """Annotate a program read from disk."""
        logger.debug(f"Annotating {path}")
        return self._annotate_parsed(
            self._adapter.parse_file(path, encoding=self._config.source_encoding)
        )

    def reannotate(self, program: AnnotatedProgram) -> AnnotatedProgram:
        """Run the whole pipeline again over an already annotated tree.

        The existing side table is reused, so every annotation is
        recomputed in place from the same tree.

        Args:
            program: A previously annotated program.

        Returns:
            A new AnnotatedProgram sharing the tree and side table.
        """
        annotations = program.annotations
        self._adapter.collect_hoisting(program.parsed, annotations)
        graph = self._adapter.build_scope_graph(program.parsed, annotations)
        return self._run_passes(program.parsed, graph, annotations)

    def _annotate_parsed(self, parsed: ParsedSource) -> AnnotatedProgram:
        annotations = Annotations()
        self._adapter.collect_hoisting(parsed, annotations)
        graph = self._adapter.build_scope_graph(parsed, annotations)
        return self._run_passes(parsed, graph, annotations)

    def _run_passes(
        self, parsed: ParsedSource, graph: ScopeGraph, annotations: Annotations
    ) -> AnnotatedProgram:
        context = PassContext(
            root=parsed.root,
            content=parsed.content,
            graph=graph,
            annotations=annotations,
            counter=SuffixCounter(self._config.suffix_start),
        )
        applied = run_passes(context, self._passes)
        return AnnotatedProgram(
            parsed=parsed,
            graph=graph,
            annotations=annotations,
            passes_applied=applied,
        )
