"""JavaScript language adapter using tree-sitter-javascript.

This module implements the LanguageAdapter interface for JavaScript source
code, using tree-sitter for parsing and a two-phase approach for scope
construction.
"""

from __future__ import annotations

import logging

import tree_sitter_javascript as tsjs
from tree_sitter import Language, Parser

from jsscope.adapters.base import LanguageAdapter, ParsedSource
from jsscope.adapters.javascript.hoist_collector import HoistCollector
from jsscope.adapters.javascript.scope_analyzer import ScopeAnalyzer
from jsscope.core.annotations import Annotations
from jsscope.core.scope_graph import ScopeGraph

logger = logging.getLogger(__name__)


class JavaScriptAdapter(LanguageAdapter):
    """JavaScript language adapter using tree-sitter.

    Implements two-phase analysis:
    - Phase 1: Collect var and function declarations onto hoisting targets
    - Phase 2: Build the scope graph and resolve references

    Limitations:
    - Scripts only; import/export bindings are not modelled
    - Class expression names and for-loop heads share the enclosing scope
    """

    def __init__(self) -> None:
        """Initialize the JavaScript adapter."""
        self._language = Language(tsjs.language())
        self._parser = Parser(self._language)

    @property
    def language_name(self) -> str:
        """Return JavaScript as the supported language."""
        return "javascript"

    def parse(self, source: str | bytes) -> ParsedSource:
        content = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._parser.parse(content)
        parsed = ParsedSource(content=content, tree=tree)
        if parsed.has_errors:
            logger.warning("Source contains syntax errors; scopes are annotated best-effort")
        return parsed

    def collect_hoisting(self, parsed: ParsedSource, annotations: Annotations) -> None:
        HoistCollector(parsed.content).collect(parsed.root, annotations)

    def build_scope_graph(self, parsed: ParsedSource, annotations: Annotations) -> ScopeGraph:
        return ScopeAnalyzer(parsed.content, annotations).analyze(parsed.root)
