"""JavaScript language adapter submodule.

This module provides the JavaScript adapter for parsing scripts and
building their scope graphs.
"""

from jsscope.adapters.javascript.adapter import JavaScriptAdapter
from jsscope.adapters.javascript.ast_utils import JsAstUtils
from jsscope.adapters.javascript.hoist_collector import HoistCollector
from jsscope.adapters.javascript.scope_analyzer import ScopeAnalyzer

__all__ = ["HoistCollector", "JavaScriptAdapter", "JsAstUtils", "ScopeAnalyzer"]
