"""Language adapters for parsing programs and building scope graphs.

This module provides the base classes for implementing language-specific
front ends that feed the annotation passes.
"""

from jsscope.adapters.base import LanguageAdapter, ParsedSource
from jsscope.adapters.javascript import JavaScriptAdapter

__all__ = [
    "JavaScriptAdapter",
    "LanguageAdapter",
    "ParsedSource",
]
