"""Shared pytest fixtures for jsscope tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from dotenv import load_dotenv
from hypothesis import settings
from tree_sitter import Node

from jsscope.adapters import JavaScriptAdapter
from jsscope.core.config import JsScopeConfig
from jsscope.services import AnnotatedProgram, AnnotatorService

# Load environment variables from .env file
load_dotenv()

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")


def _iter_named(node: Node) -> Iterator[Node]:
    for child in node.children:
        if child.is_named:
            yield child
        yield from _iter_named(child)


def find_nodes(
    program: AnnotatedProgram, node_types: str | set[str], text: str | None = None
) -> list[Node]:
    """Return named nodes of the given type(s) in document order."""
    types = {node_types} if isinstance(node_types, str) else node_types
    found = []
    for node in _iter_named(program.root):
        if node.type not in types:
            continue
        if text is not None and program.text_of(node) != text:
            continue
        found.append(node)
    return found


@pytest.fixture
def config() -> JsScopeConfig:
    """Provide a configuration isolated from the environment's .env file."""
    return JsScopeConfig(_env_file=None)


@pytest.fixture
def js_adapter() -> JavaScriptAdapter:
    return JavaScriptAdapter()


@pytest.fixture
def annotator(js_adapter: JavaScriptAdapter, config: JsScopeConfig) -> AnnotatorService:
    return AnnotatorService(adapter=js_adapter, config=config)


@pytest.fixture
def annotate(annotator: AnnotatorService) -> Callable[[str], AnnotatedProgram]:
    """Annotate a JavaScript snippet."""
    return annotator.annotate


@pytest.fixture
def nodes() -> Callable[..., list[Node]]:
    """Expose `find_nodes` to tests."""
    return find_nodes
