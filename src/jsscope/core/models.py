"""Annotation data models for the jsscope scope-resolution stage.

This module defines the derived facts attached to syntax nodes by the
annotation passes, plus the JSON report handed to code generators.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_serializer


class ScopeKind(str, Enum):
    """Kind of lexical scope."""

    GLOBAL = "global"
    FUNCTION = "function"
    BLOCK = "block"
    CATCH = "catch"
    FUNCTION_EXPRESSION_NAME = "function-expression-name"


class ReferenceFlag(str, Enum):
    """How an identifier use touches its binding."""

    READ = "read"
    WRITE = "write"
    READ_WRITE = "rw"


class DefinitionKind(str, Enum):
    """Syntactic form of a variable's first declaring identifier."""

    PARAMETER = "parameter"
    CATCH_PARAMETER = "catch-parameter"
    FUNCTION_NAME = "function-name"
    CLASS_NAME = "class-name"
    VARIABLE = "variable"
    # var/let/const name inside a destructuring pattern or a for-in/of head
    PATTERN = "pattern"


class ScopeIndex(BaseModel):
    """Names defined, referenced and left free by a scope and its descendants."""

    defined: set[str] = Field(default_factory=set, description="Names bound in this scope")
    referenced: set[str] = Field(
        default_factory=set, description="Names referenced here or in any descendant"
    )
    unresolved: set[str] = Field(
        default_factory=set, description="Referenced names not bound here or below"
    )
    this_found: bool = Field(False, description="Whether `this` occurs in the scope")

    @field_serializer("defined", "referenced", "unresolved")
    def _sorted_names(self, names: set[str]) -> list[str]:
        return sorted(names)


class HoistRecord(BaseModel):
    """Declarations hoisted to a function or program scope.

    `vars` keeps first-seen order; `funcs` maps a function name to the id of
    its last declaring node.
    """

    vars: list[str] = Field(default_factory=list, description="Names declared with var")
    funcs: dict[str, int] = Field(
        default_factory=dict, description="function name -> declaring node id"
    )

    def add_var(self, name: str) -> None:
        """Register a var-declared name."""
        if name not in self.vars:
            self.vars.append(name)

    def add_func(self, name: str, node_id: int) -> None:
        """Register a function declaration, overwriting an earlier one."""
        self.funcs[name] = node_id


class SourcePosition(BaseModel):
    """Zero-based position of a node in the source text."""

    line: int = Field(..., ge=0)
    column: int = Field(..., ge=0)


class ScopeReport(BaseModel):
    """A scope as seen by the code generator."""

    id: int = Field(..., description="Scope arena index")
    kind: ScopeKind
    node_type: str = Field(..., description="Anchor node type")
    position: SourcePosition
    parent: int | None = Field(None, description="Parent scope id")
    children: list[int] = Field(default_factory=list, description="Child scope ids")
    index: ScopeIndex | None = Field(None, description="Computed scope index")


class HoistReport(BaseModel):
    """Hoist record attached to a function or program node."""

    node_type: str
    position: SourcePosition
    vars: list[str] = Field(default_factory=list)
    funcs: list[str] = Field(default_factory=list)


class ImplicitVarsReport(BaseModel):
    """Names needing a synthesized declaration at a block."""

    node_type: str
    position: SourcePosition
    names: list[str] = Field(default_factory=list)


class RenameReport(BaseModel):
    """Suffix attached to one catch-bound identifier occurrence."""

    name: str
    suffix: str
    position: SourcePosition


class AnnotationReport(BaseModel):
    """Report root structure.

    Contains everything the annotation passes derived for one program.
    """

    version: str = "1.0"
    scopes: list[ScopeReport] = Field(default_factory=list)
    hoisting: list[HoistReport] = Field(default_factory=list)
    implicit_vars: list[ImplicitVarsReport] = Field(default_factory=list)
    renames: list[RenameReport] = Field(default_factory=list)
