"""Core module containing annotation models, scope graph, serializer, and validator."""

from jsscope.core.annotations import Annotations, SuffixCounter
from jsscope.core.models import (
    AnnotationReport,
    DefinitionKind,
    HoistRecord,
    HoistReport,
    ImplicitVarsReport,
    ReferenceFlag,
    RenameReport,
    ScopeIndex,
    ScopeKind,
    ScopeReport,
    SourcePosition,
)
from jsscope.core.scope_graph import Reference, Scope, ScopeGraph, Variable
from jsscope.core.serializer import (
    SerializationError,
    deserialize,
    deserialize_from_dict,
    serialize,
    serialize_to_dict,
)
from jsscope.core.validator import (
    ValidationError,
    ValidationErrorType,
    ValidationResult,
    validate_scope_indexes,
)

__all__ = [
    "AnnotationReport",
    "Annotations",
    "DefinitionKind",
    "HoistRecord",
    "HoistReport",
    "ImplicitVarsReport",
    "Reference",
    "ReferenceFlag",
    "RenameReport",
    "Scope",
    "ScopeGraph",
    "ScopeIndex",
    "ScopeKind",
    "ScopeReport",
    "SerializationError",
    "SourcePosition",
    "SuffixCounter",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
    "Variable",
    "deserialize",
    "deserialize_from_dict",
    "serialize",
    "serialize_to_dict",
    "validate_scope_indexes",
]
