"""Business services for jsscope."""

from jsscope.services.annotator_service import AnnotatedProgram, AnnotatorService
from jsscope.services.runtime_service import (
    RuntimeBuilder,
    RuntimeNotFoundError,
    build_runtime,
)

__all__ = [
    "AnnotatedProgram",
    "AnnotatorService",
    "RuntimeBuilder",
    "RuntimeNotFoundError",
    "build_runtime",
]
