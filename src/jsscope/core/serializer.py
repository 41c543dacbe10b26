"""Annotation report serialization and deserialization.

This module provides functions to serialize an AnnotationReport to JSON and
deserialize JSON back into a report for code generators running out of
process.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from jsscope.core.models import AnnotationReport


class SerializationError(Exception):
    """Error during serialization or deserialization."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


def _format_validation_error(error: ValidationError) -> str:
    error_details = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"])
        error_details.append(f"{loc}: {err['msg']}")
    return "; ".join(error_details)


def serialize(report: AnnotationReport) -> str:
    """Serialize an annotation report to a JSON string.

    Args:
        report: The report to serialize.

    Returns:
        JSON string representation of the report.

    Raises:
        SerializationError: If serialization fails.
    """
    try:
        data = report.model_dump(mode="json")
        return json.dumps(data, indent=2, ensure_ascii=False)
    except Exception as e:
        raise SerializationError(
            message="Failed to serialize annotation report",
            details=str(e),
        ) from e


def deserialize(json_str: str) -> AnnotationReport:
    """Deserialize a JSON string to an annotation report.

    Args:
        json_str: JSON string representation of a report.

    Returns:
        The deserialized report.

    Raises:
        SerializationError: If deserialization fails with detailed error info.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(
            message="Invalid JSON format",
            details=f"Line {e.lineno}, column {e.colno}: {e.msg}",
        ) from e
    return deserialize_from_dict(data)


def serialize_to_dict(report: AnnotationReport) -> dict[str, Any]:
    """Serialize an annotation report to a dictionary."""
    return report.model_dump(mode="json")


def deserialize_from_dict(data: dict[str, Any]) -> AnnotationReport:
    """Deserialize a dictionary to an annotation report.

    Args:
        data: Dictionary representation of a report.

    Returns:
        The deserialized report.

    Raises:
        SerializationError: If deserialization fails.
    """
    try:
        return AnnotationReport.model_validate(data)
    except ValidationError as e:
        raise SerializationError(
            message="Annotation report validation failed",
            details=_format_validation_error(e),
        ) from e
