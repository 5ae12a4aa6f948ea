"""
Schema validation for structured graph documents.

Structured dumps (YAML, JSON) hold a mapping with a ``nodes`` array and an
``edges`` array, each entry being a flat mapping of attributes. This module
checks loaded documents against that layout with JSON Schema before they are
turned into Graph objects.
"""

from typing import Any, Dict

from jsonschema import Draft7Validator

from .base import ValidationResult

_SCALAR = {"type": ["string", "number", "integer", "boolean", "null"]}

_RECORD_LIST = {
    "type": "array",
    "items": {
        "type": "object",
        "additionalProperties": _SCALAR,
    },
}

GRAPH_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "nodes": _RECORD_LIST,
        "edges": _RECORD_LIST,
        "attrs": {"type": "object"},
    },
    "required": ["nodes", "edges"],
}


def validate_graph_document(document: Any) -> ValidationResult:
    """
    Validate a loaded document against the graph document schema.

    Every schema violation is reported, not only the first one.

    Args:
        document: Parsed YAML/JSON data

    Returns:
        ValidationResult with one error message per violation

    Example:
        >>> result = validate_graph_document({"nodes": [], "edges": []})
        >>> result.is_valid
        True
    """
    validator = Draft7Validator(GRAPH_DOCUMENT_SCHEMA)
    violations = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    errors = [
        f"{'/'.join(str(p) for p in error.path) or '<root>'}: {error.message}"
        for error in violations
    ]
    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        context={"schema": "graph-document"},
    )
