"""
Validation package.

This package provides validation utilities for structured graph documents.
"""

from .base import ValidationResult
from .schema import GRAPH_DOCUMENT_SCHEMA, validate_graph_document

__all__ = [
    "ValidationResult",
    "GRAPH_DOCUMENT_SCHEMA",
    "validate_graph_document",
]
