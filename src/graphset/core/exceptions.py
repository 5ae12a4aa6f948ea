"""
Custom exceptions for the graph system.

This module defines the hierarchy of custom exceptions used throughout the package
to handle error conditions in a structured and meaningful way. Set-algebra operators
never raise on a mismatched operand (they return ``None`` instead), so the exceptions
below cover record insertion, document validation and file formats.
"""


class RecordTypeError(TypeError):
    """
    Raised when a value cannot be used as a node or edge.

    Collections only accept mappings and Record instances. Anything else is
    rejected instead of being silently coerced.

    Examples:
        * Pushing an integer onto a node collection
        * Building a Graph from a list of strings
    """


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when a structured graph document does not match the
    expected layout of ``nodes`` and ``edges`` arrays.

    Examples:
        * Document without a ``nodes`` key
        * Edge entry that is not a mapping
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class SerializationError(Exception):
    """
    Raised when reading or writing a graph file fails.

    Examples:
        * File system access errors
        * Undecodable document text
    """


class UnsupportedFormatError(SerializationError):
    """
    Raised when no serializer is registered for a file extension.

    Examples:
        * Writing a graph to ``graph.foo``
        * Reading a graph from ``graph.xml``
    """


class GDFParseError(SerializationError):
    """
    Raised when GDF text cannot be parsed.

    Examples:
        * Missing ``nodedef>`` header line
    """
