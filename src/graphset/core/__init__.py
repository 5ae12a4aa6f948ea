"""Core graph functionality."""

from .exceptions import (
    GDFParseError,
    RecordTypeError,
    SerializationError,
    UnsupportedFormatError,
    ValidationError,
)
from .models import Edge, EdgeCollection, Node, NodeCollection, Record, RecordCollection
from .options import GroupOptions, WriteOptions
from .graph import Graph
from .traversal import GraphTraversal
from .graph_operations import intersection, keep_only_same_fields, union, xor
from .serialization import SerializationRegistry, read_graph, write_graph

__all__ = [
    "Edge",
    "EdgeCollection",
    "GDFParseError",
    "Graph",
    "GraphTraversal",
    "GroupOptions",
    "Node",
    "NodeCollection",
    "Record",
    "RecordCollection",
    "RecordTypeError",
    "SerializationError",
    "SerializationRegistry",
    "UnsupportedFormatError",
    "ValidationError",
    "WriteOptions",
    "intersection",
    "keep_only_same_fields",
    "read_graph",
    "union",
    "write_graph",
    "xor",
]
