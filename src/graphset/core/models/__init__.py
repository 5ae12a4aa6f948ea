"""
Core domain models package for the graph system.

This package provides the fundamental data structures that represent nodes,
edges and the ordered collections holding them.
"""

from .collection import EdgeCollection, NodeCollection, RecordCollection
from .record import Edge, Node, Record, RecordLike

__all__ = [
    # Record models
    "Record",
    "RecordLike",
    "Node",
    "Edge",
    # Collections
    "RecordCollection",
    "NodeCollection",
    "EdgeCollection",
]
