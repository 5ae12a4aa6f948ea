"""
graphset - Set algebra over attribute graphs

This package models directed and undirected graphs as collections of
attribute-bearing nodes and edges. It includes:

- Set-algebra operators (union, intersection, symmetric difference,
  concatenation, difference) over whole graphs
- Degree and neighbour queries
- GDF and YAML/JSON readers and writers
"""

__version__ = "0.2.0"

# Import commonly used components for easier access
from .core.graph import Graph
from .core.graph_operations import intersection, union, xor
from .core.models import Edge, Node

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "intersection",
    "union",
    "xor",
]
